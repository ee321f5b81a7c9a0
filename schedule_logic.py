# schedule_logic.py
import logging
import random
from typing import Sequence

from app_types import PlayerName, Schedule, ScoringWeights
from constants import (
    DEFAULT_NUM_COURTS,
    DEFAULT_NUM_ROUNDS,
    MAX_COURTS,
    MAX_ROUNDS,
    MIN_COURTS,
    MIN_PLAYERS,
    MIN_ROUNDS,
)
from exceptions import ValidationError
from ledgers import PartnershipLedger, WorkloadLedger
from logger import log_partnership_summary
from optimizer import generate_one_round

logger = logging.getLogger("app.schedule_logic")


def _validate_bound(name: str, value, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Number of {name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValidationError(
            f"Number of {name} must be between {low} and {high}, got {value}"
        )


def validate_generation_input(
    roster: Sequence[PlayerName], rounds: int, courts: int
) -> None:
    """
    Checks the roster and round/court counts before generating.

    Raises:
        ValidationError: On blank or duplicate names, fewer than four players,
            or rounds/courts outside the supported range.
    """
    for name in roster:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"Player names must be non-empty strings, got {name!r}")
    if len(roster) != len(set(roster)):
        raise ValidationError("Duplicate names found in the player list.")
    if len(roster) < MIN_PLAYERS:
        raise ValidationError(
            f"Need at least {MIN_PLAYERS} players to create matches, got {len(roster)}."
        )
    _validate_bound("rounds", rounds, MIN_ROUNDS, MAX_ROUNDS)
    _validate_bound("courts", courts, MIN_COURTS, MAX_COURTS)


def order_by_workload(
    players: Sequence[PlayerName], workload: WorkloadLedger, rng: random.Random
) -> list[PlayerName]:
    """Sorts players by games played, shuffling players with equal counts."""
    return sorted(players, key=lambda p: (workload.games_played(p), rng.random()))


class ScheduleGenerator:
    """
    Generates a full schedule of doubles rounds for a fixed roster.

    Every call to generate() owns its own ledgers, so one generator can be
    reused, and separate generators can run side by side. Pass a seeded
    random.Random to get reproducible schedules.
    """

    def __init__(
        self,
        weights: ScoringWeights | None = None,
        rng: random.Random | None = None,
    ):
        self.weights = weights if weights is not None else ScoringWeights()
        self.rng = rng if rng is not None else random.Random()

    def generate(
        self, roster: Sequence[PlayerName], rounds: int, courts: int
    ) -> Schedule:
        """
        Builds up to `rounds` rounds using at most `courts` courts each.

        Rounds in which no match can be placed are left out.

        Raises:
            ValidationError: If the input is rejected by validate_generation_input.
        """
        validate_generation_input(roster, rounds, courts)

        # Shuffle once so round 1 does not favour roster order
        shuffled_players = list(roster)
        self.rng.shuffle(shuffled_players)

        workload = WorkloadLedger(shuffled_players)
        partnerships = PartnershipLedger()
        schedule: Schedule = []

        for round_num in range(1, rounds + 1):
            pool = order_by_workload(shuffled_players, workload, self.rng)
            result = generate_one_round(
                round_num=round_num,
                pool=pool,
                num_courts=courts,
                roster_size=len(shuffled_players),
                workload=workload,
                partnerships=partnerships,
                weights=self.weights,
                rng=self.rng,
            )
            if result.success:
                schedule.append(result.round)

        logger.info(
            f"Generated {len(schedule)} round(s) for {len(roster)} players "
            f"on up to {courts} court(s)"
        )
        log_partnership_summary(logger, partnerships, shuffled_players)
        return schedule


def generate_schedule(
    roster: Sequence[PlayerName],
    rounds: int = DEFAULT_NUM_ROUNDS,
    courts: int = DEFAULT_NUM_COURTS,
    rng: random.Random | None = None,
) -> Schedule:
    """Generates a schedule with the default scoring weights."""
    return ScheduleGenerator(rng=rng).generate(roster, rounds, courts)
