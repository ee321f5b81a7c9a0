# result_ledger.py
"""
Match result bookkeeping.

ResultLedger records winners on an existing schedule and keeps a per-player
win/loss tally in step with them. It works on its own copies of the schedule
and stats it is given; every operation validates first and only then applies
its changes, so a rejected operation leaves both values untouched.
"""

import copy
import logging

from app_types import (
    DoublesMatch,
    MatchOutcome,
    PlayerStat,
    PlayerStats,
    Schedule,
)
from exceptions import StateError

logger = logging.getLogger("app.result_ledger")


def tally_results(schedule: Schedule) -> PlayerStats:
    """Rebuilds win/loss stats from the outcomes stored in a schedule."""
    stats: PlayerStats = {}
    for round_ in schedule:
        for match in round_.matches:
            if match.outcome.is_decided:
                _apply_outcome(stats, match, match.outcome, 1)
    return stats


def _apply_outcome(
    stats: PlayerStats, match: DoublesMatch, outcome: MatchOutcome, delta: int
) -> None:
    winning_side = outcome.winning_team
    losing_side = 2 if winning_side == 1 else 1

    for player in match.team(winning_side):
        stat = stats.setdefault(player, PlayerStat())
        stat.wins += delta
        stat.games += delta
    for player in match.team(losing_side):
        stat = stats.setdefault(player, PlayerStat())
        stat.losses += delta
        stat.games += delta


class ResultLedger:
    """Records and clears match winners on a schedule."""

    def __init__(self, schedule: Schedule, stats: PlayerStats | None = None):
        self._schedule = copy.deepcopy(schedule)
        self._stats = copy.deepcopy(stats) if stats is not None else {}

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def stats(self) -> PlayerStats:
        return self._stats

    def _get_match(self, round_index: int, match_index: int) -> DoublesMatch:
        """Looks up a match by zero-based round and match index."""
        if isinstance(round_index, bool) or not isinstance(round_index, int):
            raise StateError(f"Round index must be an integer, got {round_index!r}")
        if isinstance(match_index, bool) or not isinstance(match_index, int):
            raise StateError(f"Match index must be an integer, got {match_index!r}")
        if not 0 <= round_index < len(self._schedule):
            raise StateError(f"Round index {round_index} is out of range")
        matches = self._schedule[round_index].matches
        if not 0 <= match_index < len(matches):
            raise StateError(
                f"Match index {match_index} is out of range for round index {round_index}"
            )
        return matches[match_index]

    def _check_reversible(self, match: DoublesMatch) -> None:
        winning_side = match.outcome.winning_team
        for side in (1, 2):
            for player in match.team(side):
                stat = self._stats.get(player)
                counter = "wins" if side == winning_side else "losses"
                if stat is None or getattr(stat, counter) < 1 or stat.games < 1:
                    raise StateError(
                        f"Stats for '{player}' do not include the recorded result"
                    )

    def record_winner(
        self,
        round_index: int,
        match_index: int,
        winning_team: int,
        overwrite: bool = False,
    ) -> None:
        """
        Sets the winner of a match and updates the players' stats.

        Args:
            round_index: Zero-based index into the schedule
            match_index: Zero-based index into the round's matches
            winning_team: 1 or 2
            overwrite: Replace an existing result instead of rejecting it

        Raises:
            ValidationError: If winning_team is not 1 or 2.
            StateError: If the indices are out of range, or the match already
                has a winner and overwrite is False.
        """
        outcome = MatchOutcome.from_winning_team(winning_team)
        match = self._get_match(round_index, match_index)

        if match.outcome.is_decided:
            if not overwrite:
                raise StateError(
                    f"Match {match_index} of round index {round_index} already has "
                    f"a winner; clear it first"
                )
            self._check_reversible(match)
            _apply_outcome(self._stats, match, match.outcome, -1)

        match.outcome = outcome
        _apply_outcome(self._stats, match, outcome, 1)
        logger.info(
            f"Recorded team {winning_team} as winner on court {match.court} "
            f"(round index {round_index})"
        )

    def clear_result(self, round_index: int, match_index: int) -> None:
        """
        Removes the winner of a match and reverses its stats.

        Clearing an unplayed match does nothing.

        Raises:
            StateError: If the indices are out of range, or the stats no longer
                contain the result being cleared.
        """
        match = self._get_match(round_index, match_index)
        if not match.outcome.is_decided:
            return

        self._check_reversible(match)
        _apply_outcome(self._stats, match, match.outcome, -1)
        match.outcome = MatchOutcome.UNPLAYED
        logger.info(
            f"Cleared result on court {match.court} (round index {round_index})"
        )

    def reset_results(self) -> None:
        """Clears every recorded winner and empties the stats."""
        for round_ in self._schedule:
            for match in round_.matches:
                match.outcome = MatchOutcome.UNPLAYED
        self._stats = {}
        logger.info("Reset all match results")


def record_winner(
    schedule: Schedule,
    stats: PlayerStats,
    round_index: int,
    match_index: int,
    winning_team: int,
) -> tuple[Schedule, PlayerStats]:
    """Returns a copy of schedule and stats with the winner recorded."""
    ledger = ResultLedger(schedule, stats)
    ledger.record_winner(round_index, match_index, winning_team)
    return ledger.schedule, ledger.stats


def clear_result(
    schedule: Schedule, stats: PlayerStats, round_index: int, match_index: int
) -> tuple[Schedule, PlayerStats]:
    """Returns a copy of schedule and stats with the match result cleared."""
    ledger = ResultLedger(schedule, stats)
    ledger.clear_result(round_index, match_index)
    return ledger.schedule, ledger.stats
