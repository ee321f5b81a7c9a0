# app_types.py
"""
Type aliases and data classes for the doubles scheduler.

This module defines the values that cross the scheduler boundary (rounds,
matches, player statistics) together with the small helper types used by the
optimizer while a schedule is being generated.
"""

from dataclasses import dataclass, field
from enum import Enum

from constants import (
    BALANCE_PENALTY_PER_GAME,
    DEFAULT_WEIGHTS,
    JITTER_RANGE,
    NEW_MATCHUP_BONUS,
    PARTNERSHIP_PENALTY_EXPONENT,
    PARTNERSHIP_PENALTY_FACTOR,
    REPEAT_MATCHUP_PENALTY,
    REPEAT_PARTNERSHIP_PENALTY,
    WORKLOAD_BONUS_PER_PLAYER,
    WORKLOAD_PENALTY_PER_GAME,
)
from exceptions import ValidationError

# =============================================================================
# Basic Type Aliases
# =============================================================================

# A player's name (unique identifier)
PlayerName = str

# Two players assigned together for one match
Team = tuple[PlayerName, PlayerName]

# Order-free identity of a team
TeamKey = frozenset[PlayerName]

# Mapping of player names to cumulative games played
GameCount = dict[PlayerName, int]


def team_key(team: Team) -> TeamKey:
    """Returns the order-independent identity of a team."""
    return frozenset(team)


class MatchOutcome(Enum):
    """Result state of a match."""

    UNPLAYED = 0
    TEAM_1_WON = 1
    TEAM_2_WON = 2

    @classmethod
    def from_winning_team(cls, winning_team: int) -> "MatchOutcome":
        """Builds a decided outcome from a winning side (1 or 2).

        Raises:
            ValidationError: If winning_team is not 1 or 2.
        """
        if isinstance(winning_team, bool) or winning_team not in (1, 2):
            raise ValidationError(
                f"Winning team must be 1 or 2, got {winning_team!r}"
            )
        return cls(winning_team)

    @property
    def winning_team(self) -> int | None:
        if self is MatchOutcome.UNPLAYED:
            return None
        return self.value

    @property
    def is_decided(self) -> bool:
        return self is not MatchOutcome.UNPLAYED


# =============================================================================
# Schedule Data Classes
# =============================================================================


@dataclass
class DoublesMatch:
    """A doubles match assignment.

    Attributes:
        court: Court number (1-indexed)
        team_1: Tuple of player names for team 1
        team_2: Tuple of player names for team 2
        outcome: Result of the match, UNPLAYED until a winner is recorded
    """

    court: int
    team_1: Team
    team_2: Team
    outcome: MatchOutcome = MatchOutcome.UNPLAYED

    def __post_init__(self) -> None:
        self.team_1 = tuple(self.team_1)
        self.team_2 = tuple(self.team_2)
        if len(self.team_1) != 2 or len(self.team_2) != 2:
            raise ValidationError("Each team must have exactly two players")
        if len(set(self.players)) != 4:
            raise ValidationError(
                f"Match on court {self.court} must have four distinct players: "
                f"{self.team_1} vs {self.team_2}"
            )

    @property
    def players(self) -> list[PlayerName]:
        return [*self.team_1, *self.team_2]

    def team(self, side: int) -> Team:
        """Returns team 1 or team 2."""
        return self.team_1 if side == 1 else self.team_2


@dataclass
class Round:
    """One scheduling unit: matches played at the same time plus sit-outs.

    Attributes:
        round_num: Round number (1-indexed)
        matches: Matches in court order
        sit_out: Players not assigned to any match this round
        game_count: Games played by every player through this round
    """

    round_num: int
    matches: list[DoublesMatch]
    sit_out: list[PlayerName] = field(default_factory=list)
    game_count: GameCount = field(default_factory=dict)

    @property
    def players(self) -> list[PlayerName]:
        """All players in this round, match players first."""
        playing = [p for match in self.matches for p in match.players]
        return playing + list(self.sit_out)


# An ordered sequence of rounds
Schedule = list[Round]


@dataclass
class PlayerStat:
    """Win/loss tally for one player. games always equals wins + losses."""

    wins: int = 0
    losses: int = 0
    games: int = 0


# Mapping of player names to their win/loss tally
PlayerStats = dict[PlayerName, PlayerStat]


# =============================================================================
# Optimizer Data Classes
# =============================================================================


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the match scorer.

    The defaults are the tuned values from constants.py; override individual
    fields to experiment without touching module constants.
    """

    workload_bonus_per_player: float = WORKLOAD_BONUS_PER_PLAYER
    workload_penalty_per_game: float = WORKLOAD_PENALTY_PER_GAME
    partnership_penalty_factor: float = PARTNERSHIP_PENALTY_FACTOR
    partnership_penalty_exponent: int = PARTNERSHIP_PENALTY_EXPONENT
    repeat_partnership_penalty: float = REPEAT_PARTNERSHIP_PENALTY
    new_matchup_bonus: float = NEW_MATCHUP_BONUS
    repeat_matchup_penalty: float = REPEAT_MATCHUP_PENALTY
    balance_penalty_per_game: float = BALANCE_PENALTY_PER_GAME
    jitter_range: float = JITTER_RANGE

    @classmethod
    def from_dict(cls, weights: dict | None = None) -> "ScoringWeights":
        """Builds weights from a partial dict, falling back to DEFAULT_WEIGHTS.

        Raises:
            ValidationError: If the dict names an unknown weight.
        """
        weights = weights or {}
        unknown = set(weights) - set(DEFAULT_WEIGHTS)
        if unknown:
            raise ValidationError(f"Unknown scoring weights: {sorted(unknown)}")
        return cls(**{**DEFAULT_WEIGHTS, **weights})


@dataclass
class ScoredMatch:
    """A candidate match and its score.

    Attributes:
        team_1: First team
        team_2: Second team
        score: Higher is better
    """

    team_1: Team
    team_2: Team
    score: float


@dataclass
class RoundResult:
    """Result from planning one round.

    Attributes:
        round: The planned round, or None if no match could be placed
        success: Whether at least one match was placed
    """

    round: Round | None
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = self.round is not None
