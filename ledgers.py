# ledgers.py
"""
Per-run bookkeeping for schedule generation.

A fresh WorkloadLedger and PartnershipLedger are created for every generation
run and threaded through the round planner. Nothing here is module-global, so
independent runs never share state.
"""

from collections import Counter, defaultdict
from typing import Iterable

from app_types import PlayerName, Team, TeamKey, team_key


class WorkloadLedger:
    """Tracks how many games each roster member has played so far."""

    def __init__(self, players: Iterable[PlayerName]):
        self._games: dict[PlayerName, int] = {p: 0 for p in players}

    def games_played(self, player: PlayerName) -> int:
        """Raises KeyError for players outside the roster."""
        return self._games[player]

    def increment(self, player: PlayerName) -> None:
        if player not in self._games:
            raise KeyError(player)
        self._games[player] += 1

    def team_games(self, team: Team) -> int:
        return sum(self._games[p] for p in team)

    def snapshot(self) -> dict[PlayerName, int]:
        return dict(self._games)


class PartnershipLedger:
    """
    Tracks repeated partnerships and matchups within one generation run.

    Partnership counts are symmetric: (A, B) and (B, A) are the same team.
    Matchups are kept in scheduling order; lookups ignore both the order of
    players within a team and which side each team played on.
    """

    def __init__(self):
        self._partnerships: Counter[TeamKey] = Counter()
        self._matchups: list[tuple[Team, Team]] = []
        self._matchup_keys: set[frozenset[TeamKey]] = set()

    def partnership_count(self, team: Team) -> int:
        return self._partnerships[team_key(team)]

    def has_faced(self, team_1: Team, team_2: Team) -> bool:
        return frozenset((team_key(team_1), team_key(team_2))) in self._matchup_keys

    def record_match(self, team_1: Team, team_2: Team) -> None:
        """Counts both partnerships and appends the matchup to the history."""
        self._partnerships[team_key(team_1)] += 1
        self._partnerships[team_key(team_2)] += 1
        self._matchups.append((tuple(team_1), tuple(team_2)))
        self._matchup_keys.add(frozenset((team_key(team_1), team_key(team_2))))

    @property
    def matchups(self) -> list[tuple[Team, Team]]:
        return list(self._matchups)

    def partner_counts(self, player: PlayerName) -> dict[PlayerName, int]:
        """Returns how often the player teamed with each partner."""
        counts: dict[PlayerName, int] = defaultdict(int)
        for key, count in self._partnerships.items():
            if player in key:
                (partner,) = key - {player}
                counts[partner] += count
        return dict(counts)
