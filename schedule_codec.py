# schedule_codec.py
"""
Conversion between scheduler values and plain records.

Hosts store and transmit schedules and stats as plain JSON-compatible data:

    Round:  {"round": 1,
             "matches": [{"team1": [a, b], "team2": [c, d], "court": 1, "winner": 1}],
             "sitOut": [e],
             "gameCount": {a: 1, ...}}
    Stats:  {name: {"wins": 1, "losses": 0, "games": 1}}

"winner" is omitted for unplayed matches. All readers raise ValidationError on
malformed input.
"""

import json
from typing import Any

from app_types import DoublesMatch, MatchOutcome, PlayerStat, PlayerStats, Round, Schedule
from exceptions import ValidationError


def _require_int(record: dict, key: str) -> int:
    value = record.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{key}' must be an integer, got {value!r}")
    return value


def _require_names(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"'{key}' must be a list of player names")
    return list(value)


# =============================================================================
# Schedule
# =============================================================================


def match_to_record(match: DoublesMatch) -> dict:
    record = {
        "team1": list(match.team_1),
        "team2": list(match.team_2),
        "court": match.court,
    }
    if match.outcome.is_decided:
        record["winner"] = match.outcome.winning_team
    return record


def match_from_record(record: dict) -> DoublesMatch:
    if not isinstance(record, dict):
        raise ValidationError(f"Match must be an object, got {record!r}")
    team_1 = _require_names(record.get("team1"), "team1")
    team_2 = _require_names(record.get("team2"), "team2")

    winner = record.get("winner")
    outcome = (
        MatchOutcome.UNPLAYED
        if winner is None
        else MatchOutcome.from_winning_team(winner)
    )
    return DoublesMatch(
        court=_require_int(record, "court"),
        team_1=tuple(team_1),
        team_2=tuple(team_2),
        outcome=outcome,
    )


def _check_round(round_: Round) -> None:
    courts = [m.court for m in round_.matches]
    if len(set(courts)) != len(courts):
        raise ValidationError(f"Round {round_.round_num} repeats a court number")
    players = round_.players
    if len(set(players)) != len(players):
        raise ValidationError(
            f"Round {round_.round_num} lists a player more than once across "
            f"its matches and sit-outs"
        )


def schedule_to_records(schedule: Schedule) -> list[dict]:
    return [
        {
            "round": round_.round_num,
            "matches": [match_to_record(m) for m in round_.matches],
            "sitOut": list(round_.sit_out),
            "gameCount": dict(round_.game_count),
        }
        for round_ in schedule
    ]


def schedule_from_records(records: list[dict]) -> Schedule:
    """
    Rebuilds a schedule from its record form.

    Raises:
        ValidationError: If a record is missing fields, has the wrong types,
            contains a match without four distinct players, or has a round
            that repeats a court or lists a player twice.
    """
    if not isinstance(records, list):
        raise ValidationError("Schedule must be a list of rounds")

    schedule: Schedule = []
    for record in records:
        if not isinstance(record, dict):
            raise ValidationError(f"Round must be an object, got {record!r}")
        matches = record.get("matches")
        if not isinstance(matches, list):
            raise ValidationError("'matches' must be a list")
        game_count = record.get("gameCount", {})
        if not isinstance(game_count, dict) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in game_count.values()
        ):
            raise ValidationError("'gameCount' must map player names to integers")

        round_ = Round(
            round_num=_require_int(record, "round"),
            matches=[match_from_record(m) for m in matches],
            sit_out=_require_names(record.get("sitOut", []), "sitOut"),
            game_count=dict(game_count),
        )
        _check_round(round_)
        schedule.append(round_)
    return schedule


def schedule_to_json(schedule: Schedule) -> str:
    return json.dumps(schedule_to_records(schedule))


def schedule_from_json(text: str) -> Schedule:
    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError("Schedule is not valid JSON") from e
    return schedule_from_records(records)


# =============================================================================
# Stats
# =============================================================================


def stats_to_records(stats: PlayerStats) -> dict[str, dict]:
    return {
        name: {"wins": s.wins, "losses": s.losses, "games": s.games}
        for name, s in stats.items()
    }


def stats_from_records(records: dict[str, dict]) -> PlayerStats:
    """
    Rebuilds player stats from their record form.

    Raises:
        ValidationError: On negative counters or games != wins + losses.
    """
    if not isinstance(records, dict):
        raise ValidationError("Stats must be an object keyed by player name")

    stats: PlayerStats = {}
    for name, record in records.items():
        if not isinstance(record, dict):
            raise ValidationError(f"Stats for '{name}' must be an object")
        stat = PlayerStat(
            wins=_require_int(record, "wins"),
            losses=_require_int(record, "losses"),
            games=_require_int(record, "games"),
        )
        if min(stat.wins, stat.losses, stat.games) < 0:
            raise ValidationError(f"Stats for '{name}' must not be negative")
        if stat.games != stat.wins + stat.losses:
            raise ValidationError(
                f"Stats for '{name}' are inconsistent: games must equal wins + losses"
            )
        stats[name] = stat
    return stats


# =============================================================================
# Result Commands
# =============================================================================


def parse_winner_command(payload: dict) -> tuple[int, int, int]:
    """Parses {"roundIndex", "matchIndex", "winningTeam"}."""
    if not isinstance(payload, dict):
        raise ValidationError("Winner command must be an object")
    winning_team = _require_int(payload, "winningTeam")
    if winning_team not in (1, 2):
        raise ValidationError(f"'winningTeam' must be 1 or 2, got {winning_team}")
    return (
        _require_int(payload, "roundIndex"),
        _require_int(payload, "matchIndex"),
        winning_team,
    )


def parse_clear_command(payload: dict) -> tuple[int, int]:
    """Parses {"roundIndex", "matchIndex"}."""
    if not isinstance(payload, dict):
        raise ValidationError("Clear command must be an object")
    return _require_int(payload, "roundIndex"), _require_int(payload, "matchIndex")
