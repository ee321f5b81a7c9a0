# standings.py
"""
Standings table utilities.

This module turns a schedule and its win/loss stats into a pandas DataFrame
that a host can display or export.
"""

from typing import Sequence

import pandas as pd

from app_types import PlayerName, PlayerStat, PlayerStats, Schedule

STANDINGS_COLUMNS = [
    "Player Name",
    "Scheduled Games",
    "Wins",
    "Losses",
    "Games",
    "Win %",
]


def win_percentage(stat: PlayerStat) -> int:
    """Returns the rounded win percentage, 0 for players without games."""
    if stat.games <= 0:
        return 0
    # Halves round up
    return (stat.wins * 200 + stat.games) // (stat.games * 2)


def create_standings_dataframe(
    roster: Sequence[PlayerName], schedule: Schedule, stats: PlayerStats
) -> pd.DataFrame:
    """
    Creates one row per roster player, in roster order.

    "Scheduled Games" comes from the last round's game count; players without
    stats show zeros.
    """
    final_game_count = schedule[-1].game_count if schedule else {}
    rows = []
    for name in roster:
        stat = stats.get(name, PlayerStat())
        rows.append(
            {
                "Player Name": name,
                "Scheduled Games": final_game_count.get(name, 0),
                "Wins": stat.wins,
                "Losses": stat.losses,
                "Games": stat.games,
                "Win %": win_percentage(stat),
            }
        )
    return pd.DataFrame(rows, columns=STANDINGS_COLUMNS)
