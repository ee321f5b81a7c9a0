"""
Tests for the standings table.
"""

import pandas as pd
import pytest

from app_types import PlayerStat
from standings import STANDINGS_COLUMNS, create_standings_dataframe, win_percentage


class TestStandingsDataFrame:
    """Tests for building the standings DataFrame."""

    def test_rows_follow_roster_order(self, single_match_schedule):
        """One row per roster player, in roster order."""
        roster = ["E", "D", "C", "B", "A"]
        df = create_standings_dataframe(roster, single_match_schedule, {})

        assert list(df.columns) == STANDINGS_COLUMNS
        assert list(df["Player Name"]) == roster

    def test_scheduled_games_and_results(self, two_round_schedule):
        """Scheduled games come from the last round, results from the stats."""
        stats = {
            "A": PlayerStat(wins=2, losses=0, games=2),
            "G": PlayerStat(wins=1, losses=2, games=3),
        }
        df = create_standings_dataframe(["A", "B", "G"], two_round_schedule, stats)
        rows = df.set_index("Player Name")

        assert rows.loc["A", "Scheduled Games"] == 2
        assert rows.loc["B", "Scheduled Games"] == 1
        assert rows.loc["A", "Win %"] == 100
        assert rows.loc["G", "Win %"] == 33
        assert rows.loc["B", "Wins"] == 0
        assert rows.loc["B", "Win %"] == 0

    def test_empty_schedule(self):
        """An empty schedule shows zero scheduled games."""
        df = create_standings_dataframe(["A", "B"], [], {})

        assert len(df) == 2
        assert (df["Scheduled Games"] == 0).all()

    def test_empty_roster_keeps_columns(self):
        """An empty roster still has the standings columns."""
        df = create_standings_dataframe([], [], {})

        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert list(df.columns) == STANDINGS_COLUMNS


@pytest.mark.parametrize(
    "wins, games, expected",
    [(2, 3, 67), (1, 3, 33), (1, 8, 13), (5, 8, 63), (3, 8, 38), (1, 2, 50), (0, 0, 0)],
)
def test_win_percentage_rounds(wins, games, expected):
    """Win percentage rounds to the nearest integer, with halves rounding up."""
    stat = PlayerStat(wins=wins, losses=games - wins, games=games)
    assert win_percentage(stat) == expected
