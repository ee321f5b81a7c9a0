import random

import pytest

from app_types import DoublesMatch, Round


@pytest.fixture
def sample_roster():
    """Returns a roster of eight player names."""
    return ["Alice", "Bob", "Charlie", "Dave", "Eve", "Frank", "Grace", "Heidi"]


@pytest.fixture
def rng():
    """Returns a seeded random source for reproducible schedules."""
    return random.Random(42)


@pytest.fixture
def single_match_schedule():
    """Returns a one-round schedule with {A, B} vs {C, D} on court 1."""
    return [
        Round(
            round_num=1,
            matches=[DoublesMatch(court=1, team_1=("A", "B"), team_2=("C", "D"))],
            sit_out=["E"],
            game_count={"A": 1, "B": 1, "C": 1, "D": 1, "E": 0},
        )
    ]


@pytest.fixture
def two_round_schedule():
    """Returns a two-round schedule with two courts in the first round."""
    return [
        Round(
            round_num=1,
            matches=[
                DoublesMatch(court=1, team_1=("A", "B"), team_2=("C", "D")),
                DoublesMatch(court=2, team_1=("E", "F"), team_2=("G", "H")),
            ],
            sit_out=[],
            game_count={p: 1 for p in "ABCDEFGH"},
        ),
        Round(
            round_num=2,
            matches=[DoublesMatch(court=1, team_1=("A", "C"), team_2=("E", "G"))],
            sit_out=["B", "D", "F", "H"],
            game_count={
                "A": 2, "B": 1, "C": 2, "D": 1, "E": 2, "F": 1, "G": 2, "H": 1,
            },
        ),
    ]
