from collections import Counter

from app_types import PlayerStats, Round, Schedule


def generate_roster(n):
    """
    Generates N player names P1 to Pn.

    Args:
        n: Number of players to generate

    Returns:
        List of player names.
    """
    return [f"P{i}" for i in range(1, n + 1)]


def count_appearances(schedule: Schedule) -> Counter:
    """Counts how many matches each player appears in across the schedule."""
    appearances = Counter()
    for round_ in schedule:
        for match in round_.matches:
            appearances.update(match.players)
    return appearances


def assert_round_is_valid(round_: Round, roster, num_courts):
    """
    Checks the structural invariants of a generated round:
    - every roster player is playing or sitting out, exactly once
    - every match has four distinct players
    - courts are unique, numbered from 1 and within the court limit
    """
    assert sorted(round_.players) == sorted(roster)
    for match in round_.matches:
        assert len(set(match.players)) == 4
    courts = [m.court for m in round_.matches]
    assert len(courts) == len(set(courts))
    assert len(round_.matches) <= num_courts
    assert all(1 <= c <= num_courts for c in courts)


def assert_stats_consistent(stats: PlayerStats):
    """Checks games == wins + losses and non-negative counters for every player."""
    for name, stat in stats.items():
        assert stat.games == stat.wins + stat.losses, name
        assert min(stat.wins, stat.losses, stat.games) >= 0, name
