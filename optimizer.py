# optimizer.py
"""
Greedy match optimizer.

Builds one round at a time: every way of splitting four unassigned players
into two teams is scored, the best candidate takes the next free court, and
the process repeats until the courts are full or fewer than four players are
left. The ledgers passed in are updated as matches are committed.

Enumeration is O(k^4) in the pool size per placed match, which is fine for
club rosters of a few dozen players but not for hundreds.
"""

import logging
import random
from itertools import combinations
from typing import Iterator, Sequence

from app_types import (
    DoublesMatch,
    PlayerName,
    Round,
    RoundResult,
    ScoredMatch,
    ScoringWeights,
    Team,
)
from constants import PLAYERS_PER_COURT, TEAM_SIZE
from ledgers import PartnershipLedger, WorkloadLedger

logger = logging.getLogger("app.optimizer")


def enumerate_candidates(pool: Sequence[PlayerName]) -> Iterator[tuple[Team, Team]]:
    """
    Yields every (team_1, team_2) split available in the pool.

    team_1 runs over all pairs, team_2 over all pairs of the remaining players,
    so each split shows up once per side assignment. Yields nothing for pools
    smaller than four.
    """
    for team_1 in combinations(pool, TEAM_SIZE):
        rest = [p for p in pool if p not in team_1]
        for team_2 in combinations(rest, TEAM_SIZE):
            yield team_1, team_2


def score_candidate(
    team_1: Team,
    team_2: Team,
    roster_size: int,
    workload: WorkloadLedger,
    partnerships: PartnershipLedger,
    weights: ScoringWeights,
    rng: random.Random,
) -> float:
    """
    Scores one candidate match (higher is better).

    The workload term dominates so that rested players always get priority,
    the cubic partnership penalty makes repeated partners a last resort, and
    the jitter breaks ties differently from run to run.
    """
    team_1_games = workload.team_games(team_1)
    team_2_games = workload.team_games(team_2)

    score = (
        roster_size * weights.workload_bonus_per_player
        - (team_1_games + team_2_games) * weights.workload_penalty_per_game
    )

    for team in (team_1, team_2):
        count = partnerships.partnership_count(team)
        score -= count**weights.partnership_penalty_exponent * weights.partnership_penalty_factor
        if count > 0:
            score -= weights.repeat_partnership_penalty

    if partnerships.has_faced(team_1, team_2):
        score -= weights.repeat_matchup_penalty
    else:
        score += weights.new_matchup_bonus

    score -= abs(team_1_games - team_2_games) * weights.balance_penalty_per_game

    score += rng.uniform(0, weights.jitter_range)
    return score


def pick_best_match(
    pool: Sequence[PlayerName],
    roster_size: int,
    workload: WorkloadLedger,
    partnerships: PartnershipLedger,
    weights: ScoringWeights,
    rng: random.Random,
) -> ScoredMatch | None:
    """Returns the highest scoring candidate, or None if the pool is too small."""
    best: ScoredMatch | None = None
    for team_1, team_2 in enumerate_candidates(pool):
        score = score_candidate(
            team_1, team_2, roster_size, workload, partnerships, weights, rng
        )
        if best is None or score > best.score:
            best = ScoredMatch(team_1=team_1, team_2=team_2, score=score)
    return best


def generate_one_round(
    round_num: int,
    pool: Sequence[PlayerName],
    num_courts: int,
    roster_size: int,
    workload: WorkloadLedger,
    partnerships: PartnershipLedger,
    weights: ScoringWeights | None = None,
    rng: random.Random | None = None,
) -> RoundResult:
    """
    Plans a single round of doubles matches.

    Args:
        round_num: Number of the round being planned (1-indexed)
        pool: Players available this round, in priority order
        num_courts: Maximum number of matches in the round
        roster_size: Size of the full roster (scales the workload bonus)
        workload: Games played so far; incremented for every placed player
        partnerships: Partnership and matchup history; updated per match
        weights: Scorer weights (defaults to the tuned constants)
        rng: Random source for the tie-break jitter

    Returns:
        RoundResult holding the round, or no round if no match could be placed.
    """
    if weights is None:
        weights = ScoringWeights()
    if rng is None:
        rng = random.Random()

    available = list(pool)
    matches: list[DoublesMatch] = []

    while len(available) >= PLAYERS_PER_COURT and len(matches) < num_courts:
        best = pick_best_match(
            available, roster_size, workload, partnerships, weights, rng
        )
        if best is None:
            logger.debug("No valid matches found for round %s", round_num)
            break

        court = len(matches) + 1
        logger.debug(
            "Round %s, Match %s: %s vs %s (Score: %.1f)",
            round_num,
            court,
            " & ".join(best.team_1),
            " & ".join(best.team_2),
            best.score,
        )
        matches.append(DoublesMatch(court=court, team_1=best.team_1, team_2=best.team_2))

        for player in (*best.team_1, *best.team_2):
            workload.increment(player)
            available.remove(player)
        partnerships.record_match(best.team_1, best.team_2)

    if not matches:
        return RoundResult(round=None)

    return RoundResult(
        round=Round(
            round_num=round_num,
            matches=matches,
            sit_out=available,
            game_count=workload.snapshot(),
        )
    )
