# Court Constants
PLAYERS_PER_COURT = 4
TEAM_SIZE = 2
MIN_PLAYERS = PLAYERS_PER_COURT

# Generation Bounds
MIN_ROUNDS = 1
MAX_ROUNDS = 12
MIN_COURTS = 1
MAX_COURTS = 8

# Setup Constants
DEFAULT_NUM_ROUNDS = 8
DEFAULT_NUM_COURTS = 2

# Scoring Constants (empirically tuned, keep in sync with DEFAULT_WEIGHTS)
WORKLOAD_BONUS_PER_PLAYER = 10
WORKLOAD_PENALTY_PER_GAME = 5
PARTNERSHIP_PENALTY_FACTOR = 50
PARTNERSHIP_PENALTY_EXPONENT = 3
REPEAT_PARTNERSHIP_PENALTY = 25
NEW_MATCHUP_BONUS = 30
REPEAT_MATCHUP_PENALTY = 15
BALANCE_PENALTY_PER_GAME = 2
JITTER_RANGE = 3

DEFAULT_WEIGHTS = {
    'workload_bonus_per_player': WORKLOAD_BONUS_PER_PLAYER,
    'workload_penalty_per_game': WORKLOAD_PENALTY_PER_GAME,
    'partnership_penalty_factor': PARTNERSHIP_PENALTY_FACTOR,
    'partnership_penalty_exponent': PARTNERSHIP_PENALTY_EXPONENT,
    'repeat_partnership_penalty': REPEAT_PARTNERSHIP_PENALTY,
    'new_matchup_bonus': NEW_MATCHUP_BONUS,
    'repeat_matchup_penalty': REPEAT_MATCHUP_PENALTY,
    'balance_penalty_per_game': BALANCE_PENALTY_PER_GAME,
    'jitter_range': JITTER_RANGE,
}

# Logging
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
