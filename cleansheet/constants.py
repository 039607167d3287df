"""Constants and mappings for the CleanSheet dashboard."""

# FPL API endpoints
FPL_API_BASE = 'https://fantasy.premierleague.com/api/'
BOOTSTRAP_ENDPOINT = 'bootstrap-static/'
FIXTURES_ENDPOINT = 'fixtures/'


def entry_endpoint(entry_id: int) -> str:
    """Endpoint for a manager's entry summary."""
    return f'entry/{entry_id}/'


def picks_endpoint(entry_id: int, gameweek: int) -> str:
    """Endpoint for a manager's picks in a given gameweek."""
    return f'entry/{entry_id}/event/{gameweek}/picks/'


# Difficulty scale
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
NEUTRAL_DIFFICULTY = 5

# Playing at home is one point easier, away one point harder
HOME_MODIFIER = -1
AWAY_MODIFIER = 1

# Number of gameweeks aggregated ahead of the current one
LOOKAHEAD_GAMEWEEKS = 8

# Responsive column counts
NARROW_VIEWPORT_WIDTH = 768
NARROW_COLUMNS = 4
WIDE_COLUMNS = 8

# Player element_type -> short position
POSITION_CODES = {
    1: 'GKP',
    2: 'DEF',
    3: 'MID',
    4: 'FWD',
}
UNKNOWN_POSITION = 'UNK'
UNKNOWN_TEAM = 'UNK'

# Squad view sort order (unknown positions sort last)
POSITION_ORDER = {
    'GKP': 1,
    'DEF': 2,
    'MID': 3,
    'FWD': 4,
}

# Net transfers needed before a price move is flagged as trending
TRANSFER_MOMENTUM_THRESHOLD = 50_000

# Price direction indicators
PRICE_UP = '↑'
PRICE_DOWN = '↓'
PRICE_RISING = '↗'
PRICE_FALLING = '↘'
PRICE_NEUTRAL = '—'

# Placeholder text for blank cells and missing news
BLANK_MARKER = '—'
AWAY_PREFIX = '@'

# Query parameter carrying the entry id in share links
TEAM_QUERY_PARAM = 'team'

# User-facing notifications
REFRESH_FAILED_MESSAGE = 'Failed to load FPL data. Please try again.'
SQUAD_FAILED_MESSAGE = 'Failed to load team. Please check your Team ID and try again.'
MISSING_ENTRY_MESSAGE = 'Please enter your Team ID'
