from .models import (
    TeamRating,
    ViewpointFixture,
    SquadPick,
    FixtureCell,
    GridRow,
    SquadRow,
    TableView,
    SessionState,
)
from .difficulty import DifficultyBucket, classify_difficulty, classify_strength
from .ratings import normalize_team_ratings, calculate_fixture_difficulty
from .fixtures import build_fixture_map, get_current_gameweek
from .views import (
    assemble_fixture_grid,
    assemble_squad_view,
    build_squad_picks,
    column_count,
    price_direction,
)
from .fpl_client import FPLClient
from .exceptions import CleanSheetError, FPLAPIError, FPLDataError
from .identity import EntryIdStore, resolve_entry_id, build_share_url
from .dashboard import Dashboard
from .render import render_text_table, export_views_json, export_workbook

__all__ = [
    # Models
    'TeamRating',
    'ViewpointFixture',
    'SquadPick',
    'FixtureCell',
    'GridRow',
    'SquadRow',
    'TableView',
    'SessionState',
    # Difficulty
    'DifficultyBucket',
    'classify_difficulty',
    'classify_strength',
    'normalize_team_ratings',
    'calculate_fixture_difficulty',
    # Fixtures
    'build_fixture_map',
    'get_current_gameweek',
    # Views
    'assemble_fixture_grid',
    'assemble_squad_view',
    'build_squad_picks',
    'column_count',
    'price_direction',
    # Data fetching
    'FPLClient',
    'CleanSheetError',
    'FPLAPIError',
    'FPLDataError',
    # Entry id
    'EntryIdStore',
    'resolve_entry_id',
    'build_share_url',
    # Coordinator
    'Dashboard',
    # Rendering
    'render_text_table',
    'export_views_json',
    'export_workbook',
]
