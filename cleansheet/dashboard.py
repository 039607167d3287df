"""Dashboard coordinator.

Owns the session state and runs the two user-facing operations: a full
refresh (bootstrap, fixtures, then the user's squad when an entry id is
known) and loading a squad. Fetches run one after another; failures are
never retried and surface as a single notification.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Optional

from .constants import (
    MISSING_ENTRY_MESSAGE,
    REFRESH_FAILED_MESSAGE,
    SQUAD_FAILED_MESSAGE,
)
from .exceptions import CleanSheetError
from .fixtures import build_fixture_map, get_current_gameweek
from .fpl_client import FPLClient
from .identity import EntryIdStore, build_share_url, parse_entry_id, resolve_entry_id
from .models import SessionState, TableView
from .ratings import normalize_team_ratings
from .views import (
    assemble_fixture_grid,
    assemble_squad_view,
    build_squad_picks,
    column_count,
)

logger = logging.getLogger('cleansheet.dashboard')

Notifier = Callable[[str], None]

DEFAULT_VIEWPORT_WIDTH = 1024


def log_notifier(message: str) -> None:
    """Default notifier: report the failure through the error log."""
    logger.error(message)


class Dashboard:
    """
    Fixture difficulty dashboard.

    Example:
        with FPLClient() as client:
            dashboard = Dashboard(client, location_param='123456')
            if dashboard.refresh():
                grid = dashboard.grid_view
                squad = dashboard.squad_view
    """

    def __init__(
        self,
        client: FPLClient,
        store: Optional[EntryIdStore] = None,
        notifier: Optional[Notifier] = None,
        viewport_width: int = DEFAULT_VIEWPORT_WIDTH,
        location_param: str | int | None = None,
    ):
        self.client = client
        self.store = store or EntryIdStore()
        self.notifier = notifier or log_notifier
        self.viewport_width = viewport_width

        self.state: Optional[SessionState] = None
        self.grid_view: Optional[TableView] = None
        self.squad_view: Optional[TableView] = None

        try:
            self.entry_id = resolve_entry_id(location_param, self.store)
        except ValueError as e:
            logger.warning(f'{e}; falling back to remembered team')
            self.entry_id = self.store.load()
        self.share_url = build_share_url(self.entry_id) if self.entry_id else None

    @property
    def num_columns(self) -> int:
        return column_count(self.viewport_width)

    @property
    def needs_entry_prompt(self) -> bool:
        """True when no entry id is known and the user should be asked for one."""
        return self.entry_id is None

    def refresh(self) -> bool:
        """
        Reload everything from the API and rebuild the views.

        On a bootstrap or fixtures failure the previous state and views are
        kept untouched and the user is notified. A squad failure afterwards
        does not undo the refreshed grid.

        Returns:
            True if the league-wide data loaded
        """
        try:
            bootstrap = self.client.get_bootstrap()
            current_gameweek = get_current_gameweek(bootstrap.events)
            team_ratings = normalize_team_ratings(bootstrap.teams)
            fixtures = self.client.get_fixtures()
        except CleanSheetError as e:
            logger.error(f'Error loading data: {e}')
            self.notifier(REFRESH_FAILED_MESSAGE)
            return False

        self.state = SessionState(
            bootstrap=bootstrap,
            current_gameweek=current_gameweek,
            fixtures=fixtures,
            team_ratings=team_ratings,
        )
        logger.info(f'Loaded {len(fixtures)} fixtures; current gameweek is GW{current_gameweek}')
        self.grid_view = self.render_grid()
        self.squad_view = None

        if self.entry_id is not None:
            self.load_squad()
        return True

    def load_squad(self, entry_input: str | int | None = None) -> bool:
        """
        Load the squad of an entry and build the squad view.

        Args:
            entry_input: Entry id typed by the user. When given it replaces
                the current one, is remembered for next time and goes into
                the share link.

        Returns:
            True if the squad loaded
        """
        if self.state is None:
            raise RuntimeError('refresh() must succeed before a squad can be loaded')

        if entry_input is not None and str(entry_input).strip():
            try:
                entry_id = parse_entry_id(entry_input)
            except ValueError as e:
                logger.warning(str(e))
                self.notifier(MISSING_ENTRY_MESSAGE)
                return False
            self.entry_id = entry_id
            self.store.save(entry_id)
            self.share_url = build_share_url(entry_id)

        if self.entry_id is None:
            self.notifier(MISSING_ENTRY_MESSAGE)
            return False

        # Hide the previous squad until this one loads
        self.squad_view = None
        self.state = replace(self.state, entry_id=self.entry_id, entry=None, picks=None)

        try:
            entry = self.client.get_entry(self.entry_id)
            picks = self.client.get_picks(self.entry_id, self.state.current_gameweek)
        except CleanSheetError as e:
            logger.error(f'Error loading team {self.entry_id}: {e}')
            self.notifier(SQUAD_FAILED_MESSAGE)
            return False

        self.state = replace(self.state, entry_id=self.entry_id, entry=entry, picks=picks.picks)
        self.squad_view = self.render_squad()
        return True

    def resize(self, viewport_width: int) -> None:
        """Re-render both views for a new viewport width (no refetch)."""
        self.viewport_width = viewport_width
        if self.state is None:
            return
        self.grid_view = self.render_grid()
        if self.state.picks is not None:
            self.squad_view = self.render_squad()

    def forget_entry(self) -> None:
        """Drop the remembered entry id and the squad shown for it."""
        self.store.clear()
        self.entry_id = None
        self.share_url = None
        self.squad_view = None
        if self.state is not None:
            self.state = replace(self.state, entry_id=None, entry=None, picks=None)

    def render_grid(self) -> TableView:
        """Assemble the fixture grid from the current session state."""
        state = self._require_state()
        fixture_map = build_fixture_map(state.fixtures, state.team_ratings, state.current_gameweek)
        return assemble_fixture_grid(
            state.bootstrap.teams,
            state.team_ratings,
            fixture_map,
            state.current_gameweek,
            self.num_columns,
        )

    def render_squad(self) -> Optional[TableView]:
        """Assemble the squad view, or None if no squad has been loaded."""
        state = self._require_state()
        if state.picks is None:
            return None

        fixture_map = build_fixture_map(state.fixtures, state.team_ratings, state.current_gameweek)
        squad = build_squad_picks(state.picks, state.bootstrap.elements, state.bootstrap.teams)
        title = state.entry.name if state.entry else 'My Team'
        return assemble_squad_view(
            squad,
            state.team_ratings,
            fixture_map,
            state.current_gameweek,
            self.num_columns,
            title=title,
        )

    def _require_state(self) -> SessionState:
        if self.state is None:
            raise RuntimeError('No data loaded; call refresh() first')
        return self.state
