"""Tests for the dashboard coordinator with a mocked FPL client."""

from unittest.mock import MagicMock

import pytest

from cleansheet.constants import (
    MISSING_ENTRY_MESSAGE,
    REFRESH_FAILED_MESSAGE,
    SQUAD_FAILED_MESSAGE,
)
from cleansheet.dashboard import Dashboard
from cleansheet.exceptions import FPLAPIError, FPLDataError
from cleansheet.fpl_client import FPLClient
from cleansheet.identity import EntryIdStore
from cleansheet.schemas import BootstrapData, Fixture


@pytest.fixture
def client(bootstrap, fixtures, entry, picks):
    client = MagicMock(spec=FPLClient)
    client.get_bootstrap.return_value = bootstrap
    client.get_fixtures.return_value = fixtures
    client.get_entry.return_value = entry
    client.get_picks.return_value = picks
    return client


@pytest.fixture
def store(tmp_path):
    return EntryIdStore(tmp_path / 'entry.json')


@pytest.fixture
def messages():
    return []


def make_dashboard(client, store, messages, **kwargs):
    return Dashboard(client, store=store, notifier=messages.append, **kwargs)


class TestEntryResolution:
    """Tests for choosing the entry at startup."""

    def test_no_entry_prompts(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        assert dashboard.entry_id is None
        assert dashboard.needs_entry_prompt
        assert dashboard.share_url is None

    def test_remembered_entry(self, client, store, messages):
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        assert dashboard.entry_id == 123456
        assert dashboard.share_url.endswith('?team=123456')

    def test_location_param_beats_remembered(self, client, store, messages):
        store.save(111)
        dashboard = make_dashboard(client, store, messages, location_param='222')
        assert dashboard.entry_id == 222

    def test_invalid_location_param_falls_back(self, client, store, messages):
        store.save(111)
        dashboard = make_dashboard(client, store, messages, location_param='abc')
        assert dashboard.entry_id == 111


class TestRefresh:
    """Tests for the full refresh."""

    def test_refresh_builds_grid(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        assert dashboard.refresh()

        assert dashboard.state.current_gameweek == 2
        assert dashboard.grid_view.headers[2] == 'GW2'
        assert len(dashboard.grid_view.rows) == 4
        assert dashboard.squad_view is None
        assert messages == []
        client.get_entry.assert_not_called()

    def test_refresh_loads_squad_when_entry_known(self, client, store, messages):
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        assert dashboard.refresh()

        client.get_picks.assert_called_once_with(123456, 2)
        assert dashboard.squad_view.title == 'Clean Sheets FC'
        assert len(dashboard.squad_view.rows) == 5
        assert dashboard.state.entry_id == 123456

    def test_bootstrap_failure_keeps_nothing(self, client, store, messages):
        client.get_bootstrap.side_effect = FPLAPIError('url', 'HTTP 503', status_code=503)
        dashboard = make_dashboard(client, store, messages)

        assert not dashboard.refresh()
        assert dashboard.state is None
        assert dashboard.grid_view is None
        assert messages == [REFRESH_FAILED_MESSAGE]

    def test_failed_refresh_leaves_previous_state(self, client, store, messages):
        """Test a failing second refresh does not touch the loaded views."""
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        state, grid = dashboard.state, dashboard.grid_view

        client.get_fixtures.side_effect = FPLDataError('fixtures/', 'bad payload')
        assert not dashboard.refresh()

        assert dashboard.state is state
        assert dashboard.grid_view is grid
        assert messages == [REFRESH_FAILED_MESSAGE]

    def test_refresh_replaces_state(self, client, store, messages, bootstrap_payload):
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        first = dashboard.state

        bootstrap_payload['events'][1]['is_current'] = False
        bootstrap_payload['events'][2]['is_current'] = True
        client.get_bootstrap.return_value = BootstrapData.model_validate(bootstrap_payload)
        dashboard.refresh()

        assert dashboard.state is not first
        assert dashboard.state.current_gameweek == 3
        assert dashboard.grid_view.headers[2] == 'GW3'

    def test_squad_failure_keeps_grid(self, client, store, messages):
        store.save(123456)
        client.get_picks.side_effect = FPLAPIError('url', 'HTTP 404', status_code=404)
        dashboard = make_dashboard(client, store, messages)

        assert dashboard.refresh()
        assert dashboard.grid_view is not None
        assert dashboard.squad_view is None
        assert messages == [SQUAD_FAILED_MESSAGE]


class TestLoadSquad:
    """Tests for loading a squad by typed entry id."""

    def test_requires_refresh_first(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        with pytest.raises(RuntimeError):
            dashboard.load_squad('123456')

    def test_typed_entry_is_remembered(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()

        assert dashboard.load_squad('123456')
        assert store.load() == 123456
        assert dashboard.share_url.endswith('?team=123456')
        assert [row.pick.name for row in dashboard.squad_view.rows] == [
            'Raya', 'Saliba', 'Palmer', 'Salah', 'Foster'
        ]

    def test_missing_entry(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()

        assert not dashboard.load_squad()
        assert not dashboard.load_squad('   ')
        assert messages == [MISSING_ENTRY_MESSAGE, MISSING_ENTRY_MESSAGE]
        client.get_entry.assert_not_called()

    def test_invalid_entry(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()

        assert not dashboard.load_squad('not-a-number')
        assert messages == [MISSING_ENTRY_MESSAGE]
        assert store.load() is None

    def test_entry_failure_notifies(self, client, store, messages):
        client.get_entry.side_effect = FPLAPIError('url', 'HTTP 404', status_code=404)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()

        assert not dashboard.load_squad('42')
        assert messages == [SQUAD_FAILED_MESSAGE]
        client.get_picks.assert_not_called()

    def test_failed_new_entry_hides_previous_squad(self, client, store, messages):
        """Test a failed load never leaves another entry's squad on show."""
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        assert dashboard.squad_view.title == 'Clean Sheets FC'

        client.get_entry.side_effect = FPLAPIError('url', 'HTTP 404', status_code=404)
        assert not dashboard.load_squad('42')

        assert dashboard.entry_id == 42
        assert dashboard.share_url.endswith('?team=42')
        assert dashboard.squad_view is None
        assert dashboard.state.picks is None
        assert dashboard.grid_view is not None
        assert messages == [SQUAD_FAILED_MESSAGE]

        dashboard.resize(400)
        assert dashboard.squad_view is None
        assert len(dashboard.grid_view.gameweeks) == 4

    def test_failed_picks_on_later_refresh(self, client, store, messages):
        """Test a squad that fails on the next refresh stays hidden through a resize."""
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        assert dashboard.squad_view is not None

        client.get_picks.side_effect = FPLAPIError('url', 'HTTP 503', status_code=503)
        assert dashboard.refresh()
        assert dashboard.squad_view is None

        dashboard.resize(400)
        assert len(dashboard.grid_view.gameweeks) == 4
        assert dashboard.squad_view is None
        assert messages == [SQUAD_FAILED_MESSAGE]

    def test_retry_after_failure(self, client, store, messages):
        store.save(123456)
        client.get_picks.side_effect = FPLAPIError('url', 'HTTP 503', status_code=503)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        assert dashboard.squad_view is None

        client.get_picks.side_effect = None
        assert dashboard.load_squad()
        assert len(dashboard.squad_view.rows) == 5


class TestResize:
    """Tests for responsive re-rendering."""

    def test_narrow_viewport_shows_four_gameweeks(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages, viewport_width=500)
        dashboard.refresh()
        assert dashboard.grid_view.gameweeks == [2, 3, 4, 5]

    def test_resize_rerenders_without_refetch(self, client, store, messages):
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        assert len(dashboard.grid_view.gameweeks) == 8

        dashboard.resize(767)

        assert len(dashboard.grid_view.gameweeks) == 4
        assert len(dashboard.squad_view.gameweeks) == 4
        assert client.get_bootstrap.call_count == 1
        assert client.get_picks.call_count == 1

    def test_resize_before_refresh(self, client, store, messages):
        dashboard = make_dashboard(client, store, messages)
        dashboard.resize(400)
        assert dashboard.num_columns == 4
        assert dashboard.grid_view is None


class TestForgetEntry:

    def test_forget_entry(self, client, store, messages):
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        dashboard.forget_entry()

        assert dashboard.needs_entry_prompt
        assert dashboard.share_url is None
        assert store.load() is None

    def test_forget_entry_hides_squad(self, client, store, messages):
        store.save(123456)
        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()
        dashboard.forget_entry()

        assert dashboard.squad_view is None
        dashboard.resize(400)
        assert dashboard.squad_view is None
        assert dashboard.grid_view is not None


class TestTwoTeamLeague:
    """End-to-end check on the smallest meaningful league."""

    def test_strong_and_weak_team(self, client, store, messages):
        bootstrap = BootstrapData.model_validate({
            'teams': [
                {'id': 1, 'name': 'Alpha', 'short_name': 'ALP',
                 'strength_overall_home': 120, 'strength_overall_away': 80},
                {'id': 2, 'name': 'Beta', 'short_name': 'BET',
                 'strength_overall_home': 40, 'strength_overall_away': 60},
            ],
            'events': [{'id': 1, 'is_current': True}],
            'elements': [],
        })
        client.get_bootstrap.return_value = bootstrap
        client.get_fixtures.return_value = [Fixture(event=1, team_h=1, team_a=2)]

        dashboard = make_dashboard(client, store, messages)
        dashboard.refresh()

        assert dashboard.state.team_ratings[1].difficulty == 10
        assert dashboard.state.team_ratings[2].difficulty == 1

        alpha, beta = dashboard.grid_view.rows
        # Alpha hosts Beta: 1 - 1 clamps to 1
        assert alpha.cells[0].labels == ['BET']
        assert alpha.cells[0].difficulty == 1
        # Beta visits Alpha: 10 + 1 clamps to 10
        assert beta.cells[0].labels == ['@ALP']
        assert beta.cells[0].difficulty == 10
        assert all(cell.is_blank for cell in alpha.cells[1:])
