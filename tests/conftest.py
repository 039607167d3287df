"""Shared FPL payloads for the test suite.

Four teams with average strengths 1320 (ARS), 1000 (BUR), 1190 (CHE) and
1360 (LIV) normalize to difficulties 9, 1, 6 and 10. Current gameweek is 2.
ARS and CHE have a double in GW3; BUR and LIV blank in GW4.
"""

import pytest

from cleansheet.schemas import BootstrapData, EntrySummary, Fixture, PicksResponse


def team_payload(team_id, name, short_name, home, away):
    return {
        'id': team_id,
        'name': name,
        'short_name': short_name,
        'strength_overall_home': home,
        'strength_overall_away': away,
        'strength': 4,
        'code': team_id * 3,
    }


def player_payload(player_id, web_name, element_type, team, now_cost, form='0.0',
                   cost_change_event=0, transfers_in_event=0, transfers_out_event=0, news=''):
    return {
        'id': player_id,
        'web_name': web_name,
        'element_type': element_type,
        'team': team,
        'now_cost': now_cost,
        'form': form,
        'cost_change_event': cost_change_event,
        'transfers_in_event': transfers_in_event,
        'transfers_out_event': transfers_out_event,
        'news': news,
        'selected_by_percent': '10.0',
    }


@pytest.fixture
def bootstrap_payload():
    """Raw bootstrap-static JSON."""
    return {
        'teams': [
            team_payload(4, 'Liverpool', 'LIV', 1360, 1360),
            team_payload(1, 'Arsenal', 'ARS', 1300, 1340),
            team_payload(3, 'Chelsea', 'CHE', 1200, 1180),
            team_payload(2, 'Burnley', 'BUR', 1000, 1000),
        ],
        'events': [
            {'id': 1, 'is_current': False, 'is_next': False, 'finished': True},
            {'id': 2, 'is_current': True, 'is_next': False, 'finished': False},
            {'id': 3, 'is_current': False, 'is_next': True, 'finished': False},
        ],
        'elements': [
            player_payload(10, 'Raya', 1, 1, 55, form='4.2',
                           transfers_in_event=1000, transfers_out_event=500),
            player_payload(11, 'Saliba', 2, 1, 60, form='5.0', cost_change_event=1),
            player_payload(12, 'Palmer', 3, 3, 105, form='7.8',
                           transfers_in_event=80000, transfers_out_event=10000),
            player_payload(13, 'Salah', 3, 4, 130, form=None, cost_change_event=-1,
                           news='Knock - 75% chance of playing'),
            player_payload(14, 'Foster', 4, 2, 45, form='1.0',
                           transfers_in_event=1000, transfers_out_event=70000),
        ],
        'element_types': [],
        'total_players': 10000000,
    }


@pytest.fixture
def fixtures_payload():
    """Raw fixtures JSON, in feed order."""
    return [
        {'id': 1, 'event': 1, 'team_h': 1, 'team_a': 2, 'finished': True},
        {'id': 2, 'event': 2, 'team_h': 1, 'team_a': 2, 'finished': False},
        {'id': 3, 'event': 2, 'team_h': 3, 'team_a': 4, 'finished': False},
        {'id': 4, 'event': 3, 'team_h': 2, 'team_a': 3, 'finished': False},
        {'id': 5, 'event': 3, 'team_h': 4, 'team_a': 1, 'finished': False},
        {'id': 6, 'event': 3, 'team_h': 1, 'team_a': 3, 'finished': False},
        {'id': 7, 'event': 4, 'team_h': 3, 'team_a': 1, 'finished': False},
        {'id': 8, 'event': 10, 'team_h': 2, 'team_a': 4, 'finished': False},
        {'id': 9, 'event': None, 'team_h': 4, 'team_a': 2, 'finished': False},
    ]


@pytest.fixture
def entry_payload():
    return {
        'id': 123456,
        'name': 'Clean Sheets FC',
        'player_first_name': 'Sam',
        'player_last_name': 'Taylor',
        'summary_overall_points': 250,
        'summary_overall_rank': 120000,
    }


@pytest.fixture
def picks_payload():
    """Picks in squad-slot order; 999 is not a known player."""
    return {
        'active_chip': None,
        'picks': [
            {'element': 14, 'position': 1, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
            {'element': 12, 'position': 2, 'multiplier': 2, 'is_captain': True, 'is_vice_captain': False},
            {'element': 999, 'position': 3, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
            {'element': 10, 'position': 4, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
            {'element': 13, 'position': 5, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': True},
            {'element': 11, 'position': 6, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
        ],
    }


@pytest.fixture
def bootstrap(bootstrap_payload):
    return BootstrapData.model_validate(bootstrap_payload)


@pytest.fixture
def fixtures(fixtures_payload):
    return [Fixture.model_validate(f) for f in fixtures_payload]


@pytest.fixture
def entry(entry_payload):
    return EntrySummary.model_validate(entry_payload)


@pytest.fixture
def picks(picks_payload):
    return PicksResponse.model_validate(picks_payload)
