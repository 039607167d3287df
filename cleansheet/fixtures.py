"""Gameweek resolution and fixture aggregation.

The fixture map is a pure function of ratings, fixtures and the anchor
gameweek. It is rebuilt for every view rather than cached, so callers must
not rely on the identity of the lists it returns.
"""

import logging
from collections.abc import Iterable

from .constants import LOOKAHEAD_GAMEWEEKS
from .models import FixtureMap, TeamRating, ViewpointFixture
from .ratings import calculate_fixture_difficulty
from .schemas import Event, Fixture

logger = logging.getLogger('cleansheet.fixtures')


def get_current_gameweek(events: Iterable[Event]) -> int:
    """
    Resolve the gameweek the dashboard is anchored on.

    Returns the gameweek flagged current, else the one flagged next, else 1
    (pre-season, before any gameweek is flagged).
    """
    events = list(events)
    for event in events:
        if event.is_current:
            return event.id
    for event in events:
        if event.is_next:
            return event.id
    return 1


def build_fixture_map(
    fixtures: Iterable[Fixture],
    team_ratings: dict[int, TeamRating],
    current_gameweek: int,
    lookahead: int = LOOKAHEAD_GAMEWEEKS,
) -> FixtureMap:
    """
    Group fixtures in the lookahead window by team and gameweek.

    Each fixture in [current_gameweek, current_gameweek + lookahead) is added
    twice: once to the home team's bucket (opponent = away team) and once to
    the away team's bucket (opponent = home team), each with its adjusted
    difficulty. Within a bucket, fixtures keep the order of the input list,
    which is the display order for double gameweeks.

    Args:
        fixtures: All season fixtures
        team_ratings: Ratings from normalize_team_ratings()
        current_gameweek: First gameweek of the window
        lookahead: Number of gameweeks in the window

    Returns:
        team_id -> gameweek -> list of ViewpointFixture. Every rated team is
        present; gameweeks without fixtures are absent from the inner dict.
    """
    fixture_map: FixtureMap = {team_id: {} for team_id in team_ratings}
    last_gameweek = current_gameweek + lookahead

    for fixture in fixtures:
        gw = fixture.event
        if gw is None or not (current_gameweek <= gw < last_gameweek):
            continue

        for team_id, opponent_id, is_home in (
            (fixture.team_h, fixture.team_a, True),
            (fixture.team_a, fixture.team_h, False),
        ):
            if team_id not in fixture_map:
                logger.warning(f'Fixture in GW{gw} references unrated team {team_id}')
                fixture_map[team_id] = {}

            fixture_map[team_id].setdefault(gw, []).append(
                ViewpointFixture(
                    gameweek=gw,
                    opponent_id=opponent_id,
                    is_home=is_home,
                    difficulty=calculate_fixture_difficulty(opponent_id, is_home, team_ratings),
                )
            )

    return fixture_map


def get_team_fixtures(fixture_map: FixtureMap, team_id: int, gameweek: int) -> list[ViewpointFixture]:
    """Fixtures a team plays in a gameweek (empty for a blank gameweek or unknown team)."""
    return fixture_map.get(team_id, {}).get(gameweek, [])

