"""View assemblers for the fixture grid and the squad table.

Both views share the same per-gameweek cell logic; they differ only in their
row subjects and leading columns. Views are plain data (see models.TableView)
so any renderer can turn them into output.
"""

import logging
from collections.abc import Iterable

from .constants import (
    AWAY_PREFIX,
    BLANK_MARKER,
    NARROW_COLUMNS,
    NARROW_VIEWPORT_WIDTH,
    POSITION_CODES,
    POSITION_ORDER,
    PRICE_DOWN,
    PRICE_FALLING,
    PRICE_NEUTRAL,
    PRICE_RISING,
    PRICE_UP,
    TRANSFER_MOMENTUM_THRESHOLD,
    UNKNOWN_POSITION,
    UNKNOWN_TEAM,
    WIDE_COLUMNS,
)
from .difficulty import classify_difficulty, classify_strength
from .fixtures import get_team_fixtures
from .models import (
    FixtureCell,
    FixtureMap,
    GridRow,
    SquadPick,
    SquadRow,
    TableView,
    TeamRating,
    ViewpointFixture,
)
from .schemas import Pick, Player, Team
from .utils import round_half_up

logger = logging.getLogger('cleansheet.views')

GRID_HEADERS = ['Team', 'Strength']
SQUAD_HEADERS = ['Player', 'Pos', 'Team', '£', 'Form', 'Δ', 'News']


def column_count(viewport_width: int) -> int:
    """Gameweek columns to show: 4 on narrow viewports, 8 otherwise."""
    return NARROW_COLUMNS if viewport_width < NARROW_VIEWPORT_WIDTH else WIDE_COLUMNS


def gameweek_columns(current_gameweek: int, num_columns: int) -> list[int]:
    return [current_gameweek + i for i in range(num_columns)]


def opponent_label(fixture: ViewpointFixture, team_ratings: dict[int, TeamRating]) -> str:
    """Opponent short name, prefixed with '@' for away fixtures."""
    opponent = team_ratings.get(fixture.opponent_id)
    name = opponent.short_name if opponent else UNKNOWN_TEAM
    return name if fixture.is_home else f'{AWAY_PREFIX}{name}'


def build_fixture_cell(
    gameweek: int,
    fixtures: list[ViewpointFixture],
    team_ratings: dict[int, TeamRating],
) -> FixtureCell:
    """
    Build the cell for one team in one gameweek.

    - No fixtures: blank cell, no difficulty.
    - One fixture: that fixture's adjusted difficulty.
    - Double gameweek: every opponent in order, colored by the rounded mean
      of the adjusted difficulties (so 3 and 8 average to 6, bucket '6').
    """
    if not fixtures:
        return FixtureCell(gameweek=gameweek)

    difficulty = round_half_up(sum(f.difficulty for f in fixtures) / len(fixtures))
    return FixtureCell(
        gameweek=gameweek,
        labels=[opponent_label(f, team_ratings) for f in fixtures],
        difficulty=difficulty,
        bucket=classify_difficulty(difficulty),
    )


def build_fixture_cells(
    team_id: int,
    gameweeks: list[int],
    fixture_map: FixtureMap,
    team_ratings: dict[int, TeamRating],
) -> list[FixtureCell]:
    return [
        build_fixture_cell(gw, get_team_fixtures(fixture_map, team_id, gw), team_ratings)
        for gw in gameweeks
    ]


def assemble_fixture_grid(
    teams: Iterable[Team],
    team_ratings: dict[int, TeamRating],
    fixture_map: FixtureMap,
    current_gameweek: int,
    num_columns: int,
) -> TableView:
    """
    Assemble the league-wide fixture difficulty grid.

    Args:
        teams: Teams from bootstrap-static (rows, sorted by name)
        team_ratings: Ratings from normalize_team_ratings()
        fixture_map: Map from build_fixture_map()
        current_gameweek: First gameweek column
        num_columns: Number of gameweek columns

    Returns:
        TableView with one GridRow per rated team
    """
    gameweeks = gameweek_columns(current_gameweek, num_columns)
    rows = []

    for team in sorted(teams, key=lambda t: t.name.casefold()):
        rating = team_ratings.get(team.id)
        if rating is None:
            continue
        rows.append(
            GridRow(
                team_id=team.id,
                label=team.short_name,
                name=team.name,
                strength=rating.strength,
                strength_bucket=classify_strength(rating.strength),
                cells=build_fixture_cells(team.id, gameweeks, fixture_map, team_ratings),
            )
        )

    return TableView(
        title='Fixture Difficulty',
        headers=GRID_HEADERS + [f'GW{gw}' for gw in gameweeks],
        gameweeks=gameweeks,
        rows=rows,
    )


def position_short(element_type: int) -> str:
    return POSITION_CODES.get(element_type, UNKNOWN_POSITION)


def parse_form(form: str | float | None) -> float:
    """Parse the feed's form string, treating missing or garbled values as 0."""
    if form is None or form == '':
        return 0.0
    try:
        return float(form)
    except (TypeError, ValueError):
        logger.debug(f'Unparseable form value {form!r}; using 0')
        return 0.0


def price_direction(player: Player) -> str:
    """
    Indicator of where a player's price is heading.

    An actual price change this gameweek wins (up/down arrow). Without one,
    net transfers beyond +/-50,000 suggest an imminent move (diagonal
    arrow). Otherwise a neutral dash.
    """
    recent_change = player.cost_change_event or 0
    if recent_change > 0:
        return PRICE_UP
    if recent_change < 0:
        return PRICE_DOWN

    net_transfers = (player.transfers_in_event or 0) - (player.transfers_out_event or 0)
    if net_transfers > TRANSFER_MOMENTUM_THRESHOLD:
        return PRICE_RISING
    if net_transfers < -TRANSFER_MOMENTUM_THRESHOLD:
        return PRICE_FALLING
    return PRICE_NEUTRAL


def build_squad_picks(
    picks: Iterable[Pick],
    players: Iterable[Player],
    teams: Iterable[Team],
) -> list[SquadPick]:
    """
    Join an entry's picks against bootstrap players and teams.

    Picks whose player id is not in the player list are dropped. The result
    is sorted GKP, DEF, MID, FWD (unknown positions last), keeping pick order
    within a position.
    """
    player_map = {p.id: p for p in players}
    team_map = {t.id: t for t in teams}

    squad = []
    for pick in picks:
        player = player_map.get(pick.element)
        if player is None:
            logger.debug(f'Dropping pick for unknown player {pick.element}')
            continue

        team = team_map.get(player.team)
        squad.append(
            SquadPick(
                player_id=player.id,
                name=player.web_name,
                position=position_short(player.element_type),
                team_id=player.team,
                team_short_name=team.short_name if team else UNKNOWN_TEAM,
                price=player.now_cost / 10,
                form=parse_form(player.form),
                price_direction=price_direction(player),
                news=player.news or BLANK_MARKER,
            )
        )

    squad.sort(key=lambda p: POSITION_ORDER.get(p.position, len(POSITION_ORDER) + 1))
    return squad


def assemble_squad_view(
    squad: list[SquadPick],
    team_ratings: dict[int, TeamRating],
    fixture_map: FixtureMap,
    current_gameweek: int,
    num_columns: int,
    title: str = 'My Team',
) -> TableView:
    """
    Assemble the user's squad table with the same fixture cells as the grid.

    Args:
        squad: Players from build_squad_picks(), already in display order
        team_ratings: Ratings from normalize_team_ratings()
        fixture_map: Map from build_fixture_map()
        current_gameweek: First gameweek column
        num_columns: Number of gameweek columns
        title: Table title (the entry's team name when known)

    Returns:
        TableView with one SquadRow per player
    """
    gameweeks = gameweek_columns(current_gameweek, num_columns)
    rows = [
        SquadRow(
            pick=pick,
            cells=build_fixture_cells(pick.team_id, gameweeks, fixture_map, team_ratings),
        )
        for pick in squad
    ]

    return TableView(
        title=title,
        headers=SQUAD_HEADERS + [f'GW{gw}' for gw in gameweeks],
        gameweeks=gameweeks,
        rows=rows,
    )
