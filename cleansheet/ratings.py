"""Team rating normalization and per-fixture difficulty adjustment."""

import logging
from collections.abc import Iterable

from .constants import (
    AWAY_MODIFIER,
    HOME_MODIFIER,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    NEUTRAL_DIFFICULTY,
)
from .models import TeamRating
from .schemas import Team
from .utils import clamp, round_half_up

logger = logging.getLogger('cleansheet.ratings')


def average_strength(team: Team) -> float:
    """Mean of a team's overall home and away strength."""
    return (team.strength_overall_home + team.strength_overall_away) / 2


def normalize_team_ratings(teams: Iterable[Team]) -> dict[int, TeamRating]:
    """
    Convert raw team strengths into a 1-10 difficulty scale.

    The weakest team by average strength maps to 1 and the strongest to 10,
    with everything else interpolated linearly and rounded half up:

        difficulty = 1 + (avg - min) / (max - min) * 9

    When every team has the same average strength (including a single team)
    the scale is undefined, and every team gets the neutral difficulty 5.

    Args:
        teams: Teams from bootstrap-static

    Returns:
        Dict mapping team id to its TeamRating
    """
    teams = list(teams)
    if not teams:
        return {}

    averages = {team.id: average_strength(team) for team in teams}
    min_strength = min(averages.values())
    max_strength = max(averages.values())
    spread = max_strength - min_strength

    if spread == 0:
        logger.warning(
            f'All {len(teams)} teams share strength {min_strength}; '
            f'rating every team {NEUTRAL_DIFFICULTY}'
        )

    ratings = {}
    for team in teams:
        avg = averages[team.id]
        if spread == 0:
            difficulty = NEUTRAL_DIFFICULTY
        else:
            scale = MAX_DIFFICULTY - MIN_DIFFICULTY
            difficulty = round_half_up(MIN_DIFFICULTY + (avg - min_strength) / spread * scale)

        ratings[team.id] = TeamRating(
            team_id=team.id,
            name=team.name,
            short_name=team.short_name,
            difficulty=difficulty,
            strength=round_half_up(avg),
        )

    logger.debug(f'Normalized ratings for {len(ratings)} teams')
    return ratings


def calculate_fixture_difficulty(
    opponent_id: int,
    is_home: bool,
    team_ratings: dict[int, TeamRating],
) -> int:
    """
    Difficulty of facing an opponent, seen from the other team.

    Home fixtures are one point easier and away fixtures one point harder
    than the opponent's base rating; the result is clamped to 1-10. An
    opponent without a rating gets the neutral difficulty 5.

    Args:
        opponent_id: Team id of the opponent
        is_home: Whether the viewing team plays at home
        team_ratings: Ratings from normalize_team_ratings()

    Returns:
        Adjusted difficulty (1-10)
    """
    opponent = team_ratings.get(opponent_id)
    if opponent is None:
        logger.debug(f'No rating for team {opponent_id}; using {NEUTRAL_DIFFICULTY}')
        return NEUTRAL_DIFFICULTY

    modifier = HOME_MODIFIER if is_home else AWAY_MODIFIER
    return clamp(opponent.difficulty + modifier, MIN_DIFFICULTY, MAX_DIFFICULTY)
