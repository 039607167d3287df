"""Difficulty buckets used to color fixtures.

The scale is bucketed unevenly: pairs at the easy and hard extremes, single
values in the upper middle, giving finer granularity near the hard end.
"""

from enum import Enum


class DifficultyBucket(str, Enum):
    """Presentation bucket for a 1-10 difficulty."""

    VERY_EASY = '1-2'
    EASY = '3'
    MEDIUM = '4-5'
    TRICKY = '6'
    HARD = '7-8'
    VERY_HARD = '9'
    HARDEST = '10'

    @property
    def css_class(self) -> str:
        return f'diff-{self.value}'

    @property
    def color(self) -> str:
        """Hex RGB fill color (no leading #)."""
        return BUCKET_COLORS[self]


BUCKET_COLORS = {
    DifficultyBucket.VERY_EASY: '00833E',
    DifficultyBucket.EASY: '01FC7A',
    DifficultyBucket.MEDIUM: 'E7E7E7',
    DifficultyBucket.TRICKY: 'FFC34D',
    DifficultyBucket.HARD: 'FF1751',
    DifficultyBucket.VERY_HARD: 'B0003A',
    DifficultyBucket.HARDEST: '80072D',
}

# Rounded raw strength floor -> bucket, strongest first
STRENGTH_THRESHOLDS = [
    (90, DifficultyBucket.VERY_EASY),
    (80, DifficultyBucket.EASY),
    (70, DifficultyBucket.MEDIUM),
    (60, DifficultyBucket.TRICKY),
    (50, DifficultyBucket.HARD),
    (40, DifficultyBucket.VERY_HARD),
]


def classify_difficulty(difficulty: float) -> DifficultyBucket:
    """
    Map a difficulty to its presentation bucket.

    Values outside 1-10 fall into the nearest end bucket.

    Examples:
        classify_difficulty(2) -> DifficultyBucket.VERY_EASY  ('1-2')
        classify_difficulty(6) -> DifficultyBucket.TRICKY     ('6')
        classify_difficulty(12) -> DifficultyBucket.HARDEST   ('10')
    """
    if difficulty <= 2:
        return DifficultyBucket.VERY_EASY
    if difficulty <= 3:
        return DifficultyBucket.EASY
    if difficulty <= 5:
        return DifficultyBucket.MEDIUM
    if difficulty <= 6:
        return DifficultyBucket.TRICKY
    if difficulty <= 8:
        return DifficultyBucket.HARD
    if difficulty <= 9:
        return DifficultyBucket.VERY_HARD
    return DifficultyBucket.HARDEST


def classify_strength(strength: int) -> DifficultyBucket:
    """Map a team's rounded raw strength onto the difficulty palette."""
    for floor, bucket in STRENGTH_THRESHOLDS:
        if strength >= floor:
            return bucket
    return DifficultyBucket.HARDEST
