"""Data models for the CleanSheet dashboard."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .constants import BLANK_MARKER
from .difficulty import DifficultyBucket
from .schemas import BootstrapData, EntrySummary, Fixture, Pick


@dataclass(frozen=True)
class TeamRating:
    """Normalized difficulty of facing a team, recomputed on every refresh."""
    team_id: int
    name: str
    short_name: str
    difficulty: int  # 1-10, before home/away adjustment
    strength: int  # rounded average of home/away overall strength


@dataclass(frozen=True)
class ViewpointFixture:
    """A fixture seen from one of the two teams playing it."""
    gameweek: int
    opponent_id: int
    is_home: bool
    difficulty: int  # adjusted for home/away, always 1-10


# team_id -> gameweek -> fixtures in input order (0 = blank, 2+ = double)
FixtureMap = Dict[int, Dict[int, List[ViewpointFixture]]]


@dataclass(frozen=True)
class SquadPick:
    """A player in the user's squad, joined against bootstrap data."""
    player_id: int
    name: str
    position: str
    team_id: int
    team_short_name: str
    price: float
    form: float
    price_direction: str
    news: str


@dataclass
class FixtureCell:
    """One gameweek cell of a view row."""
    gameweek: int
    labels: List[str] = field(default_factory=list)  # e.g. ['ARS', '@CHE']
    difficulty: Optional[int] = None
    bucket: Optional[DifficultyBucket] = None

    @property
    def is_blank(self) -> bool:
        return not self.labels

    @property
    def is_double(self) -> bool:
        return len(self.labels) > 1

    @property
    def kind(self) -> str:
        if self.is_blank:
            return 'blank'
        return 'multiple' if self.is_double else 'single'

    @property
    def text(self) -> str:
        """Cell text with double-gameweek opponents stacked on separate lines."""
        return '\n'.join(self.labels) if self.labels else BLANK_MARKER


@dataclass
class GridRow:
    """Fixture grid row for one Premier League team."""
    team_id: int
    label: str
    name: str
    strength: int
    strength_bucket: DifficultyBucket
    cells: List[FixtureCell] = field(default_factory=list)

    @property
    def leading_columns(self) -> List[str]:
        return [self.label, str(self.strength)]


@dataclass
class SquadRow:
    """Squad view row for one picked player."""
    pick: SquadPick
    cells: List[FixtureCell] = field(default_factory=list)

    @property
    def leading_columns(self) -> List[str]:
        p = self.pick
        return [
            p.name,
            p.position,
            p.team_short_name,
            f'{p.price:.1f}',
            f'{p.form:.1f}',
            p.price_direction,
            p.news,
        ]


@dataclass
class TableView:
    """Renderable table: header labels plus one row per subject."""
    title: str
    headers: List[str]
    gameweeks: List[int]
    rows: List[Union[GridRow, SquadRow]] = field(default_factory=list)


@dataclass
class SessionState:
    """Everything loaded by one successful refresh.

    Replaced as a whole on each refresh, never merged.
    """
    bootstrap: BootstrapData
    current_gameweek: int
    fixtures: List[Fixture]
    team_ratings: Dict[int, TeamRating]
    entry_id: Optional[int] = None
    entry: Optional[EntrySummary] = None
    picks: Optional[List[Pick]] = None
