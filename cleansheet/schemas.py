"""Pydantic schemas for FPL API payloads and dashboard configuration.

The FPL feed carries many more fields than the dashboard uses, so API models
ignore unknown keys but fail fast when a field the dashboard relies on is
missing or has the wrong type.
"""

from pydantic import BaseModel, Field, field_validator


class Team(BaseModel):
    """Premier League club from bootstrap-static."""

    id: int
    name: str = Field(..., min_length=1)
    short_name: str = Field(..., min_length=1)
    strength_overall_home: float = Field(..., ge=0)
    strength_overall_away: float = Field(..., ge=0)

    class Config:
        extra = 'ignore'


class Event(BaseModel):
    """Gameweek entry from bootstrap-static."""

    id: int = Field(..., ge=1)
    is_current: bool = False
    is_next: bool = False

    class Config:
        extra = 'ignore'


class Player(BaseModel):
    """Player ("element") from bootstrap-static."""

    id: int
    web_name: str
    element_type: int
    team: int
    now_cost: int = Field(..., ge=0)
    form: str | float | None = None
    cost_change_event: int | None = None
    transfers_in_event: int | None = None
    transfers_out_event: int | None = None
    news: str | None = None

    class Config:
        extra = 'ignore'


class BootstrapData(BaseModel):
    """The bootstrap-static payload: teams, gameweeks and players."""

    teams: list[Team]
    events: list[Event]
    elements: list[Player]

    class Config:
        extra = 'ignore'


class Fixture(BaseModel):
    """Season fixture. ``event`` is null until the fixture is scheduled."""

    event: int | None = None
    team_h: int
    team_a: int

    class Config:
        extra = 'ignore'


class Pick(BaseModel):
    """One player selected by an entry for a gameweek."""

    element: int
    position: int | None = None
    is_captain: bool = False
    is_vice_captain: bool = False

    class Config:
        extra = 'ignore'


class PicksResponse(BaseModel):
    """Payload of entry/{id}/event/{gw}/picks/."""

    picks: list[Pick]

    class Config:
        extra = 'ignore'


class EntrySummary(BaseModel):
    """Payload of entry/{id}/ (the manager's team summary)."""

    id: int
    name: str
    player_first_name: str = ''
    player_last_name: str = ''
    summary_overall_points: int | None = None
    summary_overall_rank: int | None = None

    class Config:
        extra = 'ignore'

    @property
    def manager_name(self) -> str:
        return f'{self.player_first_name} {self.player_last_name}'.strip()


class DashboardConfig(BaseModel):
    """Dashboard settings loaded from data/dashboard_config.json."""

    api_base_url: str = 'https://fantasy.premierleague.com/api/'
    timeout_seconds: float = Field(25.0, gt=0)
    user_agent: str = 'CleanSheet-Dashboard'
    entry_cache_path: str = '~/.cleansheet/entry.json'
    share_base_url: str = 'https://cleansheet.app/'
    log_dir: str = 'logs'

    @field_validator('api_base_url', 'share_base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Ensure base URLs are absolute and end with a slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'URL must start with http:// or https://, got {v}')
        return v if v.endswith('/') else v + '/'

    class Config:
        extra = 'forbid'
