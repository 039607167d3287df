"""Resolution and persistence of the user's FPL entry (team) id.

The entry id is the only state that outlives a session. It is remembered in
a small JSON file and carried in share links as ``?team=<id>``. Precedence
when resolving: explicit link parameter, then the remembered value, then
unset (the dashboard asks for it).
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from .config import get_entry_cache_path, get_share_base_url
from .constants import TEAM_QUERY_PARAM
from .utils import load_json_safe, save_json

logger = logging.getLogger('cleansheet.identity')


def parse_entry_id(value: str | int | None) -> Optional[int]:
    """
    Parse an entry id from user input, a query parameter or the cache.

    Returns None for empty input.

    Raises:
        ValueError: If the value is not a positive integer
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if not (text.isascii() and text.isdigit()) or int(text) <= 0:
        raise ValueError(f'Team ID must be a positive whole number, got {value!r}')
    return int(text)


class EntryIdStore:
    """Remembers the entry id between sessions in a JSON file."""

    def __init__(self, path: Optional[Path | str] = None):
        self.path = Path(path).expanduser() if path else get_entry_cache_path()

    def load(self) -> Optional[int]:
        data = load_json_safe(self.path, default={})
        if not isinstance(data, dict):
            return None
        try:
            return parse_entry_id(data.get('entry_id'))
        except ValueError:
            logger.warning(f'Ignoring invalid entry id cached in {self.path}')
            return None

    def save(self, entry_id: int) -> None:
        save_json(self.path, {'entry_id': entry_id})
        logger.debug(f'Remembered entry {entry_id} in {self.path}')

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def entry_id_from_url(url: Optional[str]) -> Optional[int]:
    """Extract the entry id from a share link's ``team`` query parameter."""
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get(TEAM_QUERY_PARAM)
    return parse_entry_id(values[0]) if values else None


def build_share_url(entry_id: int, base_url: Optional[str] = None) -> str:
    """Link that reopens the dashboard on the given entry."""
    parts = urlparse(base_url or get_share_base_url())
    query = parse_qs(parts.query)
    query[TEAM_QUERY_PARAM] = [str(entry_id)]
    return urlunparse(parts._replace(query=urlencode(query, doseq=True)))


def resolve_entry_id(
    location_param: str | int | None,
    store: EntryIdStore,
) -> Optional[int]:
    """
    Resolve which entry to show.

    Args:
        location_param: Entry id from the link or command line, if any
        store: Remembered entry id

    Returns:
        The explicit id when given, else the remembered one, else None
    """
    explicit = parse_entry_id(location_param)
    if explicit is not None:
        return explicit
    return store.load()
