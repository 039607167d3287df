"""FPL API client.

Thin wrapper over a requests session: one GET per call, no retries and no
caching. Transport and HTTP failures raise FPLAPIError; undecodable or
invalid payloads raise FPLDataError.
"""

import logging
from typing import Any, Optional, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import get_config
from .constants import (
    BOOTSTRAP_ENDPOINT,
    FIXTURES_ENDPOINT,
    entry_endpoint,
    picks_endpoint,
)
from .exceptions import FPLAPIError, FPLDataError
from .schemas import BootstrapData, EntrySummary, Fixture, PicksResponse

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('cleansheet.fpl_client')

FIXTURE_LIST = TypeAdapter(list[Fixture])


class FPLClient:
    """Fetches and validates FPL API payloads."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        config = get_config()
        self.base_url = base_url or config.api_base_url
        self.timeout = timeout or config.timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent or config.user_agent,
            'Cache-Control': 'no-cache, no-store, must-revalidate',
        })

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    def get_json(self, endpoint: str) -> Any:
        """
        GET an endpoint relative to the API base URL and decode its JSON.

        Raises:
            FPLAPIError: On connection errors, timeouts or non-2xx responses
            FPLDataError: If the body is not valid JSON
        """
        url = f'{self.base_url}{endpoint}'
        logger.debug(f'GET {url}')

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f'HTTP {status} from {url}')
            raise FPLAPIError(url, f'HTTP {status}', status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error(f'Error fetching data from {url}: {e}')
            raise FPLAPIError(url, str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f'Response from {url} is not JSON: {e}')
            raise FPLDataError(url, 'response is not valid JSON') from e

    def _get_validated(self, endpoint: str, schema: type[T]) -> T:
        data = self.get_json(endpoint)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Schema validation failed for {endpoint}: {e}')
            raise FPLDataError(endpoint, str(e)) from e

    def get_bootstrap(self) -> BootstrapData:
        """Fetch teams, gameweeks and players (bootstrap-static)."""
        logger.info('Fetching FPL bootstrap-static data...')
        return self._get_validated(BOOTSTRAP_ENDPOINT, BootstrapData)

    def get_fixtures(self) -> list[Fixture]:
        """Fetch every fixture of the season."""
        logger.info('Fetching FPL fixtures data...')
        data = self.get_json(FIXTURES_ENDPOINT)
        try:
            return FIXTURE_LIST.validate_python(data)
        except ValidationError as e:
            logger.error(f'Schema validation failed for {FIXTURES_ENDPOINT}: {e}')
            raise FPLDataError(FIXTURES_ENDPOINT, str(e)) from e

    def get_entry(self, entry_id: int) -> EntrySummary:
        """Fetch a manager's entry summary."""
        logger.info(f'Fetching entry {entry_id}...')
        return self._get_validated(entry_endpoint(entry_id), EntrySummary)

    def get_picks(self, entry_id: int, gameweek: int) -> PicksResponse:
        """Fetch the players an entry picked for a gameweek."""
        logger.info(f'Fetching GW{gameweek} picks for entry {entry_id}...')
        return self._get_validated(picks_endpoint(entry_id, gameweek), PicksResponse)
