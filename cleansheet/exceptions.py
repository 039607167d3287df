"""Exception types raised by the CleanSheet data layer."""


class CleanSheetError(Exception):
    """Base class for errors that abort a dashboard operation."""


class FPLAPIError(CleanSheetError):
    """A request to the FPL API failed (network error or bad status)."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f'{url}: {message}')


class FPLDataError(CleanSheetError):
    """An FPL API payload could not be decoded or failed schema validation."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f'Invalid data from {source}: {message}')
