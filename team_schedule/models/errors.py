from datetime import date
from typing import Iterable, Optional


class ScheduleError(Exception):
    """Base exception for every error that aborts a schedule run."""

    pass


class InputError(ScheduleError):
    """Caller supplied inputs that cannot produce a report."""

    pass


class InvalidDateRange(InputError):
    """Raised when the end date precedes the begin date."""

    def __init__(self, begin: date, end: date):
        self.begin = begin
        self.end = end
        super().__init__(
            f"End date {end.isoformat()} is earlier than begin date {begin.isoformat()}"
        )


class InvalidGameRange(InputError):
    """Raised when the minimum game count exceeds the maximum."""

    def __init__(self, field: str, min_games: int, max_games: int):
        self.field = field
        self.min_games = min_games
        self.max_games = max_games
        super().__init__(
            f"Minimum {field} games ({min_games}) is greater than maximum ({max_games})"
        )


class NoMatchingTeams(InputError):
    """Raised when none of the requested team names exist."""

    def __init__(self, requested: Iterable[str]):
        self.requested = sorted(requested)
        super().__init__(f"No teams matched: {', '.join(self.requested)}")


class TransportError(ScheduleError):
    """Raised for any non-success response (or network failure) from the API."""

    def __init__(self, url: str, status: Optional[int], description: str):
        self.url = url
        self.status = status
        self.description = description
        status_text = status if status is not None else "no response"
        super().__init__(f"Request to {url} failed ({status_text}): {description}")


UpstreamError = TransportError


class NormalizationError(ScheduleError):
    """Raised when an API payload does not have the expected shape."""

    pass
