"""
Error taxonomy for the Gameday layer.

Transport failures (FeedError), identifier misuse, payload shape problems
(FeedParseError) and lookups over already-fetched data are kept apart so a
caller can tell "the feed is down" from "the feed changed format".
"""

from typing import Any


class GamedayError(Exception):
    """Base class for every error raised by this package."""


# --- transport ---


class FeedError(GamedayError):
    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FeedUnavailable(FeedError):
    """Connection failure, timeout, or an unexpected non-2xx response."""


class FeedNotFound(FeedError):
    """The feed server has no such resource (404/410)."""


class FeedServerError(FeedError):
    """The feed server answered with a 5xx."""


# --- identifiers ---


class MalformedIdentifier(GamedayError, ValueError):
    pass


class InvalidIdentifierComponents(GamedayError, ValueError):
    pass


# --- payload shape ---


class FeedParseError(GamedayError, ValueError):
    """Payload did not match the shape the parser expects."""


class ScheduleParseError(FeedParseError):
    pass


class RosterParseError(FeedParseError):
    pass


class EventParseError(FeedParseError):
    pass


class TendencyParseError(FeedParseError):
    pass


class TendencyFieldParseError(TendencyParseError):
    """One field of one tendency row could not be coerced."""

    def __init__(self, row: int, field: str, value: Any) -> None:
        super().__init__(f"tendency row {row}: cannot parse {field}={value!r}")
        self.row = row
        self.field = field
        self.value = value


# --- lookups ---


class PitcherNotFound(GamedayError, KeyError):
    def __init__(self, gameday_id: str, pitcher_id: str) -> None:
        super().__init__(f"pitcher {pitcher_id!r} not on roster for {gameday_id}")
        self.gameday_id = gameday_id
        self.pitcher_id = pitcher_id

    def __str__(self) -> str:
        return str(self.args[0])


class GameIndexOutOfRange(GamedayError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"game index {index} out of range ({count} game(s) scheduled)")
        self.index = index
        self.count = count
