"""Read-only access to MLB Gameday feeds: schedules, rosters, plays and pitcher tendencies."""

from gameday.api import (
    find_pitchers,
    get_game,
    get_pitcher,
    list_events,
    list_games,
    list_hits,
    list_pitchers,
    list_pitches,
    pitcher_history,
    to_calendar_date,
    to_gameday_id,
)
from gameday.config import GamedayConfig, load_config
from gameday.errors import (
    EventParseError,
    FeedError,
    FeedNotFound,
    FeedParseError,
    FeedServerError,
    FeedUnavailable,
    GamedayError,
    GameIndexOutOfRange,
    InvalidIdentifierComponents,
    MalformedIdentifier,
    PitcherNotFound,
    RosterParseError,
    ScheduleParseError,
    TendencyFieldParseError,
    TendencyParseError,
)
from gameday.transform import decode, encode

__all__ = [
    # operations
    "list_games",
    "get_game",
    "list_pitchers",
    "get_pitcher",
    "find_pitchers",
    "pitcher_history",
    "list_events",
    "list_pitches",
    "list_hits",
    "encode",
    "decode",
    "to_calendar_date",
    "to_gameday_id",
    # config
    "GamedayConfig",
    "load_config",
    # errors
    "GamedayError",
    "FeedError",
    "FeedUnavailable",
    "FeedNotFound",
    "FeedServerError",
    "MalformedIdentifier",
    "InvalidIdentifierComponents",
    "FeedParseError",
    "ScheduleParseError",
    "RosterParseError",
    "EventParseError",
    "TendencyParseError",
    "TendencyFieldParseError",
    "PitcherNotFound",
    "GameIndexOutOfRange",
]
