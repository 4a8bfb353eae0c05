"""
Caller-facing operations.

Each call fetches its feed fresh and returns newly built records; nothing is
cached between calls. Dates must already be resolved to a calendar date (an
ISO YYYY-MM-DD string is accepted too). GamedayIDs may be passed as
GamedayID objects or as strings.
"""

import logging
from datetime import date
from typing import Dict, List, Union

import pendulum
import requests

from gameday.config import GamedayConfig
from gameday.errors import GameIndexOutOfRange, MalformedIdentifier, PitcherNotFound
from gameday.extract import (
    fetch_events,
    fetch_hits,
    fetch_pitches,
    fetch_roster,
    fetch_tendency_rows,
    get_schedule_for_date,
)
from gameday.gameday_types import (
    GamedayID,
    GameEvent,
    GameSummary,
    HitRecord,
    PitcherInfo,
    PitchRecord,
    TendencyHistory,
)
from gameday.transform import (
    decode,
    transform_events,
    transform_games,
    transform_hits,
    transform_pitchers,
    transform_pitches,
    transform_tendency_rows,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, str]
GamedayIDLike = Union[GamedayID, str]


def to_calendar_date(value: DateLike) -> date:
    """Accept a date or a strict ISO date string. Never defaults to today."""
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    try:
        parsed = pendulum.parse(str(value).strip(), exact=True)
    except ValueError as exc:
        raise ValueError(f"not an ISO calendar date: {value!r}") from exc
    if not isinstance(parsed, date):
        raise ValueError(f"not an ISO calendar date: {value!r}")
    return date(parsed.year, parsed.month, parsed.day)


def to_gameday_id(value: GamedayIDLike) -> GamedayID:
    if isinstance(value, GamedayID):
        return value
    if not isinstance(value, str):
        raise MalformedIdentifier(f"not a GamedayID: {value!r}")
    return decode(value)


def list_games(
    game_date: DateLike,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[GameSummary]:
    """Games scheduled on game_date in scoreboard order (possibly empty)."""
    day = to_calendar_date(game_date)
    games = transform_games(get_schedule_for_date(day, config, session), day)
    logger.debug("%s: %d game(s)", day, len(games))
    return games


def get_game(
    game_date: DateLike,
    index: int,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> GameSummary:
    """Game number `index` (zero-based) of the day's scoreboard."""
    games = list_games(game_date, config, session)
    if not 0 <= index < len(games):
        raise GameIndexOutOfRange(index, len(games))
    return games[index]


def list_pitchers(
    gameday_id: GamedayIDLike,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> Dict[str, PitcherInfo]:
    """Every pitcher on either roster, keyed by pitcher id."""
    return transform_pitchers(fetch_roster(to_gameday_id(gameday_id), config, session))


def get_pitcher(
    gameday_id: GamedayIDLike,
    pitcher_id: str,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> PitcherInfo:
    pitchers = list_pitchers(gameday_id, config, session)
    try:
        return pitchers[str(pitcher_id)]
    except KeyError:
        raise PitcherNotFound(str(gameday_id), str(pitcher_id)) from None


def find_pitchers(
    gameday_id: GamedayIDLike,
    name: str,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[PitcherInfo]:
    """Pitchers whose display name contains `name` (case-insensitive)."""
    needle = name.strip().lower()
    return [
        p for p in list_pitchers(gameday_id, config, session).values()
        if needle in p.name.lower()
    ]


def pitcher_history(
    gameday_id: GamedayIDLike,
    pitcher_id: str,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> TendencyHistory:
    """
    The pitcher's appearance history as published alongside gameday_id.
    Rows that fail to coerce are reported in `errors`, not raised.
    """
    rows = fetch_tendency_rows(to_gameday_id(gameday_id), str(pitcher_id), config, session)
    return transform_tendency_rows(rows)


def list_events(
    gameday_id: GamedayIDLike,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[GameEvent]:
    return transform_events(fetch_events(to_gameday_id(gameday_id), config, session))


def list_pitches(
    gameday_id: GamedayIDLike,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[PitchRecord]:
    return transform_pitches(fetch_pitches(to_gameday_id(gameday_id), config, session))


def list_hits(
    gameday_id: GamedayIDLike,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[HitRecord]:
    return transform_hits(fetch_hits(to_gameday_id(gameday_id), config, session))
