"""Transform raw schedule rows into GameSummary records."""

import logging
from datetime import date, datetime
from typing import List, Optional

import pendulum

from gameday.errors import (
    InvalidIdentifierComponents,
    MalformedIdentifier,
    ScheduleParseError,
)
from gameday.gameday_types import (
    GamedayID,
    GameScore,
    GameStatus,
    GameStatusKind,
    GameSummary,
    ScheduleGame,
    TeamRecord,
)
from gameday.transform.coerce import text, to_int
from gameday.transform.gameday_id import decode, encode
from gameday.transform.validation import validate_game_summaries, validate_schedule_games

logger = logging.getLogger(__name__)

# Sport suffix the feed appends to team codes in GamedayIDs (was -> wasmlb)
SPORT_CODE = "mlb"
FEED_TIMEZONE = "America/New_York"

# Longest prefixes first so "Game Over" is not read as something shorter
_STATUS_PREFIXES = sorted(
    (k for k in GameStatusKind if k is not GameStatusKind.OTHER),
    key=lambda k: len(k.value),
    reverse=True,
)


def classify_status(raw: str) -> GameStatus:
    """Map feed status text onto a known kind, falling back to OTHER."""
    normalized = raw.strip().lower()
    for kind in _STATUS_PREFIXES:
        if normalized.startswith(kind.value.lower()):
            return GameStatus(kind=kind, raw=raw)
    return GameStatus(kind=GameStatusKind.OTHER, raw=raw)


def parse_start_time(game: ScheduleGame) -> Optional[datetime]:
    """time_date + ampm (e.g. "2012/09/30 1:35" "PM") as Eastern time."""
    time_date = text(game.get("time_date"))
    ampm = text(game.get("ampm")).upper()
    if not time_date or ampm not in ("AM", "PM"):
        return None
    try:
        return pendulum.from_format(
            f"{time_date} {ampm}", "YYYY/MM/DD h:mm A", tz=FEED_TIMEZONE
        )
    except ValueError:
        return None


def derive_gameday_id(game: ScheduleGame, game_date: date) -> GamedayID:
    """
    Prefer the feed's own gameday_link; otherwise build the ID from the team
    codes and game number.
    """
    link = text(game.get("gameday_link"))
    try:
        if link:
            gameday_id = decode(link)
        else:
            sequence = to_int(game.get("game_nbr") or "1")
            if sequence is None:
                raise InvalidIdentifierComponents(
                    f"game_nbr is not a number: {game.get('game_nbr')!r}"
                )
            gameday_id = encode(
                game_date,
                f"{text(game['away_code'])}{SPORT_CODE}",
                f"{text(game['home_code'])}{SPORT_CODE}",
                sequence,
            )
    except (MalformedIdentifier, InvalidIdentifierComponents) as exc:
        raise ScheduleParseError(f"cannot derive GamedayID: {exc}") from exc
    if gameday_id.game_date != game_date:
        # Resumed suspended games keep the date they started on
        logger.info("game %s listed on %s", gameday_id, game_date)
    return gameday_id


def _record(game: ScheduleGame, side: str) -> TeamRecord:
    wins = to_int(game.get(f"{side}_win"))  # type: ignore[misc]
    losses = to_int(game.get(f"{side}_loss"))  # type: ignore[misc]
    if wins is None or losses is None:
        raise ScheduleParseError(
            f"{side} record is not numeric: "
            f"{game.get(f'{side}_win')!r}-{game.get(f'{side}_loss')!r}"  # type: ignore[misc]
        )
    return TeamRecord(name=text(game[f"{side}_team_name"]), wins=wins, losses=losses)  # type: ignore[literal-required]


def transform_games(schedule_games: List[ScheduleGame], game_date: date) -> List[GameSummary]:
    """Clean raw scoreboard rows, keeping feed order."""
    validate_schedule_games(schedule_games)
    cleaned_data: List[GameSummary] = []
    for game in schedule_games:
        cleaned_data.append(
            GameSummary(
                gameday_id=derive_gameday_id(game, game_date),
                away=_record(game, "away"),
                home=_record(game, "home"),
                away_code=text(game["away_code"]),
                home_code=text(game["home_code"]),
                start_time=parse_start_time(game),
                status=classify_status(text(game["status"])),
                score=GameScore(
                    away=to_int(game.get("away_team_runs")),
                    home=to_int(game.get("home_team_runs")),
                ),
                venue=text(game.get("venue")),
            )
        )
    validate_game_summaries(cleaned_data)
    return cleaned_data
