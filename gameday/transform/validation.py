"""
Validation helpers for parsed schedule data.

Each validator raises ScheduleParseError (a ValueError) with a clear message
when the feed rows or the records built from them are inconsistent.
"""

from typing import Any, List

from gameday.errors import ScheduleParseError
from gameday.gameday_types import GameSummary

REQUIRED_SCHEDULE_KEYS = (
    "away_team_name",
    "home_team_name",
    "away_code",
    "home_code",
    "status",
    "away_win",
    "away_loss",
    "home_win",
    "home_loss",
)


def validate_schedule_games(games: Any) -> None:
    """
    Validate raw <game> rows from the schedule extract.
    """
    if not isinstance(games, list):
        raise ScheduleParseError(f"schedule data must be a list, got {type(games).__name__}")

    for i, g in enumerate(games):
        if not isinstance(g, dict):
            raise ScheduleParseError(f"game[{i}] must be a dict, got {type(g).__name__}")
        missing = [k for k in REQUIRED_SCHEDULE_KEYS if not g.get(k)]
        if missing:
            raise ScheduleParseError(f"game[{i}] missing required attributes: {missing}")


def validate_game_summaries(games: List[GameSummary]) -> None:
    """
    Validate transformed games: each GamedayID names exactly one game and
    carries the teams listed on its row.
    """
    seen: dict[str, int] = {}
    for i, g in enumerate(games):
        gid = str(g.gameday_id)
        if gid in seen:
            raise ScheduleParseError(
                f"game[{i}] repeats GamedayID {gid} of game[{seen[gid]}]"
            )
        seen[gid] = i
        if not g.gameday_id.away_code.lower().startswith(g.away_code.lower()):
            raise ScheduleParseError(
                f"game[{i}] GamedayID {gid} does not match away team {g.away_code!r}"
            )
        if not g.gameday_id.home_code.lower().startswith(g.home_code.lower()):
            raise ScheduleParseError(
                f"game[{i}] GamedayID {gid} does not match home team {g.home_code!r}"
            )
