"""Schedule extraction: fetch and lift miniscoreboard.xml for a date."""

from datetime import date
from typing import List, cast

import requests

from gameday.config import GamedayConfig
from gameday.errors import ScheduleParseError
from gameday.extract.fetch import fetch
from gameday.extract.markup import attrs, parse_xml
from gameday.gameday_types import ScheduleGame


def day_path(game_date: date) -> str:
    """Feed directory for one day, relative to the base URL."""
    return f"year_{game_date.year:04d}/month_{game_date.month:02d}/day_{game_date.day:02d}"


def parse_schedule(payload: bytes) -> List[ScheduleGame]:
    """<games> -> one attribute row per <game>, in feed order."""
    root = parse_xml(payload, "games", ScheduleParseError)
    return [
        cast(ScheduleGame, attrs(game))
        for game in root.find_all("game", recursive=False)
    ]


def get_schedule_for_date(
    game_date: date,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[ScheduleGame]:
    """Pull the day's scoreboard. An empty list means no games that day."""
    payload = fetch(f"{day_path(game_date)}/miniscoreboard.xml", config, session)
    return parse_schedule(payload)
