from gameday.extract.fetch import fetch, resource_url
from gameday.extract.plays import (
    fetch_events,
    fetch_hits,
    fetch_pitches,
    parse_events,
    parse_hits,
    parse_pitches,
)
from gameday.extract.roster import fetch_roster, game_path, parse_roster_players
from gameday.extract.schedule import day_path, get_schedule_for_date, parse_schedule
from gameday.extract.tendency import fetch_tendency_rows, parse_tendency_rows, tendency_url

__all__ = [
    "fetch",
    "resource_url",
    "day_path",
    "game_path",
    "get_schedule_for_date",
    "parse_schedule",
    "fetch_roster",
    "parse_roster_players",
    "tendency_url",
    "fetch_tendency_rows",
    "parse_tendency_rows",
    "fetch_events",
    "fetch_pitches",
    "fetch_hits",
    "parse_events",
    "parse_pitches",
    "parse_hits",
]
