"""Roster extraction: fetch and lift players.xml for one game."""

from typing import List

import requests

from gameday.config import GamedayConfig
from gameday.errors import RosterParseError
from gameday.extract.fetch import fetch
from gameday.extract.markup import attrs, parse_xml
from gameday.extract.schedule import day_path
from gameday.gameday_types import GamedayID, RosterPlayer


def game_path(gameday_id: GamedayID, resource: str) -> str:
    """Path of a per-game resource, relative to the base URL."""
    return f"{day_path(gameday_id.game_date)}/{gameday_id.directory}/{resource}"


def parse_roster_players(payload: bytes) -> List[RosterPlayer]:
    """Parse players.xml teams -> players into rows tagged with the team code."""
    root = parse_xml(payload, "game", RosterParseError)
    res: List[RosterPlayer] = []
    for team in root.find_all("team", recursive=False):
        team_code = team.get("id")
        if not team_code:
            raise RosterParseError(f"<team type={team.get('type')!r}> has no id")
        for player in team.find_all("player", recursive=False):
            row = attrs(player)
            if not row.get("id"):
                raise RosterParseError(f"<player> without id on team {team_code}")
            res.append({**row, "team_code": str(team_code)})  # type: ignore[typeddict-item]
    return res


def fetch_roster(
    gameday_id: GamedayID,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[RosterPlayer]:
    payload = fetch(game_path(gameday_id, "players.xml"), config, session)
    return parse_roster_players(payload)
