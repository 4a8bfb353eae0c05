"""Transform roster rows into a pitcher lookup."""

import logging
from typing import Dict, List

from gameday.errors import RosterParseError
from gameday.gameday_types import PitcherInfo, RosterPlayer
from gameday.transform.coerce import text

logger = logging.getLogger(__name__)

PITCHER_POSITION = "P"


def display_name(player: RosterPlayer) -> str:
    """First + last name, or the box score name when those are missing."""
    name = f"{text(player.get('first'))} {text(player.get('last'))}".strip()
    if not name:
        name = text(player.get("boxname"))
    if not name:
        raise RosterParseError(f"player {player['id']} has no name")
    return name


def transform_pitchers(players: List[RosterPlayer]) -> Dict[str, PitcherInfo]:
    """
    Every listed pitcher from both teams, keyed by player id. A repeated id
    replaces the earlier entry (last one wins).
    """
    pitchers: Dict[str, PitcherInfo] = {}
    for player in players:
        if text(player.get("position")).upper() != PITCHER_POSITION:
            continue
        pitcher_id = text(player["id"])
        if pitcher_id in pitchers:
            # TODO: decide whether a repeated id should merge entries instead of replacing
            logger.debug(
                "pitcher %s listed twice (%s, %s); keeping the later entry",
                pitcher_id,
                pitchers[pitcher_id].team_code,
                player["team_code"],
            )
        pitchers[pitcher_id] = PitcherInfo(
            pitcher_id=pitcher_id,
            team_code=text(player["team_code"]),
            name=display_name(player),
            throws=text(player.get("rl")) or None,
            number=text(player.get("num")) or None,
        )
    return pitchers
