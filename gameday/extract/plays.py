"""
Play feed extraction: game_events.xml, inning/inning_all.xml and
inning/inning_hit.xml for one game.

Rows keep document order; inning number and half come from the enclosing
elements.
"""

from typing import Iterator, List, Tuple

import requests
from bs4 import Tag

from gameday.config import GamedayConfig
from gameday.errors import EventParseError
from gameday.extract.fetch import fetch
from gameday.extract.markup import attrs, parse_xml
from gameday.extract.roster import game_path
from gameday.gameday_types import GamedayID, RawEvent, RawHit, RawPitch

HALVES = ("top", "bottom")


def _halves(root: Tag) -> Iterator[Tuple[str, str, Tag]]:
    """Yield (inning num, half name, half element) in play order."""
    for inning in root.find_all("inning", recursive=False):
        num = str(inning.get("num", ""))
        for half in HALVES:
            element = inning.find(half, recursive=False)
            if isinstance(element, Tag):
                yield num, half, element


def parse_events(payload: bytes) -> List[RawEvent]:
    root = parse_xml(payload, "game", EventParseError)
    res: List[RawEvent] = []
    for num, half, element in _halves(root):
        for entry in element.find_all(["atbat", "action"], recursive=False):
            res.append(
                {"kind": entry.name, "inning": num, "half": half, "attrs": attrs(entry)}
            )
    return res


def parse_pitches(payload: bytes) -> List[RawPitch]:
    root = parse_xml(payload, "game", EventParseError)
    res: List[RawPitch] = []
    for num, half, element in _halves(root):
        for atbat in element.find_all("atbat", recursive=False):
            atbat_attrs = attrs(atbat)
            for pitch in atbat.find_all("pitch", recursive=False):
                res.append(
                    {
                        "inning": num,
                        "half": half,
                        "atbat": atbat_attrs,
                        "attrs": attrs(pitch),
                    }
                )
    return res


def parse_hits(payload: bytes) -> List[RawHit]:
    root = parse_xml(payload, "hitchart", EventParseError)
    return [{"attrs": attrs(hip)} for hip in root.find_all("hip", recursive=False)]


def fetch_events(
    gameday_id: GamedayID,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[RawEvent]:
    return parse_events(fetch(game_path(gameday_id, "game_events.xml"), config, session))


def fetch_pitches(
    gameday_id: GamedayID,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[RawPitch]:
    return parse_pitches(
        fetch(game_path(gameday_id, "inning/inning_all.xml"), config, session)
    )


def fetch_hits(
    gameday_id: GamedayID,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[RawHit]:
    return parse_hits(
        fetch(game_path(gameday_id, "inning/inning_hit.xml"), config, session)
    )
