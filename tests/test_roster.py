"""Unit tests for roster extract/transform (players.xml -> PitcherInfo)."""

import logging
from datetime import date
from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pytest

from gameday.config import GamedayConfig
from gameday.errors import RosterParseError
from gameday.extract.roster import fetch_roster, game_path, parse_roster_players
from gameday.transform.gameday_id import encode
from gameday.transform.roster import transform_pitchers

PLAYERS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<game venue="Citizens Bank Park" date="September 30, 2012">
  <team type="away" id="WAS" name="Washington Nationals">
    <player id="453286" first="Max" last="Scherzer" num="31" rl="R" position="P"/>
    <player id="150029" first="Ryan" last="Zimmerman" num="11" rl="R" position="3B"/>
    <player id="458681" first="Ross" last="Detwiler" num="48" rl="L" position="P"/>
    <coach position="manager" first="Davey" last="Johnson" id="116664"/>
  </team>
  <team type="home" id="PHI" name="Philadelphia Phillies">
    <player id="430935" first="Cole" last="Hamels" num="35" rl="L" position="P"/>
    <player id="999999" boxname="Callup" position="P"/>
  </team>
</game>
"""


def test_game_path() -> None:
    gid = encode(date(2012, 9, 30), "wasmlb", "phimlb", 1)
    assert game_path(gid, "players.xml") == (
        "year_2012/month_09/day_30/gid_2012_09_30_wasmlb_phimlb_1/players.xml"
    )


def test_parse_roster_players_tags_team_code() -> None:
    players = parse_roster_players(PLAYERS_XML)
    assert len(players) == 5
    assert players[0]["team_code"] == "WAS"
    assert players[-1]["team_code"] == "PHI"


def test_transform_pitchers_both_teams_only_pitchers() -> None:
    pitchers = transform_pitchers(parse_roster_players(PLAYERS_XML))
    assert set(pitchers) == {"453286", "458681", "430935", "999999"}
    detwiler = pitchers["458681"]
    assert detwiler.name == "Ross Detwiler"
    assert detwiler.team_code == "WAS"
    assert detwiler.throws == "L"
    assert pitchers["430935"].team_code == "PHI"
    assert pitchers["999999"].name == "Callup"
    assert pitchers["999999"].number is None


def test_transform_pitchers_duplicate_id_last_wins(caplog: pytest.LogCaptureFixture) -> None:
    players = [
        {"id": "1", "team_code": "WAS", "first": "A", "last": "One", "position": "P"},
        {"id": "1", "team_code": "PHI", "first": "B", "last": "Two", "position": "P"},
    ]
    with caplog.at_level(logging.DEBUG, logger="gameday.transform.roster"):
        pitchers = transform_pitchers(players)  # type: ignore[arg-type]
    assert list(pitchers) == ["1"]
    assert pitchers["1"].team_code == "PHI"
    assert pitchers["1"].name == "B Two"
    assert "listed twice" in caplog.text


def test_transform_pitchers_nameless_player() -> None:
    with pytest.raises(RosterParseError, match="has no name"):
        transform_pitchers([{"id": "7", "team_code": "WAS", "position": "P"}])


def test_parse_roster_players_team_without_id() -> None:
    payload = b'<game><team type="away"><player id="1" position="P"/></team></game>'
    with pytest.raises(RosterParseError, match="has no id"):
        parse_roster_players(payload)


def test_parse_roster_players_player_without_id() -> None:
    payload = b'<game><team type="away" id="WAS"><player first="X" position="P"/></team></game>'
    with pytest.raises(RosterParseError, match="without id"):
        parse_roster_players(payload)


def test_parse_roster_players_wrong_document() -> None:
    with pytest.raises(RosterParseError):
        parse_roster_players(b"<games/>")


def test_fetch_roster(
    config: GamedayConfig, feed_session: Callable[[Dict[str, Any]], MagicMock]
) -> None:
    gid = encode(date(2012, 9, 30), "wasmlb", "phimlb", 1)
    session = feed_session({f"{config.base_url}/{game_path(gid, 'players.xml')}": PLAYERS_XML})
    assert len(fetch_roster(gid, config, session)) == 5
