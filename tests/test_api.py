"""End-to-end tests of the caller-facing operations against canned feeds."""

from datetime import date
from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pendulum
import pytest

import gameday
from gameday.config import GamedayConfig
from gameday.errors import (
    FeedServerError,
    GameIndexOutOfRange,
    MalformedIdentifier,
    PitcherNotFound,
)
from gameday.extract.roster import game_path
from gameday.extract.tendency import tendency_url
from gameday.transform.gameday_id import decode
from tests.test_plays import HITS_XML, PITCHES_XML
from tests.test_roster import PLAYERS_XML
from tests.test_schedule import game_xml, scoreboard
from tests.test_tendency import tendency_row, tsv

DAY = date(2012, 9, 30)
OTHER_MATCHUPS = [
    ("nyn", "mia"), ("atl", "pit"), ("cin", "sln"), ("chn", "ari"), ("col", "sfn"),
    ("hou", "mil"), ("lan", "sdn"), ("det", "kca"), ("tor", "bal"), ("bos", "nya"),
    ("min", "cle"),
]


@pytest.fixture
def feeds(config: GamedayConfig) -> Dict[str, Any]:
    games = [game_xml(away, home) for away, home in OTHER_MATCHUPS]
    games.append(game_xml("was", "phi", away_team_name="Nationals", home_team_name="Phillies"))
    gid = decode("2012_09_30_wasmlb_phimlb_1")
    base = config.base_url
    return {
        f"{base}/year_2012/month_09/day_30/miniscoreboard.xml": scoreboard(*games),
        f"{base}/year_2012/month_10/day_04/miniscoreboard.xml": scoreboard(),
        f"{base}/{game_path(gid, 'players.xml')}": PLAYERS_XML,
        f"{base}/{game_path(gid, 'inning/inning_all.xml')}": PITCHES_XML,
        f"{base}/{game_path(gid, 'inning/inning_hit.xml')}": HITS_XML,
        tendency_url(gid, "458681", config): tsv(
            [tendency_row(day) for day in (9, 15, 20, 25, 30)]
        ),
    }


def test_nationals_scenario(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    session = feed_session(feeds)
    games = gameday.list_games("2012-09-30", config, session)
    assert len(games) == 12
    game = games[11]
    assert game.away.name == "Nationals"
    assert decode(str(game.gameday_id)).game_date == DAY

    pitchers = gameday.list_pitchers(game.gameday_id, config, session)
    detwiler = next(p for p in pitchers.values() if p.name == "Ross Detwiler")

    history = gameday.pitcher_history(game.gameday_id, detwiler.pitcher_id, config, session)
    assert history.records
    assert not history.errors
    assert history.records[0].pitcher_team == detwiler.team_code


def test_list_games_order_is_stable(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    session = feed_session(feeds)
    first = gameday.list_games(DAY, config, session)
    second = gameday.list_games(pendulum.date(2012, 9, 30), config, session)
    assert [str(g.gameday_id) for g in first] == [str(g.gameday_id) for g in second]
    assert [g.away_code for g in first[:3]] == ["nyn", "atl", "cin"]
    assert gameday.get_game(DAY, 11, config, session) == first[11]


def test_list_games_no_games_is_empty(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    assert gameday.list_games("2012-10-04", config, feed_session(feeds)) == []


def test_get_game_out_of_range(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    with pytest.raises(GameIndexOutOfRange, match="game index 12"):
        gameday.get_game(DAY, 12, config, feed_session(feeds))
    with pytest.raises(IndexError):
        gameday.get_game("2012-10-04", 0, config, feed_session(feeds))


def test_list_games_rejects_free_text_date(config: GamedayConfig) -> None:
    with pytest.raises(ValueError, match="ISO calendar date"):
        gameday.list_games("3 days ago", config, MagicMock())


def test_list_games_propagates_transport_errors(
    config: GamedayConfig, feed_session: Callable[[Dict[str, Any]], MagicMock]
) -> None:
    url = f"{config.base_url}/year_2012/month_09/day_30/miniscoreboard.xml"
    with pytest.raises(FeedServerError):
        gameday.list_games(DAY, config, feed_session({url: (503, b"")}))


def test_get_pitcher_and_find(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    session = feed_session(feeds)
    gid = "gid_2012_09_30_wasmlb_phimlb_1"
    assert gameday.get_pitcher(gid, "430935", config, session).name == "Cole Hamels"
    assert [p.pitcher_id for p in gameday.find_pitchers(gid, "detwiler", config, session)] == ["458681"]
    with pytest.raises(PitcherNotFound) as info:
        gameday.get_pitcher(gid, "150029", config, session)
    assert info.value.pitcher_id == "150029"


def test_operations_reject_malformed_ids(config: GamedayConfig) -> None:
    session = MagicMock()
    with pytest.raises(MalformedIdentifier):
        gameday.list_pitchers("wasmlb-phimlb", config, session)
    session.get.assert_not_called()


def test_pitches_and_hits_are_independent(
    config: GamedayConfig,
    feed_session: Callable[[Dict[str, Any]], MagicMock],
    feeds: Dict[str, Any],
) -> None:
    session = feed_session(feeds)
    gid = "2012_09_30_wasmlb_phimlb_1"
    hits = gameday.list_hits(gid, config, session)
    pitches = gameday.list_pitches(gid, config, session)
    assert len(hits) == 4 and len(pitches) == 3
    assert session.get.call_count == 2
