"""Unit tests for gameday.transform.gameday_id (encode, decode)."""

from datetime import date

import pendulum
import pytest

from gameday.errors import InvalidIdentifierComponents, MalformedIdentifier
from gameday.transform.gameday_id import decode, encode


def test_encode_canonical_string() -> None:
    gid = encode(date(2012, 9, 30), "wasmlb", "phimlb", 1)
    assert str(gid) == "2012_09_30_wasmlb_phimlb_1"
    assert gid.directory == "gid_2012_09_30_wasmlb_phimlb_1"


def test_encode_is_deterministic() -> None:
    a = encode(date(2012, 9, 30), "wasmlb", "phimlb", 2)
    b = encode(date(2012, 9, 30), "wasmlb", "phimlb", 2)
    assert a == b
    assert str(a) == str(b)


@pytest.mark.parametrize(
    "game_date, away, home, sequence",
    [
        (date(2012, 9, 30), "wasmlb", "phimlb", 1),
        (date(2012, 9, 30), "wasmlb", "phimlb", 2),
        (date(2001, 1, 2), "a", "b", 0),
        (date(2019, 3, 20), "seaMLB", "oakMLB", 12),
    ],
)
def test_decode_encode_round_trip(game_date: date, away: str, home: str, sequence: int) -> None:
    gid = encode(game_date, away, home, sequence)
    assert decode(str(gid)) == gid
    assert decode(gid.directory) == gid


def test_encode_accepts_pendulum_date() -> None:
    gid = encode(pendulum.date(2012, 9, 30), "wasmlb", "phimlb", 1)
    assert type(gid.game_date) is date
    assert decode(str(gid)) == gid


def test_encode_rejects_empty_team_code() -> None:
    with pytest.raises(InvalidIdentifierComponents, match="away team code is empty"):
        encode(date(2012, 9, 30), "", "phimlb", 1)
    with pytest.raises(InvalidIdentifierComponents, match="home team code is empty"):
        encode(date(2012, 9, 30), "wasmlb", "", 1)


def test_encode_rejects_delimiter_in_team_code() -> None:
    with pytest.raises(InvalidIdentifierComponents, match="alphanumeric"):
        encode(date(2012, 9, 30), "was_mlb", "phimlb", 1)


def test_encode_rejects_negative_sequence() -> None:
    with pytest.raises(InvalidIdentifierComponents, match="non-negative"):
        encode(date(2012, 9, 30), "wasmlb", "phimlb", -1)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2012_09_30_wasmlb_phimlb",
        "2012-09-30_wasmlb_phimlb_1",
        "2012_9_30_wasmlb_phimlb_1",
        "2012_09_30_wasmlb_phimlb_x",
        "gid_2012_09_30__phimlb_1",
        "2012_13_01_wasmlb_phimlb_1",
    ],
)
def test_decode_rejects_malformed(text: str) -> None:
    with pytest.raises(MalformedIdentifier):
        decode(text)


def test_decode_components() -> None:
    gid = decode("gid_2012_09_30_wasmlb_phimlb_1")
    assert gid.game_date == date(2012, 9, 30)
    assert (gid.away_code, gid.home_code, gid.sequence) == ("wasmlb", "phimlb", 1)


@pytest.mark.parametrize("away", ["wasmlb\n", "wasmlb ", "wasmlbé"])
def test_encode_rejects_codes_that_cannot_round_trip(away: str) -> None:
    with pytest.raises(InvalidIdentifierComponents, match="alphanumeric"):
        encode(date(2012, 9, 30), away, "phimlb", 1)


def test_encode_rejects_non_string_team_code() -> None:
    with pytest.raises(InvalidIdentifierComponents, match="must be a str"):
        encode(date(2012, 9, 30), 123, "phimlb", 1)  # type: ignore[arg-type]


def test_decode_rejects_trailing_newline_inside_code() -> None:
    with pytest.raises(MalformedIdentifier):
        decode("2012_09_30_wasmlb\n_phimlb_1")
