"""Encode and decode GamedayIDs (e.g. gid_2012_09_30_wasmlb_phimlb_1)."""

import re
from datetime import date

from gameday.errors import InvalidIdentifierComponents, MalformedIdentifier
from gameday.gameday_types import GamedayID

# Fixed-width date, then "_"-separated team codes and the sequence number
_GID_RE = re.compile(
    r"(?:gid_)?([0-9]{4})_([0-9]{2})_([0-9]{2})_([A-Za-z0-9]+)_([A-Za-z0-9]+)_([0-9]+)"
)
_CODE_RE = re.compile(r"[A-Za-z0-9]+")


def encode(game_date: date, away_code: str, home_code: str, sequence: int) -> GamedayID:
    """
    Build the GamedayID for one game. Raises InvalidIdentifierComponents if a
    team code is empty or cannot be carried by the positional layout, or the
    sequence is negative.
    """
    for side, code in (("away", away_code), ("home", home_code)):
        if not isinstance(code, str):
            raise InvalidIdentifierComponents(
                f"{side} team code must be a str, got {type(code).__name__}"
            )
        if not code:
            raise InvalidIdentifierComponents(f"{side} team code is empty")
        if not _CODE_RE.fullmatch(code):
            raise InvalidIdentifierComponents(
                f"{side} team code must be alphanumeric, got {code!r}"
            )
    if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence < 0:
        raise InvalidIdentifierComponents(
            f"sequence must be a non-negative int, got {sequence!r}"
        )
    if not isinstance(game_date, date):
        raise InvalidIdentifierComponents(
            f"game_date must be a date, got {type(game_date).__name__}"
        )
    return GamedayID(
        game_date=date(game_date.year, game_date.month, game_date.day),
        away_code=away_code,
        home_code=home_code,
        sequence=sequence,
    )


def decode(text: str) -> GamedayID:
    """Parse a GamedayID string, with or without the gid_ prefix."""
    match = _GID_RE.fullmatch(text.strip()) if isinstance(text, str) else None
    if not match:
        raise MalformedIdentifier(f"not a GamedayID: {text!r}")
    year, month, day, away, home, seq = match.groups()
    try:
        game_date = date(int(year), int(month), int(day))
    except ValueError as exc:
        raise MalformedIdentifier(f"bad date segment in GamedayID {text!r}") from exc
    return GamedayID(
        game_date=game_date, away_code=away, home_code=home, sequence=int(seq)
    )
