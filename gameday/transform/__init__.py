from gameday.transform.gameday_id import decode, encode
from gameday.transform.games import classify_status, derive_gameday_id, transform_games
from gameday.transform.plays import (
    classify_hit_outcome,
    transform_events,
    transform_hits,
    transform_pitches,
)
from gameday.transform.roster import transform_pitchers
from gameday.transform.tendency import transform_tendency_row, transform_tendency_rows

__all__ = [
    "encode",
    "decode",
    "classify_status",
    "derive_gameday_id",
    "transform_games",
    "transform_pitchers",
    "transform_tendency_row",
    "transform_tendency_rows",
    "classify_hit_outcome",
    "transform_events",
    "transform_pitches",
    "transform_hits",
]
