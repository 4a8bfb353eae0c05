"""
Gameday feed type definitions.

Import from here for convenience:
    from gameday.gameday_types import GamedayID, GameSummary, PitchRecord
"""

from gameday.gameday_types.game import (
    GamedayID,
    GameScore,
    GameStatus,
    GameStatusKind,
    GameSummary,
    ScheduleGame,
    TeamRecord,
)
from gameday.gameday_types.plays import (
    GameEvent,
    Half,
    HitOutcome,
    HitOutcomeKind,
    HitRecord,
    PitchRecord,
    RawEvent,
    RawHit,
    RawPitch,
)
from gameday.gameday_types.roster import PitcherInfo, RosterPlayer
from gameday.gameday_types.tendency import (
    TENDENCY_COLUMNS,
    TendencyHistory,
    TendencyRecord,
    TendencyRow,
)

__all__ = [
    # game
    "GamedayID",
    "ScheduleGame",
    "GameStatus",
    "GameStatusKind",
    "GameScore",
    "TeamRecord",
    "GameSummary",
    # roster
    "RosterPlayer",
    "PitcherInfo",
    # plays
    "Half",
    "RawEvent",
    "RawPitch",
    "RawHit",
    "GameEvent",
    "PitchRecord",
    "HitOutcomeKind",
    "HitOutcome",
    "HitRecord",
    # tendency
    "TENDENCY_COLUMNS",
    "TendencyRow",
    "TendencyRecord",
    "TendencyHistory",
]
