"""
Type definitions for the per-game play feeds.

- game_events.xml: <atbat> and <action> entries per inning half
- inning/inning_all.xml: <pitch> elements nested in <atbat>
- inning/inning_hit.xml: one <hip> element per ball in play
"""

from datetime import datetime
from enum import Enum
from typing import Literal, TypedDict

from pydantic import BaseModel, ConfigDict

Half = Literal["top", "bottom"]


# --- TypedDict (hints only, no validation) ---
# Raw rows carry the element's attributes plus the context the extractor
# resolved from enclosing elements (inning number, half, at-bat).


class RawEvent(TypedDict):
    kind: str
    inning: str
    half: str
    attrs: dict[str, str]


class RawPitch(TypedDict):
    inning: str
    half: str
    atbat: dict[str, str]
    attrs: dict[str, str]


class RawHit(TypedDict):
    attrs: dict[str, str]


# --- Pydantic models ---


class GameEvent(BaseModel):
    """One play-by-play entry (an at-bat result or an in-play action)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    time: datetime | None = None
    inning: int
    half: Half
    number: int | None = None
    balls: int | None = None
    strikes: int | None = None
    outs: int | None = None
    description: str = ""
    kind: Literal["atbat", "action"]
    event: str = ""


class PitchRecord(BaseModel):
    """
    One thrown pitch with its tracking metrics.

    Every metric is optional: None means the feed did not measure it (or sent
    a value that does not parse), which is not the same as 0.0.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    time: datetime | None = None
    inning: int
    half: Half
    at_bat_number: int | None = None
    pitch_id: str = ""
    pitcher_id: str
    batter_id: str
    description: str = ""
    result: str = ""
    pitch_type: str | None = None
    type_confidence: float | None = None
    start_speed: float | None = None
    end_speed: float | None = None
    sz_top: float | None = None
    sz_bot: float | None = None
    pfx_x: float | None = None
    pfx_z: float | None = None
    px: float | None = None
    pz: float | None = None
    x0: float | None = None
    y0: float | None = None
    z0: float | None = None
    vx0: float | None = None
    vy0: float | None = None
    vz0: float | None = None
    ax: float | None = None
    ay: float | None = None
    az: float | None = None
    break_y: float | None = None
    break_angle: float | None = None
    break_length: float | None = None
    spin_dir: float | None = None
    spin_rate: float | None = None
    zone: float | None = None
    nasty: float | None = None
    x: float | None = None
    y: float | None = None
    cc: str = ""
    mt: str = ""


class HitOutcomeKind(str, Enum):
    HIT = "hit"
    OUT = "out"
    ERROR = "error"
    UNCLASSIFIED = "unclassified"


class HitOutcome(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    kind: HitOutcomeKind
    code: str


class HitRecord(BaseModel):
    """A ball in play located on the 250x250 pixel field diagram."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    inning: int
    half: Half
    pitcher_id: str
    batter_id: str
    outcome: HitOutcome
    description: str = ""
    x: float | None = None
    y: float | None = None
