"""
Type definitions for the pitcher tendency feed.

The feed is tab-delimited, one row per pitcher appearance and pitch type,
with averages already computed upstream.
"""

from datetime import date
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field

from gameday.errors import TendencyFieldParseError
from gameday.gameday_types.game import GamedayID

# Feed column -> TendencyRecord field
TENDENCY_COLUMNS: dict[str, str] = {
    "pitcher": "pitcher_name",
    "team": "pitcher_team",
    "gid": "gameday_id",
    "date": "game_date",
    "away": "away_team",
    "home": "home_team",
    "pitches": "pitch_count",
    "speed": "avg_speed",
    "pitch_type": "pitch_type",
    "count": "type_count",
    "pfx_x": "avg_pfx_x",
    "pfx_z": "avg_pfx_z",
    "break_length": "avg_break_length",
    "spin_rate": "avg_spin_rate",
    "vx0": "avg_vx0",
    "vy0": "avg_vy0",
    "vz0": "avg_vz0",
    "x0": "avg_x0",
    "z0": "avg_z0",
}


class TendencyRow(TypedDict, total=False):
    """One feed row keyed by column name. Hints only - all values are strings."""

    pitcher: str
    team: str
    gid: str
    date: str
    away: str
    home: str
    pitches: str
    speed: str
    pitch_type: str
    count: str
    pfx_x: str
    pfx_z: str
    break_length: str
    spin_rate: str
    vx0: str
    vy0: str
    vz0: str
    x0: str
    z0: str
    # Surplus cells of a row longer than the header
    extra_cells: list[str]


class TendencyRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    pitcher_name: str
    pitcher_team: str
    gameday_id: GamedayID
    game_date: date
    away_team: str
    home_team: str
    pitch_count: int
    avg_speed: float
    pitch_type: str
    type_count: int
    avg_pfx_x: float
    avg_pfx_z: float
    avg_break_length: float
    avg_spin_rate: float
    avg_vx0: float
    avg_vy0: float
    avg_vz0: float
    avg_x0: float
    avg_z0: float


class TendencyHistory(BaseModel):
    """Rows that parsed, plus one error per row that did not."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    records: list[TendencyRecord] = Field(default_factory=list)
    errors: list[TendencyFieldParseError] = Field(default_factory=list)
