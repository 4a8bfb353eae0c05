"""
Type definitions for the Gameday schedule feed and game identity.

Based on miniscoreboard.xml (one <game> element per scheduled game).
"""

from datetime import date, datetime
from enum import Enum
from typing import NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict


# --- TypedDict (hints only, no validation) ---
# Attribute rows lifted straight from the XML; every value is a string.


class ScheduleGame(TypedDict):
    """A single <game> element from miniscoreboard.xml. Hints only."""

    # Present on every game the feed publishes
    away_team_name: str
    home_team_name: str
    away_code: str
    home_code: str
    status: str
    # Optional (missing on older days, TBD or postponed games)
    gameday_link: NotRequired[str]
    id: NotRequired[str]
    game_nbr: NotRequired[str]
    away_win: NotRequired[str]
    away_loss: NotRequired[str]
    home_win: NotRequired[str]
    home_loss: NotRequired[str]
    time_date: NotRequired[str]
    ampm: NotRequired[str]
    time_zone: NotRequired[str]
    away_team_runs: NotRequired[str]
    home_team_runs: NotRequired[str]
    venue: NotRequired[str]
    ind: NotRequired[str]
    double_header_sw: NotRequired[str]


# --- Pydantic models (validation + extra="ignore") ---


class GamedayID(BaseModel):
    """
    Composite identity of one published game: date, matchup and the
    double-header sequence. str() gives the canonical feed form,
    e.g. 2012_09_30_wasmlb_phimlb_1.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    game_date: date
    away_code: str
    home_code: str
    sequence: int

    def __str__(self) -> str:
        return (
            f"{self.game_date:%Y_%m_%d}_{self.away_code}_{self.home_code}_{self.sequence}"
        )

    @property
    def directory(self) -> str:
        """Feed directory name for this game (gid_ prefixed)."""
        return f"gid_{self}"


class GameStatusKind(str, Enum):
    PREVIEW = "Preview"
    PRE_GAME = "Pre-Game"
    WARMUP = "Warmup"
    IN_PROGRESS = "In Progress"
    DELAYED = "Delayed"
    FINAL = "Final"
    GAME_OVER = "Game Over"
    COMPLETED_EARLY = "Completed Early"
    POSTPONED = "Postponed"
    SUSPENDED = "Suspended"
    CANCELLED = "Cancelled"
    OTHER = "Other"


class GameStatus(BaseModel):
    """Feed status text plus its known classification (OTHER when unknown)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    kind: GameStatusKind
    raw: str


class TeamRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    wins: int
    losses: int


class GameScore(BaseModel):
    """Runs per side. None until the game has a score."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    away: int | None = None
    home: int | None = None


class GameSummary(BaseModel):
    """One scheduled game, as of the moment the schedule feed was fetched."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    gameday_id: GamedayID
    away: TeamRecord
    home: TeamRecord
    away_code: str
    home_code: str
    start_time: datetime | None = None
    status: GameStatus
    score: GameScore
    venue: str = ""
