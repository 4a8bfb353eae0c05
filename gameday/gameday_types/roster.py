"""
Type definitions for the Gameday roster feed.

Based on players.xml: two <team> elements (away, home), each listing
<player> elements with a position attribute.
"""

from typing import NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict


class RosterPlayer(TypedDict):
    """A <player> element plus the code of its enclosing <team>. Hints only."""

    id: str
    team_code: str
    first: NotRequired[str]
    last: NotRequired[str]
    boxname: NotRequired[str]
    position: NotRequired[str]
    rl: NotRequired[str]
    num: NotRequired[str]


class PitcherInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    pitcher_id: str
    team_code: str
    name: str
    throws: str | None = None
    number: str | None = None
