"""Feed locations and HTTP settings, read from the environment."""

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "http://gd2.mlb.com/components/game/mlb"
DEFAULT_TENDENCY_URL = (
    "http://www.brooksbaseball.net/pfxVB/tabdel_expanded.php"
    "?pitchSel={pitcher_id}&game={gid}/&s_type=&h_size=700&v_size=500"
)


class GamedayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    # Must contain {pitcher_id} and {gid}
    tendency_url: str = DEFAULT_TENDENCY_URL
    timeout: float = Field(default=30, gt=0)
    user_agent: str = "gameday-feed/0.1"


def load_config() -> GamedayConfig:
    """
    Build config from GAMEDAY_* environment variables, falling back to the
    public feed defaults. Raises ValueError (pydantic ValidationError) on a
    bad value, e.g. a non-numeric GAMEDAY_TIMEOUT.
    """
    return GamedayConfig(
        base_url=os.environ.get("GAMEDAY_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        tendency_url=os.environ.get("GAMEDAY_TENDENCY_URL", DEFAULT_TENDENCY_URL),
        timeout=os.environ.get("GAMEDAY_TIMEOUT", 30),
        user_agent=os.environ.get("GAMEDAY_USER_AGENT", "gameday-feed/0.1"),
    )
