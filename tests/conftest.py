"""Shared fixtures: an in-memory feed server behind a fake requests.Session."""

from typing import Callable, Dict, Tuple, Union
from unittest.mock import MagicMock

import pytest

from gameday.config import GamedayConfig

BASE_URL = "http://feed.test/components/game/mlb"
TENDENCY_URL = "http://tendency.test/{pitcher_id}/{gid}.tsv"

Feed = Union[bytes, str, Tuple[int, bytes]]


@pytest.fixture
def config() -> GamedayConfig:
    return GamedayConfig(base_url=BASE_URL, tendency_url=TENDENCY_URL, timeout=5)


@pytest.fixture
def feed_session() -> Callable[[Dict[str, Feed]], MagicMock]:
    """
    Build a session whose get() serves the given url -> body mapping.
    A (status, body) tuple sets the status code; unknown URLs answer 404.
    """

    def build(feeds: Dict[str, Feed]) -> MagicMock:
        def get(url: str, **kwargs: object) -> MagicMock:
            resp = MagicMock()
            feed = feeds.get(url, (404, b"not found"))
            if isinstance(feed, tuple):
                resp.status_code, resp.content = feed
            else:
                resp.status_code = 200
                resp.content = feed.encode() if isinstance(feed, str) else feed
            return resp

        session = MagicMock()
        session.get.side_effect = get
        return session

    return build
