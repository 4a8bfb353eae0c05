"""Feed retrieval: one HTTP GET per call, bytes out, typed failures."""

import logging

import requests

from gameday.config import GamedayConfig, load_config
from gameday.errors import FeedNotFound, FeedServerError, FeedUnavailable

logger = logging.getLogger(__name__)


def resource_url(resource_path: str, config: GamedayConfig) -> str:
    """Absolute URLs pass through; relative paths hang off config.base_url."""
    if resource_path.startswith(("http://", "https://")):
        return resource_path
    return f"{config.base_url.rstrip('/')}/{resource_path.lstrip('/')}"


def fetch(
    resource_path: str,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> bytes:
    """
    HTTP GET a feed resource and return the raw body. No retries.

    Raises FeedUnavailable on connection errors/timeouts, FeedNotFound on
    404/410 and FeedServerError on 5xx.
    """
    config = config or load_config()
    url = resource_url(resource_path, config)
    getter = session.get if session is not None else requests.get
    logger.debug("GET %s", url)
    try:
        resp = getter(
            url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
    except requests.RequestException as exc:
        raise FeedUnavailable(f"cannot reach {url}: {exc}", url) from exc

    status = resp.status_code
    if status in (404, 410):
        raise FeedNotFound(f"{url} not found (HTTP {status})", url, status)
    if status >= 500:
        raise FeedServerError(f"{url} failed (HTTP {status})", url, status)
    if not 200 <= status < 300:
        raise FeedUnavailable(f"{url} returned HTTP {status}", url, status)
    logger.debug("fetched %d bytes from %s", len(resp.content), url)
    return resp.content
