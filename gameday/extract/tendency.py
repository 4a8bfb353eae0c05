"""Tendency extraction: fetch a pitcher's tab-delimited appearance history."""

import io
import logging
from typing import List, Tuple, cast
from urllib.parse import quote

import pandas as pd
import requests

from gameday.config import GamedayConfig, load_config
from gameday.errors import TendencyParseError
from gameday.extract.fetch import fetch
from gameday.gameday_types import TENDENCY_COLUMNS, GamedayID, TendencyRow

logger = logging.getLogger(__name__)

# Stands in for the first cell of an over-long row until the row is rebuilt
_OVERFLOW_MARK = "\x1foverflow:"


def tendency_url(gameday_id: GamedayID, pitcher_id: str, config: GamedayConfig) -> str:
    return config.tendency_url.format(
        pitcher_id=quote(str(pitcher_id), safe=""),
        gid=quote(gameday_id.directory, safe=""),
    )


def _read_table(payload: bytes, **kwargs: object) -> pd.DataFrame:
    try:
        return pd.read_csv(
            io.BytesIO(payload),
            sep="\t",
            dtype=str,
            keep_default_na=False,
            index_col=False,
            **kwargs,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise TendencyParseError(f"unreadable tendency feed: {exc}") from exc


def parse_tendency_rows(payload: bytes) -> List[TendencyRow]:
    """
    Read the feed as strings (no type inference) and return one dict per row.
    Cells missing from short rows come back as None; a row with more cells
    than the header keeps its place and carries the surplus in extra_cells.
    Raises TendencyParseError when the table cannot be read or lacks a column.
    """
    if not payload or not payload.strip():
        raise TendencyParseError("empty tendency feed")
    width = len(_read_table(payload, nrows=0).columns)
    overflow: List[Tuple[str, List[str]]] = []

    def keep_overlong(bad_line: List[str]) -> List[str]:
        overflow.append((bad_line[0], bad_line[width:]))
        return [f"{_OVERFLOW_MARK}{len(overflow) - 1}"] + bad_line[1:width]

    frame = _read_table(payload, engine="python", on_bad_lines=keep_overlong)
    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c for c in TENDENCY_COLUMNS if c not in frame.columns]
    if missing:
        raise TendencyParseError(f"tendency feed missing columns: {missing}")

    first = frame.columns[0]
    extras: dict[int, List[str]] = {}
    for pos, cell in enumerate(frame[first]):
        if isinstance(cell, str) and cell.startswith(_OVERFLOW_MARK):
            original, surplus = overflow[int(cell[len(_OVERFLOW_MARK):])]
            frame.iat[pos, 0] = original
            extras[pos] = surplus

    frame = frame[list(TENDENCY_COLUMNS)].astype(object)
    frame = frame.where(frame.notna(), None)
    rows = cast(List[TendencyRow], frame.to_dict(orient="records"))
    for pos, surplus in extras.items():
        rows[pos]["extra_cells"] = surplus
    return rows


def fetch_tendency_rows(
    gameday_id: GamedayID,
    pitcher_id: str,
    config: GamedayConfig | None = None,
    session: requests.Session | None = None,
) -> List[TendencyRow]:
    config = config or load_config()
    payload = fetch(tendency_url(gameday_id, pitcher_id, config), config, session)
    rows = parse_tendency_rows(payload)
    logger.debug("pitcher %s: %d tendency row(s) for %s", pitcher_id, len(rows), gameday_id)
    return rows
