"""
Transform tendency feed rows into TendencyRecords.

Values are already aggregated upstream; this only coerces types and
renames columns. A row with a bad cell is skipped and reported, the rest of
the history is kept.
"""

import logging
import math
from datetime import date
from typing import Any, Callable, Dict, List

import pendulum

from gameday.errors import MalformedIdentifier, TendencyFieldParseError
from gameday.gameday_types import (
    TENDENCY_COLUMNS,
    TendencyHistory,
    TendencyRecord,
    TendencyRow,
)
from gameday.transform.gameday_id import decode

logger = logging.getLogger(__name__)


def _required_text(value: Any) -> str:
    if value is None or not str(value).strip():
        raise ValueError("blank")
    return str(value).strip()


def _strict_float(value: Any) -> float:
    result = float(_required_text(value))
    if not math.isfinite(result):
        raise ValueError("not finite")
    return result


def _strict_int(value: Any) -> int:
    result = _strict_float(value)
    if not result.is_integer():
        raise ValueError("not a whole number")
    return int(result)


def _iso_date(value: Any) -> date:
    parsed = pendulum.parse(_required_text(value), exact=True)
    if not isinstance(parsed, date):
        raise ValueError("not a date")
    return date(parsed.year, parsed.month, parsed.day)


def _gameday_id(value: Any) -> Any:
    try:
        return decode(_required_text(value))
    except MalformedIdentifier as exc:
        raise ValueError(str(exc)) from exc


_COERCE: Dict[str, Callable[[Any], Any]] = {
    "pitcher_name": _required_text,
    "pitcher_team": _required_text,
    "gameday_id": _gameday_id,
    "game_date": _iso_date,
    "away_team": _required_text,
    "home_team": _required_text,
    "pitch_count": _strict_int,
    "pitch_type": _required_text,
    "type_count": _strict_int,
}


def transform_tendency_row(row: TendencyRow, index: int) -> TendencyRecord:
    """Coerce one row. Raises TendencyFieldParseError naming the first bad field."""
    if row.get("extra_cells"):
        raise TendencyFieldParseError(index, "extra_cells", row["extra_cells"])
    values: Dict[str, Any] = {}
    for column, field in TENDENCY_COLUMNS.items():
        raw = row.get(column)
        try:
            values[field] = _COERCE.get(field, _strict_float)(raw)
        except ValueError as exc:
            raise TendencyFieldParseError(index, field, raw) from exc
    return TendencyRecord(**values)


def transform_tendency_rows(rows: List[TendencyRow]) -> TendencyHistory:
    records: List[TendencyRecord] = []
    errors: List[TendencyFieldParseError] = []
    for index, row in enumerate(rows):
        try:
            records.append(transform_tendency_row(row, index))
        except TendencyFieldParseError as exc:
            logger.warning("skipping tendency row: %s", exc)
            errors.append(exc)
    return TendencyHistory(records=records, errors=errors)
