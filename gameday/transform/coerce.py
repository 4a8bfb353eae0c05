"""Lenient scalar coercion for optional feed attributes."""

import math
from datetime import datetime
from typing import Any, Optional

import pendulum


def to_float(x: Any) -> Optional[float]:
    """Float value of x, or None when x is missing, blank or not a finite number."""
    if x is None:
        return None
    s = str(x).strip()
    if not s or s in ("-", "--", "null", "undefined"):
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def to_int(x: Any) -> Optional[int]:
    value = to_float(x)
    if value is None or not value.is_integer():
        return None
    return int(value)


def to_time(x: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as tfs_zulu (2012-09-30T17:36:21Z)."""
    if not x or not str(x).strip():
        return None
    try:
        parsed = pendulum.parse(str(x).strip())
    except ValueError:
        return None
    return parsed if isinstance(parsed, datetime) else None


def text(x: Any) -> str:
    return str(x).strip() if x is not None else ""
