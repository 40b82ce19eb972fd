"""Query parameter building and wire encoding shared by every resource client."""

from __future__ import annotations

import datetime as dt
import json
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode


def format_datetime(value: dt.datetime) -> str:
    """Full ISO-8601 with the caller's own UTC offset, e.g. 2024-02-05T00:00:00-06:00.

    Fractional seconds carry only the digits they need (``00:00:00.5``).
    """
    if not isinstance(value, dt.datetime):
        raise TypeError(f"Expected a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"Datetime {value.isoformat()} must be timezone-aware")
    text = value.isoformat()
    if value.microsecond:
        fraction = f"{value.microsecond:06d}"
        text = text.replace(f".{fraction}", f".{fraction.rstrip('0')}", 1)
    return text


def format_date(value: dt.date) -> str:
    """YYYY-MM-DD."""
    if isinstance(value, dt.datetime):
        value = value.date()
    if not isinstance(value, dt.date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    return value.isoformat()


def format_time(value: dt.time) -> str:
    """HH:MM, or HH:MM:SS[.ffffff] when the time carries seconds."""
    if not isinstance(value, dt.time):
        raise TypeError(f"Expected a time, got {type(value).__name__}")
    value = value.replace(tzinfo=None)
    if value.second == 0 and value.microsecond == 0:
        return value.isoformat(timespec="minutes")
    return value.isoformat()


def encode_value(value: Any) -> str:
    """Render a single parameter value as the text the API expects."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return json.dumps([v.value if isinstance(v, Enum) else v for v in value])
    if isinstance(value, dt.datetime):
        return format_datetime(value)
    if isinstance(value, dt.date):
        return format_date(value)
    if isinstance(value, dt.time):
        return format_time(value)
    return str(value)


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    """Percent-encode ``params``, leaving out every ``None`` value."""
    if not params:
        return ""
    pairs = [(key, encode_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs, quote_via=quote)


def build_params(
    required: Mapping[str, Any],
    optional: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge required and optional parameters.

    Required entries must not be ``None``; optional entries that are ``None``
    are dropped so they never reach the query string.
    """
    missing = [name for name, value in required.items() if value is None]
    if missing:
        raise ValueError(f"Missing required parameters: {', '.join(missing)}")
    params: Dict[str, Any] = dict(required)
    for name, value in (optional or {}).items():
        if value is not None:
            params[name] = value
    return params


def asset_identifier(asset_name: Optional[str], display_name: Optional[str]) -> Dict[str, str]:
    """Pick the asset key to send; ``asset_name`` wins when both are given."""
    if asset_name is not None:
        return {"asset_name": asset_name}
    if display_name is not None:
        return {"asset_display_name": display_name}
    raise ValueError("Must provide either 'asset_name' or 'display_name'.")


__all__ = [
    "format_datetime",
    "format_date",
    "format_time",
    "encode_value",
    "encode_query",
    "build_params",
    "asset_identifier",
]
