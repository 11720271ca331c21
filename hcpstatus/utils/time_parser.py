"""Timestamp utilities for RFC 3339 values found in Kubernetes status.

Provides:
- ZERO_TIME: the "no timestamp observed" sentinel used by the status models
- parse_rfc3339(): strict parsing of RFC 3339 strings
- format_relative_time() / days_until(): display helpers for the presenter
"""

from __future__ import annotations

import math
import re
from contextlib import suppress
from datetime import datetime, timezone
from typing import Any, Final

ZERO_TIME: Final = datetime.min.replace(tzinfo=timezone.utc)

_SECONDS_PER_MINUTE: Final = 60
_SECONDS_PER_HOUR: Final = 3600
_SECONDS_PER_DAY: Final = 86400

_RFC3339_PATTERN: Final = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def is_zero_time(value: datetime | None) -> bool:
    """Return True when value is unset or the ZERO_TIME sentinel."""
    return value is None or value == ZERO_TIME


def parse_rfc3339(timestamp: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Only the RFC 3339 profile is accepted: a full date, a time with seconds
    and an explicit offset. Fractional seconds beyond microseconds are
    truncated.

    Args:
        timestamp: Raw value, usually a string such as "2026-05-07T12:00:00Z"

    Returns:
        Aware datetime, or None when the value is empty or unparsable.
    """
    if not isinstance(timestamp, str):
        return None
    match = _RFC3339_PATTERN.fullmatch(timestamp)
    if match is None:
        return None

    offset = match["offset"]
    normalized = match["base"].replace("t", "T")
    if match["fraction"]:
        normalized += "." + match["fraction"][:6].ljust(6, "0")
    normalized += "+00:00" if offset in ("Z", "z") else offset

    parsed: datetime | None = None
    with suppress(ValueError):
        parsed = datetime.fromisoformat(normalized)
    return parsed


def format_relative_time(then: datetime, now: datetime) -> str:
    """Format the age of a timestamp as "Ns ago", "Nm ago", "Nh ago" or "Nd ago"."""
    elapsed = max(0.0, (now - then).total_seconds())
    if elapsed < _SECONDS_PER_MINUTE:
        return f"{int(elapsed)}s ago"
    if elapsed < _SECONDS_PER_HOUR:
        return f"{int(elapsed // _SECONDS_PER_MINUTE)}m ago"
    if elapsed < _SECONDS_PER_DAY:
        return f"{int(elapsed // _SECONDS_PER_HOUR)}h ago"
    return f"{int(elapsed // _SECONDS_PER_DAY)}d ago"


def days_until(then: datetime, now: datetime) -> int:
    """Whole days remaining until then, rounded up."""
    return math.ceil((then - now).total_seconds() / _SECONDS_PER_DAY)
