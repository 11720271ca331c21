"""Utility helpers for hcpstatus."""

from hcpstatus.utils.time_parser import (
    ZERO_TIME,
    days_until,
    format_relative_time,
    is_zero_time,
    parse_rfc3339,
)

__all__ = [
    "ZERO_TIME",
    "days_until",
    "format_relative_time",
    "is_zero_time",
    "parse_rfc3339",
]
