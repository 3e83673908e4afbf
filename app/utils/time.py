"""Timestamp helpers for order creation."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def display_timestamp(moment: datetime, tz_name: str) -> str:
    """Format an instant the way order sheets have always shown it.

    Example: ``17 October 2026, 03:04:05 PM`` in the configured zone. The
    string is written once at creation and never recomputed on read.
    """
    local = moment.astimezone(ZoneInfo(tz_name))
    return f"{local.day} {local:%B %Y}, {local:%I:%M:%S %p}"
