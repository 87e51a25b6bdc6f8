# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import datetime, timedelta, timezone

ZERO = timedelta(0)


def ensure_utc(moment: datetime) -> datetime:
    """
    Return ``moment`` as an aware UTC datetime.

    Naive values are taken as UTC. Aware values are converted, so durations
    between two instants in a DST-observing zone count real elapsed time.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def elapsed(since: datetime, now: datetime) -> timedelta:
    """Time from ``since`` to ``now``. Negative if ``since`` lies in the future."""
    return ensure_utc(now) - ensure_utc(since)


def remaining(until: datetime, now: datetime) -> timedelta:
    """Time from ``now`` to ``until``. Negative once ``until`` has passed."""
    return ensure_utc(until) - ensure_utc(now)


def remaining_clamped(until: datetime, now: datetime) -> timedelta:
    """Like :func:`remaining` but never below zero."""
    return max(remaining(until, now), ZERO)


def has_reached(moment: datetime, now: datetime) -> bool:
    """True once ``now`` is at or after ``moment``."""
    return ensure_utc(now) >= ensure_utc(moment)


def whole_days(delta: timedelta) -> int:
    """Complete days in ``delta``; 0 for negative durations."""
    if delta <= ZERO:
        return 0
    return delta // timedelta(days=1)
