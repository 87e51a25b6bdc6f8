# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Clock abstraction for the engine facade.

Derived-value functions never read the wall clock themselves; they take
``now`` as an argument. The facade obtains ``now`` from one of these clocks
so tests can pin time to a known instant.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable

from ghostspeak_engine.timewindow import ensure_utc


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current instant as an aware UTC datetime."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """
    A clock frozen at a given instant until moved explicitly.

    Example::

        clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
        clock.advance(timedelta(days=30))
    """

    __slots__ = ("_now",)

    def __init__(self, instant: datetime) -> None:
        self._now = ensure_utc(instant)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> None:
        """Move the clock to ``instant``."""
        self._now = ensure_utc(instant)

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by ``delta`` and return the new instant."""
        self._now = self._now + delta
        return self._now

    def __repr__(self) -> str:
        return f"FixedClock({self._now.isoformat()})"
