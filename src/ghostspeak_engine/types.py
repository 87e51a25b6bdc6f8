# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Shared field types and enum helpers for entity snapshots.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, TypeVar

from pydantic import AfterValidator, Field

from ghostspeak_engine.timewindow import ensure_utc

E = TypeVar("E", bound=Enum)
V = TypeVar("V")

MAX_UNITS = 2**64 - 1
"""Largest amount the ledger can hold (unsigned 64-bit)."""

UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
"""A datetime field normalised to aware UTC; naive input is taken as UTC."""

Address = Annotated[str, Field(min_length=1)]
"""A non-empty ledger account address."""

Units = Annotated[int, Field(ge=0, le=MAX_UNITS)]
"""A non-negative amount in a token's smallest unit, within the ledger's u64 range."""

Count = Annotated[int, Field(ge=0)]
"""A non-negative tally."""


def exhaustive(enum_cls: type[E], table: Mapping[E, V]) -> dict[E, V]:
    """
    Return ``table`` as a dict after checking it covers every member of ``enum_cls``.

    Status → behaviour tables are built with this at import time, so adding
    a status without deciding its behaviour fails loudly instead of falling
    through to a default.

    Raises:
        TypeError: If a member is missing or a key is not a member.
    """
    missing = [member.name for member in enum_cls if member not in table]
    extra = [key for key in table if not isinstance(key, enum_cls)]
    if missing or extra:
        raise TypeError(
            f"{enum_cls.__name__} table is not exhaustive; "
            f"missing={missing}, unexpected={extra}."
        )
    return dict(table)
