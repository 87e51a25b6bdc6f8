# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import timedelta
from enum import Enum, IntEnum
from typing import Annotated, Any

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from ghostspeak_engine.types import Address, Units, UtcDatetime


class LockPeriod(IntEnum):
    """Lock durations offered by the staking program, valued in days."""

    DAYS_30 = 30
    DAYS_60 = 60
    DAYS_90 = 90
    DAYS_180 = 180
    DAYS_365 = 365

    @property
    def duration(self) -> timedelta:
        return timedelta(days=int(self))

    def label(self) -> str:
        """Return a human-readable label for this lock period."""
        return "1 year" if self is LockPeriod.DAYS_365 else f"{int(self)} days"


class StakingStatus(str, Enum):
    """
    Status of a staking position.

    Locked → Unlocked happens once the lock elapses; Unlocked → Withdrawn is
    terminal and only ever performed by the ledger.
    """

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    WITHDRAWN = "withdrawn"


class StakingTier(str, Enum):
    """Benefit brackets by stake size."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


class TierBenefits(BaseModel, frozen=True):
    """
    Perks attached to a staking tier.

    Attributes:
        reputation_boost: Percentage boost applied to the staker's reputation.
        verified_badge: Whether the staker's agents show a verified badge.
        premium_benefits: Whether premium listing benefits apply.
    """

    reputation_boost: float
    verified_badge: bool
    premium_benefits: bool


_DATETIME = TypeAdapter(UtcDatetime)


class StakingAccount(BaseModel, frozen=True):
    """
    Immutable snapshot of a staker's locked position.

    ``unlocks_at`` is always ``staked_at + lock_period``. It is derived when
    the collaborator omits it and rejected when it disagrees.
    """

    staker: Address
    amount: Units
    lock_period: LockPeriod
    staked_at: UtcDatetime
    unlocks_at: UtcDatetime
    status: StakingStatus
    unclaimed_rewards: Units = 0
    current_apy: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0
    estimated_apy: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0

    @model_validator(mode="before")
    @classmethod
    def _derive_unlocks_at(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("unlocks_at") is not None:
            return data
        try:
            staked_at = _DATETIME.validate_python(data["staked_at"])
            period = LockPeriod(int(data["lock_period"]))
        except (KeyError, TypeError, ValueError):
            # Field validation reports the offending input.
            return data
        return {**data, "unlocks_at": staked_at + period.duration}

    @model_validator(mode="after")
    def _unlock_matches_period(self) -> StakingAccount:
        expected = self.staked_at + self.lock_period.duration
        if self.unlocks_at != expected:
            raise ValueError(
                f"unlocks_at must equal staked_at + {int(self.lock_period)} days "
                f"({expected.isoformat()}); got {self.unlocks_at.isoformat()}"
            )
        return self


class StakeRequest(BaseModel, frozen=True):
    """Parameters for opening a stake, in GHOST smallest units."""

    amount: Units
    lock_period: LockPeriod
