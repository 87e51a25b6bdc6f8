# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Lock and reward accounting for staking positions.

Only eligibility is derived here. Reward accrual and any early-unstake
penalty are computed by the staking program and arrive through the
snapshot's ``unclaimed_rewards``.
"""
from __future__ import annotations

from datetime import datetime, timedelta

from ghostspeak_engine.config import StakingConfig
from ghostspeak_engine.errors import DraftRejectedError
from ghostspeak_engine.money import PaymentToken, token_info
from ghostspeak_engine.staking.model import (
    StakeRequest,
    StakingAccount,
    StakingStatus,
    StakingTier,
    TierBenefits,
)
from ghostspeak_engine.timewindow import has_reached, remaining_clamped
from ghostspeak_engine.types import exhaustive

_TIER_BENEFITS = exhaustive(
    StakingTier,
    {
        StakingTier.BRONZE: TierBenefits(
            reputation_boost=5.0, verified_badge=False, premium_benefits=False
        ),
        StakingTier.SILVER: TierBenefits(
            reputation_boost=15.0, verified_badge=True, premium_benefits=False
        ),
        StakingTier.GOLD: TierBenefits(
            reputation_boost=15.0, verified_badge=True, premium_benefits=True
        ),
    },
)


def _ghost_units(whole_tokens: int) -> int:
    return whole_tokens * 10 ** token_info(PaymentToken.GHOST).decimals


def time_until_unlock(account: StakingAccount, now: datetime) -> timedelta:
    """Time left in the lock; exactly zero at and after ``unlocks_at``."""
    return remaining_clamped(account.unlocks_at, now)


def is_locked(account: StakingAccount, now: datetime) -> bool:
    """True while a Locked position is still inside its lock period."""
    return account.status is StakingStatus.LOCKED and not has_reached(account.unlocks_at, now)


def is_unlockable(account: StakingAccount, now: datetime) -> bool:
    """True when a Locked position has served its lock period."""
    return account.status is StakingStatus.LOCKED and has_reached(account.unlocks_at, now)


def can_unstake(account: StakingAccount, now: datetime) -> bool:
    return is_unlockable(account, now)


def can_claim_rewards(account: StakingAccount) -> bool:
    return account.unclaimed_rewards > 0


def effective_status(account: StakingAccount, now: datetime) -> StakingStatus:
    """
    The status the ledger will report once it catches up with ``now``.

    A Locked position past ``unlocks_at`` reads as Unlocked. Unlocked and
    Withdrawn are returned unchanged; Withdrawn is terminal.
    """
    if is_unlockable(account, now):
        return StakingStatus.UNLOCKED
    return account.status


def staking_tier(amount: int, config: StakingConfig | None = None) -> StakingTier:
    """Benefit tier for a stake of ``amount`` GHOST smallest units."""
    config = config or StakingConfig()
    if amount >= _ghost_units(config.gold_threshold):
        return StakingTier.GOLD
    if amount >= _ghost_units(config.silver_threshold):
        return StakingTier.SILVER
    return StakingTier.BRONZE


def tier_benefits(tier: StakingTier) -> TierBenefits:
    return _TIER_BENEFITS[StakingTier(tier)]


def validate_stake_request(request: StakeRequest, config: StakingConfig | None = None) -> None:
    """
    Check a stake request against the program's minimum.

    Raises:
        DraftRejectedError: If the amount is below ``config.min_stake`` GHOST.
    """
    config = config or StakingConfig()
    if request.amount < _ghost_units(config.min_stake):
        raise DraftRejectedError(
            "stake", [f"minimum stake is {config.min_stake:,} GHOST tokens"]
        )
