# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Staking: lock-period accounting and stake-size tiers."""
from __future__ import annotations

from ghostspeak_engine.staking.ledger import (
    can_claim_rewards,
    can_unstake,
    effective_status,
    is_locked,
    is_unlockable,
    staking_tier,
    tier_benefits,
    time_until_unlock,
    validate_stake_request,
)
from ghostspeak_engine.staking.model import (
    LockPeriod,
    StakeRequest,
    StakingAccount,
    StakingStatus,
    StakingTier,
    TierBenefits,
)

__all__ = [
    "LockPeriod",
    "StakeRequest",
    "StakingAccount",
    "StakingStatus",
    "StakingTier",
    "TierBenefits",
    "can_claim_rewards",
    "can_unstake",
    "effective_status",
    "is_locked",
    "is_unlockable",
    "staking_tier",
    "tier_benefits",
    "time_until_unlock",
    "validate_stake_request",
]
