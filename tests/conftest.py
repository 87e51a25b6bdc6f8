# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for ghostspeak-engine tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import pytest

from ghostspeak_engine.clock import FixedClock
from ghostspeak_engine.escrow import Escrow, EscrowStatus
from ghostspeak_engine.governance import Proposal, ProposalStatus, ProposalType
from ghostspeak_engine.money import PaymentToken, TokenInfo, token_info
from ghostspeak_engine.staking import LockPeriod, StakingAccount, StakingStatus

from tests._data import AGENT, CLIENT, NOW


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to NOW."""
    return FixedClock(NOW)


@pytest.fixture
def sol() -> TokenInfo:
    return token_info(PaymentToken.SOL)


@pytest.fixture
def make_escrow(sol: TokenInfo) -> Callable[..., Escrow]:
    """Factory for escrow snapshots; keyword overrides replace defaults."""

    def _make(**overrides: Any) -> Escrow:
        fields: dict[str, Any] = {
            "id": "esc-001",
            "client": CLIENT,
            "agent": AGENT,
            "amount": 2_500_000_000,
            "token": sol,
            "status": EscrowStatus.FUNDED,
            "created_at": NOW - timedelta(days=3),
            "description": "Summarise quarterly filings",
        }
        fields.update(overrides)
        return Escrow(**fields)

    return _make


@pytest.fixture
def make_proposal() -> Callable[..., Proposal]:
    """Factory for proposals whose voting window is open at NOW."""

    def _make(**overrides: Any) -> Proposal:
        fields: dict[str, Any] = {
            "id": "prop-001",
            "proposer": CLIENT,
            "type": ProposalType.PARAMETER_CHANGE,
            "status": ProposalStatus.ACTIVE,
            "title": "Reduce escrow fee to 1.5%",
            "voting_starts_at": NOW - timedelta(days=2),
            "voting_ends_at": NOW + timedelta(days=5),
            "votes_for": 0,
            "votes_against": 0,
            "votes_abstain": 0,
            "quorum_required": 500,
        }
        fields.update(overrides)
        return Proposal(**fields)

    return _make


@pytest.fixture
def make_account() -> Callable[..., StakingAccount]:
    """Factory for a 90-day stake placed 60 days before NOW (30 days left)."""

    def _make(**overrides: Any) -> StakingAccount:
        fields: dict[str, Any] = {
            "staker": CLIENT,
            "amount": 15_000_000_000,
            "lock_period": LockPeriod.DAYS_90,
            "staked_at": NOW - timedelta(days=60),
            "status": StakingStatus.LOCKED,
            "unclaimed_rewards": 0,
            "current_apy": 12.0,
            "estimated_apy": 12.0,
        }
        fields.update(overrides)
        return StakingAccount(**fields)

    return _make
