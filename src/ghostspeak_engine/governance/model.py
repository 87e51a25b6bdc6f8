# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from ghostspeak_engine.types import Address, Count, UtcDatetime

MIN_VOTING_PERIOD = timedelta(days=1)
MAX_VOTING_PERIOD = timedelta(days=30)


class ProposalStatus(str, Enum):
    """Ledger states of a governance proposal."""

    ACTIVE = "active"
    PASSED = "passed"
    FAILED = "failed"
    EXECUTED = "executed"
    CANCELLED = "canceled"


class ProposalType(str, Enum):
    """Categories of governance proposal."""

    PARAMETER_CHANGE = "parameter_change"
    TREASURY_SPEND = "treasury_spend"
    UPGRADE_PROGRAM = "upgrade_program"
    EMERGENCY = "emergency"
    GENERAL = "general"


class Proposal(BaseModel, frozen=True):
    """
    Immutable snapshot of a governance proposal and its running tally.

    Vote counts are stake-weighted and therefore plain non-negative integers.
    A voting window that ends before it starts is rejected at construction.
    """

    id: str = Field(..., min_length=1)
    proposer: Address
    type: ProposalType
    status: ProposalStatus
    title: str
    description: str = ""
    voting_starts_at: UtcDatetime
    voting_ends_at: UtcDatetime
    votes_for: Count = 0
    votes_against: Count = 0
    votes_abstain: Count = 0
    quorum_required: Count = 0

    @model_validator(mode="after")
    def _window_is_ordered(self) -> Proposal:
        if self.voting_starts_at > self.voting_ends_at:
            raise ValueError("voting_starts_at must not be after voting_ends_at")
        return self


class MultisigDraft(BaseModel, frozen=True):
    """
    Parameters for creating a multisig governance wallet.

    Owner-count and threshold limits are checked by
    :func:`~ghostspeak_engine.governance.multisig.validate_multisig_draft`,
    which reports every broken rule at once.
    """

    owners: tuple[Address, ...]
    threshold: Annotated[int, Field(ge=0, le=255)]


class ProposalDraft(BaseModel, frozen=True):
    """
    Parameters for submitting a new proposal.

    Unlike snapshots, drafts are user input, so the program's creation limits
    are enforced as field constraints.
    """

    type: ProposalType
    title: Annotated[str, Field(min_length=1, max_length=200)]
    description: Annotated[str, Field(min_length=1, max_length=2000)]
    voting_period: timedelta = MIN_VOTING_PERIOD

    @model_validator(mode="after")
    def _period_in_bounds(self) -> ProposalDraft:
        if not (MIN_VOTING_PERIOD <= self.voting_period <= MAX_VOTING_PERIOD):
            raise ValueError("voting_period must be between 1 and 30 days")
        return self
