# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Escrow snapshot models.

An ``Escrow`` holds a requester's payment until the agent's work is accepted.
Snapshots are built by the ledger collaborator and never mutated here.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from ghostspeak_engine.money import TokenInfo
from ghostspeak_engine.types import Address, Units, UtcDatetime


class EscrowStatus(str, Enum):
    """Lifecycle states of an escrow account on the ledger."""

    CREATED = "created"
    FUNDED = "funded"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    RELEASED = "released"
    DISPUTED = "disputed"
    CANCELLED = "cancelled"


class DisputeStatus(str, Enum):
    """States of a dispute raised against an escrow."""

    OPEN = "open"
    UNDER_REVIEW = "under_review"
    RESOLVED = "resolved"
    CLOSED = "closed"


class EscrowAction(str, Enum):
    """Actions the shell may offer for an escrow."""

    RELEASE = "release"
    DISPUTE = "dispute"
    CANCEL = "cancel"


class Dispute(BaseModel, frozen=True):
    """A dispute attached to an escrow."""

    status: DisputeStatus
    initiator: Address
    reason: str = ""
    evidence: tuple[str, ...] = ()


class Escrow(BaseModel, frozen=True):
    """
    Immutable snapshot of an escrowed payment.

    Attributes:
        id: Opaque escrow identifier.
        client: Address of the requester who funds the escrow.
        agent: Address of the agent who is paid on release.
        amount: Escrowed amount in the token's smallest unit.
        token: Display metadata for the payment token.
        status: Current lifecycle state.
        created_at: When the escrow account was created.
        funded_at: When funds arrived, if they have.
        deadline: Optional delivery deadline.
        released_at: When funds were released to the agent.
        cancelled_at: When the escrow was cancelled.
        dispute: The dispute raised against this escrow, if any.
        milestones: Ordered milestone labels; may be empty.
        work_started: Collaborator-supplied signal that the agent has begun
            work. ``None`` means the signal is unavailable.
    """

    id: str = Field(..., min_length=1)
    client: Address
    agent: Address
    amount: Units
    token: TokenInfo
    status: EscrowStatus
    created_at: UtcDatetime
    funded_at: UtcDatetime | None = None
    deadline: UtcDatetime | None = None
    released_at: UtcDatetime | None = None
    cancelled_at: UtcDatetime | None = None
    dispute: Dispute | None = None
    milestones: tuple[str, ...] = ()
    work_started: bool | None = None
    description: str = ""
    job_id: str | None = None

    @model_validator(mode="after")
    def _consistent_with_status(self) -> Escrow:
        if self.status is EscrowStatus.CREATED:
            if self.funded_at is not None:
                raise ValueError("funded_at is set but the escrow has not been funded")
            if self.dispute is not None:
                raise ValueError("an unfunded escrow cannot carry a dispute")
        if self.status is EscrowStatus.DISPUTED and self.dispute is None:
            raise ValueError("a disputed escrow must carry its dispute")
        return self


class EscrowDraft(BaseModel, frozen=True):
    """Parameters a requester supplies to open a new escrow."""

    agent: str
    amount: Units
    token: TokenInfo
    description: str
    deadline: UtcDatetime | None = None
    milestones: tuple[str, ...] = ()
    job_id: str | None = None


class DisputeDraft(BaseModel, frozen=True):
    """Parameters for raising a dispute."""

    reason: str
    evidence: tuple[str, ...] = ()
