# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Escrow lifecycle rules.

Every function here is a pure function of an :class:`Escrow` snapshot and,
where time matters, an explicit ``now``. The status tables below must stay
exhaustive over :class:`EscrowStatus`; :func:`exhaustive` enforces that at
import time.

Eligibility matrix (before dispute and work-start checks)::

    status        active  release  dispute  cancel  overdue-eligible
    created         -        -        -       x           x
    funded          x        x        x       x           x
    in_progress     x        x        x       -           x
    completed       -        -        -       -           -
    released        -        -        -       -           -
    disputed        -        -        -       -           x
    cancelled       -        -        -       -           -
"""
from __future__ import annotations

from datetime import datetime, timedelta

from ghostspeak_engine.config import EscrowConfig
from ghostspeak_engine.errors import DraftRejectedError
from ghostspeak_engine.escrow.model import (
    DisputeDraft,
    DisputeStatus,
    Escrow,
    EscrowAction,
    EscrowDraft,
    EscrowStatus,
)
from ghostspeak_engine.money import format_amount
from ghostspeak_engine.timewindow import elapsed, has_reached, remaining
from ghostspeak_engine.types import exhaustive

_S = EscrowStatus

_ACTIVE = exhaustive(
    EscrowStatus,
    {
        _S.CREATED: False,
        _S.FUNDED: True,
        _S.IN_PROGRESS: True,
        _S.COMPLETED: False,
        _S.RELEASED: False,
        _S.DISPUTED: False,
        _S.CANCELLED: False,
    },
)

_CANCELLABLE = exhaustive(
    EscrowStatus,
    {
        _S.CREATED: True,
        _S.FUNDED: True,
        _S.IN_PROGRESS: False,
        _S.COMPLETED: False,
        _S.RELEASED: False,
        _S.DISPUTED: False,
        _S.CANCELLED: False,
    },
)

# Statuses in which a passed deadline still matters.
_DEADLINE_BINDING = exhaustive(
    EscrowStatus,
    {
        _S.CREATED: True,
        _S.FUNDED: True,
        _S.IN_PROGRESS: True,
        _S.COMPLETED: False,
        _S.RELEASED: False,
        _S.DISPUTED: True,
        _S.CANCELLED: False,
    },
)

_SETTLED = exhaustive(
    EscrowStatus,
    {
        _S.CREATED: False,
        _S.FUNDED: False,
        _S.IN_PROGRESS: False,
        _S.COMPLETED: False,
        _S.RELEASED: True,
        _S.DISPUTED: False,
        _S.CANCELLED: True,
    },
)

_GLYPHS = exhaustive(
    EscrowStatus,
    {
        _S.CREATED: "NEW",
        _S.FUNDED: "FND",
        _S.IN_PROGRESS: "WIP",
        _S.COMPLETED: "DON",
        _S.RELEASED: "PAID",
        _S.DISPUTED: "DSP",
        _S.CANCELLED: "VOID",
    },
)

_DISPUTE_OPEN = exhaustive(
    DisputeStatus,
    {
        DisputeStatus.OPEN: True,
        DisputeStatus.UNDER_REVIEW: True,
        DisputeStatus.RESOLVED: False,
        DisputeStatus.CLOSED: False,
    },
)


def has_open_dispute(escrow: Escrow) -> bool:
    """True when a dispute exists and has not been resolved or closed."""
    return escrow.dispute is not None and _DISPUTE_OPEN[escrow.dispute.status]


def is_active(escrow: Escrow) -> bool:
    """True while funds are held for work that is funded or under way."""
    return _ACTIVE[escrow.status]


def is_settled(escrow: Escrow) -> bool:
    """True once funds have left the escrow, by release or cancellation."""
    return _SETTLED[escrow.status]


def is_overdue(escrow: Escrow, now: datetime) -> bool:
    """True when the deadline has strictly passed on an escrow that is still open."""
    if escrow.deadline is None:
        return False
    return _DEADLINE_BINDING[escrow.status] and remaining(escrow.deadline, now) < timedelta(0)


def time_until_deadline(escrow: Escrow, now: datetime) -> timedelta | None:
    """Time left before the deadline, negative once overdue; ``None`` without a deadline."""
    if escrow.deadline is None:
        return None
    return remaining(escrow.deadline, now)


def duration(escrow: Escrow, now: datetime) -> timedelta:
    """
    How long the escrow has existed.

    Measured from ``created_at``. A released or cancelled escrow stops the
    clock at its closing instant; an open one runs until ``now``.
    """
    end = escrow.released_at or escrow.cancelled_at
    return elapsed(escrow.created_at, end if end is not None else now)


def can_release(escrow: Escrow) -> bool:
    """True when funds may be released to the agent."""
    return _ACTIVE[escrow.status] and not has_open_dispute(escrow)


def can_dispute(escrow: Escrow) -> bool:
    """True when either party may raise a new dispute."""
    return _ACTIVE[escrow.status] and not has_open_dispute(escrow)


def can_cancel(escrow: Escrow) -> bool:
    """
    True when the requester may cancel and recover funds.

    Requires a cancellable status, no open dispute, and no work-start
    signal. When the collaborator cannot say whether work began
    (``work_started is None``) only status and dispute are checked.
    """
    return (
        _CANCELLABLE[escrow.status]
        and not has_open_dispute(escrow)
        and escrow.work_started is not True
    )


def allowed_actions(escrow: Escrow) -> frozenset[EscrowAction]:
    """The set of actions currently legal for ``escrow``."""
    checks = {
        EscrowAction.RELEASE: can_release(escrow),
        EscrowAction.DISPUTE: can_dispute(escrow),
        EscrowAction.CANCEL: can_cancel(escrow),
    }
    return frozenset(action for action, allowed in checks.items() if allowed)


def formatted_amount(escrow: Escrow) -> str:
    """The escrowed amount at the token's precision, e.g. ``"2.500000000 SOL"``."""
    return format_amount(escrow.amount, escrow.token)


def status_glyph(status: EscrowStatus) -> str:
    """Short symbolic tag for ``status``; colour and styling belong to the shell."""
    return _GLYPHS[EscrowStatus(status)]


def validate_escrow_draft(
    draft: EscrowDraft,
    now: datetime,
    config: EscrowConfig | None = None,
) -> None:
    """
    Check a new-escrow request against the program's creation rules.

    Raises:
        DraftRejectedError: Listing every rule the draft breaks.
    """
    config = config or EscrowConfig()
    problems: list[str] = []
    if not draft.agent.strip():
        problems.append("agent address is required")
    if draft.amount < config.min_amount:
        problems.append(f"amount must be at least {config.min_amount} smallest units")
    if not draft.description.strip():
        problems.append("description is required")
    elif len(draft.description) > config.max_description_length:
        problems.append(
            f"description must be at most {config.max_description_length} characters"
        )
    if draft.deadline is not None and has_reached(draft.deadline, now):
        problems.append("deadline must be in the future")
    if problems:
        raise DraftRejectedError("escrow", problems)


def validate_dispute_draft(draft: DisputeDraft, config: EscrowConfig | None = None) -> None:
    """
    Check a dispute request.

    Raises:
        DraftRejectedError: If the reason is empty or too long.
    """
    config = config or EscrowConfig()
    problems: list[str] = []
    if not draft.reason.strip():
        problems.append("dispute reason is required")
    elif len(draft.reason) > config.max_dispute_reason_length:
        problems.append(
            f"reason must be at most {config.max_dispute_reason_length} characters"
        )
    if problems:
        raise DraftRejectedError("dispute", problems)
