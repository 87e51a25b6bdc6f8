# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Escrow lifecycle: snapshot models and eligibility predicates."""
from __future__ import annotations

from ghostspeak_engine.escrow.lifecycle import (
    allowed_actions,
    can_cancel,
    can_dispute,
    can_release,
    duration,
    formatted_amount,
    has_open_dispute,
    is_active,
    is_overdue,
    is_settled,
    status_glyph,
    time_until_deadline,
    validate_dispute_draft,
    validate_escrow_draft,
)
from ghostspeak_engine.escrow.model import (
    Dispute,
    DisputeDraft,
    DisputeStatus,
    Escrow,
    EscrowAction,
    EscrowDraft,
    EscrowStatus,
)

__all__ = [
    "Dispute",
    "DisputeDraft",
    "DisputeStatus",
    "Escrow",
    "EscrowAction",
    "EscrowDraft",
    "EscrowStatus",
    "allowed_actions",
    "can_cancel",
    "can_dispute",
    "can_release",
    "duration",
    "formatted_amount",
    "has_open_dispute",
    "is_active",
    "is_overdue",
    "is_settled",
    "status_glyph",
    "time_until_deadline",
    "validate_dispute_draft",
    "validate_escrow_draft",
]
