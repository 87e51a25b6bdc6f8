# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Governance: proposal snapshots, vote tallying, multisig drafts and role permissions."""
from __future__ import annotations

from ghostspeak_engine.governance.model import (
    MAX_VOTING_PERIOD,
    MIN_VOTING_PERIOD,
    MultisigDraft,
    Proposal,
    ProposalDraft,
    ProposalStatus,
    ProposalType,
)
from ghostspeak_engine.governance.multisig import MAX_OWNERS, MIN_OWNERS, validate_multisig_draft
from ghostspeak_engine.governance.roles import Permission, Role, has_permission, role_permissions
from ghostspeak_engine.governance.tally import (
    QUORUM_MET_PERCENT,
    approval_rate,
    can_vote,
    has_ended,
    has_quorum,
    has_started,
    is_approved,
    passes,
    projected_status,
    quorum_progress,
    time_remaining,
    total_votes,
)

__all__ = [
    "MAX_OWNERS",
    "MAX_VOTING_PERIOD",
    "MIN_OWNERS",
    "MIN_VOTING_PERIOD",
    "QUORUM_MET_PERCENT",
    "MultisigDraft",
    "Permission",
    "Proposal",
    "ProposalDraft",
    "ProposalStatus",
    "ProposalType",
    "Role",
    "approval_rate",
    "can_vote",
    "has_ended",
    "has_permission",
    "has_quorum",
    "has_started",
    "is_approved",
    "passes",
    "projected_status",
    "quorum_progress",
    "role_permissions",
    "time_remaining",
    "total_votes",
    "validate_multisig_draft",
]
