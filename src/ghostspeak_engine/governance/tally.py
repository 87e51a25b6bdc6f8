# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Vote tallying and voting-window rules for governance proposals.

Settlement rule: a proposal passes iff quorum progress is at least 100% and
the approval rate is strictly above 50%. Exactly 50% approval fails. The
percent helpers return floats for display; :func:`has_quorum`,
:func:`is_approved` and :func:`passes` decide on the integer tallies so the
outcome cannot drift from the ledger's through float rounding.
"""
from __future__ import annotations

from datetime import datetime, timedelta

from ghostspeak_engine.governance.model import Proposal, ProposalStatus
from ghostspeak_engine.timewindow import has_reached, remaining_clamped
from ghostspeak_engine.types import exhaustive

QUORUM_MET_PERCENT = 100.0

# Terminal statuses are reported as-is; only ACTIVE is re-derived from the tally.
_PROJECTABLE = exhaustive(
    ProposalStatus,
    {
        ProposalStatus.ACTIVE: True,
        ProposalStatus.PASSED: False,
        ProposalStatus.FAILED: False,
        ProposalStatus.EXECUTED: False,
        ProposalStatus.CANCELLED: False,
    },
)


def total_votes(proposal: Proposal) -> int:
    """All weighted votes cast, abstentions included."""
    return proposal.votes_for + proposal.votes_against + proposal.votes_abstain


def quorum_progress(proposal: Proposal) -> float:
    """
    "For" votes as a percentage of the quorum requirement.

    Uncapped, so values above 100 show surplus support. A zero quorum is
    trivially met and reports 100.
    """
    if proposal.quorum_required == 0:
        return QUORUM_MET_PERCENT
    return proposal.votes_for / proposal.quorum_required * 100.0


def approval_rate(proposal: Proposal) -> float:
    """Share of non-abstaining votes that are "for", in [0, 100]; 0 with no votes."""
    decided = proposal.votes_for + proposal.votes_against
    if decided == 0:
        return 0.0
    return proposal.votes_for / decided * 100.0


def has_quorum(proposal: Proposal) -> bool:
    return proposal.votes_for >= proposal.quorum_required


def is_approved(proposal: Proposal) -> bool:
    # for / (for + against) > 1/2, compared without division
    return 2 * proposal.votes_for > proposal.votes_for + proposal.votes_against


def passes(proposal: Proposal) -> bool:
    """Apply the settlement rule to the current tally."""
    return has_quorum(proposal) and is_approved(proposal)


def has_started(proposal: Proposal, now: datetime) -> bool:
    return has_reached(proposal.voting_starts_at, now)


def has_ended(proposal: Proposal, now: datetime) -> bool:
    """True once the voting window has closed (``now >= voting_ends_at``)."""
    return has_reached(proposal.voting_ends_at, now)


def time_remaining(proposal: Proposal, now: datetime) -> timedelta:
    """Time left to vote; zero once the window has closed, never negative."""
    return remaining_clamped(proposal.voting_ends_at, now)


def can_vote(proposal: Proposal, now: datetime) -> bool:
    """True when the proposal is Active and ``now`` is inside ``[starts, ends)``."""
    return (
        proposal.status is ProposalStatus.ACTIVE
        and has_started(proposal, now)
        and not has_ended(proposal, now)
    )


def projected_status(proposal: Proposal, now: datetime) -> ProposalStatus:
    """
    The status the ledger will settle on, given the current tally.

    An Active proposal whose window has closed is projected to Passed or
    Failed by :func:`passes`. Other statuses are already settled and are
    returned unchanged.
    """
    if not _PROJECTABLE[proposal.status] or not has_ended(proposal, now):
        return proposal.status
    return ProposalStatus.PASSED if passes(proposal) else ProposalStatus.FAILED
