# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pydantic import BaseModel

from ghostspeak_engine import escrow as escrow_rules
from ghostspeak_engine import governance as governance_rules
from ghostspeak_engine import reputation as reputation_rules
from ghostspeak_engine import staking as staking_rules
from ghostspeak_engine.clock import Clock, SystemClock
from ghostspeak_engine.config import EngineConfig, ScoreSource
from ghostspeak_engine.errors import ConfigurationError
from ghostspeak_engine.escrow import Escrow, EscrowAction, EscrowStatus
from ghostspeak_engine.governance import Proposal, ProposalStatus
from ghostspeak_engine.money import PaymentToken, format_amount, token_info
from ghostspeak_engine.reputation import Reputation, ReputationTier, ScoreBreakdown
from ghostspeak_engine.staking import StakingAccount, StakingStatus, StakingTier, TierBenefits
from ghostspeak_engine.timewindow import ensure_utc

logger = logging.getLogger("ghostspeak.engine")


class EscrowView(BaseModel, frozen=True):
    """Everything the shell renders for one escrow."""

    escrow_id: str
    status: EscrowStatus
    glyph: str
    amount: str
    active: bool
    overdue: bool
    settled: bool
    open_dispute: bool
    time_until_deadline: timedelta | None
    duration: timedelta
    allowed_actions: frozenset[EscrowAction]
    evaluated_at: datetime


class ProposalView(BaseModel, frozen=True):
    """Everything the shell renders for one proposal."""

    proposal_id: str
    status: ProposalStatus
    projected_status: ProposalStatus
    total_votes: int
    quorum_progress: float
    approval_rate: float
    has_quorum: bool
    passing: bool
    time_remaining: timedelta
    has_ended: bool
    can_vote: bool
    evaluated_at: datetime


class ReputationView(BaseModel, frozen=True):
    """Everything the shell renders for one reputation panel."""

    subject: str
    score: int
    tier: ReputationTier
    source: ScoreSource
    breakdown: ScoreBreakdown
    stored_score: int | None
    diverges: bool
    tags: frozenset[str]


class StakingView(BaseModel, frozen=True):
    """Everything the shell renders for one staking position."""

    staker: str
    status: StakingStatus
    effective_status: StakingStatus
    amount: str
    tier: StakingTier
    benefits: TierBenefits
    time_until_unlock: timedelta
    locked: bool
    can_unstake: bool
    can_claim_rewards: bool
    unclaimed_rewards: str
    evaluated_at: datetime


class MarketplaceEngine:
    """
    Binds the derivation rules to one configuration and one clock.

    Each ``*_view`` method takes a snapshot, reads ``now`` from the clock
    (unless the caller passes one), and returns a frozen view bundling every
    derived value. The engine holds no state besides its config and clock,
    so it can be shared across threads.

    Example::

        engine = MarketplaceEngine(clock=FixedClock(instant))
        view = engine.proposal_view(proposal)
        if view.can_vote:
            ...
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        if clock is not None and not isinstance(clock, Clock):
            raise ConfigurationError(
                f"clock must provide now() -> datetime; got {type(clock).__name__}."
            )
        self._config = config or EngineConfig()
        self._clock = clock or SystemClock()

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    def _resolve_now(self, now: datetime | None) -> datetime:
        return ensure_utc(now) if now is not None else self._clock.now()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def escrow_view(self, escrow: Escrow, now: datetime | None = None) -> EscrowView:
        at = self._resolve_now(now)
        view = EscrowView(
            escrow_id=escrow.id,
            status=escrow.status,
            glyph=escrow_rules.status_glyph(escrow.status),
            amount=escrow_rules.formatted_amount(escrow),
            active=escrow_rules.is_active(escrow),
            overdue=escrow_rules.is_overdue(escrow, at),
            settled=escrow_rules.is_settled(escrow),
            open_dispute=escrow_rules.has_open_dispute(escrow),
            time_until_deadline=escrow_rules.time_until_deadline(escrow, at),
            duration=escrow_rules.duration(escrow, at),
            allowed_actions=escrow_rules.allowed_actions(escrow),
            evaluated_at=at,
        )
        logger.debug(
            "escrow_view",
            extra={"escrow_id": escrow.id, "status": escrow.status.value, "overdue": view.overdue},
        )
        return view

    def proposal_view(self, proposal: Proposal, now: datetime | None = None) -> ProposalView:
        at = self._resolve_now(now)
        view = ProposalView(
            proposal_id=proposal.id,
            status=proposal.status,
            projected_status=governance_rules.projected_status(proposal, at),
            total_votes=governance_rules.total_votes(proposal),
            quorum_progress=governance_rules.quorum_progress(proposal),
            approval_rate=governance_rules.approval_rate(proposal),
            has_quorum=governance_rules.has_quorum(proposal),
            passing=governance_rules.passes(proposal),
            time_remaining=governance_rules.time_remaining(proposal, at),
            has_ended=governance_rules.has_ended(proposal, at),
            can_vote=governance_rules.can_vote(proposal, at),
            evaluated_at=at,
        )
        logger.debug(
            "proposal_view",
            extra={"proposal_id": proposal.id, "passing": view.passing, "can_vote": view.can_vote},
        )
        return view

    def reputation_view(self, reputation: Reputation) -> ReputationView:
        # Views are rebuilt on every render, so divergence is logged at DEBUG here.
        resolved = reputation_rules.resolve_score(
            reputation, self._config.reputation, divergence_level=logging.DEBUG
        )
        return ReputationView(
            subject=reputation.subject,
            score=resolved.score,
            tier=resolved.tier,
            source=resolved.source,
            breakdown=resolved.breakdown,
            stored_score=resolved.stored_score,
            diverges=resolved.diverges,
            tags=reputation.tags,
        )

    def staking_view(self, account: StakingAccount, now: datetime | None = None) -> StakingView:
        at = self._resolve_now(now)
        ghost = token_info(PaymentToken.GHOST)
        tier = staking_rules.staking_tier(account.amount, self._config.staking)
        view = StakingView(
            staker=account.staker,
            status=account.status,
            effective_status=staking_rules.effective_status(account, at),
            amount=format_amount(account.amount, ghost),
            tier=tier,
            benefits=staking_rules.tier_benefits(tier),
            time_until_unlock=staking_rules.time_until_unlock(account, at),
            locked=staking_rules.is_locked(account, at),
            can_unstake=staking_rules.can_unstake(account, at),
            can_claim_rewards=staking_rules.can_claim_rewards(account),
            unclaimed_rewards=format_amount(account.unclaimed_rewards, ghost),
            evaluated_at=at,
        )
        logger.debug(
            "staking_view",
            extra={"staker": account.staker, "effective_status": view.effective_status.value},
        )
        return view
