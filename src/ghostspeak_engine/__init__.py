# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
ghostspeak-engine — deterministic state and scoring rules for the GhostSpeak
agent marketplace client.

Every rule is a pure function of an immutable snapshot and an explicit
``now``. The rendering shell fetches snapshots elsewhere and asks the engine
for derived values.

Quick start::

    from datetime import datetime, timezone
    from ghostspeak_engine import MarketplaceEngine, Proposal, load_snapshot

    proposal = load_snapshot(Proposal, ledger_payload)
    engine = MarketplaceEngine()
    view = engine.proposal_view(proposal)
    print(view.quorum_progress, view.passing)  # 141.66..., True
"""
from __future__ import annotations

from ghostspeak_engine.clock import Clock, FixedClock, SystemClock
from ghostspeak_engine.config import (
    EngineConfig,
    EscrowConfig,
    ReputationConfig,
    ResponseTier,
    ScoreSource,
    StakingConfig,
)
from ghostspeak_engine.engine import (
    EscrowView,
    MarketplaceEngine,
    ProposalView,
    ReputationView,
    StakingView,
)
from ghostspeak_engine.errors import (
    ConfigurationError,
    DraftRejectedError,
    GhostSpeakError,
    InvalidAmountError,
    InvalidEntityError,
    load_snapshot,
)
from ghostspeak_engine.escrow import (
    Dispute,
    DisputeStatus,
    Escrow,
    EscrowAction,
    EscrowStatus,
)
from ghostspeak_engine.governance import (
    Proposal,
    ProposalStatus,
    ProposalType,
)
from ghostspeak_engine.money import (
    PaymentToken,
    TokenInfo,
    format_amount,
    parse_amount,
    to_display_amount,
    token_info,
)
from ghostspeak_engine.reputation import (
    PerformanceMetrics,
    Reputation,
    ReputationTier,
    ScoreBreakdown,
)
from ghostspeak_engine.staking import (
    LockPeriod,
    StakingAccount,
    StakingStatus,
    StakingTier,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "MarketplaceEngine",
    "EscrowView",
    "ProposalView",
    "ReputationView",
    "StakingView",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    # Configuration
    "EngineConfig",
    "EscrowConfig",
    "ReputationConfig",
    "ResponseTier",
    "ScoreSource",
    "StakingConfig",
    # Entities
    "Escrow",
    "EscrowStatus",
    "EscrowAction",
    "Dispute",
    "DisputeStatus",
    "Proposal",
    "ProposalStatus",
    "ProposalType",
    "Reputation",
    "PerformanceMetrics",
    "ReputationTier",
    "ScoreBreakdown",
    "StakingAccount",
    "StakingStatus",
    "StakingTier",
    "LockPeriod",
    # Money
    "PaymentToken",
    "TokenInfo",
    "token_info",
    "format_amount",
    "parse_amount",
    "to_display_amount",
    # Errors
    "GhostSpeakError",
    "InvalidEntityError",
    "InvalidAmountError",
    "DraftRejectedError",
    "ConfigurationError",
    "load_snapshot",
    "__version__",
]
