# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Reputation: Ghost Score computation and tiering."""
from __future__ import annotations

from ghostspeak_engine.reputation.model import (
    PerformanceMetrics,
    Reputation,
    ReputationTier,
    ResolvedScore,
    ScoreBreakdown,
)
from ghostspeak_engine.reputation.scorer import (
    compute,
    experience_points,
    rating_points,
    resolve_score,
    response_points,
    round_half_up,
    stored_value,
    success_points,
    tier_for,
)

__all__ = [
    "PerformanceMetrics",
    "Reputation",
    "ReputationTier",
    "ResolvedScore",
    "ScoreBreakdown",
    "compute",
    "experience_points",
    "rating_points",
    "resolve_score",
    "response_points",
    "round_half_up",
    "stored_value",
    "success_points",
    "tier_for",
]
