# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

from ghostspeak_engine.config import ScoreSource
from ghostspeak_engine.types import Address, Count


class ReputationTier(str, Enum):
    """Ghost Score brackets, lowest first."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class PerformanceMetrics(BaseModel, frozen=True):
    """
    Raw inputs to the Ghost Score.

    ``success_rate`` (percent) and ``average_rating`` (0-5) arrive pre-clamped
    from the collaborator and are not range-checked here beyond sign.

    Attributes:
        success_rate: Percentage of jobs completed successfully.
        average_rating: Mean client rating on a five-point scale.
        total_jobs: Number of jobs taken.
        response_time: Average response time in seconds.
    """

    success_rate: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0
    average_rating: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0
    total_jobs: Count = 0
    response_time: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0


class Reputation(BaseModel, frozen=True):
    """
    Reputation snapshot for an agent.

    ``ghost_score`` and ``tier`` are whatever the ledger last stored. They may
    lag the raw metrics; see :func:`~ghostspeak_engine.reputation.scorer.resolve_score`.
    """

    subject: Address
    metrics: PerformanceMetrics = Field(default_factory=PerformanceMetrics)
    ghost_score: Annotated[int, Field(ge=0)] | None = None
    tier: ReputationTier | None = None
    tags: frozenset[str] = frozenset()


class ScoreBreakdown(BaseModel, frozen=True):
    """Per-metric points behind a computed Ghost Score."""

    success_points: int
    rating_points: int
    experience_points: int
    response_points: int
    total: int
    tier: ReputationTier


class ResolvedScore(BaseModel, frozen=True):
    """
    The Ghost Score to display and where it came from.

    Attributes:
        score: The authoritative score.
        tier: Tier derived from ``score``.
        source: Whether ``score`` is the stored or recomputed value.
        breakdown: The recomputation, always available for the detail view.
        stored_score: The ledger value, if one was supplied.
        diverges: True when a stored score exists and differs from the
            recomputed total.
    """

    score: int
    tier: ReputationTier
    source: ScoreSource
    breakdown: ScoreBreakdown
    stored_score: int | None = None
    diverges: bool = False
