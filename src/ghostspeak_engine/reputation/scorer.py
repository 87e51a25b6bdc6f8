# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Ghost Score calculation.

The score sums four independently capped sub-scores and clamps the total
to ``[0, max_score]`` (850 by default):

======================  ===================================  ====
Metric                  Points                               Cap
======================  ===================================  ====
Success rate            ``round(success_rate * 3)``          300
Average rating          ``round(average_rating / 5 * 200)``  200
Experience              ``total_jobs * 2``                   200
Responsiveness          response-time ladder                 150
======================  ===================================  ====

Rounding is half-up, as on the ledger, rather than Python's banker's
rounding. All functions are pure; the only side effect in this module is a
log record (WARNING unless the caller lowers it) when a stored score
disagrees with its recomputation.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from ghostspeak_engine.config import ReputationConfig, ResponseTier, ScoreSource
from ghostspeak_engine.reputation.model import (
    PerformanceMetrics,
    Reputation,
    ReputationTier,
    ResolvedScore,
    ScoreBreakdown,
)

logger = logging.getLogger("ghostspeak.engine")

SUCCESS_CAP = 300
RATING_CAP = 200
EXPERIENCE_CAP = 200
RESPONSE_CAP = 150

POINTS_PER_JOB = 2
RATING_SCALE = 5.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties away from zero."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def _cap(points: int, cap: int) -> int:
    return max(0, min(points, cap))


def success_points(success_rate: float) -> int:
    return _cap(round_half_up(success_rate * 3), SUCCESS_CAP)


def rating_points(average_rating: float) -> int:
    return _cap(round_half_up(average_rating / RATING_SCALE * RATING_CAP), RATING_CAP)


def experience_points(total_jobs: int) -> int:
    return _cap(total_jobs * POINTS_PER_JOB, EXPERIENCE_CAP)


def response_points(response_time: float, tiers: tuple[ResponseTier, ...]) -> int:
    """Points for the first rung whose bound ``response_time`` does not exceed."""
    for tier in tiers:
        if response_time <= tier.max_seconds:
            return _cap(tier.points, RESPONSE_CAP)
    return 0


def tier_for(score: int, config: ReputationConfig | None = None) -> ReputationTier:
    """Map a Ghost Score onto its tier using the configured lower bounds."""
    config = config or ReputationConfig()
    if score >= config.platinum_threshold:
        return ReputationTier.PLATINUM
    if score >= config.gold_threshold:
        return ReputationTier.GOLD
    if score >= config.silver_threshold:
        return ReputationTier.SILVER
    return ReputationTier.BRONZE


def compute(
    metrics: PerformanceMetrics,
    config: ReputationConfig | None = None,
) -> ScoreBreakdown:
    """
    Recompute the Ghost Score from raw metrics.

    Args:
        metrics: The agent's performance metrics.
        config: Tier thresholds, response ladder and score ceiling. Defaults
            to :class:`ReputationConfig`.

    Returns:
        A :class:`ScoreBreakdown` with each sub-score, the clamped total and
        the tier the total falls in.
    """
    config = config or ReputationConfig()
    success = success_points(metrics.success_rate)
    rating = rating_points(metrics.average_rating)
    experience = experience_points(metrics.total_jobs)
    response = response_points(metrics.response_time, config.response_tiers)
    total = max(0, min(success + rating + experience + response, config.max_score))
    return ScoreBreakdown(
        success_points=success,
        rating_points=rating,
        experience_points=experience,
        response_points=response,
        total=total,
        tier=tier_for(total, config),
    )


def stored_value(reputation: Reputation) -> int | None:
    """The score last written by the ledger, unmodified."""
    return reputation.ghost_score


def resolve_score(
    reputation: Reputation,
    config: ReputationConfig | None = None,
    divergence_level: int = logging.WARNING,
) -> ResolvedScore:
    """
    Decide which Ghost Score to show for ``reputation``.

    The stored ledger value wins only when ``config.authoritative`` is
    ``STORED`` and a stored value exists; otherwise the recomputed total is
    used. The tier is always derived from the chosen score, so a stale
    stored tier never reaches the shell.

    Args:
        reputation: The snapshot to score.
        config: Scoring configuration. Defaults to :class:`ReputationConfig`.
        divergence_level: Log level for the ``ghost_score_divergence``
            record. Callers that resolve the same snapshot on every render
            pass ``logging.DEBUG``.
    """
    config = config or ReputationConfig()
    breakdown = compute(reputation.metrics, config)
    stored = stored_value(reputation)
    diverges = stored is not None and stored != breakdown.total

    if diverges:
        logger.log(
            divergence_level,
            "ghost_score_divergence",
            extra={
                "subject": reputation.subject,
                "stored_score": stored,
                "computed_score": breakdown.total,
                "authoritative": config.authoritative.value,
            },
        )

    if config.authoritative is ScoreSource.STORED and stored is not None:
        score, source = stored, ScoreSource.STORED
    else:
        score, source = breakdown.total, ScoreSource.COMPUTED

    return ResolvedScore(
        score=score,
        tier=tier_for(score, config),
        source=source,
        breakdown=breakdown,
        stored_score=stored,
        diverges=diverges,
    )
