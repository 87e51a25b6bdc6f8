# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator


class ScoreSource(str, Enum):
    """Which Ghost Score the engine reports when both are available."""

    COMPUTED = "computed"
    STORED = "stored"


class ResponseTier(BaseModel, frozen=True):
    """A rung of the responsiveness ladder: at most ``max_seconds`` earns ``points``."""

    max_seconds: Annotated[float, Field(ge=0)]
    points: Annotated[int, Field(ge=0)]


class EscrowConfig(BaseModel, frozen=True):
    """
    Configuration for escrow draft validation.

    Attributes:
        min_amount: Smallest escrow the program accepts, in smallest units.
        max_description_length: Upper bound on the description length.
        max_dispute_reason_length: Upper bound on a dispute reason.
    """

    min_amount: Annotated[int, Field(ge=0)] = 1_000
    max_description_length: Annotated[int, Field(gt=0)] = 500
    max_dispute_reason_length: Annotated[int, Field(gt=0)] = 1_000


class ReputationConfig(BaseModel, frozen=True):
    """
    Configuration for the Ghost Score calculation.

    Tier thresholds are inclusive lower bounds: a score of exactly
    ``gold_threshold`` is Gold. Anything below ``silver_threshold`` is Bronze.

    Attributes:
        silver_threshold: Minimum score for the Silver tier.
        gold_threshold: Minimum score for the Gold tier.
        platinum_threshold: Minimum score for the Platinum tier.
        max_score: Upper clamp on the summed score.
        response_tiers: Responsiveness ladder, fastest rung first. A response
            time slower than the last rung earns zero points.
        authoritative: Which score wins when a stored ledger value and a
            recomputed value are both present.
    """

    silver_threshold: Annotated[int, Field(ge=0)] = 400
    gold_threshold: Annotated[int, Field(ge=0)] = 600
    platinum_threshold: Annotated[int, Field(ge=0)] = 800
    max_score: Annotated[int, Field(gt=0)] = 850
    response_tiers: tuple[ResponseTier, ...] = (
        ResponseTier(max_seconds=60, points=150),
        ResponseTier(max_seconds=300, points=100),
        ResponseTier(max_seconds=900, points=50),
    )
    authoritative: ScoreSource = ScoreSource.COMPUTED

    @model_validator(mode="after")
    def _thresholds_ascend(self) -> ReputationConfig:
        if not (self.silver_threshold < self.gold_threshold < self.platinum_threshold):
            raise ValueError(
                "tier thresholds must ascend: silver < gold < platinum; got "
                f"{self.silver_threshold}, {self.gold_threshold}, {self.platinum_threshold}"
            )
        bounds = [tier.max_seconds for tier in self.response_tiers]
        if bounds != sorted(bounds):
            raise ValueError("response_tiers must be ordered fastest first")
        return self


class StakingConfig(BaseModel, frozen=True):
    """
    Configuration for stake-size tiers, in whole GHOST tokens.

    Attributes:
        min_stake: Smallest stake the program accepts.
        silver_threshold: Minimum stake for the Silver staking tier.
        gold_threshold: Minimum stake for the Gold staking tier.
    """

    min_stake: Annotated[int, Field(gt=0)] = 1_000
    silver_threshold: Annotated[int, Field(gt=0)] = 10_000
    gold_threshold: Annotated[int, Field(gt=0)] = 100_000

    @model_validator(mode="after")
    def _thresholds_ascend(self) -> StakingConfig:
        if not (self.min_stake <= self.silver_threshold < self.gold_threshold):
            raise ValueError("staking thresholds must ascend: min_stake <= silver < gold")
        return self


class EngineConfig(BaseModel, frozen=True):
    """
    Top-level configuration for the MarketplaceEngine.

    All fields are optional; defaults mirror the values the on-ledger program
    enforces.

    Example::

        config = EngineConfig(
            reputation=ReputationConfig(authoritative=ScoreSource.STORED),
            staking=StakingConfig(min_stake=500),
        )
        engine = MarketplaceEngine(config=config)
    """

    escrow: EscrowConfig = Field(default_factory=EscrowConfig)
    reputation: ReputationConfig = Field(default_factory=ReputationConfig)
    staking: StakingConfig = Field(default_factory=StakingConfig)
