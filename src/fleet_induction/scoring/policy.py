# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring policy model and YAML loader.

A :class:`ScoringPolicy` bundles every tunable knob of the scoring engine:
the dimension weights, the job-card severity penalty table, and the
normalization bounds for job cards and branding.  Policies are validated
once, before any scoring begins.
"""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml
from pydantic import BaseModel, Field, field_serializer, field_validator

from fleet_induction.errors import PolicyLoadError, WeightConfigurationError
from fleet_induction.scoring.weights import (
    BRANDING_AMOUNT_CEILING,
    BRANDING_AMOUNT_SHARE,
    BRANDING_COUNT_SHARE,
    BRANDING_WEIGHT,
    CLEANING_WEIGHT,
    FITNESS_WEIGHT,
    JOB_CARD_WEIGHT,
    MAX_BRANDING_SLOTS,
    MAX_JOB_CARDS,
    MILEAGE_WEIGHT,
    SEVERITY_PENALTIES,
    WEIGHT_TOLERANCE,
)


class ScoringWeights(BaseModel):
    """Weight of each dimension in the total score."""

    model_config = {"frozen": True}

    fitness: float = Field(default=FITNESS_WEIGHT, ge=0, le=1)
    job_card: float = Field(default=JOB_CARD_WEIGHT, ge=0, le=1)
    branding: float = Field(default=BRANDING_WEIGHT, ge=0, le=1)
    mileage: float = Field(default=MILEAGE_WEIGHT, ge=0, le=1)
    cleaning: float = Field(default=CLEANING_WEIGHT, ge=0, le=1)

    @property
    def total(self) -> float:
        return self.fitness + self.job_card + self.branding + self.mileage + self.cleaning


class ScoringPolicy(BaseModel):
    """Complete, injectable configuration of the scoring engine."""

    model_config = {"frozen": True}

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    severity_penalties: Mapping[str, float] = Field(
        default_factory=lambda: dict(SEVERITY_PENALTIES),
        validate_default=True,
        description="Penalty units contributed by one open card of each severity",
    )
    max_job_cards: float = Field(
        default=MAX_JOB_CARDS, gt=0,
        description="Penalty units at which the job-card score bottoms out at 0",
    )
    branding_amount_ceiling: float = Field(
        default=BRANDING_AMOUNT_CEILING, gt=0,
        description="Aggregate contract value that saturates the amount factor",
    )
    max_branding_slots: int = Field(default=MAX_BRANDING_SLOTS, ge=1)
    branding_amount_share: float = Field(default=BRANDING_AMOUNT_SHARE, ge=0, le=1)
    branding_count_share: float = Field(default=BRANDING_COUNT_SHARE, ge=0, le=1)

    @field_validator("severity_penalties")
    @classmethod
    def _check_penalties(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        if not value:
            raise ValueError("severity_penalties must not be empty")
        normalized: dict[str, float] = {}
        for name, penalty in value.items():
            if penalty < 0:
                raise ValueError(f"penalty for {name!r} must be >= 0, got {penalty}")
            normalized[name.strip().lower()] = float(penalty)
        return MappingProxyType(normalized)

    @field_serializer("severity_penalties")
    def _dump_penalties(self, value: Mapping[str, float]) -> dict[str, float]:
        return dict(value)

    def ensure_valid(self) -> ScoringPolicy:
        """Check cross-field invariants and return ``self``.

        Raises:
            WeightConfigurationError: if the dimension weights, or the two
                branding shares, do not sum to 1.0.
        """
        if not math.isclose(self.weights.total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise WeightConfigurationError(self.weights.total)
        shares = self.branding_amount_share + self.branding_count_share
        if not math.isclose(shares, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise WeightConfigurationError(shares, what="branding shares")
        return self


def load_policy(path: str | Path) -> ScoringPolicy:
    """Load a :class:`ScoringPolicy` from a YAML file.

    Keys missing from the file keep their defaults.  The loaded policy is
    validated before it is returned.

    Raises:
        PolicyLoadError: if the file is not valid YAML.
    """
    policy_path = Path(path)
    if not policy_path.exists():
        raise FileNotFoundError(f"Policy file not found: {policy_path}")

    try:
        with open(policy_path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise PolicyLoadError(f"Error reading {policy_path}: {exc}") from exc

    return ScoringPolicy.model_validate(raw).ensure_valid()
