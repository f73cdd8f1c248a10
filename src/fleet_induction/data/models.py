# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the fleet induction planner.

This module defines the data contract shared by the scoring engine, the
fleet loaders, and the reporting and CLI layers.  Input records
(:class:`JobCard`, :class:`BrandingContract`, :class:`Trainset`) and all
result records are frozen: a scoring run reads an immutable snapshot and
publishes an immutable :class:`InductionResult`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, Field, computed_field, field_serializer, field_validator

from fleet_induction.errors import BrandingCapacityExceededError
from fleet_induction.scoring.weights import MAX_BRANDING_SLOTS


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Severity(str, Enum):
    """Severity level of an open job card."""

    minor = "minor"
    moderate = "moderate"
    critical = "critical"


class IssueKind(str, Enum):
    """Kinds of record-local problems surfaced next to a ranking."""

    invalid_severity = "invalid_severity"
    branding_capacity_exceeded = "branding_capacity_exceeded"


# ---------------------------------------------------------------------------
# Fleet input models
# ---------------------------------------------------------------------------

class JobCard(BaseModel):
    """One open maintenance ticket raised against a trainset."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int = Field(..., description="Job card number")
    trainset_id: str = Field(..., description="Trainset the card is raised against")
    severity: str = Field(
        ..., description="Severity level: minor, moderate, or critical"
    )
    task: str = Field(default="", description="Short description of the work")
    category: str = Field(default="", description="Work category, e.g. Mechanical")

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, value: object) -> str:
        if isinstance(value, Severity):
            return value.value
        return str(value).strip().lower()


class BrandingContract(BaseModel):
    """A commercial branding commitment occupying one slot on a trainset."""

    model_config = {"frozen": True, "populate_by_name": True}

    sponsor_name: str = Field(..., description="Sponsor / brand name")
    duration_months: int = Field(..., ge=0, description="Contract length in months")
    contract_value: float = Field(
        ..., ge=0, description="Contract value in currency units"
    )


class Trainset(BaseModel):
    """Static state of one fleet unit for a nightly induction run."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str = Field(..., min_length=1, description="Trainset identifier, unique in the fleet")
    fitness_valid: bool = Field(
        ..., description="True if the fitness certificate is currently valid"
    )
    job_cards: tuple[JobCard, ...] = Field(
        default=(), description="Open job cards, in the order they were raised"
    )
    mileage: float = Field(..., ge=0, description="Accumulated mileage in km")
    is_clean: bool = Field(default=False, description="True if cleaning is complete")
    branding: tuple[BrandingContract, ...] = Field(
        default=(), description="Branding contracts attached to this trainset"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def open_job_count(self) -> int:
        """Number of open job cards."""
        return len(self.job_cards)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def branding_count(self) -> int:
        """Number of occupied branding slots."""
        return len(self.branding)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_branding_value(self) -> float:
        """Sum of all branding contract values."""
        return sum(b.contract_value for b in self.branding)

    def add_branding(
        self, contract: BrandingContract, max_slots: int = MAX_BRANDING_SLOTS
    ) -> Trainset:
        """Return a copy of this trainset with *contract* attached.

        Raises:
            BrandingCapacityExceededError: if every slot is already taken.
                The trainset itself is never modified.
        """
        if len(self.branding) >= max_slots:
            raise BrandingCapacityExceededError(self.id, max_slots)
        return self.model_copy(update={"branding": self.branding + (contract,)})


# ---------------------------------------------------------------------------
# Scoring result models
# ---------------------------------------------------------------------------

class SubScores(BaseModel):
    """The five per-unit sub-scores, each normalized to 0-1."""

    model_config = {"frozen": True}

    fitness: float = Field(..., ge=0, le=1)
    job_card: float = Field(..., ge=0, le=1)
    branding: float = Field(..., ge=0, le=1)
    mileage: float = Field(..., ge=0, le=1)
    cleaning: float = Field(..., ge=0, le=1)


class EligibilityVerdict(BaseModel):
    """Outcome of the fitness-certificate gate for one trainset."""

    model_config = {"frozen": True}

    trainset_id: str
    eligible: bool
    reason: str = Field(default="", description="Human-readable gate outcome")


class FleetStats(BaseModel):
    """Fleet-wide descriptive statistics, computed over every unit."""

    model_config = {"frozen": True}

    fleet_size: int = Field(default=0, ge=0)
    eligible_count: int = Field(default=0, ge=0)
    average_mileage: float = Field(default=0.0, ge=0)
    min_mileage: float = Field(default=0.0, ge=0)
    max_mileage: float = Field(default=0.0, ge=0)


class RankedTrainset(BaseModel):
    """One entry in the ranked induction list."""

    model_config = {"frozen": True}

    rank: int = Field(..., ge=1, description="Position in the list (1 = first choice)")
    trainset_id: str
    total_score: float = Field(..., ge=0, le=1)
    sub_scores: SubScores


class RecordIssue(BaseModel):
    """A record-local problem that kept one trainset out of the ranking."""

    model_config = {"frozen": True}

    trainset_id: str
    kind: IssueKind
    message: str


class InductionResult(BaseModel):
    """Complete output of one nightly scoring run.

    This is the structured value consumed by the reporting and CLI layers;
    it holds no presentation text beyond short verdict reasons and issue
    messages.
    """

    model_config = {"frozen": True}

    verdicts: tuple[EligibilityVerdict, ...] = Field(
        default=(), description="Gate verdict for every unit, in input order"
    )
    sub_scores: Mapping[str, SubScores] = Field(
        default_factory=dict,
        validate_default=True,
        description="Sub-scores keyed by trainset id",
    )
    stats: FleetStats = Field(default_factory=FleetStats)
    ranking: tuple[RankedTrainset, ...] = Field(
        default=(), description="Induction list, best candidate first"
    )
    issues: tuple[RecordIssue, ...] = Field(default=())
    weights: Mapping[str, float] = Field(
        default_factory=dict,
        validate_default=True,
        description="Weights used for aggregation",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp when the run finished",
    )

    @field_validator("sub_scores", "weights")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("sub_scores", "weights")
    def _dump_mapping(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ranked_ids(self) -> list[str]:
        """Trainset ids in induction order."""
        return [r.trainset_id for r in self.ranking]

    def as_pairs(self) -> list[tuple[str, float]]:
        """The induction decision as ordered ``(id, total_score)`` pairs."""
        return [(r.trainset_id, r.total_score) for r in self.ranking]
