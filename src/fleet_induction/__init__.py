# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Fleet Induction - nightly trainset induction ranking."""

__version__ = "0.1.0"

from fleet_induction.data.models import (
    BrandingContract,
    EligibilityVerdict,
    FleetStats,
    InductionResult,
    JobCard,
    RankedTrainset,
    RecordIssue,
    Severity,
    SubScores,
    Trainset,
)
from fleet_induction.errors import (
    BrandingCapacityExceededError,
    DuplicateTrainsetError,
    FleetLoadError,
    InductionError,
    InvalidSeverityError,
    PolicyLoadError,
    WeightConfigurationError,
)
from fleet_induction.scoring.policy import ScoringPolicy, ScoringWeights, load_policy
from fleet_induction.scoring.engine import FleetScorer
from fleet_induction.data.generator import FleetGenerator
from fleet_induction.data.loader import FleetSnapshot, load_fleet
from fleet_induction.data.sample import build_sample_fleet

__all__ = [
    "BrandingCapacityExceededError",
    "BrandingContract",
    "DuplicateTrainsetError",
    "EligibilityVerdict",
    "FleetGenerator",
    "FleetLoadError",
    "FleetScorer",
    "FleetSnapshot",
    "FleetStats",
    "InductionError",
    "InductionResult",
    "InvalidSeverityError",
    "JobCard",
    "PolicyLoadError",
    "RankedTrainset",
    "RecordIssue",
    "ScoringPolicy",
    "ScoringWeights",
    "Severity",
    "SubScores",
    "Trainset",
    "WeightConfigurationError",
    "build_sample_fleet",
    "load_fleet",
    "load_policy",
]
