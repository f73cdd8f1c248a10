# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models, fleet loaders, and the simulated fleet generator."""

from fleet_induction.data.models import (
    BrandingContract,
    EligibilityVerdict,
    FleetStats,
    InductionResult,
    IssueKind,
    JobCard,
    RankedTrainset,
    RecordIssue,
    Severity,
    SubScores,
    Trainset,
)
from fleet_induction.data.generator import FleetGenerator
from fleet_induction.data.loader import FleetSnapshot, dump_fleet, load_fleet, parse_fleet
from fleet_induction.data.sample import build_sample_fleet

__all__ = [
    "BrandingContract",
    "EligibilityVerdict",
    "FleetGenerator",
    "FleetSnapshot",
    "FleetStats",
    "InductionResult",
    "IssueKind",
    "JobCard",
    "RankedTrainset",
    "RecordIssue",
    "Severity",
    "SubScores",
    "Trainset",
    "build_sample_fleet",
    "dump_fleet",
    "load_fleet",
    "parse_fleet",
]
