# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Exception types raised by the fleet induction planner."""

from __future__ import annotations


class InductionError(Exception):
    """Base class for all planner errors."""


class InvalidSeverityError(InductionError, ValueError):
    """A job card carries a severity missing from the penalty table."""

    def __init__(self, trainset_id: str, job_id: int, severity: str) -> None:
        self.trainset_id = trainset_id
        self.job_id = job_id
        self.severity = severity
        super().__init__(
            f"Job card {job_id} on trainset {trainset_id} has unknown severity {severity!r}"
        )


class BrandingCapacityExceededError(InductionError):
    """A branding contract was attached beyond the slot capacity."""

    def __init__(self, trainset_id: str, capacity: int) -> None:
        self.trainset_id = trainset_id
        self.capacity = capacity
        super().__init__(
            f"No space left for branding on trainset {trainset_id} "
            f"(capacity {capacity})"
        )


class WeightConfigurationError(InductionError, ValueError):
    """The scoring weights do not sum to 1.0."""

    def __init__(self, total: float, what: str = "scoring weights") -> None:
        self.total = total
        super().__init__(f"{what} must sum to 1.0, got {total:.6f}")


class DuplicateTrainsetError(InductionError, ValueError):
    """The same trainset id appears more than once in a fleet."""

    def __init__(self, trainset_ids: list[str]) -> None:
        self.trainset_ids = trainset_ids
        super().__init__(f"Duplicate trainset ids in fleet: {', '.join(trainset_ids)}")


class FleetLoadError(InductionError):
    """A fleet snapshot file could not be read or parsed."""


class PolicyLoadError(InductionError):
    """A scoring policy file could not be parsed."""
