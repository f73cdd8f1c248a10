# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the fleet induction test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from fleet_induction.data.models import BrandingContract, InductionResult, JobCard, Trainset
from fleet_induction.data.sample import build_sample_fleet
from fleet_induction.scoring.engine import FleetScorer


def _make_trainset(
    unit_id: str = "TS01",
    fitness_valid: bool = True,
    severities: tuple[str, ...] = (),
    mileage: float = 1000.0,
    is_clean: bool = True,
    contracts: tuple[float, ...] = (),
) -> Trainset:
    """Build a trainset from compact arguments; *contracts* are contract values."""
    return Trainset(
        id=unit_id,
        fitness_valid=fitness_valid,
        job_cards=tuple(
            JobCard(id=i, trainset_id=unit_id, severity=s)
            for i, s in enumerate(severities, start=1)
        ),
        mileage=mileage,
        is_clean=is_clean,
        branding=tuple(
            BrandingContract(sponsor_name=f"Sponsor{i}", duration_months=12, contract_value=v)
            for i, v in enumerate(contracts, start=1)
        ),
    )


@pytest.fixture()
def make_trainset() -> Callable[..., Trainset]:
    """Factory fixture for compact Trainset construction."""
    return _make_trainset


@pytest.fixture()
def sample_fleet() -> list[Trainset]:
    """The reference 31-unit fleet."""
    return build_sample_fleet()


@pytest.fixture()
def scorer() -> FleetScorer:
    """A scorer with the default policy."""
    return FleetScorer()


@pytest.fixture()
def sample_result(scorer: FleetScorer, sample_fleet: list[Trainset]) -> InductionResult:
    """The scored reference fleet."""
    return scorer.run(sample_fleet)
