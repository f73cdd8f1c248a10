# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Simulated fleet generator.

Generates a nightly fleet snapshot of :class:`Trainset` records with
open job cards drawn from the task catalogue and a random mix of
branding contracts.

All randomness flows through a seeded :class:`numpy.random.Generator`
so that identical seeds always produce identical fleets.
"""

from __future__ import annotations

import numpy as np

from fleet_induction.data.catalogue import all_tasks
from fleet_induction.data.models import BrandingContract, JobCard, Trainset
from fleet_induction.scoring.weights import MAX_BRANDING_SLOTS

SPONSORS = [
    "CocaCola", "Nike", "Samsung", "LG", "Pepsi", "Adidas", "Sony", "Apple",
    "BMW", "Microsoft", "Google", "Amazon", "Meta", "Intel", "Tesla",
    "Starbucks", "Netflix", "Toyota", "Disney", "HBO", "Ford", "Boeing",
]


class FleetGenerator:
    """Generate a reproducible random fleet.

    Parameters
    ----------
    size:
        Number of trainsets to generate.
    seed:
        Optional RNG seed for reproducibility.  When *None*, a random
        seed is chosen by NumPy.
    fitness_failure_rate:
        Probability that a unit's fitness certificate is invalid.
    clean_rate:
        Probability that a unit has completed cleaning.
    branded_rate:
        Probability that a unit carries at least one branding contract.
    max_mileage:
        Upper bound of the uniform mileage draw, in km.
    """

    def __init__(
        self,
        size: int = 25,
        seed: int | None = None,
        fitness_failure_rate: float = 0.15,
        clean_rate: float = 0.6,
        branded_rate: float = 0.5,
        max_mileage: float = 10_000.0,
    ) -> None:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self.size = size
        self.seed = seed
        self.fitness_failure_rate = fitness_failure_rate
        self.clean_rate = clean_rate
        self.branded_rate = branded_rate
        self.max_mileage = max_mileage
        self.rng = np.random.default_rng(seed)
        self._tasks = all_tasks()

    def generate(self) -> list[Trainset]:
        """Generate the fleet, with ids ``TS01``, ``TS02``, ..."""
        width = max(2, len(str(self.size)))
        fleet: list[Trainset] = []
        next_job_id = 1
        for i in range(1, self.size + 1):
            unit_id = f"TS{i:0{width}d}"
            cards = self._generate_job_cards(unit_id, next_job_id)
            next_job_id += len(cards)
            fleet.append(
                Trainset(
                    id=unit_id,
                    fitness_valid=bool(self.rng.random() >= self.fitness_failure_rate),
                    job_cards=tuple(cards),
                    mileage=round(float(self.rng.uniform(0, self.max_mileage)), 1),
                    is_clean=bool(self.rng.random() < self.clean_rate),
                    branding=tuple(self._generate_branding()),
                )
            )
        return fleet

    # ------------------------------------------------------------------
    # Job cards
    # ------------------------------------------------------------------

    def _generate_job_cards(self, unit_id: str, first_id: int) -> list[JobCard]:
        # Most units carry zero to two open cards
        count = int(min(self.rng.poisson(1.0), 5))
        picks = self.rng.choice(len(self._tasks), size=count, replace=False)
        cards = []
        for offset, idx in enumerate(picks):
            category, task, severity = self._tasks[int(idx)]
            cards.append(
                JobCard(
                    id=first_id + offset,
                    trainset_id=unit_id,
                    severity=severity,
                    task=task,
                    category=category,
                )
            )
        return cards

    # ------------------------------------------------------------------
    # Branding
    # ------------------------------------------------------------------

    def _generate_branding(self) -> list[BrandingContract]:
        if self.rng.random() >= self.branded_rate:
            return []
        count = int(self.rng.integers(1, MAX_BRANDING_SLOTS + 1))
        sponsors = self.rng.choice(len(SPONSORS), size=count, replace=False)
        return [
            BrandingContract(
                sponsor_name=SPONSORS[int(s)],
                duration_months=int(self.rng.integers(6, 25)),
                # Contract values in 50k steps between 200k and 1.5M
                contract_value=float(self.rng.integers(4, 31) * 50_000),
            )
            for s in sponsors
        ]
