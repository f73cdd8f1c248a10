# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Per-trainset sub-score rules.

Every function here is pure: it reads one :class:`Trainset` (plus the
policy and, for mileage, the fleet maximum) and returns a score in the
closed range 0-1, where 1 is the most desirable for induction.
"""

from __future__ import annotations

from fleet_induction.data.models import Trainset
from fleet_induction.errors import InvalidSeverityError
from fleet_induction.scoring.policy import ScoringPolicy


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


# ---------------------------------------------------------------------------
# Binary scores
# ---------------------------------------------------------------------------

def score_fitness(trainset: Trainset) -> float:
    """1.0 if the fitness certificate is valid, else 0.0."""
    return 1.0 if trainset.fitness_valid else 0.0


def score_cleaning(trainset: Trainset) -> float:
    """1.0 if the trainset is clean, else 0.0.  No partial credit."""
    return 1.0 if trainset.is_clean else 0.0


# ---------------------------------------------------------------------------
# Job cards
# ---------------------------------------------------------------------------

def job_card_penalty(trainset: Trainset, policy: ScoringPolicy) -> float:
    """Sum the severity penalties of all open job cards.

    Raises:
        InvalidSeverityError: on the first card whose severity is not in
            ``policy.severity_penalties``.
    """
    total = 0.0
    for card in trainset.job_cards:
        try:
            total += policy.severity_penalties[card.severity]
        except KeyError:
            raise InvalidSeverityError(trainset.id, card.id, card.severity) from None
    return total


def score_job_cards(trainset: Trainset, policy: ScoringPolicy) -> float:
    """Score open maintenance risk.

    ``max(0, 1 - penalty / max_job_cards)``: zero open cards scores 1.0 and a
    summed penalty at or beyond the ceiling scores 0.0.
    """
    penalty = job_card_penalty(trainset, policy)
    return _clamp(1.0 - penalty / policy.max_job_cards)


# ---------------------------------------------------------------------------
# Branding
# ---------------------------------------------------------------------------

def score_branding(trainset: Trainset, policy: ScoringPolicy) -> float:
    """Score commercial branding priority.

    Blends an amount factor (total contract value over the amount ceiling)
    with a count factor (occupied slots over slot capacity); both factors
    are capped at 1.0 so neither can swamp the other.
    """
    amount_factor = min(1.0, trainset.total_branding_value / policy.branding_amount_ceiling)
    count_factor = min(1.0, trainset.branding_count / policy.max_branding_slots)
    return _clamp(
        policy.branding_amount_share * amount_factor
        + policy.branding_count_share * count_factor
    )


# ---------------------------------------------------------------------------
# Mileage
# ---------------------------------------------------------------------------

def score_mileage(
    trainset: Trainset, max_mileage: float, min_mileage: float | None = None
) -> float:
    """Score accumulated wear relative to the highest-mileage unit in the fleet.

    ``1 - mileage / max_mileage``.  A fleet with no mileage spread (every
    unit at the same mileage, zero included) scores 1.0 throughout.
    Mileage above the recorded maximum clamps to 0.0.
    """
    if max_mileage <= 0:
        return 1.0
    if min_mileage is not None and min_mileage >= max_mileage:
        return 1.0
    return _clamp(1.0 - trainset.mileage / max_mileage)
