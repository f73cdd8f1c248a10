# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Master scoring orchestrator for the induction planner.

Runs the nightly pipeline over a fleet snapshot:

1. gate every unit on its fitness certificate,
2. compute fleet-wide mileage statistics over all units,
3. screen eligible units for record-local problems,
4. compute each sub-score dimension for the remaining units,
5. aggregate the weighted total and rank the units.

Each stage is a public method that returns new values keyed by trainset
id; the input trainsets are never modified.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterable, Sequence

from fleet_induction.data.models import (
    EligibilityVerdict,
    FleetStats,
    InductionResult,
    IssueKind,
    RankedTrainset,
    RecordIssue,
    SubScores,
    Trainset,
)
from fleet_induction.errors import DuplicateTrainsetError, InvalidSeverityError
from fleet_induction.scoring import subscores
from fleet_induction.scoring.policy import ScoringPolicy
from fleet_induction.scoring.weights import SCORE_DECIMALS

logger = logging.getLogger(__name__)


def _round(value: float) -> float:
    return round(value, SCORE_DECIMALS)


def _by_id(units: Iterable[Trainset], fn: Callable[[Trainset], float]) -> dict[str, float]:
    return {t.id: _round(fn(t)) for t in units}


def rank_key(item: tuple[str, float]) -> tuple[float, str]:
    """Sort key for ``(trainset_id, total_score)``: score descending, then id ascending."""
    trainset_id, total = item
    return -total, trainset_id


class FleetScorer:
    """Scores and ranks a fleet for induction.

    Usage::

        scorer = FleetScorer()
        result = scorer.run(trainsets)
        for trainset_id, total in result.as_pairs():
            ...

    Args:
        policy: Scoring configuration.  Defaults to :class:`ScoringPolicy`
            with the standard weights.  The policy is validated here, so an
            invalid one fails before any scoring begins.
    """

    def __init__(self, policy: ScoringPolicy | None = None) -> None:
        self.policy = (policy or ScoringPolicy()).ensure_valid()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, fleet: Iterable[Trainset]) -> InductionResult:
        """Run the full scoring pipeline and return the induction decision."""
        fleet = list(fleet)
        self._check_unique(fleet)

        verdicts = self.gate(fleet)
        eligible_ids = {v.trainset_id for v in verdicts if v.eligible}
        eligible = [t for t in fleet if t.id in eligible_ids]

        stats = self.fleet_stats(fleet, eligible_count=len(eligible))
        logger.info(
            "Fleet of %d: average mileage %.1f, max mileage %.1f",
            stats.fleet_size, stats.average_mileage, stats.max_mileage,
        )

        scorable, issues = self.screen(eligible)

        fitness = self.score_fitness(scorable)
        job_cards = self.score_job_cards(scorable)
        branding = self.score_branding(scorable)
        mileage = self.score_mileage(scorable, stats)
        cleaning = self.score_cleaning(scorable)

        sub_scores = {
            t.id: SubScores(
                fitness=fitness[t.id],
                job_card=job_cards[t.id],
                branding=branding[t.id],
                mileage=mileage[t.id],
                cleaning=cleaning[t.id],
            )
            for t in scorable
        }
        totals = self.aggregate(sub_scores)
        ranking = self.rank(totals, sub_scores)

        return InductionResult(
            verdicts=tuple(verdicts),
            sub_scores=sub_scores,
            stats=stats,
            ranking=ranking,
            issues=tuple(issues),
            weights=self.policy.weights.model_dump(),
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def gate(self, fleet: Iterable[Trainset]) -> list[EligibilityVerdict]:
        """Eligibility is exactly the fitness-certificate flag."""
        verdicts: list[EligibilityVerdict] = []
        for t in fleet:
            if t.fitness_valid:
                logger.info("Trainset %s passed fitness check", t.id)
                reason = "Fitness certificate valid"
            else:
                logger.info("Trainset %s denied induction: invalid fitness certificate", t.id)
                reason = "Invalid fitness certificate"
            verdicts.append(
                EligibilityVerdict(trainset_id=t.id, eligible=t.fitness_valid, reason=reason)
            )
        return verdicts

    def fleet_stats(
        self, fleet: Sequence[Trainset], eligible_count: int | None = None
    ) -> FleetStats:
        """Average and maximum mileage over every unit, eligible or not."""
        if not fleet:
            return FleetStats(eligible_count=eligible_count or 0)
        mileages = [t.mileage for t in fleet]
        if eligible_count is None:
            eligible_count = sum(1 for t in fleet if t.fitness_valid)
        return FleetStats(
            fleet_size=len(fleet),
            eligible_count=eligible_count,
            average_mileage=sum(mileages) / len(mileages),
            min_mileage=min(mileages),
            max_mileage=max(mileages),
        )

    def screen(
        self, units: Iterable[Trainset]
    ) -> tuple[list[Trainset], list[RecordIssue]]:
        """Split units into scorable ones and record-local issues.

        A unit is held back when one of its job cards has a severity the
        policy does not know, or when it carries more branding contracts
        than the policy has slots.
        """
        scorable: list[Trainset] = []
        issues: list[RecordIssue] = []
        for t in units:
            issue = self._screen_one(t)
            if issue is None:
                scorable.append(t)
            else:
                logger.warning("Trainset %s held out of ranking: %s", t.id, issue.message)
                issues.append(issue)
        return scorable, issues

    def score_fitness(self, units: Iterable[Trainset]) -> dict[str, float]:
        return _by_id(units, subscores.score_fitness)

    def score_job_cards(self, units: Iterable[Trainset]) -> dict[str, float]:
        """Job-card risk score per unit; raises on unknown severities."""
        return _by_id(units, lambda t: subscores.score_job_cards(t, self.policy))

    def score_branding(self, units: Iterable[Trainset]) -> dict[str, float]:
        return _by_id(units, lambda t: subscores.score_branding(t, self.policy))

    def score_mileage(
        self, units: Iterable[Trainset], stats: FleetStats
    ) -> dict[str, float]:
        """Mileage score per unit against the fleet-wide *stats*."""
        return _by_id(
            units,
            lambda t: subscores.score_mileage(t, stats.max_mileage, stats.min_mileage),
        )

    def score_cleaning(self, units: Iterable[Trainset]) -> dict[str, float]:
        return _by_id(units, subscores.score_cleaning)

    def aggregate(self, sub_scores: dict[str, SubScores]) -> dict[str, float]:
        """Weighted total of the five sub-scores per unit."""
        w = self.policy.weights
        totals: dict[str, float] = {}
        for trainset_id, s in sub_scores.items():
            total = (
                w.fitness * s.fitness
                + w.job_card * s.job_card
                + w.branding * s.branding
                + w.mileage * s.mileage
                + w.cleaning * s.cleaning
            )
            totals[trainset_id] = _round(min(1.0, total))
        logger.debug("Aggregated totals: %s", totals)
        return totals

    def rank(
        self, totals: dict[str, float], sub_scores: dict[str, SubScores]
    ) -> tuple[RankedTrainset, ...]:
        """Order units by total score descending, ties broken by ascending id."""
        ordered = sorted(totals.items(), key=rank_key)
        return tuple(
            RankedTrainset(
                rank=position,
                trainset_id=trainset_id,
                total_score=total,
                sub_scores=sub_scores[trainset_id],
            )
            for position, (trainset_id, total) in enumerate(ordered, start=1)
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_unique(fleet: Sequence[Trainset]) -> None:
        counts = Counter(t.id for t in fleet)
        duplicates = sorted(tid for tid, n in counts.items() if n > 1)
        if duplicates:
            raise DuplicateTrainsetError(duplicates)

    def _screen_one(self, t: Trainset) -> RecordIssue | None:
        try:
            subscores.job_card_penalty(t, self.policy)
        except InvalidSeverityError as exc:
            return RecordIssue(
                trainset_id=t.id, kind=IssueKind.invalid_severity, message=str(exc)
            )
        if t.branding_count > self.policy.max_branding_slots:
            return RecordIssue(
                trainset_id=t.id,
                kind=IssueKind.branding_capacity_exceeded,
                message=(
                    f"Trainset {t.id} carries {t.branding_count} branding contracts "
                    f"but has {self.policy.max_branding_slots} slots"
                ),
            )
        return None
