# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the scoring policy and its YAML loader."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_induction.errors import PolicyLoadError, WeightConfigurationError
from fleet_induction.scoring.engine import FleetScorer
from fleet_induction.scoring.policy import ScoringPolicy, ScoringWeights, load_policy
from fleet_induction.scoring.weights import (
    BRANDING_WEIGHT,
    CLEANING_WEIGHT,
    FITNESS_WEIGHT,
    JOB_CARD_WEIGHT,
    MILEAGE_WEIGHT,
)


class TestDefaults:
    def test_default_weights_sum_to_one(self):
        total = (
            FITNESS_WEIGHT + JOB_CARD_WEIGHT + BRANDING_WEIGHT
            + MILEAGE_WEIGHT + CLEANING_WEIGHT
        )
        assert total == pytest.approx(1.0)
        assert ScoringWeights().total == pytest.approx(1.0)

    def test_default_policy_is_valid(self):
        policy = ScoringPolicy()
        assert policy.ensure_valid() is policy
        assert policy.max_branding_slots == 4
        assert policy.max_job_cards == 10
        assert policy.branding_amount_ceiling == 2_000_000
        assert policy.severity_penalties == {"minor": 0.3, "moderate": 0.6, "critical": 1.0}


class TestValidation:
    def test_weights_not_summing_to_one(self):
        policy = ScoringPolicy(weights=ScoringWeights(fitness=0.5))
        with pytest.raises(WeightConfigurationError) as excinfo:
            policy.ensure_valid()
        assert excinfo.value.total == pytest.approx(1.25)

    def test_scorer_rejects_invalid_policy(self):
        policy = ScoringPolicy(weights=ScoringWeights(cleaning=0.0))
        with pytest.raises(WeightConfigurationError):
            FleetScorer(policy)

    def test_branding_shares_must_sum_to_one(self):
        policy = ScoringPolicy(branding_amount_share=0.5, branding_count_share=0.3)
        with pytest.raises(WeightConfigurationError, match="branding shares"):
            policy.ensure_valid()

    def test_negative_penalty_rejected(self):
        with pytest.raises(ValidationError):
            ScoringPolicy(severity_penalties={"minor": -0.1})

    def test_penalty_keys_normalized(self):
        policy = ScoringPolicy(severity_penalties={" Critical ": 2.0})
        assert policy.severity_penalties == {"critical": 2.0}

    def test_zero_job_card_ceiling_rejected(self):
        with pytest.raises(ValidationError):
            ScoringPolicy(max_job_cards=0)


class TestLoadPolicy:
    def test_partial_override(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text(
            "weights:\n"
            "  fitness: 0.20\n"
            "  cleaning: 0.20\n"
            "max_branding_slots: 6\n"
        )
        policy = load_policy(path)
        assert policy.weights.fitness == 0.20
        assert policy.weights.job_card == JOB_CARD_WEIGHT
        assert policy.max_branding_slots == 6

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("")
        assert load_policy(path) == ScoringPolicy()

    def test_invalid_weights_fail_at_load(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("weights:\n  mileage: 0.9\n")
        with pytest.raises(WeightConfigurationError):
            load_policy(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_policy(tmp_path / "nope.yaml")

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("weights: [1, 2\n")
        with pytest.raises(PolicyLoadError, match="policy.yaml"):
            load_policy(path)


class TestReadOnlyPenalties:
    def test_penalty_table_cannot_be_changed(self):
        policy = ScoringPolicy().ensure_valid()
        with pytest.raises(TypeError):
            policy.severity_penalties["minor"] = 0.0  # type: ignore[index]
        assert policy.severity_penalties["minor"] == 0.3

    def test_penalty_table_serializes_as_dict(self):
        dumped = ScoringPolicy().model_dump()
        assert dumped["severity_penalties"] == {"minor": 0.3, "moderate": 0.6, "critical": 1.0}
        assert type(dumped["severity_penalties"]) is dict
