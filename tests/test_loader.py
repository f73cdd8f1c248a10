# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for loading fleet snapshots from JSON and YAML files."""

from __future__ import annotations

import json

import pytest

from fleet_induction.data.loader import dump_fleet, load_fleet, parse_fleet
from fleet_induction.data.models import IssueKind
from fleet_induction.errors import FleetLoadError
from fleet_induction.scoring.policy import ScoringPolicy

FLEET_YAML = """\
trainsets:
  - id: TS01
    fitness_valid: true
    mileage: 2500
    is_clean: true
    job_cards:
      - {id: 1, severity: minor, task: Horn and bell test}
      - {id: 2, severity: Critical}
    branding:
      - {sponsor_name: A, duration_months: 6, contract_value: 100000}
      - {sponsor_name: B, duration_months: 6, contract_value: 100000}
      - {sponsor_name: C, duration_months: 6, contract_value: 100000}
      - {sponsor_name: D, duration_months: 6, contract_value: 100000}
      - {sponsor_name: E, duration_months: 6, contract_value: 100000}
  - id: TS02
    fitness_valid: false
    mileage: 4000
"""


class TestLoadFleet:
    """Tests for load_fleet()."""

    def test_yaml_fleet(self, tmp_path):
        path = tmp_path / "fleet.yaml"
        path.write_text(FLEET_YAML)
        snapshot = load_fleet(path)

        assert [t.id for t in snapshot.trainsets] == ["TS01", "TS02"]
        ts01 = snapshot.trainsets[0]
        assert ts01.job_cards[0].trainset_id == "TS01"
        assert ts01.job_cards[1].severity == "critical"
        assert ts01.is_clean is True
        assert snapshot.trainsets[1].is_clean is False

    def test_branding_overflow_reported(self, tmp_path):
        path = tmp_path / "fleet.yaml"
        path.write_text(FLEET_YAML)
        snapshot = load_fleet(path)

        assert snapshot.trainsets[0].branding_count == 4
        assert len(snapshot.issues) == 1
        issue = snapshot.issues[0]
        assert issue.trainset_id == "TS01"
        assert issue.kind is IssueKind.branding_capacity_exceeded
        assert "E" in issue.message

    def test_policy_slot_capacity(self, tmp_path):
        path = tmp_path / "fleet.yaml"
        path.write_text(FLEET_YAML)
        snapshot = load_fleet(path, ScoringPolicy(max_branding_slots=5))
        assert snapshot.trainsets[0].branding_count == 5
        assert snapshot.issues == []

    def test_dumped_sample_reloads(self, tmp_path, sample_fleet):
        path = dump_fleet(sample_fleet, tmp_path / "sample.json")
        raw = json.loads(path.read_text())
        assert "open_job_count" not in raw["trainsets"][0]
        assert load_fleet(path).trainsets == sample_fleet

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fleet(tmp_path / "missing.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "fleet.csv"
        path.write_text("id,mileage\n")
        with pytest.raises(FleetLoadError, match="Unsupported"):
            load_fleet(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "fleet.json"
        path.write_text("{not json")
        with pytest.raises(FleetLoadError):
            load_fleet(path)


class TestParseFleet:
    def test_missing_trainsets_key(self):
        with pytest.raises(FleetLoadError, match="trainsets"):
            parse_fleet({"units": []})

    def test_invalid_entry(self):
        with pytest.raises(FleetLoadError, match="entry 0"):
            parse_fleet({"trainsets": [{"id": "TS01", "mileage": -5, "fitness_valid": True}]})

    @pytest.mark.parametrize(
        "extra",
        [
            {"job_cards": [1]},
            {"job_cards": "minor"},
            {"branding": ["Nike"]},
            {"branding": {"sponsor_name": "Nike"}},
        ],
    )
    def test_nested_lists_must_hold_mappings(self, extra):
        entry = {"id": "TS01", "fitness_valid": True, "mileage": 1, **extra}
        with pytest.raises(FleetLoadError, match="entry 0"):
            parse_fleet({"trainsets": [entry]})

    def test_empty_fleet(self):
        snapshot = parse_fleet({"trainsets": []})
        assert snapshot.trainsets == []
