# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Fleet snapshot loader for JSON and YAML files.

A snapshot file holds a top-level ``trainsets`` list.  Each entry follows
the :class:`Trainset` shape, with nested ``job_cards`` and ``branding``
lists::

    trainsets:
      - id: TS01
        fitness_valid: true
        mileage: 2500
        is_clean: true
        job_cards:
          - {id: 1, severity: minor}
        branding:
          - {sponsor_name: Nike, duration_months: 6, contract_value: 300000}

Branding contracts are attached one at a time, so a unit listing more
contracts than there are slots keeps the first ones and the overflow is
reported as a :class:`RecordIssue`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import BaseModel, Field, ValidationError

from fleet_induction.data.models import (
    BrandingContract,
    IssueKind,
    RecordIssue,
    Trainset,
)
from fleet_induction.errors import BrandingCapacityExceededError, FleetLoadError
from fleet_induction.scoring.policy import ScoringPolicy

logger = logging.getLogger(__name__)

_COMPUTED_FIELDS = {"open_job_count", "branding_count", "total_branding_value"}


class FleetSnapshot(BaseModel):
    """Trainsets read from a snapshot, plus any contracts that were rejected."""

    model_config = {"frozen": True}

    trainsets: list[Trainset] = Field(default_factory=list)
    issues: list[RecordIssue] = Field(default_factory=list)


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix == ".json":
            return json.load(f)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
    raise FleetLoadError(f"Unsupported fleet file type: {path.suffix}")


def _nested(entry: dict[str, Any], key: str, index: int) -> list[dict[str, Any]]:
    items = entry.pop(key, None) or []
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise FleetLoadError(
            f"Invalid trainset entry {index}: '{key}' must be a list of mappings"
        )
    return items


def _build_trainset(
    entry: dict[str, Any], index: int, max_slots: int
) -> tuple[Trainset, list[RecordIssue]]:
    entry = dict(entry)
    unit_id = str(entry.get("id", ""))
    contracts = _nested(entry, "branding", index)
    cards = [
        {"trainset_id": unit_id, **card} for card in _nested(entry, "job_cards", index)
    ]

    trainset = Trainset.model_validate({**entry, "job_cards": cards})
    issues: list[RecordIssue] = []
    for raw in contracts:
        contract = BrandingContract.model_validate(raw)
        try:
            trainset = trainset.add_branding(contract, max_slots=max_slots)
        except BrandingCapacityExceededError as exc:
            logger.warning("Rejected %s contract: %s", contract.sponsor_name, exc)
            issues.append(
                RecordIssue(
                    trainset_id=trainset.id,
                    kind=IssueKind.branding_capacity_exceeded,
                    message=f"{exc}; rejected contract with {contract.sponsor_name}",
                )
            )
    return trainset, issues


def parse_fleet(raw: Any, policy: ScoringPolicy | None = None) -> FleetSnapshot:
    """Build a :class:`FleetSnapshot` from already-decoded JSON/YAML data."""
    policy = policy or ScoringPolicy()
    if not isinstance(raw, dict) or not isinstance(raw.get("trainsets"), list):
        raise FleetLoadError("Fleet data must be a mapping with a 'trainsets' list")

    trainsets: list[Trainset] = []
    issues: list[RecordIssue] = []
    for index, entry in enumerate(raw["trainsets"]):
        if not isinstance(entry, dict):
            raise FleetLoadError(f"Trainset entry {index} is not a mapping")
        try:
            trainset, entry_issues = _build_trainset(entry, index, policy.max_branding_slots)
        except ValidationError as exc:
            raise FleetLoadError(f"Invalid trainset entry {index}: {exc}") from exc
        trainsets.append(trainset)
        issues.extend(entry_issues)

    logger.info("Loaded %d trainsets (%d issues)", len(trainsets), len(issues))
    return FleetSnapshot(trainsets=trainsets, issues=issues)


def load_fleet(path: str | Path, policy: ScoringPolicy | None = None) -> FleetSnapshot:
    """Load a fleet snapshot from a ``.json``, ``.yaml`` or ``.yml`` file."""
    fleet_path = Path(path).expanduser()
    if not fleet_path.exists():
        raise FileNotFoundError(f"Fleet file not found: {fleet_path}")
    try:
        raw = _read_raw(fleet_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise FleetLoadError(f"Error reading {fleet_path}: {exc}") from exc
    return parse_fleet(raw, policy)


def dump_fleet(fleet: Sequence[Trainset], path: str | Path) -> Path:
    """Write *fleet* as a snapshot file readable by :func:`load_fleet`."""
    out = Path(path)
    data = {
        "trainsets": [
            t.model_dump(mode="json", exclude=_COMPUTED_FIELDS) for t in fleet
        ]
    }
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w") as f:
        if out.suffix.lower() in (".yaml", ".yml"):
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
    return out
