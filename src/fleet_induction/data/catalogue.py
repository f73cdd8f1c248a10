# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Catalogue of depot job-card tasks used when simulating fleets.

Tasks are grouped by maintenance category; each carries the severity a
job card for it is raised with.
"""

from __future__ import annotations

from fleet_induction.data.models import Severity

TASK_CATALOGUE: dict[str, list[tuple[str, Severity]]] = {
    "Mechanical": [
        ("Brake system inspection", Severity.critical),
        ("Coupler alignment and lubrication", Severity.moderate),
        ("Suspension check", Severity.moderate),
        ("Wheel profile measurement", Severity.critical),
        ("Axle box temperature anomaly", Severity.critical),
        ("Underframe component tightening", Severity.minor),
        ("Pantograph wear and alignment", Severity.moderate),
    ],
    "Electrical": [
        ("HVAC fault diagnostics", Severity.moderate),
        ("Lighting system failure", Severity.minor),
        ("Battery health check", Severity.moderate),
        ("Traction motor inspection", Severity.critical),
        ("Circuit breaker replacement", Severity.moderate),
        ("Control panel diagnostics", Severity.moderate),
        ("Earthing and insulation test", Severity.critical),
    ],
    "Cleaning & Aesthetics": [
        ("Interior deep cleaning", Severity.minor),
        ("Exterior washing", Severity.minor),
        ("Graffiti removal", Severity.minor),
        ("Seat upholstery repair", Severity.moderate),
        ("Window scratch polishing", Severity.minor),
        ("Branding decal replacement", Severity.moderate),
    ],
    "Safety & Compliance": [
        ("Fire extinguisher recharge", Severity.critical),
        ("Emergency exit signage check", Severity.moderate),
        ("First aid kit replenishment", Severity.minor),
        ("Door interlock malfunction", Severity.critical),
        ("Speed governor calibration", Severity.critical),
        ("Event recorder download", Severity.moderate),
    ],
    "Functional Testing": [
        ("Brake test validation", Severity.critical),
        ("Deadman switch test", Severity.critical),
        ("Horn and bell test", Severity.minor),
        ("ATP system test", Severity.critical),
        ("TCMS diagnostics", Severity.moderate),
    ],
    "Miscellaneous": [
        ("Loose item retrieval", Severity.minor),
        ("Cab console cleaning", Severity.minor),
        ("Driver seat adjustment mechanism", Severity.moderate),
        ("Water tank refill or leak fix", Severity.moderate),
        ("PA system check", Severity.minor),
    ],
}


def all_tasks() -> list[tuple[str, str, Severity]]:
    """Flatten the catalogue into ``(category, task, severity)`` rows."""
    return [
        (category, task, severity)
        for category, tasks in TASK_CATALOGUE.items()
        for task, severity in tasks
    ]
