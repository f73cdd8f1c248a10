# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring policy, sub-score rules and the fleet scoring engine.

Import :class:`~fleet_induction.scoring.engine.FleetScorer` and
:class:`~fleet_induction.scoring.policy.ScoringPolicy` from their modules
or from the top-level :mod:`fleet_induction` package.
"""
