# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly gauges using Unicode block characters.

These functions return Rich-markup strings for 0-1 scores.
"""

from __future__ import annotations


def score_color(score: float) -> str:
    """Map a 0-1 score to 'green', 'yellow', or 'red'."""
    if score >= 0.8:
        return "green"
    if score >= 0.5:
        return "yellow"
    return "red"


def score_gauge(score: float, width: int = 20) -> str:
    """Visual gauge with color coding.

    Returns something like: [green]████████████████░░░░[/] 0.80
    """
    clamped = max(0.0, min(1.0, score))
    filled = int(clamped * width)
    color = score_color(clamped)
    bar = "\u2588" * filled + "\u2591" * (width - filled)
    return f"[{color}]{bar}[/] {clamped:.2f}"


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    return score_gauge(score, width=width)
