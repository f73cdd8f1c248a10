"""Default scoring policy constants for the induction planner.

The five dimension weights must sum to 1.0.  Every constant here is only a
default: :class:`~fleet_induction.scoring.policy.ScoringPolicy` carries the
values actually used by a run, so they can be overridden from a YAML file.
"""

# ---------------------------------------------------------------------------
# Dimension weights in the total score (must sum to 1.0)
# ---------------------------------------------------------------------------
FITNESS_WEIGHT = 0.25
JOB_CARD_WEIGHT = 0.20
BRANDING_WEIGHT = 0.20
MILEAGE_WEIGHT = 0.20
CLEANING_WEIGHT = 0.15

WEIGHT_TOLERANCE = 1e-6

# ---------------------------------------------------------------------------
# Job cards
# ---------------------------------------------------------------------------
SEVERITY_PENALTIES = {
    "minor": 0.3,
    "moderate": 0.6,
    "critical": 1.0,
}
MAX_JOB_CARDS = 10  # penalty units at which the job-card score reaches 0

# ---------------------------------------------------------------------------
# Branding
# ---------------------------------------------------------------------------
MAX_BRANDING_SLOTS = 4
BRANDING_AMOUNT_CEILING = 2_000_000.0  # assumed maximum aggregate contract value
BRANDING_AMOUNT_SHARE = 0.7
BRANDING_COUNT_SHARE = 0.3

# ---------------------------------------------------------------------------
# Output precision
# ---------------------------------------------------------------------------
SCORE_DECIMALS = 6
