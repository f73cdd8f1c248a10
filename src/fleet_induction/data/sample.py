"""Reference nightly fleet of 31 trainsets.

Used by the CLI when no fleet file is given and by the test suite as a
realistic mixed fleet: five units fail the fitness gate, mileages range
from 900 to 9,500 km, and a third of the fleet carries branding.
"""

from __future__ import annotations

from fleet_induction.data.models import BrandingContract, JobCard, Trainset

# (id, fitness_valid, severities of open cards, mileage, is_clean)
_UNITS: list[tuple[str, bool, list[str], float, bool]] = [
    ("TS01", True, ["minor", "moderate"], 2500, True),
    ("TS02", True, ["critical"], 6000, False),
    ("TS03", False, [], 3500, True),
    ("TS04", True, ["moderate", "minor"], 4500, False),
    ("TS05", True, ["critical", "moderate"], 7000, True),
    ("TS06", True, [], 3000, True),
    ("TS07", True, ["minor"], 1500, True),
    ("TS08", True, ["critical"], 8500, False),
    ("TS09", False, ["moderate"], 4000, True),
    ("TS10", True, [], 900, True),
    ("TS11", True, ["moderate", "moderate"], 5500, False),
    ("TS12", True, ["critical", "critical"], 9500, False),
    ("TS13", True, ["minor", "minor"], 2000, True),
    ("TS14", True, ["critical", "moderate", "minor"], 6500, False),
    ("TS15", True, [], 1000, True),
    ("TS16", False, [], 5000, False),
    ("TS17", True, ["moderate"], 3200, True),
    ("TS18", True, ["critical"], 7200, True),
    ("TS19", True, ["minor", "minor", "minor"], 4800, False),
    ("TS20", True, [], 1200, True),
    ("TS21", True, ["moderate"], 8000, False),
    ("TS22", False, ["minor"], 2800, True),
    ("TS23", True, ["critical"], 5300, True),
    ("TS24", True, [], 2300, False),
    ("TS25", True, ["moderate"], 6700, True),
    ("TS26", True, ["minor"], 1800, False),
    ("TS27", True, [], 3800, True),
    ("TS28", False, [], 7500, False),
    ("TS29", True, ["critical"], 9000, True),
    ("TS30", True, ["moderate", "moderate"], 4200, False),
    ("TS31", True, [], 1400, True),
]

# trainset id -> (sponsor, duration in months, contract value)
_BRANDING: dict[str, list[tuple[str, int, float]]] = {
    "TS01": [("CocaCola", 12, 500_000), ("Nike", 6, 300_000)],
    "TS02": [("Samsung", 18, 700_000), ("LG", 10, 250_000)],
    "TS04": [("Pepsi", 10, 400_000), ("Adidas", 8, 350_000)],
    "TS05": [("Sony", 15, 450_000), ("Apple", 12, 600_000), ("BMW", 10, 500_000)],
    "TS06": [("Microsoft", 12, 750_000)],
    "TS07": [("Google", 24, 800_000), ("Amazon", 18, 900_000), ("Meta", 12, 600_000)],
    "TS10": [("Intel", 10, 400_000)],
    "TS11": [("Tesla", 14, 1_100_000)],
    "TS15": [("Starbucks", 10, 200_000), ("Netflix", 12, 500_000)],
    "TS18": [("Toyota", 15, 450_000)],
    "TS20": [("Disney", 20, 950_000), ("HBO", 12, 350_000), ("Samsung", 10, 600_000)],
    "TS21": [("Ford", 12, 300_000)],
    "TS23": [("McDonald's", 8, 250_000), ("Nike", 6, 300_000)],
    "TS25": [("Boeing", 12, 1_000_000)],
    "TS27": [("SpaceX", 18, 1_500_000), ("Blue Origin", 12, 800_000)],
    "TS28": [("Amazon", 12, 900_000), ("Apple", 10, 600_000)],
    "TS31": [("LG", 12, 250_000)],
}


def build_sample_fleet() -> list[Trainset]:
    """Build the reference fleet.  Job card numbers run fleet-wide from 1."""
    fleet: list[Trainset] = []
    job_id = 0
    for unit_id, fitness_valid, severities, mileage, is_clean in _UNITS:
        cards = []
        for severity in severities:
            job_id += 1
            cards.append(JobCard(id=job_id, trainset_id=unit_id, severity=severity))
        trainset = Trainset(
            id=unit_id,
            fitness_valid=fitness_valid,
            job_cards=tuple(cards),
            mileage=mileage,
            is_clean=is_clean,
        )
        for sponsor, months, value in _BRANDING.get(unit_id, []):
            trainset = trainset.add_branding(
                BrandingContract(
                    sponsor_name=sponsor, duration_months=months, contract_value=value
                )
            )
        fleet.append(trainset)
    return fleet
