from typing import Dict, List, Tuple

from clock_game import config
from .vocabulary import RolePhase

# (low, high, gear) bands for minute card values, inclusive on both ends
GEAR_BANDS: List[Tuple[int, int, float]] = [
    (1, 11, 0),
    (12, 25, 0.5),
    (26, 35, 1),
    (36, 49, 0.5),
    (50, 60, 0),
]


def gear_value(value: int) -> float:
    """Returns the gear contribution of a minute card value. Out-of-range values give 0."""
    for low, high, gear in GEAR_BANDS:
        if low <= value <= high:
            return gear
    return 0


def get_role_requirements() -> Dict[RolePhase, List[int]]:
    """Returns the evolution recipes keyed by role, in the order they are checked."""
    return {RolePhase.from_label(label): list(numbers)
            for label, numbers in config.ROLE_UPGRADE_REQUIREMENTS.items()}
