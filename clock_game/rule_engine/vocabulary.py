"""
This file establishes the core vocabulary for the Clock game rule engine.

Faction names, role phases and targeting modes are defined once here so the
handlers, the engine and the setup code all speak the same language.
"""

from enum import Enum

# --- Factions (unit types) ---
TYPE_TIME_DEMON = "時魔"
TYPE_SIN = "時之惡"
TYPE_CURSED = "受詛者"

ALL_UNIT_TYPES = (TYPE_TIME_DEMON, TYPE_SIN, TYPE_CURSED)

# Display text for a time demon that has not evolved yet
JUVENILE_LABEL = "時魔幼體"


class RolePhase(Enum):
    """Role card held by a unit. Only time demons ever leave NONE."""
    NONE = ""
    JUVENILE = JUVENILE_LABEL
    HOUR_HAND = "時針"
    SECOND_HAND = "秒針"
    MINUTE_HAND = "分針"

    @classmethod
    def from_label(cls, label: str) -> "RolePhase":
        for phase in cls:
            if phase.value == label:
                return phase
        raise ValueError(f"Unknown role label: {label!r}")


EVOLVED_ROLES = (RolePhase.HOUR_HAND, RolePhase.SECOND_HAND, RolePhase.MINUTE_HAND)

# --- Targeting modes used by the gear deduction step ---
TARGETING_DEFAULT = "default"  # the unit closest to 12 is punished
TARGETING_SIN = "sin"          # the unit closest to the sin is punished
