"""
This file defines the data structures describing what an ability call did.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OutcomeReason(Enum):
    ACTIVATED = "activated"
    DISABLED = "abilities_disabled"
    SEALED = "ability_marker_set"
    NO_ACTOR = "no_eligible_actor"
    NOT_ENOUGH_MANA = "not_enough_mana"
    GATE_FAILED = "probability_gate_failed"
    DECK_TOO_SMALL = "hour_deck_too_small"
    WRONG_ROUND = "wrong_round"
    NOTHING_TO_DO = "nothing_to_do"


@dataclass
class AbilityResult:
    """Outcome of one ability call. Truthy only when the ability activated."""
    ability: str
    reason: OutcomeReason
    actor_id: Optional[str] = None
    mana_spent: int = 0
    effects: List[str] = field(default_factory=list)

    @property
    def activated(self) -> bool:
        return self.reason is OutcomeReason.ACTIVATED

    def __bool__(self) -> bool:
        return self.activated

    def __repr__(self) -> str:
        actor = f", Actor: {self.actor_id}" if self.actor_id else ""
        return f"AbilityResult({self.ability}: {self.reason.value}{actor}, Mana: {self.mana_spent})"
