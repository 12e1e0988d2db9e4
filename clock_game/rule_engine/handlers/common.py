"""Shared gate checks used by every ability handler."""

import random
from typing import Optional

from ..game_state import GameState
from ..actions import AbilityResult, OutcomeReason


def check_chance(rng, probability: float) -> bool:
    """One independent roll: True with the given probability."""
    return (rng or random).random() < probability


def global_gate(state: GameState, ability: str, respect_marker: bool = True) -> Optional[AbilityResult]:
    """Returns a no-op result when abilities are off or the tick's marker is already used."""
    if state is None or not state.settings.abilities_enabled:
        return AbilityResult(ability, OutcomeReason.DISABLED)
    if respect_marker and state.ability_marker:
        return AbilityResult(ability, OutcomeReason.SEALED)
    return None
