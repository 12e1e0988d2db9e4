"""
This file defines the Rulebook, a central dispatch table that maps
ability names to their corresponding handler functions.
"""

from typing import Callable, Dict, List, Optional

from .handlers import hour_hand_handlers, minute_hand_handlers, sin_handlers

SIN_SEAL = "sin_seal"
SIN_PULL = "sin_pull"
SIN_PRE_ROUND_DISCARD = "sin_pre_round_discard"
HOUR_HAND = hour_hand_handlers.ABILITY_NAME
MINUTE_HAND = minute_hand_handlers.ABILITY_NAME

# Order in which the engine offers abilities during a tick. The seal comes
# first so it can shut the time demon abilities out.
TICK_ORDER: List[str] = [SIN_SEAL, HOUR_HAND, MINUTE_HAND]


class Rulebook:
    """A dispatch table mapping ability names to their implementation."""
    def __init__(self):
        self.dispatch_table: Dict[str, Callable] = {}
        self._initialize_rulebook()

    def _initialize_rulebook(self):
        # 時之惡
        self.dispatch_table[SIN_SEAL] = sin_handlers.activate_sin_seal_ability
        self.dispatch_table[SIN_PULL] = sin_handlers.activate_sin_targeting_ability
        self.dispatch_table[SIN_PRE_ROUND_DISCARD] = sin_handlers.activate_sin_pre_round_discard

        # Evolved time demons
        self.dispatch_table[HOUR_HAND] = hour_hand_handlers.activate_hour_hand_ability
        self.dispatch_table[MINUTE_HAND] = minute_hand_handlers.activate_minute_hand_ability

    def get_handler(self, ability: str) -> Optional[Callable]:
        """Retrieves the handler function for a given ability name."""
        return self.dispatch_table.get(ability)
