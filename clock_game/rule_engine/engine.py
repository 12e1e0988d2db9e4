import random
from typing import List, Optional

from .game_state import GameState
from .actions import AbilityResult
from .rulebook import Rulebook, TICK_ORDER, SIN_PULL, SIN_PRE_ROUND_DISCARD
from .handlers.evolution_handlers import attempt_role_upgrade
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)


class AbilityEngine:
    """Entry point the turn loop uses to resolve abilities and evolutions.

    Responsibilities:
    - Clearing the per-tick ability marker at tick boundaries.
    - Offering each ability once per tick, in rulebook order.
    - Running the evolution check for every juvenile time demon.

    The randomness source is injected so a seeded generator replays a game exactly.
    """
    def __init__(self, state: GameState, rng: Optional[random.Random] = None):
        self.state = state
        self.rng = rng or random.Random()
        self.rulebook = Rulebook()
        logger.info("AbilityEngine initialized.")

    def begin_tick(self):
        """Clears the ability marker so one ability may fire again."""
        self.state.ability_marker = False
        logger.debug(f"Tick started (round {self.state.game_round}, marker {self.state.round_marker}).")

    def activate(self, ability: str) -> AbilityResult:
        handler = self.rulebook.get_handler(ability)
        if handler is None:
            raise KeyError(f"No handler registered for ability {ability!r}")
        result = handler(self.state, self.rng)
        logger.debug(f"{result!r}")
        return result

    def resolve_pre_round(self) -> List[AbilityResult]:
        """Abilities the sin uses before minute cards are played."""
        return [self.activate(SIN_PRE_ROUND_DISCARD), self.activate(SIN_PULL)]

    def resolve_abilities(self) -> List[AbilityResult]:
        """Offers every marker-bound ability once; at most one of them activates."""
        return [self.activate(ability) for ability in TICK_ORDER]

    def resolve_evolutions(self) -> List[str]:
        """Tries to evolve every active juvenile time demon. Returns the ids that evolved."""
        evolved = []
        for player in [p for p in self.state.active_players() if p.is_juvenile]:
            if attempt_role_upgrade(player, self.state):
                evolved.append(player.player_id)
        return evolved
