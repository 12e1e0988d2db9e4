"""
Contains the handler for the 分針 (Minute-Hand) ability and the clock arithmetic it relies on.
"""

import random

from clock_game import config
from ..game_state import GameState
from ..actions import AbilityResult, OutcomeReason
from ..vocabulary import RolePhase, TYPE_TIME_DEMON, TYPE_SIN
from .common import check_chance, global_gate
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)

ABILITY_NAME = "minute_hand"

MOVABLE_TYPES = (TYPE_TIME_DEMON, TYPE_SIN)


def step_counter_clockwise(position: int) -> int:
    position -= 1
    if position < 1:
        position = config.CLOCK_POSITIONS
    return position


def step_clockwise(position: int) -> int:
    return position % config.CLOCK_POSITIONS + 1


def activate_minute_hand_ability(state: GameState, rng=None) -> AbilityResult:
    """Spends mana to move either the holder back one slot or a random unit forward one slot."""
    blocked = global_gate(state, ABILITY_NAME)
    if blocked is not None:
        logger.debug(f"Minute hand ability skipped: {blocked.reason.value}")
        return blocked

    player = next((p for p in state.active_players()
                   if p.role is RolePhase.MINUTE_HAND and p.current_clock_position is not None), None)
    if not player:
        return AbilityResult(ABILITY_NAME, OutcomeReason.NO_ACTOR)

    cost = state.settings.cost("MINUTE_HAND_MOVE")
    if not player.can_afford(cost):
        logger.debug(f"{player.name} has {player.mana} mana, minute hand needs {cost}.")
        return AbilityResult(ABILITY_NAME, OutcomeReason.NOT_ENOUGH_MANA, player.player_id)

    if not check_chance(rng, state.settings.chance("MINUTE_HAND_ACTIVATE")):
        return AbilityResult(ABILITY_NAME, OutcomeReason.GATE_FAILED, player.player_id)

    player.spend_mana(cost)
    state.ability_marker = True
    result = AbilityResult(ABILITY_NAME, OutcomeReason.ACTIVATED, player.player_id, mana_spent=cost)

    if check_chance(rng, state.settings.chance("MINUTE_HAND_SELF_MOVE")):
        old = player.current_clock_position
        player.current_clock_position = step_counter_clockwise(old)
        result.effects.append(f"self {old}->{player.current_clock_position}")
        logger.info(f"【分針】{player.name} spent {cost} mana and moved from {old} to {player.current_clock_position}.")
        return result

    # The acting holder never pushes itself
    candidates = [p for p in state.active_players()
                  if p is not player and p.unit_type in MOVABLE_TYPES and p.current_clock_position is not None]
    if not candidates:
        logger.info(f"【分針】{player.name} spent {cost} mana but found no unit to move.")
        return result

    target = (rng or random).choice(candidates)
    old = target.current_clock_position
    target.current_clock_position = step_clockwise(old)
    result.effects.append(f"{target.player_id} {old}->{target.current_clock_position}")
    logger.info(f"【分針】{player.name} spent {cost} mana and pushed {target.name} from {old} to {target.current_clock_position}.")
    return result
