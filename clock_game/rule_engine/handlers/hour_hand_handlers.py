"""
Contains the handler for the 時針 (Hour-Hand) ability.

The holder pays to look at the two cards on top of the hour deck, then may
pay again to bury the lower of the two at the bottom of the deck.
"""

from typing import List

from ..game_state import GameState, HourCard
from ..actions import AbilityResult, OutcomeReason
from ..vocabulary import RolePhase
from .common import check_chance, global_gate
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)

ABILITY_NAME = "hour_hand"


def _index_of_card(deck: List[HourCard], card: HourCard) -> int:
    """Position of this exact card object in the deck, or the last index when it is missing."""
    index = next((i for i, c in enumerate(deck) if c is card), -1)
    if index == -1:
        logger.warning(f"Card {card} not found in hour deck, falling back to the top card.")
        index = len(deck) - 1
    return index


def activate_hour_hand_ability(state: GameState, rng=None) -> AbilityResult:
    """Peeks at the top two hour cards and may move the lower one to the bottom of the deck."""
    blocked = global_gate(state, ABILITY_NAME)
    if blocked is not None:
        logger.debug(f"Hour hand ability skipped: {blocked.reason.value}")
        return blocked

    player = state.find_role_holder(RolePhase.HOUR_HAND)
    if not player:
        return AbilityResult(ABILITY_NAME, OutcomeReason.NO_ACTOR)

    peek_cost = state.settings.cost("HOUR_HAND_PEEK")
    if not player.can_afford(peek_cost):
        logger.debug(f"{player.name} has {player.mana} mana, hour hand needs {peek_cost}.")
        return AbilityResult(ABILITY_NAME, OutcomeReason.NOT_ENOUGH_MANA, player.player_id)

    if not check_chance(rng, state.settings.chance("HOUR_HAND_PEEK")):
        return AbilityResult(ABILITY_NAME, OutcomeReason.GATE_FAILED, player.player_id)

    deck = state.hour_deck
    if len(deck) < 2:
        logger.debug(f"Hour deck holds {len(deck)} card(s); {player.name} cannot peek two.")
        return AbilityResult(ABILITY_NAME, OutcomeReason.DECK_TOO_SMALL, player.player_id)

    player.spend_mana(peek_cost)
    state.ability_marker = True
    inner, outer = deck[-2], deck[-1]
    state.last_hour_hand_peek = {
        "by": player.player_id,
        "game_round": state.game_round,
        "round_marker": state.round_marker,
        "cards": [(inner.number, inner.is_precious), (outer.number, outer.is_precious)],
    }
    result = AbilityResult(ABILITY_NAME, OutcomeReason.ACTIVATED, player.player_id, mana_spent=peek_cost)
    result.effects.append(f"peek {inner} / {outer}")
    logger.info(f"【時針】{player.name} spent {peek_cost} mana to view the top hour cards: {inner}, {outer}.")

    move_cost = state.settings.cost("HOUR_HAND_MOVE")
    if not player.can_afford(move_cost):
        return result
    if not check_chance(rng, state.settings.chance("HOUR_HAND_MOVE")):
        return result

    try:
        target = inner if inner.number <= outer.number else outer
        player.spend_mana(move_cost)
        moved = deck.pop(_index_of_card(deck, target))
        deck.insert(0, moved)
        # The remembered peek no longer shows the top of the deck
        state.last_hour_hand_peek = None
    except Exception as e:
        logger.error(f"Error moving hour card for {player.name}: {e}", exc_info=True)
        raise

    result.mana_spent += move_cost
    result.effects.append(f"bury {moved}")
    logger.info(f"【時針】{player.name} spent {move_cost} mana to move hour card {moved} to the bottom of the deck.")
    return result
