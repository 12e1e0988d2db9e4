"""
Contains handlers for the 時之惡 (Evil of Time) abilities.
"""

from clock_game import config
from ..game_state import GameState
from ..actions import AbilityResult, OutcomeReason
from ..vocabulary import TYPE_SIN, TYPE_TIME_DEMON, TARGETING_DEFAULT, TARGETING_SIN
from .common import check_chance, global_gate
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)


def activate_sin_seal_ability(state: GameState, rng=None) -> AbilityResult:
    """Seals every time demon ability for the rest of the tick by setting the ability marker."""
    name = "sin_seal"
    blocked = global_gate(state, name)
    if blocked is not None:
        return blocked

    sin = state.find_active_of_type(TYPE_SIN)
    if not sin:
        return AbilityResult(name, OutcomeReason.NO_ACTOR)

    cost = state.settings.cost("SIN_SEAL")
    if not sin.can_afford(cost):
        return AbilityResult(name, OutcomeReason.NOT_ENOUGH_MANA, sin.player_id)
    if state.count_evolved() < config.SIN_SEAL_MIN_EVOLVED:
        return AbilityResult(name, OutcomeReason.NOTHING_TO_DO, sin.player_id)
    if not check_chance(rng, state.settings.chance("SIN_SEAL")):
        return AbilityResult(name, OutcomeReason.GATE_FAILED, sin.player_id)

    sin.spend_mana(cost)
    state.ability_marker = True
    logger.info(f"【時之惡】{sin.name} spent {cost} mana to seal all time demon abilities this round.")
    return AbilityResult(name, OutcomeReason.ACTIVATED, sin.player_id, mana_spent=cost, effects=["seal"])


def activate_sin_targeting_ability(state: GameState, rng=None) -> AbilityResult:
    """Switches gear deduction to 'closest to the sin' for this round, else resets it to default."""
    name = "sin_pull"
    blocked = global_gate(state, name, respect_marker=False)
    if blocked is not None:
        return blocked

    sin = state.find_active_of_type(TYPE_SIN)
    if not sin:
        return AbilityResult(name, OutcomeReason.NO_ACTOR)
    if not any(p.unit_type == TYPE_TIME_DEMON for p in state.active_players()):
        return AbilityResult(name, OutcomeReason.NOTHING_TO_DO, sin.player_id)

    cost = state.settings.cost("SIN_PULL")
    if sin.can_afford(cost) and check_chance(rng, state.settings.chance("SIN_PULL")):
        sin.spend_mana(cost)
        state.targeting_mode = TARGETING_SIN
        logger.info(f"【時之惡】{sin.name} spent {cost} mana: the unit closest to the sin is punished this round.")
        return AbilityResult(name, OutcomeReason.ACTIVATED, sin.player_id, mana_spent=cost, effects=[TARGETING_SIN])

    state.targeting_mode = TARGETING_DEFAULT
    logger.info("【時之惡】The unit closest to 12 is punished this round.")
    reason = OutcomeReason.NOT_ENOUGH_MANA if not sin.can_afford(cost) else OutcomeReason.GATE_FAILED
    return AbilityResult(name, reason, sin.player_id)


def activate_sin_pre_round_discard(state: GameState, rng=None) -> AbilityResult:
    """On the first round marker, may pay to discard the lowest minute card from the sin's hand."""
    name = "sin_pre_round_discard"
    blocked = global_gate(state, name, respect_marker=False)
    if blocked is not None:
        return blocked

    sin = state.find_active_of_type(TYPE_SIN)
    if not sin:
        return AbilityResult(name, OutcomeReason.NO_ACTOR)
    if state.round_marker != 1:
        return AbilityResult(name, OutcomeReason.WRONG_ROUND, sin.player_id)

    cost = state.settings.cost("SIN_PRE_ROUND_DISCARD")
    if not sin.can_afford(cost):
        return AbilityResult(name, OutcomeReason.NOT_ENOUGH_MANA, sin.player_id)
    if not sin.hand:
        return AbilityResult(name, OutcomeReason.NOTHING_TO_DO, sin.player_id)
    if not check_chance(rng, state.settings.chance("SIN_PRE_ROUND_DISCARD")):
        return AbilityResult(name, OutcomeReason.GATE_FAILED, sin.player_id)

    sin.spend_mana(cost)
    lowest = min(sin.hand, key=lambda c: c.value)
    sin.hand.remove(lowest)
    state.minute_discard.append(lowest)
    logger.info(f"【時之惡】{sin.name} spent {cost} mana and discarded minute card {lowest.value}.")
    return AbilityResult(name, OutcomeReason.ACTIVATED, sin.player_id, mana_spent=cost,
                         effects=[f"discard {lowest.value}"])
