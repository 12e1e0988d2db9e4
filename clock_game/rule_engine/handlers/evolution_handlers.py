"""
Contains handlers for time demon evolution (時魔幼體 -> 時針 / 秒針 / 分針).

A juvenile evolves when it holds at least one precious hour card and three of
the four numbers a role asks for, provided no other active time demon already
holds that role. Roles are checked in the order of ROLE_UPGRADE_REQUIREMENTS.
"""

import re
from typing import List, Optional

from clock_game import config
from ..game_state import GameState, Player, HourCard
from ..card_database import get_role_requirements
from ..vocabulary import RolePhase, TYPE_TIME_DEMON
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)

_NAME_PATTERNS = (re.compile(r"時魔\s*幼體\s*(\d+)"), re.compile(r"時魔\s*(\d+)"))
_ID_PATTERN = re.compile(r"SM_(\d+)")


def derive_unit_index(name: str, player_id: str) -> Optional[int]:
    """Reads the unit number from '時魔 幼體 N' / '時魔 N', then from an 'SM_N' id."""
    for pattern in _NAME_PATTERNS:
        m = pattern.search(name or "")
        if m:
            return int(m.group(1))
    m = _ID_PATTERN.search(player_id or "")
    return int(m.group(1)) if m else None


def format_evolved_name(index: Optional[int], role: RolePhase) -> str:
    if index is None:
        return f"{TYPE_TIME_DEMON} ({role.value})"
    return f"{TYPE_TIME_DEMON} {index} ({role.value})"


def is_role_taken(state: GameState, role: RolePhase, exclude: Player) -> bool:
    return any(p is not exclude and p.unit_type == TYPE_TIME_DEMON and p.role is role
               for p in state.active_players())


def _return_cards_to_clock(state: GameState, cards: List[HourCard]):
    """Precious cards go on top of their slot, the rest underneath what is already there."""
    for card in cards:
        spot = state.get_clock_spot(card.number)
        if spot is None:
            # Never lose a card; put it back on top of the deck instead
            state.hour_deck.append(card)
            logger.warning(f"No clock slot {card.number}; hour card returned to the deck.")
        elif card.is_precious:
            spot.cards.append(card)
        else:
            spot.cards.insert(0, card)


def attempt_role_upgrade(player: Player, state: GameState) -> bool:
    """Promotes a juvenile time demon to the first role it qualifies for. Returns True on promotion."""
    if player is None or state is None:
        return False
    if player.unit_type != TYPE_TIME_DEMON or player.is_ejected:
        return False
    if player.role is not RolePhase.JUVENILE or not player.hour_cards:
        return False
    if not any(card.is_precious for card in player.hour_cards):
        logger.debug(f"{player.name} holds no precious hour card; cannot evolve.")
        return False

    collected = {card.number for card in player.hour_cards}
    for role, required in get_role_requirements().items():
        if is_role_taken(state, role, player):
            continue
        matches = sum(1 for n in required if n in collected)
        if matches < config.UPGRADE_MIN_MATCHES:
            continue

        index = player.index if player.index is not None else derive_unit_index(player.name, player.player_id)
        try:
            player.role = role
            player.index = index
            player.name = format_evolved_name(index, role)
            returned = player.hour_cards
            player.hour_cards = []
            _return_cards_to_clock(state, returned)
        except Exception as e:
            logger.error(f"Error evolving {player.player_id} into {role.value}: {e}", exc_info=True)
            raise

        logger.info(f"🎉【進化】{player.player_id} evolved into {role.value} with {matches}/{len(required)} "
                    f"required hour cards; {len(returned)} card(s) returned to the clock face.")
        return True

    return False
