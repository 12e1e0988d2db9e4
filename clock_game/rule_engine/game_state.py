"""
This file defines the data structures for the game state.
It represents the clock face, the decks and every unit at any given point in time.
It is the single source of truth that the ability handlers act upon.

Mutation contract: handlers receive the GameState by reference and mutate it
in place. A handler checks every precondition before its first mutation, so a
call that does nothing leaves the state untouched.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from clock_game import config
from .vocabulary import RolePhase, EVOLVED_ROLES, TYPE_TIME_DEMON, TARGETING_DEFAULT


@dataclass
class HourCard:
    """One hour card. Its number is the clock slot it belongs to."""
    number: int
    is_precious: bool = False
    age_group: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.number}{'★' if self.is_precious else ''}"


@dataclass
class MinuteCard:
    value: int
    gear: float = 0


@dataclass
class ClockSpot:
    """A clock-face slot. cards[0] is the bottom of the stack, cards[-1] the top."""
    position: int
    cards: List[HourCard] = field(default_factory=list)


@dataclass
class Player:
    """A unit at the table and everything it holds."""
    player_id: str
    name: str
    unit_type: str
    role: RolePhase = RolePhase.NONE
    index: Optional[int] = None
    is_ejected: bool = False
    mana: int = 0
    current_clock_position: Optional[int] = None
    hour_cards: List[HourCard] = field(default_factory=list)
    hand: List[MinuteCard] = field(default_factory=list)

    @property
    def role_card(self) -> str:
        return self.role.value

    @property
    def is_juvenile(self) -> bool:
        return self.unit_type == TYPE_TIME_DEMON and self.role is RolePhase.JUVENILE

    @property
    def is_evolved(self) -> bool:
        return self.unit_type == TYPE_TIME_DEMON and self.role in EVOLVED_ROLES

    def can_afford(self, cost: int) -> bool:
        return self.mana >= cost

    def spend_mana(self, cost: int):
        if cost < 0 or self.mana < cost:
            raise ValueError(f"{self.name} cannot spend {cost} mana (has {self.mana})")
        self.mana -= cost


@dataclass
class GameSettings:
    """Read-only switches and balance numbers consumed by the core."""
    abilities_enabled: bool = False
    game_mode: str = "5P"
    ability_costs: Dict[str, int] = field(default_factory=lambda: dict(config.ABILITY_COSTS))
    ability_chances: Dict[str, float] = field(default_factory=lambda: dict(config.ABILITY_CHANCES))

    def cost(self, key: str) -> int:
        return self.ability_costs[key]

    def chance(self, key: str) -> float:
        return self.ability_chances[key]


def new_clock_face() -> List[ClockSpot]:
    return [ClockSpot(position=i + 1) for i in range(config.CLOCK_POSITIONS)]


@dataclass
class GameState:
    """The complete state of the game at one point in time."""
    players: List[Player] = field(default_factory=list)
    hour_deck: List[HourCard] = field(default_factory=list) # index 0 = head/bottom, -1 = tail/top
    clock_face: List[ClockSpot] = field(default_factory=new_clock_face)
    minute_deck: List[MinuteCard] = field(default_factory=list)
    minute_discard: List[MinuteCard] = field(default_factory=list)
    settings: GameSettings = field(default_factory=GameSettings)
    ability_marker: bool = False
    round_marker: int = 1
    game_round: int = 1
    targeting_mode: str = TARGETING_DEFAULT
    hour_precious_config: Optional[str] = None
    last_hour_hand_peek: Optional[Dict[str, object]] = None

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.player_id == player_id), None)

    def active_players(self) -> List[Player]:
        return [p for p in self.players if not p.is_ejected]

    def find_role_holder(self, role: RolePhase) -> Optional[Player]:
        return next((p for p in self.active_players() if p.role is role), None)

    def find_active_of_type(self, unit_type: str) -> Optional[Player]:
        return next((p for p in self.active_players() if p.unit_type == unit_type), None)

    def get_clock_spot(self, position: int) -> Optional[ClockSpot]:
        return next((s for s in self.clock_face if s.position == position), None)

    def count_evolved(self) -> int:
        return sum(1 for p in self.active_players() if p.is_evolved)
