"""Deterministic building blocks shared by the rule engine tests."""

import random
from typing import Iterable, List, Optional

from .game_state import GameState, GameSettings, Player, HourCard
from .vocabulary import RolePhase, TYPE_TIME_DEMON, TYPE_SIN, TYPE_CURSED


class ScriptedRandom:
    """Replays the given rolls from random(), then falls back to a seeded generator."""
    def __init__(self, rolls: Iterable[float] = (), seed: int = 0):
        self.rolls = list(rolls)
        self._fallback = random.Random(seed)

    def random(self) -> float:
        if self.rolls:
            return self.rolls.pop(0)
        return self._fallback.random()

    def choice(self, seq):
        return self._fallback.choice(seq)

    def shuffle(self, items):
        self._fallback.shuffle(items)

    def randint(self, a: int, b: int) -> int:
        return self._fallback.randint(a, b)


def time_demon(index: int, role: RolePhase = RolePhase.JUVENILE, mana: int = 0,
               position: Optional[int] = None, cards: Optional[List[HourCard]] = None) -> Player:
    name = f"時魔幼體 {index}" if role is RolePhase.JUVENILE else f"時魔 {index} ({role.value})"
    return Player(player_id=f"SM_{index}", name=name, unit_type=TYPE_TIME_DEMON, role=role,
                  index=index, mana=mana, current_clock_position=position,
                  hour_cards=list(cards or []))


def sin(mana: int = 0, position: Optional[int] = None) -> Player:
    return Player(player_id="sin", name="時之惡", unit_type=TYPE_SIN, mana=mana,
                  current_clock_position=position)


def cursed(position: Optional[int] = None) -> Player:
    return Player(player_id="SCZ", name="受詛者", unit_type=TYPE_CURSED,
                  current_clock_position=position)


def make_state(players: List[Player], hour_deck: Optional[List[HourCard]] = None,
               enabled: bool = True) -> GameState:
    return GameState(players=players, hour_deck=list(hour_deck or []),
                     settings=GameSettings(abilities_enabled=enabled))
