import os
import random
from typing import Any, Dict, List, Optional, Tuple

import yaml

from clock_game import config
from .game_state import GameState, GameSettings, Player, HourCard, MinuteCard, new_clock_face
from .card_database import gear_value
from .vocabulary import RolePhase, TYPE_TIME_DEMON, ALL_UNIT_TYPES
from .handlers.evolution_handlers import derive_unit_index
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)

GAME_MODES = ("5P", "3P")


def _get_game_settings(settings_path: Optional[str] = None) -> GameSettings:
    """
    Builds the game settings from config.py defaults, overridden by the YAML
    settings file when it exists.
    """
    path = settings_path or config.SETTINGS_PATH
    overrides: Dict[str, Any] = {}
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        logger.debug(f"Loaded settings overrides from {path}: {sorted(overrides)}")

    costs = dict(config.ABILITY_COSTS)
    costs.update(overrides.get("ability_costs") or {})
    chances = dict(config.ABILITY_CHANCES)
    chances.update(overrides.get("ability_chances") or {})

    for key, value in costs.items():
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"Ability cost {key} must be a non-negative integer, got {value!r}")
    for key, value in chances.items():
        if not isinstance(value, (int, float)) or not 0 <= value <= 1:
            raise ValueError(f"Ability chance {key} must be between 0 and 1, got {value!r}")

    game_mode = str(overrides.get("game_mode", config.GAME_CONFIG["game_mode"]))
    if game_mode not in GAME_MODES:
        raise ValueError(f"Unknown game mode {game_mode!r}")

    enabled = overrides.get("enable_abilities", config.GAME_CONFIG["enable_abilities"])
    if not isinstance(enabled, bool):
        raise ValueError(f"enable_abilities must be true or false, got {enabled!r}")

    return GameSettings(
        abilities_enabled=enabled,
        game_mode=game_mode,
        ability_costs=costs,
        ability_chances={k: float(v) for k, v in chances.items()},
    )


def build_minute_deck() -> List[MinuteCard]:
    return [MinuteCard(value=v, gear=gear_value(v)) for v in range(1, config.MINUTE_CARD_TOTAL + 1)]


def _precious_age_group(precious_config: Optional[Dict[str, Any]], number: int) -> Optional[str]:
    if not precious_config:
        return None
    for age_group, numbers in precious_config["mapping"].items():
        if number in numbers:
            return age_group
    return None


def build_hour_deck(rng: Optional[random.Random] = None) -> Tuple[List[HourCard], Optional[Dict[str, Any]]]:
    """
    36 hour cards: one 1..12 run per age group. A randomly picked precious
    configuration decides which age group's copy of each number is precious.
    """
    rng = rng or random
    precious_config = rng.choice(config.HOUR_PRECIOUS_CONFIGS) if config.HOUR_PRECIOUS_CONFIGS else None
    if precious_config is None:
        logger.warning("No precious configuration loaded; building the hour deck without precious cards.")

    deck = []
    for age in config.HOUR_AGE_GROUPS:
        for n in range(1, config.CLOCK_POSITIONS + 1):
            deck.append(HourCard(number=n, is_precious=(age == _precious_age_group(precious_config, n)), age_group=age))

    precious_count = sum(1 for c in deck if c.is_precious)
    if precious_config and precious_count != config.CLOCK_POSITIONS:
        logger.warning(f"Unexpected precious hour card count: {precious_count} (expected {config.CLOCK_POSITIONS})")
    return deck, precious_config


def build_three_player_hour_deck() -> List[HourCard]:
    return [HourCard(number=n) for _ in range(2) for n in range(1, config.CLOCK_POSITIONS + 1)]


def create_players(roles: Optional[List[Dict[str, str]]] = None) -> List[Player]:
    """Creates the units from the role roster. Time demons start as juveniles."""
    players = []
    for role in roles or config.PLAYER_ROLES:
        if role["type"] not in ALL_UNIT_TYPES:
            raise ValueError(f"Unknown unit type {role['type']!r} for {role['id']}")
        name = role["name"].strip()
        is_demon = role["type"] == TYPE_TIME_DEMON
        players.append(Player(
            player_id=role["id"],
            name=name,
            unit_type=role["type"],
            role=RolePhase.JUVENILE if is_demon else RolePhase.NONE,
            index=derive_unit_index(name, role["id"]) if is_demon else None,
            mana=config.STARTING_MANA,
        ))
    return players


def initialize_game_state(settings: Optional[GameSettings] = None,
                          roles: Optional[List[Dict[str, str]]] = None,
                          rng: Optional[random.Random] = None,
                          shuffle: bool = True) -> GameState:
    """
    Initializes a fresh game: units, shuffled decks and an empty 12-slot clock face.
    """
    rng = rng or random.Random()
    settings = settings or _get_game_settings()
    if roles is None:
        roles = config.PLAYER_ROLES
        if settings.game_mode == "3P":
            roles = [r for r in roles if r["type"] == TYPE_TIME_DEMON]

    minute_deck = build_minute_deck()
    if settings.game_mode == "3P":
        hour_deck, precious_config = build_three_player_hour_deck(), None
    else:
        hour_deck, precious_config = build_hour_deck(rng)
    if shuffle:
        rng.shuffle(minute_deck)
        rng.shuffle(hour_deck)

    state = GameState(
        players=create_players(roles),
        hour_deck=hour_deck,
        clock_face=new_clock_face(),
        minute_deck=minute_deck,
        settings=settings,
        hour_precious_config=precious_config["id"] if precious_config else None,
    )
    logger.info(f"Game initialized: {len(state.players)} players, mode {settings.game_mode}, "
                f"abilities {'on' if settings.abilities_enabled else 'off'}.")
    return state
