import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Optional YAML overrides for the game settings below.
SETTINGS_PATH = os.environ.get("CLOCK_GAME_SETTINGS", os.path.join(BASE_DIR, "settings.yaml"))

# Logging
LOG_DIR = os.environ.get("CLOCK_GAME_LOG_DIR", "logs")
LOG_TO_FILE = os.environ.get("CLOCK_GAME_LOG_TO_FILE", "1") != "0"
LOG_TO_CONSOLE = True

# System toggles. enable_abilities can be flipped by the UI at runtime.
GAME_CONFIG = {
    "enable_abilities": False,
    "game_mode": "5P",  # '5P' or '3P'
}

# Player roster used at game setup
PLAYER_ROLES = [
    {"id": "SM_1", "name": "時魔幼體 1", "type": "時魔"},
    {"id": "SM_2", "name": "時魔幼體 2", "type": "時魔"},
    {"id": "SM_3", "name": "時魔幼體 3", "type": "時魔"},
    {"id": "sin", "name": "時之惡", "type": "時之惡"},
    {"id": "SCZ", "name": "受詛者", "type": "受詛者"},
]

STARTING_MANA = 0

# Ability costs (balance numbers live here)
ABILITY_COSTS = {
    "HOUR_HAND_PEEK": 1,
    "HOUR_HAND_MOVE": 1,
    "MINUTE_HAND_MOVE": 2,
    "SIN_PRE_ROUND_DISCARD": 2,
    "SIN_PULL": 2,
    "SIN_SEAL": 3,
}

# Probability gates, 0.0 ~ 1.0
ABILITY_CHANCES = {
    "HOUR_HAND_PEEK": 0.5,
    "HOUR_HAND_MOVE": 0.5,
    "MINUTE_HAND_ACTIVATE": 0.5,
    "MINUTE_HAND_SELF_MOVE": 0.5,
    "SIN_PRE_ROUND_DISCARD": 0.5,
    "SIN_PULL": 0.6,
    "SIN_SEAL": 0.5,
}

# Evolved time demons required on the board before the seal can fire
SIN_SEAL_MIN_EVOLVED = 2

# Evolution recipes, checked in declaration order.
# A juvenile needs UPGRADE_MIN_MATCHES of the four numbers plus one precious card.
ROLE_UPGRADE_REQUIREMENTS = {
    "時針": [1, 4, 9, 10],
    "秒針": [2, 6, 8, 11],
    "分針": [3, 5, 7, 11],
}
UPGRADE_MIN_MATCHES = 3

# Precious hour card configurations; one is picked per game.
HOUR_AGE_GROUPS = ["少年", "青年", "中年"]
HOUR_PRECIOUS_CONFIGS = [
    {"id": "CFG_1", "label": "hour123",
     "mapping": {"少年": [1, 5, 8, 10], "青年": [2, 6, 7, 11], "中年": [3, 4, 9, 12]}},
    {"id": "CFG_2", "label": "hour231",
     "mapping": {"少年": [2, 6, 7, 11], "青年": [3, 4, 9, 12], "中年": [1, 5, 8, 10]}},
    {"id": "CFG_3", "label": "hour312",
     "mapping": {"少年": [3, 4, 9, 12], "青年": [1, 5, 8, 10], "中年": [2, 6, 7, 11]}},
]

CLOCK_POSITIONS = 12
MINUTE_CARD_TOTAL = 60
