import os
import tempfile
import unittest

from .game_initializer import (
    _get_game_settings,
    build_hour_deck,
    build_minute_deck,
    build_three_player_hour_deck,
    create_players,
    initialize_game_state,
)
from .fixtures import ScriptedRandom
from .game_state import GameSettings
from .vocabulary import RolePhase, TYPE_TIME_DEMON


class TestGameInitializer(unittest.TestCase):

    def _write_settings(self, text: str) -> str:
        handle, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_minute_deck_gears(self):
        deck = build_minute_deck()
        self.assertEqual([c.value for c in deck], list(range(1, 61)))
        self.assertEqual(deck[29].gear, 1)
        self.assertEqual(sum(c.gear for c in deck), 24)

    def test_hour_deck_has_twelve_precious(self):
        deck, precious_config = build_hour_deck(ScriptedRandom(seed=3))
        self.assertEqual(len(deck), 36)
        precious = [c for c in deck if c.is_precious]
        self.assertEqual(sorted(c.number for c in precious), list(range(1, 13)))
        for card in precious:
            self.assertIn(card.number, precious_config["mapping"][card.age_group])

    def test_three_player_deck(self):
        deck = build_three_player_hour_deck()
        self.assertEqual(len(deck), 24)
        self.assertFalse(any(c.is_precious for c in deck))

    def test_players_start_juvenile_with_index(self):
        players = create_players()
        demons = [p for p in players if p.unit_type == TYPE_TIME_DEMON]
        self.assertEqual([p.index for p in demons], [1, 2, 3])
        self.assertTrue(all(p.role is RolePhase.JUVENILE for p in demons))
        self.assertTrue(all(p.role is RolePhase.NONE for p in players if p not in demons))

    def test_unknown_unit_type_rejected(self):
        with self.assertRaises(ValueError):
            create_players([{"id": "x", "name": "x", "type": "dragon"}])

    def test_initialize_game_state(self):
        state = initialize_game_state(GameSettings(abilities_enabled=True), rng=ScriptedRandom(seed=1))
        self.assertEqual(len(state.players), 5)
        self.assertEqual(len(state.hour_deck), 36)
        self.assertEqual(len(state.minute_deck), 60)
        self.assertEqual([s.position for s in state.clock_face], list(range(1, 13)))
        self.assertFalse(state.ability_marker)
        self.assertIsNotNone(state.hour_precious_config)

    def test_three_player_mode(self):
        state = initialize_game_state(GameSettings(game_mode="3P"), shuffle=False)
        self.assertEqual(len(state.players), 3)
        self.assertEqual(len(state.hour_deck), 24)

    def test_yaml_overrides(self):
        path = self._write_settings("enable_abilities: true\nability_costs:\n  MINUTE_HAND_MOVE: 3\n")
        settings = _get_game_settings(path)
        self.assertTrue(settings.abilities_enabled)
        self.assertEqual(settings.cost("MINUTE_HAND_MOVE"), 3)
        self.assertEqual(settings.cost("HOUR_HAND_PEEK"), 1)
        self.assertEqual(settings.chance("SIN_PULL"), 0.6)

    def test_missing_file_uses_defaults(self):
        settings = _get_game_settings(os.path.join(tempfile.gettempdir(), "no_such_clock_settings.yaml"))
        self.assertFalse(settings.abilities_enabled)
        self.assertEqual(settings.game_mode, "5P")

    def test_invalid_settings_rejected(self):
        for text in ("ability_costs:\n  SIN_SEAL: -1\n",
                     "ability_chances:\n  SIN_SEAL: 1.5\n",
                     "game_mode: 4P\n",
                     "enable_abilities: \"no\"\n",
                     "enable_abilities: 1\n",
                     "- just\n- a list\n"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    _get_game_settings(self._write_settings(text))


if __name__ == '__main__':
    unittest.main()
