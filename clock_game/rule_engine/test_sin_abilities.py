import unittest

from .actions import OutcomeReason
from .fixtures import ScriptedRandom, time_demon, sin, make_state
from .game_state import HourCard, MinuteCard
from .vocabulary import RolePhase, TARGETING_DEFAULT, TARGETING_SIN
from .handlers.sin_handlers import (
    activate_sin_seal_ability,
    activate_sin_targeting_ability,
    activate_sin_pre_round_discard,
)
from .handlers.hour_hand_handlers import activate_hour_hand_ability


class TestSinSeal(unittest.TestCase):

    def setUp(self):
        self.sin = sin(mana=3)
        self.hour = time_demon(1, RolePhase.HOUR_HAND, mana=2)
        self.second = time_demon(2, RolePhase.SECOND_HAND)
        self.state = make_state([self.sin, self.hour, self.second],
                                hour_deck=[HourCard(1), HourCard(2)])

    def test_seal_blocks_time_demon_abilities(self):
        result = activate_sin_seal_ability(self.state, ScriptedRandom([0.1]))
        self.assertTrue(result)
        self.assertTrue(self.state.ability_marker)
        self.assertEqual(self.sin.mana, 0)

        blocked = activate_hour_hand_ability(self.state, ScriptedRandom([0.1, 0.1]))
        self.assertEqual(blocked.reason, OutcomeReason.SEALED)
        self.assertEqual(self.hour.mana, 2)

    def test_needs_two_evolved_time_demons(self):
        self.second.is_ejected = True
        result = activate_sin_seal_ability(self.state, ScriptedRandom([0.1]))
        self.assertEqual(result.reason, OutcomeReason.NOTHING_TO_DO)
        self.assertFalse(self.state.ability_marker)
        self.assertEqual(self.sin.mana, 3)

    def test_not_enough_mana(self):
        self.sin.mana = 2
        self.assertEqual(activate_sin_seal_ability(self.state, ScriptedRandom([0.1])).reason,
                         OutcomeReason.NOT_ENOUGH_MANA)


class TestSinTargeting(unittest.TestCase):

    def setUp(self):
        self.sin = sin(mana=2)
        self.state = make_state([self.sin, time_demon(1)])

    def test_pull_switches_targeting_mode(self):
        result = activate_sin_targeting_ability(self.state, ScriptedRandom([0.5]))
        self.assertTrue(result)
        self.assertEqual(self.state.targeting_mode, TARGETING_SIN)
        self.assertEqual(self.sin.mana, 0)

    def test_failed_pull_resets_mode(self):
        self.state.targeting_mode = TARGETING_SIN
        result = activate_sin_targeting_ability(self.state, ScriptedRandom([0.7]))
        self.assertFalse(result)
        self.assertEqual(self.state.targeting_mode, TARGETING_DEFAULT)
        self.assertEqual(self.sin.mana, 2)

    def test_pull_ignores_ability_marker(self):
        self.state.ability_marker = True
        self.assertTrue(activate_sin_targeting_ability(self.state, ScriptedRandom([0.1])))


class TestSinPreRoundDiscard(unittest.TestCase):

    def setUp(self):
        self.sin = sin(mana=2)
        self.sin.hand = [MinuteCard(30, 1), MinuteCard(5, 0), MinuteCard(44, 0.5)]
        self.state = make_state([self.sin])

    def test_discards_lowest_minute_card(self):
        result = activate_sin_pre_round_discard(self.state, ScriptedRandom([0.1]))
        self.assertTrue(result)
        self.assertEqual([c.value for c in self.sin.hand], [30, 44])
        self.assertEqual([c.value for c in self.state.minute_discard], [5])
        self.assertEqual(self.sin.mana, 0)

    def test_only_on_first_round_marker(self):
        self.state.round_marker = 2
        result = activate_sin_pre_round_discard(self.state, ScriptedRandom([0.1]))
        self.assertEqual(result.reason, OutcomeReason.WRONG_ROUND)
        self.assertEqual(len(self.sin.hand), 3)

    def test_empty_hand(self):
        self.sin.hand = []
        self.assertEqual(activate_sin_pre_round_discard(self.state, ScriptedRandom([0.1])).reason,
                         OutcomeReason.NOTHING_TO_DO)


if __name__ == '__main__':
    unittest.main()
