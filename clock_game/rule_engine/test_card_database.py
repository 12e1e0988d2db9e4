import unittest

from .card_database import gear_value, get_role_requirements
from .vocabulary import RolePhase


class TestGearValue(unittest.TestCase):

    def test_documented_examples(self):
        self.assertEqual(gear_value(1), 0)
        self.assertEqual(gear_value(20), 0.5)
        self.assertEqual(gear_value(30), 1)
        self.assertEqual(gear_value(45), 0.5)
        self.assertEqual(gear_value(60), 0)

    def test_band_edges(self):
        edges = {11: 0, 12: 0.5, 25: 0.5, 26: 1, 35: 1, 36: 0.5, 49: 0.5, 50: 0}
        for value, expected in edges.items():
            with self.subTest(value=value):
                self.assertEqual(gear_value(value), expected)

    def test_total_over_minute_range(self):
        for value in range(1, 61):
            self.assertIn(gear_value(value), (0, 0.5, 1))

    def test_out_of_range_falls_back_to_zero(self):
        for value in (0, -5, 61, 1000):
            self.assertEqual(gear_value(value), 0)


class TestRoleRequirements(unittest.TestCase):

    def test_declaration_order_and_recipes(self):
        requirements = get_role_requirements()
        self.assertEqual(list(requirements), [RolePhase.HOUR_HAND, RolePhase.SECOND_HAND, RolePhase.MINUTE_HAND])
        self.assertEqual(requirements[RolePhase.HOUR_HAND], [1, 4, 9, 10])
        for numbers in requirements.values():
            self.assertEqual(len(numbers), 4)


if __name__ == '__main__':
    unittest.main()
