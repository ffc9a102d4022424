"""
The hand-written reference chart must agree with the color registry.
"""

import unittest

from color_bands import REGISTRY
from screen_reference import REFERENCE_TABLE

_SUFFIXES = {"K": 1_000, "M": 1_000_000}


def _parse_multiplier(cell: str):
    if cell == "-":
        return None
    value = cell.lstrip("×")
    if value[-1] in _SUFFIXES:
        return float(value[:-1]) * _SUFFIXES[value[-1]]
    return float(value)


class TestReferenceTable(unittest.TestCase):

    def test_one_row_per_registry_color_in_order(self):
        names = [row[0].lower() for row in REFERENCE_TABLE]
        self.assertEqual(names, list(REGISTRY))

    def test_digits_match(self):
        for name, digit, _, _ in REFERENCE_TABLE:
            expected = REGISTRY.lookup(name).digit
            self.assertEqual(None if digit == "-" else int(digit), expected, name)

    def test_multipliers_match(self):
        for name, _, multiplier, _ in REFERENCE_TABLE:
            expected = REGISTRY.lookup(name).multiplier
            parsed = _parse_multiplier(multiplier)
            if expected is None:
                self.assertIsNone(parsed, name)
            else:
                self.assertAlmostEqual(parsed, expected, msg=name)

    def test_tolerances_match(self):
        for name, _, _, tolerance in REFERENCE_TABLE:
            expected = REGISTRY.lookup(name).tolerance
            self.assertEqual(None if tolerance == "-" else tolerance, expected, name)


if __name__ == "__main__":
    unittest.main()
