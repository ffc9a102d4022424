"""
Registry tests: lookup, per-band color sequences, option labels.
"""

import unittest

from color_bands import (
    REGISTRY,
    ColorBandRegistry,
    ColorCodeError,
    ColorSpec,
    InvalidRoleError,
    UnknownColorError,
    option_label,
)


class TestLookup(unittest.TestCase):

    def test_lookup_returns_spec(self):
        spec = REGISTRY.lookup("yellow")
        self.assertEqual(spec.digit, 4)
        self.assertEqual(spec.multiplier, 10_000)
        self.assertIsNone(spec.tolerance)

    def test_lookup_is_case_insensitive(self):
        self.assertIs(REGISTRY.lookup("  Gold "), REGISTRY.lookup("gold"))

    def test_unknown_color_raises(self):
        with self.assertRaises(UnknownColorError) as ctx:
            REGISTRY.lookup("magenta")
        self.assertEqual(ctx.exception.name, "magenta")
        self.assertIn("magenta", str(ctx.exception))

    def test_unknown_color_is_a_key_error(self):
        with self.assertRaises(KeyError):
            REGISTRY.lookup("pink")

    def test_non_string_name_raises_unknown_color(self):
        with self.assertRaises(UnknownColorError):
            REGISTRY.lookup(None)

    def test_contains_and_len(self):
        self.assertIn("Violet", REGISTRY)
        self.assertNotIn("magenta", REGISTRY)
        self.assertEqual(len(REGISTRY), 12)

    def test_iteration_follows_definition_order(self):
        self.assertEqual(list(REGISTRY)[:3], ["black", "brown", "red"])
        self.assertEqual(list(REGISTRY)[-2:], ["gold", "silver"])

    def test_display_name(self):
        self.assertEqual(REGISTRY.lookup("violet").display_name, "Violet")

    def test_gold_and_black_roles(self):
        black = REGISTRY.lookup("black")
        gold = REGISTRY.lookup("gold")
        self.assertEqual((black.digit, black.multiplier, black.tolerance), (0, 1, None))
        self.assertEqual((gold.digit, gold.multiplier, gold.tolerance), (None, 0.1, "±5%"))


class TestBandSequences(unittest.TestCase):

    def test_digit_colors(self):
        self.assertEqual(
            REGISTRY.digit_colors(),
            ("black", "brown", "red", "orange", "yellow",
             "green", "blue", "violet", "grey", "white"),
        )

    def test_multiplier_colors(self):
        self.assertEqual(
            REGISTRY.multiplier_colors(),
            ("black", "brown", "red", "orange", "yellow",
             "green", "blue", "violet", "gold", "silver"),
        )

    def test_tolerance_colors(self):
        self.assertEqual(REGISTRY.tolerance_colors(), ("brown", "red", "gold", "silver"))

    def test_sequences_match_non_null_attributes(self):
        for name in REGISTRY:
            spec = REGISTRY.lookup(name)
            self.assertEqual(name in REGISTRY.digit_colors(), spec.digit is not None)
            self.assertEqual(name in REGISTRY.multiplier_colors(), spec.multiplier is not None)
            self.assertEqual(name in REGISTRY.tolerance_colors(), spec.tolerance is not None)

    def test_allowed_colors_per_band(self):
        self.assertEqual(REGISTRY.allowed_colors(1), REGISTRY.digit_colors())
        self.assertEqual(REGISTRY.allowed_colors(2), REGISTRY.digit_colors())
        self.assertEqual(REGISTRY.allowed_colors(3), REGISTRY.multiplier_colors())
        self.assertEqual(REGISTRY.allowed_colors(4), REGISTRY.tolerance_colors())

    def test_allowed_colors_bad_band(self):
        with self.assertRaises(ValueError):
            REGISTRY.allowed_colors(5)


class TestLookupForBand(unittest.TestCase):

    def test_valid_role(self):
        self.assertEqual(REGISTRY.lookup_for_band(3, "gold").multiplier, 0.1)

    def test_missing_role_raises(self):
        with self.assertRaises(InvalidRoleError) as ctx:
            REGISTRY.lookup_for_band(4, "green")
        err = ctx.exception
        self.assertEqual((err.band, err.color, err.role), (4, "green", "tolerance"))

    def test_invalid_role_is_a_value_error(self):
        with self.assertRaises(ValueError):
            REGISTRY.lookup_for_band(3, "white")

    def test_both_errors_share_a_base(self):
        for band, name in ((1, "gold"), (1, "nope")):
            with self.assertRaises(ColorCodeError):
                REGISTRY.lookup_for_band(band, name)


class TestCustomRegistry(unittest.TestCase):

    def test_duplicate_names_rejected(self):
        spec = ColorSpec("red", 2, 100, None, (255, 0, 0), (0, 0, 0))
        with self.assertRaises(ValueError):
            ColorBandRegistry([spec, spec])

    def test_names_are_normalised(self):
        registry = ColorBandRegistry([ColorSpec("Red", 2, 100, None, (255, 0, 0), (0, 0, 0))])
        self.assertEqual(list(registry), ["red"])
        self.assertEqual(registry.lookup("RED").name, "red")


class TestOptionLabel(unittest.TestCase):

    def test_digit_label(self):
        self.assertEqual(option_label("brown", 1), "Brown (1)")

    def test_multiplier_labels(self):
        self.assertEqual(option_label("red", 3), "Red (×100)")
        self.assertEqual(option_label("gold", 3), "Gold (×0.1)")
        self.assertEqual(option_label("violet", 3), "Violet (×10,000,000)")

    def test_tolerance_label(self):
        self.assertEqual(option_label("silver", 4), "Silver (±10%)")

    def test_label_for_disallowed_color_raises(self):
        with self.assertRaises(InvalidRoleError):
            option_label("grey", 3)


if __name__ == "__main__":
    unittest.main()
