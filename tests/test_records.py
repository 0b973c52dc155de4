# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fittrack.sheets.records import (
    MealRecord,
    SetRecord,
    decode_meal,
    decode_set_record,
    encode_meal,
    encode_set_record,
    first_number,
    format_number,
    parse_float,
    round_half_up,
    sanitize_macro,
    sanitize_number,
)


class TestSetRecord(unittest.TestCase):
    def test_encode_substitutes_zero_for_blank(self) -> None:
        self.assertEqual(encode_set_record("100", "3", "10"), "100/3/10")
        self.assertEqual(encode_set_record("", None, "8"), "0/0/8")
        self.assertEqual(encode_set_record(62.5, 4, 12), "62.5/4/12")

    def test_roundtrip(self) -> None:
        for weight, sets, reps in [("100", "3", "10"), ("0", "0", "0"), ("22.5", "5", "5")]:
            record = decode_set_record(encode_set_record(weight, sets, reps))
            self.assertEqual(record, SetRecord(float(weight), float(sets), float(reps)))

    def test_decode_requires_three_parts(self) -> None:
        self.assertIsNone(decode_set_record("100/3"))
        self.assertIsNone(decode_set_record("100/3/10/1"))
        self.assertIsNone(decode_set_record(""))
        self.assertIsNone(decode_set_record(None))

    def test_decode_bad_numbers_become_zero(self) -> None:
        record = decode_set_record("heavy/3/x")
        self.assertEqual(record, SetRecord(0.0, 3.0, 0.0))

    def test_all_zero_is_empty(self) -> None:
        self.assertTrue(decode_set_record("0/0/0").is_empty)
        self.assertFalse(decode_set_record("0/3/10").is_empty)


class TestMealRecord(unittest.TestCase):
    def test_roundtrip_clamps_and_rounds(self) -> None:
        encoded = encode_meal({"name": "Oats", "calories": 310.26, "protein": -4, "carbs": "54.04", "fat": None})
        self.assertEqual(encoded, "Oats/310.3/0/54/0")
        self.assertEqual(decode_meal(encoded), MealRecord("Oats", 310.3, 0.0, 54.0, 0.0))

    def test_slash_in_name_keeps_five_parts(self) -> None:
        encoded = encode_meal({"name": "Rice/beans", "calories": 500})
        meal = decode_meal(encoded)
        self.assertIsNotNone(meal)
        assert meal is not None
        self.assertEqual(meal.name, "Rice-beans")
        self.assertEqual(meal.calories, 500.0)

    def test_decode_requires_five_parts(self) -> None:
        self.assertIsNone(decode_meal("Eggs/140/12/1"))
        self.assertIsNone(decode_meal("100/3/10"))

    def test_decode_clamps_hand_edited_cells(self) -> None:
        meal = decode_meal("Refund/-50/12.349/x/1")
        self.assertEqual(meal, MealRecord("Refund", 0.0, 12.3, 0.0, 1.0))


class TestNumbers(unittest.TestCase):
    def test_sanitize_macro(self) -> None:
        self.assertEqual(sanitize_macro(-3.14159), 0.0)
        self.assertEqual(sanitize_macro(12.049), 12.0)
        self.assertEqual(sanitize_macro(12.05), 12.1)
        self.assertEqual(sanitize_macro("not a number"), 0.0)
        self.assertEqual(sanitize_macro(float("inf")), 0.0)
        self.assertEqual(sanitize_macro(float("nan")), 0.0)

    def test_sanitize_number_keeps_sign(self) -> None:
        self.assertEqual(sanitize_number("-250"), -250.0)
        self.assertEqual(sanitize_number(""), 0.0)

    def test_parse_float_uses_numeric_prefix(self) -> None:
        self.assertEqual(parse_float("5km"), 5.0)
        self.assertEqual(parse_float(" 3.2 "), 3.2)
        self.assertIsNone(parse_float("km"))
        self.assertIsNone(parse_float(None))

    def test_first_number_stops_at_colon(self) -> None:
        self.assertEqual(first_number("5:30/km"), 5.0)
        self.assertEqual(first_number("170 spm"), 170.0)
        self.assertEqual(first_number("pace 4.75"), 4.75)
        self.assertIsNone(first_number("n/a"))

    def test_round_half_up_goes_toward_positive_infinity(self) -> None:
        self.assertEqual(round_half_up(2.5), 3.0)
        self.assertEqual(round_half_up(-2.5), -2.0)
        self.assertEqual(round_half_up(-0.25, 1), -0.2)
        self.assertEqual(round_half_up(167.5), 168.0)

    def test_format_number(self) -> None:
        self.assertEqual(format_number(140.0), "140")
        self.assertEqual(format_number(12.5), "12.5")


if __name__ == "__main__":
    unittest.main()
