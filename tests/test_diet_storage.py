# -*- coding: utf-8 -*-

from __future__ import annotations

import threading
import unittest

from fittrack.diet.storage import (
    add_meal,
    get_deficit_history,
    get_todays_meals,
    summarize_deficits,
    today_str,
    update_deficit,
)
from fittrack.sheets.memory import MemorySheets


def _sheets(tdee: str = "2500") -> MemorySheets:
    return MemorySheets(
        {
            "Profile": [
                ["Name", "Alex", "", "Date", "Weight", "TDEE"],
                ["DOB", "15/06/1990", "", "10/01/2026", "82", tdee],
            ],
            "Food": [["2026-01-01", "Toast/200/6/30/4"]],
            "Deficit": [["Date", "Total Calories", "Deficit"]],
        }
    )


class TestMeals(unittest.TestCase):
    def test_no_row_for_today(self) -> None:
        data = get_todays_meals(sheets=_sheets())
        self.assertEqual(data, {"date": today_str(), "meals": []})

    def test_meals_share_one_row_in_order(self) -> None:
        sheets = _sheets()
        for name, kcal in [("Eggs", 140), ("Rice", 320.5), ("Apple", 95)]:
            add_meal({"name": name, "calories": kcal}, sheets=sheets)

        food = sheets.rows("Food")
        today_rows = [row for row in food if row and row[0] == today_str()]
        self.assertEqual(len(today_rows), 1)
        self.assertEqual(len(today_rows[0]), 4)

        meals = get_todays_meals(sheets=sheets)["meals"]
        self.assertEqual([m["name"] for m in meals], ["Eggs", "Rice", "Apple"])
        self.assertEqual(meals[1]["calories"], 320.5)

    def test_meal_defaults_to_zero_macros(self) -> None:
        sheets = _sheets()
        add_meal({"name": "Eggs", "calories": 140}, sheets=sheets)
        meals = get_todays_meals(sheets=sheets)["meals"]
        self.assertEqual(meals, [{"name": "Eggs", "calories": 140.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}])

    def test_malformed_cells_are_skipped(self) -> None:
        sheets = _sheets()
        sheets.add_sheet("Food", [[today_str(), "Eggs/140/12/1/10", "garbage", "", "Tea/5/0/1/0"]])
        meals = get_todays_meals(sheets=sheets)["meals"]
        self.assertEqual([m["name"] for m in meals], ["Eggs", "Tea"])

    def test_add_meal_fills_first_free_cell(self) -> None:
        sheets = _sheets()
        sheets.add_sheet("Food", [[today_str(), "Eggs/140/12/1/10", "", "Tea/5/0/1/0"]])
        add_meal({"name": "Soup", "calories": 90}, sheets=sheets)
        self.assertEqual(sheets.get("Food!C1"), [["Soup/90/0/0/0"]])


class TestDeficit(unittest.TestCase):
    def test_deficit_uses_latest_tdee(self) -> None:
        sheets = _sheets()
        add_meal({"name": "Eggs", "calories": 140}, sheets=sheets)
        result = update_deficit(sheets=sheets)
        self.assertEqual(result, {"total_calories": 140.0, "deficit": 2360.0, "tdee": 2500.0})

    def test_default_tdee_without_weight_log(self) -> None:
        sheets = _sheets(tdee="")
        result = update_deficit(sheets=sheets)
        self.assertEqual(result["tdee"], 2000.0)
        self.assertEqual(result["deficit"], 2000.0)

    def test_update_is_idempotent_per_day(self) -> None:
        sheets = _sheets()
        add_meal({"name": "Eggs", "calories": 140}, sheets=sheets)
        update_deficit(sheets=sheets)
        update_deficit(sheets=sheets)
        rows = [r for r in sheets.rows("Deficit") if r and r[0] == today_str()]
        self.assertEqual(rows, [[today_str(), "140", "2360"]])

    def test_surplus_is_negative(self) -> None:
        sheets = _sheets(tdee="2000")
        add_meal({"name": "Pizza", "calories": 2300}, sheets=sheets)
        self.assertEqual(update_deficit(sheets=sheets)["deficit"], -300.0)


class TestConcurrentMeals(unittest.TestCase):
    def test_parallel_adds_share_one_row(self) -> None:
        sheets = _sheets()
        count = 12
        barrier = threading.Barrier(count)
        errors = []

        def worker(i: int) -> None:
            try:
                barrier.wait()
                add_meal({"name": f"Snack {i}", "calories": 10}, sheets=sheets)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        today_rows = [row for row in sheets.rows("Food") if row and row[0] == today_str()]
        self.assertEqual(len(today_rows), 1)
        self.assertEqual(len(today_rows[0]), count + 1)
        names = sorted(m["name"] for m in get_todays_meals(sheets=sheets)["meals"])
        self.assertEqual(names, sorted(f"Snack {i}" for i in range(count)))

        deficit_rows = [r for r in sheets.rows("Deficit") if r and r[0] == today_str()]
        self.assertEqual(deficit_rows, [[today_str(), "120", "2380"]])


class TestDeficitHistory(unittest.TestCase):
    def test_sorted_by_date_value(self) -> None:
        sheets = MemorySheets(
            {
                "Deficit": [
                    ["Date", "Total Calories", "Deficit"],
                    ["2026-10-05", "1800", "500"],
                    ["2026-10-01", "2100", "200"],
                    ["2026-10-04", "1900", "400"],
                    ["2026-10-02", "2600", "-300"],
                    ["2026-10-03", "2000", "300"],
                ]
            }
        )
        history = get_deficit_history(3, sheets=sheets)
        self.assertEqual([h.date for h in history], ["2026-10-03", "2026-10-04", "2026-10-05"])
        stats = summarize_deficits(history)
        assert stats is not None
        self.assertEqual((stats.average, stats.max, stats.min), (400.0, 500.0, 300.0))

    def test_limit_larger_than_rows(self) -> None:
        sheets = MemorySheets({"Deficit": [["2026-10-02", "100", "1900"], ["2026-10-01", "0", "2000"]]})
        history = get_deficit_history(sheets=sheets)
        self.assertEqual([h.date for h in history], ["2026-10-01", "2026-10-02"])
        self.assertEqual(get_deficit_history(0, sheets=sheets), [])

    def test_empty_history_has_no_stats(self) -> None:
        self.assertIsNone(summarize_deficits([]))


if __name__ == "__main__":
    unittest.main()
