# -*- coding: utf-8 -*-

from __future__ import annotations

import threading
import unittest

from fittrack.sheets.memory import MemorySheets
from fittrack.workout.models import SetInput
from fittrack.workout.storage import (
    encode_cell,
    get_workout_definition,
    get_workout_exercise_stats,
    list_workout_sheet_names,
    save_workout_session,
)


def _push_day() -> MemorySheets:
    return MemorySheets(
        {
            "Push Day": [
                ["Exercise", "Oct 1, 2026, 07:30 AM", "Oct 3, 2026, 07:10 AM", "Oct 6, 2026, 06:55 AM"],
                ["Bench Press", "100/3/10", "0/0/0", "110/3/8"],
                ["Overhead Press", "", "40/3/12"],
                ["Dips"],
            ],
            "Pull Day": [["Exercise"], ["Rows"]],
            "Run": [["Session", "Distance"]],
        }
    )


class TestWorkoutSheets(unittest.TestCase):
    def test_list_sheet_names_with_keyword(self) -> None:
        sheets = _push_day()
        self.assertEqual(list_workout_sheet_names(sheets=sheets), ["Push Day", "Pull Day", "Run"])
        self.assertEqual(list_workout_sheet_names("PUSH", sheets=sheets), ["Push Day"])
        self.assertEqual(list_workout_sheet_names("leg", sheets=sheets), [])

    def test_definition(self) -> None:
        data = get_workout_definition("Push Day", sheets=_push_day())
        self.assertEqual(data["exercise_names"], ["Bench Press", "Overhead Press", "Dips"])
        self.assertEqual(data["session_matrix"][0][0], "Oct 1, 2026, 07:30 AM")
        self.assertEqual(data["session_matrix"][1], ["100/3/10", "0/0/0", "110/3/8"])


class TestSaveWorkoutSession(unittest.TestCase):
    def test_new_session_takes_next_free_column(self) -> None:
        sheets = _push_day()
        column = save_workout_session("Push Day", "Oct 9, 2026, 07:00 AM", [["105/3/9"], [""], ["0/3/15"]], sheets=sheets)
        self.assertEqual(column, "E")
        self.assertEqual(
            sheets.get("'Push Day'!E1:E4"),
            [["Oct 9, 2026, 07:00 AM"], ["105/3/9"], [], ["0/3/15"]],
        )

    def test_same_label_reuses_column(self) -> None:
        sheets = _push_day()
        first = save_workout_session("Push Day", "Oct 9, 2026, 07:00 AM", ["105/3/9"], sheets=sheets)
        second = save_workout_session("Push Day", "Oct 9, 2026, 07:00 AM", ["105/3/9", "45/3/10"], sheets=sheets)
        self.assertEqual(first, second)
        self.assertEqual(sheets.get(f"'Push Day'!{second}3"), [["45/3/10"]])

    def test_existing_label_in_sheet_is_reused(self) -> None:
        sheets = _push_day()
        column = save_workout_session("Push Day", "Oct 3, 2026, 07:10 AM", ["90/3/10"], sheets=sheets)
        self.assertEqual(column, "C")
        self.assertEqual(sheets.get("'Push Day'!C2"), [["90/3/10"]])

    def test_explicit_column_is_used_verbatim(self) -> None:
        sheets = _push_day()
        column = save_workout_session("Push Day", "Renamed", ["1/1/1"], existing_column="d", sheets=sheets)
        self.assertEqual(column, "D")
        self.assertEqual(sheets.get("'Push Day'!D1:D2"), [["Renamed"], ["1/1/1"]])

    def test_invalid_column_reference(self) -> None:
        sheets = _push_day()
        with self.assertRaises(ValueError):
            save_workout_session("Push Day", "x", [], existing_column="B2", sheets=sheets)
        with self.assertRaises(ValueError):
            save_workout_session("Push Day", "x", [], existing_column="A", sheets=sheets)

    def test_encode_cell_shapes(self) -> None:
        self.assertEqual(encode_cell(["100/3/10"]), "100/3/10")
        self.assertEqual(encode_cell([]), "")
        self.assertEqual(encode_cell(None), "")
        self.assertEqual(encode_cell(SetInput(weight="80", sets=None, reps="12")), "80/0/12")
        self.assertEqual(encode_cell(SetInput()), "")
        self.assertEqual(encode_cell({"weight": "", "sets": "", "reps": ""}), "")


class TestConcurrentSessions(unittest.TestCase):
    def test_parallel_new_sessions_get_distinct_columns(self) -> None:
        sheets = _push_day()
        count = 10
        barrier = threading.Barrier(count)
        columns = {}
        lock = threading.Lock()

        def worker(i: int) -> None:
            barrier.wait()
            column = save_workout_session("Push Day", f"Session {i}", [f"{100 + i}/3/5"], sheets=sheets)
            with lock:
                columns[i] = column

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(columns), count)
        self.assertEqual(sorted(columns.values()), ["E", "F", "G", "H", "I", "J", "K", "L", "M", "N"])
        for i, column in columns.items():
            self.assertEqual(sheets.get(f"'Push Day'!{column}1:{column}2"), [[f"Session {i}"], [f"{100 + i}/3/5"]])


class TestExerciseStats(unittest.TestCase):
    def test_stats_skip_all_zero_records(self) -> None:
        stats = get_workout_exercise_stats("Push Day", sheets=_push_day())
        bench = stats[0]
        self.assertEqual(bench.exercise, "Bench Press")
        self.assertEqual(bench.max_weight, 110)
        self.assertEqual(bench.min_weight, 100)
        self.assertEqual(bench.avg_weight, 105)
        self.assertEqual(bench.avg_sets, 3)
        self.assertEqual(bench.max_reps, 10)
        self.assertEqual(bench.min_reps, 8)
        self.assertEqual(bench.avg_reps, 9)
        self.assertEqual(bench.total_sessions, 2)

    def test_exercise_without_data_is_all_zero(self) -> None:
        stats = get_workout_exercise_stats("Push Day", sheets=_push_day())
        dips = stats[2]
        self.assertEqual(dips.exercise, "Dips")
        self.assertEqual(dips.total_sessions, 0)
        self.assertEqual((dips.max_weight, dips.min_weight, dips.avg_weight), (0, 0, 0))

    def test_average_rounds_half_up(self) -> None:
        sheets = MemorySheets({"Leg Day": [["Exercise", "s1", "s2"], ["Squat", "100/3/5", "101/3/5"]]})
        squat = get_workout_exercise_stats("Leg Day", sheets=sheets)[0]
        self.assertEqual(squat.avg_weight, 101)


if __name__ == "__main__":
    unittest.main()
