"""
Tests for the interactive menu session.

Prompts are scripted with unittest.mock so each test drives the loop through
a fixed sequence of key presses and checks the returned state.
"""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

from coursebrowser import interactive
from coursebrowser.state import initial_state, load_file

COURSES = [
    {"id": "C100", "title": "Databases", "department": "CS", "semester": "Fall 2025", "instructor": "Ada"},
    {"id": "A200", "title": "Algebra", "department": "MATH", "semester": "Spring 2025"},
    {"id": "B150", "title": "Biology", "department": "BIO", "semester": "Winter 2026"},
]


class TestInteractive(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "courses.json"
        self.path.write_text(json.dumps(COURSES), encoding="utf-8")
        self.out = io.StringIO()
        patcher = mock.patch.object(interactive, "console", Console(file=self.out, width=100))
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, keys: list[str], state=None):
        with mock.patch.object(interactive, "_prompt", side_effect=keys):
            return interactive.run_interactive(state or initial_state())

    def test_load_filter_sort_select(self) -> None:
        keys = [
            "1", str(self.path),  # load
            "6", "3",             # sort: id-desc
            "7", "2",             # select B150
            "2", "3",             # department: CS (All, BIO, CS, MATH)
            "0",
        ]
        state = self._run(keys)
        self.assertEqual(state.controls.sort, "id-desc")
        self.assertEqual(state.controls.department, "CS")
        self.assertEqual([c.id for c in state.view], ["C100"])
        self.assertEqual(state.selected_id, "B150")
        self.assertIsNone(state.highlighted_id)

    def test_bad_input_is_reprompted(self) -> None:
        state = load_file(initial_state(), self.path)
        keys = ["9", "7", "x", "42", "1", "0"]
        state = self._run(keys, state)
        self.assertEqual(state.selected_id, "C100")
        text = self.out.getvalue()
        self.assertIn("Invalid choice.", text)
        self.assertIn("Not a number.", text)
        self.assertIn("Out of range.", text)

    def test_failed_load_shows_error(self) -> None:
        bad = Path(self._tmp.name) / "bad.json"
        bad.write_text("{}", encoding="utf-8")
        state = self._run(["1", str(bad), "0"])
        self.assertEqual(state.courses, ())
        self.assertIn("Invalid JSON file format", state.error)

    def test_blank_answers_go_back(self) -> None:
        state = load_file(initial_state(), self.path)
        state = self._run(["6", "", "7", "", "1", "", "0"], state)
        self.assertEqual(state.controls.sort, "none")
        self.assertIsNone(state.selected)
        self.assertEqual(len(state.courses), 3)

    def test_instructor_filter(self) -> None:
        state = load_file(initial_state(), self.path)
        state = self._run(["5", "2", "0"], state)
        self.assertEqual(state.controls.instructor, "Ada")
        self.assertEqual([c.id for c in state.view], ["C100"])


if __name__ == "__main__":
    unittest.main()
