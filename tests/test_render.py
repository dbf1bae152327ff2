"""
Tests for the rich presentation layer.

Renderables are printed to a recording console and checked as plain text.
"""

import json
import unittest

from rich.console import Console

from coursebrowser.render import (
    NO_COURSES_TO_DISPLAY,
    SELECTED_MARKER,
    render_course_list,
    render_details,
    render_screen,
)
from coursebrowser.state import ControlChanged, CourseClicked, FileChosen, FileLoaded, initial_state, update

COURSES = [
    {"id": "C100", "title": "Databases", "department": "CS", "level": 300, "credits": 4,
     "semester": "Fall 2025", "description": "Relational [model] and SQL."},
    {"id": "A200", "title": "Algebra", "department": "MATH", "level": 200, "credits": 3,
     "instructor": "Dr. Lee"},
]


def _text(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


def _loaded():
    state = update(initial_state(), FileChosen("courses.json"))
    return update(state, FileLoaded(state.generation, json.dumps(COURSES)))


class TestCourseList(unittest.TestCase):
    def test_rows_labelled_by_id(self) -> None:
        out = _text(render_course_list(_loaded().view))
        self.assertIn("C100", out)
        self.assertIn("A200", out)
        self.assertNotIn(SELECTED_MARKER, out)

    def test_empty_view_placeholder(self) -> None:
        out = _text(render_course_list(()))
        self.assertIn(NO_COURSES_TO_DISPLAY, out)

    def test_only_one_row_marked(self) -> None:
        state = update(_loaded(), CourseClicked("A200"))
        out = _text(render_course_list(state.view + state.view, state.highlighted_id))
        self.assertEqual(out.count(SELECTED_MARKER), 1)


class TestDetails(unittest.TestCase):
    def test_placeholder_before_load(self) -> None:
        self.assertIn("No courses loaded.", _text(render_details(initial_state())))

    def test_placeholder_after_load(self) -> None:
        self.assertIn("Select a course to see details.", _text(render_details(_loaded())))

    def test_details_of_selected_course(self) -> None:
        state = update(_loaded(), CourseClicked("C100"))
        out = _text(render_details(state))
        for expected in ("C100", "Databases", "CS", "300", "4", "TBA", "Fall 2025", "Relational [model] and SQL."):
            self.assertIn(expected, out)

    def test_details_survive_filtering(self) -> None:
        state = update(_loaded(), CourseClicked("A200"))
        state = update(state, ControlChanged("department", "CS"))
        screen = _text(render_screen(state))
        self.assertIn("Dr. Lee", screen)
        self.assertNotIn(SELECTED_MARKER, screen)


class TestScreen(unittest.TestCase):
    def test_error_and_file_name_shown(self) -> None:
        state = update(initial_state(), FileChosen("broken.json"))
        state = update(state, FileLoaded(state.generation, "{oops"))
        out = _text(render_screen(state))
        self.assertIn("broken.json", out)
        self.assertIn("Invalid JSON file format.", out)
        self.assertIn(NO_COURSES_TO_DISPLAY, out)
        self.assertIn("No courses loaded.", out)


if __name__ == "__main__":
    unittest.main()
