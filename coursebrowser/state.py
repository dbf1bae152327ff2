"""
Application state and the single update function.

The UI never mutates state directly. It turns user actions into messages and
calls update(state, message), which returns a new AppState:

    FileChosen      -> user picked a file (starts a load, bumps generation)
    FileLoaded      -> file text arrived for a given generation
    FileReadFailed  -> reading the file failed for a given generation
    ControlChanged  -> a filter or the sort selector changed
    CourseClicked   -> a course row was selected

Load completions carry the generation of the FileChosen that started them.
A completion from an older generation is stale and dropped, so a slow read
can never overwrite the result of a newer file selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from coursebrowser.filters import FilterOptions, build_filter_options, reconcile
from coursebrowser.loader import LoadError, parse_courses, read_course_file
from coursebrowser.model import Course
from coursebrowser.query import SORT_KEYS, Controls, apply_query

logger = logging.getLogger(__name__)

NO_COURSES_LOADED = "No courses loaded."
SELECT_A_COURSE = "Select a course to see details."


@dataclass(frozen=True)
class AppState:
    courses: tuple[Course, ...] = ()
    view: tuple[Course, ...] = ()
    options: FilterOptions = FilterOptions()
    controls: Controls = Controls()
    selected: Optional[Course] = None
    file_name: str = ""
    error: str = ""
    details_placeholder: str = NO_COURSES_LOADED
    generation: int = 0

    @property
    def selected_id(self) -> Optional[str]:
        return None if self.selected is None else self.selected.id

    @property
    def highlighted_id(self) -> Optional[str]:
        """
        The selected id, but only while that course is part of the view.
        """
        sid = self.selected_id
        if sid is None:
            return None
        return sid if any(c.id == sid for c in self.view) else None


@dataclass(frozen=True)
class FileChosen:
    file_name: str


@dataclass(frozen=True)
class FileLoaded:
    generation: int
    text: str


@dataclass(frozen=True)
class FileReadFailed:
    generation: int
    error: LoadError


@dataclass(frozen=True)
class ControlChanged:
    name: str
    value: str


@dataclass(frozen=True)
class CourseClicked:
    course_id: str


Message = Union[FileChosen, FileLoaded, FileReadFailed, ControlChanged, CourseClicked]


def initial_state() -> AppState:
    return AppState()


def _install(state: AppState, courses: list[Course]) -> AppState:
    options = build_filter_options(courses)
    controls = reconcile(state.controls, options)
    return replace(
        state,
        courses=tuple(courses),
        view=apply_query(courses, controls),
        options=options,
        controls=controls,
        selected=None,
        error="",
        details_placeholder=SELECT_A_COURSE,
    )


def _fail(state: AppState, error: LoadError) -> AppState:
    # filter options/controls stay as they were; the view is empty anyway
    return replace(
        state,
        courses=(),
        view=(),
        selected=None,
        error=error.message,
        details_placeholder=NO_COURSES_LOADED,
    )


def _is_stale(state: AppState, generation: int) -> bool:
    if generation != state.generation:
        logger.debug("Dropping stale load result (generation %d, current %d)", generation, state.generation)
        return True
    return False


def update(state: AppState, message: Message) -> AppState:
    """
    Apply one message to the state and return the new state.

    Raises ValueError for unknown controls or values that are not offered,
    and KeyError when a clicked course id is not in the view.
    """
    if isinstance(message, FileChosen):
        return replace(state, file_name=message.file_name, error="", generation=state.generation + 1)

    if isinstance(message, FileLoaded):
        if _is_stale(state, message.generation):
            return state
        try:
            courses = parse_courses(message.text)
        except LoadError as e:
            return _fail(state, e)
        logger.info("Installed %d courses from %s", len(courses), state.file_name or "<text>")
        return _install(state, courses)

    if isinstance(message, FileReadFailed):
        if _is_stale(state, message.generation):
            return state
        return _fail(state, message.error)

    if isinstance(message, ControlChanged):
        if message.name == "sort":
            allowed = SORT_KEYS
        else:
            allowed = state.options.for_field(message.name)
        if message.value not in allowed:
            raise ValueError(f"{message.value!r} is not an option for {message.name}")
        controls = state.controls.with_value(message.name, message.value)
        return replace(state, controls=controls, view=apply_query(state.courses, controls))

    if isinstance(message, CourseClicked):
        for course in state.view:
            if course.id == message.course_id:
                return replace(state, selected=course)
        raise KeyError(message.course_id)

    raise TypeError(f"Unknown message: {message!r}")


def load_file(state: AppState, path: str | Path) -> AppState:
    """
    Host helper: choose a file, read it and feed the result back through update().
    """
    state = update(state, FileChosen(Path(path).name))
    generation = state.generation
    try:
        text = read_course_file(path)
    except LoadError as e:
        return update(state, FileReadFailed(generation, e))
    return update(state, FileLoaded(generation, text))
