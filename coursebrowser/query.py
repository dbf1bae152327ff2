"""
Query engine: filter + sort the loaded courses into the displayed view.

apply_query() is a pure function of (courses, controls). Filters are combined
with AND; each one passes when it is "All" or when the course field's text
form equals the selected value.

Sorting uses Python's stable sorted(); descending keys use reverse=True,
which also keeps ties in collection order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable

from coursebrowser.filters import ALL, FILTER_FIELDS
from coursebrowser.model import Course, as_text

SORT_NONE = "none"

SORT_KEYS = (
    SORT_NONE,
    "id-asc",
    "id-desc",
    "title-asc",
    "title-desc",
    "semester-asc",
    "semester-desc",
)

SORT_LABELS = {
    "none": "None",
    "id-asc": "ID (A-Z)",
    "id-desc": "ID (Z-A)",
    "title-asc": "Title (A-Z)",
    "title-desc": "Title (Z-A)",
    "semester-asc": "Semester (oldest first)",
    "semester-desc": "Semester (newest first)",
}

_SORT_FIELDS: dict[str, Callable[[Course], Any]] = {
    "id": lambda c: as_text(c.id),
    "title": lambda c: as_text(c.title),
    "semester": lambda c: c.semester_numeric,
}


@dataclass(frozen=True)
class Controls:
    """
    Current values of the four filter selectors and the sort selector.
    """

    department: str = ALL
    level: str = ALL
    credits: str = ALL
    instructor: str = ALL
    sort: str = SORT_NONE

    def with_value(self, name: str, value: str) -> "Controls":
        if name == "sort":
            if value not in SORT_KEYS:
                raise ValueError(f"Unknown sort key: {value!r}")
        elif name not in FILTER_FIELDS:
            raise ValueError(f"Unknown control: {name!r}")
        return replace(self, **{name: value})


def _matches(course: Course, controls: Controls) -> bool:
    for field in FILTER_FIELDS:
        wanted = getattr(controls, field)
        if wanted == ALL:
            continue
        value = getattr(course, field)
        # an absent instructor shows as TBA but never matches a concrete selection
        if field == "instructor" and not value:
            return False
        if as_text(value) != wanted:
            return False
    return True


def sort_courses(courses: Iterable[Course], sort: str) -> list[Course]:
    if sort not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort!r}")
    courses = list(courses)
    if sort == SORT_NONE:
        return courses
    field, direction = sort.rsplit("-", 1)
    return sorted(courses, key=_SORT_FIELDS[field], reverse=(direction == "desc"))


def apply_query(courses: Iterable[Course], controls: Controls) -> tuple[Course, ...]:
    courses = list(courses)
    if not courses:
        return ()
    filtered = [c for c in courses if _matches(c, controls)]
    return tuple(sort_courses(filtered, controls.sort))
