"""
Filter option sets.

For each filterable field the UI offers "All" plus the distinct values found
in the loaded courses. Absent values (None, and empty instructors) are never
offered.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cmp_to_key
from typing import Any, Iterable

from coursebrowser.model import Course, as_text

ALL = "All"

FILTER_FIELDS = ("department", "level", "credits", "instructor")


@dataclass(frozen=True)
class FilterOptions:
    departments: tuple[str, ...] = (ALL,)
    levels: tuple[str, ...] = (ALL,)
    credits: tuple[str, ...] = (ALL,)
    instructors: tuple[str, ...] = (ALL,)

    def for_field(self, field: str) -> tuple[str, ...]:
        """
        Options offered for a filter control, by control name.
        """
        mapping = {
            "department": self.departments,
            "level": self.levels,
            "credits": self.credits,
            "instructor": self.instructors,
        }
        if field not in mapping:
            raise ValueError(f"Unknown filter: {field!r}")
        return mapping[field]


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _compare(a: Any, b: Any) -> int:
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    sa, sb = as_text(a), as_text(b)
    return (sa > sb) - (sa < sb)


def option_list(values: Iterable[Any]) -> tuple[str, ...]:
    """
    Build an option list: "All" first, then the distinct values sorted
    (numbers numerically, everything else by text), each as its text form.
    """
    distinct: list[Any] = []
    seen: set[str] = set()
    for v in values:
        if v is None:
            continue
        key = as_text(v)
        if key in seen:
            continue
        seen.add(key)
        distinct.append(v)

    distinct.sort(key=cmp_to_key(_compare))
    return (ALL,) + tuple(as_text(v) for v in distinct)


def build_filter_options(courses: Iterable[Course]) -> FilterOptions:
    courses = list(courses)
    return FilterOptions(
        departments=option_list(c.department for c in courses),
        levels=option_list(c.level for c in courses),
        credits=option_list(c.credits for c in courses),
        # empty/absent instructors display as TBA but are not a real value
        instructors=option_list(c.instructor for c in courses if c.instructor),
    )


def reconcile(controls: Any, options: FilterOptions) -> Any:
    """
    Keep each filter selection that is still offered, reset the rest to "All".

    `controls` is a query.Controls; the sort selection is left alone.
    """
    changes = {}
    for field in FILTER_FIELDS:
        current = getattr(controls, field)
        if current not in options.for_field(field):
            changes[field] = ALL
    return replace(controls, **changes) if changes else controls
