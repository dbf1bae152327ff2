"""
Central data model definitions used across the project.

This module defines the canonical Course object so that:
- the loader, the query engine and the UI share the same field names
- derived values (instructor fallback, semester ordering key) live in one place
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

TBA = "TBA"

SEASON_ORDER = {
    "Winter": 1,
    "Spring": 2,
    "Summer": 3,
    "Fall": 4,
}

_LEADING_INT = re.compile(r"^[+-]?\d+")


def as_text(value: Any) -> str:
    """
    Return the text form of a JSON value, as shown in options and details.

    None -> "", true/false stay lowercase, 4.0 -> "4".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_year(token: str) -> int:
    # same leniency as parseInt: "2026" -> 2026, "2026x" -> 2026, "x" -> 0
    m = _LEADING_INT.match(token)
    return int(m.group(0)) if m else 0


def semester_numeric(semester: Any) -> int:
    """
    Convert 'Fall 2026' into a sortable integer (year * 10 + season).

    Missing or malformed semesters give 0. An unknown season counts as 0,
    so 'Autumn 2025' sorts before 'Winter 2025'.
    """
    if not semester or not isinstance(semester, str):
        return 0
    parts = semester.split()
    if len(parts) != 2:
        return 0
    season, year = parts
    return _parse_year(year) * 10 + SEASON_ORDER.get(season, 0)


@dataclass(frozen=True)
class Course:
    """
    Represents one catalog entry from the loaded course file.
    """

    id: Any
    title: Any
    department: Any
    level: Any = None
    credits: Any = None
    instructor: Optional[str] = None
    description: Optional[str] = None
    semester: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Course":
        return cls(
            id=record.get("id"),
            title=record.get("title"),
            department=record.get("department"),
            level=record.get("level"),
            credits=record.get("credits"),
            instructor=record.get("instructor"),
            description=record.get("description"),
            semester=record.get("semester"),
        )

    @property
    def instructor_or_tba(self) -> str:
        return self.instructor or TBA

    @property
    def semester_numeric(self) -> int:
        return semester_numeric(self.semester)

    def detail_rows(self) -> list[tuple[str, str]]:
        """
        Labelled fields for the details panel (id and description are shown
        separately as heading and body).
        """
        return [
            ("Title", as_text(self.title)),
            ("Department", as_text(self.department)),
            ("Level", as_text(self.level)),
            ("Credits", as_text(self.credits)),
            ("Instructor", as_text(self.instructor_or_tba)),
            ("Semester", as_text(self.semester)),
        ]
