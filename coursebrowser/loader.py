"""
Loading and validation of course files.

A course file is a UTF-8 JSON array of course objects. Loading is
all-or-nothing: either every element is valid and a full list of Course
objects is returned, or a LoadError is raised and nothing is returned.

Error kinds:
- ReadError   file could not be read as UTF-8 text
- ParseError  content is not valid JSON
- ShapeError  top-level value is not a list
- FieldError  an element is not an object or misses id/title/department
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from coursebrowser.model import Course

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "title", "department")


class LoadError(Exception):
    """
    Base class for all load failures. `message` is the single line shown to
    the user.
    """

    message = "Invalid JSON file format."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ReadError(LoadError):
    message = "Could not read file."


class ParseError(LoadError):
    message = "Invalid JSON file format."


class ShapeError(LoadError):
    message = "Invalid JSON file format: expected a list of courses."


class FieldError(LoadError):
    def __init__(self, position: int, field: str) -> None:
        self.position = position
        self.field = field
        super().__init__(f"Invalid JSON file format: course #{position} is missing required field '{field}'.")


def read_course_file(path: str | Path) -> str:
    """
    Read the raw text of a course file.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        raise ReadError() from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _present(value: Any) -> bool:
    # JSON truthiness: null, false, 0 and "" count as missing; [] and {} do not
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _check_record(position: int, record: Any) -> None:
    if not isinstance(record, dict):
        raise FieldError(position, REQUIRED_FIELDS[0])
    for field in REQUIRED_FIELDS:
        if not _present(record.get(field)):
            raise FieldError(position, field)


def parse_courses(text: str) -> list[Course]:
    """
    Parse and validate course file content.

    Every element is checked before any Course is built, so a bad element
    anywhere rejects the whole document.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning("Course file is not valid JSON: %s", e)
        raise ParseError() from e

    if not isinstance(data, list):
        logger.warning("Course file top-level value is %s, not a list", type(data).__name__)
        raise ShapeError()

    for i, record in enumerate(data, start=1):
        try:
            _check_record(i, record)
        except FieldError as e:
            logger.warning("Rejecting course file: element %d misses %r", e.position, e.field)
            raise

    return [Course.from_record(record) for record in data]


def load_courses(path: str | Path) -> list[Course]:
    courses = parse_courses(read_course_file(path))
    logger.info("Loaded %d courses from %s", len(courses), path)
    return courses
