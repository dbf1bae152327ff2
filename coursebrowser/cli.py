"""
CLI (Command Line Interface).

    coursebrowser interactive [FILE]
    coursebrowser list FILE [--department X] [--level X] [--credits X] [--instructor X] [--sort KEY]
    coursebrowser show FILE COURSE_ID

Note:
- The interactive UI lives in coursebrowser/interactive.py
- `list` and `show` print plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging

from coursebrowser.config import get_app_config
from coursebrowser.filters import ALL, FILTER_FIELDS, build_filter_options
from coursebrowser.loader import LoadError, load_courses
from coursebrowser.log import setup_logging
from coursebrowser.model import as_text
from coursebrowser.query import SORT_KEYS, Controls, apply_query
from coursebrowser.render import NO_COURSES_TO_DISPLAY

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Print the filtered and sorted course view as `id | title` lines.
    """
    try:
        courses = load_courses(args.file)
    except LoadError as e:
        print(e.message)
        return 1

    options = build_filter_options(courses)
    controls = Controls(sort=args.sort)
    for field in FILTER_FIELDS:
        value = getattr(args, field)
        if value is None or value == ALL:
            continue
        if value not in options.for_field(field):
            print(f"Unknown {field}: {value!r} (choose from: {', '.join(options.for_field(field)[1:])})")
            return 1
        controls = controls.with_value(field, value)

    view = apply_query(courses, controls)
    if not view:
        print(NO_COURSES_TO_DISPLAY)
        return 0

    for c in view:
        print(f"{as_text(c.id)} | {as_text(c.title)}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Print all details of one course.
    """
    try:
        courses = load_courses(args.file)
    except LoadError as e:
        print(e.message)
        return 1

    cid = (args.course_id or "").strip()
    course = next((c for c in courses if as_text(c.id) == cid), None)
    if course is None:
        print(f"Course not found: {cid}")
        return 1

    print(as_text(course.id))
    for label, value in course.detail_rows():
        print(f"{label}: {value}")
    if course.description:
        print()
        print(as_text(course.description))
    return 0


def _cmd_interactive(args: argparse.Namespace, default_file: str | None) -> int:
    from coursebrowser.interactive import run_interactive
    from coursebrowser.state import initial_state, load_file

    state = initial_state()
    path = args.file or default_file
    logger.debug("Starting interactive session (file=%s)", path)
    if path:
        state = load_file(state, path)

    run_interactive(state)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursebrowser", description="Course catalog browser")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_inter = sub.add_parser("interactive", help="Interactive menu mode")
    p_inter.add_argument("file", nargs="?", default=None, help="Course JSON file to load first")

    p_list = sub.add_parser("list", help="List courses with optional filters and sorting")
    p_list.add_argument("file", type=str, help="Course JSON file")
    p_list.add_argument("--department", default=None)
    p_list.add_argument("--level", default=None)
    p_list.add_argument("--credits", default=None)
    p_list.add_argument("--instructor", default=None)
    p_list.add_argument("--sort", choices=SORT_KEYS, default="none")

    p_show = sub.add_parser("show", help="Show details for one course")
    p_show.add_argument("file", type=str, help="Course JSON file")
    p_show.add_argument("course_id", type=str, help="Course ID")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_app_config()
    level = args.log_level or config["log_level"]
    if level not in LOG_LEVELS:
        level = "WARNING"
    setup_logging(level)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "interactive":
        raise SystemExit(_cmd_interactive(args, config["default_file"]))

    raise SystemExit(2)
