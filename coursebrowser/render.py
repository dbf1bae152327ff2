"""
Presentation layer: turns an AppState into rich renderables.

Nothing here changes state. The interactive session prints render_screen()
after every update.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from rich import box
from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from coursebrowser.model import Course, as_text
from coursebrowser.query import SORT_LABELS
from coursebrowser.state import AppState

NO_COURSES_TO_DISPLAY = "No courses to display."
SELECTED_MARKER = "▶"


def render_course_list(view: Iterable[Course], selected_id: Optional[Any] = None) -> Table:
    """
    One numbered row per course, labelled by id. Only the first row with the
    selected id is marked.
    """
    table = Table(title="Courses", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("", width=1)
    table.add_column("Course")

    marked = False
    for i, course in enumerate(view, start=1):
        is_selected = not marked and selected_id is not None and course.id == selected_id
        if is_selected:
            marked = True
            table.add_row(str(i), SELECTED_MARKER, f"[bold cyan]{escape(as_text(course.id))}[/]", style="reverse")
        else:
            table.add_row(str(i), "", escape(as_text(course.id)))

    if table.row_count == 0:
        table.add_row("", "", Text(NO_COURSES_TO_DISPLAY, style="dim"))

    return table


def render_details(state: AppState) -> Panel:
    course = state.selected
    if course is None:
        return Panel(Text(state.details_placeholder, style="dim"), title="Details", box=box.ROUNDED)

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in course.detail_rows():
        grid.add_row(f"{label}:", escape(value))

    parts: list[Any] = [grid]
    if course.description:
        parts.append(Text(""))
        parts.append(Text(as_text(course.description)))

    return Panel(Group(*parts), title=f"[bold cyan]{escape(as_text(course.id))}[/]", box=box.ROUNDED)


def render_header(state: AppState) -> Group:
    file_line = f"File: {state.file_name}" if state.file_name else "File: (none selected)"
    c = state.controls
    controls_line = (
        f"Department={c.department} | Level={c.level} | Credits={c.credits} | "
        f"Instructor={c.instructor} | Sort={SORT_LABELS.get(c.sort, c.sort)}"
    )
    lines: list[Any] = [
        Text("=== Course Browser ===", style="bold"),
        Text(file_line),
    ]
    if state.error:
        lines.append(Text(state.error, style="bold red"))
    lines.append(Text(controls_line, style="dim"))
    lines.append(Text(f"Showing {len(state.view)} of {len(state.courses)} courses"))
    return Group(*lines)


def render_screen(state: AppState) -> Group:
    return Group(
        render_header(state),
        render_course_list(state.view, state.highlighted_id),
        render_details(state),
    )
