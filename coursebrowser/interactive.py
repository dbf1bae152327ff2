from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from coursebrowser.filters import ALL
from coursebrowser.query import SORT_KEYS, SORT_LABELS
from coursebrowser.render import render_screen
from coursebrowser.state import AppState, ControlChanged, CourseClicked, load_file, update

logger = logging.getLogger(__name__)

console = Console()

FILTER_MENU = {
    "2": ("department", "Department"),
    "3": ("level", "Level"),
    "4": ("credits", "Credits"),
    "5": ("instructor", "Instructor"),
}


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _pick(title: str, labels: Sequence[str], current: Optional[int] = None) -> Optional[int]:
    """
    Show a numbered list and return the chosen index (0-based), or None when
    the user leaves the prompt blank.
    """
    while True:
        _println(f"\n{title}:")
        for i, label in enumerate(labels, start=1):
            mark = " (current)" if current is not None and current == i - 1 else ""
            _println(f"{i}) {escape(label)}{mark}")

        pick = _prompt("Enter number (blank = back): ").strip()
        if not pick:
            return None
        if not pick.isdigit():
            _println("Not a number.")
            continue

        i = int(pick)
        if not (1 <= i <= len(labels)):
            _println("Out of range.")
            continue
        return i - 1


def _flow_load(state: AppState) -> AppState:
    path = _prompt("Path to course JSON file (blank = back): ").strip()
    if not path:
        return state
    state = load_file(state, Path(path).expanduser())
    if state.error:
        _println(f"[red]{escape(state.error)}[/]")
    else:
        _println(f"Loaded {len(state.courses)} courses.")
    return state


def _flow_filter(state: AppState, field: str, label: str) -> AppState:
    options = state.options.for_field(field)
    if len(options) == 1:
        _println(f"No {label.lower()} values to filter by ({ALL} only).")
        return state

    current = getattr(state.controls, field)
    idx = _pick(f"{label} filter", options, current=options.index(current))
    if idx is None:
        return state
    return update(state, ControlChanged(field, options[idx]))


def _flow_sort(state: AppState) -> AppState:
    labels = [SORT_LABELS[k] for k in SORT_KEYS]
    idx = _pick("Sort by", labels, current=SORT_KEYS.index(state.controls.sort))
    if idx is None:
        return state
    return update(state, ControlChanged("sort", SORT_KEYS[idx]))


def _flow_select(state: AppState) -> AppState:
    if not state.view:
        _println("No courses to select.")
        return state

    while True:
        pick = _prompt("Course number from the list (blank = back): ").strip()
        if not pick:
            return state
        if not pick.isdigit():
            _println("Not a number.")
            continue
        i = int(pick)
        if not (1 <= i <= len(state.view)):
            _println("Out of range.")
            continue
        return update(state, CourseClicked(state.view[i - 1].id))


def run_interactive(state: AppState) -> AppState:
    """
    Interactive menu loop. Every action is turned into a message for
    update(); the screen is re-rendered after each one.
    """
    while True:
        console.print(render_screen(state))

        choice = _prompt(
            "\n[1] Load course file\n"
            "[2] Department filter\n"
            "[3] Level filter\n"
            "[4] Credits filter\n"
            "[5] Instructor filter\n"
            "[6] Sort\n"
            "[7] Select course\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return state

        if choice == "1":
            state = _flow_load(state)
        elif choice in FILTER_MENU:
            field, label = FILTER_MENU[choice]
            state = _flow_filter(state, field, label)
        elif choice == "6":
            state = _flow_sort(state)
        elif choice == "7":
            state = _flow_select(state)
        else:
            _println("Invalid choice.")
