"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import List

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mansion.core.engine import OutcomeKind, StepOutcome, TraversalResult
from mansion.core.map import Direction, Room

MOVE_KEYS = {Direction.LEFT: "E", Direction.RIGHT: "D"}
EXIT_KEY = "S"

_OUTCOME_STYLES = {
    OutcomeKind.MOVED: "cyan",
    OutcomeKind.UNAVAILABLE_PATH: "yellow",
    OutcomeKind.INVALID_CHOICE: "red",
    OutcomeKind.COMPLETED: "green",
    OutcomeKind.EXITED: "magenta",
    OutcomeKind.INPUT_EXHAUSTED: "red",
}


def format_outcome(outcome: StepOutcome) -> str:
    style = _OUTCOME_STYLES.get(outcome.kind, "white")
    text = escape(outcome.message)
    if outcome.kind == OutcomeKind.INVALID_CHOICE:
        text = f"{text}. Use '{MOVE_KEYS[Direction.LEFT]}', '{MOVE_KEYS[Direction.RIGHT]}' or '{EXIT_KEY}'"
    elif outcome.kind == OutcomeKind.UNAVAILABLE_PATH:
        text = f"{text}. Try another option"
    return f"[{style}]{text}[/{style}]"


def build_moves_table(room: Room, moves: List[Direction]) -> Table:
    table = Table(title=f"You are in: {escape(room.name)}", title_justify="left")
    table.add_column("Key")
    table.add_column("Path")
    table.add_column("Next room")

    for direction in moves:
        target = room.child(direction)
        table.add_row(MOVE_KEYS[direction], direction.value.capitalize(), escape(target.name) if target else "-")
    table.add_row(EXIT_KEY, "Exit", "[dim]leave the mansion[/dim]")
    return table


def prompt_text(moves: List[Direction]) -> str:
    keys = [MOVE_KEYS[direction] for direction in moves] + [EXIT_KEY]
    return f"Your choice ({'/'.join(keys)}): "


def build_map_tree(root: Room, title: str) -> Tree:
    """Render the map as a rich tree; exits are labelled with their side."""
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    stack = [(tree, None, root)]
    while stack:
        branch, direction, room = stack.pop()
        label = escape(room.name) if direction is None else f"[dim]{direction.value}:[/dim] {escape(room.name)}"
        if room.is_leaf:
            label = f"{label} [green](leaf)[/green]"
        node = branch.add(label)
        # reversed so the left exit is rendered first
        for child_direction, child in reversed(list(room.children())):
            stack.append((node, child_direction, child))
    return tree


def build_journey_table(result: TraversalResult) -> Table:
    table = Table(title="Journey")
    table.add_column("Step", justify="right")
    table.add_column("Room")
    for index, name in enumerate(result.path):
        table.add_row(str(index), escape(name))
    return table
