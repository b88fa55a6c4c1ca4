"""
Mansion CLI: validate map files, inspect the mansion and explore it.

- explore: interactive walk from the entrance to a leaf room
- walk: the same walk driven by choices given on the command line
- show / validate: inspect a map without walking it
"""

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mansion.cli.formatters import (
    build_journey_table,
    build_map_tree,
    build_moves_table,
    format_outcome,
    prompt_text,
)
from mansion.cli.load_helpers import build_or_exit, load_or_exit
from mansion.core.engine import (
    OutcomeKind,
    StepOutcome,
    TraversalEngine,
    TraversalResult,
    TraversalStatus,
    stream_reader,
)
from mansion.core.engine.traversal import DEFAULT_MAX_UNREADABLE
from mansion.core.errors import NoMapError
from mansion.core.map import Direction, Room, release_all
from mansion.utils.logging import configure_logging

app = typer.Typer(help="Mansion CLI: validate maps, inspect the mansion and explore it room by room.")
console = Console()

MAP_HELP = "Path to a map YAML file (defaults to kb/maps/mansion.yaml, then the built-in mansion)"


def _setup_logging(level: str) -> None:
    try:
        configure_logging(level)
    except ValueError as exc:
        console.print(f"[red]Bad --log-level[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)


def _render_prompt(room: Room, moves: List[Direction]) -> None:
    console.print()
    console.print(build_moves_table(room, moves))
    console.print(prompt_text(moves), end="")


def _render_outcome(outcome: StepOutcome) -> None:
    console.print(format_outcome(outcome))


def _render_result(result: TraversalResult) -> None:
    if result.status == TraversalStatus.COMPLETED:
        console.print(f"\n[green bold]Congratulations![/green bold] You reached {escape(result.room)}.")
        console.print("There are no more rooms to explore from here. End of the journey.")
    elif result.reason == OutcomeKind.INPUT_EXHAUSTED.value:
        console.print("\n[yellow]Exploration stopped: no more input.[/yellow]")
    else:
        console.print("\n[magenta]Leaving the mansion. Until the next investigation![/magenta]")
    console.print(build_journey_table(result))


def _traverse(root: Optional[Room], read_token, *, max_unreadable: int, interactive: bool) -> Optional[TraversalResult]:
    """Walk the map and always release it afterwards."""
    try:
        try:
            engine = TraversalEngine(root, max_unreadable=max_unreadable)
        except NoMapError as exc:
            console.print(f"[red]ERROR:[/red] {exc}")
            return None
        return engine.run(
            read_token,
            on_outcome=_render_outcome,
            on_prompt=_render_prompt if interactive else None,
        )
    finally:
        release_all(root)


@app.command()
def explore(
    map_path: Optional[str] = typer.Option(None, "--map", help=MAP_HELP),
    max_unreadable: int = typer.Option(
        DEFAULT_MAX_UNREADABLE,
        "--max-unreadable",
        min=1,
        help="Consecutive unreadable inputs tolerated before giving up",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for diagnostics on stderr"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Explore the mansion interactively."""
    _setup_logging(log_level)
    spec = load_or_exit(map_path, console=console, verbose_errors=verbose)
    root = build_or_exit(spec, console=console)

    console.rule(f"[bold]{escape(spec.name)}[/bold]")
    if root is not None:
        console.print(f"Welcome, detective! Your investigation starts at {escape(root.name)}.")

    result = _traverse(root, stream_reader(sys.stdin), max_unreadable=max_unreadable, interactive=True)
    if result is not None:
        _render_result(result)


@app.command()
def walk(
    choices: List[str] = typer.Argument(..., help="Choices to apply in order (e.g. E D S)"),
    map_path: Optional[str] = typer.Option(None, "--map", help=MAP_HELP),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for diagnostics on stderr"),
) -> None:
    """Walk the mansion with a fixed sequence of choices."""
    _setup_logging(log_level)
    spec = load_or_exit(map_path, console=console)
    root = build_or_exit(spec, console=console)

    remaining = iter(choices)
    # a script has no second chance: one unreadable read ends the walk
    result = _traverse(root, lambda: next(remaining, None), max_unreadable=1, interactive=False)
    if result is None:
        return

    console.print(f"\n[bold]Status:[/bold] {result.status.value}")
    console.print(f"[bold]Room:[/bold] {escape(result.room)}")
    console.print(f"[dim]Path: {escape(' -> '.join(result.path))}[/dim]")


@app.command()
def show(
    map_path: Optional[str] = typer.Option(None, "--map", help=MAP_HELP),
) -> None:
    """Show the mansion layout as a tree."""
    spec = load_or_exit(map_path, console=console)
    root = build_or_exit(spec, console=console)
    try:
        console.print(build_map_tree(root, spec.name))
    finally:
        release_all(root)


@app.command()
def validate(
    map_path: Optional[str] = typer.Option(None, "--map", help=MAP_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate a map file."""
    spec = load_or_exit(map_path, console=console, verbose_errors=verbose)
    root = build_or_exit(spec, console=console)
    try:
        console.print(f"[green]OK[/green] Loaded map '{escape(spec.name)}' with {root.count()} reachable room(s)")
        skipped = len(spec.rooms) - root.count()
        if skipped:
            console.print(f"[yellow]Warning:[/yellow] {skipped} room(s) unreachable from '{escape(spec.root)}'")
        leaves = ", ".join(escape(room.name) for room in root.leaves())
        console.print(f"Leaf rooms: {leaves}")
    finally:
        release_all(root)
