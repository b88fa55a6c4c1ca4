from __future__ import annotations

"""Shared helpers for loading and building maps with CLI-friendly errors."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from mansion.cli.paths import resolve_map_path
from mansion.core.errors import AllocationError
from mansion.core.map import MapSpec, Room, build_map, default_map_spec
from mansion.io.loaders import LoaderError, load_map


def load_or_exit(map_path: str | None, *, console: Console, verbose_errors: bool = False) -> MapSpec:
    source = resolve_map_path(map_path)
    if source is None:
        return default_map_spec()
    if not Path(source).exists():
        console.print(f"[red]Path not found:[/red] {escape(source)}")
        raise typer.Exit(code=1)
    try:
        return load_map(source)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load map:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load map:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


def build_or_exit(spec: MapSpec, *, console: Console) -> Room:
    try:
        return build_map(spec)
    except AllocationError as err:
        console.print(f"[red]Cannot build the map:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit", "build_or_exit"]
