from __future__ import annotations

"""Loader error reporting with file context."""

import os
from typing import Iterable

from pydantic import ValidationError

# Validation failures beyond this count are summarised as "... (N more)".
MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """A map file could not be read or did not describe a valid map."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(str(self))

    @property
    def display_path(self) -> str:
        try:
            return os.path.relpath(self.file_path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return self.file_path

    def summary(self) -> str:
        if isinstance(self.cause, ValidationError):
            return self._summarise(self.cause.errors())
        return str(self.cause) if self.cause else ""

    @staticmethod
    def _summarise(errors: Iterable[dict]) -> str:
        collected = list(errors)
        lines = []
        for err in collected[:MAX_REPORTED_ERRORS]:
            where = ".".join(str(part) for part in err.get("loc", ())) or "map"
            lines.append(f"{where}: {err.get('msg') or err.get('type') or 'invalid'}")
        hidden = len(collected) - len(lines)
        if hidden > 0:
            lines.append(f"... ({hidden} more)")
        return "; ".join(lines)

    def __str__(self) -> str:
        detail = self.summary()
        head = f"{self.message} ({self.display_path})"
        return f"{head}: {detail}" if detail else head
