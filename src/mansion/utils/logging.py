from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable

from rich.logging import RichHandler


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log calls at DEBUG level; exceptions are logged and re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Entering %s", func.__qualname__)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("%s failed: %s", func.__qualname__, e)
                raise
            logger.debug("Leaving %s", func.__qualname__)
            return result

        return _wrapper

    return _decorator


def configure_logging(level: str = "WARNING") -> None:
    """Route the ``mansion`` loggers through a stderr RichHandler."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger("mansion")
    root.setLevel(numeric)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        from rich.console import Console

        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)


__all__ = ["log_calls", "configure_logging"]
