"""Release every room of a map exactly once, children before parents."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from mansion.core.map.models import Room
from mansion.utils.logging import log_calls

logger = logging.getLogger(__name__)


@log_calls()
def release_all(root: Optional[Room], on_release: Optional[Callable[[Room], None]] = None) -> None:
    """
    Post-order release of the tree rooted at ``root``.

    Uses an explicit stack, so map depth is not limited by recursion. A room
    is detached from its exits only after both of them have been released.
    Releasing the same tree twice is not supported.

    Args:
        root: Root room, or None for a map that was never built
        on_release: Called once per room as it is released
    """
    if root is None:
        return

    released = 0
    # (room, children_pushed)
    stack: List[Tuple[Room, bool]] = [(root, False)]
    while stack:
        room, expanded = stack.pop()
        if not expanded:
            stack.append((room, True))
            if room.right is not None:
                stack.append((room.right, False))
            if room.left is not None:
                stack.append((room.left, False))
            continue

        room.left = None
        room.right = None
        if on_release is not None:
            on_release(room)
        logger.debug("Released room: %s", room.name)
        released += 1

    logger.info("Released %d room(s)", released)


__all__ = ["release_all"]
