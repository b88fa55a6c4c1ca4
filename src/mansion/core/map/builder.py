"""
Map builder: creates rooms and wires their exits.

Rooms are created detached and attached to a parent afterwards. Attaching
does not check whether the child already belongs to another room; callers
are responsible for keeping every room singly owned.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from mansion.core.errors import AllocationError
from mansion.core.map.file_spec import MapSpec
from mansion.core.map.models import MAX_NAME_LENGTH, Direction, Room
from mansion.utils.logging import log_calls

logger = logging.getLogger(__name__)


def create_room(name: str) -> Room:
    """Create a room with no exits, truncating ``name`` to the display length."""
    label = name[:MAX_NAME_LENGTH]
    if label != name:
        logger.debug("Truncated room name %r to %r", name, label)
    try:
        room = Room(name=label)
    except MemoryError as exc:
        raise AllocationError(label, exc) from exc
    logger.debug("Created room: %s", label)
    return room


def attach(parent: Room, direction: Direction, child: Room) -> Room:
    """Make ``child`` the ``direction`` exit of ``parent``; returns the child."""
    if direction == Direction.LEFT:
        parent.left = child
    else:
        parent.right = child
    return child


def attach_left(parent: Room, child: Room) -> Room:
    return attach(parent, Direction.LEFT, child)


def attach_right(parent: Room, child: Room) -> Room:
    return attach(parent, Direction.RIGHT, child)


@log_calls()
def build_map(spec: MapSpec) -> Room:
    """Build the room tree described by ``spec`` and return its root."""
    reachable = spec.reachable_ids()
    skipped = sorted({entry.id for entry in spec.rooms} - set(reachable))
    if skipped:
        logger.warning("Ignoring rooms unreachable from '%s': %s", spec.root, ", ".join(skipped))

    index = {entry.id: entry for entry in spec.rooms}
    parents: Dict[str, Tuple[str, Direction]] = {}
    for entry in spec.rooms:
        if entry.left is not None:
            parents[entry.left] = (entry.id, Direction.LEFT)
        if entry.right is not None:
            parents[entry.right] = (entry.id, Direction.RIGHT)

    rooms: Dict[str, Room] = {}
    # pre-order: a parent is always created before its children
    for room_id in reachable:
        rooms[room_id] = create_room(index[room_id].name)
        if room_id in parents:
            parent_id, direction = parents[room_id]
            attach(rooms[parent_id], direction, rooms[room_id])

    root = rooms[spec.root]
    logger.info("Built map '%s' with %d room(s)", spec.name, len(rooms))
    return root


__all__ = ["create_room", "attach", "attach_left", "attach_right", "build_map"]
