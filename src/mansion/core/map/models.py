"""
Mansion map data models.

The map is a binary tree of rooms:
- Room: a named point in the mansion with up to two exits (left/right)
- Direction: which exit of a room a move uses

Ownership:
    Each room owns its children exclusively. A room is attached to exactly
    one parent (or held as the root) and the shape is fixed once a
    traversal begins.

    Hall de Entrada
    ├── Sala de Estar
    │   ├── Cozinha
    │   │   └── Dispensa
    │   └── Quarto Principal
    │       └── Banheiro
    └── Biblioteca
        └── Sala de Jantar
            └── Jardim de Inverno (right)
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel

# Display buffer of 30 characters, one reserved for the terminator.
MAX_NAME_LENGTH = 29


class Direction(str, Enum):
    """Exit of a room."""

    LEFT = "left"
    RIGHT = "right"


class Room(BaseModel):
    """A room of the mansion (one node of the map)."""

    name: str
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child(self, direction: Direction) -> Optional["Room"]:
        return self.left if direction == Direction.LEFT else self.right

    def children(self) -> Iterator[Tuple[Direction, "Room"]]:
        """Yield (direction, room) for each present exit, left first."""
        if self.left is not None:
            yield Direction.LEFT, self.left
        if self.right is not None:
            yield Direction.RIGHT, self.right

    def count(self) -> int:
        """Number of rooms in the subtree rooted here."""
        total = 0
        stack: List[Room] = [self]
        while stack:
            room = stack.pop()
            total += 1
            stack.extend(child for _, child in room.children())
        return total

    def leaves(self) -> List["Room"]:
        """Leaf rooms in left-to-right order."""
        found: List[Room] = []
        stack: List[Room] = [self]
        while stack:
            room = stack.pop()
            if room.is_leaf:
                found.append(room)
                continue
            # right pushed first so the left subtree is visited first
            if room.right is not None:
                stack.append(room.right)
            if room.left is not None:
                stack.append(room.left)
        return found

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, leaf={self.is_leaf})"


Room.model_rebuild()

__all__ = ["MAX_NAME_LENGTH", "Direction", "Room"]
