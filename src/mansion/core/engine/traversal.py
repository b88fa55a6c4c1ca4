"""
Traversal Engine: walks a single cursor from the root of a map to a leaf.

Each turn:
- a leaf under the cursor completes the journey before any input is read
- otherwise one token is read and classified as left/right/exit/invalid
- invalid tokens and missing exits are reported and leave the cursor alone

Unreadable input (end of stream) is tolerated a bounded number of times in a
row, after which the walk stops instead of spinning forever.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from mansion.core.errors import NoMapError, TraversalFinishedError
from mansion.core.map.models import Direction, Room

logger = logging.getLogger(__name__)

DEFAULT_MAX_UNREADABLE = 3


class Choice(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    EXIT = "exit"
    INVALID = "invalid"


_VOCABULARY: Dict[str, Choice] = {
    "e": Choice.LEFT,
    "esquerda": Choice.LEFT,
    "l": Choice.LEFT,
    "left": Choice.LEFT,
    "d": Choice.RIGHT,
    "direita": Choice.RIGHT,
    "r": Choice.RIGHT,
    "right": Choice.RIGHT,
    "s": Choice.EXIT,
    "sair": Choice.EXIT,
    "q": Choice.EXIT,
    "quit": Choice.EXIT,
    "exit": Choice.EXIT,
}


def classify_choice(token: Optional[str]) -> Choice:
    """Classify the first word of ``token`` case-insensitively."""
    if token is None:
        return Choice.INVALID
    words = token.split()
    if not words:
        return Choice.INVALID
    return _VOCABULARY.get(words[0].lower(), Choice.INVALID)


class TraversalStatus(str, Enum):
    TRAVERSING = "traversing"
    COMPLETED = "completed"
    EXITED = "exited"


class OutcomeKind(str, Enum):
    """What a single evaluation or step produced."""

    MOVED = "moved"
    UNAVAILABLE_PATH = "unavailable_path"  # exit absent in that direction
    INVALID_CHOICE = "invalid_choice"  # unrecognized or unreadable token
    COMPLETED = "completed"  # leaf reached
    EXITED = "exited"  # player chose to leave
    INPUT_EXHAUSTED = "input_exhausted"  # gave up on unreadable input


class StepOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    room: str
    message: str
    direction: Optional[Direction] = None


class TraversalResult(BaseModel):
    status: TraversalStatus
    room: str
    path: List[str] = Field(default_factory=list)
    moves: int = 0
    reason: Optional[str] = None


class TraversalEngine:
    """Holds the cursor into a map and applies one choice at a time."""

    def __init__(self, root: Optional[Room], *, max_unreadable: int = DEFAULT_MAX_UNREADABLE):
        if root is None:
            raise NoMapError()
        if max_unreadable < 1:
            raise ValueError("max_unreadable must be at least 1")
        self.root = root
        self.current = root
        self.status = TraversalStatus.TRAVERSING
        self.path: List[str] = [root.name]
        self.moves = 0
        self.reason: Optional[str] = None
        self.max_unreadable = max_unreadable
        self._unreadable = 0

    @property
    def finished(self) -> bool:
        return self.status != TraversalStatus.TRAVERSING

    def available_moves(self) -> List[Direction]:
        return [direction for direction, _ in self.current.children()]

    def evaluate(self) -> Optional[StepOutcome]:
        """Complete the journey if the cursor is on a leaf; no input is consumed."""
        if self.finished or not self.current.is_leaf:
            return None
        self.status = TraversalStatus.COMPLETED
        self.reason = OutcomeKind.COMPLETED.value
        return self._outcome(OutcomeKind.COMPLETED, f"Reached the end of this path at {self.current.name}")

    def step(self, token: Optional[str]) -> StepOutcome:
        """
        Apply one input token.

        Args:
            token: The line read from the player, or None if nothing could be read

        Returns:
            The outcome of the step; the cursor only changes on ``MOVED``

        Raises:
            TraversalFinishedError: If the traversal already ended
        """
        if self.finished:
            raise TraversalFinishedError(f"Traversal already {self.status.value}")

        terminal = self.evaluate()
        if terminal is not None:
            return terminal

        if token is None:
            return self._unreadable_input()
        self._unreadable = 0

        choice = classify_choice(token)
        if choice == Choice.INVALID:
            return self._outcome(OutcomeKind.INVALID_CHOICE, f"Unrecognized option: {token.strip()!r}")

        if choice == Choice.EXIT:
            self.status = TraversalStatus.EXITED
            self.reason = OutcomeKind.EXITED.value
            return self._outcome(OutcomeKind.EXITED, f"Leaving the mansion from {self.current.name}")

        direction = Direction.LEFT if choice == Choice.LEFT else Direction.RIGHT
        target = self.current.child(direction)
        if target is None:
            return self._outcome(
                OutcomeKind.UNAVAILABLE_PATH,
                f"No path to the {direction.value} from {self.current.name}",
                direction=direction,
            )

        self.current = target
        self.path.append(target.name)
        self.moves += 1
        logger.debug("Moved %s to %s", direction.value, target.name)
        return self._outcome(OutcomeKind.MOVED, f"Moved {direction.value} to {target.name}", direction=direction)

    def run(
        self,
        read_token: Callable[[], Optional[str]],
        on_outcome: Optional[Callable[[StepOutcome], None]] = None,
        on_prompt: Optional[Callable[[Room, List[Direction]], None]] = None,
    ) -> TraversalResult:
        """
        Drive the walk until a terminal state.

        ``read_token`` is the only blocking call in the loop.
        """
        while not self.finished:
            terminal = self.evaluate()
            if terminal is not None:
                if on_outcome is not None:
                    on_outcome(terminal)
                break

            if on_prompt is not None:
                on_prompt(self.current, self.available_moves())
            outcome = self.step(read_token())
            if on_outcome is not None:
                on_outcome(outcome)

        result = self.result()
        logger.info("Traversal %s at %s after %d move(s)", result.status.value, result.room, result.moves)
        return result

    def result(self) -> TraversalResult:
        return TraversalResult(
            status=self.status,
            room=self.current.name,
            path=list(self.path),
            moves=self.moves,
            reason=self.reason,
        )

    def _unreadable_input(self) -> StepOutcome:
        self._unreadable += 1
        if self._unreadable >= self.max_unreadable:
            self.status = TraversalStatus.EXITED
            self.reason = OutcomeKind.INPUT_EXHAUSTED.value
            logger.warning("Input exhausted after %d unreadable attempt(s)", self._unreadable)
            return self._outcome(OutcomeKind.INPUT_EXHAUSTED, "No more input; ending the exploration")
        return self._outcome(
            OutcomeKind.INVALID_CHOICE,
            f"Invalid input ({self._unreadable}/{self.max_unreadable})",
        )

    def _outcome(self, kind: OutcomeKind, message: str, direction: Optional[Direction] = None) -> StepOutcome:
        return StepOutcome(kind=kind, room=self.current.name, message=message, direction=direction)


def stream_reader(stream: TextIO) -> Callable[[], Optional[str]]:
    """Read one line per call from ``stream``; None once it is exhausted or undecodable."""

    def _read() -> Optional[str]:
        try:
            line = stream.readline()
        except (UnicodeDecodeError, OSError) as exc:
            logger.warning("Unreadable input: %s", exc)
            return None
        return line if line else None

    return _read


def walk(root: Optional[Room], tokens: List[str], *, max_unreadable: int = DEFAULT_MAX_UNREADABLE) -> TraversalResult:
    """Run a traversal over a fixed list of tokens."""
    remaining = iter(tokens)
    engine = TraversalEngine(root, max_unreadable=max_unreadable)
    return engine.run(lambda: next(remaining, None))


__all__ = [
    "DEFAULT_MAX_UNREADABLE",
    "Choice",
    "classify_choice",
    "TraversalStatus",
    "OutcomeKind",
    "StepOutcome",
    "TraversalResult",
    "TraversalEngine",
    "stream_reader",
    "walk",
]
