from .traversal import (
    Choice,
    OutcomeKind,
    StepOutcome,
    TraversalEngine,
    TraversalResult,
    TraversalStatus,
    classify_choice,
    stream_reader,
    walk,
)

__all__ = [
    "Choice",
    "classify_choice",
    "OutcomeKind",
    "StepOutcome",
    "TraversalEngine",
    "TraversalResult",
    "TraversalStatus",
    "stream_reader",
    "walk",
]
