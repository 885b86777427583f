from .core import (
    PASS,
    SKIP,
    STOP,
    Pass,
    Remap,
    ReversibleTransformedCursor,
    Skip,
    Stop,
    TransformedCursor,
    TransformFn,
    TransformState,
    Verdict,
    create_transformed,
    transform,
)
from .effects import tap
from .filter import filtered
from .map import mapped
from .scan import scan
from .slice import SlicePolicy, sliced

__all__ = (
    # Verdict
    "PASS",
    "SKIP",
    "STOP",
    "Pass",
    "Remap",
    "Skip",
    "Stop",
    "Verdict",
    # Core
    "TransformFn",
    "TransformState",
    "TransformedCursor",
    "ReversibleTransformedCursor",
    "create_transformed",
    "transform",
    # Policies
    "SlicePolicy",
    "filtered",
    "mapped",
    "scan",
    "sliced",
    "tap",
)
