"""
Cursors library: composable lazy sequences.

Build cursors that transform, combine and reshape a sequence one value at a
time, without materializing it, and with upstream closing propagated exactly
once on early exit and on failure.

Architecture:
- Cursor protocol: advance() -> Next | Done, optional Closable / Failable / Reversible
- Transform core: one engine specialized into map, filter, slice, scan, tap
- Combinators: concat, flatten, zip, tee
- Terminal reducers: reduce, reduce_right, some, every, includes, find
"""

# Core types
from ._errors import EmptyReductionError, NotIterableError, NotReversibleError
from ._types import MISSING, Effect, Mapper, Predicate, Reducer
from .protocol import Closable, Cursor, Failable, Reversible
from .step import DONE, Done, Next, StepResult

# Internal helpers (for custom cursors)
from . import _helpers

# Adaptor boundary
from .adapt import (
    SPREADABLE,
    AtomList,
    AtomTuple,
    IteratorCursor,
    SequenceCursor,
    atom,
    cursor_of,
    is_spreadable,
)

# Transform
from .transform import (
    PASS,
    SKIP,
    STOP,
    Pass,
    Remap,
    Skip,
    SlicePolicy,
    Stop,
    Verdict,
    create_transformed,
    filtered,
    mapped,
    scan,
    sliced,
    tap,
    transform,
)

# Terminal reducers
from .collection import (
    every,
    find,
    includes,
    reduce,
    reduce_right,
    some,
    try_reduce,
)

# Combinators
from .combine import (
    FlattenPolicy,
    TeePolicy,
    concat,
    flatten,
    tee,
    zipped,
)

# Tracing
from . import trace
from .trace import Log, TraceEvent, traced

__all__ = (
    # Core types
    "Closable",
    "Cursor",
    "DONE",
    "Done",
    "Effect",
    "Failable",
    "MISSING",
    "Mapper",
    "Next",
    "Predicate",
    "Reducer",
    "Reversible",
    "StepResult",
    # Errors
    "EmptyReductionError",
    "NotIterableError",
    "NotReversibleError",
    # Helpers module
    "_helpers",
    # Adaptor
    "SPREADABLE",
    "AtomList",
    "AtomTuple",
    "IteratorCursor",
    "SequenceCursor",
    "atom",
    "cursor_of",
    "is_spreadable",
    # Transform
    "PASS",
    "SKIP",
    "STOP",
    "Pass",
    "Remap",
    "Skip",
    "SlicePolicy",
    "Stop",
    "Verdict",
    "create_transformed",
    "filtered",
    "mapped",
    "scan",
    "sliced",
    "tap",
    "transform",
    # Terminal
    "every",
    "find",
    "includes",
    "reduce",
    "reduce_right",
    "some",
    "try_reduce",
    # Combinators
    "FlattenPolicy",
    "TeePolicy",
    "concat",
    "flatten",
    "tee",
    "zipped",
    # Tracing
    "trace",
    "Log",
    "TraceEvent",
    "traced",
)
