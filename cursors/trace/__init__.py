"""
Tracing
=======

Writer-style observation of cursor protocol calls:

- Log[A] - monoidal accumulator
- traced(cursor, log) - records advance / close / fail events
"""

from .log import Log
from .traced import TraceEvent, TraceKind, TracedCursor, count, traced

__all__ = (
    "Log",
    "TraceEvent",
    "TraceKind",
    "TracedCursor",
    "count",
    "traced",
)
