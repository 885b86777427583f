from .reduce import reduce, reduce_right, try_reduce
from .search import every, find, includes, some

__all__ = (
    "every",
    "find",
    "includes",
    "reduce",
    "reduce_right",
    "some",
    "try_reduce",
)
