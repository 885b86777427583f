from .concat import ConcatCursor, concat
from .flatten import FlattenCursor, FlattenPolicy, flatten
from .tee import TeeBranch, TeePolicy, tee
from .zip import ZipCursor, zipped

__all__ = (
    # Policies
    "FlattenPolicy",
    "TeePolicy",
    # Cursors
    "ConcatCursor",
    "FlattenCursor",
    "TeeBranch",
    "ZipCursor",
    # Combinators
    "concat",
    "flatten",
    "tee",
    "zipped",
)
