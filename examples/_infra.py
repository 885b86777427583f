from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(slots=True)
class LineFile:
    """Stand-in for a file handle: yields lines and remembers being closed."""

    name: str
    lines: list[str] = field(default_factory=list)
    closed: bool = False

    def __iter__(self) -> Iterator[str]:
        try:
            yield from self.lines
        finally:
            self.closed = True


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
