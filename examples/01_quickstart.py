from __future__ import annotations

import operator

from _infra import banner, run

from cursors import Stop, PASS, SKIP, cursor_of
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: map / filter / slice / reduce")

    letters = cursor_of("ABCDEF")
    evens = letters.filter(lambda x: ord(x) % 2 == 0).map(str.lower)
    print(list(evens))  # ['b', 'd', 'f']

    print(list(cursor_of("ABCDEF").slice(1, 3)))  # ['B', 'C']
    print(cursor_of("ABC").reduce(operator.add))  # ABC
    print(cursor_of("ABC").reduce_right(operator.add))  # CBA
    print(list(cursor_of([1, 2, 3, 4]).scan(operator.add)))  # [1, 3, 6, 10]

    match cursor_of([]).try_reduce(operator.add):
        case Ok(value):
            print(f"reduced: {value!r}")
        case Error(err):
            print(f"error: {err}")

    def until_negative(step):
        if step.value < 0:
            return Stop()
        return PASS if step.value else SKIP

    print(list(cursor_of([3, 0, 2, -1, 5]).transform(until_negative)))  # [3, 2]


if __name__ == "__main__":
    run(main)
