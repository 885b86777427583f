from __future__ import annotations

import operator

import pytest
from kungfu import Error

from cursors import Cursor, Done, Next, atom, concat, cursor_of, flatten, tee, zipped

from fakes import FakeSource


def _builders():
    return {
        "map": lambda: cursor_of([1, 2]).map(str),
        "filter": lambda: cursor_of([1, 2]).filter(bool),
        "slice": lambda: cursor_of([1, 2, 3]).slice(1, 2),
        "scan": lambda: cursor_of([1, 2]).scan(operator.add),
        "tap": lambda: cursor_of([1, 2]).tap(lambda x: None),
        "concat": lambda: concat([1], [2]),
        "flatten": lambda: flatten([[1], [2]]),
        "zip": lambda: zipped([1, 2], [3]),
        "tee": lambda: tee(cursor_of([1, 2]))[0],
        "generator": lambda: cursor_of(x for x in [1, 2]),
    }


@pytest.mark.parametrize("name", sorted(_builders()))
def test_exhaustion_is_idempotent(name):
    cursor = _builders()[name]()
    for _ in range(10):
        if cursor.advance().done:
            break
    for _ in range(3):
        assert cursor.advance() == Done()


class TestFluentChains:
    def test_chain(self):
        result = (
            cursor_of(range(10))
            .filter(lambda x: x % 2 == 1)
            .map(lambda x: x * x)
            .slice(1, 3)
        )
        assert isinstance(result, Cursor)
        assert list(result) == [9, 25]

    def test_flat_map_then_reduce(self):
        total = cursor_of([[1, 2], [3], []]).flatten().reduce(operator.add, 0)
        assert total == 6

    def test_concat_respects_flag(self):
        assert list(cursor_of(["A", "B"]).concat(atom(["C", "D"]))) == ["A", "B", ["C", "D"]]

    def test_terminal_methods(self):
        assert cursor_of([1, 2, 3]).some(lambda x: x > 2)
        assert not cursor_of([1, 2, 3]).every(lambda x: x > 2)
        assert cursor_of([1, 2, 3]).includes(2)
        assert cursor_of("abc").reduce_right(operator.add) == "cba"
        assert isinstance(cursor_of([]).try_reduce(operator.add), Error)

    def test_for_loop_stops_on_done(self):
        source = FakeSource([1, 2])
        seen = [value for value in source.map(lambda x: -x)]
        assert seen == [-1, -2]

    def test_tee_then_zip(self):
        left, right = cursor_of(["A", "B", "C"]).tee()
        assert right.advance() == Next("A")
        assert list(left.zip(right)) == [("A", "B"), ("B", "C")]
