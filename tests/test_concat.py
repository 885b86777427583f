from __future__ import annotations

import pytest

from cursors import Done, Next, NotIterableError, atom, concat, cursor_of

from fakes import Boom, CloseBoom, FakeSource, PlainSource, Unopenable, drain


class TestConcat:
    def test_concat_mixed_sources(self):
        a = ["A", "B", "C"]
        cursor = cursor_of(a).concat(a, cursor_of(a), iter(a))
        assert drain(cursor) == a * 4

    def test_scalars_are_single_items(self):
        cursor = concat(["A", "B", "C"], "XYZ", 1)
        assert drain(cursor) == ["A", "B", "C", "XYZ", 1]

    def test_respects_non_spreadable_flag(self):
        cursor = concat(["A", "B"], atom(["C", "D"]))
        assert drain(cursor) == ["A", "B", ["C", "D"]]

    def test_first_must_produce_a_cursor(self):
        with pytest.raises(NotIterableError):
            concat(42, [1])

    def test_unopenable_argument_closes_built_cursors(self):
        first, second = FakeSource([1]), FakeSource([2])
        with pytest.raises(OSError):
            concat(first, second, Unopenable())
        assert first.closes == [None]
        assert second.closes == [None]

    def test_finished_sources_are_not_requeried(self):
        first = FakeSource([1])
        second = FakeSource([2])
        cursor = concat(first, second)
        assert drain(cursor) == [1, 2]
        assert first.advances == 2
        assert second.advances == 2

    def test_last_done_value_is_returned(self):
        def gen():
            yield 1
            return "tail"

        cursor = concat([0], gen())
        assert [cursor.advance() for _ in range(4)] == [Next(0), Next(1), Done("tail"), Done()]


class TestConcatClosing:
    def test_close_closes_current_and_pending(self):
        first, second, third = FakeSource([1]), FakeSource([2]), FakeSource([3])
        cursor = concat(first, second, third)
        assert cursor.advance() == Next(1)
        assert cursor.advance() == Next(2)
        assert cursor.close("stop") == Done("stop")
        assert first.closes == []
        assert second.closes == [None]
        assert third.closes == [None]
        assert cursor.advance() == Done()

    def test_close_is_at_most_once(self):
        first = FakeSource([1, 2])
        cursor = concat(first, [3])
        cursor.advance()
        cursor.close()
        cursor.close()
        assert first.closes == [None]

    def test_close_tolerates_plain_cursors(self):
        cursor = concat(PlainSource([1]), PlainSource([2]))
        assert cursor.close(1) == Done(1)

    def test_failure_closes_pending_sources(self):
        first = FakeSource([1], raise_at=1)
        second, third = FakeSource([2]), FakeSource([3])
        cursor = concat(first, second, third)
        assert cursor.advance() == Next(1)
        with pytest.raises(Boom):
            cursor.advance()
        assert first.closes == []
        assert second.closes == [None]
        assert third.closes == [None]
        assert cursor.advance() == Done()

    def test_close_failure_keeps_the_upstream_error(self):
        first = FakeSource([1], raise_at=1)
        second = FakeSource([2], name="second", close_raises=True)
        third = FakeSource([3])
        cursor = concat(first, second, third)
        assert cursor.advance() == Next(1)
        with pytest.raises(Boom) as info:
            cursor.advance()
        assert second.closes == [None]
        assert third.closes == [None]
        assert any("CloseBoom('second')" in note for note in info.value.__notes__)

    def test_close_attempts_every_cursor_then_raises_first_failure(self):
        first = FakeSource([1], name="first", close_raises=True)
        second = FakeSource([2], name="second", close_raises=True)
        third = FakeSource([3])
        cursor = concat(first, second, third)
        with pytest.raises(CloseBoom, match="first"):
            cursor.close()
        assert [s.closes for s in (first, second, third)] == [[None], [None], [None]]
