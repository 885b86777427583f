from __future__ import annotations

import operator

import pytest

from cursors import (
    PASS,
    SKIP,
    Done,
    Next,
    Remap,
    Reversible,
    SlicePolicy,
    Stop,
    create_transformed,
    cursor_of,
    filtered,
    mapped,
    scan,
    sliced,
    tap,
    transform,
)

from fakes import Boom, CloseBoom, FakeSource, PlainSource, drain

LETTERS = ["A", "B", "C", "D", "E", "F"]


class TestMap:
    def test_map(self):
        assert drain(mapped(cursor_of(["A", "B", "C"]), lambda x: x + x)) == ["AA", "BB", "CC"]

    def test_non_callable_raises_before_pulling(self):
        source = FakeSource([1])
        with pytest.raises(TypeError):
            mapped(source, "not callable")
        assert source.advances == 0

    def test_map_filter_composition(self):
        values = list(range(20))
        f = lambda v: v * 3
        p = lambda v: v % 2 == 0
        result = drain(cursor_of(values).map(f).filter(p))
        assert result == [f(v) for v in values if p(f(v))]

    def test_mapper_failure_closes_upstream(self):
        source = FakeSource([1, 2])

        def explode(value):
            raise Boom()

        cursor = mapped(source, explode)
        with pytest.raises(Boom):
            cursor.advance()
        assert source.closes == [None]
        assert cursor.advance() == Done()

    def test_mapper_failure_survives_a_failing_close(self):
        source = FakeSource([1, 2], close_raises=True)

        def explode(value):
            raise Boom()

        with pytest.raises(Boom) as info:
            mapped(source, explode).advance()
        assert source.closes == [None]
        assert any("CloseBoom" in note for note in info.value.__notes__)


class TestFilter:
    def test_filter(self):
        cursor = filtered(cursor_of(LETTERS), lambda x: ord(x) % 2 == 0)
        assert drain(cursor) == ["B", "D", "F"]

    def test_filter_everything(self):
        assert drain(filtered(cursor_of(LETTERS), lambda x: False)) == []


class TestSlice:
    def test_slice_window(self):
        assert drain(sliced(cursor_of(LETTERS), 1, 3)) == ["B", "C"]

    def test_slice_without_end(self):
        assert drain(sliced(cursor_of(LETTERS), 3)) == ["D", "E", "F"]

    def test_slice_end_closes_upstream(self):
        source = FakeSource(LETTERS)
        cursor = sliced(source, 1, 3)
        assert drain(cursor) == ["B", "C"]
        assert source.closes == [None]
        assert source.advances == 4

    def test_exhaustion_before_end_does_not_close(self):
        source = FakeSource(["A", "B"])
        assert drain(sliced(source, 0, 10)) == ["A", "B"]
        assert source.closes == []

    def test_slice_of_infinite_source(self):
        def naturals():
            n = 0
            while True:
                yield n
                n += 1

        assert drain(sliced(cursor_of(naturals()), 5, 8)) == [5, 6, 7]

    @pytest.mark.parametrize("start, end", [(-1, None), (0, -2)])
    def test_negative_bounds_raise_before_pulling(self, start, end):
        source = FakeSource(LETTERS)
        with pytest.raises(ValueError):
            sliced(source, start, end)
        assert source.advances == 0

    def test_non_integer_bound_raises(self):
        with pytest.raises(TypeError):
            SlicePolicy(start=1.5)

    def test_policy(self):
        assert drain(sliced(cursor_of(LETTERS), policy=SlicePolicy(start=4))) == ["E", "F"]


class TestScanAndTap:
    def test_scan_without_seed(self):
        assert drain(scan(cursor_of([1, 2, 3, 4]), operator.add)) == [1, 3, 6, 10]

    def test_scan_with_seed(self):
        assert drain(scan(cursor_of([1, 2, 3]), operator.add, 10)) == [11, 13, 16]

    def test_scan_with_none_seed(self):
        assert drain(scan(cursor_of([1, 2]), lambda acc, v: [acc, v], None)) == [[None, 1], [[None, 1], 2]]

    def test_tap_observes_pulled_values(self):
        seen = []
        cursor = tap(cursor_of(LETTERS), seen.append).slice(0, 2)
        assert drain(cursor) == ["A", "B"]
        assert seen == ["A", "B", "C"]


class TestTransformCore:
    def test_stop_ends_chain_and_closes_upstream(self):
        source = FakeSource(range(100))

        def evens_until_ten(step):
            if step.value >= 10:
                return Stop("enough")
            return PASS if step.value % 2 == 0 else SKIP

        cursor = transform(source, evens_until_ten)
        assert list(cursor) == [0, 2, 4, 6, 8]
        assert source.closes == [None]
        assert cursor.advance() == Done()

    def test_stop_value_is_done_value(self):
        cursor = transform(cursor_of([1]), lambda step: Stop("enough"))
        assert cursor.advance() == Done("enough")

    def test_remap(self):
        cursor = transform(cursor_of([1, 2]), lambda step: Remap(step.value * 10))
        assert drain(cursor) == [10, 20]

    def test_invalid_verdict_raises_and_closes(self):
        source = FakeSource([1])
        cursor = transform(source, lambda step: None)
        with pytest.raises(TypeError):
            cursor.advance()
        assert source.closed

    def test_upstream_failure_propagates_without_close(self):
        source = FakeSource([1, 2], raise_at=1)
        cursor = mapped(source, str)
        assert cursor.advance() == Next("1")
        with pytest.raises(Boom):
            cursor.advance()
        assert source.closes == []
        assert cursor.advance() == Done()

    def test_close_forwards_once(self):
        source = FakeSource([1, 2, 3])
        cursor = mapped(source, str)
        cursor.advance()
        assert cursor.close("bye") == Done("bye")
        assert cursor.close("again") == Done("again")
        assert source.closes == ["bye"]
        assert cursor.advance() == Done()

    def test_close_on_plain_upstream_is_noop(self):
        cursor = mapped(PlainSource([1, 2]), str)
        assert cursor.close(5) == Done(5)

    def test_close_after_exhaustion_does_not_touch_upstream(self):
        source = FakeSource([1])
        cursor = mapped(source, str)
        drain(cursor)
        cursor.close()
        assert source.closes == []

    def test_fail_forwards_to_upstream(self):
        source = FakeSource([1])
        cursor = mapped(source, str)
        error = Boom()
        assert cursor.fail(error) == Done("failed")
        assert source.failures == [error]

    def test_fail_without_capability_reraises(self):
        cursor = mapped(PlainSource([1]), str)
        with pytest.raises(Boom):
            cursor.fail(Boom())

    def test_transform_function_gets_context(self):
        calls = []

        def fn(context, step):
            calls.append((context, step.value))
            return PASS

        drain(create_transformed(cursor_of([1, 2]), fn, "ctx"))
        assert calls == [("ctx", 1), ("ctx", 2)]


class TestReversibleTransforms:
    def test_map_and_filter_keep_reversibility(self):
        cursor = cursor_of([1, 2, 3, 4]).map(lambda x: x * 10).filter(lambda x: x != 20)
        assert isinstance(cursor, Reversible)
        assert list(cursor.reverse()) == [40, 30, 10]

    def test_stateful_transforms_are_not_reversible(self):
        assert not isinstance(cursor_of([1, 2]).slice(1), Reversible)
        assert not isinstance(cursor_of([1, 2]).scan(operator.add), Reversible)

    def test_map_over_forward_only_source_is_not_reversible(self):
        assert not isinstance(mapped(FakeSource([1]), str), Reversible)
