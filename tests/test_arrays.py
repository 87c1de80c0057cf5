"""Tests for the sequence operators in resultkit.arrays."""

import pytest
from hypothesis import given

from resultkit import failure, success
from resultkit.arrays import filter_, get, head, is_empty, length, map_, reduce_, safe_array_op, tail
from tests.strategies import int_lists


class TestMap:
    """Tests for map_()."""

    def test_maps_every_element(self):
        """map_() collects each element's Success value."""
        assert map_(lambda x: success(x * 2))([1, 2, 3]) == success([2, 4, 6])

    def test_empty_sequence(self):
        """map_() of an empty sequence is an empty list."""
        assert map_(lambda x: failure('never'))([]) == success([])

    def test_stops_at_first_failure(self, calls):
        """Elements after the first Failure are never visited."""

        def check(x):
            calls.append(x)
            return failure(f'bad {x}') if x < 0 else success(x)

        assert map_(check)([1, -2, 3, -4]) == failure('bad -2')
        assert calls == [1, -2]

    def test_works_in_flat_map(self):
        """Configured operators slot into flat_map."""
        assert success([1, 2]).flat_map(map_(lambda x: success(x + 1))) == success([2, 3])

    def test_does_not_mutate_input(self):
        """The input list is left untouched and not returned."""
        items = [1, 2, 3]
        result = map_(success)(items)
        assert items == [1, 2, 3]
        assert result.value is not items

    @given(int_lists)
    def test_matches_builtin_map(self, values):
        """Property: with always-successful functions map_ agrees with map()."""
        assert map_(lambda x: success(x + 1))(values) == success([x + 1 for x in values])


class TestFilter:
    """Tests for filter_()."""

    def test_keeps_truthy_predicate_results(self):
        """filter_() keeps elements whose predicate holds True."""
        assert filter_(lambda x: success(x % 2 == 0))([1, 2, 3, 4]) == success([2, 4])

    def test_stops_at_first_failure(self, calls):
        """A failing predicate aborts the filter."""

        def predicate(x):
            calls.append(x)
            return failure('boom') if x == 2 else success(True)

        assert filter_(predicate)([1, 2, 3]) == failure('boom')
        assert calls == [1, 2]

    @given(int_lists)
    def test_matches_comprehension(self, values):
        """Property: filter_ agrees with a list comprehension."""
        assert filter_(lambda x: success(x > 0))(values) == success([x for x in values if x > 0])


class TestReduce:
    """Tests for reduce_()."""

    def test_sums(self):
        """reduce_() folds left with the initial value."""
        assert reduce_(lambda acc, x: success(acc + x), 0)([1, 2, 3, 4]) == success(10)

    def test_empty_returns_initial(self):
        """reduce_() of nothing is the initial value."""
        assert reduce_(lambda acc, x: success(acc + x), 'init')([]) == success('init')

    def test_order_is_left_to_right(self):
        """The accumulator sees elements in order."""
        assert reduce_(lambda acc, x: success(acc + x), '')(['a', 'b', 'c']) == success('abc')

    def test_stops_at_first_failure(self, calls):
        """A Failure from the step function is the overall result."""

        def step(acc, x):
            calls.append(x)
            return failure('overflow') if acc + x > 3 else success(acc + x)

        assert reduce_(step, 0)([1, 2, 3, 4]) == failure('overflow')
        assert calls == [1, 2, 3]

    @given(int_lists)
    def test_matches_sum(self, values):
        """Property: reducing with addition equals sum()."""
        assert reduce_(lambda acc, x: success(acc + x), 0)(values) == success(sum(values))


class TestAccessors:
    """Tests for head, tail and get."""

    def test_head(self):
        """head() returns the first element."""
        assert head([7, 8], lambda: 'empty') == success(7)

    def test_head_of_empty(self):
        """head() of an empty sequence fails with on_empty()."""
        assert head([], lambda: 'empty') == failure('empty')

    def test_head_of_none_element(self):
        """A None first element is still a value."""
        assert head([None], lambda: 'empty') == success(None)

    def test_tail(self):
        """tail() drops the first element into a new list."""
        items = [1, 2, 3]
        result = tail(items)
        assert result == success([2, 3])
        assert items == [1, 2, 3]

    def test_tail_of_empty_and_single(self):
        """tail() of short sequences is an empty list."""
        assert tail([]) == success([])
        assert tail([1]) == success([])

    def test_tail_of_tuple_is_list(self):
        """tail() always returns a list."""
        assert tail((1, 2)) == success([2])

    def test_get_in_bounds(self):
        """get() returns the element at the index."""
        assert get(1, lambda i: f'out of bounds: {i}')(['a', 'b', 'c']) == success('b')

    @pytest.mark.parametrize('index', [-1, 3, 100])
    def test_get_out_of_bounds(self, index):
        """get() fails for negative and past-the-end indexes."""
        assert get(index, lambda i: f'out of bounds: {i}')(['a', 'b', 'c']) == failure(f'out of bounds: {index}')

    def test_get_on_empty(self):
        """Index 0 of an empty sequence is out of bounds."""
        assert get(0, lambda i: i)([]) == failure(0)


class TestQueries:
    """Tests for is_empty and length."""

    def test_is_empty(self):
        """is_empty() reports emptiness as a Success."""
        assert is_empty()([]) == success(True)
        assert is_empty()([0]) == success(False)

    @given(int_lists)
    def test_length(self, values):
        """Property: length() equals len()."""
        assert length()(values) == success(len(values))


class TestSafeArrayOp:
    """Tests for safe_array_op()."""

    def test_wraps_return_value(self):
        """A completing function returns Success."""
        assert safe_array_op(sum)([1, 2, 3]) == success(6)

    def test_captures_exception(self):
        """A raising function returns Failure holding the exception."""
        result = safe_array_op(lambda seq: seq[10])([1])
        assert result.is_failure()
        assert isinstance(result.error, IndexError)

    def test_maps_exception_with_on_error(self):
        """on_error turns the captured exception into the error value."""
        result = safe_array_op(max, lambda e: f'{type(e).__name__}: {e}')([])
        assert result.is_failure()
        assert result.error.startswith('ValueError: ')
