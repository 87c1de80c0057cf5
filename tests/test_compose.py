"""Tests for pipe/compose, their async versions, and curry()."""

import asyncio

import pytest
from hypothesis import given

from resultkit import compose, compose_async, curry, failure, pipe, pipe_async, success, try_catch
from tests.strategies import integers


def _add(n):
    return lambda x: success(x + n)


def _times(n):
    return lambda x: success(x * n)


class TestPipe:
    """Tests for pipe() and compose()."""

    def test_pipe_runs_left_to_right(self):
        """pipe(f, g)(x) runs f first."""
        assert pipe(_add(1), _times(2))(5) == success(12)

    def test_compose_runs_right_to_left(self):
        """compose(f, g)(x) runs g first."""
        assert compose(_add(1), _times(2))(5) == success(11)

    def test_no_functions_is_identity(self):
        """An empty pipeline returns success(initial)."""
        assert pipe()(3) == success(3)
        assert compose()(3) == success(3)

    def test_stops_at_first_failure(self, calls):
        """Stages after a Failure never run."""

        def record(x):
            calls.append(x)
            return success(x)

        assert pipe(record, lambda x: failure('stop'), record)(1) == failure('stop')
        assert calls == [1]

    def test_compose_stops_at_first_failure(self, calls):
        """compose short-circuits too, in its own order."""

        def record(x):
            calls.append(x)
            return success(x)

        assert compose(record, lambda x: failure('stop'), record)(1) == failure('stop')
        assert calls == [1]

    def test_pipeline_with_try_catch(self):
        """Stages can bridge raising code."""
        parse = pipe(
            lambda s: try_catch(lambda: int(s), lambda e: 'not a number'),
            lambda n: success(n) if n > 0 else failure('not positive'),
        )
        assert parse('12') == success(12)
        assert parse('-3') == failure('not positive')
        assert parse('abc') == failure('not a number')

    def test_pipeline_is_reusable(self):
        """A built pipeline can be applied many times."""
        double = pipe(_times(2))
        assert [double(x) for x in (1, 2, 3)] == [success(2), success(4), success(6)]

    @given(integers)
    def test_pipe_equals_reversed_compose(self, value):
        """Property: pipe(f, g) == compose(g, f)."""
        assert pipe(_add(3), _times(5))(value) == compose(_times(5), _add(3))(value)


class TestAsyncPipe:
    """Tests for pipe_async() and compose_async()."""

    async def test_pipe_async_order(self):
        """pipe_async runs stages left to right."""

        async def add_one(x):
            return success(x + 1)

        async def double(x):
            return success(x * 2)

        assert await pipe_async(add_one, double)(5) == success(12)
        assert await compose_async(add_one, double)(5) == success(11)

    async def test_stops_at_first_failure(self, calls):
        """Later stages are not awaited after a Failure."""

        async def fail(x):
            return failure('stop')

        async def record(x):
            calls.append(x)
            return success(x)

        assert await pipe_async(fail, record)(1) == failure('stop')
        assert await compose_async(record, fail)(1) == failure('stop')
        assert calls == []

    async def test_stages_run_sequentially(self, calls):
        """Each stage finishes before the next one starts."""

        def stage(name):
            async def run(x):
                calls.append(f'{name} start')
                await asyncio.sleep(0)
                calls.append(f'{name} end')
                return success(x)

            return run

        await pipe_async(stage('a'), stage('b'))(0)
        assert calls == ['a start', 'a end', 'b start', 'b end']

    async def test_empty_pipeline(self):
        """No stages returns success(initial)."""
        assert await pipe_async()('x') == success('x')


class TestCurry:
    """Tests for curry()."""

    def test_one_at_a_time(self):
        """Arguments can be supplied one per call."""
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1)(2)(3) == 6

    def test_grouped_arguments(self):
        """Several arguments can be supplied per call."""
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1, 2)(3) == 6
        assert add3(1)(2, 3) == 6
        assert add3(1, 2, 3) == 6

    def test_partials_are_independent(self):
        """A partial application can be reused without interference."""
        add = curry(lambda a, b: a + b)
        add_ten = add(10)
        assert add_ten(1) == 11
        assert add_ten(2) == 12

    def test_defaults_not_counted(self):
        """Parameters with defaults do not count towards the arity."""

        def greet(greeting, name, punctuation='!'):
            return f'{greeting}, {name}{punctuation}'

        assert curry(greet)('Hi')('ada') == 'Hi, ada!'

    def test_explicit_arity(self):
        """An explicit arity overrides the signature."""
        total = curry(lambda *xs: sum(xs), arity=3)
        assert total(1)(2)(3) == 6

    def test_keyword_arguments_forwarded(self):
        """Keyword arguments are held until the final call."""

        def scale(x, y, *, factor=1):
            return (x + y) * factor

        assert curry(scale)(1, factor=10)(2) == 30

    def test_zero_arity_calls_immediately(self):
        """A function with no required parameters runs on the first call."""
        assert curry(lambda: 'now')() == 'now'

    def test_negative_arity_rejected(self):
        """A negative arity is a programming error."""
        with pytest.raises(ValueError, match='arity'):
            curry(lambda: None, arity=-1)

    def test_preserves_name(self):
        """The curried function keeps the wrapped function's name."""

        def add(a, b):
            return a + b

        assert curry(add).__name__ == 'add'
