"""Tests for the Result type (Ok and Err)."""

import pytest
from hypothesis import given
from klaw_either import EitherError, Err, Left, Nothing, Ok, Right, Some, err, error, ok
from klaw_either import result as result_module

from tests.strategies import errs, exceptions, oks, payloads, results


class TestCreation:
    """Tests for Ok/Err instantiation."""

    def test_ok_holds_value(self):
        """Ok wraps a success value."""
        assert Ok(42).value == 42

    def test_err_holds_exception(self):
        """Err wraps an exception, exposed as ``error``."""
        exc = ValueError('boom')
        assert Err(exc).value is exc
        assert Err(exc).error is exc

    def test_err_rejects_non_exceptions(self):
        """Err payloads must be exception instances."""
        with pytest.raises(TypeError, match='exception instance'):
            Err('not an exception')

    def test_err_accepts_exception_classes_only_as_instances(self):
        """An exception class is not an exception instance."""
        with pytest.raises(TypeError):
            Err(ValueError)

    def test_constructors(self):
        """ok()/err() build the matching variant."""
        exc = KeyError('k')
        assert ok(1) == Ok(1)
        assert err(exc) == Err(exc)

    def test_error_builds_generic_fault(self):
        """error() wraps a message in EitherError."""
        value = error('something went wrong')
        assert isinstance(value.error, EitherError)
        assert value.error.message == 'something went wrong'
        assert value.error.name == 'EitherError'

    def test_ok_is_a_left(self):
        """Ok specializes Left, Err specializes Right."""
        assert isinstance(Ok(1), Left)
        assert isinstance(Err(ValueError()), Right)

    def test_ok_never_equals_plain_left(self):
        """Equality is type-identical."""
        assert Ok(1) != Left(1)

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        value = Ok(1)
        with pytest.raises(AttributeError):
            value.value = 2  # type: ignore[misc]


class TestTags:
    """Tests for is_ok()/is_err()."""

    def test_ok(self, sample_ok):
        """Ok reports ok."""
        assert sample_ok.is_ok() is True
        assert sample_ok.is_err() is False
        assert sample_ok.is_left() is True

    def test_err(self, sample_err):
        """Err reports err."""
        assert sample_err.is_ok() is False
        assert sample_err.is_err() is True
        assert sample_err.is_right() is True

    @given(results)
    def test_tags_are_exclusive(self, value):
        """Exactly one of is_ok/is_err holds."""
        assert value.is_ok() != value.is_err()


class TestValueOr:
    """Tests for value_or and value_or_async."""

    def test_ok_ignores_fallback(self, sample_ok):
        """Ok returns its value."""
        assert sample_ok.value_or(0) == 42

    def test_err_plain_fallback(self, sample_err):
        """Err returns a plain fallback."""
        assert sample_err.value_or(0) == 0

    def test_err_callable_fallback_receives_error(self, sample_err):
        """A callable fallback is called with the error."""
        assert sample_err.value_or(lambda exc: str(exc)) == 'test error'

    @pytest.mark.asyncio
    async def test_value_or_async(self, sample_ok, sample_err):
        """value_or_async awaits pending fallbacks."""

        async def describe(exc: BaseException) -> str:
            return f'failed: {exc}'

        assert await sample_ok.value_or_async(describe) == 42
        assert await sample_err.value_or_async(describe) == 'failed: test error'


class TestMap:
    """Tests for map/map_err."""

    def test_map_ok(self):
        """map transforms the Ok value."""
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_passes_through(self):
        """map skips Err and keeps the same error."""
        exc = ValueError('boom')
        mapped = Err(exc).map(lambda _: pytest.fail('mapper called'))
        assert mapped == Err(exc)
        assert mapped.error is exc

    def test_map_err_on_err(self):
        """map_err transforms the error."""
        mapped = Err(ValueError('boom')).map_err(lambda exc: RuntimeError(f'wrapped: {exc}'))
        assert isinstance(mapped.error, RuntimeError)
        assert str(mapped.error) == 'wrapped: boom'

    def test_map_err_on_ok_passes_through(self):
        """map_err skips Ok."""
        assert Ok(1).map_err(lambda _: pytest.fail('mapper called')) == Ok(1)

    def test_map_left_keeps_result_family(self):
        """Inherited Either mapping stays within Ok/Err."""
        assert Ok(1).map_left(lambda x: x + 1) == Ok(2)

    @given(results)
    def test_map_identity(self, value):
        """Mapping the identity function yields an equal Result."""
        assert value.map(lambda x: x) == value

    @given(oks)
    def test_map_composition(self, value):
        """Mapping f then g equals mapping their composition."""

        def f(x):
            return (x, 1)

        def g(pair):
            return pair[0]

        assert value.map(f).map(g) == value.map(lambda x: g(f(x)))

    @pytest.mark.asyncio
    async def test_map_async(self):
        """map_async accepts sync and async mappers."""

        async def double(x: int) -> int:
            return x * 2

        exc = ValueError('boom')
        assert await Ok(2).map_async(double) == Ok(4)
        assert await Ok(2).map_async(str) == Ok('2')
        assert await Err(exc).map_async(double) == Err(exc)

    @pytest.mark.asyncio
    async def test_map_err_async(self):
        """map_err_async awaits an async mapper on Err only."""

        async def wrap(exc: BaseException) -> RuntimeError:
            return RuntimeError(str(exc))

        mapped = await Err(ValueError('boom')).map_err_async(wrap)
        assert isinstance(mapped.error, RuntimeError)
        assert await Ok(1).map_err_async(wrap) == Ok(1)


class TestAndThen:
    """Tests for and_then/and_then_async."""

    def test_and_then_ok_returns_mapper_result(self):
        """and_then flattens the Result returned by the mapper."""
        assert Ok(2).and_then(lambda x: Ok(x * 10)) == Ok(20)

    def test_and_then_ok_to_err(self):
        """and_then can switch to Err."""
        exc = ValueError('too small')
        assert Ok(2).and_then(lambda _: Err(exc)) == Err(exc)

    def test_and_then_err_short_circuits(self):
        """The mapper is never called on Err."""
        calls = []
        exc = KeyError('k')
        chained = Err(exc).and_then(lambda x: calls.append(x) or Ok(x))
        assert chained == Err(exc)
        assert calls == []

    @given(payloads)
    def test_left_identity(self, payload):
        """Ok(x).and_then(f) equals f(x)."""

        def f(x):
            return Ok((x, x))

        assert Ok(payload).and_then(f) == f(payload)

    @given(results)
    def test_right_identity(self, value):
        """value.and_then(Ok) equals value."""
        assert value.and_then(Ok) == value

    @pytest.mark.asyncio
    async def test_and_then_async(self):
        """and_then_async awaits async mappers and short-circuits on Err."""

        async def half(x: int):
            return Ok(x // 2) if x % 2 == 0 else Err(ValueError('odd'))

        exc = KeyError('k')
        assert await Ok(8).and_then_async(half) == Ok(4)
        assert (await Ok(3).and_then_async(half)).is_err()
        assert await Err(exc).and_then_async(half) == Err(exc)


class TestOptionBridges:
    """Tests for some_or_none/as_nullable."""

    def test_some_or_none_on_ok(self):
        """Ok converts to Some."""
        assert Ok(5).some_or_none() == Some(5)

    def test_some_or_none_on_ok_none(self):
        """Ok(None) converts to Nothing."""
        assert Ok(None).some_or_none() is Nothing

    def test_some_or_none_on_err(self, sample_err):
        """Err converts to Nothing, discarding the error."""
        assert sample_err.some_or_none() is Nothing

    def test_as_nullable(self):
        """as_nullable wraps the success value in an Option."""
        assert Ok(5).as_nullable() == Ok(Some(5))
        assert Ok(None).as_nullable() == Ok(Nothing)

    def test_as_nullable_on_err(self):
        """as_nullable keeps the error."""
        exc = ValueError('boom')
        assert Err(exc).as_nullable() == Err(exc)


class TestTranspose:
    """Tests for result.transpose."""

    def test_ok_some(self):
        """Ok(Some(v)) becomes Some(Ok(v))."""
        assert result_module.transpose(Ok(Some(1))) == Some(Ok(1))

    def test_ok_nothing(self):
        """Ok(Nothing) becomes Nothing."""
        assert result_module.transpose(Ok(Nothing)) is Nothing

    def test_err_is_kept(self):
        """Err(e) becomes Some(Err(e))."""
        exc = ValueError('boom')
        assert result_module.transpose(Err(exc)) == Some(Err(exc))


class TestMatchAndStrings:
    """Tests for match and string forms."""

    def test_match(self, sample_ok, sample_err):
        """match dispatches on the variant."""
        assert sample_ok.match(lambda v: v + 1, lambda _: -1) == 43
        assert sample_err.match(lambda _: -1, lambda exc: type(exc).__name__) == 'ValueError'

    def test_str(self):
        """str() shows the variant name."""
        assert str(Ok(1)) == 'Ok(1)'
        assert str(Err(ValueError('boom'))) == 'Err(boom)'

    def test_repr(self):
        """repr() shows the payload repr."""
        assert repr(Err(ValueError('boom'))) == "Err(ValueError('boom'))"


class TestIsInstance:
    """Tests for result.is_instance."""

    @given(results)
    def test_recognizes_results(self, value):
        """Every Ok and Err is recognized."""
        assert result_module.is_instance(value)

    @given(exceptions)
    def test_rejects_plain_either(self, exc):
        """Plain Left/Right and bare exceptions are not Results."""
        assert not result_module.is_instance(Right(exc))
        assert not result_module.is_instance(exc)

    @given(errs)
    def test_err_round_trips_through_value_or(self, value):
        """Err.value_or with the identity returns the stored exception."""
        assert value.value_or(lambda exc: exc) is value.error
