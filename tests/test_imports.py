"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from klaw_either work."""

    def test_result_types(self) -> None:
        """Test importing Result types from root."""
        from klaw_either import Err, Ok, Result, err, error, ok

        result: Result[int, ValueError] = Ok(1)
        assert result.is_ok()
        assert Err(ValueError()).is_err()
        assert ok(1) == Ok(1)
        assert err(KeyError()).is_err()
        assert error('x').is_err()

    def test_option_types(self) -> None:
        """Test importing Option types from root."""
        from klaw_either import Nothing, NothingType, Option, Some, from_nullable, none, some

        option: Option[int] = Some(1)
        assert option.is_some()
        assert isinstance(Nothing, NothingType)
        assert none() is Nothing
        assert some(2) == from_nullable(2)

    def test_either_types(self) -> None:
        """Test importing Either types from root."""
        from klaw_either import Either, Left, Right, left, right

        value: Either[int, str] = left(1)
        assert value == Left(1)
        assert right('x') == Right('x')

    def test_execution(self) -> None:
        """Test importing guarded execution and blocks from root."""
        from klaw_either import do, do_async, doing, doing_async, safe, safe_async
        from klaw_either import try_catching, try_catching_async, trying, trying_async

        for fn in (do, do_async, doing, doing_async, safe, safe_async):
            assert callable(fn)
        for fn in (try_catching, try_catching_async, trying, trying_async):
            assert callable(fn)

    def test_everything_in_all_is_importable(self) -> None:
        """Every name in __all__ resolves."""
        import klaw_either

        for name in klaw_either.__all__:
            assert hasattr(klaw_either, name), name


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_submodules(self) -> None:
        """Test importing from submodules."""
        from klaw_either.compose import either, option, pipe, result
        from klaw_either.decorators import do, safe
        from klaw_either.errors import EitherError, WrongSideError
        from klaw_either.option import transpose as option_transpose
        from klaw_either.result import transpose as result_transpose

        assert issubclass(WrongSideError, EitherError)
        assert callable(pipe)
        assert callable(do)
        assert callable(safe)
        assert callable(option_transpose)
        assert callable(result_transpose)
        assert callable(either.match)
        assert callable(option.ok_or)
        assert callable(result.map)
