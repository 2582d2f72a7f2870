"""Tests for constructors, the Either encoding and NonEmptyList."""

import operator

import pytest

from amass import (
    Err,
    Left,
    NonEmptyList,
    Ok,
    Right,
    attempt,
    failure,
    failure_nel,
    from_either,
    is_strict,
    lift,
    lift_nel,
    result_context,
    success,
)


class TestConstructors:
    def test_success_failure(self):
        assert success(1) == Ok(1)
        assert failure("x") == Err("x")

    def test_failure_nel(self):
        assert failure_nel("x") == Err(NonEmptyList("x"))

    def test_lift_predicate_true_fails(self):
        assert lift(-3, lambda n: n < 0, "negative") == Err("negative")

    def test_lift_predicate_false_succeeds(self):
        assert lift(3, lambda n: n < 0, "negative") == Ok(3)

    def test_lift_nel(self):
        assert lift_nel(-3, lambda n: n < 0, "negative") == Err(NonEmptyList("negative"))
        assert lift_nel(3, lambda n: n < 0, "negative") == Ok(3)


class TestEither:
    def test_from_either(self):
        assert from_either(Left("x")) == Err("x")
        assert from_either(Right(1)) == Ok(1)

    def test_round_trip(self):
        for result in (Ok(1), Err("x")):
            assert from_either(result.to_either()) == result
        for either in (Left("x"), Right(1)):
            assert from_either(either).to_either() == either

    def test_fold_and_swap(self):
        assert Left(2).fold(lambda x: x * 10, str) == 20
        assert Right(2).fold(lambda x: x * 10, str) == "2"
        assert Left(1).swap() == Right(1)
        assert Right(1).is_right() and not Right(1).is_left()

    def test_repr(self):
        assert repr(Left("x")) == "Left('x')"
        assert repr(Right(1)) == "Right(1)"


class TestNonEmptyList:
    def test_of(self):
        nel = NonEmptyList.of("a", "b", "c")
        assert nel.head == "a"
        assert nel.tail == ("b", "c")
        assert len(nel) == 3
        assert list(nel) == ["a", "b", "c"]

    def test_concat(self):
        assert NonEmptyList.of("a") + NonEmptyList.of("b", "c") == NonEmptyList.of(
            "a", "b", "c"
        )

    def test_concat_rejects_other_types(self):
        with pytest.raises(TypeError):
            NonEmptyList("a") + ["b"]

    def test_from_iterable(self):
        assert NonEmptyList.from_iterable(iter([1, 2])) == NonEmptyList.of(1, 2)

    def test_from_empty_iterable(self):
        with pytest.raises(ValueError, match="at least one element"):
            NonEmptyList.from_iterable([])

    def test_map_and_index(self):
        nel = NonEmptyList.of(1, 2).map(lambda n: n * 10)
        assert nel.to_list() == [10, 20]
        assert nel[-1] == 20

    def test_repr(self):
        assert repr(NonEmptyList.of("a", 1)) == "NonEmptyList('a', 1)"

    def test_nel_errors_accumulate_without_custom_combine(self):
        result = Err("a").to_nel().find_success(Err("b").to_nel(), operator.add)
        assert result == Err(NonEmptyList.of("a", "b"))


class TestAttempt:
    def test_success(self):
        assert attempt(int, "42") == Ok(42)

    def test_captures_exception(self):
        result = attempt(int, "4x2")
        assert result.is_err()
        assert isinstance(result.error, ValueError)

    def test_kwargs_pass_through(self):
        assert attempt(int, "ff", base=16) == Ok(255)

    def test_catch_is_not_forwarded(self):
        assert attempt(dict, catch=KeyError, a=1) == Ok({"a": 1})
        assert attempt(lambda: dict(catch=1)) == Ok({"catch": 1})

    def test_uncaught_type_propagates(self):
        with pytest.raises(ValueError):
            attempt(int, "x", catch=KeyError)

    def test_strict_mode_raises(self):
        with result_context(strict=True):
            assert is_strict()
            with pytest.raises(ValueError):
                attempt(int, "x")
        assert not is_strict()

    def test_strict_mode_still_returns_success(self):
        with result_context(strict=True):
            assert attempt(int, "1") == Ok(1)
