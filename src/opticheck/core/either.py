"""
Success/failure results for validation.

`Right(value)` is a success and `Left(error)` a failure. Validators return
these (or one of the shapes accepted by the result normalizer), and the
executor returns exactly one of them for every run. `traverse_a` and
`validate` accumulate failures by merging `ValidationError` values instead of
stopping at the first one.
"""

from typing import Any, Callable, Generic, Iterable, TypeVar

from attrs import frozen

from opticheck.core.types import Predicate
from opticheck.exceptions.core import ValidationError

A = TypeVar("A")
E = TypeVar("E")


@frozen
class Right(Generic[A]):
    value: A

    def is_right(self) -> bool:
        return True

    def is_left(self) -> bool:
        return False


@frozen
class Left(Generic[E]):
    error: E

    def is_right(self) -> bool:
        return False

    def is_left(self) -> bool:
        return True


Either = Right | Left


def fmap(either: Either, f: Callable[[Any], Any]) -> Either:
    return Right(f(either.value)) if isinstance(either, Right) else either


def map_left(either: Either, f: Callable[[Any], Any]) -> Either:
    return Left(f(either.error)) if isinstance(either, Left) else either


def bind(either: Either, f: Callable[[Any], Either]) -> Either:
    return f(either.value) if isinstance(either, Right) else either


def flip(either: Either) -> Either:
    return Left(either.value) if isinstance(either, Right) else Right(either.error)


def get_or_else(either: Either, default: Any) -> Any:
    return either.value if isinstance(either, Right) else default


def lift_predicate(
    value: Any, predicate: Predicate, on_false: Callable[[Any], Any]
) -> Either:
    """Right(value) when `predicate` holds, otherwise Left(on_false(value))."""
    return Right(value) if predicate(value) else Left(on_false(value))


def traverse(values: Iterable[Any], f: Callable[[Any], Either]) -> Either:
    """Apply `f` to every value, stopping at the first Left."""
    results = []
    for value in values:
        result = f(value)
        if isinstance(result, Left):
            return result
        results.append(result.value)
    return Right(results)


def traverse_a(values: Iterable[Any], f: Callable[[Any], Either]) -> Either:
    """
    Apply `f` to every value, accumulating every failure.

    Params:
        values: Input values
        f: Function returning Right or Left(ValidationError) for each value

    Returns:
        Right(list of results) if all succeed, otherwise Left with the
        merged ValidationError of every failure in input order
    """
    results = []
    errors = []
    for value in values:
        result = f(value)
        if isinstance(result, Left):
            errors.append(result.error)
        else:
            results.append(result.value)
    if errors:
        return Left(ValidationError.concat(errors))
    return Right(results)


def sequence_a(eithers: Iterable[Either]) -> Either:
    return traverse_a(eithers, lambda e: e)


def validate(value: Any, validators: Iterable[Callable[[Any], Either]]) -> Either:
    """
    Run every validator on the same value and accumulate their failures.

    Returns:
        Right(value) if all validators succeed, otherwise Left with every
        error merged in validator order
    """
    result = traverse_a(validators, lambda validator: validator(value))
    return result if isinstance(result, Left) else Right(value)


def from_result(result: tuple) -> Either:
    """Convert an ("ok", value) / ("error", reason) tuple to an Either."""
    tag, payload = result
    if tag == "ok":
        return Right(payload)
    if tag == "error":
        return Left(payload)
    raise ValueError(f"Expected an 'ok' or 'error' tuple, got {result!r}")


def to_result(either: Either) -> tuple:
    if isinstance(either, Right):
        return ("ok", either.value)
    return ("error", either.error)


def to_try(either: Either) -> Any:
    """Unwrap a Right, raising the error of a Left."""
    if isinstance(either, Right):
        return either.value
    if isinstance(either.error, BaseException):
        raise either.error
    raise ValueError(either.error)
