"""
Optional values for partial accessors.

`Present(value)` wraps a value that exists (including a present `None`
produced by a total function); `ABSENT` marks a value that does not. Prisms
return these from `preview`, the projection resolver returns them for every
focus, and the validation executor hands `ABSENT` to validators unchanged.
"""

from typing import Any, Callable, Generic, Iterable, TypeVar

from attrs import frozen

from opticheck.core.types import Predicate

A = TypeVar("A")
B = TypeVar("B")


@frozen
class Present(Generic[A]):
    value: A

    def __bool__(self) -> bool:
        return True


class _Absent:
    """Singleton marker for a missing value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()

Maybe = Present | _Absent


def is_present(maybe: Any) -> bool:
    return isinstance(maybe, Present)


def is_absent(maybe: Any) -> bool:
    return maybe is ABSENT


def from_none(value: Any) -> Maybe:
    """Wrap a value, treating `None` as absent."""
    return ABSENT if value is None else Present(value)


def to_none(maybe: Maybe) -> Any:
    return maybe.value if isinstance(maybe, Present) else None


def pure(value: Any) -> Present:
    return Present(value)


def fmap(maybe: Maybe, f: Callable[[Any], Any]) -> Maybe:
    return Present(f(maybe.value)) if isinstance(maybe, Present) else ABSENT


def bind(maybe: Maybe, f: Callable[[Any], Maybe]) -> Maybe:
    return f(maybe.value) if isinstance(maybe, Present) else ABSENT


def get_or_else(maybe: Maybe, default: Any) -> Any:
    return maybe.value if isinstance(maybe, Present) else default


def or_else(maybe: Maybe, thunk: Callable[[], Maybe]) -> Maybe:
    return maybe if isinstance(maybe, Present) else thunk()


def traverse(values: Iterable[Any], f: Callable[[Any], Maybe]) -> Maybe:
    """
    Apply `f` to every value, collecting results only if all are present.

    Params:
        values: Input values
        f: Function returning a Maybe for each value

    Returns:
        Present(list of unwrapped results), or ABSENT if any result is absent
    """
    results = []
    for value in values:
        result = f(value)
        if not isinstance(result, Present):
            return ABSENT
        results.append(result.value)
    return Present(results)


def sequence(maybes: Iterable[Maybe]) -> Maybe:
    return traverse(maybes, lambda m: m)


def concat_map(values: Iterable[Any], f: Callable[[Any], Maybe]) -> list:
    """Apply `f` to every value and keep only the present results."""
    return [r.value for r in (f(v) for v in values) if isinstance(r, Present)]


def lift_predicate(value: Any, predicate: Predicate) -> Maybe:
    return Present(value) if predicate(value) else ABSENT


def lift_eq(eq: Callable[[Any, Any], bool]) -> Callable[[Maybe, Maybe], bool]:
    """
    Lift a value equality to Maybe values.

    Two absent values are equal; an absent and a present value are not.
    """

    def maybe_eq(left: Maybe, right: Maybe) -> bool:
        if isinstance(left, Present) and isinstance(right, Present):
            return eq(left.value, right.value)
        return left is ABSENT and right is ABSENT

    return maybe_eq


def lift_lt(lt: Callable[[Any, Any], bool]) -> Callable[[Maybe, Maybe], bool]:
    """
    Lift a strict ordering to Maybe values.

    Absent sorts before every present value.
    """

    def maybe_lt(left: Maybe, right: Maybe) -> bool:
        if isinstance(left, Present) and isinstance(right, Present):
            return lt(left.value, right.value)
        return left is ABSENT and isinstance(right, Present)

    return maybe_lt
