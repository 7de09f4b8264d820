"""
Ordering bundles.

An `Ord` bundles `lt`, `le`, `gt` and `ge`. `DEFAULT_ORD` is a total order
over arbitrary values: it uses `<` where the values support it and otherwise
ranks by kind (None, then bools and numbers, then strings, then bytes, then
everything else by type name).

`contramap` narrows an ordering to a projected part of a structure. Optional
projections (field names, Prisms) order absent values before present ones
and treat two absent values as equal.
"""

import functools
from numbers import Number
from typing import Any, Callable, Iterable

from attrs import frozen

from opticheck.comparison.eq import Eq
from opticheck.core.maybe import ABSENT, Present
from opticheck.exceptions.core import UnsupportedProjectionError
from opticheck.projection import errors
from opticheck.projection.resolver import TraversalProjection, resolve_projection


@frozen
class Ord:
    lt: Callable[[Any, Any], bool]
    le: Callable[[Any, Any], bool]
    gt: Callable[[Any, Any], bool]
    ge: Callable[[Any, Any], bool]

    @classmethod
    def from_compare(cls, compare: Callable[[Any, Any], int]) -> "Ord":
        """Build an Ord from a three-way comparison returning <0, 0 or >0."""
        return cls(
            lambda a, b: compare(a, b) < 0,
            lambda a, b: compare(a, b) <= 0,
            lambda a, b: compare(a, b) > 0,
            lambda a, b: compare(a, b) >= 0,
        )

    @classmethod
    def from_lt(cls, lt: Callable[[Any, Any], bool]) -> "Ord":
        return cls(
            lt,
            lambda a, b: not lt(b, a),
            lambda a, b: lt(b, a),
            lambda a, b: not lt(a, b),
        )

    def compare(self, a: Any, b: Any) -> int:
        if self.lt(a, b):
            return -1
        if self.gt(a, b):
            return 1
        return 0

    def contramap(self, projection: Any) -> "Ord":
        """
        Order structures by a projected part.

        Params:
            projection: Any projection shape except a Traversal, or an Ord used as-is

        Raises:
            UnsupportedProjectionError: For Traversal projections
        """
        if isinstance(projection, Ord):
            return projection

        resolved = resolve_projection(projection)
        if isinstance(resolved, TraversalProjection):
            raise UnsupportedProjectionError(errors.traversal_ordering())

        def compare(a, b):
            left, right = resolved.project(a), resolved.project(b)
            if isinstance(left, Present) and isinstance(right, Present):
                return self.compare(left.value, right.value)
            if left is ABSENT and right is ABSENT:
                return 0
            return -1 if left is ABSENT else 1

        return Ord.from_compare(compare)

    def reverse(self) -> "Ord":
        return Ord(self.gt, self.ge, self.lt, self.le)

    def max(self, a: Any, b: Any) -> Any:
        """The greater of two values; `a` on ties."""
        return b if self.gt(b, a) else a

    def min(self, a: Any, b: Any) -> Any:
        """The lesser of two values; `a` on ties."""
        return b if self.lt(b, a) else a

    def clamp(self, value: Any, low: Any, high: Any) -> Any:
        return self.min(self.max(value, low), high)

    def between(self, value: Any, low: Any, high: Any) -> bool:
        return self.ge(value, low) and self.le(value, high)

    def comparator(self) -> Callable[[Any, Any], bool]:
        """A `(a, b) -> bool` "sorts before or equal" function."""
        return self.le

    def sort_key(self) -> Callable[[Any], Any]:
        """A key function for `sorted` and `list.sort`."""
        return functools.cmp_to_key(self.compare)

    def to_eq(self) -> Eq:
        return Eq.make(lambda a, b: self.compare(a, b) == 0)

    @staticmethod
    def concat(ords: Iterable["Ord"]) -> "Ord":
        """Lexicographic combination: later orderings break ties of earlier ones."""
        ords = tuple(ords)

        def compare(a, b):
            for ord_ in ords:
                result = ord_.compare(a, b)
                if result != 0:
                    return result
            return 0

        return Ord.from_compare(compare)


def _kind_rank(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, Number):
        return 1
    if isinstance(value, str):
        return 2
    if isinstance(value, (bytes, bytearray)):
        return 3
    return 4


def _generic_compare(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0
    except TypeError:
        left = (_kind_rank(a), type(a).__name__)
        right = (_kind_rank(b), type(b).__name__)
        return (left > right) - (left < right)


DEFAULT_ORD = Ord.from_compare(_generic_compare)


def contramap(projection: Any, order: Ord = DEFAULT_ORD) -> Ord:
    return order.contramap(projection)
