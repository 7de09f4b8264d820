"""
Equality bundles.

An `Eq` pairs `eq(a, b)` with `not_eq(a, b)`. Bundles are built from a base
equality and narrowed to part of a structure with `contramap`, which accepts
every projection shape the resolver does:

- Lens, functions, classes, projection objects and `(Prism, default)` pairs
  are always present and compare their projected values.
- Prisms and field names compare optional values: two absent values are
  equal, an absent and a present value are not.
- Traversals relate tuples of values: two structures are equal only when
  both resolve every focus and all values are equal pairwise. A missing
  focus on either side makes them unequal, even when both sides miss it.
"""

from typing import Any, Callable, Iterable

from attrs import frozen

from opticheck.core.maybe import ABSENT, Present
from opticheck.projection.resolver import TraversalProjection, resolve_projection


@frozen
class Eq:
    eq: Callable[[Any, Any], bool]
    not_eq: Callable[[Any, Any], bool]

    @classmethod
    def make(cls, eq: Callable[[Any, Any], bool], not_eq: Callable[[Any, Any], bool] | None = None) -> "Eq":
        if not_eq is None:

            def not_eq(a, b):
                return not eq(a, b)

        return cls(eq, not_eq)

    def contramap(self, projection: Any) -> "Eq":
        """
        Compare structures by a projected part.

        Params:
            projection: Any projection shape, or an Eq used as-is

        Returns:
            An Eq over whole structures
        """
        if isinstance(projection, Eq):
            return projection

        resolved = resolve_projection(projection)

        if isinstance(resolved, TraversalProjection):
            return _traversal_eq(resolved, self)

        def eq(a, b):
            left, right = resolved.project(a), resolved.project(b)
            if isinstance(left, Present) and isinstance(right, Present):
                return self.eq(left.value, right.value)
            return left is ABSENT and right is ABSENT

        def not_eq(a, b):
            left, right = resolved.project(a), resolved.project(b)
            if isinstance(left, Present) and isinstance(right, Present):
                return self.not_eq(left.value, right.value)
            return not (left is ABSENT and right is ABSENT)

        return Eq(eq, not_eq)

    def eq_by(self, projection: Any, a: Any, b: Any) -> bool:
        return self.contramap(projection).eq(a, b)

    def negate(self) -> "Eq":
        return Eq(self.not_eq, self.eq)

    def to_predicate(self, target: Any) -> Callable[[Any], bool]:
        """A predicate that holds for values equal to `target`."""
        return lambda value: self.eq(target, value)

    @staticmethod
    def concat_all(eqs: Iterable["Eq"]) -> "Eq":
        """Equal when every bundle says equal; the empty combination is always equal."""
        eqs = tuple(eqs)
        return Eq.make(lambda a, b: all(e.eq(a, b) for e in eqs))

    @staticmethod
    def concat_any(eqs: Iterable["Eq"]) -> "Eq":
        """Equal when some bundle says equal; the empty combination is never equal."""
        eqs = tuple(eqs)
        return Eq.make(lambda a, b: any(e.eq(a, b) for e in eqs))


def _traversal_eq(resolved: TraversalProjection, base: Eq) -> Eq:
    def eq(a, b):
        left, right = resolved.project(a), resolved.project(b)
        if not (isinstance(left, Present) and isinstance(right, Present)):
            return False
        return all(base.eq(x, y) for x, y in zip(left.value, right.value))

    return Eq.make(eq)


DEFAULT_EQ = Eq.make(lambda a, b: a == b, lambda a, b: a != b)


def contramap(projection: Any, eq: Eq = DEFAULT_EQ) -> Eq:
    return eq.contramap(projection)


def eq_by(projection: Any, a: Any, b: Any, eq: Eq = DEFAULT_EQ) -> bool:
    return eq.contramap(projection).eq(a, b)
