"""
Projection resolution.

Rules and comparators accept many projection shapes: field names, paths,
optics, `(Prism, default)` pairs, plain functions, reusable projection
objects and classes. `resolve_projection` turns any of them into one of a
closed set of `Projection` variants, each with a single operation:

    project(structure) -> Present(value) | ABSENT

Unknown shapes and invalid default combinations are rejected here, when the
projection is built, and never surface as validation failures.
"""

from typing import Any, Callable

from attrs import field, frozen

from opticheck.core.callables import accepts, callable_name
from opticheck.core.maybe import Maybe, Present
from opticheck.core.types import Options
from opticheck.exceptions.core import (
    InvalidProjectionError,
    RedundantDefaultError,
    UnsupportedDefaultError,
)
from opticheck.optics.compose import compose
from opticheck.optics.iso import Iso
from opticheck.optics.lens import Lens
from opticheck.optics.prism import Prism
from opticheck.optics.traversal import Traversal
from opticheck.projection import errors


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT = _NoDefault()


class Projection:
    """Base class of the resolved projection variants."""

    kind: str = "projection"

    def project(self, structure: Any) -> Maybe:
        raise NotImplementedError

    def describe(self) -> str:
        return repr(self)


@frozen
class LensProjection(Projection):
    """Total projection through a Lens or Iso; raises StructuralError on violation."""

    lens: Lens | Iso
    kind = "lens"

    def project(self, structure: Any) -> Maybe:
        return Present(self.lens.view(structure))

    def describe(self) -> str:
        return repr(self.lens)


@frozen
class PrismProjection(Projection):
    prism: Prism
    kind = "prism"

    def project(self, structure: Any) -> Maybe:
        return self.prism.preview(structure)

    def describe(self) -> str:
        return repr(self.prism)


@frozen
class DefaultedProjection(Projection):
    """Prism projection that is never absent: falls back to `default`."""

    prism: Prism
    default: Any
    kind = "defaulted"

    def project(self, structure: Any) -> Maybe:
        focus = self.prism.preview(structure)
        return focus if isinstance(focus, Present) else Present(self.default)

    def describe(self) -> str:
        return f"({self.prism!r}, {self.default!r})"


@frozen
class TraversalProjection(Projection):
    """Present(list of focus values) only when every focus is present."""

    traversal: Traversal
    kind = "traversal"

    def project(self, structure: Any) -> Maybe:
        return self.traversal.to_list_maybe(structure)

    def describe(self) -> str:
        return repr(self.traversal)


@frozen
class FunctionProjection(Projection):
    """Total projection through a one-argument function; results are always present."""

    function: Callable[[Any], Any]
    kind = "function"

    def project(self, structure: Any) -> Maybe:
        return Present(self.function(structure))

    def describe(self) -> str:
        return callable_name(self.function)


@frozen
class TypeProjection(Projection):
    """Projects a structure to whether it is an instance of a class."""

    type_: type
    kind = "type"

    def project(self, structure: Any) -> Maybe:
        return Present(isinstance(structure, self.type_))

    def describe(self) -> str:
        return self.type_.__name__


@frozen
class ReusableProjection(Projection):
    """
    Projection through an object exposing `project(value, options)`.

    The object's result is used as-is and always treated as present.
    """

    source: Any
    options: Options = field(factory=dict)
    kind = "reusable"

    def project(self, structure: Any) -> Maybe:
        return Present(self.source.project(structure, self.options))

    def describe(self) -> str:
        source = self.source
        return source.__name__ if isinstance(source, type) else type(source).__name__


def _is_key(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def _is_defaulted_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], Prism)


def _has_project(value: Any) -> bool:
    return callable(getattr(value, "project", None))


def _resolve(projection: Any, options: Options) -> Projection:
    if isinstance(projection, Projection):
        return projection

    if _is_defaulted_pair(projection):
        prism, default = projection
        if prism.defaulted:
            raise RedundantDefaultError(errors.redundant_default())
        return DefaultedProjection(prism, default)

    if _is_key(projection):
        return PrismProjection(Prism.key(projection))

    if isinstance(projection, list):
        if projection and all(_is_key(key) for key in projection):
            return PrismProjection(Prism.path(projection))
        if projection and all(isinstance(o, (Lens, Prism, Iso, Traversal)) for o in projection):
            return _resolve(compose(projection), options)
        raise InvalidProjectionError(errors.invalid_projection(projection))

    if isinstance(projection, (Lens, Iso)):
        return LensProjection(projection)

    if isinstance(projection, Prism):
        return PrismProjection(projection)

    if isinstance(projection, Traversal):
        return TraversalProjection(projection)

    if isinstance(projection, type):
        if _has_project(projection):
            return ReusableProjection(projection, dict(options))
        return TypeProjection(projection)

    if _has_project(projection):
        return ReusableProjection(projection, dict(options))

    if callable(projection) and accepts(projection, 1):
        return FunctionProjection(projection)

    raise InvalidProjectionError(errors.invalid_projection(projection))


def _apply_default(resolved: Projection, default: Any) -> Projection:
    if isinstance(resolved, DefaultedProjection):
        raise RedundantDefaultError(errors.redundant_default())
    if isinstance(resolved, PrismProjection):
        if resolved.prism.defaulted:
            raise RedundantDefaultError(errors.redundant_default())
        return DefaultedProjection(resolved.prism, default)
    if isinstance(resolved, LensProjection):
        raise UnsupportedDefaultError(errors.default_with_lens())
    if isinstance(resolved, TraversalProjection):
        raise UnsupportedDefaultError(errors.default_with_traversal())
    if isinstance(resolved, TypeProjection):
        raise UnsupportedDefaultError(errors.default_with_type())
    if isinstance(resolved, ReusableProjection):
        raise UnsupportedDefaultError(errors.default_with_projection_object())
    raise UnsupportedDefaultError(errors.default_with_function())


def resolve_projection(
    projection: Any,
    *,
    default: Any = NO_DEFAULT,
    options: Options | None = None,
) -> Projection:
    """
    Normalize a projection shape into a Projection variant.

    Params:
        projection: Field name, list of field names or optics, Lens, Iso,
            Prism, (Prism, default), Traversal, one-argument function,
            object with `project(value, options)`, or class
        default: Value to use when a partial projection is absent
        options: Options passed to reusable projection objects

    Returns:
        The resolved Projection

    Raises:
        InvalidProjectionError: For unrecognized shapes
        RedundantDefaultError: When a second default is given for a (Prism, default)
            pair or a Prism built with `with_default`
        UnsupportedDefaultError: When `default` is given for a projection that
            is never absent (Lens, Iso, Traversal, function, class, projection object)
    """
    resolved = _resolve(projection, options or {})
    if default is NO_DEFAULT:
        return resolved
    return _apply_default(resolved, default)


def project(structure: Any, projection: Any) -> Maybe:
    """Resolve `projection` and apply it to `structure`."""
    return resolve_projection(projection).project(structure)
