"""
Rule builders.

Rules are declared with two functions and compiled with `validation(...)`:

    user_validation = validation(
        at("name", Required),
        at("email", [Required, Email]),
        at("age", (Range, {"min": 18}), default=18),
        root(passwords_match),
    )

`at` targets a projected part of the structure; `root` validates the whole
structure. A rule's `validators` is a single validator spec or a list of
them, where a spec is a validator or a `(validator, options)` pair.
Projections and validators are only checked when the rules are compiled.
"""

from collections.abc import Mapping
from typing import Any

from attrs import field, frozen

from opticheck.projection.resolver import NO_DEFAULT


def _as_validator_specs(validators: Any) -> tuple:
    if isinstance(validators, list):
        return tuple(validators)
    return (validators,)


@frozen
class Rule:
    """
    A declared, not yet compiled, rule.

    Params:
        projection: Raw projection shape, ignored for root rules
        validators: Raw validator specs
        default: Value used when a partial projection is absent
        projection_options: Options for reusable projection objects
        label: Optional name used in logs and error context
        is_root: Whether the rule validates the whole structure
    """

    projection: Any
    validators: tuple
    default: Any = NO_DEFAULT
    projection_options: Mapping = field(factory=dict)
    label: str | None = None
    is_root: bool = False


def at(
    projection: Any,
    validators: Any,
    *,
    default: Any = NO_DEFAULT,
    projection_options: Mapping | None = None,
    label: str | None = None,
) -> Rule:
    """
    Declare validators for a projected part of the structure.

    Params:
        projection: Field name, path, optic, (Prism, default), function,
            projection object or class
        validators: A validator spec or a list of them
        default: Focus to use when the projection is absent (Prisms and field names only)
        projection_options: Options passed to a projection object's `project`
        label: Name for logs and error context

    Returns:
        Rule to pass to `validation(...)`
    """
    return Rule(
        projection,
        _as_validator_specs(validators),
        default=default,
        projection_options=dict(projection_options or {}),
        label=label,
    )


def root(validators: Any, *, label: str | None = None) -> Rule:
    """Declare validators for the whole structure."""
    return Rule(None, _as_validator_specs(validators), label=label, is_root=True)
