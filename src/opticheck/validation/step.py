"""
Compiled validation steps.

A Step is one rule after compilation: an optional resolved projection and
the validators to run on its focus. Steps and their validator references
are immutable and built once per compiled validation.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from attrs import field, frozen

from opticheck.core.callables import accepts, callable_name, positional_arity
from opticheck.core.either import Either
from opticheck.core.types import Environment
from opticheck.exceptions.core import InvalidValidatorError
from opticheck.projection.resolver import Projection
from opticheck.validation.normalizer import normalize_result

EMPTY_ENV: Environment = MappingProxyType({})


def _call_arity(target: Any) -> int:
    if positional_arity(target) is None:
        return 1
    for count in (3, 2, 1):
        if accepts(target, count):
            return count
    raise InvalidValidatorError(
        f"Validator {callable_name(target)} must accept (value), (value, options) "
        "or (value, options, env)"
    )


def _entry_point(validator: Any) -> Any:
    """The callable invoked for a validator: its `validate` attribute, or itself."""
    validate = getattr(validator, "validate", None)
    if callable(validate):
        return validate
    if callable(validator):
        return validator
    raise InvalidValidatorError(
        f"Validator must be callable or expose a validate() method, got {validator!r}"
    )


@frozen
class ValidatorRef:
    """
    A validator together with its per-step options.

    Params:
        validator: Validator class or instance, nested validation, or callable
        options: Options passed on every invocation
        arity: Number of positional arguments the entry point is called with
    """

    validator: Any
    options: Mapping = field(factory=dict)
    arity: int = 3

    @classmethod
    def from_spec(cls, spec: Any) -> "ValidatorRef":
        """
        Build a reference from `validator` or `(validator, options)`.

        Raises:
            InvalidValidatorError: For literals, malformed pairs or callables
                with an unsupported signature
        """
        if isinstance(spec, tuple):
            if len(spec) != 2 or not isinstance(spec[1], Mapping):
                raise InvalidValidatorError(
                    f"Expected (validator, options) with a mapping of options, got {spec!r}"
                )
            validator, options = spec
        else:
            validator, options = spec, {}

        if isinstance(validator, (list, tuple)):
            raise InvalidValidatorError(f"Validators cannot be nested in lists, got {validator!r}")

        target = _entry_point(validator)
        return cls(validator, MappingProxyType(dict(options)), _call_arity(target))

    @property
    def name(self) -> str:
        validator = self.validator
        if isinstance(validator, type):
            return validator.__name__
        if callable(getattr(validator, "validate", None)):
            return type(validator).__name__
        return callable_name(validator)

    def call(self, value: Any, env: Environment = EMPTY_ENV) -> Any:
        """Invoke the validator with as many arguments as it accepts."""
        target = _entry_point(self.validator)
        if self.arity == 3:
            return target(value, self.options, env)
        if self.arity == 2:
            return target(value, self.options)
        return target(value)

    def run(self, value: Any, env: Environment = EMPTY_ENV) -> Either:
        return normalize_result(self.call(value, env), value, self.name)


@frozen
class Step:
    """
    One compiled rule.

    Params:
        index: Declaration position, used to order merged errors
        projection: Resolved projection, or None to validate the whole structure
        validators: Validators to run on the focus, in order
        label: Optional name used in logs and error context
    """

    index: int
    projection: Projection | None
    validators: tuple = field(converter=tuple)
    label: str | None = None

    def describe(self) -> str:
        if self.label:
            return self.label
        if self.projection is None:
            return "root"
        return self.projection.describe()
