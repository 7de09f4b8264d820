"""
Equality-based validators.

Equal, NotEqual, In, NotIn, Contains and AllEqual compare through an `Eq`
bundle (option `eq`, default `DEFAULT_EQ`). Confirmation compares a value
with another field of the data being validated.
"""

from typing import Any

from opticheck.comparison.eq import DEFAULT_EQ, Eq
from opticheck.core.either import Either
from opticheck.core.maybe import Present
from opticheck.core.structures import lookup_field
from opticheck.core.types import Environment, Key
from opticheck.exceptions.core import ValidatorConfigurationError
from opticheck.validators.base import Validator, ValidatorOptions


class EqOptions(ValidatorOptions):
    eq: Eq = DEFAULT_EQ


class ReferenceEqOptions(EqOptions):
    value: Any


class Equal(Validator):
    Options = ReferenceEqOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceEqOptions, env: Environment) -> Either:
        return cls.ensure(value, options.eq.eq(value, options.value), options, f"must equal {options.value!r}")


class NotEqual(Validator):
    Options = ReferenceEqOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceEqOptions, env: Environment) -> Either:
        ok = options.eq.not_eq(value, options.value)
        return cls.ensure(value, ok, options, f"must not be equal to {options.value!r}")


class ValuesOptions(EqOptions):
    values: list | tuple | set | frozenset


def _member(value: Any, options: ValuesOptions) -> bool:
    values = list(options.values)
    # A list of classes checks the value's type
    if values and all(isinstance(v, type) for v in values):
        return isinstance(value, tuple(values))
    return any(options.eq.eq(value, candidate) for candidate in values)


def _render(values) -> str:
    return ", ".join(repr(v) for v in values)


class In(Validator):
    Options = ValuesOptions

    @classmethod
    def check(cls, value: Any, options: ValuesOptions, env: Environment) -> Either:
        return cls.ensure(value, _member(value, options), options, f"must be one of: {_render(options.values)}")


class NotIn(Validator):
    Options = ValuesOptions

    @classmethod
    def check(cls, value: Any, options: ValuesOptions, env: Environment) -> Either:
        ok = not _member(value, options)
        return cls.ensure(value, ok, options, f"must not be one of: {_render(options.values)}")


class Contains(Validator):
    """Passes when a collection holds `value` (substring check for strings)."""

    Options = ReferenceEqOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceEqOptions, env: Environment) -> Either:
        element = options.value
        if isinstance(value, str):
            ok = isinstance(element, str) and element in value
        elif isinstance(value, (list, tuple, set, frozenset)):
            ok = any(options.eq.eq(item, element) for item in value)
        else:
            ok = False
        return cls.ensure(value, ok, options, f"must contain {element!r}")


class AllEqual(Validator):
    """Passes when a non-empty list holds a single distinct value."""

    Options = EqOptions

    @classmethod
    def check(cls, value: Any, options: EqOptions, env: Environment) -> Either:
        if not isinstance(value, (list, tuple)):
            return cls.fail(value, options, "must be a list")
        ok = len(value) > 0 and all(options.eq.eq(value[0], item) for item in value[1:])
        return cls.ensure(value, ok, options, "must be all matching")


class ConfirmationOptions(ValidatorOptions):
    field: Key
    data: Any = None


class Confirmation(Validator):
    """
    Passes when the value equals `data[field]`.

    `data` defaults to `env["data"]` so a step can confirm against the
    structure the caller passes in the environment.
    """

    Options = ConfirmationOptions

    @classmethod
    def check(cls, value: Any, options: ConfirmationOptions, env: Environment) -> Either:
        data = options.data if options.data is not None else env.get("data")
        if data is None:
            raise ValidatorConfigurationError(cls.__name__, "requires a data option or env['data']")
        original = lookup_field(data, options.field)
        ok = isinstance(original, Present) and original.value == value
        return cls.ensure(value, ok, options, f"does not match {options.field}")
