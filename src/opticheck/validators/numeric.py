"""
Numeric and ordering validators.

Integer, Positive, Negative, Range and GreaterThan check numbers; bools are
not numbers here. GreaterThanOrEqual, LessThan and LessThanOrEqual compare
any values through an `Ord` bundle (option `ord`, default `DEFAULT_ORD`).
"""

from numbers import Number
from typing import Any

from pydantic import model_validator

from opticheck.comparison.ord import DEFAULT_ORD, Ord
from opticheck.core.either import Either
from opticheck.core.types import Environment
from opticheck.validators.base import Validator, ValidatorOptions

NOT_A_NUMBER = "must be a number"


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class NumberValidator(Validator):
    @classmethod
    def check(cls, value: Any, options: ValidatorOptions, env: Environment) -> Either:
        if not is_number(value):
            return cls.fail(value, options, NOT_A_NUMBER)
        return cls.check_number(value, options)

    @classmethod
    def check_number(cls, value: Number, options: ValidatorOptions) -> Either:
        raise NotImplementedError


class Integer(Validator):
    @classmethod
    def check(cls, value: Any, options: ValidatorOptions, env: Environment) -> Either:
        ok = isinstance(value, int) and not isinstance(value, bool)
        return cls.ensure(value, ok, options, "must be an integer")


class Positive(NumberValidator):
    @classmethod
    def check_number(cls, value: Number, options: ValidatorOptions) -> Either:
        return cls.ensure(value, value > 0, options, "must be positive")


class Negative(NumberValidator):
    @classmethod
    def check_number(cls, value: Number, options: ValidatorOptions) -> Either:
        return cls.ensure(value, value < 0, options, "must be negative")


class RangeOptions(ValidatorOptions):
    min: int | float | None = None
    max: int | float | None = None

    @model_validator(mode="after")
    def require_a_bound(self) -> "RangeOptions":
        if self.min is None and self.max is None:
            raise ValueError("Range validator requires at least min or max option")
        return self


class Range(NumberValidator):
    """Inclusive bounds; either bound may be omitted, but not both."""

    Options = RangeOptions

    @classmethod
    def check_number(cls, value: Number, options: RangeOptions) -> Either:
        low, high = options.min, options.max
        if low is not None and high is not None:
            return cls.ensure(value, low <= value <= high, options, f"must be between {low} and {high}")
        if low is not None:
            return cls.ensure(value, value >= low, options, f"must be at least {low}")
        return cls.ensure(value, value <= high, options, f"must be at most {high}")


class ThresholdOptions(ValidatorOptions):
    value: int | float


class GreaterThan(NumberValidator):
    Options = ThresholdOptions

    @classmethod
    def check_number(cls, value: Number, options: ThresholdOptions) -> Either:
        return cls.ensure(value, value > options.value, options, f"must be greater than {options.value}")


class ReferenceOptions(ValidatorOptions):
    value: Any
    ord: Ord = DEFAULT_ORD


class GreaterThanOrEqual(Validator):
    Options = ReferenceOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceOptions, env: Environment) -> Either:
        ok = options.ord.ge(value, options.value)
        return cls.ensure(value, ok, options, f"must be greater than or equal to {options.value!r}")


class LessThan(Validator):
    Options = ReferenceOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceOptions, env: Environment) -> Either:
        ok = options.ord.lt(value, options.value)
        return cls.ensure(value, ok, options, f"must be less than {options.value!r}")


class LessThanOrEqual(Validator):
    Options = ReferenceOptions

    @classmethod
    def check(cls, value: Any, options: ReferenceOptions, env: Environment) -> Either:
        ok = options.ord.le(value, options.value)
        return cls.ensure(value, ok, options, f"must be less than or equal to {options.value!r}")
