"""
Validators built from other validators or predicates.

- `Each`: runs validators on every element of a list, collecting all errors
- `Any`: passes when at least one alternative passes
- `Not`: passes when the wrapped validator fails
- `LiftPredicate`: turns a boolean predicate into a validator

Nested validators are given as validator specs, exactly like the validators
of a rule: a validator or a `(validator, options)` pair.
"""

import typing as t

from pydantic import field_validator, model_validator

from opticheck.core import either
from opticheck.core.either import Either, Left, Right
from opticheck.core.maybe import ABSENT
from opticheck.core.types import Environment
from opticheck.exceptions.core import ConfigurationError
from opticheck.validation.step import ValidatorRef
from opticheck.validators.base import Validator, ValidatorOptions


def _refs(specs: t.Any) -> tuple:
    if not isinstance(specs, list):
        specs = [specs]
    try:
        return tuple(ValidatorRef.from_spec(spec) for spec in specs)
    except ConfigurationError as e:
        raise ValueError(e.message) from e


class EachOptions(ValidatorOptions):
    validator: t.Any = None
    validators: t.Any = None

    @field_validator("validator", "validators")
    @classmethod
    def build_refs(cls, specs: t.Any) -> tuple | None:
        return None if specs is None else _refs(specs)

    @model_validator(mode="after")
    def exactly_one_source(self) -> "EachOptions":
        if self.validator is None and self.validators is None:
            raise ValueError("Each validator requires validator or validators option")
        if self.validator is not None and self.validators is not None:
            raise ValueError("Each validator accepts validator or validators, not both")
        return self

    def refs(self) -> tuple:
        return self.validator if self.validator is not None else self.validators


class Each(Validator):
    """
    Validates every element of a list with the same validators.

    Every element and every validator runs; errors are concatenated in
    element order. Succeeds with the original list.
    """

    Options = EachOptions

    @classmethod
    def check(cls, value: t.Any, options: EachOptions, env: Environment) -> Either:
        if not isinstance(value, (list, tuple)):
            return cls.fail(value, options, "must be a list")
        refs = options.refs()

        def validate_item(item):
            return either.traverse_a(refs, lambda ref: ref.run(item, env))

        result = either.traverse_a(value, validate_item)
        return Right(value) if isinstance(result, Right) else result


class AlternativesOptions(ValidatorOptions):
    validators: t.Any

    @field_validator("validators")
    @classmethod
    def build_refs(cls, validators: t.Any) -> tuple:
        return _refs(validators)


class Any(Validator):
    """Passes with the first alternative that passes; alternatives after it do not run."""

    Options = AlternativesOptions

    @classmethod
    def check(cls, value: t.Any, options: AlternativesOptions, env: Environment) -> Either:
        for ref in options.validators:
            result = ref.run(value, env)
            if isinstance(result, Right):
                return result
        return cls.fail(value, options, "value must satisfy at least one alternative")


class NotOptions(ValidatorOptions):
    validator: t.Any

    @field_validator("validator")
    @classmethod
    def build_ref(cls, validator: t.Any) -> ValidatorRef:
        (ref,) = _refs(validator)
        return ref


class Not(Validator):
    """Inverts a validator; an ABSENT result of the wrapped validator is preserved."""

    Options = NotOptions

    @classmethod
    def check(cls, value: t.Any, options: NotOptions, env: Environment) -> Either:
        result = options.validator.run(value, env)
        if isinstance(result, Right) and result.value is ABSENT:
            return result
        if isinstance(result, Left):
            return Right(value)
        return cls.fail(value, options, "must not satisfy condition")


class LiftPredicateOptions(ValidatorOptions):
    pred: t.Callable[[t.Any], bool]


class LiftPredicate(Validator):
    Options = LiftPredicateOptions

    @classmethod
    def check(cls, value: t.Any, options: LiftPredicateOptions, env: Environment) -> Either:
        return cls.ensure(value, bool(options.pred(value)), options, "invalid value")

