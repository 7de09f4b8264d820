"""
String validators: Email, MinLength, MaxLength and Pattern.

Non-string values fail with "must be a string".
"""

import re
from typing import Any

from pydantic import NonNegativeInt

from opticheck.core.either import Either
from opticheck.core.types import Environment
from opticheck.validators.base import Validator, ValidatorOptions

NOT_A_STRING = "must be a string"


class StringValidator(Validator):
    @classmethod
    def check(cls, value: Any, options: ValidatorOptions, env: Environment) -> Either:
        if not isinstance(value, str):
            return cls.fail(value, options, NOT_A_STRING)
        return cls.check_string(value, options)

    @classmethod
    def check_string(cls, value: str, options: ValidatorOptions) -> Either:
        raise NotImplementedError


class Email(StringValidator):
    """Loose email check: the value must contain "@"."""

    @classmethod
    def check_string(cls, value: str, options: ValidatorOptions) -> Either:
        return cls.ensure(value, "@" in value, options, "must be a valid email")


class MinLengthOptions(ValidatorOptions):
    min: NonNegativeInt


class MinLength(StringValidator):
    Options = MinLengthOptions

    @classmethod
    def check_string(cls, value: str, options: MinLengthOptions) -> Either:
        return cls.ensure(value, len(value) >= options.min, options, f"must be at least {options.min} characters")


class MaxLengthOptions(ValidatorOptions):
    max: NonNegativeInt


class MaxLength(StringValidator):
    Options = MaxLengthOptions

    @classmethod
    def check_string(cls, value: str, options: MaxLengthOptions) -> Either:
        return cls.ensure(value, len(value) <= options.max, options, f"must be at most {options.max} characters")


class PatternOptions(ValidatorOptions):
    regex: str | re.Pattern


class Pattern(StringValidator):
    """Passes when `regex` matches anywhere in the string (`re.search`)."""

    Options = PatternOptions

    @classmethod
    def check_string(cls, value: str, options: PatternOptions) -> Either:
        return cls.ensure(value, re.search(options.regex, value) is not None, options, "has invalid format")
