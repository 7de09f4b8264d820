"""
Built-in validators.

All validators pass ABSENT through unchanged except `Required`, which makes
every projected field optional unless it is explicitly required. Each
accepts a `message` option (a string, or a callable receiving the failing
value) that replaces its default message.
"""

from opticheck.validators.base import Validator, ValidatorOptions
from opticheck.validators.combinators import Any, Each, LiftPredicate, Not
from opticheck.validators.membership import (
    AllEqual,
    Confirmation,
    Contains,
    Equal,
    In,
    NotEqual,
    NotIn,
)
from opticheck.validators.numeric import (
    GreaterThan,
    GreaterThanOrEqual,
    Integer,
    LessThan,
    LessThanOrEqual,
    Negative,
    Positive,
    Range,
)
from opticheck.validators.required import Required
from opticheck.validators.string import Email, MaxLength, MinLength, Pattern

__all__ = [
    "Validator",
    "ValidatorOptions",
    "Required",
    "Email",
    "MinLength",
    "MaxLength",
    "Pattern",
    "Integer",
    "Positive",
    "Negative",
    "Range",
    "GreaterThan",
    "GreaterThanOrEqual",
    "LessThan",
    "LessThanOrEqual",
    "Equal",
    "NotEqual",
    "In",
    "NotIn",
    "Contains",
    "AllEqual",
    "Confirmation",
    "Each",
    "Any",
    "Not",
    "LiftPredicate",
]
