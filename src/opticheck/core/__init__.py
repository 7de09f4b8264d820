"""
Core value types and structure access for opticheck.

This package provides the optional (`Present`/`ABSENT`) and result
(`Right`/`Left`) types plus the uniform field access every optic is built on.
"""

from opticheck.core.either import Either, Left, Right
from opticheck.core.maybe import ABSENT, Maybe, Present
from opticheck.core.structures import (
    get_field,
    has_field,
    is_structure,
    lookup_field,
    set_field,
)
from opticheck.core.types import Environment, Key, Options

__all__ = [
    "ABSENT",
    "Present",
    "Maybe",
    "Right",
    "Left",
    "Either",
    "get_field",
    "lookup_field",
    "has_field",
    "set_field",
    "is_structure",
    "Environment",
    "Key",
    "Options",
]
