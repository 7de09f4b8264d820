"""
Core type definitions for opticheck.

This module contains fundamental type aliases shared by the optics and
validation layers.
"""

from collections.abc import Mapping
from typing import Any, Callable

Key = str | int

Options = Mapping[str, Any]

Environment = Mapping[str, Any]

# A raw validator result before normalization: Right, Left, "ok" or a tagged tuple
RawResult = Any

Predicate = Callable[[Any], bool]
