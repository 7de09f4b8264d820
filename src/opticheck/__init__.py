"""
opticheck - composable optics and accumulating validation for nested data

Lenses, prisms and traversals focus on parts of immutable structures; the
validation engine uses them as projections and reports every failure at once.
"""

import logging
from importlib.metadata import version

from opticheck.comparison import DEFAULT_EQ, DEFAULT_ORD, Eq, Ord
from opticheck.core import ABSENT, Left, Present, Right
from opticheck.exceptions import ValidationError
from opticheck.optics import Iso, Lens, Prism, Traversal, compose
from opticheck.validation import at, root, validation

__version__ = version("opticheck")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Lens",
    "Prism",
    "Iso",
    "Traversal",
    "compose",
    "Present",
    "ABSENT",
    "Right",
    "Left",
    "Eq",
    "Ord",
    "DEFAULT_EQ",
    "DEFAULT_ORD",
    "ValidationError",
    "at",
    "root",
    "validation",
]
