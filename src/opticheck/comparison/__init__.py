"""
Equality and ordering bundles that compare structures through projections.
"""

from opticheck.comparison.eq import DEFAULT_EQ, Eq, eq_by
from opticheck.comparison.ord import DEFAULT_ORD, Ord

__all__ = [
    "Eq",
    "Ord",
    "DEFAULT_EQ",
    "DEFAULT_ORD",
    "eq_by",
]
