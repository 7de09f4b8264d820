"""
Projection resolution shared by validation rules and comparators.
"""

from opticheck.projection.resolver import (
    NO_DEFAULT,
    DefaultedProjection,
    FunctionProjection,
    LensProjection,
    PrismProjection,
    Projection,
    ReusableProjection,
    TraversalProjection,
    TypeProjection,
    project,
    resolve_projection,
)

__all__ = [
    "NO_DEFAULT",
    "Projection",
    "LensProjection",
    "PrismProjection",
    "DefaultedProjection",
    "TraversalProjection",
    "FunctionProjection",
    "TypeProjection",
    "ReusableProjection",
    "resolve_projection",
    "project",
]
