"""
Composable accessors for nested immutable data.

- `Lens`: total, raises StructuralError when its field is missing
- `Prism`: partial, returns ABSENT when its branch is not populated
- `Iso`: lossless conversion usable as either
- `Traversal`: fixed list of Lens/Prism foci
- `compose`: associative composition following the weakest-link rule
"""

from opticheck.optics.compose import compose
from opticheck.optics.iso import Iso
from opticheck.optics.lens import Lens
from opticheck.optics.prism import Prism
from opticheck.optics.traversal import Traversal

__all__ = [
    "Lens",
    "Prism",
    "Iso",
    "Traversal",
    "compose",
]
