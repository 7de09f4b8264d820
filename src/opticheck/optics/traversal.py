"""
Multi-focus optics.

A Traversal combines a fixed, ordered list of Lenses and Prisms over the same
structure. It is not an iteration construct: the foci are known when the
traversal is built.

Presence follows each focus kind. Lens foci always contribute a value and
raise StructuralError on violation; Prism foci contribute a value only when
they match. `to_list_maybe` is all-or-nothing: it is present only when every
focus is present, and an empty traversal is always absent.
"""

from typing import Any, Callable, Iterable

from attrs import field, frozen

from opticheck.core.maybe import ABSENT, Maybe, Present
from opticheck.optics.iso import Iso
from opticheck.optics.lens import Lens
from opticheck.optics.prism import Prism


def _as_focus(optic: Any) -> Lens | Prism:
    if isinstance(optic, tuple) and len(optic) == 2 and isinstance(optic[0], Prism):
        return optic[0].with_default(optic[1])
    if isinstance(optic, (Lens, Prism)):
        return optic
    if isinstance(optic, Iso):
        return optic.as_lens()
    raise TypeError(f"Traversal foci must be Lens, Prism, Iso or (Prism, default), got {optic!r}")


def read_focus(focus: Lens | Prism, structure: Any) -> Maybe:
    """Read one focus as a Maybe; Lens foci are always present."""
    if isinstance(focus, Lens):
        return Present(focus.view(structure))
    return focus.preview(structure)


@frozen
class Traversal:
    foci: tuple = field(converter=tuple)

    kind = "traversal"

    @classmethod
    def combine(cls, optics: Iterable[Any]) -> "Traversal":
        """
        Build a traversal from Lenses, Prisms, Isos and other traversals.

        Nested traversals contribute their foci in order.
        """
        foci = []
        for optic in optics:
            if isinstance(optic, Traversal):
                foci.extend(optic.foci)
            else:
                foci.append(_as_focus(optic))
        return cls(foci)

    @classmethod
    def empty(cls) -> "Traversal":
        return cls(())

    def concat(self, other: "Traversal") -> "Traversal":
        return Traversal(self.foci + other.foci)

    def to_list(self, structure: Any) -> list:
        """Values of all Lens foci and of every matching Prism focus, in order."""
        values = []
        for focus in self.foci:
            result = read_focus(focus, structure)
            if isinstance(result, Present):
                values.append(result.value)
        return values

    def to_list_maybe(self, structure: Any) -> Maybe:
        """Present(values) only when every focus is present."""
        if not self.foci:
            return ABSENT
        values = []
        for focus in self.foci:
            result = read_focus(focus, structure)
            if not isinstance(result, Present):
                return ABSENT
            values.append(result.value)
        return Present(values)

    def preview(self, structure: Any) -> Maybe:
        """The first present focus, in declaration order."""
        for focus in self.foci:
            result = read_focus(focus, structure)
            if isinstance(result, Present):
                return result
        return ABSENT

    def has(self, structure: Any) -> bool:
        return isinstance(self.preview(structure), Present)

    def over(self, structure: Any, f: Callable[[Any], Any]) -> Any:
        """Apply `f` to every focus in order; absent Prism foci are left alone."""
        for focus in self.foci:
            structure = focus.over(structure, f)
        return structure

    def compose(self, *inner) -> Any:
        from opticheck.optics.compose import compose

        return compose(self, *inner)

    def __len__(self) -> int:
        return len(self.foci)

    def __repr__(self) -> str:
        return f"Traversal.combine({list(self.foci)!r})"
