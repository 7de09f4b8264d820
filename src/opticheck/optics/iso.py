"""
Lossless optics.

An Iso converts between two representations of the same information
(e.g. cents and a Decimal amount). It can stand in for a Lens, since `view`
always succeeds, or a Prism, since it always matches.

Laws: `review(view(s)) == s` and `view(review(a)) == a`.
"""

from typing import Any, Callable

from attrs import field, frozen


@frozen
class Iso:
    viewer: Callable[[Any], Any]
    reviewer: Callable[[Any], Any]
    label: str = field(default="Iso", kw_only=True, eq=False)

    kind = "iso"

    def view(self, structure: Any) -> Any:
        return self.viewer(structure)

    def review(self, value: Any) -> Any:
        return self.reviewer(value)

    def set(self, structure: Any, value: Any) -> Any:
        # The focus carries the whole structure
        return self.reviewer(value)

    def over(self, structure: Any, f: Callable[[Any], Any]) -> Any:
        """Convert, apply `f` in the focused representation, convert back."""
        return self.reviewer(f(self.viewer(structure)))

    def under(self, value: Any, f: Callable[[Any], Any]) -> Any:
        """Apply `f` in the outer representation to a focused value."""
        return self.viewer(f(self.reviewer(value)))

    def reverse(self) -> "Iso":
        return Iso(self.reviewer, self.viewer, label=f"{self.label}.reverse")

    def compose(self, *inner) -> Any:
        from opticheck.optics.compose import compose

        return compose(self, *inner)

    def as_lens(self):
        from opticheck.optics.lens import Lens

        return Lens(self.viewer, lambda _s, a: self.reviewer(a), builder=self.reviewer, label=self.label)

    def as_prism(self):
        from opticheck.optics.prism import Prism

        return Prism.from_lens(self.as_lens())

    def __repr__(self) -> str:
        return self.label

    @classmethod
    def make(cls, viewer: Callable[[Any], Any], reviewer: Callable[[Any], Any], label: str = "Iso.make") -> "Iso":
        return cls(viewer, reviewer, label=label)

    @classmethod
    def identity(cls) -> "Iso":
        return cls(lambda s: s, lambda a: a, label="Iso.identity")
