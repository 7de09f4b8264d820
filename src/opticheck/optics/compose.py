"""
Kind-aware optic composition.

`compose(o1, o2, ...)` focuses through `o1` first, then `o2`, and so on.
Composition is associative and the result kind follows the weakest link:

| outer \\ inner | Iso       | Lens      | Prism     | Traversal |
| ------------- | --------- | --------- | --------- | --------- |
| Iso           | Iso       | Lens      | Prism     | Traversal |
| Lens          | Lens      | Lens      | Prism     | Traversal |
| Prism         | Prism     | Prism     | Prism     | Traversal |
| Traversal     | Traversal | Traversal | Traversal | Traversal |

Lens links keep raising StructuralError inside a Prism chain; Prism links
short-circuit to ABSENT.
"""

from functools import reduce
from typing import Any

from opticheck.core.maybe import Present
from opticheck.optics.iso import Iso
from opticheck.optics.lens import Lens
from opticheck.optics.prism import Prism
from opticheck.optics.traversal import Traversal

Optic = Iso | Lens | Prism | Traversal


def _check(optic: Any) -> Any:
    if not isinstance(optic, (Iso, Lens, Prism, Traversal)):
        raise TypeError(f"Cannot compose non-optic value {optic!r}")
    return optic


def _as_lens(optic: Iso | Lens) -> Lens:
    return optic.as_lens() if isinstance(optic, Iso) else optic


def _as_prism(optic: Iso | Lens | Prism) -> Prism:
    if isinstance(optic, Prism):
        return optic
    return Prism.from_lens(_as_lens(optic))


def _compose_isos(outer: Iso, inner: Iso) -> Iso:
    return Iso(
        lambda s: inner.view(outer.view(s)),
        lambda a: outer.review(inner.review(a)),
        label=f"{outer.label}.{inner.label}",
    )


def _compose_lenses(outer: Lens, inner: Lens) -> Lens:
    builder = None
    if outer.builder is not None and inner.builder is not None:

        def builder(a):
            return outer.builder(inner.builder(a))

    return Lens(
        lambda s: inner.view(outer.view(s)),
        lambda s, a: outer.set(s, inner.set(outer.view(s), a)),
        builder=builder,
        label=f"{outer.label}.{inner.label}",
    )


def _compose_prisms(outer: Prism, inner: Prism) -> Prism:
    def matcher(structure):
        focus = outer.preview(structure)
        if isinstance(focus, Present):
            return inner.preview(focus.value)
        return focus

    def updater(structure, value):
        focus = outer.preview(structure)
        if isinstance(focus, Present):
            return outer.set(structure, inner.set(focus.value, value))
        # Missing outer branch: build it from the inner focus
        return outer.set(structure, inner.review(value))

    return Prism(
        matcher,
        lambda a: outer.review(inner.review(a)),
        updater=updater,
        label=f"{outer.label}.{inner.label}",
    )


def compose_pair(outer: Any, inner: Any) -> Any:
    """Compose two optics following the weakest-link rule."""
    outer, inner = _check(outer), _check(inner)

    if isinstance(outer, Traversal) and isinstance(inner, Traversal):
        return Traversal([compose_pair(o, i) for o in outer.foci for i in inner.foci])
    if isinstance(outer, Traversal):
        return Traversal([compose_pair(focus, inner) for focus in outer.foci])
    if isinstance(inner, Traversal):
        return Traversal([compose_pair(outer, focus) for focus in inner.foci])

    if isinstance(outer, Iso) and isinstance(inner, Iso):
        return _compose_isos(outer, inner)
    if not isinstance(outer, Prism) and not isinstance(inner, Prism):
        return _compose_lenses(_as_lens(outer), _as_lens(inner))
    return _compose_prisms(_as_prism(outer), _as_prism(inner))


def compose(*optics: Any) -> Any:
    """
    Compose optics left to right (outermost first).

    Params:
        optics: Lens, Prism, Iso or Traversal values; a single list is also accepted

    Returns:
        The composed optic; the identity Lens when no optics are given
    """
    if len(optics) == 1 and isinstance(optics[0], (list, tuple)):
        optics = tuple(optics[0])
    if not optics:
        return Lens.identity()
    return reduce(compose_pair, optics)
