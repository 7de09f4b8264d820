"""
Total optics.

A Lens focuses on a part of a structure that is always there. Reading a
field the structure does not have is a programming mistake, so `view`
raises StructuralError instead of returning an optional value.

Lens laws, for every structure `s` and value `a`:

- `view(set(s, a)) == a`
- `set(s, view(s)) == s`
- `set(set(s, a1), a2) == set(s, a2)`
"""

from typing import Any, Callable, Iterable

from attrs import field, frozen

from opticheck.core.structures import build_path, get_field, set_field
from opticheck.core.types import Key
from opticheck.exceptions.core import UnsupportedOperationError


@frozen
class Lens:
    """
    Total bidirectional accessor.

    Params:
        getter: Reads the focus from a structure
        setter: Returns a copy of a structure with the focus replaced
        builder: Optional constructor of a minimal structure around a focus,
            used when the lens is turned into a Prism
        label: Description used in reprs and error messages
    """

    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], Any]
    builder: Callable[[Any], Any] | None = field(default=None, kw_only=True)
    label: str = field(default="Lens", kw_only=True, eq=False)

    kind = "lens"

    def view(self, structure: Any) -> Any:
        return self.getter(structure)

    def set(self, structure: Any, value: Any) -> Any:
        return self.setter(structure, value)

    def over(self, structure: Any, f: Callable[[Any], Any]) -> Any:
        return self.setter(structure, f(self.getter(structure)))

    def review(self, value: Any) -> Any:
        if self.builder is None:
            raise UnsupportedOperationError(self.label, "review")
        return self.builder(value)

    def compose(self, *inner) -> Any:
        from opticheck.optics.compose import compose

        return compose(self, *inner)

    def as_prism(self):
        from opticheck.optics.prism import Prism

        return Prism.from_lens(self)

    def __repr__(self) -> str:
        return self.label

    @classmethod
    def make(
        cls,
        getter: Callable[[Any], Any],
        setter: Callable[[Any, Any], Any],
        builder: Callable[[Any], Any] | None = None,
        label: str = "Lens.make",
    ) -> "Lens":
        return cls(getter, setter, builder=builder, label=label)

    @classmethod
    def identity(cls) -> "Lens":
        return cls(lambda s: s, lambda _s, a: a, builder=lambda a: a, label="Lens.identity")

    @classmethod
    def key(cls, key: Key) -> "Lens":
        """
        Lens onto one field, mapping key or sequence index.

        `view` raises StructuralError when the field is missing. `set` adds
        missing keys to mappings and rejects undeclared fields on records.
        """
        return cls(
            lambda s: get_field(s, key),
            lambda s, a: set_field(s, key, a),
            builder=lambda a: {key: a},
            label=f"Lens.key({key!r})",
        )

    @classmethod
    def path(cls, keys: Iterable[Key]) -> "Lens":
        """
        Lens onto a nested field, equivalent to composing `Lens.key` per key.

        Raises StructuralError at the first missing link.
        """
        keys = list(keys)
        if not keys:
            return cls.identity()

        def getter(structure):
            for key in keys:
                structure = get_field(structure, key)
            return structure

        def setter(structure, value):
            return _set_path(structure, keys, value)

        return cls(
            getter,
            setter,
            builder=lambda a: build_path(keys, a),
            label=f"Lens.path({keys!r})",
        )


def _set_path(structure: Any, keys: list, value: Any) -> Any:
    key, rest = keys[0], keys[1:]
    if not rest:
        return set_field(structure, key, value)
    return set_field(structure, key, _set_path(get_field(structure, key), rest, value))
