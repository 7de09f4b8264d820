"""
Partial optics.

A Prism focuses on a part of a structure that may not be there. `preview`
returns `Present(value)` when the branch is populated and `ABSENT` when it is
not (missing key, `None` value, or input that is not a structure at all).
Prisms never raise for absence; composition short-circuits on the first
absent link.

Round-trip law: `preview(review(a)) == Present(a)`.
"""

from typing import Any, Callable, Iterable

from attrs import field, frozen

from opticheck.core.maybe import ABSENT, Maybe, Present
from opticheck.core.structures import build_path, is_structure, lookup_field, set_field
from opticheck.core.types import Key


@frozen
class Prism:
    """
    Partial bidirectional accessor.

    Params:
        matcher: Returns Present(focus) or ABSENT for a structure
        builder: Builds a structure from a focus value
        updater: Optional in-place style update `(structure, value) -> structure`;
            when omitted, `set` replaces a matching structure with `review(value)`
        label: Description used in reprs and error messages
        defaulted: True when the Prism already falls back to a default and is
            never absent
    """

    matcher: Callable[[Any], Maybe]
    builder: Callable[[Any], Any]
    updater: Callable[[Any, Any], Any] | None = field(default=None, kw_only=True)
    label: str = field(default="Prism", kw_only=True, eq=False)
    defaulted: bool = field(default=False, kw_only=True)

    kind = "prism"

    def preview(self, structure: Any) -> Maybe:
        return self.matcher(structure)

    def review(self, value: Any) -> Any:
        return self.builder(value)

    def set(self, structure: Any, value: Any) -> Any:
        if self.updater is not None:
            return self.updater(structure, value)
        if isinstance(self.matcher(structure), Present):
            return self.builder(value)
        return structure

    def over(self, structure: Any, f: Callable[[Any], Any]) -> Any:
        """Apply `f` to the focus when present; return the structure unchanged otherwise."""
        focus = self.matcher(structure)
        if isinstance(focus, Present):
            return self.set(structure, f(focus.value))
        return structure

    def has(self, structure: Any) -> bool:
        return isinstance(self.matcher(structure), Present)

    def with_default(self, default: Any) -> "Prism":
        """A Prism that matches `default` wherever this one is absent."""

        def matcher(structure):
            focus = self.matcher(structure)
            return focus if isinstance(focus, Present) else Present(default)

        return Prism(
            matcher,
            self.builder,
            updater=self.updater,
            label=f"({self.label}, {default!r})",
            defaulted=True,
        )

    def compose(self, *inner) -> Any:
        from opticheck.optics.compose import compose

        return compose(self, *inner)

    def __repr__(self) -> str:
        return self.label

    @classmethod
    def make(
        cls,
        matcher: Callable[[Any], Maybe],
        builder: Callable[[Any], Any],
        updater: Callable[[Any, Any], Any] | None = None,
        label: str = "Prism.make",
    ) -> "Prism":
        return cls(matcher, builder, updater=updater, label=label)

    @classmethod
    def from_lens(cls, lens) -> "Prism":
        """View a Lens as a Prism that always matches (and still raises on violation)."""
        return cls(
            lambda s: Present(lens.view(s)),
            lens.review,
            updater=lens.set,
            label=lens.label,
        )

    @classmethod
    def key(cls, key: Key) -> "Prism":
        """
        Prism onto one field.

        Absent when the field is missing, is `None`, or the input is not a
        structure. `review(a)` builds `{key: a}`.
        """

        def updater(structure, value):
            return set_field(structure, key, value) if is_structure(structure) else structure

        return cls(
            lambda s: lookup_field(s, key),
            lambda a: {key: a},
            updater=updater,
            label=f"Prism.key({key!r})",
        )

    @classmethod
    def path(cls, keys: Iterable[Key]) -> "Prism":
        """
        Prism onto a nested field.

        Absent at the first missing link or `None` along the way. `review`
        builds the nested dicts; `set` creates missing levels. An empty path
        never matches.
        """
        keys = list(keys)
        label = f"Prism.path({keys!r})"
        if not keys:
            return cls(lambda s: ABSENT, lambda a: a, label=label)

        prism = cls.key(keys[0])
        for key in keys[1:]:
            prism = prism.compose(cls.key(key))
        return cls(
            prism.matcher,
            lambda a: build_path(keys, a),
            updater=prism.updater,
            label=label,
        )

    @classmethod
    def filter(cls, predicate: Callable[[Any], bool]) -> "Prism":
        """Matches the whole value when `predicate` holds."""
        return cls(
            lambda s: Present(s) if predicate(s) else ABSENT,
            lambda a: a,
            label="Prism.filter",
        )

    @classmethod
    def some(cls) -> "Prism":
        """Matches the first element of a non-empty list or tuple."""

        def matcher(s):
            if isinstance(s, (list, tuple)) and s and s[0] is not None:
                return Present(s[0])
            return ABSENT

        return cls(matcher, lambda a: [a], label="Prism.some")

    @classmethod
    def none(cls) -> "Prism":
        """Never matches."""
        return cls(lambda s: ABSENT, lambda a: a, label="Prism.none")

    @classmethod
    def instance_of(cls, type_: type) -> "Prism":
        """Matches values that are instances of `type_`."""
        return cls(
            lambda s: Present(s) if isinstance(s, type_) else ABSENT,
            lambda a: a,
            label=f"Prism.instance_of({type_.__name__})",
        )
