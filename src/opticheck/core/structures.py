"""
Uniform field access over the structures optics focus on.

Optics read and update fields without knowing the concrete container. This
module maps a field key onto each supported structure kind:

- mappings (dict and any `collections.abc.Mapping`)
- pydantic models (`model_fields`, `model_copy`)
- attrs classes (`attrs.fields_dict`, `attrs.evolve`)
- dataclasses (`dataclasses.fields`, `dataclasses.replace`)
- named tuples (`_fields`, `_replace`)
- lists and plain tuples, addressed by integer index
- plain objects, addressed by attribute name

Updates never mutate their input; they return a modified copy.
"""

import copy
import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import Any

import attrs
from pydantic import BaseModel

from opticheck.core.maybe import ABSENT, Maybe, Present
from opticheck.core.types import Key
from opticheck.exceptions.core import StructuralError

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


class StructureKind:
    """Names of the structure kinds recognized by `structure_kind`."""

    MAPPING = "mapping"
    PYDANTIC = "pydantic"
    ATTRS = "attrs"
    DATACLASS = "dataclass"
    NAMEDTUPLE = "namedtuple"
    SEQUENCE = "sequence"
    OBJECT = "object"


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def structure_kind(value: Any) -> str | None:
    """
    Classify a value as one of the supported structure kinds.

    Returns:
        A StructureKind name, or None for scalars, classes and callables
    """
    if isinstance(value, _SCALARS) or isinstance(value, type):
        return None
    if isinstance(value, Mapping):
        return StructureKind.MAPPING
    if isinstance(value, BaseModel):
        return StructureKind.PYDANTIC
    if attrs.has(type(value)):
        return StructureKind.ATTRS
    if dataclasses.is_dataclass(value):
        return StructureKind.DATACLASS
    if _is_namedtuple(value):
        return StructureKind.NAMEDTUPLE
    if isinstance(value, (list, tuple)):
        return StructureKind.SEQUENCE
    if callable(value):
        return None
    if hasattr(value, "__dict__") or hasattr(type(value), "__slots__"):
        return StructureKind.OBJECT
    return None


def is_structure(value: Any) -> bool:
    return structure_kind(value) is not None


def _field_names(value: Any, kind: str) -> set | None:
    if kind == StructureKind.PYDANTIC:
        names = set(type(value).model_fields)
        if value.model_extra:
            names.update(value.model_extra)
        return names
    if kind == StructureKind.ATTRS:
        return set(attrs.fields_dict(type(value)))
    if kind == StructureKind.DATACLASS:
        return {f.name for f in dataclasses.fields(value)}
    if kind == StructureKind.NAMEDTUPLE:
        return set(value._fields)
    return None


def _read(value: Any, key: Key, kind: str) -> tuple[bool, Any]:
    """Return (found, field value) for a key on a structure of a known kind."""
    if kind == StructureKind.MAPPING:
        if key in value:
            return True, value[key]
        return False, None

    if kind == StructureKind.SEQUENCE:
        if isinstance(key, int) and not isinstance(key, bool) and -len(value) <= key < len(value):
            return True, value[key]
        return False, None

    if not isinstance(key, str):
        return False, None

    names = _field_names(value, kind)
    if names is not None and key not in names:
        return False, None

    try:
        return True, getattr(value, key)
    except AttributeError:
        return False, None


def get_field(structure: Any, key: Key) -> Any:
    """
    Read a field, raising when it does not exist.

    Params:
        structure: Any supported structure
        key: Field name, mapping key or sequence index

    Returns:
        The field value (which may be None)

    Raises:
        StructuralError: If the structure lacks the field or is not a structure
    """
    kind = structure_kind(structure)
    if kind is None:
        raise StructuralError(key, type(structure).__name__, "cannot be read from a non-structure value")
    found, value = _read(structure, key, kind)
    if not found:
        raise StructuralError(key, type(structure).__name__)
    return value


def lookup_field(structure: Any, key: Key) -> Maybe:
    """
    Read a field as an optional value.

    Returns:
        Present(value) when the field exists and is not None, otherwise ABSENT
        (including when `structure` is not a structure at all)
    """
    kind = structure_kind(structure)
    if kind is None:
        return ABSENT
    found, value = _read(structure, key, kind)
    if not found or value is None:
        return ABSENT
    return Present(value)


def has_field(structure: Any, key: Key) -> bool:
    kind = structure_kind(structure)
    return kind is not None and _read(structure, key, kind)[0]


def set_field(structure: Any, key: Key, value: Any) -> Any:
    """
    Return a copy of `structure` with one field replaced.

    Mappings and plain objects accept new keys; fixed-shape records
    (pydantic, attrs, dataclasses, named tuples) only accept declared fields.

    Raises:
        StructuralError: If the field cannot exist on the structure
    """
    kind = structure_kind(structure)
    type_name = type(structure).__name__

    if kind is None:
        raise StructuralError(key, type_name, "cannot be set on a non-structure value")

    if kind == StructureKind.MAPPING:
        if isinstance(structure, MutableMapping):
            updated = copy.copy(structure)
            updated[key] = value
            return updated
        return {**structure, key: value}

    if kind == StructureKind.SEQUENCE:
        if not isinstance(key, int) or isinstance(key, bool) or not -len(structure) <= key < len(structure):
            raise StructuralError(key, type_name, "is out of range")
        items = list(structure)
        items[key] = value
        return items if isinstance(structure, list) else type(structure)(items)

    names = _field_names(structure, kind)
    if names is not None and key not in names:
        raise StructuralError(key, type_name, "is not a declared field")

    if kind == StructureKind.PYDANTIC:
        return structure.model_copy(update={key: value})
    if kind == StructureKind.ATTRS:
        return attrs.evolve(structure, **{key: value})
    if kind == StructureKind.DATACLASS:
        return dataclasses.replace(structure, **{key: value})
    if kind == StructureKind.NAMEDTUPLE:
        return structure._replace(**{key: value})

    if not isinstance(key, str):
        raise StructuralError(key, type_name, "is not an attribute name")
    updated = copy.copy(structure)
    setattr(updated, key, value)
    return updated


def build_path(keys: list, value: Any) -> Any:
    """Build nested dicts holding `value` at `keys` (`value` itself for no keys)."""
    for key in reversed(keys):
        value = {key: value}
    return value

