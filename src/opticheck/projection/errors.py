"""
Centralized configuration error messages.

Each message names the problem and what to use instead. These texts are
asserted on by tests; change them deliberately.
"""


def default_with_lens() -> str:
    return (
        "The `default` option is only valid with field names or Prism projections, not with Lens.\n"
        "A Lens focuses on a value that always exists (or raises).\n"
        "For an optional field use a Prism instead:\n"
        '  at(Prism.key("name"), ..., default="Unknown")\n'
        "or a bare field name, which resolves to a Prism:\n"
        '  at("name", ..., default="Unknown")'
    )


def default_with_traversal() -> str:
    return (
        "The `default` option is not supported with Traversal projections.\n"
        "A Traversal focuses on several values at once, so a single default is ambiguous.\n"
        "Put defaults on the individual foci instead:\n"
        '  Traversal.combine([(Prism.key("a"), 0), (Prism.key("b"), 0)])'
    )


def default_with_function() -> str:
    return (
        "The `default` option cannot be used with function projections.\n"
        "A function does not expose whether its result is absent.\n"
        "Use a Prism with a default instead:\n"
        '  at(Prism.key("score"), ..., default=0)'
    )


def default_with_projection_object() -> str:
    return (
        "The `default` option cannot be used with reusable projection objects.\n"
        "Handle missing values inside the object's `project(value, options)` method."
    )


def default_with_type() -> str:
    return (
        "The `default` option cannot be used with a type projection.\n"
        "A type projection is a total isinstance check and is never absent."
    )


def redundant_default() -> str:
    return (
        "This projection already carries a default from a (Prism, default) tuple\n"
        "or `Prism.with_default`; do not also pass `default`.\n"
        "Choose one:\n"
        '  at((Prism.key("score"), 0), ...)\n'
        '  at(Prism.key("score"), ..., default=0)'
    )


def invalid_projection(got) -> str:
    return (
        f"Invalid projection {got!r}.\n"
        "Expected one of:\n"
        '  - field name                 (e.g. "name")\n'
        '  - list of field names        (e.g. ["user", "name"])\n'
        '  - Lens                       (e.g. Lens.key("name"))\n'
        '  - Prism                      (e.g. Prism.key("score"))\n'
        '  - (Prism, default)           (e.g. (Prism.key("score"), 0))\n'
        '  - Traversal                  (e.g. Traversal.combine([...]))\n'
        "  - function of one argument   (e.g. len)\n"
        "  - object with project(value, options)\n"
        "  - class                      (isinstance check)"
    )


def traversal_ordering() -> str:
    return (
        "Ordering through a Traversal is not supported.\n"
        "A Traversal relates tuples of values; compose an Ord per focus with Ord.concat instead."
    )
