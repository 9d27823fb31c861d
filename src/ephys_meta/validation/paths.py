"""Field-reference grammar for validation issues.

Converts slash-separated structural locations into the locator grammar used
in every ``Issue.path``:

- ``name`` for scalars and objects
- ``name.child`` for nested fields
- ``name[index]`` for array elements
- ``name[index].child`` recursively

Example:
    >>> normalize_path("/cameras/0/id")
    'cameras[0].id'
    >>> normalize_path("/subject/weight")
    'subject.weight'
    >>> normalize_path("/a//b/")
    'a.b'
"""

import re
from typing import Any, Sequence

__all__ = ["normalize_path", "loc_to_pointer", "top_level_field"]

_INDEX = re.compile(r"[0-9]+")

# Synthetic location segments pydantic appends (e.g. dict key errors)
_PYDANTIC_MARKERS = {"[key]"}


def normalize_path(path: Any) -> str:
    """Convert a slash-separated location to a field locator.

    Empty segments are dropped, so leading, trailing and doubled slashes are
    harmless. Purely numeric segments become ``[N]`` attached to the
    preceding segment. Empty, root or non-string input yields ``""``.
    """
    if not isinstance(path, str):
        return ""

    locator = ""
    for segment in (part for part in path.split("/") if part):
        if _INDEX.fullmatch(segment):
            locator += f"[{segment}]"
        elif locator:
            locator += f".{segment}"
        else:
            locator = segment
    return locator


def loc_to_pointer(loc: Sequence[Any]) -> str:
    """Convert a pydantic error location tuple to a slash path.

    Example:
        >>> loc_to_pointer(("cameras", 0, "id"))
        '/cameras/0/id'
    """
    return "".join(f"/{part}" for part in loc if str(part) not in _PYDANTIC_MARKERS)


def top_level_field(locator: str) -> str:
    """Return the first field name of a locator (``cameras[0].id`` -> ``cameras``)."""
    return locator.split("[", 1)[0].split(".", 1)[0]
