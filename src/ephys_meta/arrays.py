"""Generic add/remove/duplicate over ordered document collections.

All operations are copy-on-write: inputs are never mutated and a new list
(or document) is returned. Out-of-range indices are absorbed silently and
return the input unchanged; callers are expected to pass indices taken from
the same collection.

Identifier handling is declared per collection in ``COLLECTIONS`` rather
than discovered by inspecting item keys. When a collection declares an
identifier field, new and duplicated items receive ``max(existing) + 1``
(or 0 for an empty collection).

Example:
    >>> cameras = add_item([], {"id": 0, "camera_name": ""}, id_field="id")
    >>> cameras = add_item(cameras, {"id": 0, "camera_name": ""}, id_field="id")
    >>> [c["id"] for c in cameras]
    [0, 1]
    >>> [c["id"] for c in duplicate_item(cameras, 0, id_field="id")]
    [0, 2, 1]
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from .domain.defaults import ARRAY_TEMPLATES, array_template

__all__ = [
    "CollectionSpec",
    "COLLECTIONS",
    "next_id",
    "add_item",
    "remove_item",
    "duplicate_item",
    "add_array_item",
    "remove_array_item",
    "duplicate_array_item",
]

logger = logging.getLogger(__name__)


class CollectionSpec(BaseModel):
    """Declaration of one document collection.

    Attributes:
        key: Top-level document field holding the collection
        id_field: Name of the identifier field, or None if items have no id
    """

    model_config = {"frozen": True, "extra": "forbid"}

    key: str = Field(..., description="Top-level document field holding the collection")
    id_field: Optional[str] = Field(None, description="Identifier field auto-assigned on add/duplicate")

    def template(self) -> Dict[str, Any]:
        """Fresh item template for this collection."""
        return array_template(self.key)


_ID_COLLECTIONS = {"cameras", "electrode_groups"}

COLLECTIONS: Dict[str, CollectionSpec] = {
    key: CollectionSpec(key=key, id_field="id" if key in _ID_COLLECTIONS else None) for key in ARRAY_TEMPLATES
}


def _in_range(items: Sequence[Any], index: Any) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(items)


def next_id(items: Sequence[Any], id_field: str) -> int:
    """Return ``max(existing ids) + 1``, or 0 if no item carries an integer id."""
    ids = [
        item[id_field]
        for item in items
        if isinstance(item, dict) and isinstance(item.get(id_field), int) and not isinstance(item.get(id_field), bool)
    ]
    return max(ids) + 1 if ids else 0


def add_item(items: Sequence[Any], template: Dict[str, Any], id_field: Optional[str] = None) -> List[Any]:
    """Append a copy of ``template``, assigning the next id if ``id_field`` is set."""
    result = copy.deepcopy(list(items))
    item = copy.deepcopy(template)

    if id_field is not None:
        item[id_field] = next_id(result, id_field)

    result.append(item)
    return result


def remove_item(items: Sequence[Any], index: int) -> Sequence[Any]:
    """Remove the item at ``index``; out-of-range indices return ``items`` unchanged."""
    if not _in_range(items, index):
        logger.debug(f"Ignoring remove at out-of-range index {index!r} (size {len(items)})")
        return items

    result = copy.deepcopy(list(items))
    del result[index]
    return result


def duplicate_item(items: Sequence[Any], index: int, id_field: Optional[str] = None) -> Sequence[Any]:
    """Insert a deep copy of ``items[index]`` right after it.

    The clone receives ``max(existing ids) + 1`` when ``id_field`` is set.
    Out-of-range indices return ``items`` unchanged.
    """
    if not _in_range(items, index):
        logger.debug(f"Ignoring duplicate at out-of-range index {index!r} (size {len(items)})")
        return items

    result = copy.deepcopy(list(items))
    clone = copy.deepcopy(result[index])

    if id_field is not None and isinstance(clone, dict):
        clone[id_field] = next_id(result, id_field)

    result.insert(index + 1, clone)
    return result


# ============================================================================
# Document-level helpers
# ============================================================================


def _collection(document: Dict[str, Any], key: str) -> List[Any]:
    items = document.get(key)
    return items if isinstance(items, list) else []


def _spec(key: str) -> CollectionSpec:
    return COLLECTIONS.get(key) or CollectionSpec(key=key)


def add_array_item(document: Dict[str, Any], key: str, count: int = 1) -> Dict[str, Any]:
    """Append ``count`` template items to the collection ``key`` of a document."""
    spec = _spec(key)
    items = _collection(document, key)

    for _ in range(count):
        items = add_item(items, spec.template(), spec.id_field)

    result = copy.deepcopy(document)
    result[key] = items
    return result


def remove_array_item(document: Dict[str, Any], key: str, index: int) -> Dict[str, Any]:
    """Remove one item from the collection ``key`` of a document."""
    items = _collection(document, key)
    updated = remove_item(items, index)
    if updated is items:
        return document

    result = copy.deepcopy(document)
    result[key] = updated
    return result


def duplicate_array_item(document: Dict[str, Any], key: str, index: int) -> Dict[str, Any]:
    """Duplicate one item of the collection ``key`` of a document."""
    items = _collection(document, key)
    updated = duplicate_item(items, index, _spec(key).id_field)
    if updated is items:
        return document

    result = copy.deepcopy(document)
    result[key] = updated
    return result
