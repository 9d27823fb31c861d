"""Keep electrode groups and ntrode channel maps consistent.

ntrode ids are document-scoped: after every structural change to electrode
groups or channel maps, all maps are renumbered 1..N in array order. The
renumber runs inside the transform that caused the change, so callers never
observe a document with gaps or duplicate ntrode ids.

All functions are pure ``document -> document`` transforms.

Example:
    >>> doc = add_electrode_group(empty_document(), device_type="tetrode_12.5")
    >>> doc = on_device_type_changed(doc, 0, "32c-2s8mm6cm-20um-40um-dl")
    >>> [m["ntrode_id"] for m in doc["ntrode_electrode_group_channel_map"]]
    [1, 2]
"""

import copy
import logging
from typing import Any, Dict, List

from ..arrays import COLLECTIONS, add_item, duplicate_item, remove_item
from .channel_maps import generate_all_channel_maps, generate_channel_maps

__all__ = [
    "GROUPS_KEY",
    "CHANNEL_MAPS_KEY",
    "renumber_ntrodes",
    "add_electrode_group",
    "on_device_type_changed",
    "on_electrode_group_removed",
    "on_electrode_group_duplicated",
    "rebuild_channel_maps",
]

logger = logging.getLogger(__name__)

GROUPS_KEY = "electrode_groups"
CHANNEL_MAPS_KEY = "ntrode_electrode_group_channel_map"


def _list(document: Dict[str, Any], key: str) -> List[Any]:
    items = document.get(key)
    return items if isinstance(items, list) else []


def _belongs_to(channel_map: Any, group_id: Any) -> bool:
    if group_id is None:
        return False
    return isinstance(channel_map, dict) and channel_map.get("electrode_group_id") == group_id


def _renumber(channel_maps: List[Any]) -> None:
    for position, channel_map in enumerate(channel_maps, start=1):
        if isinstance(channel_map, dict):
            channel_map["ntrode_id"] = position


def renumber_ntrodes(document: Dict[str, Any]) -> Dict[str, Any]:
    """Assign ntrode ids 1..N to every channel map, in array order."""
    result = copy.deepcopy(document)
    channel_maps = _list(result, CHANNEL_MAPS_KEY)
    _renumber(channel_maps)
    result[CHANNEL_MAPS_KEY] = channel_maps
    return result


def add_electrode_group(document: Dict[str, Any], device_type: str = "") -> Dict[str, Any]:
    """Append a new electrode group and, if a device type is given, its channel maps."""
    spec = COLLECTIONS[GROUPS_KEY]
    groups = add_item(_list(document, GROUPS_KEY), spec.template(), spec.id_field)

    result = copy.deepcopy(document)
    result[GROUPS_KEY] = groups

    if device_type:
        return on_device_type_changed(result, groups[-1]["id"], device_type)
    return result


def on_device_type_changed(document: Dict[str, Any], group_id: Any, new_type: str) -> Dict[str, Any]:
    """Set an electrode group's device type and replace its channel maps.

    The group's existing maps are removed, one map per shank of ``new_type``
    is appended, and every map in the document is renumbered. An unknown
    ``group_id`` returns the document unchanged.

    Args:
        document: Session document
        group_id: Id of the electrode group whose device type changed
        new_type: New probe type

    Returns:
        Updated document
    """
    groups = _list(document, GROUPS_KEY)
    if not any(isinstance(group, dict) and group.get("id") == group_id for group in groups):
        logger.debug(f"No electrode group with id {group_id!r}; device type change ignored")
        return document

    result = copy.deepcopy(document)
    for group in result[GROUPS_KEY]:
        if isinstance(group, dict) and group.get("id") == group_id:
            group["device_type"] = new_type

    channel_maps = [m for m in _list(result, CHANNEL_MAPS_KEY) if not _belongs_to(m, group_id)]
    new_maps = generate_channel_maps(new_type, group_id)
    channel_maps.extend(new_maps)
    _renumber(channel_maps)
    result[CHANNEL_MAPS_KEY] = channel_maps

    logger.debug(f"Generated {len(new_maps)} channel map(s) for electrode group {group_id!r} ({new_type!r})")
    return result


def on_electrode_group_removed(document: Dict[str, Any], index: int) -> Dict[str, Any]:
    """Remove an electrode group and every channel map that references it.

    Out-of-range indices return the document unchanged.
    """
    groups = _list(document, GROUPS_KEY)
    remaining = remove_item(groups, index)
    if remaining is groups:
        return document

    removed = groups[index]
    group_id = removed.get("id") if isinstance(removed, dict) else None

    result = copy.deepcopy(document)
    result[GROUPS_KEY] = remaining
    channel_maps = [m for m in _list(result, CHANNEL_MAPS_KEY) if not _belongs_to(m, group_id)]
    _renumber(channel_maps)
    result[CHANNEL_MAPS_KEY] = channel_maps

    logger.debug(f"Removed electrode group {group_id!r}; {len(channel_maps)} channel map(s) remain")
    return result


def on_electrode_group_duplicated(document: Dict[str, Any], index: int) -> Dict[str, Any]:
    """Duplicate an electrode group together with its channel maps.

    The clone is inserted right after the source group with a new id. Copies
    of the source's maps are re-pointed to the clone and appended, then every
    map is renumbered. Out-of-range indices return the document unchanged.
    """
    groups = _list(document, GROUPS_KEY)
    duplicated = duplicate_item(groups, index, COLLECTIONS[GROUPS_KEY].id_field)
    if duplicated is groups:
        return document

    source = duplicated[index]
    clone = duplicated[index + 1]
    source_id = source.get("id") if isinstance(source, dict) else None
    clone_id = clone.get("id") if isinstance(clone, dict) else None

    result = copy.deepcopy(document)
    result[GROUPS_KEY] = duplicated

    channel_maps = _list(result, CHANNEL_MAPS_KEY)
    clones = [copy.deepcopy(m) for m in channel_maps if _belongs_to(m, source_id)]
    for channel_map in clones:
        channel_map["electrode_group_id"] = clone_id
    channel_maps.extend(clones)
    _renumber(channel_maps)
    result[CHANNEL_MAPS_KEY] = channel_maps

    logger.debug(f"Duplicated electrode group {source_id!r} as {clone_id!r} with {len(clones)} channel map(s)")
    return result


def rebuild_channel_maps(document: Dict[str, Any]) -> Dict[str, Any]:
    """Regenerate every channel map from the electrode groups' device types.

    Bad-channel selections and hand-edited maps are discarded.
    """
    result = copy.deepcopy(document)
    channel_maps = generate_all_channel_maps(_list(result, GROUPS_KEY))
    _renumber(channel_maps)
    result[CHANNEL_MAPS_KEY] = channel_maps
    return result
