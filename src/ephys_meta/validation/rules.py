"""Cross-field validation rules.

Checks invariants that the structural schema cannot express:

1. reference: task and associated-video camera ids must name an existing
   camera; channel maps must point to an existing electrode group.
2. duplicate: within one electrode group's channel numbering, no channel
   index may be claimed twice (inside one map or across the group's maps).
3. dependency: optogenetics components (excitation source, optical fiber,
   virus injection) are provided together or not at all.

Rules tolerate arbitrarily shaped input: malformed entries are skipped here
and left to the schema validator.
"""

import logging
from typing import Any, Dict, List, Set

from .models import Issue
from .paths import normalize_path

__all__ = ["validate_rules", "OPTOGENETICS_FIELDS"]

logger = logging.getLogger(__name__)

OPTOGENETICS_FIELDS = ("opto_excitation_source", "optical_fiber", "virus_injection")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _entries(document: Dict[str, Any], key: str) -> List[Any]:
    items = document.get(key)
    return items if isinstance(items, list) else []


def _ids(items: List[Any]) -> Set[int]:
    return {item["id"] for item in items if isinstance(item, dict) and _is_int(item.get("id"))}


def _error(pointer: str, code: str, message: str) -> Issue:
    return Issue(path=normalize_path(pointer), code=code, severity="error", message=message)


def validate_rules(document: Any) -> List[Issue]:
    """Validate cross-field invariants of a document.

    Args:
        document: Candidate document (non-mappings yield no issues)

    Returns:
        Relational issues
    """
    if not isinstance(document, dict):
        return []

    issues: List[Issue] = []
    issues.extend(_check_camera_references(document))
    issues.extend(_check_electrode_group_references(document))
    issues.extend(_check_duplicate_channels(document))
    issues.extend(_check_optogenetics(document))

    if issues:
        logger.debug(f"Rules validation found {len(issues)} issue(s)")
    return issues


def _check_camera_references(document: Dict[str, Any]) -> List[Issue]:
    camera_ids = _ids(_entries(document, "cameras"))
    issues = []

    for i, task in enumerate(_entries(document, "tasks")):
        if not isinstance(task, dict) or not isinstance(task.get("camera_id"), list):
            continue
        for j, camera_id in enumerate(task["camera_id"]):
            if not (_is_int(camera_id) and camera_id in camera_ids):
                issues.append(
                    _error(
                        f"/tasks/{i}/camera_id/{j}",
                        "reference",
                        f"Task {i} references camera id {camera_id!r}, but no such camera is defined",
                    )
                )

    for i, video in enumerate(_entries(document, "associated_video_files")):
        if not isinstance(video, dict) or "camera_id" not in video:
            continue
        camera_id = video["camera_id"]
        if not (_is_int(camera_id) and camera_id in camera_ids):
            issues.append(
                _error(
                    f"/associated_video_files/{i}/camera_id",
                    "reference",
                    f"Associated video file {i} references camera id {camera_id!r}, but no such camera is defined",
                )
            )

    return issues


def _check_electrode_group_references(document: Dict[str, Any]) -> List[Issue]:
    group_ids = _ids(_entries(document, "electrode_groups"))
    issues = []

    for i, channel_map in enumerate(_entries(document, "ntrode_electrode_group_channel_map")):
        if not isinstance(channel_map, dict) or "electrode_group_id" not in channel_map:
            continue
        group_id = channel_map["electrode_group_id"]
        if not (_is_int(group_id) and group_id in group_ids):
            issues.append(
                _error(
                    f"/ntrode_electrode_group_channel_map/{i}/electrode_group_id",
                    "reference",
                    f"Ntrode {channel_map.get('ntrode_id')!r} belongs to electrode group {group_id!r}, "
                    f"but no such electrode group is defined",
                )
            )

    return issues


def _check_duplicate_channels(document: Dict[str, Any]) -> List[Issue]:
    """Flag channel indices claimed by more than one ntrode of a group.

    Map values are indices relative to the ntrode's electrode group, so the
    same index under two different groups names two different channels.
    Claims are therefore tracked per electrode_group_id; maps without an
    integer group id share one pool.
    """
    claimed: Dict[Any, Set[int]] = {}
    issues = []

    for i, channel_map in enumerate(_entries(document, "ntrode_electrode_group_channel_map")):
        if not isinstance(channel_map, dict) or not isinstance(channel_map.get("map"), dict):
            continue

        group_id = channel_map.get("electrode_group_id")
        group_key = group_id if _is_int(group_id) else None
        seen = claimed.setdefault(group_key, set())
        duplicates = []

        for channel in channel_map["map"].values():
            if not _is_int(channel):
                continue
            if channel in seen:
                if channel not in duplicates:
                    duplicates.append(channel)
            else:
                seen.add(channel)

        if duplicates:
            channels = ", ".join(str(c) for c in duplicates)
            issues.append(
                _error(
                    f"/ntrode_electrode_group_channel_map/{i}/map",
                    "duplicate",
                    f"Ntrode {channel_map.get('ntrode_id')!r} maps channel(s) {channels} that are already "
                    f"assigned in electrode group {group_id!r}",
                )
            )

    return issues


def _check_optogenetics(document: Dict[str, Any]) -> List[Issue]:
    present = [key for key in OPTOGENETICS_FIELDS if _entries(document, key)]
    if not present or len(present) == len(OPTOGENETICS_FIELDS):
        return []

    missing = [key for key in OPTOGENETICS_FIELDS if key not in present]
    return [
        _error(
            f"/{key}",
            "dependency",
            f"{key} requires {', '.join(missing)}: optogenetics fields must be provided together",
        )
        for key in present
    ]
