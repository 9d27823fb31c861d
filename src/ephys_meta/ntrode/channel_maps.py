"""Generate ntrode channel maps from probe device types.

Each ntrode represents one shank of a probe. Its map sends the shank-local
channel index to the channel index within the probe's numbering, using an
identity layout offset by the shank position.

ntrode ids are deliberately left unassigned: numbering is document-wide and
owned by ``ephys_meta.ntrode.sync``.

Example:
    >>> maps = generate_channel_maps("32c-2s8mm6cm-20um-40um-dl", group_id=0)
    >>> [m["map"][0] for m in maps]
    [0, 16]
"""

import logging
from typing import Any, Dict, Iterable, List

from .catalog import channels_per_shank, shank_count

__all__ = ["generate_channel_maps", "generate_all_channel_maps"]

logger = logging.getLogger(__name__)


def generate_channel_maps(device_type: Any, group_id: Any) -> List[Dict[str, Any]]:
    """Build one channel map per shank for an electrode group.

    Args:
        device_type: Probe type of the electrode group
        group_id: Id of the electrode group owning the maps

    Returns:
        Channel map records with ``ntrode_id`` set to None; empty if the
        device type is not catalogued
    """
    shanks = shank_count(device_type)
    if shanks == 0:
        logger.debug(f"No channel maps for unknown device type {device_type!r}")
        return []

    per_shank = channels_per_shank(device_type)
    channel_maps = []

    for shank in range(shanks):
        offset = shank * per_shank
        channel_maps.append(
            {
                "ntrode_id": None,
                "electrode_group_id": group_id,
                "bad_channels": [],
                "map": {local: offset + local for local in range(per_shank)},
            }
        )

    return channel_maps


def generate_all_channel_maps(electrode_groups: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Concatenate the channel maps of every electrode group, in group order.

    Groups that are not mappings are skipped.
    """
    channel_maps: List[Dict[str, Any]] = []
    for group in electrode_groups:
        if not isinstance(group, dict):
            continue
        channel_maps.extend(generate_channel_maps(group.get("device_type"), group.get("id")))
    return channel_maps
