"""Electrode group and ntrode channel map management.

Provides the probe catalog, per-shank channel map generation, and the
synchronization transforms that keep channel maps consistent with electrode
groups (cascade delete, duplication, document-wide ntrode renumbering).

Example:
    >>> from ephys_meta.ntrode import add_electrode_group, shank_count
    >>> shank_count("tetrode_12.5")
    1
    >>> doc = add_electrode_group(document, device_type="tetrode_12.5")
"""

# Device catalog
from .catalog import (
    DEVICE_CATALOG,
    DEVICE_TYPES,
    DeviceSpec,
    channel_count,
    channels_per_shank,
    device_types,
    get_device_spec,
    is_known,
    shank_count,
)

# Channel map generation
from .channel_maps import generate_all_channel_maps, generate_channel_maps

# Synchronization engine
from .sync import (
    CHANNEL_MAPS_KEY,
    GROUPS_KEY,
    add_electrode_group,
    on_device_type_changed,
    on_electrode_group_duplicated,
    on_electrode_group_removed,
    rebuild_channel_maps,
    renumber_ntrodes,
)

__all__ = [
    # Catalog
    "DeviceSpec",
    "DEVICE_CATALOG",
    "DEVICE_TYPES",
    "device_types",
    "get_device_spec",
    "channel_count",
    "channels_per_shank",
    "shank_count",
    "is_known",
    # Generation
    "generate_channel_maps",
    "generate_all_channel_maps",
    # Synchronization
    "GROUPS_KEY",
    "CHANNEL_MAPS_KEY",
    "renumber_ntrodes",
    "add_electrode_group",
    "on_device_type_changed",
    "on_electrode_group_removed",
    "on_electrode_group_duplicated",
    "rebuild_channel_maps",
]
