"""Lookups over the catalog of supported probe (device) types.

Lookups are total: unknown or non-string device types report zero channels
and zero shanks instead of raising.

Example:
    >>> shank_count("128c-4s8mm6cm-20um-40um-sl")
    4
    >>> channel_count("tetrode_12.5")
    4
    >>> is_known("not-a-device")
    False
"""

from typing import Any, List, Optional

from ..domain.devices import DEVICE_CATALOG, DEVICE_TYPES, DeviceSpec

__all__ = [
    "DeviceSpec",
    "DEVICE_CATALOG",
    "DEVICE_TYPES",
    "device_types",
    "get_device_spec",
    "channel_count",
    "channels_per_shank",
    "shank_count",
    "is_known",
]


def device_types() -> List[str]:
    """Return all catalogued device types in catalog order."""
    return list(DEVICE_TYPES)


def get_device_spec(device_type: Any) -> Optional[DeviceSpec]:
    """Return the catalog entry for a device type, or None if unknown."""
    if not isinstance(device_type, str):
        return None
    return DEVICE_CATALOG.get(device_type)


def channel_count(device_type: Any) -> int:
    """Total number of channels of a device type (0 if unknown)."""
    spec = get_device_spec(device_type)
    return spec.channel_count if spec is not None else 0


def channels_per_shank(device_type: Any) -> int:
    """Number of channels on each shank of a device type (0 if unknown)."""
    spec = get_device_spec(device_type)
    return spec.channels_per_shank if spec is not None else 0


def shank_count(device_type: Any) -> int:
    """Number of shanks of a device type (0 if unknown)."""
    spec = get_device_spec(device_type)
    return spec.shank_count if spec is not None else 0


def is_known(device_type: Any) -> bool:
    """Whether the device type is in the catalog."""
    return get_device_spec(device_type) is not None
