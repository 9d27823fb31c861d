"""Probe (device) types known to the session schema.

Each entry records how many channels a shank carries and how many shanks the
probe has. The total channel count is their product, so dividing channels
across shanks is always exact.

This module only declares the table; lookups live in
``ephys_meta.ntrode.catalog``.
"""

from typing import Dict

from pydantic import BaseModel, Field

__all__ = ["DeviceSpec", "DEVICE_CATALOG", "DEVICE_TYPES"]


class DeviceSpec(BaseModel):
    """Channel layout of one probe type.

    Attributes:
        channels_per_shank: Number of recording channels on each shank
        shank_count: Number of independently wired shanks
    """

    model_config = {"frozen": True, "extra": "forbid"}

    channels_per_shank: int = Field(..., description="Recording channels on each shank", ge=1)
    shank_count: int = Field(..., description="Number of independently wired shanks", ge=1)

    @property
    def channel_count(self) -> int:
        return self.channels_per_shank * self.shank_count


DEVICE_CATALOG: Dict[str, DeviceSpec] = {
    "tetrode_12.5": DeviceSpec(channels_per_shank=4, shank_count=1),
    "A1x32-6mm-50-177-H32_21mm": DeviceSpec(channels_per_shank=32, shank_count=1),
    "128c-4s8mm6cm-20um-40um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "128c-4s6mm6cm-15um-26um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "128c-4s8mm6cm-15um-26um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "128c-4s6mm6cm-20um-40um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "128c-4s4mm6cm-20um-40um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "128c-4s4mm6cm-15um-26um-sl": DeviceSpec(channels_per_shank=32, shank_count=4),
    "32c-2s8mm6cm-20um-40um-dl": DeviceSpec(channels_per_shank=16, shank_count=2),
    "64c-4s6mm6cm-20um-40um-dl": DeviceSpec(channels_per_shank=16, shank_count=4),
    # Only 20 of the 64 pads per shank are wired on this probe
    "64c-3s6mm6cm-20um-40um-sl": DeviceSpec(channels_per_shank=20, shank_count=3),
    "NET-EBL-128ch-single-shank": DeviceSpec(channels_per_shank=128, shank_count=1),
}


DEVICE_TYPES = tuple(DEVICE_CATALOG)
