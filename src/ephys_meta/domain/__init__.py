"""Domain models and defaults for ephys-meta.

Package Structure:
-----------------
- defaults: All-defaults document, collection item templates, enum values
- devices: Table of supported probe types
- session: Structural schema of the session document (Pydantic models)

Import Patterns:
---------------
# Direct module imports
from ephys_meta.domain.session import SessionDocument, ElectrodeGroup
from ephys_meta.domain.defaults import empty_document

# Package root imports
from ephys_meta.domain import SessionDocument, empty_document
"""

from .defaults import (
    ARRAY_TEMPLATES,
    EMPTY_DOCUMENT,
    HEMISPHERES,
    LENGTH_UNITS,
    SEX_VALUES,
    UNKNOWN_SEX,
    array_template,
    empty_document,
)
from .devices import DEVICE_CATALOG, DEVICE_TYPES, DeviceSpec
from .session import (
    ISO_8601_PATTERN,
    NON_EMPTY_PATTERN,
    AssociatedFile,
    AssociatedVideoFile,
    BehavioralEvent,
    Camera,
    DataAcqDevice,
    Device,
    ElectrodeGroup,
    FsGuiYaml,
    NtrodeChannelMap,
    OpticalFiber,
    OptoExcitationSource,
    SessionDocument,
    Subject,
    Task,
    Units,
    VirusInjection,
)

__all__ = [
    # Defaults
    "ARRAY_TEMPLATES",
    "EMPTY_DOCUMENT",
    "HEMISPHERES",
    "LENGTH_UNITS",
    "SEX_VALUES",
    "UNKNOWN_SEX",
    "array_template",
    "empty_document",
    # Devices
    "DeviceSpec",
    "DEVICE_CATALOG",
    "DEVICE_TYPES",
    # Schema
    "ISO_8601_PATTERN",
    "NON_EMPTY_PATTERN",
    "SessionDocument",
    "Subject",
    "DataAcqDevice",
    "Camera",
    "Task",
    "AssociatedFile",
    "AssociatedVideoFile",
    "Units",
    "BehavioralEvent",
    "Device",
    "ElectrodeGroup",
    "NtrodeChannelMap",
    "OptoExcitationSource",
    "OpticalFiber",
    "VirusInjection",
    "FsGuiYaml",
]
