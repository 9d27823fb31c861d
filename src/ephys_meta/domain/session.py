"""Structural schema of the session document.

These Pydantic models are the fixed schema that session documents are
validated against. Documents themselves stay plain mappings (so invalid
candidates can still be represented); the models are only used to check
structure: types, required fields, patterns, numeric ranges and enums.

Model Hierarchy:
---------------
- SessionDocument (top-level)
  ├── Subject
  ├── DataAcqDevice (list)
  ├── Camera (list)
  ├── Task (list)
  ├── AssociatedFile (list)
  ├── AssociatedVideoFile (list)
  ├── Units
  ├── BehavioralEvent (list)
  ├── Device
  ├── ElectrodeGroup (list)
  ├── NtrodeChannelMap (list)
  ├── OptoExcitationSource (list)
  ├── OpticalFiber (list)
  ├── VirusInjection (list)
  └── FsGuiYaml (list)

Key Features:
-------------
- **Immutable**: frozen=True prevents accidental modification
- **Strict Schema**: extra="forbid" rejects unknown fields
- **Strict Types**: no coercion of scalars ("450" is not a number, true is
  not an id); only channel map keys accept integer-like input
- **Non-empty text**: free-text identifiers must contain a non-whitespace
  character (NON_EMPTY_PATTERN)

Cross-field invariants (camera references, duplicate channel assignments,
optogenetics completeness) are not expressible here and live in
``ephys_meta.validation.rules``.
"""

from typing import Annotated, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .defaults import HEMISPHERES, LENGTH_UNITS, SEX_VALUES
from .devices import DEVICE_TYPES

__all__ = [
    "NON_EMPTY_PATTERN",
    "ISO_8601_PATTERN",
    "NonEmptyStr",
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
    "SessionDocument",
]

NON_EMPTY_PATTERN = r"^(.|\s)*\S(.|\s)*$"
ISO_8601_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:?\d{2})?$"

NonEmptyStr = Annotated[StrictStr, Field(pattern=NON_EMPTY_PATTERN)]
ChannelIndex = Annotated[StrictInt, Field(ge=0)]


class Subject(BaseModel):
    """Recorded animal.

    Attributes:
        description: Free-text description (e.g., "Long-Evans Rat")
        genotype: Genotype (e.g., "Wild Type")
        sex: One of M, F, U (unknown) or O (other)
        species: Species (e.g., "Rattus norvegicus")
        subject_id: Subject/animal identifier
        date_of_birth: ISO 8601 date-time
        weight: Weight in grams
    """

    model_config = {"frozen": True, "extra": "forbid"}

    description: NonEmptyStr
    genotype: NonEmptyStr
    sex: Literal[SEX_VALUES]
    species: NonEmptyStr
    subject_id: NonEmptyStr
    date_of_birth: StrictStr = Field(..., pattern=ISO_8601_PATTERN, description="ISO 8601 date-time")
    weight: StrictFloat = Field(..., gt=0, description="Weight in grams")


class DataAcqDevice(BaseModel):
    """Data acquisition hardware."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    system: NonEmptyStr
    amplifier: NonEmptyStr
    adc_circuit: NonEmptyStr


class Camera(BaseModel):
    """Behavior camera.

    Attributes:
        id: Camera id referenced by tasks and associated video files
        meters_per_pixel: Spatial resolution (> 0)
    """

    model_config = {"frozen": True, "extra": "forbid"}

    id: StrictInt = Field(..., ge=0)
    meters_per_pixel: StrictFloat = Field(..., gt=0)
    manufacturer: NonEmptyStr
    model: NonEmptyStr
    lens: NonEmptyStr
    camera_name: NonEmptyStr


class Task(BaseModel):
    """Behavioral task run during one or more epochs."""

    model_config = {"frozen": True, "extra": "forbid"}

    task_name: NonEmptyStr
    task_description: StrictStr = ""
    task_environment: StrictStr = ""
    camera_id: List[StrictInt] = Field(default_factory=list, description="Ids of cameras recording this task")
    task_epochs: List[StrictInt] = Field(default_factory=list)


class AssociatedFile(BaseModel):
    """Auxiliary file stored alongside the recording."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    description: NonEmptyStr
    path: NonEmptyStr
    task_epochs: StrictInt = Field(..., ge=0)


class AssociatedVideoFile(BaseModel):
    """Video file recorded by one camera."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    camera_id: StrictInt = Field(..., ge=0)
    task_epochs: StrictInt = Field(..., ge=0)


class Units(BaseModel):
    """Units of analog and behavioral event signals."""

    model_config = {"frozen": True, "extra": "forbid"}

    analog: NonEmptyStr
    behavioral_events: NonEmptyStr


class BehavioralEvent(BaseModel):
    """Digital input line carrying a behavioral event."""

    model_config = {"frozen": True, "extra": "forbid"}

    description: NonEmptyStr
    name: NonEmptyStr


class Device(BaseModel):
    """Recording software/device names."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: List[NonEmptyStr] = Field(..., min_length=1)


class ElectrodeGroup(BaseModel):
    """A probe implanted at one location.

    Attributes:
        id: Group id, referenced by channel maps
        device_type: Catalogued probe type
        targeted_x: Target coordinate along x, in ``units``
    """

    model_config = {"frozen": True, "extra": "forbid"}

    id: StrictInt = Field(..., ge=0)
    location: NonEmptyStr
    device_type: Literal[DEVICE_TYPES]
    description: NonEmptyStr
    targeted_location: NonEmptyStr
    targeted_x: StrictFloat
    targeted_y: StrictFloat
    targeted_z: StrictFloat
    units: Literal[LENGTH_UNITS]


class NtrodeChannelMap(BaseModel):
    """Channel map of one shank (ntrode).

    ``map`` sends the shank-local channel index to the channel index within
    the owning electrode group's numbering.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    ntrode_id: StrictInt = Field(..., ge=1)
    electrode_group_id: StrictInt = Field(..., ge=0)
    bad_channels: List[ChannelIndex] = Field(default_factory=list)
    map: Dict[int, ChannelIndex]


class OptoExcitationSource(BaseModel):
    """Light source used for optogenetic stimulation."""

    model_config = {"frozen": True, "extra": "forbid", "protected_namespaces": ()}

    name: NonEmptyStr
    model_name: NonEmptyStr
    description: StrictStr = ""
    wavelength_in_nm: StrictFloat = Field(..., gt=0)
    power_in_W: StrictFloat = Field(..., gt=0)
    intensity_in_W_per_m2: StrictFloat = Field(..., gt=0)


class OpticalFiber(BaseModel):
    """Implanted optical fiber."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    hardware_name: NonEmptyStr
    implanted_fiber_description: StrictStr = ""
    location: NonEmptyStr
    hemisphere: Literal[HEMISPHERES]
    ap_in_mm: StrictFloat
    ml_in_mm: StrictFloat
    dv_in_mm: StrictFloat
    roll_in_deg: StrictFloat
    pitch_in_deg: StrictFloat
    yaw_in_deg: StrictFloat
    reference: NonEmptyStr
    excitation_source: NonEmptyStr


class VirusInjection(BaseModel):
    """Viral injection delivering the opsin."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    description: StrictStr = ""
    hemisphere: Literal[HEMISPHERES]
    location: NonEmptyStr
    ap_in_mm: StrictFloat
    ml_in_mm: StrictFloat
    dv_in_mm: StrictFloat
    roll_in_deg: StrictFloat
    pitch_in_deg: StrictFloat
    yaw_in_deg: StrictFloat
    reference: NonEmptyStr
    virus_name: NonEmptyStr
    titer_in_vg_per_ml: StrictFloat = Field(..., gt=0)
    volume_in_uL: StrictFloat = Field(..., gt=0)


class FsGuiYaml(BaseModel):
    """Stimulation protocol file produced by the closed-loop GUI."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: NonEmptyStr
    epochs: List[StrictInt] = Field(default_factory=list)
    power_in_mW: StrictFloat = Field(..., ge=0)
    dio_output_name: StrictStr = ""
    state_script_parameters: StrictBool = False
    pulseLength: StrictFloat = Field(0.0, ge=0)


class SessionDocument(BaseModel):
    """Complete session document (strict schema).

    Required sections carry the session identity, subject and acquisition
    scaling; hardware collections default to empty.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    experimenter_name: List[NonEmptyStr] = Field(..., min_length=1)
    lab: NonEmptyStr
    institution: NonEmptyStr
    experiment_description: NonEmptyStr
    session_description: NonEmptyStr
    session_id: NonEmptyStr
    keywords: List[NonEmptyStr] = Field(..., min_length=1)
    subject: Subject
    data_acq_device: List[DataAcqDevice] = Field(..., min_length=1)
    cameras: List[Camera] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    associated_files: List[AssociatedFile] = Field(default_factory=list)
    associated_video_files: List[AssociatedVideoFile] = Field(default_factory=list)
    units: Units
    times_period_multiplier: StrictFloat = Field(..., gt=0)
    raw_data_to_volts: StrictFloat = Field(..., gt=0)
    default_header_file_path: StrictStr
    behavioral_events: List[BehavioralEvent] = Field(default_factory=list)
    device: Device
    electrode_groups: List[ElectrodeGroup] = Field(default_factory=list)
    ntrode_electrode_group_channel_map: List[NtrodeChannelMap] = Field(default_factory=list)
    opto_excitation_source: List[OptoExcitationSource] = Field(default_factory=list)
    optical_fiber: List[OpticalFiber] = Field(default_factory=list)
    virus_injection: List[VirusInjection] = Field(default_factory=list)
    fs_gui_yamls: List[FsGuiYaml] = Field(default_factory=list)
    optogenetic_stimulation_software: Optional[StrictStr] = None
