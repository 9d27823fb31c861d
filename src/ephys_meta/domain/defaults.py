"""Default values for session documents.

``empty_document`` is the structurally complete, all-defaults document that
partial imports are reconciled into. ``ARRAY_TEMPLATES`` holds the item a
collection receives when a new entry is added.

Every accessor returns a fresh deep copy so callers can never alias the
module-level defaults.
"""

import copy
from typing import Any, Dict

__all__ = [
    "SEX_VALUES",
    "UNKNOWN_SEX",
    "HEMISPHERES",
    "LENGTH_UNITS",
    "EMPTY_DOCUMENT",
    "ARRAY_TEMPLATES",
    "empty_document",
    "array_template",
]

SEX_VALUES = ("M", "F", "U", "O")
UNKNOWN_SEX = "U"

HEMISPHERES = ("left", "right")

LENGTH_UNITS = ("pm", "nm", "μm", "mm", "cm", "in", "yd", "ft")

EMPTY_DOCUMENT: Dict[str, Any] = {
    "experimenter_name": [],
    "lab": "",
    "institution": "",
    "experiment_description": "",
    "session_description": "",
    "session_id": "",
    "keywords": [],
    "subject": {
        "description": "",
        "genotype": "",
        "sex": UNKNOWN_SEX,
        "species": "",
        "subject_id": "",
        "date_of_birth": "",
        "weight": 0,
    },
    "data_acq_device": [],
    "cameras": [],
    "tasks": [],
    "associated_files": [],
    "associated_video_files": [],
    "units": {
        "analog": "",
        "behavioral_events": "",
    },
    "times_period_multiplier": 0.0,
    "raw_data_to_volts": 0.0,
    "default_header_file_path": "",
    "behavioral_events": [],
    "device": {
        "name": [],
    },
    "electrode_groups": [],
    "ntrode_electrode_group_channel_map": [],
    "opto_excitation_source": [],
    "optical_fiber": [],
    "virus_injection": [],
    "fs_gui_yamls": [],
}

ARRAY_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "data_acq_device": {
        "name": "SpikeGadgets",
        "system": "SpikeGadgets",
        "amplifier": "Intan",
        "adc_circuit": "Intan",
    },
    "associated_files": {
        "name": "",
        "description": "",
        "path": "",
        "task_epochs": 0,
    },
    "cameras": {
        "id": 0,
        "meters_per_pixel": 0,
        "manufacturer": "",
        "model": "",
        "lens": "",
        "camera_name": "",
    },
    "tasks": {
        "task_name": "",
        "task_description": "",
        "task_environment": "",
        "camera_id": [],
        "task_epochs": [],
    },
    "associated_video_files": {
        "name": "",
        "camera_id": 0,
        "task_epochs": 0,
    },
    "behavioral_events": {
        "description": "Din1",
        "name": "",
    },
    "electrode_groups": {
        "id": 0,
        "location": "",
        "device_type": "",
        "description": "",
        "targeted_location": "",
        "targeted_x": 0.0,
        "targeted_y": 0.0,
        "targeted_z": 0.0,
        "units": "μm",
    },
    "ntrode_electrode_group_channel_map": {
        "ntrode_id": 1,
        "electrode_group_id": 0,
        "bad_channels": [],
        "map": {},
    },
    "opto_excitation_source": {
        "name": "Omicron LuxX+ Blue",
        "model_name": "Omicron LuxX+ 488-100",
        "description": "Laser for optogenetic stimulation",
        "wavelength_in_nm": 488.0,
        "power_in_W": 0.077,
        "intensity_in_W_per_m2": 1e10,
    },
    "optical_fiber": {
        "name": "Optical fiber 1",
        "hardware_name": "",
        "implanted_fiber_description": "",
        "location": "",
        "hemisphere": "",
        "ap_in_mm": 0.0,
        "ml_in_mm": 0.0,
        "dv_in_mm": 0.0,
        "roll_in_deg": 0.0,
        "pitch_in_deg": 0.0,
        "yaw_in_deg": 0.0,
        "reference": "Bregma at the cortical surface",
        "excitation_source": "",
    },
    "virus_injection": {
        "name": "Injection 1",
        "description": "Viral injection for optogenetic stimulation",
        "hemisphere": "",
        "location": "",
        "ap_in_mm": 0.0,
        "ml_in_mm": 0.0,
        "dv_in_mm": 0.0,
        "roll_in_deg": 0.0,
        "pitch_in_deg": 0.0,
        "yaw_in_deg": 0.0,
        "reference": "Bregma at the cortical surface",
        "virus_name": "",
        "titer_in_vg_per_ml": 1e12,
        "volume_in_uL": 0.45,
    },
    "fs_gui_yamls": {
        "name": "/path/to/fs_gui.yaml",
        "epochs": [],
        "power_in_mW": 0.0,
        "dio_output_name": "",
        "state_script_parameters": False,
        "pulseLength": 0.0,
    },
}


def empty_document() -> Dict[str, Any]:
    """Return a fresh all-defaults session document."""
    return copy.deepcopy(EMPTY_DOCUMENT)


def array_template(key: str) -> Dict[str, Any]:
    """Return a fresh item template for a collection (empty dict if none)."""
    return copy.deepcopy(ARRAY_TEMPLATES.get(key, {}))
