"""Pytest configuration and shared fixtures for ephys-meta tests.

Provides:
- A complete, valid session document
- A document with electrode groups and channel maps for sync tests
- Environment isolation for settings
"""

import copy
import os
from typing import Any, Dict

import pytest

# ============================================================================
# Documents
# ============================================================================

VALID_DOCUMENT: Dict[str, Any] = {
    "experimenter_name": ["Guidera, Jennifer"],
    "lab": "Loren Frank Lab",
    "institution": "University of California, San Francisco",
    "experiment_description": "Theta sequences in CA1 during W-track alternation",
    "session_description": "Run session on the W-track",
    "session_id": "beans_01",
    "keywords": ["hippocampus", "spatial navigation"],
    "subject": {
        "description": "Long-Evans Rat",
        "genotype": "Wild Type",
        "sex": "M",
        "species": "Rattus norvegicus",
        "subject_id": "Beans",
        "date_of_birth": "2023-01-17T00:00:00.000Z",
        "weight": 450,
    },
    "data_acq_device": [
        {
            "name": "SpikeGadgets",
            "system": "SpikeGadgets",
            "amplifier": "Intan",
            "adc_circuit": "Intan",
        }
    ],
    "cameras": [
        {
            "id": 0,
            "meters_per_pixel": 0.001,
            "manufacturer": "Allied Vision",
            "model": "Mako G-158C",
            "lens": "Theia SL183M",
            "camera_name": "HomeBox_camera",
        }
    ],
    "tasks": [
        {
            "task_name": "sleep",
            "task_description": "Rest in home box",
            "task_environment": "home box",
            "camera_id": [0],
            "task_epochs": [1, 3],
        }
    ],
    "associated_files": [],
    "associated_video_files": [
        {
            "name": "20230622_beans_01_sleep.1.h264",
            "camera_id": 0,
            "task_epochs": 1,
        }
    ],
    "units": {"analog": "1", "behavioral_events": "1"},
    "times_period_multiplier": 1.5,
    "raw_data_to_volts": 0.000000195,
    "default_header_file_path": "default_header.xml",
    "behavioral_events": [{"description": "Din1", "name": "Light_1"}],
    "device": {"name": ["Trodes"]},
    "electrode_groups": [
        {
            "id": 0,
            "location": "CA1",
            "device_type": "tetrode_12.5",
            "description": "Dorsal CA1 tetrode",
            "targeted_location": "CA1",
            "targeted_x": 2.6,
            "targeted_y": -3.8,
            "targeted_z": 2.0,
            "units": "mm",
        }
    ],
    "ntrode_electrode_group_channel_map": [
        {
            "ntrode_id": 1,
            "electrode_group_id": 0,
            "bad_channels": [],
            "map": {0: 0, 1: 1, 2: 2, 3: 3},
        }
    ],
    "opto_excitation_source": [],
    "optical_fiber": [],
    "virus_injection": [],
    "fs_gui_yamls": [],
}


@pytest.fixture
def valid_document() -> Dict[str, Any]:
    """Complete session document that passes schema and rules validation."""
    return copy.deepcopy(VALID_DOCUMENT)


@pytest.fixture
def two_group_document(valid_document: Dict[str, Any]) -> Dict[str, Any]:
    """Document with two single-shank groups (ids 0, 1) and ntrodes 1, 2."""
    second_group = copy.deepcopy(valid_document["electrode_groups"][0])
    second_group["id"] = 1
    second_group["location"] = "CA3"
    second_group["targeted_location"] = "CA3"
    valid_document["electrode_groups"].append(second_group)

    second_map = copy.deepcopy(valid_document["ntrode_electrode_group_channel_map"][0])
    second_map["ntrode_id"] = 2
    second_map["electrode_group_id"] = 1
    valid_document["ntrode_electrode_group_channel_map"].append(second_map)

    return valid_document


@pytest.fixture
def opto_entries() -> Dict[str, Dict[str, Any]]:
    """One valid entry for each optogenetics collection."""
    return {
        "opto_excitation_source": {
            "name": "Omicron LuxX+ Blue",
            "model_name": "Omicron LuxX+ 488-100",
            "description": "Laser for optogenetic stimulation",
            "wavelength_in_nm": 488.0,
            "power_in_W": 0.077,
            "intensity_in_W_per_m2": 1e10,
        },
        "optical_fiber": {
            "name": "Fiber 1",
            "hardware_name": "Doric Lenses",
            "implanted_fiber_description": "200 um core",
            "location": "mPFC",
            "hemisphere": "left",
            "ap_in_mm": 1.0,
            "ml_in_mm": 0.5,
            "dv_in_mm": 2.5,
            "roll_in_deg": 0.0,
            "pitch_in_deg": 0.0,
            "yaw_in_deg": 0.0,
            "reference": "Bregma at the cortical surface",
            "excitation_source": "Omicron LuxX+ Blue",
        },
        "virus_injection": {
            "name": "Injection 1",
            "description": "Viral injection for optogenetic stimulation",
            "hemisphere": "left",
            "location": "mPFC",
            "ap_in_mm": 1.0,
            "ml_in_mm": 0.5,
            "dv_in_mm": 2.5,
            "roll_in_deg": 0.0,
            "pitch_in_deg": 0.0,
            "yaw_in_deg": 0.0,
            "reference": "Bregma at the cortical surface",
            "virus_name": "AAV-ChR2",
            "titer_in_vg_per_ml": 1e12,
            "volume_in_uL": 0.45,
        },
    }


# ============================================================================
# Settings isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Remove EPHYS_META_* variables so tests see default settings."""
    for name in list(os.environ):
        if name.upper().startswith("EPHYS_META_"):
            monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
    config.addinivalue_line("markers", "property: marks randomized invariant tests")
