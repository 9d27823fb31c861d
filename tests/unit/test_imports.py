"""Unit tests for package import order.

Each public module must import cleanly on its own in a fresh interpreter,
whatever the order in which its dependencies get loaded.
"""

import subprocess
import sys

import pytest

pytestmark = pytest.mark.unit


class TestIsolatedImports:
    """Every module imports first without circular-import errors."""

    @pytest.mark.parametrize(
        "module",
        [
            "ephys_meta.arrays",
            "ephys_meta.domain",
            "ephys_meta.domain.session",
            "ephys_meta.ntrode",
            "ephys_meta.ntrode.sync",
            "ephys_meta.validation",
            "ephys_meta.importer",
            "ephys_meta.config",
            "ephys_meta.utils",
            "ephys_meta.yaml_io",
            "ephys_meta.cli",
        ],
    )
    def test_Should_ImportCleanly_When_ImportedFirst(self, module):
        """A fresh interpreter can import the module before anything else."""
        result = subprocess.run([sys.executable, "-c", f"import {module}"], capture_output=True, text=True)

        assert result.returncode == 0, f"import {module} failed:\n{result.stderr}"
