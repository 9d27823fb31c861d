"""ephys-meta: session metadata for extracellular electrophysiology recordings.

Edits, validates and reconciles the YAML "session document" consumed by the
downstream NWB converter (subject, hardware, electrode groups, ntrode
channel maps, tasks, cameras, optogenetics).

Subpackages:
------------
- ntrode:     Device catalog, channel map generation, electrode sync engine
- validation: Schema and rules validation producing Issues
- domain:     Schema models and document defaults
- config:     Settings (TOML + environment)

Modules:
--------
- arrays:   Copy-on-write collection editor
- importer: Partial import reconciliation
- yaml_io:  YAML encoding, file I/O and export
- cli:      Typer command line
"""

__version__ = "0.1.0"
