"""Command line interface for ephys-meta.

Thin presentation layer over the core: every command reads a YAML session
document, calls the corresponding core entry point and reports issues.

Commands:
---------
- validate: Report every schema and rules issue of a document
- import:   Reconcile an externally authored document into a complete one
- export:   Write a clean document under its NWB-converter filename
- devices:  List the catalogued probe types

Exit codes: 0 success, 1 validation issues, 2 unreadable input or settings.

Usage:
------
    $ ephys-meta validate session.yml
    $ ephys-meta import legacy.yml --output fixed.yml
    $ ephys-meta export fixed.yml --directory out/ --date 06222023
    $ EPHYS_META_LOGGING__LEVEL=DEBUG ephys-meta devices
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import load_settings
from .exceptions import EphysMetaError
from .importer import import_candidate
from .ntrode import catalog
from .utils import configure_logging
from .validation import Issue, validate
from .yaml_io import encode_document, export_document, read_document, write_document

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ephys-meta",
    help="Edit, validate and reconcile electrophysiology session metadata.",
    no_args_is_help=True,
)


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="TOML settings file"),
):
    """Configure logging from settings before running a command."""
    try:
        settings = load_settings(config)
    except (FileNotFoundError, EphysMetaError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    configure_logging(settings.logging)


def _read(file: Path):
    try:
        return read_document(file)
    except EphysMetaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


def _report(issues: List[Issue]) -> None:
    for issue in issues:
        typer.echo(f"{issue.path or '<document>'}: [{issue.code}] {issue.message}")


@app.command("validate")
def validate_command(
    file: Path = typer.Argument(..., help="YAML session document"),
):
    """Validate a session document against the schema and domain rules."""
    issues = validate(_read(file))

    if issues:
        _report(issues)
        typer.echo(f"{len(issues)} issue(s) found", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{file}: OK")


@app.command("import")
def import_command(
    file: Path = typer.Argument(..., help="Externally authored YAML document"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the reconciled document here"),
):
    """Import a document, keeping only the fields that validate."""
    result = import_candidate(_read(file))

    _report(result.issues)
    for excluded in result.excluded_fields:
        typer.echo(f"Excluded: {excluded.field}", err=True)
    typer.echo(f"Imported {len(result.imported_fields)} field(s), excluded {len(result.excluded_fields)}", err=True)

    if output is None:
        typer.echo(encode_document(result.document), nl=False)
        return

    try:
        write_document(output, result.document)
    except EphysMetaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(f"Wrote {output}", err=True)


@app.command("export")
def export_command(
    file: Path = typer.Argument(..., help="YAML session document"),
    directory: Path = typer.Option(..., "--directory", "-d", help="Output directory"),
    date: Optional[str] = typer.Option(None, "--date", help="Experiment date as mmddYYYY"),
):
    """Export a clean document under its deterministic filename."""
    try:
        result = export_document(_read(file), directory, experiment_date=date)
    except EphysMetaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if not result.success:
        _report(result.issues)
        typer.echo("Export blocked: fix the issues above first", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Exported {result.path}")


@app.command("devices")
def devices_command():
    """List catalogued device types with their channel layout."""
    for device_type in catalog.device_types():
        typer.echo(
            f"{device_type}: {catalog.channel_count(device_type)} channels, "
            f"{catalog.shank_count(device_type)} shank(s)"
        )


if __name__ == "__main__":
    app()
