from pathlib import Path
from typing import Optional

import typer

from awesome_projects.cli.config import get_settings
from awesome_projects.output.records import read_records
from awesome_projects.shared.exceptions import ProjectListError
from awesome_projects.shared.files import read_file_content


def show(
    records_file: Optional[Path] = typer.Argument(None, help="Parsed records file"),
):
    """List the entries of a parsed records file."""
    if records_file is None:
        settings = get_settings()
        records_file = Path(settings.tmp_dir) / settings.parsed_projects_file

    try:
        entries = read_records(read_file_content(records_file))
    except ProjectListError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not entries:
        typer.echo("No entries found.")
        return

    typer.echo(f"{'Name':<30} {'Section':<40} {'URL'}")
    typer.echo("-" * 100)
    for entry in entries:
        typer.echo(f"{entry.name:<30} {entry.section:<40} {entry.url}")
