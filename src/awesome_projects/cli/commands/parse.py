import logging
from pathlib import Path
from typing import Optional

import typer

from awesome_projects.cli.config import get_settings
from awesome_projects.output.records import format_records
from awesome_projects.parser.markdown import ProjectListParser
from awesome_projects.shared.exceptions import ProjectListError
from awesome_projects.shared.files import (
    ensure_tmp_directory,
    read_file_content,
    write_output_file,
)

logger = logging.getLogger(__name__)


def parse(
    input_file: Optional[Path] = typer.Argument(None, help="Markdown README to parse"),
    output_file: Optional[Path] = typer.Argument(None, help="Where to write parsed records"),
):
    """Parse project entries from the README into a records file."""
    settings = get_settings()
    parser = ProjectListParser(
        projects_section=settings.projects_section,
        allow_reentry=settings.allow_reentry,
    )
    input_path = input_file or Path(settings.input_path)

    try:
        if output_file is None:
            output_file = ensure_tmp_directory(Path(settings.tmp_dir)) / settings.parsed_projects_file

        logger.info("Input: %s", input_path.absolute())
        logger.info("Output: %s", output_file.absolute())

        entries = parser.parse(read_file_content(input_path))
        write_output_file(output_file, format_records(entries))
    except ProjectListError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    github_count = sum(1 for e in entries if e.is_github_repo)
    logger.info("Parsed %d entries, %d GitHub repos", len(entries), github_count)
    typer.echo(f"Parsed {len(entries)} project entries ({github_count} GitHub repos)")
