from typing import Optional

import typer

from awesome_projects import __version__
from awesome_projects.cli.commands.parse import parse as parse_cmd
from awesome_projects.cli.commands.show import show as show_cmd
from awesome_projects.cli.config import configure_logging, get_settings

app = typer.Typer(
    name="awesome-projects",
    help="awesome-projects - Extract project listings from an awesome-list README",
)

app.command("parse")(parse_cmd)
app.command("show")(show_cmd)


def version_callback(value: bool):
    if value:
        print(f"awesome-projects version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    configure_logging(get_settings().log_level)


if __name__ == "__main__":
    app()
