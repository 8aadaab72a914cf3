"""pxb CLI entry point."""

import typer

from pxblue_cli import __version__
from pxblue_cli.cli.new_cmd import app as new_app

app = typer.Typer(
    name="pxb",
    help="Create framework projects with PX Blue integrated",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(new_app, name="new")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pxb {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V", help="Echo every external command before it runs."
    ),
) -> None:
    """Create framework projects with PX Blue integrated."""
    ctx.ensure_object(dict)["verbose"] = verbose
