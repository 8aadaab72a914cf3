"""pxb new -- create a framework project with PX Blue integrated.

Each subcommand resolves the project settings (flags first, prompts
for anything missing), runs the framework's generator, then layers the
PX Blue integration on top of the generated project.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from pxblue_cli.cli.output import print_process_output
from pxblue_cli.errors import PxbError
from pxblue_cli.models.project import Framework, NewProjectOptions
from pxblue_cli.models.settings import load_settings
from pxblue_cli.scaffold.configurator import CONFIGURATORS
from pxblue_cli.scaffold.integrator import integrate
from pxblue_cli.toolbox.context import create_toolbox

err_console = Console(stderr=True)

app = typer.Typer(
    name="new",
    help="Create a new project with PX Blue integrated",
    no_args_is_help=True,
)

_NAME_HELP = "Project name (also the directory it is created in)"
_LANGUAGE_HELP = "Language: JavaScript (js) or TypeScript (ts)"
_LINT_HELP = "Use the PX Blue ESLint config"
_PRETTIER_HELP = "Use the PX Blue Prettier config"
_TEMPLATE_HELP = "Template: blank, routing, authentication, or file:<path>; may end in @<version>"
_ALPHA_HELP = "Use the alpha release of the template"
_BETA_HELP = "Use the beta release of the template"


def create_project(framework: Framework, options: NewProjectOptions, verbose: bool = False) -> None:
    """Run the configurator and integrator for one framework.

    Exits with code 1 on missing input, an aborted prompt, or a failed
    external command.
    """
    settings = load_settings()
    if verbose:
        settings = settings.model_copy(update={"verbose": True})
    toolbox = create_toolbox(settings)

    try:
        config = CONFIGURATORS[framework](options, toolbox)
        integrate(config, toolbox)
    except PxbError as exc:
        output = getattr(exc, "output", "")
        if output:
            print_process_output(err_console, output)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _verbose(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("verbose", False))


@app.command("angular")
def new_angular(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help=_NAME_HELP),
    lint: Optional[bool] = typer.Option(None, "--lint/--no-lint", help=_LINT_HELP),
    prettier: Optional[bool] = typer.Option(None, "--prettier/--no-prettier", help=_PRETTIER_HELP),
    template: Optional[str] = typer.Option(None, "--template", help=_TEMPLATE_HELP),
    alpha: bool = typer.Option(False, "--alpha", help=_ALPHA_HELP),
    beta: bool = typer.Option(False, "--beta", help=_BETA_HELP),
) -> None:
    """Create a new Angular project."""
    options = NewProjectOptions(
        name=name, lint=lint, prettier=prettier, template=template, alpha=alpha, beta=beta,
    )
    create_project(Framework.angular, options, verbose=_verbose(ctx))


@app.command("react")
def new_react(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help=_NAME_HELP),
    language: Optional[str] = typer.Option(None, "--language", help=_LANGUAGE_HELP),
    lint: Optional[bool] = typer.Option(None, "--lint/--no-lint", help=_LINT_HELP),
    prettier: Optional[bool] = typer.Option(None, "--prettier/--no-prettier", help=_PRETTIER_HELP),
    template: Optional[str] = typer.Option(None, "--template", help=_TEMPLATE_HELP),
    alpha: bool = typer.Option(False, "--alpha", help=_ALPHA_HELP),
    beta: bool = typer.Option(False, "--beta", help=_BETA_HELP),
) -> None:
    """Create a new React project."""
    options = NewProjectOptions(
        name=name, language=language, lint=lint, prettier=prettier,
        template=template, alpha=alpha, beta=beta,
    )
    create_project(Framework.react, options, verbose=_verbose(ctx))


@app.command("ionic")
def new_ionic(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help=_NAME_HELP),
    lint: Optional[bool] = typer.Option(None, "--lint/--no-lint", help=_LINT_HELP),
    prettier: Optional[bool] = typer.Option(None, "--prettier/--no-prettier", help=_PRETTIER_HELP),
) -> None:
    """Create a new Ionic project."""
    options = NewProjectOptions(name=name, lint=lint, prettier=prettier)
    create_project(Framework.ionic, options, verbose=_verbose(ctx))


@app.command("react-native")
def new_react_native(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help=_NAME_HELP),
    language: Optional[str] = typer.Option(None, "--language", help=_LANGUAGE_HELP),
    lint: Optional[bool] = typer.Option(None, "--lint/--no-lint", help=_LINT_HELP),
    prettier: Optional[bool] = typer.Option(None, "--prettier/--no-prettier", help=_PRETTIER_HELP),
    cli: Optional[str] = typer.Option(None, "--cli", help="Generator: expo or rnc (React Native Community CLI)"),
    template: Optional[str] = typer.Option(None, "--template", help=_TEMPLATE_HELP),
    alpha: bool = typer.Option(False, "--alpha", help=_ALPHA_HELP),
    beta: bool = typer.Option(False, "--beta", help=_BETA_HELP),
) -> None:
    """Create a new React Native project."""
    options = NewProjectOptions(
        name=name, language=language, lint=lint, prettier=prettier,
        cli=cli, template=template, alpha=alpha, beta=beta,
    )
    create_project(Framework.react_native, options, verbose=_verbose(ctx))
