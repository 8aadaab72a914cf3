"""Package installation helpers shared by the framework integrators."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pxblue_cli.scaffold.commands import install_command
from pxblue_cli.toolbox.context import Toolbox


def uses_yarn(toolbox: Toolbox, folder: str) -> bool:
    """A project uses yarn when the generator left a yarn.lock behind."""
    return toolbox.filesystem.is_file(f"{folder}/yarn.lock")


def dependency_list(value: Any) -> list[str]:
    """Normalize a template manifest entry to install specifiers.

    Template manifests list packages either as an array of names or as
    a name -> version mapping.
    """
    if not value:
        return []
    if isinstance(value, Mapping):
        return [f"{name}@{version}" if version else name for name, version in value.items()]
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


def install_dependencies(
    toolbox: Toolbox,
    folder: str,
    dependencies: Sequence[str],
    dev: bool,
    description: str,
) -> None:
    """Install packages into the project with its package manager.

    Does nothing for an empty list.

    Raises:
        ProcessFailedError: If the package manager fails.
    """
    if not dependencies:
        return
    argv = install_command(dependencies, dev=dev, yarn=uses_yarn(toolbox, folder))
    with toolbox.console.status(f"Installing {description}..."):
        toolbox.runner.run(argv, cwd=toolbox.filesystem.path(folder))
    toolbox.console.print(f"[green]✓[/green] Installed {description}")


def add_lint_config(toolbox: Toolbox, folder: str, config: str) -> None:
    """Write the project's ESLint configuration."""
    toolbox.filesystem.write_text(f"{folder}/.eslintrc.js", config)
