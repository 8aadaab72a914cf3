"""The Toolbox: collaborators shared by one command invocation."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from pxblue_cli.models.settings import CliSettings
from pxblue_cli.toolbox.filesystem import ProjectFilesystem
from pxblue_cli.toolbox.process import ProcessRunner
from pxblue_cli.toolbox.prompt import Prompter, RichPrompter


@dataclass(frozen=True)
class Toolbox:
    """Explicit context passed to the resolver, configurator and integrator.

    Attributes:
        runner: Runs external commands.
        prompter: Asks batched interactive questions.
        filesystem: File access rooted at the invocation directory.
        console: Console for progress and result output.
        settings: Environment-derived settings.
        clock: Monotonic clock in seconds, used for elapsed-time reports.
    """

    runner: ProcessRunner
    prompter: Prompter
    filesystem: ProjectFilesystem
    console: Console
    settings: CliSettings = field(default_factory=CliSettings)
    clock: Callable[[], float] = time.monotonic


def create_toolbox(
    settings: CliSettings,
    base: Path | None = None,
    console: Console | None = None,
) -> Toolbox:
    """Build a Toolbox wired to the real process, prompt and filesystem."""
    console = console or Console()
    return Toolbox(
        runner=ProcessRunner(console=console, echo=settings.verbose),
        prompter=RichPrompter(console=console),
        filesystem=ProjectFilesystem(base),
        console=console,
        settings=settings,
    )
