"""Process runner for package managers and framework generators.

Commands are argument vectors run without a shell, so project names
and template tokens are never interpreted by one. Runs are awaited
one at a time and have no timeout.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from rich.console import Console

from pxblue_cli.errors import ProcessFailedError


class ProcessRunner:
    """Run external commands and capture their combined output.

    Args:
        console: Console used to echo commands when ``echo`` is set.
        echo: Print each argv before running it.
    """

    def __init__(self, console: Console | None = None, echo: bool = False) -> None:
        self.console = console or Console(stderr=True)
        self.echo = echo

    def run(
        self,
        argv: Sequence[str],
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> str:
        """Run a command and return its stdout and stderr as text.

        Args:
            argv: Program and arguments.
            cwd: Working directory for the child process.
            env: Extra environment variables layered over os.environ.

        Returns:
            Captured output.

        Raises:
            ProcessFailedError: If the program is missing, cannot be
                executed, or exits with a non-zero code.
        """
        if self.echo:
            location = f" [dim](in {cwd})[/dim]" if cwd else ""
            self.console.print(f"[dim]$ {' '.join(argv)}[/dim]{location}")

        child_env = None
        if env:
            child_env = os.environ.copy()
            child_env.update(env)

        try:
            completed = subprocess.run(
                list(argv),
                cwd=str(cwd) if cwd is not None else None,
                env=child_env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise ProcessFailedError(argv, None, reason=f"failed: '{argv[0]}' not found") from None
        except PermissionError:
            raise ProcessFailedError(argv, None, reason=f"failed: '{argv[0]}' is not executable") from None

        output = completed.stdout or ""
        if completed.returncode != 0:
            raise ProcessFailedError(argv, completed.returncode, output)
        return output
