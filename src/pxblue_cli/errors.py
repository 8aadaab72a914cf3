"""Exceptions raised while resolving, generating, and integrating projects.

Everything derives from PxbError so the CLI layer can turn any of them
into a stderr message and a non-zero exit code.
"""

from __future__ import annotations

from collections.abc import Sequence


class PxbError(Exception):
    """Base class for pxb failures."""


class MissingInputError(PxbError):
    """Raised when the interactive session returns no answers at all."""

    def __init__(self) -> None:
        super().__init__("No input specified")


class MissingParameterError(PxbError):
    """Raised when a required question is left unanswered.

    Attributes:
        question: Prompt text of the unanswered question.
    """

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"Missing Required Parameters: {question}")


class ProcessFailedError(PxbError):
    """Raised when an external command exits non-zero or cannot start.

    Attributes:
        argv: The argument vector that was run.
        returncode: Exit code, or None if the process never started.
        output: Captured stdout/stderr, kept for diagnostics.
    """

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int | None,
        output: str = "",
        reason: str | None = None,
    ) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.output = output
        command = " ".join(self.argv)
        if reason is None:
            reason = f"exited with code {returncode}"
        super().__init__(f"Command '{command}' {reason}")


class IntegrationStepError(PxbError):
    """Raised when one step of the PX Blue integration fails.

    Attributes:
        step: 1-based step number.
        description: Human-readable step name.
        cause: The underlying exception.
    """

    def __init__(self, step: int, description: str, cause: Exception) -> None:
        self.step = step
        self.description = description
        self.cause = cause
        super().__init__(f"Integration failed at step {step} ({description}): {cause}")

    @property
    def output(self) -> str:
        """Captured process output of the failing step, if any."""
        return getattr(self.cause, "output", "") or ""


class InvalidParameterError(PxbError):
    """Raised when resolved answers do not form a valid project configuration."""
