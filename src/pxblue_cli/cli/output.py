"""Framed terminal output for the end of a scaffolding run."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

FRAME_CHAR = "•"
FRAME_WIDTH = 60
FRAME_PADDING = 10


def divider(char: str = FRAME_CHAR, width: int = FRAME_WIDTH) -> str:
    return char * width


def framed(
    text: str,
    char: str = FRAME_CHAR,
    width: int = FRAME_WIDTH,
    padding: int = FRAME_PADDING,
    align: str = "center",
) -> str:
    """Return ``text`` inside a one-line frame of ``char``.

    Left-aligned lines are indented by ``padding`` spaces.
    """
    inner = width - 2
    if align == "left":
        body = (" " * padding + text).ljust(inner)
    else:
        body = text.center(inner)
    return f"{char}{body}{char}"


def _print_lines(console: Console, lines: Sequence[str]) -> None:
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_success(console: Console, project: str) -> None:
    """Print the integration-complete banner for a project."""
    console.print()
    _print_lines(
        console,
        [
            divider(),
            framed(""),
            framed("PX Blue integration complete"),
            framed("Your project:"),
            framed(project),
            framed("has been created successfully!"),
            framed(""),
            divider(),
        ],
    )


def print_instructions(console: Console, instructions: Sequence[str]) -> None:
    """Print run instructions inside the same frame."""
    lines = [divider(), framed(""), framed("To run your project:", align="left"), framed("")]
    lines += [framed(instruction, align="left") for instruction in instructions]
    lines += [framed(""), divider()]
    _print_lines(console, lines)
    console.print()


def print_warning(console: Console, message: str) -> None:
    console.print(message, style="yellow", markup=False, highlight=False)


def print_process_output(console: Console, output: str) -> None:
    """Echo captured output of an external command, if there is any."""
    if output.strip():
        console.print(output.rstrip(), markup=False, highlight=False)
