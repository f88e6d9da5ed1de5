"""
External process helpers for the Safari Extension Builder.
"""

import re
import subprocess
from typing import Sequence

import typer

from .errors import ExternalCommandError
from .logger import get_logger

logger = get_logger("process")

_SHELL_SPECIAL = re.compile(r'(["\\$`])')


def quote(value) -> str:
    """Wrap a value in double quotes, escaping characters the shell expands."""
    return '"' + _SHELL_SPECIAL.sub(r"\\\1", str(value)) + '"'


def format_command(command: Sequence[str]) -> str:
    """Render a command for display, quoting arguments that need it."""
    parts = []
    for arg in command:
        arg = str(arg)
        if arg and re.fullmatch(r"[A-Za-z0-9_./=:,+@%-]+", arg):
            parts.append(arg)
        else:
            parts.append(quote(arg))
    return " ".join(parts)


def run_command(command: Sequence[str]) -> None:
    """
    Run an external command, streaming its output to the terminal.

    Args:
        command: Program and arguments

    Raises:
        ExternalCommandError: If the command cannot be started or exits non-zero
    """
    typer.echo(f"\n> {format_command(command)}")
    logger.debug(f"Running command: {list(command)}")

    try:
        result = subprocess.run([str(arg) for arg in command])
    except FileNotFoundError as e:
        raise ExternalCommandError(command, 127, str(e)) from e

    if result.returncode != 0:
        raise ExternalCommandError(command, result.returncode)
