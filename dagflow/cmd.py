"""Task logic that runs a shell command."""

from __future__ import annotations

import logging
import os
import subprocess

from .action import Complex
from .env import EnvVar
from .state import Content, Input, Output

logger = logging.getLogger(__name__)

_WINDOWS = os.name == "nt"


def _lines(raw: bytes) -> list[str]:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = ""
    separator = "\r\n" if _WINDOWS else "\n"
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    if _WINDOWS:
        parts.reverse()
    return parts


class CommandAction(Complex):
    """Runs a command through the system shell.

    String outputs of predecessor tasks are passed as extra shell arguments.
    On success the output is ``(stdout_lines, stderr_lines)``; on failure the
    same pair is attached to an error carrying the exit code.
    """

    def __init__(self, command: str) -> None:
        self.command = command

    def run(self, input: Input, env: EnvVar) -> Output:
        if _WINDOWS:
            program, args = "powershell", ["-Command", self.command]
        else:
            program, args = "sh", ["-c", self.command]
        args.extend(value for content in input if (value := content.get(str)) is not None)

        logger.info("cmd: %r, args: %r", program, args)
        try:
            completed = subprocess.run([program, *args], capture_output=True, check=False)
        except OSError as error:
            return Output.error_with_exit_code(error.errno, Content(str(error)))

        stdout = _lines(completed.stdout)
        stderr = _lines(completed.stderr)
        if completed.returncode == 0:
            return Output.of((stdout, stderr))
        code = completed.returncode if completed.returncode >= 0 else 0
        return Output.error_with_exit_code(code, Content((stdout, stderr)))

    def __repr__(self) -> str:
        return f"CommandAction({self.command!r})"