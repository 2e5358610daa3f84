"""Error reporting in the shell's message format."""

from __future__ import annotations

import os
import sys

RESET = "\033[0m"
ERROR = "\033[31m"
PREFIX = ERROR + "minishell: " + RESET


class ShellSyntaxError(Exception):
    """A line of input could not be parsed."""

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message + detail)
        self.message = message
        self.detail = detail


def _write(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def builtin_error(cmd: str, arg: str, msg: str) -> None:
    """Report a builtin's failure: command, argument and message run together."""
    _write(f"{PREFIX}{cmd}{arg}{msg}\n")


def execve_error(cmd_name: str, message: str) -> None:
    """Report that a command could not be run."""
    _write(f"{PREFIX}{cmd_name}: {message}\n")


def error_printing(message: str, err: int | OSError) -> None:
    """Report a system error, given as an errno value or an ``OSError``."""
    if isinstance(err, OSError):
        reason = err.strerror or str(err)
    else:
        reason = os.strerror(err)
    _write(f"{PREFIX}{message}: {reason}\n")


def input_error(message: str, detail: str) -> None:
    """Report a syntax error in the input line."""
    _write(f"{ERROR}minishell: syntax error: {RESET}{message}{detail}\n")


def heredoc_eof_warning() -> None:
    """Warn that a here-document ended at end of file, not at its delimiter."""
    _write(f"{ERROR}minishell: warning: {RESET}")
    _write(f"{ERROR}heredoc delimited by end of file\n{RESET}")