"""Command lookup along PATH and opening of output redirection targets."""

from __future__ import annotations

import errno
import os

from .environment import Environment
from .models import Shell

_FILE_MODE = 0o644


def create_env_path(env: Environment) -> list[str]:
    """Return the PATH directories, each ending in ``/``; empty parts are dropped."""
    value = env.find("PATH")
    if value is None:
        return []
    return [part + "/" for part in value.split(":") if part]


def resolve_command_path(name: str, env_paths: list[str]) -> str:
    """Return the path a command runs from, or an empty string if it is not found.

    A name holding ``/`` is used as it is; otherwise the first PATH
    directory holding an entry of that name wins.
    """
    if "/" in name:
        return name
    for directory in env_paths:
        candidate = directory + name
        if os.path.exists(candidate):
            return candidate
    return ""


def set_command_paths(shell: Shell) -> None:
    """Fill in the path of every command of the current line that has a name."""
    env_paths = create_env_path(shell.env)
    for command in shell.commands:
        if command.argv and command.argv[0]:
            command.path = resolve_command_path(command.argv[0], env_paths)


def _check_writable(path: str) -> None:
    if os.path.exists(path) and not os.access(path, os.W_OK):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)


def open_outfile(path: str) -> int:
    """Open ``path`` for writing, truncating it; return the file descriptor."""
    _check_writable(path)
    return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)


def open_append(path: str) -> int:
    """Open ``path`` for appending; return the file descriptor."""
    _check_writable(path)
    return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, _FILE_MODE)