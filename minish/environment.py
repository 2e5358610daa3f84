"""The shell's ordered table of environment variables."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

DEFAULT_PATH = "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin"


def split_env_string(entry: str) -> tuple[str, str | None]:
    """Split ``KEY=VALUE`` at the first ``=``; the value is None without one."""
    key, sep, value = entry.partition("=")
    if not sep:
        return entry, None
    return key, value


class Environment:
    """Variables in insertion order; a value of None means exported without value."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    @classmethod
    def from_envp(cls, envp: Iterable[str]) -> "Environment":
        """Build from ``KEY=VALUE`` strings; an empty list gives a minimal environment."""
        env = cls()
        empty = True
        for entry in envp:
            empty = False
            key, value = split_env_string(entry)
            env._vars.setdefault(key, "" if value is None else value)
        if empty:
            env.add_minimal()
        return env

    def find(self, key: str) -> str | None:
        """Return the value of ``key``, or None if it is unset or has no value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Set ``key``, keeping its place if it already exists."""
        self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._vars.pop(key, None)

    def to_list(self) -> list[str]:
        """Return ``KEY=VALUE`` strings, as handed to a started program."""
        return [f"{key}={value or ''}" for key, value in self._vars.items()]

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Iterate over ``(key, value)`` pairs in order."""
        return iter(list(self._vars.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def add_minimal(self) -> None:
        """Set PWD, SHLVL and PATH for a shell started with no environment."""
        try:
            self.set("PWD", os.getcwd())
        except OSError:
            pass
        self.set("SHLVL", "1")
        self.set("PATH", DEFAULT_PATH)