"""Core data types shared by the lexer, parser and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .environment import Environment


class TokenType(Enum):
    """Kind of a lexical token or redirection."""

    WORD = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    HEREDOC = auto()
    APPEND = auto()
    DEFAULT = auto()


class Builtin(Enum):
    """Commands the shell runs itself instead of starting a program."""

    ECHO = auto()
    CD = auto()
    PWD = auto()
    EXPORT = auto()
    UNSET = auto()
    ENV = auto()
    EXIT = auto()
    OTHERS = auto()

    @staticmethod
    def from_name(name: str) -> "Builtin":
        """Return the builtin called ``name``, or ``OTHERS`` if there is none."""
        if not name or name != name.lower():
            return Builtin.OTHERS
        member = Builtin.__members__.get(name.upper())
        if member is None or member is Builtin.OTHERS:
            return Builtin.OTHERS
        return member


@dataclass
class Token:
    """One lexical token of an input line."""

    value: str
    type: TokenType = TokenType.WORD


@dataclass
class Redirect:
    """An input/output redirection attached to a command."""

    type: TokenType
    file: str


@dataclass
class Command:
    """One simple command of a pipeline."""

    argv: list[str] = field(default_factory=list)
    path: str | None = None
    redirects: list[Redirect] = field(default_factory=list)
    fd_in: int = 0
    fd_out: int = 1
    heredoc_fd: int = -1


@dataclass
class Shell:
    """State of a running shell session."""

    input: str | None = None
    interactive: bool = False
    env: Environment = field(default_factory=Environment)
    tokens: list[Token] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    prev_exit: int = 0
    exit: int = 0

    def reset(self) -> None:
        """Drop the state of the last line and carry its exit status over."""
        self.input = None
        self.tokens = []
        self.commands = []
        self.prev_exit = self.exit
        self.exit = 0