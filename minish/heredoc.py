"""Reading here-documents into temporary files."""

from __future__ import annotations

import itertools
import os
import tempfile
from collections.abc import Callable

from .errors import heredoc_eof_warning
from .expand import expand_variable, remove_quote
from .models import Command, Shell, TokenType

HD_PREFIX = "minishell-heredoc-"
PROMPT = "> "

ReadLine = Callable[[str], "str | None"]

_names = itertools.count()


def _temp_name() -> str:
    return os.path.join(tempfile.gettempdir(), f"{HD_PREFIX}{next(_names)}")


def is_quoted(text: str) -> bool:
    """Return whether ``text`` holds a single or double quote."""
    return "'" in text or '"' in text


def expand_heredoc_line(line: str, shell: Shell) -> str:
    """Expand ``$`` references in one here-document line; quotes are kept."""
    pieces: list[str] = []
    pos = 0
    while pos < len(line):
        if line[pos] == "$":
            piece, used = expand_variable(line[pos:], shell)
            pieces.append(piece)
            pos += used
        else:
            dollar = line.find("$", pos)
            stop = len(line) if dollar == -1 else dollar
            pieces.append(line[pos:stop])
            pos = stop
    return "".join(pieces)


def collect_heredoc(
    delimiter: str, quoted: bool, shell: Shell, read_line: ReadLine
) -> str:
    """Read lines until ``delimiter`` and return them, each ending in a newline.

    ``read_line`` is called with the prompt and returns None at end of
    input, which ends the document with a warning. Unless ``quoted``,
    variables in the lines are expanded.
    """
    lines: list[str] = []
    while True:
        line = read_line(PROMPT)
        if line is None:
            heredoc_eof_warning()
            break
        if line == delimiter:
            break
        lines.append((line if quoted else expand_heredoc_line(line, shell)) + "\n")
    return "".join(lines)


def _write_heredoc(
    command: Command, path: str, delimiter: str, quoted: bool,
    shell: Shell, read_line: ReadLine,
) -> None:
    if command.heredoc_fd != -1:
        os.close(command.heredoc_fd)
        command.heredoc_fd = -1
    try:
        with open(path, "w", encoding="utf-8", opener=_private_opener) as handle:
            try:
                handle.write(collect_heredoc(delimiter, quoted, shell, read_line))
            except KeyboardInterrupt:
                shell.exit = 130
        command.heredoc_fd = os.open(path, os.O_RDONLY)
    finally:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass


def _private_opener(path: str, flags: int) -> int:
    return os.open(path, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o600)


def prepare_heredocs(command: Command, shell: Shell, read_line: ReadLine) -> None:
    """Read the leading here-documents of ``command`` into readable descriptors.

    Each redirect's file becomes the name of its temporary file, which is
    removed once reopened; the last document's descriptor is left in
    ``command.heredoc_fd``. An interrupt while reading sets the exit status
    to 130. Raises ``OSError`` if a temporary file cannot be opened.
    """
    for redirect in command.redirects:
        if redirect.type is not TokenType.HEREDOC:
            break
        delimiter = remove_quote(redirect.file, shell, True)
        quoted = is_quoted(redirect.file)
        redirect.file = _temp_name()
        _write_heredoc(command, redirect.file, delimiter, quoted, shell, read_line)