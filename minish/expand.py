"""Variable expansion and quote removal for words and heredoc delimiters."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from .environment import Environment

if TYPE_CHECKING:
    from .models import Shell

_QUOTES = "'\""


class QuoteState(Enum):
    """Which kind of quote the scanner is inside."""

    DOUBLE_QUOTE = auto()
    SINGLE_QUOTE = auto()
    GENERAL = auto()


_STOPS = {
    QuoteState.SINGLE_QUOTE: "'",
    QuoteState.DOUBLE_QUOTE: '"',
    QuoteState.GENERAL: _QUOTES,
}


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def lookup_key(env: Environment, key: str) -> str:
    """Return the value of ``key``, or an empty string if it has none."""
    value = env.find(key)
    return "" if value is None else value


def expand_variable(text: str, shell: "Shell") -> tuple[str, int]:
    """Expand the ``$`` reference that ``text`` starts with.

    Returns the replacement and how many characters of ``text`` it used.
    A ``$`` not followed by a name character or ``?`` stands for itself.
    """
    if len(text) < 2 or not (_is_name_char(text[1]) or text[1] == "?"):
        return "$", 1
    if text[1] == "?":
        return str(shell.prev_exit), 2
    end = 2
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    return lookup_key(shell.env, text[1:end]), end


def _find_stop(text: str, state: QuoteState) -> int:
    stops = _STOPS[state]
    index = 1 if text[0] in _QUOTES else 0
    while index < len(text) and text[index] not in stops:
        index += 1
    return index


def _next_segment(
    text: str, state: QuoteState, heredoc: bool
) -> tuple[str, int, QuoteState]:
    start = 0
    if text[0] in _QUOTES:
        start = 1
        state = (
            QuoteState.SINGLE_QUOTE if text[0] == "'" else QuoteState.DOUBLE_QUOTE
        )
    end = _find_stop(text, state)
    if not heredoc and state is not QuoteState.SINGLE_QUOTE:
        dollar = text.find("$")
        if dollar != -1 and dollar < end:
            end = dollar
    piece = text[start:end]
    if (
        state is not QuoteState.GENERAL
        and end < len(text)
        and text[end] in _QUOTES
    ):
        return piece, end + 1, QuoteState.GENERAL
    return piece, end, state


def split_quoted(value: str, shell: "Shell", heredoc: bool) -> list[str]:
    """Cut ``value`` into pieces at quotes and expansions, quotes removed.

    With ``heredoc`` set, ``$`` is left as it is.
    """
    pieces: list[str] = []
    state = QuoteState.GENERAL
    pos = 0
    while pos < len(value):
        rest = value[pos:]
        if not heredoc and rest[0] == "$":
            piece, used = expand_variable(rest, shell)
        else:
            piece, used, state = _next_segment(rest, state, heredoc)
        pieces.append(piece)
        pos += used
    return pieces


def remove_quote(value: str, shell: "Shell", heredoc: bool) -> str:
    """Return ``value`` with quotes removed and, unless ``heredoc``, variables expanded."""
    return "".join(split_quoted(value, shell, heredoc))