"""Split an input line into words and operator tokens."""

from __future__ import annotations

from .errors import ShellSyntaxError
from .models import Token, TokenType

_SPACES = " \t\n\r\v\f"
_OPERATORS = "|<>"
_STOPS = _SPACES + _OPERATORS
_QUOTES = "'\""


def find_end(text: str) -> int:
    """Return the index of the first blank or operator character in ``text``."""
    for index, char in enumerate(text):
        if char in _STOPS:
            return index
    return len(text)


def quote_index(text: str, end: int) -> int:
    """Return the index of the first quote before ``end``, or ``end`` if none."""
    for index, char in enumerate(text[:end]):
        if char in _QUOTES:
            return index
    return end


def find_close_quote(text: str, start: int, end: int) -> int:
    """Return where the word holding the quote at ``start`` ends.

    If the closing quote lies past ``end`` the word runs on from it to the
    next blank or operator. Raises ``ShellSyntaxError`` if the quote is not
    closed.
    """
    quote = text[start]
    if quote not in _QUOTES:
        return end
    close = text.find(quote, start + 1)
    if close == -1 or close == end:
        raise ShellSyntaxError("unclosed quote")
    if close > end:
        return close + find_end(text[close:])
    return end


def _read_word(text: str) -> int:
    end = find_end(text)
    first_quote = quote_index(text, end)
    if first_quote < end:
        end = find_close_quote(text, first_quote, end)
    return end


def _read_operator(line: str, pos: int) -> tuple[Token, int]:
    char = line[pos]
    if char == "|":
        return Token("|", TokenType.PIPE), pos + 1
    doubled = line.startswith(char * 2, pos)
    if char == ">":
        if doubled:
            return Token(">>", TokenType.APPEND), pos + 2
        return Token(">", TokenType.REDIR_OUT), pos + 1
    if doubled:
        return Token("<<", TokenType.HEREDOC), pos + 2
    return Token("<", TokenType.REDIR_IN), pos + 1


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into word and operator tokens; quotes stay in the words.

    Raises ``ShellSyntaxError`` on an unclosed quote.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(line)
    while pos < length:
        end = _read_word(line[pos:])
        if end:
            tokens.append(Token(line[pos:pos + end], TokenType.WORD))
        pos += end
        if pos < length and line[pos] in _OPERATORS:
            token, pos = _read_operator(line, pos)
            tokens.append(token)
        while pos < length and line[pos] in _SPACES:
            pos += 1
    return tokens