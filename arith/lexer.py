"""Tokenizer for arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from secure_core.errors import DisallowedCharactersError, EvaluationError


class TokenKind(str, Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    END = "end"


_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    value: int | float | None = None


def _read_number(source: str, start: int) -> tuple[Token, int]:
    """Read a decimal literal starting at ``start``.

    Accepts ``12``, ``1.5``, ``1.`` and ``.5``. A second ``.`` is an error.
    """
    pos = start
    seen_dot = False
    seen_digit = False
    while pos < len(source):
        ch = source[pos]
        if ch.isdigit() and ch.isascii():
            seen_digit = True
        elif ch == ".":
            if seen_dot:
                raise EvaluationError(f"Unexpected '.' at position {pos}", position=pos)
            seen_dot = True
        else:
            break
        pos += 1

    text = source[start:pos]
    if not seen_digit:
        raise EvaluationError(f"Expected digits at position {start}", position=start)

    try:
        value: int | float = float(text) if seen_dot else int(text)
    except ValueError as exc:
        # int() refuses very long literals
        raise EvaluationError(f"Invalid number at position {start}: {exc}", position=start) from exc
    return Token(TokenKind.NUMBER, text, start, value), pos


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens, always ending with an END token."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(source):
        ch = source[pos]
        if ch.isspace():
            pos += 1
            continue
        if ch == "." or (ch.isdigit() and ch.isascii()):
            token, pos = _read_number(source, pos)
            tokens.append(token)
            continue
        if ch in "+-" and source[pos + 1 : pos + 2] == ch:
            # "++" and "--" are increment/decrement, which have no operand here
            raise EvaluationError(f"Unexpected {ch * 2!r} at position {pos}", position=pos)
        kind = _OPERATORS.get(ch)
        if kind is None:
            raise DisallowedCharactersError(f"Invalid character {ch!r} at position {pos}")
        tokens.append(Token(kind, ch, pos))
        pos += 1

    tokens.append(Token(TokenKind.END, "", len(source)))
    return tokens
