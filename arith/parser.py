"""Recursive-descent evaluator.

Grammar::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("+" | "-") unary | primary
    primary    := NUMBER | "(" expression ")"
"""

from __future__ import annotations

from typing import cast

from secure_core.errors import EvaluationError

from .lexer import Token, TokenKind

Number = int | float


class Parser:
    """Evaluates a token list while parsing it; no tree is built."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.END:
            raise ValueError("Token list must end with an END token")
        self.tokens = tokens
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind is not TokenKind.END:
            self.index += 1
        return token

    def _fail(self, message: str) -> EvaluationError:
        token = self.current
        where = "end of expression" if token.kind is TokenKind.END else f"position {token.position}"
        return EvaluationError(f"{message} at {where}", position=token.position)

    def parse(self) -> Number:
        if self.current.kind is TokenKind.END:
            raise self._fail("Empty expression")
        try:
            value = self._expression()
        except OverflowError as exc:
            raise EvaluationError(f"Numeric overflow: {exc}") from exc
        except RecursionError as exc:
            raise EvaluationError("Expression is nested too deeply") from exc
        if self.current.kind is not TokenKind.END:
            raise self._fail(f"Unexpected {self.current.text!r}")
        return value

    def _expression(self) -> Number:
        value = self._term()
        while self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
            op = self._advance()
            rhs = self._term()
            value = value + rhs if op.kind is TokenKind.PLUS else value - rhs
        return value

    def _term(self) -> Number:
        value = self._unary()
        while self.current.kind in (TokenKind.STAR, TokenKind.SLASH):
            op = self._advance()
            rhs = self._unary()
            if op.kind is TokenKind.STAR:
                value = value * rhs
            elif rhs == 0:
                raise EvaluationError(f"Division by zero at position {op.position}", position=op.position)
            else:
                value = value / rhs
        return value

    def _unary(self) -> Number:
        if self.current.kind is TokenKind.MINUS:
            self._advance()
            return -self._unary()
        if self.current.kind is TokenKind.PLUS:
            self._advance()
            return +self._unary()
        return self._primary()

    def _primary(self) -> Number:
        token = self.current
        if token.kind is TokenKind.NUMBER:
            self._advance()
            return cast(Number, token.value)
        if token.kind is TokenKind.LPAREN:
            self._advance()
            value = self._expression()
            if self.current.kind is not TokenKind.RPAREN:
                raise self._fail("Expected ')'")
            self._advance()
            return value
        if token.kind is TokenKind.END:
            raise self._fail("Expected a number")
        raise self._fail(f"Unexpected {token.text!r}")
