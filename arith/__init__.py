"""
Arith Module

Restricted arithmetic evaluation without dynamic code execution.

This module provides:
- A character allowlist check for expressions
- A tokenizer for numbers, operators and parentheses
- A recursive-descent evaluator with standard precedence

Only ``+ - * / ( )`` and decimal literals are understood. Nothing here calls
eval/exec/compile.
"""

__version__ = "0.1.0"

from .evaluator import ALLOWED_EXPRESSION_CHARS, safe_eval
from .lexer import Token, TokenKind, tokenize
from .parser import Parser

__all__ = [
    "ALLOWED_EXPRESSION_CHARS",
    "Parser",
    "Token",
    "TokenKind",
    "safe_eval",
    "tokenize",
]
