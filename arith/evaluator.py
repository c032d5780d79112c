"""Safe arithmetic evaluation entry point."""

from __future__ import annotations

import logging
import re

from secure_core.errors import DisallowedCharactersError, InvalidArgumentError

from .lexer import tokenize
from .parser import Number, Parser

logger = logging.getLogger(__name__)

ALLOWED_EXPRESSION_CHARS = r"^[0-9+\-*/().\s]+$"


def safe_eval(expression: object) -> Number:
    """Evaluate an arithmetic expression made of numbers, ``+ - * /`` and parentheses.

    Raises:
        InvalidArgumentError: ``expression`` is missing, not a string, or empty
        DisallowedCharactersError: ``expression`` contains anything else
        EvaluationError: the expression is malformed or divides by zero
    """
    if not isinstance(expression, str) or not expression:
        raise InvalidArgumentError("Expression must be a non-empty string")

    if re.fullmatch(ALLOWED_EXPRESSION_CHARS, expression, flags=re.ASCII) is None:
        raise DisallowedCharactersError("Invalid characters in expression")

    value = Parser(tokenize(expression)).parse()
    logger.debug("Evaluated %r -> %r", expression, value)
    return value
