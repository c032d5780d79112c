"""Input sanitizer: validate a text value and normalise it."""

from __future__ import annotations

import re

from secure_core.errors import DisallowedCharactersError, InvalidArgumentError, TooLongError
from secure_core.schemas import DEFAULT_CONFIG, SecurityConfig


def process_input(text: object, config: SecurityConfig = DEFAULT_CONFIG) -> str:
    """Validate ``text`` against ``config`` and return it trimmed and upper-cased.

    Raises:
        InvalidArgumentError: ``text`` is missing, not a string, or blank
        TooLongError: ``text`` is longer than ``config.max_input_length``
        DisallowedCharactersError: ``text`` does not match ``config.allowed_chars``
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidArgumentError("Input must be a non-empty string")

    # Length applies to the raw value, before trimming.
    if len(text) > config.max_input_length:
        raise TooLongError(
            f"Input too long ({len(text)} > {config.max_input_length} characters)"
        )

    if re.fullmatch(config.allowed_chars, text) is None:
        raise DisallowedCharactersError("Input contains invalid characters")

    return text.strip().upper()
