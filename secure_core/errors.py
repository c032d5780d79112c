"""Error taxonomy shared by the sanitizer, evaluator and transformer."""

from __future__ import annotations


class SecureAppError(Exception):
    """Base error for all operation failures."""


class InvalidArgumentError(SecureAppError, TypeError):
    """Raised when an argument is missing or has the wrong type."""


class TooLongError(SecureAppError, ValueError):
    """Raised when text exceeds the configured maximum length."""


class DisallowedCharactersError(SecureAppError, ValueError):
    """Raised when text contains characters outside the allowed set."""


class ElementTypeError(SecureAppError, TypeError):
    """Raised when an element of a collection is not numeric."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class EvaluationError(SecureAppError, ValueError):
    """Raised when an arithmetic expression cannot be evaluated."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class ProcessingTimeout(SecureAppError, TimeoutError):
    """Raised when an operation does not finish before its deadline."""
