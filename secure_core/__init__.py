"""
Secure Core Module

Shared types for the secureapp operations.

This module provides:
- The error taxonomy raised by every operation
- The immutable SecurityConfig passed explicitly to each operation
- A pydantic BaseSchema with JSON/dict helpers
"""

__version__ = "0.1.0"

from .errors import (
    DisallowedCharactersError,
    ElementTypeError,
    EvaluationError,
    InvalidArgumentError,
    ProcessingTimeout,
    SecureAppError,
    TooLongError,
)
from .schemas import DEFAULT_CONFIG, BaseSchema, SecurityConfig

__all__ = [
    "DEFAULT_CONFIG",
    "BaseSchema",
    "SecurityConfig",
    "SecureAppError",
    "InvalidArgumentError",
    "TooLongError",
    "DisallowedCharactersError",
    "ElementTypeError",
    "EvaluationError",
    "ProcessingTimeout",
]
