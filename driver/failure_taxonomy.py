"""Failure classification and counting."""

from enum import Enum

from secure_core.errors import (
    DisallowedCharactersError,
    ElementTypeError,
    EvaluationError,
    InvalidArgumentError,
    ProcessingTimeout,
    TooLongError,
)


class FailureType(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    TOO_LONG = "too_long"
    DISALLOWED_CHARACTERS = "disallowed_characters"
    ELEMENT_TYPE = "element_type"
    EVALUATION_ERROR = "evaluation_error"
    TIMEOUT = "timeout"
    OTHER = "other"


_BY_EXCEPTION: list[tuple[type[BaseException], FailureType]] = [
    (InvalidArgumentError, FailureType.INVALID_ARGUMENT),
    (TooLongError, FailureType.TOO_LONG),
    (DisallowedCharactersError, FailureType.DISALLOWED_CHARACTERS),
    (ElementTypeError, FailureType.ELEMENT_TYPE),
    (EvaluationError, FailureType.EVALUATION_ERROR),
    (ProcessingTimeout, FailureType.TIMEOUT),
]


class FailureAnalyzer:
    def __init__(self):
        self.failures: dict[FailureType, int] = {ft: 0 for ft in FailureType}

    def classify_error(self, error: BaseException) -> FailureType:
        for exc_type, failure_type in _BY_EXCEPTION:
            if isinstance(error, exc_type):
                return failure_type
        return FailureType.OTHER

    def record_failure(self, error: BaseException) -> FailureType:
        failure_type = self.classify_error(error)
        self.failures[failure_type] += 1
        return failure_type

    def total(self) -> int:
        return sum(self.failures.values())

    def get_failure_stats(self) -> dict[FailureType, int]:
        return dict(self.failures)

    def get_top_failures(self, n: int = 5) -> list[tuple[str, int]]:
        sorted_failures = sorted(
            ((ft, count) for ft, count in self.failures.items() if count),
            key=lambda x: x[1],
            reverse=True,
        )
        return [(ft.value, count) for ft, count in sorted_failures[:n]]
