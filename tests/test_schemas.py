import pytest
from pydantic import ValidationError

from secure_core.errors import (
    ElementTypeError,
    EvaluationError,
    InvalidArgumentError,
    ProcessingTimeout,
    SecureAppError,
)
from secure_core.schemas import DEFAULT_CONFIG, SecurityConfig


def test_default_config_values() -> None:
    assert DEFAULT_CONFIG.max_input_length == 1000
    assert DEFAULT_CONFIG.timeout_ms == 5000
    assert DEFAULT_CONFIG.timeout_seconds == 5.0
    assert DEFAULT_CONFIG.allowed_chars == r"^[a-zA-Z0-9\s\-_]+$"


def test_config_is_frozen() -> None:
    config = SecurityConfig()
    with pytest.raises(ValidationError):
        config.max_input_length = 5  # type: ignore[misc]


def test_config_round_trips_through_dict() -> None:
    data: dict[str, object] = {
        "max_input_length": 10,
        "allowed_chars": r"^[a-z]+$",
        "timeout_ms": 0,
    }
    config = SecurityConfig.from_dict(data)
    assert config.to_dict() == data
    assert config.timeout_seconds == 0


def test_config_rejects_bad_pattern() -> None:
    with pytest.raises(ValidationError):
        SecurityConfig(allowed_chars="[unclosed")


@pytest.mark.parametrize("field, value", [("max_input_length", 0), ("timeout_ms", -1)])
def test_config_rejects_out_of_range(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        SecurityConfig(**{field: value})


def test_errors_keep_builtin_bases() -> None:
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(ElementTypeError, TypeError)
    assert issubclass(EvaluationError, ValueError)
    assert issubclass(ProcessingTimeout, TimeoutError)
    for exc_type in (InvalidArgumentError, ElementTypeError, EvaluationError, ProcessingTimeout):
        assert issubclass(exc_type, SecureAppError)
