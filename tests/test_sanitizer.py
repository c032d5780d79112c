import pytest

from sanitizer import process_input
from secure_core.errors import DisallowedCharactersError, InvalidArgumentError, TooLongError
from secure_core.schemas import SecurityConfig


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", "HELLO WORLD"),
        ("  padded_value-1  ", "PADDED_VALUE-1"),
        ("already UPPER", "ALREADY UPPER"),
        ("tab\tseparated\n", "TAB\tSEPARATED"),
    ],
)
def test_process_input_trims_and_uppercases(text: str, expected: str) -> None:
    assert process_input(text) == expected


@pytest.mark.parametrize(
    "text",
    ["  mixed Case_text-42 ", "\tpadded\n", "\n\nline one\tline two \r\n", "x", "ALL-CAPS_1"],
)
def test_process_input_is_idempotent(text: str) -> None:
    once = process_input(text)
    assert process_input(once) == once


@pytest.mark.parametrize("text", ["   ", "\t", "\n", " \t\r\n "])
def test_process_input_rejects_blank_text(text: str) -> None:
    with pytest.raises(InvalidArgumentError):
        process_input(text)


@pytest.mark.parametrize("value", [None, "", 42, ["a"], b"bytes"])
def test_process_input_rejects_missing_or_non_text(value: object) -> None:
    with pytest.raises(InvalidArgumentError):
        process_input(value)


def test_process_input_rejects_too_long() -> None:
    with pytest.raises(TooLongError):
        process_input("a" * 1001)


def test_process_input_accepts_exact_max_length() -> None:
    assert process_input("a" * 1000) == "A" * 1000


def test_length_is_checked_before_trimming() -> None:
    config = SecurityConfig(max_input_length=5)
    with pytest.raises(TooLongError):
        process_input("  abc  ", config)


@pytest.mark.parametrize("text", ["<script>", "drop;table", "quote'", "café", "a.b"])
def test_process_input_rejects_disallowed_characters(text: str) -> None:
    with pytest.raises(DisallowedCharactersError):
        process_input(text)


def test_process_input_uses_configured_pattern() -> None:
    config = SecurityConfig(allowed_chars=r"^[a-z]+$")
    assert process_input("abc", config) == "ABC"
    with pytest.raises(DisallowedCharactersError):
        process_input("abc1", config)
