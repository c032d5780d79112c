import threading
import time

import pytest

from secure_core.errors import ElementTypeError, InvalidArgumentError, ProcessingTimeout
from secure_core.schemas import SecurityConfig
from transform import DeadlineGuard, double_all, process_data

# Large enough that a zero deadline always fires before the transform finishes.
TIMEOUT_INPUT_SIZE = 1_000_000


def test_process_data_doubles_elements():
    future = process_data([1, 2, 3, 4, 5])
    assert future.result(timeout=5) == [2, 4, 6, 8, 10]


def test_process_data_preserves_length_and_number_types():
    result = process_data((0, -1.5, 2.25, 10**20)).result(timeout=5)
    assert result == [0, -3.0, 4.5, 2 * 10**20]
    assert isinstance(result, list)


def test_process_data_empty_sequence():
    assert process_data([]).result(timeout=5) == []


def test_process_data_type_error_through_future():
    future = process_data([1, "x", 3])
    with pytest.raises(ElementTypeError) as excinfo:
        future.result(timeout=5)
    assert excinfo.value.index == 1
    assert isinstance(excinfo.value, TypeError)


@pytest.mark.parametrize("item", [True, None, "2", [1], complex(1, 1)])
def test_process_data_rejects_non_numeric_items(item):
    with pytest.raises(ElementTypeError):
        process_data([item]).result(timeout=5)


@pytest.mark.parametrize("value", [None, 5, "12345", b"abc", {"a": 1}, {1, 2}])
def test_process_data_rejects_non_sequence_synchronously(value):
    with pytest.raises(InvalidArgumentError):
        process_data(value)


def test_process_data_times_out_with_zero_deadline():
    config = SecurityConfig(timeout_ms=0)
    future = process_data(list(range(TIMEOUT_INPUT_SIZE)), config)
    with pytest.raises(ProcessingTimeout):
        future.result(timeout=30)


def test_double_all_stops_when_cancelled():
    cancelled = threading.Event()
    cancelled.set()
    with pytest.raises(ProcessingTimeout):
        double_all([1, 2, 3], cancelled)


def test_deadline_guard_returns_result_before_deadline():
    guard = DeadlineGuard(5.0)
    future = guard.submit(lambda cancelled: "done")
    assert future.result(timeout=5) == "done"


def test_deadline_guard_sets_cancel_event_on_expiry():
    seen = threading.Event()

    def slow(cancelled):
        if cancelled.wait(5):
            seen.set()
        return "late"

    future = DeadlineGuard(0.05).submit(slow)
    with pytest.raises(ProcessingTimeout):
        future.result(timeout=5)
    assert seen.wait(5)


def test_deadline_guard_resolves_only_once():
    def late(cancelled):
        time.sleep(0.2)
        return "late"

    future = DeadlineGuard(0.01).submit(late)
    with pytest.raises(ProcessingTimeout):
        future.result(timeout=5)
    time.sleep(0.4)
    assert isinstance(future.exception(), ProcessingTimeout)


def test_deadline_guard_rejects_negative_timeout():
    with pytest.raises(ValueError):
        DeadlineGuard(-1)
