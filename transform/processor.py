"""Doubling transform over numeric sequences."""

from __future__ import annotations

import numbers
import threading
from collections.abc import Sequence
from concurrent.futures import Future

from secure_core.errors import ElementTypeError, InvalidArgumentError, ProcessingTimeout
from secure_core.schemas import DEFAULT_CONFIG, SecurityConfig

from .deadline import DeadlineGuard

# How many elements are processed between checks of the cancellation event.
CANCEL_CHECK_INTERVAL = 1024

Number = int | float


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def double_all(items: Sequence[object], cancelled: threading.Event | None = None) -> list[Number]:
    """Return a new list with every element of ``items`` doubled.

    Raises ElementTypeError on the first non-numeric element. When ``cancelled``
    becomes set the loop stops with ProcessingTimeout.
    """
    out: list[Number] = []
    for index, item in enumerate(items):
        if cancelled is not None and index % CANCEL_CHECK_INTERVAL == 0 and cancelled.is_set():
            raise ProcessingTimeout(f"Processing abandoned at element {index}")
        if not _is_number(item):
            raise ElementTypeError(
                f"All items must be numbers (item {index} is {type(item).__name__})",
                index=index,
            )
        out.append(item * 2)  # type: ignore[operator]
    return out


def process_data(data: object, config: SecurityConfig = DEFAULT_CONFIG) -> Future[list[Number]]:
    """Double every element of ``data`` under ``config.timeout_ms``.

    The argument check is synchronous and raises InvalidArgumentError. Element
    type errors and the deadline are reported through the returned Future as
    ElementTypeError and ProcessingTimeout.
    """
    if not _is_sequence(data):
        raise InvalidArgumentError("Data must be a sequence")

    items = list(data)  # type: ignore[call-overload]
    guard = DeadlineGuard(config.timeout_seconds)
    return guard.submit(lambda cancelled: double_all(items, cancelled))
