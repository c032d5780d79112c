"""Runners for the demo sequence and for batches of cases."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import yaml
from tqdm import tqdm

from arith import safe_eval
from sanitizer import process_input
from secure_core.schemas import DEFAULT_CONFIG, BaseSchema, SecurityConfig
from transform import process_data

from driver.config import DriverConfig
from driver.failure_taxonomy import FailureAnalyzer

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    name: str
    success: bool
    value: Any = None
    error: str | None = None
    error_type: str | None = None
    runtime_ms: float = 0.0
    # Printable form of value, rendered while the step is still guarded.
    text: str = ""


def format_value(value: Any) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)


def _timed(name: str, operation: Callable[[], Any], analyzer: FailureAnalyzer) -> tuple[StepResult, Exception | None]:
    start = time.perf_counter()
    try:
        value = operation()
        text = format_value(value)
    except Exception as exc:  # noqa: BLE001 - classified and handed back to the caller
        runtime_ms = (time.perf_counter() - start) * 1000
        failure_type = analyzer.record_failure(exc)
        result = StepResult(name, False, None, str(exc), failure_type.value, runtime_ms)
        return result, exc
    runtime_ms = (time.perf_counter() - start) * 1000
    return StepResult(name, True, value, runtime_ms=runtime_ms, text=text), None


class DemoRunner:
    """Runs the sanitizer, evaluator and transformer in order with sample fixtures."""

    def __init__(self, config: DriverConfig | None = None):
        self.config = config or DriverConfig()
        self.analyzer = FailureAnalyzer()
        self.results: list[StepResult] = []

    def steps(self) -> list[tuple[str, Callable[[], Any]]]:
        security = self.config.security
        return [
            ("Processed input", lambda: process_input(self.config.sample_input, security)),
            ("Expression result", lambda: safe_eval(self.config.sample_expression)),
            ("Processed data", lambda: process_data(self.config.sample_data, security).result()),
        ]

    def run(self, on_step: Callable[[StepResult], None] | None = None) -> list[StepResult]:
        """Run every step, stopping at the first failure.

        ``on_step`` is called after each successful step. The exception of a
        failing step is re-raised unchanged; its StepResult is still appended
        to ``self.results``.
        """
        self.results = []
        logger.info("Starting secure application...")

        for name, operation in self.steps():
            result, error = _timed(name, operation, self.analyzer)
            self.results.append(result)
            if error is not None:
                logger.info("Step %r failed after %.1fms: %s", name, result.runtime_ms, result.error)
                raise error
            logger.debug("Step %r finished in %.1fms", name, result.runtime_ms)
            if on_step is not None:
                on_step(result)

        logger.info("Application completed successfully!")
        return self.results


class BatchCase(BaseSchema):
    op: Literal["sanitize", "eval", "double"]
    value: Any = None


def load_cases(yaml_path: str | Path) -> list[BatchCase]:
    """Load a YAML list of ``{op, value}`` cases."""
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Cases file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, list) or not data:
        raise ValueError(f"Expected a non-empty list of cases in {yaml_path}")

    try:
        return [BatchCase.from_dict(item) for item in data]
    except Exception as e:
        raise ValueError(f"Invalid case in {yaml_path}: {e}") from e


class BatchRunner:
    """Runs every case, continuing after failures, and counts failures by type."""

    def __init__(self, security: SecurityConfig = DEFAULT_CONFIG, show_progress: bool = True):
        self.security = security
        self.show_progress = show_progress
        self.analyzer = FailureAnalyzer()

    def _operation(self, case: BatchCase) -> Callable[[], Any]:
        if case.op == "sanitize":
            return lambda: process_input(case.value, self.security)
        if case.op == "eval":
            return lambda: safe_eval(case.value)
        return lambda: process_data(case.value, self.security).result()

    def run(
        self,
        cases: Sequence[BatchCase],
        on_result: Callable[[int, StepResult], None] | None = None,
    ) -> list[StepResult]:
        results: list[StepResult] = []
        pbar = tqdm(cases, desc="Cases", unit="case", disable=not self.show_progress, leave=False)
        for index, case in enumerate(pbar):
            result, _ = _timed(case.op, self._operation(case), self.analyzer)
            results.append(result)
            if on_result is not None:
                on_result(index, result)

        failed = sum(1 for r in results if not r.success)
        logger.info("Batch finished: %d case(s), %d failed", len(results), failed)
        return results
