"""CLI interface for the secure application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from tqdm import tqdm

from arith import safe_eval
from sanitizer import process_input
from transform import process_data

from driver.config import DriverConfig, load_config
from driver.runner import BatchRunner, DemoRunner, StepResult, format_value, load_cases

app = typer.Typer(help="Secure input processing CLI")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(1)


def _load_driver_config(config_path: str | None) -> DriverConfig:
    if config_path is None:
        return DriverConfig()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise _fail(str(e))


def _parse_number(text: str) -> object:
    for kind in (int, float):
        try:
            return kind(text)
        except ValueError:
            continue
    # Left as text so the transform reports it as a bad element.
    return text


@app.command()
def demo(
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to driver YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    """Run the sanitizer, evaluator and transformer on the sample fixtures."""
    _configure_logging(verbose)
    config = _load_driver_config(config_path)

    def report(result: StepResult) -> None:
        typer.echo(f"{result.name}: {result.text}")

    try:
        DemoRunner(config).run(on_step=report)
    except Exception as e:
        raise _fail(str(e))


@app.command()
def sanitize(
    text: str = typer.Argument(..., help="Text to validate and normalise"),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to driver YAML config"),
) -> None:
    """Validate TEXT and print it trimmed and upper-cased."""
    config = _load_driver_config(config_path)
    try:
        typer.echo(process_input(text, config.security))
    except Exception as e:
        raise _fail(str(e))


@app.command()
def calc(
    expression: str = typer.Argument(..., help="Arithmetic expression, e.g. '(2+3)*4'"),
) -> None:
    """Evaluate an arithmetic EXPRESSION."""
    try:
        typer.echo(format_value(safe_eval(expression)))
    except Exception as e:
        raise _fail(str(e))


@app.command()
def double(
    values: list[str] = typer.Argument(..., help="Numbers to double"),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to driver YAML config"),
) -> None:
    """Double every number in VALUES under the configured deadline."""
    config = _load_driver_config(config_path)
    data = [_parse_number(v) for v in values]
    try:
        typer.echo(format_value(process_data(data, config.security).result()))
    except Exception as e:
        raise _fail(str(e))


@app.command()
def batch(
    cases_path: str = typer.Argument(..., help="YAML list of {op, value} cases"),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to driver YAML config"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar"),
) -> None:
    """Run every case in CASES_PATH and summarise failures."""
    config = _load_driver_config(config_path)
    try:
        cases = load_cases(cases_path)
    except (FileNotFoundError, ValueError) as e:
        raise _fail(str(e))

    def report(index: int, result: StepResult) -> None:
        if result.success:
            tqdm.write(f"[{index}] {result.name}: {result.text}")
        else:
            tqdm.write(f"[{index}] {result.name}: FAILED ({result.error_type}) {result.error}")

    runner = BatchRunner(config.security, show_progress=progress)
    results = runner.run(cases, on_result=report)

    failed = runner.analyzer.total()
    typer.echo(f"\n{len(results) - failed}/{len(results)} case(s) succeeded")
    if failed:
        for failure_type, count in runner.analyzer.get_top_failures():
            typer.echo(f"   {failure_type}: {count}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
