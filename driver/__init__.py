"""
Driver Module

Sequential demo driver and CLI.

This module provides:
- YAML-based configuration loading
- DemoRunner: run the sanitizer, evaluator and transformer in order
- BatchRunner: run a file of cases and summarise failures
- CLI (typer) as the process entry point
"""

__version__ = "0.1.0"
