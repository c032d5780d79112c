"""
Transform Module

Deadline-bounded numeric transforms.

This module provides:
- DeadlineGuard: race a computation against a wall-clock timer
- process_data: double every element of a numeric sequence, deferred via a Future
"""

__version__ = "0.1.0"

from .deadline import DeadlineGuard
from .processor import double_all, process_data

__all__ = ["DeadlineGuard", "double_all", "process_data"]
