"""
Sanitizer Module

Validation and normalisation of short free-text values.
"""

__version__ = "0.1.0"

from .inputs import process_input

__all__ = ["process_input"]
