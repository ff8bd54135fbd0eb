"""Utility functions for simplesvg.

This module provides utility functions including:

- Logging setup and configuration
- SVG attribute and number formatting
"""

from simplesvg.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    reset_logging,
)
from simplesvg.utils.markup import attribute, format_fixed, format_number

__all__ = [
    "RenderLogger",
    "RenderStats",
    "attribute",
    "configure_logging",
    "format_fixed",
    "format_number",
    "reset_logging",
]
