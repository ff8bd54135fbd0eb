"""Configuration management for simplesvg.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, scene files or defaults.

Key classes:
- LayoutConfig: Canvas size, origin corner, scale and offset
- OutputConfig: SVG output settings
- LoggingConfig: Logging settings
- SimpleSvgSettings: Main application settings
"""

from simplesvg.config.settings import (
    LayoutConfig,
    LoggingConfig,
    OriginName,
    OutputConfig,
    SimpleSvgSettings,
    get_default_settings,
)

__all__ = [
    "LayoutConfig",
    "LoggingConfig",
    "OriginName",
    "OutputConfig",
    "SimpleSvgSettings",
    "get_default_settings",
]
