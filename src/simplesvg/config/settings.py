"""Configuration settings for simplesvg."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from simplesvg.domain.geometry import Dimensions, Point
from simplesvg.domain.layout import Layout, Origin


class OriginName(str, Enum):
    """Canvas corner used as the user-space origin."""

    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"

    def to_origin(self) -> Origin:
        return Origin[self.name]


class LayoutConfig(BaseModel):
    """Canvas layout used when translating user coordinates to SVG space."""

    width: float = Field(
        default=400.0,
        gt=0,
        description="Canvas width in SVG units",
    )
    height: float = Field(
        default=300.0,
        gt=0,
        description="Canvas height in SVG units",
    )
    origin: OriginName = Field(
        default=OriginName.BOTTOM_LEFT,
        description="Canvas corner acting as the user-space origin",
    )
    scale: float = Field(
        default=1.0,
        gt=0,
        description="Uniform scale from user units to SVG units",
    )
    offset_x: float = Field(
        default=0.0,
        description="Horizontal origin offset in user units",
    )
    offset_y: float = Field(
        default=0.0,
        description="Vertical origin offset in user units",
    )

    def to_layout(self) -> Layout:
        """Build the domain Layout described by this config."""
        return Layout(
            dimensions=Dimensions(self.width, self.height),
            origin=self.origin.to_origin(),
            scale=self.scale,
            origin_offset=Point(self.offset_x, self.offset_y),
        )


class OutputConfig(BaseModel):
    """Configuration for SVG output."""

    apply_layout: bool = Field(
        default=False,
        description="Translate shape geometry through the layout before writing",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of written files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SimpleSvgSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SimpleSvgSettings:
    """Get default application settings."""
    return SimpleSvgSettings()
