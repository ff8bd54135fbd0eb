"""Document layout and user-space to SVG-space coordinate translation.

SVG's vertical axis grows downward. A layout names which canvas corner is the
user-space origin, so ``BOTTOM_LEFT`` gives conventional Cartesian coordinates
by flipping y, and the right-hand corners flip x.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from simplesvg.domain.geometry import Dimensions, Point, Rect


class Origin(Enum):
    """Canvas corner used as the user-space origin."""

    TOP_LEFT = auto()
    BOTTOM_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_RIGHT = auto()

    @property
    def flips_x(self) -> bool:
        return self in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)

    @property
    def flips_y(self) -> bool:
        return self in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)


@dataclass(frozen=True)
class Layout:
    """Dimensions, origin corner, scale and origin offset of a document.

    Attributes:
        dimensions: Canvas size in SVG units
        origin: Corner acting as user-space origin
        scale: Uniform scale from user units to SVG units
        origin_offset: User-space offset added before scaling
    """

    dimensions: Dimensions = field(default_factory=lambda: Dimensions(400, 300))
    origin: Origin = Origin.BOTTOM_LEFT
    scale: float = 1.0
    origin_offset: Point = field(default_factory=Point)


def translate_x(x: float, layout: Layout) -> float:
    """Convert a user-space x coordinate to SVG space."""
    if layout.origin.flips_x:
        return layout.dimensions.width - (x + layout.origin_offset.x) * layout.scale
    return (layout.origin_offset.x + x) * layout.scale


def translate_y(y: float, layout: Layout) -> float:
    """Convert a user-space y coordinate to SVG space."""
    if layout.origin.flips_y:
        return layout.dimensions.height - (y + layout.origin_offset.y) * layout.scale
    return (layout.origin_offset.y + y) * layout.scale


def translate_scale(value: float, layout: Layout) -> float:
    """Scale a length (width, height, radius). Lengths are never flipped."""
    return value * layout.scale


def translate_point(point: Point, layout: Layout) -> Point:
    return Point(translate_x(point.x, layout), translate_y(point.y, layout))


def translate_rect(rect: Rect, layout: Layout) -> Rect:
    """Map both corners of a rectangle to SVG space.

    Flipped axes swap which corner is the minimum, so the result is rebuilt
    from the two mapped corners rather than copied field by field.
    """
    result = Rect.at(translate_point(rect.min_pt, layout))
    result.include(translate_point(rect.max_pt, layout))
    return result
