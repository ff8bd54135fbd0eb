"""Low-level SVG text helpers.

Attributes are written as ``name="value" `` (note the trailing space) with no
escaping of the value.
"""

from typing import Any


def format_number(value: float) -> str:
    """Render a number the way a default C++ output stream does.

    Integers are written as-is; reals use six significant digits and drop
    trailing zeros (``50.0 -> "50"``, ``0.25 -> "0.25"``).
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_fixed(value: float) -> str:
    """Render a number in fixed notation with six decimals."""
    return f"{value:f}"


def attribute(name: str, value: Any, unit: str = "") -> str:
    if isinstance(value, (int, float)):
        value = format_number(value)
    return f'{name}="{value}{unit}" '


def elem_start(name: str) -> str:
    return f"\t<{name} "


def elem_end(name: str) -> str:
    return f"</{name}>\n"


def empty_elem_end() -> str:
    return "/>\n"


def point_list(points: list[Any]) -> str:
    """Render points as ``x,y `` pairs, each followed by a space."""
    return "".join(f"{format_number(p.x)},{format_number(p.y)} " for p in points)
