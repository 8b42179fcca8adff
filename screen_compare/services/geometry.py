from __future__ import annotations
import math
from numbers import Real

from screen_compare.utils.typing import DerivedScreen, Dimensions, ScreenSpec
from screen_compare.utils.fields import parse_number

ZERO = Dimensions(0.0, 0.0, 0.0)

def _usable(value) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )

def calculate(diagonal: float, aspect_x: float, aspect_y: float) -> Dimensions:
    """
    Width, height and area (inches) of a screen from its diagonal and aspect ratio.
    - Never raises: a non-positive or non-numeric argument yields all zeros.
    - No rounding; display precision is up to the caller.
    """
    if not (_usable(diagonal) and _usable(aspect_x) and _usable(aspect_y)):
        return ZERO

    ratio = aspect_x / aspect_y
    height = diagonal / math.sqrt(ratio * ratio + 1)
    width = ratio * height
    return Dimensions(width=width, height=height, area=width * height)

def derive(spec: ScreenSpec) -> DerivedScreen:
    diagonal = parse_number(spec.diagonal)
    aspect_x = parse_number(spec.aspect_x)
    aspect_y = parse_number(spec.aspect_y)
    dims = calculate(diagonal, aspect_x, aspect_y)
    return DerivedScreen(
        id=spec.id,
        diagonal=diagonal,
        aspect_x=aspect_x,
        aspect_y=aspect_y,
        color=spec.color,
        width=dims.width,
        height=dims.height,
        area=dims.area,
    )
