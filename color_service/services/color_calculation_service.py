"""
Color Calculation Service
Parsing helpers and color algorithms: hex/RGB conversion, brightness comparison and interpolation.

Parsers never raise on bad input; they return None and leave it to the caller
to reject the request.
"""
import math
import re
from typing import List, Optional

from color_service.models.color import Color

RGB_SEPARATOR = "-"

_LEADING_INTEGER = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_int(value: str) -> Optional[int]:
    """
    Parse the leading integer of a string.

    Leading whitespace and a sign are allowed and trailing characters are
    ignored, so '42px' parses as 42. A '0x' prefix switches to hexadecimal
    ('0x1F' parses as 31).

    Returns:
        The integer, or None if the string doesn't start with one or has
        more digits than int() will convert.
    """
    if not isinstance(value, str):
        return None
    match = _LEADING_INTEGER.match(value)
    if not match:
        return None

    sign, hex_digits, decimal_digits = match.groups()
    try:
        if hex_digits is not None:
            if not hex_digits:
                return None
            number = int(hex_digits, 16)
        else:
            number = int(decimal_digits)
    except ValueError:
        return None
    return -number if sign == "-" else number


def hex_to_rgb(hex_color: str) -> Optional[List[int]]:
    """Convert a hex string to [r, g, b], or None if it can't be parsed."""
    color = Color.from_hex(hex_color)
    if color is None:
        return None
    return color.get_components()


def parse_rgb_string(rgb: str) -> Optional[Color]:
    """
    Parse an 'R-G-B' string such as '180-218-85'.

    Exactly three components are required and each must start with an integer.
    Out-of-range components are clamped by Color.

    Returns:
        The parsed Color, or None when the string is malformed.
    """
    if not isinstance(rgb, str):
        return None

    parts = rgb.split(RGB_SEPARATOR)
    if len(parts) != 3:
        return None

    components = [parse_int(part) for part in parts]
    if any(component is None for component in components):
        return None

    return Color(*components)


def rgb_to_hex(rgb: str) -> Optional[str]:
    """Convert an 'R-G-B' string to '#rrggbb', or None if it can't be parsed."""
    color = parse_rgb_string(rgb)
    if color is None:
        return None
    return color.to_hex()


def brightest(color1: Color, color2: Color) -> Color:
    """Return the brighter color by component average; color1 wins ties."""
    return color1 if color1.average >= color2.average else color2


def interpolate(start: Color, end: Color, steps: int) -> List[Color]:
    """
    Linearly blend two colors over a number of divisions.

    Produces steps - 1 intermediate colors ordered from start to end; both
    endpoints are excluded. Each channel is floor(diff * (i / steps) + start).
    steps of 1 or less yields an empty list.
    """
    r_diff = end.r - start.r
    g_diff = end.g - start.g
    b_diff = end.b - start.b

    result = []
    for i in range(1, steps):
        fraction = i / steps
        result.append(Color(
            math.floor(r_diff * fraction + start.r),
            math.floor(g_diff * fraction + start.g),
            math.floor(b_diff * fraction + start.b),
        ))
    return result
