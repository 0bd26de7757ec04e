"""
Color value model.
Immutable RGB triple with clamped components, hex encoding/decoding and a brightness metric.
"""
import math
import re
from dataclasses import dataclass, replace
from typing import Any, List, Optional

COMPONENT_MIN = 0
COMPONENT_MAX = 255

_SHORTHAND_HEX = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])", re.IGNORECASE)
_FULL_HEX = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


@dataclass(frozen=True)
class Color:
    """
    RGB color value.

    Components are clamped into [0, 255] on construction; missing, NaN or
    non-numeric values become 0. Use with_component() instead of mutating.
    """
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, self.clamp_component(getattr(self, name)))

    @staticmethod
    def clamp_component(value: Any) -> int:
        """Clamp a raw component value into [0, 255]."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return COMPONENT_MIN
        if isinstance(value, float) and math.isnan(value):
            return COMPONENT_MIN
        if value <= COMPONENT_MIN:
            return COMPONENT_MIN
        if value >= COMPONENT_MAX:
            return COMPONENT_MAX
        return int(value)

    @classmethod
    def from_hex(cls, hex_color: str) -> Optional["Color"]:
        """
        Create a color from a hex string.

        Accepts an optional leading '#', the 3-digit shorthand form ('03F' -> '0033FF')
        and the full 6-digit form, case-insensitive.

        Returns:
            The parsed Color, or None when the string can't be parsed.
        """
        if not isinstance(hex_color, str):
            return None

        shorthand = _SHORTHAND_HEX.fullmatch(hex_color)
        if shorthand:
            hex_color = "".join(digit * 2 for digit in shorthand.groups())

        match = _FULL_HEX.fullmatch(hex_color)
        if not match:
            return None

        r, g, b = (int(pair, 16) for pair in match.groups())
        return cls(r, g, b)

    def with_component(self, name: str, value: Any) -> "Color":
        """Return a copy with one component ('r', 'g' or 'b') replaced and re-clamped."""
        if name not in ("r", "g", "b"):
            raise ValueError(f"Unknown color component: {name}")
        return replace(self, **{name: value})

    def with_red(self, value: Any) -> "Color":
        return self.with_component("r", value)

    def with_green(self, value: Any) -> "Color":
        return self.with_component("g", value)

    def with_blue(self, value: Any) -> "Color":
        return self.with_component("b", value)

    def to_hex(self) -> str:
        """Encode as '#rrggbb' (lowercase)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def get_components(self) -> List[int]:
        """Components in fixed order: [r, g, b]."""
        return [self.r, self.g, self.b]

    @property
    def average(self) -> float:
        """Mean of the three components, used as a brightness proxy."""
        return (self.r + self.g + self.b) / 3
