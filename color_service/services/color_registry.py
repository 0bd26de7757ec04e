"""
Color Registry
Holds the bounded list of recently submitted colors and generates random colors.
"""
import random
import threading
from collections import deque
from typing import List

from color_service.core.logging_config import get_logger
from color_service.models.color import Color, COMPONENT_MAX, COMPONENT_MIN

DEFAULT_CAPACITY = 5


class ColorRegistry:
    """
    Bounded FIFO list of hex-encoded colors, oldest first.

    One instance is created at application startup and shared by every request.
    When the list is full, pushing a color evicts exactly the oldest entry.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Registry capacity must be at least 1, got {capacity}")

        self.logger = get_logger(__name__)
        self._colors = deque(maxlen=capacity)
        # push and list may be called from worker threads
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._colors.maxlen

    @property
    def list(self) -> List[str]:
        """Snapshot of the stored colors, most recently added last."""
        with self._lock:
            return list(self._colors)

    def push(self, color_hex: str) -> None:
        """Append a hex color, evicting the oldest entry when the list is full."""
        with self._lock:
            if len(self._colors) == self._colors.maxlen:
                self.logger.debug(f"Recent colors full, evicting {self._colors[0]}")
            self._colors.append(color_hex)
        self.logger.info(f"Added {color_hex} to recent colors")

    def clear(self) -> None:
        with self._lock:
            self._colors.clear()

    def get_random_color(self) -> Color:
        """Generate a color with each component drawn uniformly from [0, 255]."""
        return Color(
            self._random_unsigned_byte(),
            self._random_unsigned_byte(),
            self._random_unsigned_byte(),
        )

    @staticmethod
    def _random_unsigned_byte() -> int:
        return random.randint(COMPONENT_MIN, COMPONENT_MAX)

    def __len__(self) -> int:
        with self._lock:
            return len(self._colors)
