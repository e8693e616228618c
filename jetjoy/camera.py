"""World-space vectors and the scrolling camera."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
DEFAULT_SCROLL_SPEED = 250.0


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass
class Camera:
    """A camera that scrolls horizontally at a constant speed (pixels per second)."""

    offset: Vec2 = Vec2()
    scroll_speed: float = DEFAULT_SCROLL_SPEED

    def update(self, delta_time: float) -> None:
        """Advance the camera by ``delta_time`` seconds."""
        self.offset = Vec2(self.offset.x + self.scroll_speed * delta_time, self.offset.y)