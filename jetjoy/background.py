"""Scrolling lab background and the title logo."""

from __future__ import annotations

import enum
from typing import NamedTuple

from jetjoy.camera import WINDOW_HEIGHT, WINDOW_WIDTH, Vec2

SCROLL_STEP = 4.0
INITIAL_IMAGES = (
    "Image/Home/start.png",
    "Image/Background/Lab/lab1.png",
    "Image/Background/Lab/lab2.png",
)
LOOPING_IMAGES = (
    "Image/Background/Lab/lab1.png",
    "Image/Background/Lab/lab2.png",
)
LOOPING_TILE_COUNT = 3

LOGO_IMAGE = "Image/Home/bgicon.png"
LOGO_RISE_STEP = 7.0
LOGO_OFF_SCREEN_Y = 1200.0


class BackgroundPhase(enum.Enum):
    INITIAL = enum.auto()
    LOOPING = enum.auto()


class Tile(NamedTuple):
    """One background image and the x coordinate of its centre."""

    image: str
    x: float


class Background:
    """Scrolls the start screen away, then loops the lab images forever."""

    def __init__(self, window_width: float = WINDOW_WIDTH, window_height: float = WINDOW_HEIGHT) -> None:
        self.window_width = float(window_width)
        self.window_height = float(window_height)
        self.phase = BackgroundPhase.INITIAL
        self.scroll_x = 0.0

    def update(self) -> None:
        self.scroll_x -= SCROLL_STEP
        if self.scroll_x > -self.window_width:
            return
        if self.phase is BackgroundPhase.INITIAL:
            self.phase = BackgroundPhase.LOOPING
            self.scroll_x = 0.0
        else:
            self.scroll_x += self.window_width

    def tiles(self) -> list[Tile]:
        """The images to draw, each stretched to the window, left to right."""
        if self.phase is BackgroundPhase.INITIAL:
            images = INITIAL_IMAGES
        else:
            images = tuple(LOOPING_IMAGES[i % len(LOOPING_IMAGES)] for i in range(LOOPING_TILE_COUNT))
        return [Tile(image, self.scroll_x + i * self.window_width) for i, image in enumerate(images)]


class Logo:
    """The title logo; it rises off the screen once Enter is pressed."""

    def __init__(
        self,
        image_size: Vec2,
        window_width: float = WINDOW_WIDTH,
        window_height: float = WINDOW_HEIGHT,
    ) -> None:
        self.image = LOGO_IMAGE
        self.image_size = image_size
        self.position = Vec2(
            (window_width - image_size.x) / 2 + 35,
            (window_height - image_size.y) / 2 - 80,
        )
        self.is_moving = False

    def update(self, enter_pressed: bool) -> None:
        if enter_pressed:
            self.is_moving = True
        if self.is_moving:
            self.position = Vec2(self.position.x, self.position.y + LOGO_RISE_STEP)

    def is_off_screen(self) -> bool:
        return self.position.y + self.image_size.y > LOGO_OFF_SCREEN_Y