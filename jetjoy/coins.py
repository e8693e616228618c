"""Coins, the formations they fly in, and the manager that spawns them."""

from __future__ import annotations

import enum
import logging
import random
from collections.abc import Iterator

from jetjoy.animation import Animation, Renderer
from jetjoy.camera import WINDOW_WIDTH, Camera, Vec2

logger = logging.getLogger(__name__)

COIN_FRAMES = tuple(f"Image/Coin/coin{i}.png" for i in range(1, 9))
COIN_INTERVAL_MS = 100
COIN_SPACING = 40.0

RECTANGLE_COLUMNS = 9
RECTANGLE_ROWS = 3
STAIR_ROW_COUNTS = (6, 4, 2)
STAIR_ROW_SHIFT = 20.0

INITIAL_SPAWN_INTERVAL = 4.0
MIN_SPAWN_INTERVAL = 4.0
MAX_SPAWN_INTERVAL = 6.0
SPAWN_MARGIN = 50.0
DESPAWN_MARGIN = 100.0
MIN_Y = -265.5
MAX_Y = 250.0


class CoinPattern(enum.Enum):
    RECTANGLE = 0
    STAIRS = 1


class Coin(Animation):
    """A spinning coin."""

    def __init__(self, position: Vec2 = Vec2()) -> None:
        super().__init__(
            COIN_FRAMES,
            interval_ms=COIN_INTERVAL_MS,
            looping=True,
            playing=True,
            position=position,
        )


def _layout(pattern: CoinPattern) -> Iterator[Coin]:
    if pattern is CoinPattern.RECTANGLE:
        for row in range(RECTANGLE_ROWS):
            for col in range(RECTANGLE_COLUMNS):
                yield Coin(Vec2(col * COIN_SPACING, row * COIN_SPACING))
    else:
        for row, count in enumerate(STAIR_ROW_COUNTS):
            shift = row * STAIR_ROW_SHIFT
            for col in range(count):
                yield Coin(Vec2(shift + col * COIN_SPACING, row * COIN_SPACING))


class CoinGroup:
    """A formation of coins, laid out relative to the group's origin."""

    def __init__(self, pattern: CoinPattern | int) -> None:
        self.pattern = CoinPattern(pattern)
        self.position = Vec2()
        self.coins: list[Coin] = list(_layout(self.pattern))

    def translate(self, offset: Vec2) -> None:
        """Move every coin by ``offset``."""
        for coin in self.coins:
            coin.position = coin.position + offset


class CoinManager:
    """Spawns coin groups off the right edge every four to six seconds."""

    def __init__(
        self,
        camera: Camera | None = None,
        renderer: Renderer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.camera = camera if camera is not None else Camera()
        self.renderer = renderer
        self.rng = rng if rng is not None else random.Random()
        self.groups: list[CoinGroup] = []
        self.spawn_timer = 0.0
        self.spawn_interval = INITIAL_SPAWN_INTERVAL

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, spawning and dropping groups."""
        self.spawn_timer += delta_time
        if self.spawn_timer >= self.spawn_interval:
            self._spawn_group()
            self.spawn_timer = 0.0
            self.spawn_interval = self.rng.uniform(MIN_SPAWN_INTERVAL, MAX_SPAWN_INTERVAL)
            logger.debug("next coin group in %.3f s", self.spawn_interval)

        left_edge = self.camera.offset.x - WINDOW_WIDTH / 2 - DESPAWN_MARGIN
        self.groups = [group for group in self.groups if group.position.x >= left_edge]

    def _spawn_group(self) -> CoinGroup:
        pattern = self.rng.choice(list(CoinPattern))
        group = CoinGroup(pattern)
        spawn_x = self.camera.offset.x + WINDOW_WIDTH / 2 + SPAWN_MARGIN
        base_y = MIN_Y + self.rng.random() * (MAX_Y - MIN_Y)
        # Coins get absolute positions; the group itself stays at the origin.
        group.translate(Vec2(spawn_x, base_y))
        group.position = Vec2()
        logger.debug("spawned coin group at (%.1f, %.1f) with %s", spawn_x, base_y, pattern.name)
        self.groups.append(group)
        if self.renderer is not None:
            self.renderer.add(group)
        return group