"""Electric zapper obstacles and the manager that spawns them."""

from __future__ import annotations

import enum
import random

from jetjoy.animation import Animation, Renderer
from jetjoy.camera import WINDOW_WIDTH, Camera, Vec2

VERTICAL_FRAMES = tuple(f"Image/Zapper/ver zapper{i}.png" for i in range(1, 5))
HORIZONTAL_FRAMES = tuple(f"Image/Zapper/zapper{i}.png" for i in range(1, 5))
ZAPPER_INTERVAL_MS = 100

INITIAL_SPAWN_INTERVAL = 1.0
MIN_SPAWN_INTERVAL = 2.0
MAX_SPAWN_INTERVAL = 5.0
MIN_BATCH = 3
MAX_BATCH = 5
SPACING = 200.0
SPAWN_MARGIN = 50.0
DESPAWN_MARGIN = 100.0
MIN_Y = -265.5
MAX_Y = 250.0


class ZapperType(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Zapper:
    """A stationary obstacle at a fixed world position."""

    def __init__(self, zapper_type: ZapperType, position: Vec2) -> None:
        self.type = zapper_type
        frames = VERTICAL_FRAMES if zapper_type is ZapperType.VERTICAL else HORIZONTAL_FRAMES
        self.animation = Animation(
            frames,
            interval_ms=ZAPPER_INTERVAL_MS,
            looping=True,
            playing=True,
            position=position,
        )

    @property
    def position(self) -> Vec2:
        return self.animation.position

    def update(self, delta_time: float) -> None:
        """Run the sparking animation; position is left to the scrolling camera."""
        self.animation.advance(delta_time * 1000.0)


class ZapperManager:
    """Spawns batches of zappers off the right edge every two to five seconds."""

    def __init__(
        self,
        camera: Camera | None = None,
        renderer: Renderer | None = None,
        rng: random.Random | None = None,
        min_y: float = MIN_Y,
        max_y: float = MAX_Y,
    ) -> None:
        self.camera = camera if camera is not None else Camera()
        self.renderer = renderer
        self.rng = rng if rng is not None else random.Random()
        self.min_y = min_y
        self.max_y = max_y
        self.zappers: list[Zapper] = []
        self.spawn_timer = 0.0
        self.spawn_interval = INITIAL_SPAWN_INTERVAL

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, spawning and dropping zappers."""
        self.spawn_timer += delta_time
        if self.spawn_timer >= self.spawn_interval:
            self._spawn_batch()
            self.spawn_timer = 0.0
            self.spawn_interval = self.rng.uniform(MIN_SPAWN_INTERVAL, MAX_SPAWN_INTERVAL)

        left_edge = self.camera.offset.x - WINDOW_WIDTH / 2 - DESPAWN_MARGIN
        self.zappers = [z for z in self.zappers if z.position.x >= left_edge]

    def _spawn_batch(self) -> list[Zapper]:
        count = self.rng.randint(MIN_BATCH, MAX_BATCH)
        base_y = self.min_y + self.rng.random() * (self.max_y - self.min_y)
        spawn_x = self.camera.offset.x + WINDOW_WIDTH / 2 + SPAWN_MARGIN
        batch = [
            Zapper(self.rng.choice(list(ZapperType)), Vec2(spawn_x + i * SPACING, base_y))
            for i in range(count)
        ]
        self.zappers.extend(batch)
        if self.renderer is not None:
            for zapper in batch:
                self.renderer.add(zapper)
        return batch