"""Power-up equipment that drifts in from the right."""

from __future__ import annotations

from collections.abc import MutableSequence

from jetjoy.animation import Animation, Renderer
from jetjoy.camera import Vec2

EQUIPMENT_FRAMES = tuple(f"Image/PowerUp/powerUp{i}.png" for i in range(8))
EQUIPMENT_INTERVAL_MS = 100
SPAWN_POSITION = Vec2(650.0, 0.0)
OFF_SCREEN_X = -700.0
DEFAULT_SPAWN_INTERVAL_MS = 10000.0


class Equipment:
    """A power-up that scrolls left with the background."""

    def __init__(self) -> None:
        self.animation = Animation(
            EQUIPMENT_FRAMES,
            interval_ms=EQUIPMENT_INTERVAL_MS,
            looping=True,
            playing=True,
            visible=True,
            world_object=False,
        )
        self._position = SPAWN_POSITION

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = value
        self.animation.position = value

    def update(self, background_speed: float) -> None:
        """Move left at the background's speed."""
        self.position = Vec2(self._position.x - background_speed, self._position.y)

    def is_off_screen(self) -> bool:
        return self._position.x < OFF_SCREEN_X

    def add_to(self, renderer: Renderer) -> None:
        renderer.add(self.animation)


class EquipmentSpawner:
    """Spawns a power-up at a fixed interval and retires ones off screen."""

    def __init__(self, spawn_interval: float = DEFAULT_SPAWN_INTERVAL_MS) -> None:
        if spawn_interval <= 0:
            raise ValueError("spawn_interval must be positive")
        self.spawn_interval = spawn_interval
        self.timer = 0.0

    def update(
        self,
        delta_ms: float,
        equipments: MutableSequence[Equipment],
        renderer: Renderer,
        background_speed: float,
    ) -> None:
        """Advance by ``delta_ms``; ``equipments`` is updated in place."""
        self.timer += delta_ms
        if self.timer >= self.spawn_interval:
            self.timer -= self.spawn_interval
            equipment = Equipment()
            equipment.position = SPAWN_POSITION
            equipment.add_to(renderer)
            equipments.append(equipment)

        survivors = []
        for equipment in equipments:
            equipment.update(background_speed)
            if equipment.is_off_screen():
                renderer.remove(equipment.animation)
            else:
                survivors.append(equipment)
        equipments[:] = survivors