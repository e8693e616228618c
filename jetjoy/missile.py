"""Homing missiles: a warning that tracks Barry, then a straight shot."""

from __future__ import annotations

from collections.abc import MutableSequence

from jetjoy.animation import Animation, Renderer
from jetjoy.camera import Vec2

MISSILE_FRAMES = tuple(f"Image/Missile/missile{i}.png" for i in range(6))
WARNING_FRAMES = ("Image/Warning/warning0.png", "Image/Warning/warning1.png")
MISSILE_INTERVAL_MS = 100
WARNING_INTERVAL_MS = 700

SPAWN_POSITION = Vec2(650.0, 0.0)
OFF_SCREEN_X = -700.0
TRACKING_TIME_MS = 1000.0
SPEED = 10.0
WARNING_OFFSET = 50.0
DEFAULT_SPAWN_INTERVAL_MS = 5000.0


def _screen_animation(frames: tuple[str, ...], interval_ms: float) -> Animation:
    return Animation(
        frames,
        interval_ms=interval_ms,
        looping=True,
        playing=True,
        visible=True,
        world_object=False,
    )


class Missile:
    """Shows a warning that follows the target height, then flies left."""

    def __init__(self) -> None:
        self.missile_animation = _screen_animation(MISSILE_FRAMES, MISSILE_INTERVAL_MS)
        self.warning_animation = _screen_animation(WARNING_FRAMES, WARNING_INTERVAL_MS)
        self.target_position = Vec2()
        self.tracking_time = TRACKING_TIME_MS
        self.tracking_timer = 0.0
        self.speed = SPEED
        self.launched = False
        self._position = SPAWN_POSITION

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = value
        self.missile_animation.position = value

    def _show_warning(self, warning: bool) -> None:
        self.warning_animation.visible = warning
        self.missile_animation.visible = not warning

    def update(self, delta_ms: float, target_y: float | None = None) -> None:
        """Advance by ``delta_ms``; ``target_y`` is the height to track, if known."""
        if self.launched:
            self.position = Vec2(self._position.x - self.speed, self._position.y)
            self._show_warning(False)
            return

        self.tracking_timer += delta_ms
        if target_y is not None:
            self.target_position = Vec2(self.target_position.x, target_y)

        self.warning_animation.position = Vec2(
            self._position.x - WARNING_OFFSET, self.target_position.y
        )
        self._show_warning(True)

        if self.tracking_timer >= self.tracking_time:
            self.position = Vec2(self._position.x, self.target_position.y)
            self.launch()
            self._show_warning(False)

    def launch(self) -> None:
        self.launched = True

    def is_off_screen(self) -> bool:
        return self._position.x < OFF_SCREEN_X

    def add_to(self, renderer: Renderer) -> None:
        renderer.add(self.missile_animation)
        renderer.add(self.warning_animation)


class MissileSpawner:
    """Spawns a missile at a fixed interval and retires ones off screen."""

    def __init__(self, spawn_interval: float = DEFAULT_SPAWN_INTERVAL_MS) -> None:
        if spawn_interval <= 0:
            raise ValueError("spawn_interval must be positive")
        self.spawn_interval = spawn_interval
        self.timer = 0.0

    def update(
        self,
        delta_ms: float,
        missiles: MutableSequence[Missile],
        renderer: Renderer,
        barry_position: Vec2,
    ) -> None:
        """Advance by ``delta_ms``; ``missiles`` is updated in place."""
        self.timer += delta_ms
        if self.timer >= self.spawn_interval:
            self.timer -= self.spawn_interval
            missile = Missile()
            missile.target_position = barry_position
            missile.add_to(renderer)
            missiles.append(missile)

        survivors = []
        for missile in missiles:
            missile.update(delta_ms, barry_position.y)
            if missile.is_off_screen():
                renderer.remove(missile.missile_animation)
                renderer.remove(missile.warning_animation)
            else:
                survivors.append(missile)
        missiles[:] = survivors