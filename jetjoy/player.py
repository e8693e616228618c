"""Barry, the player character, and his jetpack movement."""

from __future__ import annotations

import enum

from jetjoy.animation import Animation, Renderer
from jetjoy.camera import Vec2

GROUND_POSITION = Vec2(-300.5, -265.5)
MAX_HEIGHT = 250.0
SPEED = 7.5
FRAME_INTERVAL_MS = 100

RUN_FRAMES = ("Image/barry/barry0.png", "Image/barry/barry1.png")
FLY_FRAMES = (
    "Image/barry/barryflying0.png",
    "Image/barry/barryflying1.png",
    "Image/barry/barryflying2.png",
)
FALL_FRAMES = ("Image/barry/barryfalling.png",)


class PlayerPose(enum.Enum):
    RUN = "run"
    FLY = "fly"
    FALL = "fall"


def _pose_animation(frames: tuple[str, ...], visible: bool) -> Animation:
    return Animation(
        frames,
        interval_ms=FRAME_INTERVAL_MS,
        looping=True,
        playing=True,
        position=GROUND_POSITION,
        visible=visible,
        world_object=False,
    )


class Player:
    """Flies up while space is held, falls back to the ground otherwise."""

    def __init__(self) -> None:
        self.animations = {
            PlayerPose.RUN: _pose_animation(RUN_FRAMES, True),
            PlayerPose.FLY: _pose_animation(FLY_FRAMES, False),
            PlayerPose.FALL: _pose_animation(FALL_FRAMES, False),
        }

    @property
    def position(self) -> Vec2:
        return self.animations[PlayerPose.RUN].position

    @property
    def pose(self) -> PlayerPose:
        return next(pose for pose, anim in self.animations.items() if anim.visible)

    def _show(self, pose: PlayerPose) -> None:
        for candidate, anim in self.animations.items():
            anim.visible = candidate is pose

    def update(self, space_pressed: bool) -> None:
        y = self.position.y
        if space_pressed:
            if y < MAX_HEIGHT:
                y += SPEED
            self._show(PlayerPose.FLY)
        else:
            if y > GROUND_POSITION.y:
                y -= SPEED
                self._show(PlayerPose.FALL)
            if y <= GROUND_POSITION.y:
                y = GROUND_POSITION.y
                self._show(PlayerPose.RUN)
        new_position = Vec2(self.position.x, y)
        for anim in self.animations.values():
            anim.position = new_position

    def add_to(self, renderer: Renderer) -> None:
        for anim in self.animations.values():
            renderer.add(anim)