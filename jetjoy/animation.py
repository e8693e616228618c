"""Frame animations, static sprites and the scene renderer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from jetjoy.camera import Vec2

DEFAULT_INTERVAL_MS = 500


class Animation:
    """A sequence of image frames that advances at a fixed interval."""

    def __init__(
        self,
        frames: Iterable[str],
        *,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        looping: bool = False,
        playing: bool = False,
        position: Vec2 = Vec2(),
        visible: bool = True,
        world_object: bool = True,
    ) -> None:
        self.frames = tuple(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = interval_ms
        self.looping = looping
        self.position = position
        self.visible = visible
        self.world_object = world_object
        self._playing = playing
        self._frame = 0
        self._elapsed = 0.0

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def current_frame(self) -> int:
        return self._frame

    @property
    def current_image(self) -> str:
        return self.frames[self._frame]

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        """Start or resume playback; a finished one-shot animation restarts."""
        if not self.looping and self.is_finished() and not self._playing:
            self._frame = 0
            self._elapsed = 0.0
        self._playing = True

    def advance(self, elapsed_ms: float) -> None:
        """Move the animation forward by ``elapsed_ms`` milliseconds."""
        if not self._playing:
            return
        self._elapsed += elapsed_ms
        last = self.frame_count - 1
        while self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            if self._frame < last:
                self._frame += 1
            elif self.looping:
                self._frame = 0
            else:
                self._playing = False
                self._elapsed = 0.0
                break

    def is_finished(self) -> bool:
        """True when the last frame is showing."""
        return self._frame == self.frame_count - 1


@dataclass
class Sprite:
    """A single static image placed in the world."""

    image_path: str
    position: Vec2 = Vec2()
    visible: bool = True

    def set_image(self, image_path: str) -> None:
        self.image_path = image_path

    def collides(self, other: Sprite) -> bool:
        """Horizontal overlap test; true for any two ordered x coordinates."""
        here, there = self.position.x, other.position.x
        return here >= there or there >= here


class Renderer:
    """An ordered collection of drawable items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def add(self, item: Any) -> None:
        self._items.append(item)

    def remove(self, item: Any) -> None:
        """Remove ``item`` if present; missing items are ignored."""
        self._items = [existing for existing in self._items if existing is not item]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)