"""The game loop: title logo, scrolling lab and everything inside it."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jetjoy.animation import Animation, Renderer
from jetjoy.background import Background, Logo
from jetjoy.camera import WINDOW_HEIGHT, WINDOW_WIDTH, Camera, Vec2
from jetjoy.coins import CoinGroup, CoinManager
from jetjoy.equipment import Equipment, EquipmentSpawner
from jetjoy.missile import Missile, MissileSpawner
from jetjoy.player import Player
from jetjoy.zappers import Zapper, ZapperManager

FRAME_TIME = 0.016
MISSILE_SPAWN_INTERVAL_MS = 5000.0
EQUIPMENT_SPAWN_INTERVAL_MS = 10000.0
BACKGROUND_SPEED = 4.0
FPS = 60
WINDOW_TITLE = "Jetpack Joyride"
ICON_IMAGE = "Image/logo/icon.png"


class AppState(enum.Enum):
    START = enum.auto()
    UPDATE = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Inputs:
    """The keyboard and window state for one frame."""

    space: bool = False
    enter: bool = False
    escape_released: bool = False
    quit: bool = False


def _animations(item: Any) -> Iterator[Animation]:
    if isinstance(item, Animation):
        yield item
    elif isinstance(item, CoinGroup):
        yield from item.coins
    elif isinstance(item, Zapper):
        yield item.animation


class Game:
    """All game state, advanced one frame at a time."""

    def __init__(self, logo_size: Vec2 = Vec2(), rng: random.Random | None = None) -> None:
        self.state = AppState.START
        self.logo = Logo(logo_size)
        self.background = Background()
        self.background_started = False
        self.renderer = Renderer()
        self.space_pressed = False
        self.player: Player | None = None
        self.camera = Camera()
        rng = rng if rng is not None else random.Random()
        self.zapper_manager = ZapperManager(camera=self.camera, rng=rng)
        self.coin_manager = CoinManager(camera=self.camera, rng=rng)
        self.missiles: list[Missile] = []
        self.missile_spawner = MissileSpawner(MISSILE_SPAWN_INTERVAL_MS)
        self.equipments: list[Equipment] = []
        self.equipment_spawner = EquipmentSpawner(EQUIPMENT_SPAWN_INTERVAL_MS)
        self.background_speed = BACKGROUND_SPEED

    def start(self) -> None:
        """Create the player and hook the spawners up to the renderer."""
        self.player = Player()
        self.player.add_to(self.renderer)
        self.zapper_manager.renderer = self.renderer
        self.coin_manager.renderer = self.renderer
        self.state = AppState.UPDATE

    def update(self, inputs: Inputs, delta_ms: float) -> None:
        """Advance one frame; ``delta_ms`` is the real time since the last one."""
        if self.player is None:
            raise RuntimeError("start() must be called before update()")

        self.logo.update(inputs.enter)
        self.space_pressed = inputs.space

        if not self.background_started and self.logo.is_off_screen():
            self.background_started = True

        if self.background_started:
            self.background.update()
            self.player.update(inputs.space)
            self.camera.update(FRAME_TIME)
            self.zapper_manager.update(FRAME_TIME)
            self.coin_manager.update(FRAME_TIME)
            self.missile_spawner.update(
                delta_ms, self.missiles, self.renderer, self.player.position
            )
            self.equipment_spawner.update(
                delta_ms, self.equipments, self.renderer, self.background_speed
            )

        if inputs.escape_released or inputs.quit:
            self.state = AppState.END

        for item in self.renderer:
            for animation in _animations(item):
                animation.advance(delta_ms)

    def drawables(self) -> Iterator[Animation]:
        """Every animation in the scene, in drawing order."""
        for item in self.renderer:
            yield from _animations(item)


def _screen_point(position: Vec2) -> tuple[float, float]:
    return WINDOW_WIDTH / 2 + position.x, WINDOW_HEIGHT / 2 - position.y


def run(resource_dir: str | Path) -> int:
    """Open the game window and play until it is closed."""
    import pygame

    root = Path(resource_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        icon_path = root / ICON_IMAGE
        if icon_path.is_file():
            pygame.display.set_icon(pygame.image.load(str(icon_path)))

        cache: dict[tuple[str, tuple[int, int] | None], Any] = {}

        def image(path: str, size: tuple[int, int] | None = None) -> Any:
            key = (path, size)
            if key not in cache:
                surface = pygame.image.load(str(root / path)).convert_alpha()
                if size is not None:
                    surface = pygame.transform.scale(surface, size)
                cache[key] = surface
            return cache[key]

        def blit(surface: Any, position: Vec2) -> None:
            screen.blit(surface, surface.get_rect(center=_screen_point(position)))

        logo_surface = image(Logo(Vec2()).image)
        game = Game(logo_size=Vec2(*logo_surface.get_size()))
        clock = pygame.time.Clock()

        while True:
            delta_ms = clock.tick(FPS)
            quit_requested = False
            escape_released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                    escape_released = True

            if game.state is AppState.START:
                if quit_requested:
                    break
                game.start()
                continue
            if game.state is AppState.END:
                break

            keys = pygame.key.get_pressed()
            game.update(
                Inputs(
                    space=bool(keys[pygame.K_SPACE]),
                    enter=bool(keys[pygame.K_RETURN]),
                    escape_released=escape_released,
                    quit=quit_requested,
                ),
                delta_ms,
            )

            screen.fill((0, 0, 0))
            window = (WINDOW_WIDTH, WINDOW_HEIGHT)
            for tile in game.background.tiles():
                blit(image(tile.image, window), Vec2(tile.x, 0.0))
            if not game.background_started:
                blit(logo_surface, game.logo.position)
            for animation in game.drawables():
                if not animation.visible:
                    continue
                offset = game.camera.offset if animation.world_object else Vec2()
                blit(image(animation.current_image), animation.position - offset)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jetjoy", description="Play the jetpack runner.")
    parser.add_argument(
        "--resources",
        default="Resources",
        help="directory holding the Image/ tree (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    return run(args.resources)


if __name__ == "__main__":
    raise SystemExit(main())