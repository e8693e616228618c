import random

import pytest

from jetjoy.animation import Renderer
from jetjoy.camera import WINDOW_WIDTH, Camera, Vec2
from jetjoy.zappers import (
    HORIZONTAL_FRAMES,
    MAX_Y,
    MIN_Y,
    SPACING,
    SPAWN_MARGIN,
    VERTICAL_FRAMES,
    Zapper,
    ZapperManager,
    ZapperType,
)


@pytest.mark.parametrize(
    "kind, frames",
    [(ZapperType.VERTICAL, VERTICAL_FRAMES), (ZapperType.HORIZONTAL, HORIZONTAL_FRAMES)],
)
def test_zapper_frames_follow_type(kind, frames):
    zapper = Zapper(kind, Vec2(1.0, 2.0))
    assert zapper.animation.frames == frames
    assert zapper.position == Vec2(1.0, 2.0)
    assert zapper.animation.looping is True


def test_vertical_frames_use_source_names():
    vertical = Zapper(ZapperType.VERTICAL, Vec2(0.0, 0.0))
    horizontal = Zapper(ZapperType.HORIZONTAL, Vec2(0.0, 0.0))
    assert vertical.animation.frames[0] == "Image/Zapper/ver zapper1.png"
    assert horizontal.animation.frames[-1] == "Image/Zapper/zapper4.png"


def test_update_cycles_frames_but_keeps_position():
    zapper = Zapper(ZapperType.HORIZONTAL, Vec2(5.0, 6.0))
    zapper.update(0.1)
    assert zapper.animation.current_frame == 1
    zapper.update(0.3)
    assert zapper.animation.current_frame == 0
    assert zapper.position == Vec2(5.0, 6.0)


def test_first_batch_after_one_second():
    manager = ZapperManager(rng=random.Random(0))
    manager.update(0.5)
    assert manager.zappers == []
    manager.update(0.5)
    assert 3 <= len(manager.zappers) <= 5
    assert manager.spawn_timer == 0.0
    assert 2.0 <= manager.spawn_interval <= 5.0


def test_batch_layout_in_a_row():
    camera = Camera()
    renderer = Renderer()
    manager = ZapperManager(camera=camera, renderer=renderer, rng=random.Random(4))
    manager.update(1.0)
    start = camera.offset.x + WINDOW_WIDTH / 2 + SPAWN_MARGIN
    xs = [z.position.x for z in manager.zappers]
    assert xs == [pytest.approx(start + i * SPACING) for i in range(len(xs))]
    ys = {z.position.y for z in manager.zappers}
    assert len(ys) == 1
    assert MIN_Y <= ys.pop() <= MAX_Y
    assert all(z in renderer for z in manager.zappers)


def test_zappers_removed_when_left_behind():
    camera = Camera()
    manager = ZapperManager(camera=camera, rng=random.Random(6))
    manager.update(1.0)
    assert manager.zappers
    camera.offset = Vec2(10_000.0, 0.0)
    manager.update(0.0)
    assert manager.zappers == []


@pytest.mark.parametrize("seed", range(8))
def test_batches_sizes_and_intervals_stay_in_range(seed):
    manager = ZapperManager(rng=random.Random(seed))
    previous = 0
    for _ in range(4):
        manager.update(manager.spawn_interval)
        added = len(manager.zappers) - previous
        assert 3 <= added <= 5
        previous = len(manager.zappers)
        assert 2.0 <= manager.spawn_interval <= 5.0