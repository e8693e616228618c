import random

import pytest

from jetjoy.animation import Renderer
from jetjoy.camera import WINDOW_WIDTH, Camera, Vec2
from jetjoy.coins import (
    COIN_FRAMES,
    COIN_SPACING,
    MAX_Y,
    MIN_Y,
    SPAWN_MARGIN,
    STAIR_ROW_COUNTS,
    Coin,
    CoinGroup,
    CoinManager,
    CoinPattern,
)


def test_coin_is_looping_spinning_animation():
    coin = Coin()
    assert coin.frames == COIN_FRAMES
    assert len(coin.frames) == 8
    assert coin.looping is True
    assert coin.interval_ms == 100
    assert coin.is_playing is True


def test_rectangle_group_has_27_coins_on_grid():
    group = CoinGroup(CoinPattern.RECTANGLE)
    assert len(group.coins) == 27
    assert group.coins[0].position == Vec2(0.0, 0.0)
    assert group.coins[1].position == Vec2(COIN_SPACING, 0.0)
    ys = sorted({coin.position.y for coin in group.coins})
    assert ys == [0.0, COIN_SPACING, 2 * COIN_SPACING]


def test_stairs_group_rows_match_source_counts():
    group = CoinGroup(1)
    assert group.pattern is CoinPattern.STAIRS
    rows = {}
    for coin in group.coins:
        rows.setdefault(coin.position.y, []).append(coin)
    counts = [len(rows[y]) for y in sorted(rows)]
    assert counts == list(STAIR_ROW_COUNTS)
    second_row = rows[sorted(rows)[1]]
    assert min(c.position.x for c in second_row) == 20.0


def test_invalid_pattern_rejected():
    with pytest.raises(ValueError):
        CoinGroup(7)


def test_translate_moves_every_coin():
    group = CoinGroup(CoinPattern.STAIRS)
    before = [coin.position for coin in group.coins]
    offset = Vec2(10.0, -5.0)
    group.translate(offset)
    assert [coin.position for coin in group.coins] == [p + offset for p in before]
    group.translate(Vec2() - offset)
    assert [coin.position for coin in group.coins] == before


def test_no_spawn_before_interval():
    manager = CoinManager(rng=random.Random(1))
    manager.update(1.0)
    assert manager.groups == []
    assert manager.spawn_timer == pytest.approx(1.0)


def test_spawn_after_interval_places_coins_right_of_screen():
    renderer = Renderer()
    camera = Camera()
    manager = CoinManager(camera=camera, renderer=renderer, rng=random.Random(3))
    manager.update(4.0)
    assert len(manager.groups) == 1
    group = manager.groups[0]
    assert group in renderer
    assert group.position == Vec2()
    assert manager.spawn_timer == 0.0
    assert 4.0 <= manager.spawn_interval <= 6.0
    spawn_x = camera.offset.x + WINDOW_WIDTH / 2 + SPAWN_MARGIN
    assert min(c.position.x for c in group.coins) == pytest.approx(spawn_x)
    base_y = min(c.position.y for c in group.coins)
    assert MIN_Y <= base_y <= MAX_Y


def test_group_relative_layout_preserved_on_spawn():
    manager = CoinManager(rng=random.Random(5))
    manager.update(4.0)
    group = manager.groups[0]
    reference = CoinGroup(group.pattern)
    origin = group.coins[0].position
    assert [c.position - origin for c in group.coins] == [c.position for c in reference.coins]


def test_groups_dropped_once_camera_passes():
    camera = Camera()
    manager = CoinManager(camera=camera, rng=random.Random(2))
    manager.update(4.0)
    assert len(manager.groups) == 1
    camera.offset = Vec2(WINDOW_WIDTH, 0.0)
    manager.update(0.0)
    assert manager.groups == []


@pytest.mark.parametrize("seed", range(10))
def test_next_interval_always_in_range(seed):
    manager = CoinManager(rng=random.Random(seed))
    for _ in range(5):
        manager.update(manager.spawn_interval)
        assert 4.0 <= manager.spawn_interval <= 6.0