import pytest

from jetjoy.animation import Renderer
from jetjoy.player import GROUND_POSITION, MAX_HEIGHT, SPEED, Player, PlayerPose


def test_starts_running_on_ground():
    player = Player()
    assert player.position == GROUND_POSITION
    assert player.position.y == -265.5
    assert player.pose is PlayerPose.RUN


def test_space_lifts_by_speed_and_flies():
    player = Player()
    player.update(True)
    assert player.position.y == pytest.approx(GROUND_POSITION.y + SPEED)
    assert player.pose is PlayerPose.FLY


def test_horizontal_position_never_changes():
    player = Player()
    for pressed in [True] * 20 + [False] * 20:
        player.update(pressed)
        assert player.position.x == GROUND_POSITION.x


def test_height_is_capped():
    player = Player()
    for _ in range(500):
        player.update(True)
        assert player.position.y < MAX_HEIGHT + SPEED
    assert player.position.y >= MAX_HEIGHT


def test_release_in_air_falls():
    player = Player()
    for _ in range(10):
        player.update(True)
    airborne = player.position.y
    player.update(False)
    assert player.position.y == pytest.approx(airborne - SPEED)
    assert player.pose is PlayerPose.FALL


def test_lands_exactly_on_ground_and_runs():
    player = Player()
    for _ in range(10):
        player.update(True)
    for _ in range(200):
        player.update(False)
    assert player.position.y == GROUND_POSITION.y
    assert player.pose is PlayerPose.RUN


def test_exactly_one_pose_visible():
    player = Player()
    for pressed in [True] * 5 + [False] * 10:
        player.update(pressed)
        visible = [anim for anim in player.animations.values() if anim.visible]
        assert len(visible) == 1


def test_all_animations_share_position():
    player = Player()
    for _ in range(7):
        player.update(True)
    positions = {anim.position for anim in player.animations.values()}
    assert positions == {player.position}


def test_add_to_renderer_adds_every_pose():
    player = Player()
    renderer = Renderer()
    player.add_to(renderer)
    assert len(renderer) == len(PlayerPose)
    assert all(anim in renderer for anim in player.animations.values())


def test_animations_loop_at_source_interval():
    player = Player()
    for anim in player.animations.values():
        assert anim.looping is True
        assert anim.interval_ms == 100
        assert anim.world_object is False