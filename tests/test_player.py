import pytest

from flappy_block.config import GameConfig
from flappy_block.data_models import CollidableRect, Position
from flappy_block.physics_core import PhysicsCore
from flappy_block.player import FlappyBlock

DT = 0.04


@pytest.fixture
def block():
    return FlappyBlock(GameConfig())


def test_starts_centred_at_rest(block):
    assert block.position.x == 100
    assert block.position.y == 960 / 2 - 40 / 2
    assert block.velocity == 0.0
    assert block.flap_queued is False


def test_gravity_matches_closed_form(block):
    start_y = block.position.y
    ticks = 25
    for _ in range(ticks):
        block.update(DT)

    assert block.velocity == pytest.approx(ticks * 100 * DT)
    expected = start_y + 100 * DT * DT * ticks * (ticks + 1) / 2
    assert block.position.y == pytest.approx(expected)


def test_update_uses_configured_dt_by_default(block):
    block.update()
    assert block.velocity == pytest.approx(100 * DT)


def test_flap_is_a_one_shot_impulse(block):
    block.update(DT)
    before = block.velocity
    block.queue_flap()
    block.update(DT)
    assert block.velocity == pytest.approx(before + 100 * DT - 150)
    assert block.flap_queued is False

    after_flap = block.velocity
    block.update(DT)
    assert block.velocity == pytest.approx(after_flap + 100 * DT)


def test_flap_is_not_cumulative(block):
    block.queue_flap()
    block.queue_flap()
    block.update(DT)
    assert block.velocity == pytest.approx(100 * DT - 150)


def test_flap_moves_block_up(block):
    start_y = block.position.y
    block.queue_flap()
    block.update(DT)
    assert block.position.y < start_y


def test_horizontal_position_never_changes(block):
    for i in range(30):
        if i % 7 == 0:
            block.queue_flap()
        block.update(DT)
    assert block.position.x == 100


def test_reset_restores_start(block):
    block.queue_flap()
    for _ in range(10):
        block.update(DT)
    block.queue_flap()
    block.reset()
    assert block.velocity == 0.0
    assert block.flap_queued is False
    assert block.position.y == block.start_y


@pytest.mark.parametrize("y, out", [
    (-41, True),
    (-40, False),
    (0, False),
    (460, False),
    (960, False),
    (961, True),
])
def test_out_of_bounds(block, y, out):
    block.position.y = y
    assert block.is_out_of_bounds() is out


def test_physics_core_step_order():
    core = PhysicsCore(gravity=10.0, flap_impulse=-5.0, dt=0.5)
    y, v = core.step(0.0, 0.0)
    assert (y, v) == pytest.approx((2.5, 5.0))
    y, v = core.step(y, v, flap=True)
    # velocity 5 + 10 * 0.5 - 5 = 5, then y += 5 * 0.5
    assert (y, v) == pytest.approx((5.0, 5.0))


def test_physics_core_explicit_dt_overrides_default():
    core = PhysicsCore(gravity=100.0, flap_impulse=-150.0, dt=1.0)
    _, v = core.step(0.0, 0.0, dt=0.1)
    assert v == pytest.approx(10.0)


def test_is_colliding_with_uses_the_block_rect(block):
    # Block spans x 100..140, y 460..500
    assert block.is_colliding_with(CollidableRect(Position(140, 500), 10, 10))
    assert block.is_colliding_with(CollidableRect(Position(0, 0), 1280, 461))
    assert not block.is_colliding_with(CollidableRect(Position(141, 460), 10, 10))
    block.position.y = 600
    assert not block.is_colliding_with(CollidableRect(Position(100, 460), 40, 40))
