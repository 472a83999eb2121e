import random

import pytest

from flappy_capy.capy import Capy
from flappy_capy.config import CapyConfig, ConfigError, GameConfig
from flappy_capy.level import Bounds


def test_capy_spawns_a_third_across_and_halfway_down(config):
    capy = Capy(config)
    assert (capy.x, capy.y, capy.vel) == (160, 320, 0)


def test_move_applies_position_before_gravity(config):
    capy = Capy(config)
    capy.move()
    assert capy.y == 320
    assert capy.vel == pytest.approx(0.4)
    capy.move()
    assert capy.y == pytest.approx(320.4)
    assert capy.vel == pytest.approx(0.8)


def test_flap_overwrites_velocity(config):
    capy = Capy(config)
    for _ in range(10):
        capy.move()
    capy.flap()
    assert capy.vel == -7.5
    capy.flap()
    assert capy.vel == -7.5


def test_falling_velocity_is_clamped_to_terminal(config):
    capy = Capy(config)
    for _ in range(100):
        capy.move()
    assert capy.vel == 12


def test_flap_faster_than_terminal_is_rejected():
    config = GameConfig(capy=CapyConfig(flap_speed=30, gravity=0.4, terminal_vel=12))
    with pytest.raises(ConfigError, match="flap_speed"):
        Capy(config)


def test_flap_at_terminal_speed_stays_within_the_clamp():
    config = GameConfig(capy=CapyConfig(flap_speed=12, gravity=0.4, terminal_vel=12))
    capy = Capy(config)
    capy.flap()
    assert capy.vel == -12
    capy.move()
    assert capy.vel == pytest.approx(-11.6)


@pytest.mark.parametrize("seed", [1, 99, 2024])
def test_velocity_never_exceeds_terminal_after_any_call(config, seed):
    rng = random.Random(seed)
    capy = Capy(config)
    for _ in range(5000):
        if rng.random() < 0.1:
            capy.flap()
            assert abs(capy.vel) <= config.capy.terminal_vel
        else:
            capy.move()
            assert abs(capy.vel) <= config.capy.terminal_vel


def test_bounds_use_the_fixed_hitbox(config):
    capy = Capy(config)
    capy.x, capy.y = 100, 0
    assert capy.bounds() == Bounds(left=100, right=145, top=0, bottom=33)


@pytest.mark.parametrize(
    "y, expected",
    [(640, True), (640 - 33, False), (640 - 32.5, True), (0, False), (-0.1, True), (320, False)],
)
def test_out_of_bounds(config, y, expected):
    capy = Capy(config)
    capy.y = y
    assert capy.out_of_bounds() is expected


def test_wing_sprites_cycle(config, surface):
    capy = Capy(config)
    for _ in range(25):
        capy.draw(surface)
    names = [call[1] for call in surface.calls]
    assert names == (
        ["capy-wings1"] * 5
        + ["capy-wings2"] * 5
        + ["capy-wings3"] * 5
        + ["capy-wings2"] * 5
        + ["capy-wings1"] * 5
    )


def test_animate_moves_then_draws_at_the_new_position(config, surface):
    capy = Capy(config)
    capy.flap()
    capy.animate(surface)
    assert surface.calls == [("image", "capy-wings1", 160, 320 - 7.5)]
