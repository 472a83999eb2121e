import dataclasses

import pytest

from flappy_capy.config import CapyConfig, ConfigError, GameConfig, LevelConfig
from flappy_capy.level import Level


def test_defaults_match_the_original_tuning():
    config = GameConfig()
    assert (config.width, config.height) == (480, 640)
    assert config.level.horizontal_pipe_spacing == 220
    assert config.level.pipe_gap == 150
    assert config.level.edge_buffer == 50
    assert config.capy.terminal_vel == 12
    assert config.height_range == 640 - 100 - 150


def test_config_is_immutable():
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 10


def test_gap_larger_than_field_fails_at_level_construction():
    config = GameConfig(height=200, level=LevelConfig(pipe_gap=150, edge_buffer=50))
    with pytest.raises(ConfigError, match="exceeds the field height"):
        Level(config)


def test_gap_exactly_filling_the_field_is_allowed():
    config = GameConfig(height=250, level=LevelConfig(pipe_gap=150, edge_buffer=50))
    level = Level(config)
    assert all(pipe.gap_top == 50 for pipe in level.pipes)


@pytest.mark.parametrize(
    "config",
    [
        GameConfig(width=0),
        GameConfig(level=LevelConfig(pipe_speed=0)),
        GameConfig(level=LevelConfig(horizontal_pipe_spacing=-5)),
        GameConfig(capy=CapyConfig(terminal_vel=0)),
        GameConfig(level=LevelConfig(edge_buffer=-100)),
        GameConfig(level=LevelConfig(warmup_seconds=-1)),
        GameConfig(capy=CapyConfig(gravity=-0.4)),
        GameConfig(capy=CapyConfig(flap_speed=20, terminal_vel=12)),
    ],
)
def test_invalid_values_are_rejected(config):
    with pytest.raises(ConfigError):
        config.validate()


def test_negative_edge_buffer_fails_at_level_construction():
    with pytest.raises(ConfigError, match="edge_buffer"):
        Level(GameConfig(level=LevelConfig(edge_buffer=-100)))


def test_flap_speed_equal_to_terminal_is_allowed():
    config = GameConfig(capy=CapyConfig(flap_speed=12, terminal_vel=12))
    assert config.validate() is config


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)
