"""Flappy Capy: guide a capybara through an endless stream of pipes."""

from .capy import Capy
from .config import CapyConfig, ConfigError, GameConfig, LevelConfig
from .game import FlappyCapy
from .level import Bounds, Level, PipePair, random_pipe

__all__ = [
    "Bounds",
    "Capy",
    "CapyConfig",
    "ConfigError",
    "FlappyCapy",
    "GameConfig",
    "Level",
    "LevelConfig",
    "PipePair",
    "random_pipe",
]
