"""
Tunable gameplay constants.

Everything that used to be a module-level constant lives in frozen
dataclasses, so a session can be built with alternate values
(tests, autopilot training) without touching globals.
"""

from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a playable level."""


@dataclass(frozen=True)
class LevelConfig:
    """Pipe and background constants. Changing these adjusts difficulty."""

    horizontal_pipe_spacing: float = 220  # space between pipes on the x axis
    pipe_gap: float = 150                 # space between top and bottom pipes
    warmup_seconds: float = 1             # time before the first pipe arrives
    edge_buffer: float = 50               # distance between field bounds and gap extremes
    pipe_width: float = 50                # width of the pipe hitbox
    pipe_speed: float = 2
    pipe_image_height: float = 640        # vertical dimension of the pipe image
    background_speed: float = 1
    background_width: float = 1920
    frame_rate: int = 60


@dataclass(frozen=True)
class CapyConfig:
    """Capy hitbox and physics constants."""

    width: float = 45
    height: float = 33
    gravity: float = 0.4
    flap_speed: float = 7.5
    terminal_vel: float = 12
    animated_flap_speed: int = 5  # frames per wing sprite


@dataclass(frozen=True)
class GameConfig:
    width: float = 480
    height: float = 640
    level: LevelConfig = field(default_factory=LevelConfig)
    capy: CapyConfig = field(default_factory=CapyConfig)

    @property
    def height_range(self):
        """Vertical range available for the top of a gap."""
        return self.height - 2 * self.level.edge_buffer - self.level.pipe_gap

    def validate(self):
        """Fail fast on values that would produce an inverted or empty level."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"field must have a positive size, got {self.width}x{self.height}")
        if self.level.pipe_gap <= 0:
            raise ConfigError(f"pipe_gap must be positive, got {self.level.pipe_gap}")
        if self.level.pipe_width <= 0:
            raise ConfigError(f"pipe_width must be positive, got {self.level.pipe_width}")
        if self.level.horizontal_pipe_spacing <= 0:
            raise ConfigError(
                f"horizontal_pipe_spacing must be positive, got {self.level.horizontal_pipe_spacing}"
            )
        if self.level.pipe_speed <= 0:
            raise ConfigError(f"pipe_speed must be positive, got {self.level.pipe_speed}")
        if self.level.background_width <= 0:
            raise ConfigError(f"background_width must be positive, got {self.level.background_width}")
        if self.level.edge_buffer < 0:
            raise ConfigError(f"edge_buffer must not be negative, got {self.level.edge_buffer}")
        if self.level.warmup_seconds < 0:
            raise ConfigError(f"warmup_seconds must not be negative, got {self.level.warmup_seconds}")
        if self.height_range < 0:
            raise ConfigError(
                "pipe_gap + 2 * edge_buffer "
                f"({self.level.pipe_gap + 2 * self.level.edge_buffer}) "
                f"exceeds the field height ({self.height})"
            )
        if self.capy.terminal_vel <= 0:
            raise ConfigError(f"terminal_vel must be positive, got {self.capy.terminal_vel}")
        if self.capy.gravity < 0:
            raise ConfigError(f"gravity must not be negative, got {self.capy.gravity}")
        if self.capy.flap_speed > self.capy.terminal_vel:
            raise ConfigError(
                f"flap_speed ({self.capy.flap_speed}) exceeds terminal_vel ({self.capy.terminal_vel})"
            )
        return self
