"""
The level: scrolling pipe pairs, the parallax background and the
collision / scoring queries the game asks of them every frame.
"""

import random
from collections import deque
from dataclasses import dataclass, replace

SKY_BLUE = (135, 206, 235)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in field coordinates (y grows downwards)."""

    left: float
    right: float
    top: float
    bottom: float

    def overlaps(self, other):
        """Touching edges count as overlap; only strict separation does not."""
        if self.left > other.right or self.right < other.left:
            return False
        if self.top > other.bottom or self.bottom < other.top:
            return False
        return True


@dataclass(frozen=True)
class PipePair:
    """A top and a bottom pipe sharing one horizontal extent and one gap."""

    left: float
    right: float
    gap_top: float
    gap_bottom: float
    passed: bool = False

    def shifted(self, dx):
        return replace(self, left=self.left + dx, right=self.right + dx)

    def top_pipe(self):
        return Bounds(self.left, self.right, 0, self.gap_top)

    def bottom_pipe(self, floor):
        return Bounds(self.left, self.right, self.gap_bottom, floor)


def random_pipe(config, distance, rng=random):
    """
    Generate a pipe pair whose left edge sits at ``distance``.

    The top of the gap is uniform over the field height minus both edge
    buffers and the gap itself, so the gap never touches the field's
    vertical extremes.
    """
    level = config.level
    top_of_gap = rng.random() * config.height_range + level.edge_buffer
    return PipePair(
        left=distance,
        right=distance + level.pipe_width,
        gap_top=top_of_gap,
        gap_bottom=top_of_gap + level.pipe_gap,
    )


class Level:
    """
    Owns the queue of live pipe pairs (oldest first) and the background strips.

    Three pairs are seeded ahead of the field, the first one far enough
    right that it takes ``warmup_seconds`` to scroll into view.
    """

    PIPE_COUNT = 3

    def __init__(self, config, rng=None):
        self.config = config.validate()
        self.rng = rng if rng is not None else random.Random()

        level = config.level
        first_pipe_distance = config.width + level.warmup_seconds * level.frame_rate * level.pipe_speed
        self.pipes = deque(
            self.random_pipe(first_pipe_distance + i * level.horizontal_pipe_spacing)
            for i in range(self.PIPE_COUNT)
        )

        # Lead strip starts with its right edge on the field's right edge
        self.backgrounds = deque([config.width - level.background_width])

    def random_pipe(self, distance):
        return random_pipe(self.config, distance, self.rng)

    def animate(self, surface):
        """Move first so the drawn pipes reflect this frame's positions."""
        self.move_pipes()
        self.draw_pipes(surface)

    def animate_background(self, surface):
        self.move_background()
        self.draw_background(surface)

    def move_pipes(self):
        level = self.config.level
        self.pipes = deque(pipe.shifted(-level.pipe_speed) for pipe in self.pipes)

        # Pipes leave in creation order, so only the front can be off-screen
        if self.pipes[0].right <= 0:
            self.pipes.popleft()
            new_x_offset = self.pipes[-1].left + level.horizontal_pipe_spacing
            self.pipes.append(self.random_pipe(new_x_offset))

    def move_background(self):
        width = self.config.width
        strip_width = self.config.level.background_width

        while self.backgrounds[-1] + strip_width <= width:
            self.backgrounds.append(self.backgrounds[-1] + strip_width)
        while self.backgrounds[0] <= -strip_width:
            self.backgrounds.popleft()

        speed = self.config.level.background_speed
        self.backgrounds = deque(pos - speed for pos in self.backgrounds)

    def draw_pipes(self, surface):
        image_height = self.config.level.pipe_image_height
        for pipe in self.pipes:
            surface.draw_image("top-pipe", pipe.left, pipe.gap_top - image_height)
            surface.draw_image("bottom-pipe", pipe.left, pipe.gap_bottom)

    def draw_background(self, surface):
        surface.draw_rect(Bounds(0, self.config.width, 0, self.config.height), SKY_BLUE)
        for pos in self.backgrounds:
            surface.draw_image("background", pos, 0)

    def collides_with(self, capy_bounds):
        """True if the bounds overlap the top or bottom pipe of any live pair."""
        floor = self.config.height
        return any(
            pipe.top_pipe().overlaps(capy_bounds) or pipe.bottom_pipe(floor).overlaps(capy_bounds)
            for pipe in self.pipes
        )

    def passed_pipe(self, capy_bounds, callback):
        """
        Mark every pipe pair now fully left of the capy as passed, calling
        ``callback`` once per newly passed pair.

        The capy never moves horizontally, so each pair is passed at most
        once and it is safe to scan the whole queue every frame.
        """
        for i, pipe in enumerate(list(self.pipes)):
            if pipe.right < capy_bounds.left and not pipe.passed:
                self.pipes[i] = replace(pipe, passed=True)
                callback()
