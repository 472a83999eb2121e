"""
The game session: idle/running state, score, and the per-frame tick that
composes the Level and the Capy.

The session only talks to its collaborators through small interfaces:

- ``surface``: ``draw_rect(bounds, color)``, ``draw_image(name, x, y)``,
  ``draw_text(text, x, y, style)``
- ``scheduler``: ``request_next_tick(callback)``
- ``cues``: a mapping with ``"idle"``, ``"play"`` and ``"death"`` audio cues,
  each exposing ``play()``, ``pause()`` and ``rewind()``
"""

import logging
from dataclasses import dataclass

from .capy import Capy
from .config import GameConfig
from .level import Level

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class TextStyle:
    size: int = 40
    color: tuple = WHITE
    bold: bool = False
    outline: tuple = None
    outline_width: int = 2


SCORE_STYLE = TextStyle(size=40, color=WHITE, bold=True, outline=BLACK)
PROMPT_STYLE = TextStyle(size=20, color=WHITE, bold=True, outline=BLACK, outline_width=1)


def log_game_over(score):
    logger.info("What a scrub, you only got %d points", score)


class FlappyCapy:
    """
    One game instance. Starts idle; the first activate input starts the run,
    and a collision returns it to a fresh idle session.
    """

    def __init__(self, surface, scheduler, cues, config=None, rng=None, on_game_over=log_game_over):
        self.surface = surface
        self.scheduler = scheduler
        self.cues = cues
        self.config = (config or GameConfig()).validate()
        self.rng = rng
        self.on_game_over = on_game_over

        self.running = False
        self.score = 0
        self.level = None
        self.capy = None
        self.restart()

    def start(self):
        """Schedule the first tick. The loop keeps itself alive from then on."""
        self.scheduler.request_next_tick(self.tick)

    def restart(self):
        """Throw away the current session and build a fresh idle one."""
        self.cues["play"].rewind()
        self.cues["play"].pause()
        self.cues["idle"].rewind()
        self.cues["idle"].play()

        self.running = False
        self.level = Level(self.config, rng=self.rng)
        self.capy = Capy(self.config)
        self.score = 0
        logger.debug("New session, waiting for input")

    def play(self):
        self.running = True
        self.cues["idle"].pause()
        self.cues["play"].play()
        logger.debug("Session running")

    def activate(self):
        """Input handler: start the run if idle, and always flap."""
        if not self.running:
            self.play()
        self.capy.flap()

    def tick(self):
        """
        One frame. Background and capy are always drawn; pipes and physics
        only advance while running. The frame that ends a run shows the
        capy where it crashed; the fresh session appears on the next tick.
        """
        self.level.animate_background(self.surface)

        if not self.running:
            self.capy.draw(self.surface)
            self.draw_score()
            self.draw_prompt()
        else:
            self.level.animate(self.surface)
            self.capy.animate(self.surface)

            if self.game_over():
                score = self.score
                self.cues["death"].rewind()
                self.cues["death"].play()
                self.on_game_over(score)
                self.restart()
            else:
                self.level.passed_pipe(self.capy.bounds(), self.increment_score)
                self.draw_score()

        self.scheduler.request_next_tick(self.tick)

    def increment_score(self):
        self.score += 1

    def game_over(self):
        """True if the capy hit a pipe or left the field vertically."""
        return self.level.collides_with(self.capy.bounds()) or self.capy.out_of_bounds()

    def draw_score(self):
        self.surface.draw_text(f"Score: {self.score}", 10, 10, SCORE_STYLE)

    def draw_prompt(self):
        self.surface.draw_text(
            "Click to start playing Flappy Capybara!",
            10,
            self.config.height / 2 + 60,
            PROMPT_STYLE,
        )
