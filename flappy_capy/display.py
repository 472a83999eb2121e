"""
pygame implementations of the collaborators the game core talks to:
the drawing surface, the audio cues and the frame scheduler.

Asset problems stop here. A missing image becomes a solid placeholder
and a missing sound becomes a silent cue, so the tick loop never sees them.
"""

import logging
import os

import pygame

from . import assets

logger = logging.getLogger(__name__)


class PygameSurface:
    """Draws rectangles, named images and text onto a pygame surface."""

    FONT_NAME = "sans"

    def __init__(self, screen, images):
        self.screen = screen
        self.images = images
        self.fonts = {}

    def draw_rect(self, bounds, color):
        rect = pygame.Rect(
            round(bounds.left),
            round(bounds.top),
            round(bounds.right - bounds.left),
            round(bounds.bottom - bounds.top),
        )
        pygame.draw.rect(self.screen, color, rect)

    def draw_image(self, name, x, y):
        self.screen.blit(self.images[name], (round(x), round(y)))

    def draw_text(self, text, x, y, style):
        """Render text with its top-left at (x, y), outlined if the style asks for it."""
        font = self.font(style.size, style.bold)
        x, y = round(x), round(y)

        if style.outline is not None:
            outline = font.render(text, True, style.outline)
            w = style.outline_width
            for dx in (-w, 0, w):
                for dy in (-w, 0, w):
                    if dx or dy:
                        self.screen.blit(outline, (x + dx, y + dy))

        self.screen.blit(font.render(text, True, style.color), (x, y))

    def font(self, size, bold):
        key = (size, bold)
        if key not in self.fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self.fonts[key] = pygame.font.SysFont(self.FONT_NAME, size, bold=bold)
        return self.fonts[key]


def load_images(assets_dir):
    """Load every image in the manifest, substituting placeholders for missing files."""
    images = {}
    for name, (path, size, color) in assets.IMAGES.items():
        full_path = os.path.join(assets_dir, path)
        try:
            image = pygame.image.load(full_path)
        except (pygame.error, OSError) as e:
            logger.warning("Image %s unavailable (%s), using a placeholder", full_path, e)
            image = pygame.Surface(size)
            image.fill(color)
        else:
            # convert_alpha needs a display mode
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
        images[name] = image
    return images


class SilentCue:
    """Stands in for a sound that could not be loaded."""

    def play(self):
        pass

    def pause(self):
        pass

    def rewind(self):
        pass


class AudioCue:
    """
    A sound bound to its own mixer channel.

    ``play`` does nothing while the sound is already playing and resumes
    it when paused; after ``rewind`` the next ``play`` starts from the
    beginning. Mixer errors are logged and otherwise ignored.
    """

    def __init__(self, name, sound, channel, loops=0):
        self.name = name
        self.sound = sound
        self.channel = channel
        self.loops = loops
        self.paused = False
        self.failed = False

    def play(self):
        try:
            if self.paused:
                self.channel.unpause()
                self.paused = False
            elif not self.channel.get_busy():
                self.channel.play(self.sound, loops=self.loops)
        except pygame.error as e:
            self.report(e)

    def pause(self):
        try:
            if self.channel.get_busy() and not self.paused:
                self.channel.pause()
                self.paused = True
        except pygame.error as e:
            self.report(e)

    def rewind(self):
        try:
            self.channel.stop()
            self.paused = False
        except pygame.error as e:
            self.report(e)

    def report(self, error):
        if not self.failed:
            logger.warning("Audio cue %r failed: %s", self.name, error)
            self.failed = True


def load_cues(assets_dir):
    """Build the idle, play and death cues, silent where the mixer or a file is unavailable."""
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return {name: SilentCue() for name in assets.SOUNDS}

    pygame.mixer.set_reserved(len(assets.SOUNDS))
    cues = {}
    for index, (name, (path, loops)) in enumerate(assets.SOUNDS.items()):
        full_path = os.path.join(assets_dir, path)
        try:
            sound = pygame.mixer.Sound(full_path)
        except (pygame.error, OSError) as e:
            logger.warning("Sound %s unavailable (%s), cue %r is silent", full_path, e, name)
            cues[name] = SilentCue()
        else:
            cues[name] = AudioCue(name, sound, pygame.mixer.Channel(index), loops)
    return cues


class FrameScheduler:
    """
    Runs at most one pending tick per display refresh.

    Mouse presses and the space bar are delivered to the game as the
    activate input. The loop ends when the window is closed, escape is
    pressed, or no tick was requested.
    """

    def __init__(self, fps=60, clock=None):
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self.pending = None
        self.running = False

    def request_next_tick(self, callback):
        self.pending = callback

    def handle_event(self, event, game):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                game.activate()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            game.activate()

    def run(self, game, pilot=None):
        self.running = True
        game.start()

        while self.running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                self.handle_event(event, game)
            if not self.running:
                break

            if pilot is not None and pilot.wants_flap(game):
                game.activate()

            callback, self.pending = self.pending, None
            if callback is None:
                break
            callback()
            pygame.display.flip()

        self.running = False


def open_window(config, title="Flappy Capy"):
    pygame.init()
    screen = pygame.display.set_mode((round(config.width), round(config.height)))
    pygame.display.set_caption(title)
    return screen
