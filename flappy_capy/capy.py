from .level import Bounds


class Capy:
    """The player: falls under gravity, flaps upward on input."""

    SPRITES = ("capy-wings1", "capy-wings2", "capy-wings3")

    def __init__(self, config):
        self.config = config.validate()
        self.x = config.width / 3
        self.y = config.height / 2
        self.vel = 0
        self.capy_counter = 0

    def animate(self, surface):
        self.move()
        self.draw(surface)

    def move(self):
        """Advance one frame: position first, then gravity, then the velocity clamp."""
        capy = self.config.capy
        self.y += self.vel
        self.vel += capy.gravity

        if self.vel > capy.terminal_vel:
            self.vel = capy.terminal_vel
        elif self.vel < -capy.terminal_vel:
            self.vel = -capy.terminal_vel

    def flap(self):
        """Overwrite the velocity with an upward impulse (y grows downwards)."""
        self.vel = -self.config.capy.flap_speed

    def draw(self, surface):
        surface.draw_image(self.sprite(), self.x, self.y)

    def sprite(self):
        """Cycle the wing sprites 1, 2, 3, 2 with each held for a few frames."""
        frames = self.config.capy.animated_flap_speed
        self.capy_counter += 1

        if self.capy_counter <= frames:
            return self.SPRITES[0]
        elif self.capy_counter <= frames * 2:
            return self.SPRITES[1]
        elif self.capy_counter <= frames * 3:
            return self.SPRITES[2]

        if self.capy_counter >= frames * 4:
            self.capy_counter = 0
        return self.SPRITES[1]

    def bounds(self):
        capy = self.config.capy
        return Bounds(
            left=self.x,
            right=self.x + capy.width,
            top=self.y,
            bottom=self.y + capy.height,
        )

    def out_of_bounds(self):
        above_top = self.y < 0
        below_bottom = self.y + self.config.capy.height > self.config.height
        return above_top or below_bottom
