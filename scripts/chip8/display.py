import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"   # this env var disable pygame's welcome message when imported
import pygame

from .errors import ConfigurationError
from .log import log
from .settings import SCALE, SCREEN_HEIGHT, SCREEN_WIDTH


BLUE = pygame.Color(80, 69, 155, 255)
LIGHT_BLUE = pygame.Color(136, 126, 203, 255)


# ******************** I/O SECTION
class Display:
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT, s=SCALE, bg_color=BLUE, fg_color=LIGHT_BLUE):
        if s <= 0:
            raise ConfigurationError(f"display scale must be > 0, got {s}")
        log("Initializing display")
        self.w, self.h, self.scale = w, h, s
        self.background = bg_color
        self.foreground = fg_color
        self.buffer = [0] * h * w
        self._needs_redraw = False

    def read_pixel(self, x, y):
        """return 1 if pixel is ON, return 0 if pixel is OFF"""
        return self.buffer[y * self.w + x]

    def write_pixel(self, x, y, value):
        self.buffer[y * self.w + x] = 1 if value else 0

    def draw_sprite(self, x, y, sprite):
        """
        XOR the sprite rows onto the buffer at (x, y), wrapping around the edges
        return 1 if any pixel went from ON to OFF, 0 otherwise
        """
        self._needs_redraw = True
        collision = 0
        for row, sprite_byte in enumerate(sprite):
            y_coordinate = (y + row) % self.h
            for column in range(8):
                bit = (sprite_byte >> (7 - column)) & 0x1
                if not bit:
                    continue
                x_coordinate = (x + column) % self.w
                if self.read_pixel(x_coordinate, y_coordinate):
                    collision = 1
                self.write_pixel(x_coordinate, y_coordinate, self.read_pixel(x_coordinate, y_coordinate) ^ bit)
        return collision

    def needs_redraw(self):
        return self._needs_redraw

    def clear(self):
        self.buffer = [0] * self.h * self.w
        self._needs_redraw = True

    def create_window(self, title):
        pygame.display.set_caption(title)
        return pygame.display.set_mode((self.w * self.scale, self.h * self.scale))

    def draw(self, surface):
        """paint the buffer on the surface and flip it"""
        surface.fill(self.background)
        for y in range(self.h):
            for x in range(self.w):
                if self.read_pixel(x, y):
                    pygame.draw.rect(
                        surface,
                        self.foreground,
                        (x * self.scale, y * self.scale, self.scale, self.scale)
                    )
        pygame.display.flip()
        self._needs_redraw = False

    def __str__(self):
        return "\n".join(
            "".join("#" if self.read_pixel(x, y) else "." for x in range(self.w))
            for y in range(self.h)
        )
