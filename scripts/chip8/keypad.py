import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"
from pygame.locals import (
    K_1, K_2, K_3, K_4,
    K_q, K_w, K_e, K_r,
    K_a, K_s, K_d, K_f,
    K_z, K_x, K_c, K_v,
)

from .log import log
from .settings import KEY_COUNT


# COSMAC VIP layout    keyboard
#   1 2 3 C            1 2 3 4
#   4 5 6 D            Q W E R
#   7 8 9 E            A S D F
#   A 0 B F            Z X C V
KEY_MAPPINGS = {
    K_1: 0x1,
    K_2: 0x2,
    K_3: 0x3,
    K_4: 0xC,
    K_q: 0x4,
    K_w: 0x5,
    K_e: 0x6,
    K_r: 0xD,
    K_a: 0x7,
    K_s: 0x8,
    K_d: 0x9,
    K_f: 0xE,
    K_z: 0xA,
    K_x: 0x0,
    K_c: 0xB,
    K_v: 0xF,
}


class Keypad:
    def __init__(self):
        log("Initializing keypad")
        self.keys = [False] * KEY_COUNT

    def is_down(self, key):
        return self.keys[key]

    def press(self, key):
        self.keys[key] = True

    def release(self, key):
        self.keys[key] = False

    def key_down(self, keycode):
        """register a physical key press, unmapped keys are ignored"""
        if keycode in KEY_MAPPINGS:
            self.press(KEY_MAPPINGS[keycode])

    def key_up(self, keycode):
        if keycode in KEY_MAPPINGS:
            self.release(KEY_MAPPINGS[keycode])

    def reset(self):
        self.keys = [False] * KEY_COUNT

    def __str__(self):
        return " ".join(f"{key:X}" for key, down in enumerate(self.keys) if down) or "-"
