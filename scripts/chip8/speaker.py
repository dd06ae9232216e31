from array import array

import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"
import pygame

from .log import log


class Speaker:
    """single pending beep, played at most once per flush"""

    def __init__(self, frequency=440, duration=0.1):
        log("Initializing speaker")
        self.frequency = frequency
        self.duration = duration
        self.play_beep = False
        self._sound = None

    def queue_beep(self):
        self.play_beep = True

    def clear_queue(self):
        self.play_beep = False

    def flush_queue(self):
        if self.play_beep:
            self.play()
            self.play_beep = False

    def play(self):
        if self._sound is None:
            self._sound = self._build_beep()
        self._sound.play()

    def _build_beep(self):
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=44100, size=-16, channels=1)
        sample_rate, size, channels = pygame.mixer.get_init()
        period = int(round(sample_rate / self.frequency))
        amplitude = 2 ** (min(abs(size), 16) - 1) - 1     # samples are 16-bit signed
        # one square wave period, repeated for the beep duration
        wave = [amplitude if t < period / 2 else -amplitude for t in range(period)]
        periods = max(1, int(sample_rate * self.duration) // period)
        samples = array("h", [s for s in wave for _ in range(channels)] * periods)
        return pygame.mixer.Sound(buffer=samples.tobytes())
