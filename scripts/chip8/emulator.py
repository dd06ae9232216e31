from .cpu import Cpu
from .display import Display
from .keypad import Keypad
from .memory import Memory
from .settings import CLOCK_RATE, ROM_START_ADDRESS, SCALE
from .speaker import Speaker


class Emulator:
    """wires the CPU to its peripherals and drives one machine cycle per step"""

    def __init__(self, clock_rate=CLOCK_RATE, ignore_unknown_instructions=False,
                 program_address=ROM_START_ADDRESS, display_scale=SCALE):
        self.cpu = Cpu(clock_rate, ignore_unknown_instructions, program_address)
        self.memory = Memory()
        self.keypad = Keypad()
        self.display = Display(s=display_scale)
        self.speaker = Speaker()
        self.iteration = 1

    def __str__(self):
        return f"{self.cpu}\nKEYPAD:{self.keypad}"

    def load_rom(self, reader):
        self.iteration = 1
        self.keypad.reset()
        self.display.clear()
        self.speaker.clear_queue()
        return self.cpu.load_rom(self.memory, reader)

    def get_cpu_clock_rate(self):
        return self.cpu.get_clock_rate()

    def step(self, delta_time, surface=None, sound=True, debug_cpu=False, debug_memory=False):
        """emulate one machine cycle (fetch, decode, execute, timers) and service the peripherals"""
        if debug_cpu or debug_memory:
            print(f"\nIteration #{self.iteration}")

        self.cpu.step(delta_time, self.memory, self.keypad, self.display, self.speaker,
                      debug_cpu=debug_cpu, debug_memory=debug_memory)

        if surface is not None and (self.display.needs_redraw() or self.iteration == 1):
            self.display.draw(surface)
        if sound:
            self.speaker.flush_queue()
        else:
            self.speaker.clear_queue()

        self.iteration += 1
