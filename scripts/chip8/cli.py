import argparse
import os
import sys

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"
import pygame

from .emulator import Emulator
from .errors import Chip8Error, ConfigurationError
from .log import warn
from .settings import CLOCK_RATE, MEMORY_SIZE, ROM_START_ADDRESS, SCALE


# ******************** UTILITIES SECTION
def address(value):
    """accept decimal, 0x-prefixed hex or 0o-prefixed octal addresses"""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {value!r}")


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8", description="CHIP-8 virtual machine")
    parser.add_argument("rom", help="input rom file")
    parser.add_argument("-c", "--clock-rate", type=float, default=CLOCK_RATE,
                        help="instructions executed per second (default: %(default)s)")
    parser.add_argument("-p", "--program-address", type=address, default=ROM_START_ADDRESS,
                        help="memory address the rom is loaded at (default: 0x%(default)X)")
    parser.add_argument("-s", "--display-scale", type=int, default=SCALE,
                        help="size in screen pixels of one CHIP-8 pixel (default: %(default)s)")
    parser.add_argument("-i", "--ignore-unknown-instructions", action="store_true",
                        help="log unknown opcodes instead of stopping the emulator")
    parser.add_argument("-m", "--mute", action="store_true", help="disable the beep")
    parser.add_argument("--debug-cpu", action="store_true", help="print the CPU state every cycle")
    parser.add_argument("--debug-memory", action="store_true", help="print a memory dump every cycle")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.clock_rate <= 0:
        parser.error('parameter "clock_rate" must be > 0')
    if args.display_scale <= 0:
        parser.error('parameter "display_scale" must be > 0')
    if not 0 <= args.program_address < MEMORY_SIZE:
        parser.error(f'parameter "program_address" must be within memory (0x000-0x{MEMORY_SIZE - 1:03X})')
    return args


def open_rom(path):
    try:
        return open(path, mode="rb")
    except OSError as e:
        sys.exit(f"could not open ROM {path}: {e.strerror}")


def init_sound(mute):
    if mute:
        return False
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=1)
    except pygame.error as e:
        warn(f"audio unavailable, running muted: {e}")
        return False
    return True


# ******************** ENTRY POINT SECTION
def main(argv=None):
    args = parse_args(argv)
    try:
        emulator = Emulator(args.clock_rate, args.ignore_unknown_instructions,
                            args.program_address, args.display_scale)
    except ConfigurationError as e:
        sys.exit(f"invalid configuration: {e}")
    with open_rom(args.rom) as rom:
        try:
            emulator.load_rom(rom)
        except Chip8Error as e:
            sys.exit(f"could not load ROM {args.rom}: {e}")

    # pygame initialization
    pygame.init()
    sound = init_sound(args.mute)
    surface = emulator.display.create_window(os.path.basename(args.rom))
    clock = pygame.time.Clock()
    clock.tick()
    # emulation loop
    run = True
    try:
        while run:
            # process user input
            for event in pygame.event.get():
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        run = False
                    else:
                        emulator.keypad.key_down(event.key)
                elif event.type == pygame.KEYUP:
                    emulator.keypad.key_up(event.key)
                elif event.type == pygame.QUIT:
                    run = False
            # milliseconds elapsed since the previous cycle, paced to the clock rate
            delta_time = clock.tick(emulator.get_cpu_clock_rate())
            emulator.step(delta_time, surface, sound=sound,
                          debug_cpu=args.debug_cpu, debug_memory=args.debug_memory)
    except Chip8Error as e:
        sys.exit(f"********** THE EMULATOR CRASHED WITH THE FOLLOWING STATE\n{e}\n{emulator}")
    finally:
        pygame.quit()
