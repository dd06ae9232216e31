from .cpu import Cpu
from .display import Display
from .emulator import Emulator
from .errors import (
    Chip8Error, ConfigurationError, MemoryAccessError, RomError, StackOverflowError, StackUnderflowError,
    UnknownOpcodeError,
)
from .keypad import Keypad
from .memory import Memory
from .opcodes import Instruction, Op, decode, disassemble
from .speaker import Speaker
