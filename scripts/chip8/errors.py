class Chip8Error(Exception):
    """base class for every fatal condition raised by the emulator"""


class ConfigurationError(Chip8Error, ValueError):
    pass


class RomError(Chip8Error):
    pass


class UnknownOpcodeError(Chip8Error, NotImplementedError):
    def __init__(self, opcode, pc):
        self.opcode = opcode
        self.pc = pc
        super().__init__(f"instruction not implemented. opcode: 0x{opcode:04X}, program counter: 0x{pc:03X}")


class StackOverflowError(Chip8Error, IndexError):
    def __init__(self, pc, depth):
        self.pc = pc
        super().__init__(f"The CHIP-8 stack can contain at most {depth} addresses. "
                         f"Limit exceeded at program counter 0x{pc:03X}")


class StackUnderflowError(Chip8Error, IndexError):
    def __init__(self, pc):
        self.pc = pc
        super().__init__(f"return with an empty stack at program counter 0x{pc:03X}")


class MemoryAccessError(Chip8Error, IndexError):
    def __init__(self, address, length=1):
        self.address = address
        self.length = length
        super().__init__(f"memory access of {length} byte(s) at 0x{address:03X} is out of range")
