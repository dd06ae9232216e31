from collections import namedtuple
from enum import Enum


class Op(Enum):
    """every instruction shape the interpreter knows about: (pattern, operand template)"""
    CLS = (0x00E0, "CLS")
    RET = (0x00EE, "RET")
    SYS = (0x0000, "SYS 0x{nnn:03x}")
    JP = (0x1000, "JP 0x{nnn:03x}")
    CALL = (0x2000, "CALL 0x{nnn:03x}")
    SE_VX_KK = (0x3000, "SE V{x:X}, 0x{kk:02x}")
    SNE_VX_KK = (0x4000, "SNE V{x:X}, 0x{kk:02x}")
    SE_VX_VY = (0x5000, "SE V{x:X}, V{y:X}")
    LD_VX_KK = (0x6000, "LD V{x:X}, 0x{kk:02x}")
    ADD_VX_KK = (0x7000, "ADD V{x:X}, 0x{kk:02x}")
    LD_VX_VY = (0x8000, "LD V{x:X}, V{y:X}")
    OR = (0x8001, "OR V{x:X}, V{y:X}")
    AND = (0x8002, "AND V{x:X}, V{y:X}")
    XOR = (0x8003, "XOR V{x:X}, V{y:X}")
    ADD_VX_VY = (0x8004, "ADD V{x:X}, V{y:X}")
    SUB = (0x8005, "SUB V{x:X}, V{y:X}")
    SHR = (0x8006, "SHR V{x:X}")
    SUBN = (0x8007, "SUBN V{x:X}, V{y:X}")
    SHL = (0x800E, "SHL V{x:X}")
    SNE_VX_VY = (0x9000, "SNE V{x:X}, V{y:X}")
    LD_I = (0xA000, "LD I, 0x{nnn:03x}")
    JP_V0 = (0xB000, "JP V0, 0x{nnn:03x}")
    RND = (0xC000, "RND V{x:X}, 0x{kk:02x}")
    DRW = (0xD000, "DRW V{x:X}, V{y:X}, {n}")
    SKP = (0xE09E, "SKP V{x:X}")
    SKNP = (0xE0A1, "SKNP V{x:X}")
    LD_VX_DT = (0xF007, "LD V{x:X}, DT")
    LD_VX_K = (0xF00A, "LD V{x:X}, K")
    LD_DT_VX = (0xF015, "LD DT, V{x:X}")
    LD_ST_VX = (0xF018, "LD ST, V{x:X}")
    ADD_I_VX = (0xF01E, "ADD I, V{x:X}")
    LD_F_VX = (0xF029, "LD F, V{x:X}")
    LD_B_VX = (0xF033, "LD B, V{x:X}")
    LD_I_VX = (0xF055, "LD [I], V{x:X}")
    LD_VX_I = (0xF065, "LD V{x:X}, [I]")
    UNKNOWN = (None, "??? 0x{opcode:04x}")

    def __init__(self, pattern, template):
        self.pattern = pattern
        self.template = template


Instruction = namedtuple("Instruction", ["op", "opcode", "x", "y", "n", "kk", "nnn"])

# WATCH OUT: masks order is important!!!
# the lookup stops at the first mask whose masked opcode is a known pattern
MASKS = [
    (0xFFFF, [Op.CLS, Op.RET]),
    (0xF0FF, [Op.SKP, Op.SKNP, Op.LD_VX_DT, Op.LD_VX_K, Op.LD_DT_VX, Op.LD_ST_VX,
              Op.ADD_I_VX, Op.LD_F_VX, Op.LD_B_VX, Op.LD_I_VX, Op.LD_VX_I]),
    (0xF00F, [Op.SE_VX_VY, Op.LD_VX_VY, Op.OR, Op.AND, Op.XOR, Op.ADD_VX_VY, Op.SUB,
              Op.SHR, Op.SUBN, Op.SHL, Op.SNE_VX_VY]),
    (0xF000, [Op.SYS, Op.JP, Op.CALL, Op.SE_VX_KK, Op.SNE_VX_KK, Op.LD_VX_KK, Op.ADD_VX_KK,
              Op.LD_I, Op.JP_V0, Op.RND, Op.DRW]),
]
_LOOKUP = [(mask, {op.pattern: op for op in ops}) for mask, ops in MASKS]


def nibbles(opcode):
    """split a 16-bit opcode into its four 4-bit fields, most significant first"""
    return (opcode & 0xF000) >> 12, (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4, opcode & 0x000F


def fetch(memory, pc):
    """compose the big-endian opcode stored at pc and pc + 1"""
    return memory.read(pc) << 8 | memory.read(pc + 1)


def decode(opcode):
    """decode opcodes using masks and return the matching Instruction"""
    op = Op.UNKNOWN
    for mask, patterns in _LOOKUP:
        if (opcode & mask) in patterns:
            op = patterns[opcode & mask]
            break
    _, x, y, n = nibbles(opcode)
    return Instruction(op, opcode, x, y, n, opcode & 0x00FF, opcode & 0x0FFF)


def disassemble(instruction):
    if not isinstance(instruction, Instruction):
        instruction = decode(instruction)
    return instruction.op.template.format(**instruction._asdict())
