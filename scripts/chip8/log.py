import sys
from functools import wraps

from .settings import DEBUG


def log(*args):
    """print only when the DEBUG env var is set"""
    if DEBUG:
        print(*args)


def warn(*args):
    print(*args, file=sys.stderr)


def asm(disassemble):
    """decorator to print out the ASM of the instruction being executed"""
    def decorator(fn):
        @wraps(fn)
        def wrapper_fn(*args, **kwargs):
            cpu, instruction = args[0], args[1]     # args[0] equals self of the decorated method
            if DEBUG:
                print(f"mem_addr: 0x{cpu.pc:04x}    instruction: {disassemble(instruction)}")
            return fn(*args, **kwargs)
        return wrapper_fn
    return decorator
