from .errors import MemoryAccessError
from .log import log
from .settings import MEMORY_SIZE


# ******************** MEMORY SECTION
# ********** WRAPS A BYTEARRAY TO REPRESENT THE MAIN MEMORY WITH A LIMITED SIZE OF 4KB
class Memory:
    def __init__(self, size=MEMORY_SIZE):
        log(f"Initializing {size} bytes of main memory")
        self.cells = bytearray(size)    # public in order to allow batch access

    def _check(self, address, length=1):
        if address < 0 or address + length > len(self.cells):
            raise MemoryAccessError(address, length)

    def read(self, address):
        self._check(address)
        return self.cells[address]

    def write(self, address, value):
        self._check(address)
        self.cells[address] = value & 0xFF

    def read_block(self, address, length):
        self._check(address, length)
        return bytes(self.cells[address:address + length])

    def load(self, address, data):
        """copy data into memory starting at address"""
        self._check(address, len(data))
        self.cells[address:address + len(data)] = bytes(data)

    def clear(self):
        self.cells[:] = bytes(len(self.cells))

    def size(self):
        return len(self.cells)

    def debug_dump(self):
        """hex dump of the whole memory, 16 bytes per row"""
        rows = []
        for start in range(0, len(self.cells), 16):
            row = " ".join(f"{b:02X}" for b in self.cells[start:start + 16])
            rows.append(f"0x{start:03X} {row}")
        return "\n".join(rows)

    def print_debug_info(self):
        print(self.debug_dump())
