import unittest

from chip8.errors import Chip8Error, MemoryAccessError
from chip8.memory import Memory


class TestMemory(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()

    def test_size(self):
        self.assertEqual(self.memory.size(), 4096)
        self.assertEqual(Memory(256).size(), 256)

    def test_read_write(self):
        self.memory.write(0x300, 0x42)
        self.assertEqual(self.memory.read(0x300), 0x42)
        self.memory.write(0x301, 0x1FF)
        self.assertEqual(self.memory.read(0x301), 0xFF)

    def test_out_of_range(self):
        with self.assertRaises(MemoryAccessError) as ctx:
            self.memory.read(4096)
        self.assertEqual(ctx.exception.address, 4096)
        self.assertIsInstance(ctx.exception, Chip8Error)
        with self.assertRaises(MemoryAccessError):
            self.memory.write(-1, 0)

    def test_load_and_read_block(self):
        self.memory.load(0x200, [1, 2, 3])
        self.assertEqual(self.memory.read_block(0x200, 3), b"\x01\x02\x03")
        self.assertEqual(self.memory.read_block(0x200, 0), b"")

    def test_load_does_not_fit(self):
        with self.assertRaises(MemoryAccessError):
            self.memory.load(4095, b"\x01\x02")
        with self.assertRaises(MemoryAccessError):
            self.memory.read_block(4095, 2)

    def test_clear(self):
        self.memory.load(0, b"\xFF" * 16)
        self.memory.clear()
        self.assertFalse(any(self.memory.cells))
        self.assertEqual(self.memory.size(), 4096)

    def test_debug_dump(self):
        memory = Memory(32)
        memory.write(0x11, 0xAB)
        self.assertEqual(memory.debug_dump().splitlines(), [
            "0x000 " + " ".join(["00"] * 16),
            "0x010 00 AB " + " ".join(["00"] * 14),
        ])


if __name__ == "__main__":
    unittest.main()
