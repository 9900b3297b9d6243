# tests/arch/chip8/test_instructions_load.py
import unittest

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.font import FONT_START, FONT_SPRITES, FONT_SPRITE_LENGTH
from retro_chip8.core.errors import MemoryOutOfBounds

class TestChip8LoadInstructions(unittest.TestCase):
    def setUp(self):
        self.bus = Bus()
        self.bus.register_device(0x000, 0xFFF, RAM(0x1000))
        self.bus.load(FONT_START, FONT_SPRITES)
        self.cpu = Chip8Cpu(self.bus)
        self.state = self.cpu.get_state()

    def _execute(self, opcode):
        pc = self.state.pc
        self.bus.write(pc, opcode >> 8)
        self.bus.write(pc + 1, opcode & 0xFF)
        return self.cpu.step()

    def test_ld_vx_kk_and_vy(self):
        self._execute(0x6A05)
        self._execute(0x8BA0)
        self.assertEqual(self.state.v[0xA], 0x05)
        self.assertEqual(self.state.v[0xB], 0x05)

    def test_ld_i(self):
        self._execute(0xA123)
        self.assertEqual(self.state.i, 0x123)

    def test_ld_f_vx_points_at_font_glyph(self):
        self.state.v[2] = 0x0A
        self._execute(0xF229)
        self.assertEqual(self.state.i, FONT_START + 0xA * FONT_SPRITE_LENGTH)
        glyph = [self.bus.peek(self.state.i + n) for n in range(FONT_SPRITE_LENGTH)]
        self.assertEqual(glyph, [0xF0, 0x90, 0xF0, 0x90, 0x90])

    def test_ld_f_vx_uses_low_nibble(self):
        self.state.v[2] = 0x1F
        self._execute(0xF229)
        self.assertEqual(self.state.i, FONT_START + 0xF * FONT_SPRITE_LENGTH)

    def test_ld_b_vx(self):
        self.state.v[3] = 254
        self.state.i = 0x300
        self._execute(0xF333)
        self.assertEqual([self.bus.peek(0x300 + n) for n in range(3)], [2, 5, 4])
        self.assertEqual(self.state.i, 0x300)

    def test_store_and_load_registers_leave_i(self):
        for n in range(4):
            self.state.v[n] = 0x10 + n
        self.state.i = 0x400
        self._execute(0xF355)
        self.assertEqual([self.bus.peek(0x400 + n) for n in range(5)], [0x10, 0x11, 0x12, 0x13, 0x00])
        self.assertEqual(self.state.i, 0x400)

        self.state.v[:4] = [0, 0, 0, 0]
        self._execute(0xF265)
        self.assertEqual(self.state.v[:4], [0x10, 0x11, 0x12, 0x00])
        self.assertEqual(self.state.i, 0x400)

    # 範囲外にかかる複数バイト転送は1バイトも書き込まない
    def test_store_registers_out_of_bounds_is_atomic(self):
        self.state.v[0] = 0xAA
        self.state.v[1] = 0xBB
        self.state.i = 0xFFF
        with self.assertRaises(MemoryOutOfBounds):
            self._execute(0xF155)
        self.assertEqual(self.bus.peek(0xFFF), 0)
        self.assertEqual(self.state.pc, 0x200)

    def test_ld_b_vx_out_of_bounds(self):
        self.state.i = 0xFFE
        with self.assertRaises(MemoryOutOfBounds):
            self._execute(0xF033)
        self.assertEqual(self.bus.peek(0xFFE), 0)

    def test_load_registers_with_i_beyond_memory(self):
        self.state.i = 0x1003
        with self.assertRaises(MemoryOutOfBounds) as ctx:
            self._execute(0xF065)
        self.assertEqual(ctx.exception.address, 0x1003)

if __name__ == '__main__':
    unittest.main()
