# tests/arch/chip8/test_instructions_io.py
"""
周辺装置を操作する命令（描画、キー入力、タイマー）の単体テスト。
"""
import pytest

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.font import FONT_START, FONT_SPRITES
from retro_chip8.core.errors import MemoryOutOfBounds

# @intent:test_suite CPUとPeripheralsの間の命令の振る舞いを検証します。

class Harness:
    def __init__(self):
        self.bus = Bus()
        self.bus.register_device(0x000, 0xFFF, RAM(0x1000))
        self.bus.load(FONT_START, FONT_SPRITES)
        self.io = Peripherals()
        self.cpu = Chip8Cpu(self.bus, self.io)
        self.state = self.cpu.get_state()

    def execute(self, opcode):
        pc = self.state.pc
        self.bus.write(pc, opcode >> 8)
        self.bus.write(pc + 1, opcode & 0xFF)
        return self.cpu.step()

@pytest.fixture
def h():
    return Harness()

class TestDraw:
    def test_drw_font_glyph(self, h):
        h.state.v[0] = 0
        h.state.v[1] = 0
        h.state.i = FONT_START  # "0"
        h.execute(0xD015)
        display = h.io.display
        assert [display.get_pixel(x, 0) for x in range(5)] == [True, True, True, True, False]
        assert [display.get_pixel(x, 1) for x in range(5)] == [True, False, False, True, False]
        assert h.state.vf == 0

    # @intent:test_case_xor 同じ位置へ2回描画するとVF=1となり画面が元に戻ることを検証します。
    def test_drw_twice_sets_collision(self, h):
        h.state.v[0] = 10
        h.state.v[1] = 20
        h.state.i = FONT_START
        h.execute(0xD015)
        h.execute(0xD015)
        assert h.state.vf == 1
        assert not any(any(row) for row in h.io.display.snapshot())

    def test_drw_zero_rows(self, h):
        h.state.vf = 1
        h.execute(0xD010)
        assert h.state.vf == 0
        assert not any(any(row) for row in h.io.display.snapshot())

    def test_drw_sprite_past_memory_end(self, h):
        h.state.i = 0xFFD
        with pytest.raises(MemoryOutOfBounds):
            h.execute(0xD015)
        assert not any(any(row) for row in h.io.display.snapshot())

    def test_cls(self, h):
        h.io.display.draw_sprite(0, 0, [0xFF])
        h.execute(0x00E0)
        assert not any(any(row) for row in h.io.display.snapshot())

class TestKeys:
    def test_skp_sknp(self, h):
        h.state.v[3] = 0x7
        h.io.keypad.set_pressed(0x7, True)
        h.execute(0xE39E)
        assert h.state.pc == 0x204
        h.execute(0xE3A1)
        assert h.state.pc == 0x206

    def test_sknp_when_released(self, h):
        h.state.v[3] = 0x7
        h.execute(0xE3A1)
        assert h.state.pc == 0x204

    def test_key_checks_use_low_nibble(self, h):
        h.state.v[3] = 0x17
        h.io.keypad.set_pressed(0x7, True)
        h.execute(0xE39E)
        assert h.state.pc == 0x204

    # @intent:test_case_keywait Fx0Aは解放されるまでPCを進めず、解放されたキーをVxへ格納することを検証します。
    def test_ld_vx_k_waits_for_release(self, h):
        h.execute(0xF50A)
        assert h.state.waiting_for_key
        assert h.state.pc == 0x200
        cycles = h.cpu.cycle_count

        snapshot = h.cpu.step()
        assert snapshot.metadata.symbol_info == "LD V5, K (waiting)"
        assert h.state.pc == 0x200

        h.io.keypad.set_pressed(0xC, True)
        h.cpu.step()
        assert h.state.waiting_for_key

        h.io.keypad.set_pressed(0xC, False)
        snapshot = h.cpu.step()
        assert snapshot.metadata.symbol_info == "LD V5, K (key C)"
        assert not h.state.waiting_for_key
        assert h.state.v[5] == 0xC
        assert h.state.pc == 0x202
        assert h.cpu.cycle_count == cycles

class TestTimerInstructions:
    def test_delay_round_trip(self, h):
        h.state.v[1] = 0x30
        h.execute(0xF115)
        assert h.io.timers.delay == 0x30
        h.io.timers.tick()
        h.execute(0xF207)
        assert h.state.v[2] == 0x2F

    def test_ld_st_vx(self, h):
        h.state.v[1] = 0x02
        h.execute(0xF118)
        assert h.io.timers.sound == 0x02
        assert h.io.timers.is_sound_active
