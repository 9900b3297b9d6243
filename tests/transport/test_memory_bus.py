# tests/transport/test_memory_bus.py
"""
retro_chip8.transport.busモジュールの単体テスト。
"""
import pytest
from retro_chip8.transport.bus import Bus, Device, RAM, BusAccess, BusAccessType
from retro_chip8.core.errors import MemoryOutOfBounds, Chip8Error

# @intent:test_suite 4KBアドレス空間のバスとRAMの基本的な機能とエラーハンドリングを検証します。

class TestRAM:
    # @intent:test_case_init 無効なサイズでRAMを初期化するとValueErrorが発生することを検証します。
    def test_ram_init_invalid_size(self):
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(0)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(1.5)

    def test_ram_zero_initialized(self):
        ram = RAM(16)
        assert ram.get_size() == 16
        assert all(ram.read(a) == 0 for a in range(16))

    # @intent:test_case_oob 境界外アクセスはMemoryOutOfBounds(IndexErrorでもある)となることを検証します。
    def test_ram_out_of_bounds(self):
        ram = RAM(4)
        with pytest.raises(MemoryOutOfBounds):
            ram.read(4)
        with pytest.raises(IndexError):
            ram.write(-1, 0x00)

    def test_ram_write_invalid_data(self):
        ram = RAM(1)
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            ram.write(0, 0x100)


class TestBus:
    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x000, 0xFFF, RAM(0x1000))
        return bus

    def test_register_device_size_mismatch(self):
        bus = Bus()
        with pytest.raises(ValueError, match="does not match"):
            bus.register_device(0x000, 0xFFF, RAM(0x800))

    def test_register_non_device(self):
        bus = Bus()
        with pytest.raises(TypeError):
            bus.register_device(0x000, 0x00F, object())

    def test_register_invalid_range(self):
        bus = Bus()
        with pytest.raises(ValueError, match="Invalid address range"):
            bus.register_device(0x100, 0x0FF, RAM(1))

    # @intent:test_case_rw 読み書きが記録され、ログ取得時にクリアされることを検証します。
    def test_read_write_logged(self, bus):
        bus.write(0x300, 0xAB)
        assert bus.read(0x300) == 0xAB
        log = bus.get_and_clear_activity_log()
        assert log == [
            BusAccess(0x300, 0xAB, BusAccessType.WRITE),
            BusAccess(0x300, 0xAB, BusAccessType.READ),
        ]
        assert bus.get_and_clear_activity_log() == []

    def test_peek_not_logged(self, bus):
        bus.write(0x10, 0x42)
        bus.get_and_clear_activity_log()
        assert bus.peek(0x10) == 0x42
        assert bus.get_and_clear_activity_log() == []

    def test_read_word_big_endian(self, bus):
        bus.write(0x200, 0x12)
        bus.write(0x201, 0x34)
        assert bus.read_word(0x200) == 0x1234

    # @intent:test_case_oob アドレス空間の外はラップせず、致命的エラーとなることを検証します。
    def test_access_beyond_address_space(self, bus):
        with pytest.raises(MemoryOutOfBounds) as excinfo:
            bus.read(0x1000)
        assert excinfo.value.address == 0x1000
        assert isinstance(excinfo.value, Chip8Error)
        with pytest.raises(MemoryOutOfBounds):
            bus.write(0x1000, 0x00)

    def test_read_word_at_last_byte(self, bus):
        with pytest.raises(MemoryOutOfBounds):
            bus.read_word(0xFFF)

    def test_load_copies_bytes_without_logging(self, bus):
        bus.load(0x200, b"\x01\x02\x03")
        assert [bus.peek(a) for a in range(0x200, 0x203)] == [1, 2, 3]
        assert bus.get_and_clear_activity_log() == []

    # @intent:test_case_oob 終端が範囲外のロードは1バイトも書き込まないことを検証します。
    def test_load_past_end_is_rejected_atomically(self, bus):
        with pytest.raises(MemoryOutOfBounds):
            bus.load(0xFFE, b"\xAA\xBB\xCC")
        assert bus.peek(0xFFE) == 0
        assert bus.peek(0xFFF) == 0

    def test_custom_device_dispatch(self):
        class Latch(Device):
            def __init__(self):
                self.value = 0
            def read(self, address):
                return self.value + address
            def write(self, address, data):
                self.value = data

        bus = Bus()
        latch = Latch()
        bus.register_device(0x100, 0x10F, latch)
        bus.write(0x105, 0x20)
        assert latch.value == 0x20
        assert bus.read(0x102) == 0x22
