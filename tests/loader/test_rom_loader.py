# tests/loader/test_rom_loader.py
"""
retro_chip8.loader.loaderモジュールの単体テスト。
"""
import pytest

from retro_chip8.loader.loader import RomLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.core.errors import ProgramTooLarge
from retro_chip8.core.interpreter import RunState

# @intent:test_suite 生バイナリのROMファイルの読み込みとロードを検証します。

class TestRomLoader:
    @pytest.fixture
    def setup_loader(self, tmp_path):
        return RomLoader(), SystemBuilder().build_system(), tmp_path

    def test_load_rom_bytes(self, setup_loader):
        loader, _, tmp_path = setup_loader
        rom = tmp_path / "test.ch8"
        rom.write_bytes(b"\x00\xE0\x12\x02")
        assert loader.load_rom(str(rom)) == b"\x00\xE0\x12\x02"

    def test_load_into_interpreter(self, setup_loader):
        loader, interpreter, tmp_path = setup_loader
        rom = tmp_path / "test.ch8"
        rom.write_bytes(b"\x6A\x05\x7A\x03")
        assert loader.load_into(str(rom), interpreter) == 4
        interpreter.step()
        interpreter.step()
        assert interpreter.cpu_state.v[0xA] == 8

    def test_missing_file(self, setup_loader):
        loader, _, tmp_path = setup_loader
        with pytest.raises(FileNotFoundError):
            loader.load_rom(str(tmp_path / "missing.ch8"))

    def test_empty_file(self, setup_loader):
        loader, _, tmp_path = setup_loader
        rom = tmp_path / "empty.ch8"
        rom.write_bytes(b"")
        with pytest.raises(ValueError, match="empty"):
            loader.load_rom(str(rom))

    def test_oversized_rom_halts(self, setup_loader):
        loader, interpreter, tmp_path = setup_loader
        rom = tmp_path / "big.ch8"
        rom.write_bytes(bytes(0xE01))
        with pytest.raises(ProgramTooLarge):
            loader.load_into(str(rom), interpreter)
        assert interpreter.run_state == RunState.HALTED
