# retro_chip8/loader/loader.py
"""
ROMローダーモジュール。
CHIP-8のROMはヘッダを持たない生のバイト列であり、そのまま0x200からロードされます。
"""
from pathlib import Path

from retro_chip8.core.interpreter import Interpreter

class RomLoader:
    """
    バイナリファイルを読み込み、インタプリタのメモリへロードするローダー。
    """
    def load_rom(self, file_path: str) -> bytes:
        data = Path(file_path).read_bytes()
        if not data:
            raise ValueError(f"ROM file {file_path} is empty")
        return data

    # @intent:responsibility ROMを読み込み、インタプリタへ渡します。
    # @intent:post-condition ROMが大きすぎる場合はProgramTooLargeが送出され、インタプリタはHALTEDになります。
    def load_into(self, file_path: str, interpreter: Interpreter) -> int:
        data = self.load_rom(file_path)
        interpreter.load_program(data)
        return len(data)
