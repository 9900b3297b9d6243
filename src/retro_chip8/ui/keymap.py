# src/retro_chip8/ui/keymap.py
"""
ホストのキーボード(Qtのキーコード)とCHIP-8の16キーの対応表。
"""
from typing import Dict, Optional

from PySide6.QtCore import Qt

# @intent:constant "space" -> Qt.Key.Key_Space のような、大文字小文字を区別しない名前付きキーの索引。
_NAMED_KEYS: Dict[str, int] = {
    name[len("Key_"):].lower(): int(member.value)
    for name, member in Qt.Key.__members__.items()
    if name.startswith("Key_")
}

# @intent:responsibility 設定ファイルのキーマップ(キー名 -> CHIP-8キー)をQtキーコードの対応表に変換します。
class KeyMapper:
    def __init__(self, keymap: Dict[str, int]):
        self._map: Dict[int, int] = {}
        for name, chip8_key in keymap.items():
            qt_key = self._to_qt_key(name)
            if qt_key is None:
                raise ValueError(f"Unsupported host key '{name}' in keymap")
            self._map[qt_key] = chip8_key

    @staticmethod
    def _to_qt_key(name: str) -> Optional[int]:
        # Qt.Key_0..9 と Qt.Key_A..Z はASCIIの大文字コードと一致する
        if len(name) == 1 and name.upper().isascii() and name.upper().isalnum():
            return ord(name.upper())
        return _NAMED_KEYS.get(name.lower())

    def lookup(self, qt_key) -> Optional[int]:
        return self._map.get(int(getattr(qt_key, "value", qt_key)))
