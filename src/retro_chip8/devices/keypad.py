# retro_chip8/devices/keypad.py
"""
Device Layer (キーパッド)

16個の論理キー(0x0-0xF)の押下状態と、Fx0A命令用の「キー解放待ち」ラッチを保持します。
"""
from typing import List, Optional

KEY_COUNT = 16

# @intent:responsibility 16キーの押下状態と、キー待ち中に解放されたキーのラッチを管理します。
class Keypad:
    """
    CHIP-8の16キーキーパッド。
    begin_key_wait()でラッチが有効化され、以降に「押下→解放」を経たキーが1つだけ記録されます。
    """
    def __init__(self):
        self._pressed: List[bool] = [False] * KEY_COUNT
        self._awaiting_release = False
        self._released_key: Optional[int] = None

    @staticmethod
    def _check_key(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key {key!r} is not a CHIP-8 key (0x0-0xF).")

    # @intent:responsibility 1つのキーの押下状態を更新します。
    # @intent:post-condition キー待ち中に押下状態から解放された場合、そのキーがラッチされます。
    def set_pressed(self, key: int, pressed: bool) -> None:
        self._check_key(key)
        was_pressed = self._pressed[key]
        self._pressed[key] = bool(pressed)
        if self._awaiting_release and was_pressed and not pressed and self._released_key is None:
            self._released_key = key

    def is_pressed(self, key: int) -> bool:
        self._check_key(key)
        return self._pressed[key]

    # @intent:responsibility キー待ちを開始し、それ以前の解放イベントを破棄します。
    def begin_key_wait(self) -> None:
        self._awaiting_release = True
        self._released_key = None

    # @intent:responsibility ラッチされたキーを取り出します。取り出した時点でキー待ちは終了します。
    # @intent:return ラッチされたキー、まだ無ければNone。
    def take_released_key(self) -> Optional[int]:
        key = self._released_key
        if key is not None:
            self._released_key = None
            self._awaiting_release = False
        return key

    @property
    def awaiting_release(self) -> bool:
        return self._awaiting_release
