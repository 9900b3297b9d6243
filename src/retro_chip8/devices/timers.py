# retro_chip8/devices/timers.py
"""
Device Layer (タイマー)

60Hzで独立して減算されるディレイタイマーとサウンドタイマーを提供します。
"""

TIMER_HZ = 60

# @intent:responsibility 2つの8bitカウンタを保持し、固定レートのtick()で減算します。
class Timers:
    """
    ディレイタイマーとサウンドタイマー。
    tick()はCPUの命令数とは無関係に、1/60秒ごとに1回呼び出されることを前提とします。
    """
    def __init__(self):
        self._delay = 0
        self._sound = 0

    @property
    def delay(self) -> int:
        return self._delay

    @delay.setter
    def delay(self, value: int) -> None:
        self._delay = value & 0xFF

    @property
    def sound(self) -> int:
        return self._sound

    @sound.setter
    def sound(self, value: int) -> None:
        self._sound = value & 0xFF

    # @intent:responsibility 非ゼロのタイマーをそれぞれ1だけ減算します。0未満にはなりません。
    def tick(self) -> None:
        if self._delay > 0:
            self._delay -= 1
        if self._sound > 0:
            self._sound -= 1

    # @intent:responsibility 音声出力の可否(サウンドタイマーが非ゼロか)を返します。
    @property
    def is_sound_active(self) -> bool:
        return self._sound > 0
