# src/retro_chip8/ui/beeper.py
"""
サウンドタイマーに連動するブザー。
タイマーが0でない間、矩形波のトーンをループ再生します。
"""
import os
import struct
import tempfile
import wave
from typing import Optional

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect

TONE_HZ = 440
# 1周期がちょうど100サンプルになり、ループの継ぎ目でノイズが出ない
SAMPLE_RATE = 44000
TONE_AMPLITUDE = 0x2000
TONE_VOLUME = 0.25

# @intent:responsibility 16bitモノラルの矩形波をWAVファイルとして書き出します。
# @intent:pre-condition sample_rateはfrequencyの偶数倍である必要があります(ループ再生のため)。
def write_square_wave(path: str, frequency: int = TONE_HZ, sample_rate: int = SAMPLE_RATE, periods: int = 44) -> None:
    period = sample_rate // frequency
    half = period // 2
    cycle = [TONE_AMPLITUDE] * half + [-TONE_AMPLITUDE] * (period - half)
    frames = struct.pack(f"<{period}h", *cycle) * periods
    with wave.open(path, "wb") as f:
        f.setnchannels(1)
        f.setsampwidth(2)
        f.setframerate(sample_rate)
        f.writeframes(frames)

# @intent:responsibility サウンドタイマーの状態を監視し、0でない間だけトーンを鳴らします。
class Beeper:
    """
    update()に渡された状態の立ち上がりでplay()、立ち下がりでstop()を呼び出します。
    effectがNoneの場合は状態の追跡のみを行います(音を出さない環境向け)。
    """
    def __init__(self, effect: Optional[QSoundEffect] = None):
        self._effect = effect
        self._active = False
        self._tone_path: Optional[str] = None
        self.start_count = 0

    # @intent:responsibility 一時ファイルに書き出した440Hzの矩形波をループ再生するBeeperを生成します。
    @classmethod
    def with_tone(cls) -> "Beeper":
        fd, path = tempfile.mkstemp(prefix="retro_chip8_tone_", suffix=".wav")
        os.close(fd)
        write_square_wave(path)
        effect = QSoundEffect()
        effect.setSource(QUrl.fromLocalFile(path))
        effect.setLoopCount(QSoundEffect.Loop.Infinite.value)
        effect.setVolume(TONE_VOLUME)
        beeper = cls(effect)
        beeper._tone_path = path
        return beeper

    @property
    def active(self) -> bool:
        return self._active

    def update(self, active: bool) -> None:
        if active and not self._active:
            self.start_count += 1
            if self._effect is not None:
                self._effect.play()
        elif not active and self._active:
            if self._effect is not None:
                self._effect.stop()
        self._active = active

    # @intent:responsibility トーンを止め、生成した一時ファイルを削除します。
    def close(self) -> None:
        self.update(False)
        if self._tone_path is not None:
            if os.path.exists(self._tone_path):
                os.remove(self._tone_path)
            self._tone_path = None
