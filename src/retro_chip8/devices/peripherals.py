# retro_chip8/devices/peripherals.py
"""
命令実行時に参照される、メモリ以外の周辺装置一式。
"""
import random
from dataclasses import dataclass, field

from retro_chip8.devices.display import Display
from retro_chip8.devices.keypad import Keypad
from retro_chip8.devices.timers import Timers

# @intent:responsibility 命令実行関数に渡す周辺装置(ディスプレイ、キーパッド、タイマー、乱数源)をまとめます。
# @intent:rationale 乱数源を注入可能にすることで、Cxkkを含むプログラムもテストで決定的に再現できます。
@dataclass
class Peripherals:
    display: Display = field(default_factory=Display)
    keypad: Keypad = field(default_factory=Keypad)
    timers: Timers = field(default_factory=Timers)
    rng: random.Random = field(default_factory=random.Random)
