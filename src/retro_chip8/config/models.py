from dataclasses import dataclass, field
from typing import Dict, Optional

# @intent:constant 一般的な QWERTY 配置への割り当て(1234 / QWER / ASDF / ZXCV)。
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#33FF66"
    background: str = "#101010"

@dataclass
class MachineConfig:
    cpu_hz: int = 700
    timer_hz: int = 60
    seed: Optional[int] = None  # Cxkk用の乱数シード。Noneなら非決定的
    display: DisplayConfig = field(default_factory=DisplayConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
