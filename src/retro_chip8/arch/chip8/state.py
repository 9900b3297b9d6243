# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.core.state import CpuState

# @intent:constant CHIP-8のメモリマップとレジスタ構成を定義します。
MEMORY_SIZE = 0x1000       # 4KB (0x000-0xFFF)
ADDRESS_MASK = 0x0FFF
PROGRAM_START = 0x200      # プログラムのロード先
PROGRAM_MAX_SIZE = MEMORY_SIZE - PROGRAM_START  # 0xFFF - 0x200 + 1
REGISTER_COUNT = 16
STACK_DEPTH = 16
FLAG_REGISTER = 0xF        # VF

# @intent:responsibility CHIP-8 CPUのレジスタ(V0-VF, I, PC, SP)とコールスタックを保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 CPUのレジスタ状態を保持するデータクラス。
    VFは汎用レジスタであると同時に、キャリー/ボロー/シフト/衝突フラグの出力先でもあります。
    """
    pc: int = PROGRAM_START
    sp: int = 0
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    i: int = 0x0000    # Index Register (下位12bitのみ有効)
    stack: List[int] = field(default_factory=lambda: [0] * STACK_DEPTH)
    # Fx0Aで待機中の書き込み先レジスタ。待機していなければNone。
    key_wait_register: Optional[int] = None

    # @intent:accessor VFフラグへのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    @property
    def waiting_for_key(self) -> bool:
        return self.key_wait_register is not None

    # @intent:responsibility 戻りアドレスの一覧（スタックの有効部分）を返します。
    def call_stack(self) -> List[int]:
        return self.stack[:self.sp]
