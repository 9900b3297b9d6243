# retro_chip8/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1ステップ実行後のCPUとバスの状態を記録した不変のデータ構造を定義します。
フロントエンドやテストへの情報提供に用いる責務を負います。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from retro_chip8.core.state import CpuState
from retro_chip8.transport.bus import BusAccess


# @intent:responsibility デコードされた命令の詳細を記録します。
# @intent:rationale 生の16bitからデコードした結果を閉じた命令種別(kind)と各フィールドで表し、
#                  「何の命令か」と「何をするか」を分離します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコードされた命令（オペコード、種別、ニーモニック、オペランド）を記録するデータクラス。
    """
    opcode: int # 例: 0xD015
    kind: Optional[Enum] # 例: InstructionKind.DRW
    mnemonic: str # 例: "DRW"
    operands: List[str] = field(default_factory=list) # 例: ["V0", "V1", "5"]
    x: int = 0 # 第2ニブル
    y: int = 0 # 第3ニブル
    n: int = 0 # 下位4bit
    kk: int = 0 # 下位8bit
    nnn: int = 0 # 下位12bit
    cycle_count: int = 1 # 命令スロットの消費数
    length: int = 2 # 命令のバイト長

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    """
    実行に関するメタデータ（累計命令数、表示用の命令テキスト）を記録するデータクラス。
    """
    cycle_count: int
    symbol_info: Optional[str] = None # 例: "DRW V0, V1, 5"

# @intent:responsibility ある一時点におけるCPUとバスの状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    ステップ実行直後のCPU状態のコピーと、そのステップで発生したバスアクセスを記録します。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)
