# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通定義とユーティリティ。
"""
from enum import Enum
from typing import List

from retro_chip8.core.errors import MemoryOutOfBounds
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState, ADDRESS_MASK

# @intent:data_structure デコード結果として取り得る命令種別の閉じた集合。
class InstructionKind(Enum):
    CLS = "00E0"
    RET = "00EE"
    JP = "1nnn"
    CALL = "2nnn"
    SE_VX_KK = "3xkk"
    SNE_VX_KK = "4xkk"
    SE_VX_VY = "5xy0"
    LD_VX_KK = "6xkk"
    ADD_VX_KK = "7xkk"
    LD_VX_VY = "8xy0"
    OR = "8xy1"
    AND = "8xy2"
    XOR = "8xy3"
    ADD_VX_VY = "8xy4"
    SUB = "8xy5"
    SHR = "8xy6"
    SUBN = "8xy7"
    SHL = "8xyE"
    SNE_VX_VY = "9xy0"
    LD_I = "Annn"
    JP_V0 = "Bnnn"
    RND = "Cxkk"
    DRW = "Dxyn"
    SKP = "Ex9E"
    SKNP = "ExA1"
    LD_VX_DT = "Fx07"
    LD_VX_K = "Fx0A"
    LD_DT_VX = "Fx15"
    LD_ST_VX = "Fx18"
    ADD_I_VX = "Fx1E"
    LD_F_VX = "Fx29"
    LD_B_VX = "Fx33"
    LD_I_VX = "Fx55"
    LD_VX_I = "Fx65"

# @intent:utility_function オペコードから全フィールド(x, y, n, kk, nnn)を切り出してOperationを生成します。
def make_operation(opcode: int, kind: InstructionKind, mnemonic: str, operands: List[str]) -> Operation:
    return Operation(
        opcode=opcode,
        kind=kind,
        mnemonic=mnemonic,
        operands=operands,
        x=(opcode >> 8) & 0x0F,
        y=(opcode >> 4) & 0x0F,
        n=opcode & 0x000F,
        kk=opcode & 0x00FF,
        nnn=opcode & ADDRESS_MASK,
    )

# @intent:utility_function レジスタ名の表記("V0"-"VF")を返します。
def reg(index: int) -> str:
    return f"V{index:X}"

# @intent:utility_function 次の命令を1つ読み飛ばします。PCは既に次の命令を指しています。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF

# @intent:utility_function 連続領域 [start, start+length) がアドレス空間内にあることを検証します。
# @intent:rationale 複数バイトのアクセスを始める前に検証することで、命令が途中まで適用された状態を残しません。
def check_range(start: int, length: int) -> None:
    if length <= 0:
        return
    end = start + length - 1
    if start > ADDRESS_MASK:
        raise MemoryOutOfBounds(start)
    if end > ADDRESS_MASK:
        raise MemoryOutOfBounds(ADDRESS_MASK + 1)
