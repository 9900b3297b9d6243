"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.core.errors import UnknownInstruction
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import InstructionKind
from .maps import DECODE_MAP, EXECUTE_MAP

# @intent:responsibility 16bitのオペコードをCHIP-8の命令としてデコードします。
# @intent:pre-condition `pc`はオペコードをフェッチしたアドレスです（エラー報告にのみ使用）。
def decode_opcode(opcode: int, pc: int) -> Operation:
    """
    CHIP-8のオペコードをデコードし、Operationオブジェクトを返します。
    どの命令にも該当しない場合はUnknownInstructionを送出します。
    """
    mask, table = DECODE_MAP[(opcode >> 12) & 0xF]
    decoder = table.get(opcode & mask)
    if decoder is None:
        raise UnknownInstruction(opcode, pc)
    return decoder(opcode)

# @intent:responsibility デコードされたCHIP-8命令を実行し、CPUの状態を変更します。
# @intent:pre-condition state.pcは既に次の命令(フェッチアドレス+2)を指している必要があります。
# @intent:return 実行後のPC。
def execute_instruction(operation: Operation, state: Chip8CpuState, bus: Bus, io: Peripherals) -> int:
    """
    デコードされたCHIP-8命令を実行し、実行後のプログラムカウンタを返します。
    """
    executor = EXECUTE_MAP[operation.kind]
    executor(state, bus, io, operation)
    return state.pc
