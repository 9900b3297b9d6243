# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.core.errors import StackOverflow, StackUnderflow
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState, STACK_DEPTH
from .base import InstructionKind, make_operation, reg, skip_next

# --- RET ---
# @intent:responsibility RET (00EE) 命令をデコードします。
def decode_ret(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.RET, "RET", [])

# @intent:responsibility RET命令を実行し、スタックから戻りアドレスをポップしてPCに設定します。
# @intent:pre-condition スタックが空の場合はStackUnderflowとなります。
def execute_ret(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.sp == 0:
        raise StackUnderflow(state.pc - op.length)
    state.sp -= 1
    state.pc = state.stack[state.sp]

# --- JP ---
# @intent:responsibility JP addr (1nnn) 命令をデコードします。
def decode_jp(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.JP, "JP", [f"${opcode & 0xFFF:03X}"])

def execute_jp(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.pc = op.nnn

# --- CALL ---
# @intent:responsibility CALL addr (2nnn) 命令をデコードします。
def decode_call(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.CALL, "CALL", [f"${opcode & 0xFFF:03X}"])

# @intent:responsibility CALL命令を実行し、戻りアドレス（次の命令）をプッシュしてからジャンプします。
# @intent:pre-condition スタックが満杯(16段)の場合はStackOverflowとなります。
def execute_call(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.sp >= STACK_DEPTH:
        raise StackOverflow(state.pc - op.length)
    # state.pc は CPU.step で既に次の命令を指している
    state.stack[state.sp] = state.pc
    state.sp += 1
    state.pc = op.nnn

# --- SE Vx, byte ---
def decode_se_vx_kk(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SE_VX_KK, "SE", [reg((opcode >> 8) & 0xF), f"#${opcode & 0xFF:02X}"])

# @intent:responsibility Vx == kk の場合に次の命令をスキップします。
def execute_se_vx_kk(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.v[op.x] == op.kk:
        skip_next(state)

# --- SNE Vx, byte ---
def decode_sne_vx_kk(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SNE_VX_KK, "SNE", [reg((opcode >> 8) & 0xF), f"#${opcode & 0xFF:02X}"])

# @intent:responsibility Vx != kk の場合に次の命令をスキップします。
def execute_sne_vx_kk(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.v[op.x] != op.kk:
        skip_next(state)

# --- SE Vx, Vy ---
def decode_se_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SE_VX_VY, "SE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_se_vx_vy(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

# --- SNE Vx, Vy ---
def decode_sne_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SNE_VX_VY, "SNE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_sne_vx_vy(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- JP V0, addr ---
# @intent:responsibility JP V0, addr (Bnnn) 命令をデコードします。
def decode_jp_v0(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.JP_V0, "JP", ["V0", f"${opcode & 0xFFF:03X}"])

# @intent:responsibility nnn + V0 へジャンプします。
# @intent:rationale 結果はマスクしません。0xFFFを超えた場合は次のフェッチでMemoryOutOfBoundsとして検出されます。
def execute_jp_v0(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.pc = op.nnn + state.v[0]
