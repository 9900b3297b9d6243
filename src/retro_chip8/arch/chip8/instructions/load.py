# src/retro_chip8/arch/chip8/instructions/load.py
"""
転送命令（レジスタ、インデックスレジスタ、メモリ）の実装。

Fx33/Fx55/Fx65 はインデックスレジスタIを変更しません。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.font import font_address
from .base import InstructionKind, make_operation, reg, check_range

# --- LD Vx, byte ---
# @intent:responsibility LD Vx, byte (6xkk) 命令をデコードします。
def decode_ld_vx_kk(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_VX_KK, "LD", [reg((opcode >> 8) & 0xF), f"#${opcode & 0xFF:02X}"])

def execute_ld_vx_kk(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] = op.kk

# --- LD Vx, Vy ---
def decode_ld_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_VX_VY, "LD", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_ld_vx_vy(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- LD I, addr ---
# @intent:responsibility LD I, addr (Annn) 命令をデコードします。
def decode_ld_i(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_I, "LD", ["I", f"${opcode & 0xFFF:03X}"])

def execute_ld_i(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.i = op.nnn

# --- LD F, Vx ---
# @intent:responsibility LD F, Vx (Fx29) 命令をデコードします。
def decode_ld_f_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_F_VX, "LD", ["F", reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxの下位ニブルに対応するフォントスプライトのアドレスをIへ設定します。
def execute_ld_f_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.i = font_address(state.v[op.x])

# --- LD B, Vx ---
# @intent:responsibility LD B, Vx (Fx33) 命令をデコードします。
def decode_ld_b_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_B_VX, "LD", ["B", reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxの10進表現(百・十・一の位)を I, I+1, I+2 へ格納します。
def execute_ld_b_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    value = state.v[op.x]
    check_range(state.i, 3)
    bus.write(state.i, value // 100)
    bus.write(state.i + 1, (value // 10) % 10)
    bus.write(state.i + 2, value % 10)

# --- LD [I], Vx ---
# @intent:responsibility LD [I], Vx (Fx55) 命令をデコードします。
def decode_ld_i_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_I_VX, "LD", ["[I]", reg((opcode >> 8) & 0xF)])

# @intent:responsibility V0からVxまでを I から始まるメモリへ格納します。
def execute_ld_i_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    check_range(state.i, op.x + 1)
    for index in range(op.x + 1):
        bus.write(state.i + index, state.v[index])

# --- LD Vx, [I] ---
# @intent:responsibility LD Vx, [I] (Fx65) 命令をデコードします。
def decode_ld_vx_i(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_VX_I, "LD", [reg((opcode >> 8) & 0xF), "[I]"])

# @intent:responsibility I から始まるメモリを V0からVxへ読み込みます。
def execute_ld_vx_i(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    check_range(state.i, op.x + 1)
    for index in range(op.x + 1):
        state.v[index] = bus.read(state.i + index)
