# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令の実装。

フラグ(VF)を書き込む命令は、演算結果をVxへ格納した後にVFを書き込みます。
そのため、Vx自体がVFである場合はフラグ値が残ります。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import InstructionKind, make_operation, reg

# @intent:utility_function 8xyN形式のオペランド表記を返します。
def _xy_operands(opcode: int):
    return [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)]

# --- ADD Vx, byte ---
# @intent:responsibility ADD Vx, byte (7xkk) 命令をデコードします。
def decode_add_vx_kk(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.ADD_VX_KK, "ADD", [reg((opcode >> 8) & 0xF), f"#${opcode & 0xFF:02X}"])

# @intent:responsibility Vxにkkを加算します。キャリーは捨てられ、VFは変化しません。
def execute_add_vx_kk(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.kk) & 0xFF

# --- OR / AND / XOR ---
def decode_or(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.OR, "OR", _xy_operands(opcode))

def execute_or(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] |= state.v[op.y]

def decode_and(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.AND, "AND", _xy_operands(opcode))

def execute_and(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] &= state.v[op.y]

def decode_xor(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.XOR, "XOR", _xy_operands(opcode))

def execute_xor(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] ^= state.v[op.y]

# --- ADD Vx, Vy ---
# @intent:responsibility ADD Vx, Vy (8xy4) 命令をデコードします。
def decode_add_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.ADD_VX_VY, "ADD", _xy_operands(opcode))

# @intent:responsibility Vx = Vx + Vy を計算し、VFにキャリーを設定します。
def execute_add_vx_vy(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# --- SUB Vx, Vy ---
# @intent:responsibility SUB Vx, Vy (8xy5) 命令をデコードします。
def decode_sub(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SUB, "SUB", _xy_operands(opcode))

# @intent:responsibility Vx = Vx - Vy を計算し、ボローが無ければVF=1とします。
def execute_sub(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# --- SUBN Vx, Vy ---
# @intent:responsibility SUBN Vx, Vy (8xy7) 命令をデコードします。
def decode_subn(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SUBN, "SUBN", _xy_operands(opcode))

# @intent:responsibility Vx = Vy - Vx を計算し、ボローが無ければVF=1とします。
def execute_subn(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# --- SHR / SHL ---
# @intent:rationale シフトはVxのみを対象とし、Vyは参照しません（Vyの値をVxへコピーする挙動は採用しない）。
def decode_shr(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SHR, "SHR", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxを右へ1bitシフトし、押し出された最下位ビットをVFへ格納します。
def execute_shr(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    v1 = state.v[op.x]
    state.v[op.x] = v1 >> 1
    state.vf = v1 & 0x01

def decode_shl(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SHL, "SHL", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxを左へ1bitシフトし、押し出された最上位ビットをVFへ格納します。
def execute_shl(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    v1 = state.v[op.x]
    state.v[op.x] = (v1 << 1) & 0xFF
    state.vf = (v1 >> 7) & 0x01

# --- RND Vx, byte ---
# @intent:responsibility RND Vx, byte (Cxkk) 命令をデコードします。
def decode_rnd(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.RND, "RND", [reg((opcode >> 8) & 0xF), f"#${opcode & 0xFF:02X}"])

# @intent:responsibility 乱数(0-255)とkkの論理積をVxへ格納します。
def execute_rnd(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] = io.rng.randint(0, 0xFF) & op.kk

# --- ADD I, Vx ---
# @intent:responsibility ADD I, Vx (Fx1E) 命令をデコードします。
def decode_add_i_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.ADD_I_VX, "ADD", ["I", reg((opcode >> 8) & 0xF)])

# @intent:responsibility IにVxを加算します(16bitでラップ)。VFは変化しません。
def execute_add_i_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF
