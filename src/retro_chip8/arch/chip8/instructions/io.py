# src/retro_chip8/arch/chip8/instructions/io.py
"""
周辺装置（ディスプレイ、キーパッド、タイマー）を操作する命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import InstructionKind, make_operation, reg, skip_next, check_range

# --- CLS ---
# @intent:responsibility CLS (00E0) 命令をデコードします。
def decode_cls(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.CLS, "CLS", [])

def execute_cls(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    io.display.clear()

# --- DRW Vx, Vy, nibble ---
# @intent:responsibility DRW Vx, Vy, nibble (Dxyn) 命令をデコードします。
def decode_drw(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.DRW, "DRW", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF), f"{opcode & 0xF}"])

# @intent:responsibility I から n バイトのスプライトを (Vx, Vy) にXOR描画し、衝突の有無をVFへ格納します。
def execute_drw(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    check_range(state.i, op.n)
    sprite = [bus.read(state.i + row) for row in range(op.n)]
    collision = io.display.draw_sprite(state.v[op.x], state.v[op.y], sprite)
    state.vf = 1 if collision else 0

# --- SKP / SKNP ---
def decode_skp(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SKP, "SKP", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxのキーが押されていれば次の命令をスキップします。
def execute_skp(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if io.keypad.is_pressed(state.v[op.x] & 0x0F):
        skip_next(state)

def decode_sknp(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.SKNP, "SKNP", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxのキーが押されていなければ次の命令をスキップします。
def execute_sknp(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    if not io.keypad.is_pressed(state.v[op.x] & 0x0F):
        skip_next(state)

# --- LD Vx, K ---
# @intent:responsibility LD Vx, K (Fx0A) 命令をデコードします。
def decode_ld_vx_k(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_VX_K, "LD", [reg((opcode >> 8) & 0xF), "K"])

# @intent:responsibility キー待ち状態へ移行します。
# @intent:post-condition PCはこの命令自身へ巻き戻され、命令はキーが解放された時点で完了します(Chip8Cpu参照)。
def execute_ld_vx_k(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    io.keypad.begin_key_wait()
    state.key_wait_register = op.x
    state.pc = (state.pc - op.length) & 0xFFFF

# --- Timers ---
def decode_ld_vx_dt(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_VX_DT, "LD", [reg((opcode >> 8) & 0xF), "DT"])

def execute_ld_vx_dt(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    state.v[op.x] = io.timers.delay

def decode_ld_dt_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_DT_VX, "LD", ["DT", reg((opcode >> 8) & 0xF)])

def execute_ld_dt_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    io.timers.delay = state.v[op.x]

def decode_ld_st_vx(opcode: int) -> Operation:
    return make_operation(opcode, InstructionKind.LD_ST_VX, "LD", ["ST", reg((opcode >> 8) & 0xF)])

def execute_ld_st_vx(state: Chip8CpuState, bus: Bus, io: Peripherals, op: Operation) -> None:
    io.timers.sound = state.v[op.x]
