# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
from typing import Optional

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Metadata, Operation, Snapshot
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.arch.chip8.instructions.io import decode_ld_vx_k

# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 CPUをエミュレートするクラス。
    メモリはBus経由、ディスプレイ・キーパッド・タイマー・乱数源はPeripherals経由で操作します。
    """
    def __init__(self, bus: Bus, io: Optional[Peripherals] = None):
        self._io = io if io is not None else Peripherals()
        super().__init__(bus)

    @property
    def io(self) -> Peripherals:
        return self._io

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    # @intent:responsibility PCから2バイトの命令をビッグエンディアンでフェッチします。
    def _fetch(self) -> int:
        return self._bus.read_word(self._state.pc)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode, self._state.pc)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus, self._io)

    # @intent:responsibility Fx0Aによるキー待ち中の処理を行います。
    # @intent:rationale キー待ちはスレッドのブロックではなく明示的な停止状態として表現し、
    #                  毎ステップでキーパッドのラッチを確認するだけで即座に制御を返します。
    #                  待機中・再開時ともに命令スロット(cycle_count)は消費しません。
    def _handle_suspended(self, current_pc: int) -> Optional[Snapshot]:
        state = self._state
        if not state.waiting_for_key:
            return None

        operation = decode_ld_vx_k(0xF00A | (state.key_wait_register << 8))
        key = self._io.keypad.take_released_key()
        if key is None:
            status = "waiting"
        else:
            state.v[state.key_wait_register] = key
            state.key_wait_register = None
            state.pc = (current_pc + operation.length) & 0xFFFF
            status = f"key {key:X}"

        return Snapshot(
            state=self._copy_state(),
            operation=operation,
            metadata=Metadata(
                cycle_count=self._cycle_count,
                symbol_info=f"{operation.mnemonic} {', '.join(operation.operands)} ({status})",
            ),
            bus_activity=self._bus.get_and_clear_activity_log(),
        )
