# retro_chip8/core/interpreter.py
"""
Core Layer (インタプリタ)

CPU・メモリ・周辺装置を1つの所有者の下にまとめ、
RUNNING / WAITING_FOR_KEY / HALTED の状態機械として駆動します。

このクラスは内部で同期を行いません。step()とtick_timers()の呼び出しは
単一のドライバ(ClockSchedulerなど)によって直列化されている必要があります。
"""
from enum import Enum
from typing import Optional

from retro_chip8.core.errors import Chip8Error, ProgramTooLarge
from retro_chip8.core.snapshot import Snapshot
from retro_chip8.transport.bus import Bus
from retro_chip8.devices.display import Display
from retro_chip8.devices.keypad import Keypad
from retro_chip8.devices.timers import Timers
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.state import Chip8CpuState, PROGRAM_START, PROGRAM_MAX_SIZE

# @intent:responsibility インタプリタの実行状態を定義します。
class RunState(Enum):
    RUNNING = "RUNNING"
    WAITING_FOR_KEY = "WAITING_FOR_KEY"
    HALTED = "HALTED"

# @intent:responsibility 1つのCHIP-8プログラムの実行を管理する状態機械です。
class Interpreter:
    """
    CHIP-8インタプリタ。

    - step(): RUNNINGでは1命令を実行し、WAITING_FOR_KEYではキーパッドを確認して即座に戻ります。
    - tick_timers(): 60Hzのタイマークロック。CPUの実行状態とは独立に呼び出されます。
    - 致命的エラー(Chip8Error)が発生するとHALTEDへ遷移し、以後は何も実行しません。
    """
    def __init__(self, cpu: Chip8Cpu, bus: Bus):
        self._cpu = cpu
        self._bus = bus
        self._halt_reason: Optional[Chip8Error] = None

    # --- 状態 ---

    @property
    def run_state(self) -> RunState:
        if self._halt_reason is not None:
            return RunState.HALTED
        if self._cpu.get_state().waiting_for_key:
            return RunState.WAITING_FOR_KEY
        return RunState.RUNNING

    # @intent:responsibility HALTEDへ遷移した原因のエラーを返します。HALTEDでなければNone。
    @property
    def halt_reason(self) -> Optional[Chip8Error]:
        return self._halt_reason

    @property
    def is_halted(self) -> bool:
        return self._halt_reason is not None

    # --- 外部インタフェース ---

    # @intent:responsibility プログラムを0x200から始まるメモリへコピーします。
    # @intent:pre-condition プログラムは 0xFFF - 0x200 + 1 バイト以下である必要があります。
    def load_program(self, data: bytes) -> None:
        """
        ROMイメージをメモリへロードします。
        大きすぎる場合はProgramTooLargeを送出し、インタプリタはHALTEDになります。
        """
        if len(data) > PROGRAM_MAX_SIZE:
            error = ProgramTooLarge(len(data), PROGRAM_MAX_SIZE)
            self._halt_reason = error
            raise error
        self._bus.load(PROGRAM_START, bytes(data))

    # @intent:responsibility 状態機械を1ステップ進めます。
    # @intent:return 実行した(またはキー待ちを確認した)Snapshot。HALTEDの場合、またはこのステップでHALTEDへ遷移した場合はNone。
    def step(self) -> Optional[Snapshot]:
        if self._halt_reason is not None:
            return None
        try:
            return self._cpu.step()
        except Chip8Error as e:
            self._halt_reason = e
            return None

    # @intent:responsibility タイマーを1tick(1/60秒)進めます。HALTED後は何もしません。
    def tick_timers(self) -> None:
        if self._halt_reason is not None:
            return
        self._cpu.io.timers.tick()

    # @intent:responsibility 入力ポーラーからのキー状態の更新を受け付けます。
    def set_key(self, key: int, pressed: bool) -> None:
        self._cpu.io.keypad.set_pressed(key, pressed)

    # --- 観測用アクセサ ---

    @property
    def cpu_state(self) -> Chip8CpuState:
        return self._cpu.get_state()

    @property
    def bus(self) -> Bus:
        return self._bus

    @property
    def display(self) -> Display:
        return self._cpu.io.display

    @property
    def timers(self) -> Timers:
        return self._cpu.io.timers

    @property
    def keypad(self) -> Keypad:
        return self._cpu.io.keypad

    @property
    def sound_active(self) -> bool:
        return self._cpu.io.timers.is_sound_active

    # @intent:responsibility 実行済みの命令数を返します。キー待ちの確認は含みません。
    @property
    def instruction_count(self) -> int:
        return self._cpu.cycle_count
