# retro_chip8/core/scheduler.py
"""
Core Layer (クロックスケジューラ)

CPUクロック(命令/秒)とタイマークロック(60Hz)を、経過時間の累積によって
単一スレッド上でインターリーブして駆動するドライバです。
2つのクロックは互いに直接結合されず、それぞれの時刻順に実行されます。
"""
import time
from dataclasses import dataclass
from typing import Optional

from retro_chip8.core.interpreter import Interpreter
from retro_chip8.devices.timers import TIMER_HZ

DEFAULT_CPU_HZ = 700

# 浮動小数点の累積誤差で境界上のイベントを取りこぼさないための許容値
_EPSILON = 1e-9

# @intent:responsibility 1回のadvance()で実行されたステップ数とtick数を記録します。
@dataclass(frozen=True)
class SchedulerResult:
    steps: int = 0
    ticks: int = 0

    def __add__(self, other: "SchedulerResult") -> "SchedulerResult":
        return SchedulerResult(self.steps + other.steps, self.ticks + other.ticks)

# @intent:responsibility 仮想時間を進め、期限の来たCPUステップとタイマーtickを時刻順に実行します。
class ClockScheduler:
    """
    経過時間を累積し、CPUステップ(1/cpu_hz秒ごと)とタイマーtick(1/timer_hz秒ごと)を
    発生時刻の順に実行する単一スレッドのスケジューラ。

    n番目のイベント時刻は n / hz として毎回計算するため、長時間の実行でも周期はずれません。
    """
    def __init__(self, interpreter: Interpreter, cpu_hz: int = DEFAULT_CPU_HZ, timer_hz: int = TIMER_HZ,
                 max_elapsed: Optional[float] = None):
        if cpu_hz <= 0 or timer_hz <= 0:
            raise ValueError("Clock rates must be positive.")
        self._interpreter = interpreter
        self._cpu_hz = cpu_hz
        self._timer_hz = timer_hz
        # @intent:rationale ウィンドウのドラッグ等で長時間停止した後に、大量の命令を一気に実行しないための上限。
        self._max_elapsed = max_elapsed
        self._now = 0.0
        self._cpu_events = 0
        self._timer_events = 0

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def now(self) -> float:
        return self._now

    def _next_cpu_time(self) -> float:
        return (self._cpu_events + 1) / self._cpu_hz

    def _next_timer_time(self) -> float:
        return (self._timer_events + 1) / self._timer_hz

    # @intent:responsibility 仮想時間をelapsed秒進め、その間に期限の来たイベントを実行します。
    # @intent:post-condition インタプリタがHALTEDになった場合、その時点で処理を打ち切ります。
    def advance(self, elapsed: float) -> SchedulerResult:
        if elapsed < 0:
            raise ValueError("Elapsed time must not be negative.")
        if self._max_elapsed is not None:
            elapsed = min(elapsed, self._max_elapsed)

        target = self._now + elapsed
        steps = 0
        ticks = 0
        while not self._interpreter.is_halted:
            next_cpu = self._next_cpu_time()
            next_timer = self._next_timer_time()
            if min(next_cpu, next_timer) > target + _EPSILON:
                break
            # 同時刻の場合はタイマーを先に進める
            if next_timer <= next_cpu:
                self._interpreter.tick_timers()
                self._timer_events += 1
                ticks += 1
            else:
                self._interpreter.step()
                self._cpu_events += 1
                steps += 1
        self._now = target
        return SchedulerResult(steps, ticks)

    # @intent:responsibility フロントエンド無しでseconds秒分の実行を行います。
    # @intent:rationale realtime=Trueの場合はフレームごとに実時間と同期し、Falseの場合は可能な限り速く仮想時間を進めます。
    def run_for(self, seconds: float, frame: float = 1.0 / TIMER_HZ, realtime: bool = False) -> SchedulerResult:
        total = SchedulerResult()
        remaining = seconds
        last = time.perf_counter()
        while remaining > _EPSILON and not self._interpreter.is_halted:
            slice_ = min(frame, remaining)
            if realtime:
                time.sleep(max(0.0, slice_ - (time.perf_counter() - last)))
                last = time.perf_counter()
            total = total + self.advance(slice_)
            remaining -= slice_
        return total
