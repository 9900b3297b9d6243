import random
from typing import Optional

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.devices.peripherals import Peripherals
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.font import FONT_START, FONT_SPRITES
from retro_chip8.arch.chip8.state import MEMORY_SIZE
from retro_chip8.core.interpreter import Interpreter
from retro_chip8.core.scheduler import ClockScheduler
from .models import MachineConfig

# @intent:responsibility 構成（Config）に基づいて、Bus、RAM、周辺装置、CPUを生成・接続し、インタプリタを組み立てます。
class SystemBuilder:
    def build_system(self, config: Optional[MachineConfig] = None) -> Interpreter:
        config = config or MachineConfig()

        bus = Bus()
        bus.register_device(0x000, MEMORY_SIZE - 1, RAM(MEMORY_SIZE))
        # フォントはインタプリタ領域(0x000-0x1FF)に常駐する
        bus.load(FONT_START, FONT_SPRITES)

        io = Peripherals(rng=random.Random(config.seed))
        cpu = Chip8Cpu(bus, io)
        return Interpreter(cpu, bus)

    # @intent:responsibility インタプリタと、構成されたクロックで駆動するスケジューラを組み立てます。
    def build_scheduler(self, config: Optional[MachineConfig] = None, max_elapsed: Optional[float] = None) -> ClockScheduler:
        config = config or MachineConfig()
        interpreter = self.build_system(config)
        return ClockScheduler(interpreter, cpu_hz=config.cpu_hz, timer_hz=config.timer_hz, max_elapsed=max_elapsed)
