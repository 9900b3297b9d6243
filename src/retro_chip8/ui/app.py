# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
引数を解釈し、ウィンドウ付き、またはヘッドレスでROMを実行します。
"""
import argparse
import sys
from typing import List, Optional

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.errors import Chip8Error
from retro_chip8.loader.loader import RomLoader

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 interpreter")
    parser.add_argument("rom", nargs="?", help="path to a CHIP-8 ROM image")
    parser.add_argument("--config", help="YAML machine configuration")
    parser.add_argument("--headless", type=float, metavar="SECONDS",
                        help="run without a window for SECONDS of virtual time and print the final state")
    return parser

# @intent:responsibility フロントエンド無しで仮想時間を進め、最終状態を標準出力へ書き出します。
# @intent:return 正常終了なら0、インタプリタがHALTEDになった場合は1。
def run_headless(rom: str, config: MachineConfig, seconds: float) -> int:
    scheduler = SystemBuilder().build_scheduler(config)
    interpreter = scheduler.interpreter
    try:
        RomLoader().load_into(rom, interpreter)
    except (OSError, ValueError, Chip8Error) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = scheduler.run_for(seconds)
    if interpreter.is_halted:
        print(f"halted: {interpreter.halt_reason}", file=sys.stderr)
        return 1

    state = interpreter.cpu_state
    print(f"steps={result.steps} ticks={result.ticks} state={interpreter.run_state.value}")
    print(f"PC={state.pc:04X} I={state.i:04X} SP={state.sp:X} "
          f"DT={interpreter.timers.delay:02X} ST={interpreter.timers.sound:02X}")
    print(" ".join(f"V{i:X}={v:02X}" for i, v in enumerate(state.v)))
    for row in interpreter.display.snapshot():
        print("".join("#" if pixel else "." for pixel in row))
    return 0

# @intent:responsibility アプリケーションを起動します。
def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    config = MachineConfig()
    if args.config:
        try:
            config = ConfigLoader().load_from_file(args.config)
        except (OSError, ValueError) as e:
            print(f"error: failed to load config: {e}", file=sys.stderr)
            return 1

    if args.headless is not None:
        if not args.rom:
            print("error: --headless requires a ROM path", file=sys.stderr)
            return 2
        return run_headless(args.rom, config, args.headless)

    from PySide6.QtWidgets import QApplication
    from .main_window import MainWindow

    app = QApplication(sys.argv if argv is None else [sys.argv[0]] + list(argv))
    main_win = MainWindow(config)
    if args.rom:
        try:
            main_win.load_rom(args.rom)
        except (OSError, ValueError, Chip8Error) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    main_win.show()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
