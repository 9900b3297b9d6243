# retro_chip8/core/errors.py
"""
Core Layer (致命的エラー)

インタプリタを停止(HALTED)させる例外群を定義します。
いずれも再試行されることはなく、ドライバ側が呼び出し元へ報告する責務を負います。
"""

# @intent:responsibility CHIP-8インタプリタの全ての致命的エラーの基底クラスです。
class Chip8Error(Exception):
    """
    インタプリタを停止させる全てのエラーの基底クラス。
    """
    pass


# @intent:responsibility デコードできないオペコードを報告します。
class UnknownInstruction(Chip8Error):
    def __init__(self, opcode: int, pc: int):
        self.opcode = opcode
        self.pc = pc
        super().__init__(f"Unknown instruction {opcode:#06x} at PC {pc:#05x}")


# @intent:responsibility アドレス空間(0x000-0xFFF)外へのアクセスを報告します。
# @intent:rationale 既存のBus利用者がIndexErrorを捕捉しているため、IndexErrorも継承します。
class MemoryOutOfBounds(Chip8Error, IndexError):
    def __init__(self, address: int):
        self.address = address
        super().__init__(f"Memory access out of bounds at {address:#06x}")


# @intent:responsibility 16段を超えるサブルーチン呼び出しを報告します。
class StackOverflow(Chip8Error):
    def __init__(self, pc: int = 0):
        self.pc = pc
        super().__init__(f"Stack overflow at PC {pc:#05x}")


# @intent:responsibility 空のスタックからのRETを報告します。
class StackUnderflow(Chip8Error):
    def __init__(self, pc: int = 0):
        self.pc = pc
        super().__init__(f"Stack underflow at PC {pc:#05x}")


# @intent:responsibility プログラム領域に収まらないROMを報告します。
class ProgramTooLarge(Chip8Error, ValueError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Program of {size} bytes exceeds the {limit} bytes available")
