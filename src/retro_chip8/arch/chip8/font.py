# src/retro_chip8/arch/chip8/font.py
"""
インタプリタ領域に常駐する16進数字(0-F)のフォントスプライト。
"""

FONT_START = 0x000
FONT_SPRITE_LENGTH = 5

# @intent:constant 各文字は5行×4ドット(上位ニブル)で構成されます。
FONT_SPRITES = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

# @intent:utility_function 16進数字のフォントスプライトの先頭アドレスを返します。
# @intent:rationale 0x0F を超える値は下位ニブルのみを用います(Fx29の挙動)。
def font_address(digit: int) -> int:
    return FONT_START + (digit & 0x0F) * FONT_SPRITE_LENGTH
