# retro_chip8/devices/display.py
"""
Device Layer (ディスプレイバッファ)

64x32のモノクロフレームバッファと、XORによるスプライト描画・衝突検出を提供します。
描画（実際のピクセル出力）はフロントエンドの責務であり、ここでは状態のみを保持します。
"""
from typing import Iterable, List, Tuple

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
SPRITE_WIDTH = 8

# @intent:data_structure フロントエンドへ渡す読み取り専用のフレーム(行ごとのタプル)。
Frame = Tuple[Tuple[bool, ...], ...]

# @intent:responsibility モノクロのピクセルグリッドを保持し、スプライトのXOR描画と衝突判定を行います。
class Display:
    """
    CHIP-8のディスプレイバッファ。
    変更はclear()とdraw_sprite()からのみ行われます。
    """
    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        self.width = width
        self.height = height
        self._pixels: List[List[bool]] = [[False] * width for _ in range(height)]
        # @intent:rationale レンダラが変化のないフレームの再描画を省略できるよう、変更回数を数えます。
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        return self._frame_count

    # @intent:responsibility 全てのピクセルを消去します。
    def clear(self) -> None:
        self._pixels = [[False] * self.width for _ in range(self.height)]
        self._frame_count += 1

    # @intent:responsibility 8ピクセル幅のスプライトをXOR描画し、衝突の有無を返します。
    # @intent:post-condition 戻り値は、いずれかのピクセルがセット状態から解除された場合にTrueとなります。
    def draw_sprite(self, x: int, y: int, sprite: Iterable[int]) -> bool:
        """
        スプライトの各行を最上位ビットから順に (x, y+row) の位置へXOR描画します。
        座標は画面端でピクセルごとに独立してラップします（列は幅、行は高さの剰余）。
        """
        collision = False
        for row, bits in enumerate(sprite):
            py = (y + row) % self.height
            line = self._pixels[py]
            for bit in range(SPRITE_WIDTH):
                if not (bits >> (SPRITE_WIDTH - 1 - bit)) & 1:
                    continue
                px = (x + bit) % self.width
                if line[px]:
                    collision = True
                line[px] = not line[px]
        self._frame_count += 1
        return collision

    def get_pixel(self, x: int, y: int) -> bool:
        return self._pixels[y][x]

    # @intent:responsibility フロントエンド向けに、現在のフレームの不変コピーを返します。
    def snapshot(self) -> Frame:
        return tuple(tuple(line) for line in self._pixels)
