# src/retro_chip8/ui/display_view.py
"""
64x32のモノクロフレームバッファを拡大描画するウィジェット。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter, QColor, QPaintEvent

from retro_chip8.devices.display import Display, Frame, DISPLAY_WIDTH, DISPLAY_HEIGHT

# @intent:responsibility Displayのフレームを1ピクセル=scale四方の矩形として描画します。
class DisplayView(QWidget):
    def __init__(self, scale: int = 10, foreground: str = "#33FF66", background: str = "#101010", parent=None):
        super().__init__(parent)
        self._scale = scale
        self._foreground = QColor(foreground)
        self._background = QColor(background)
        self._frame: Optional[Frame] = None
        self._last_frame_count = -1
        self.setFixedSize(self.sizeHint())

    @property
    def scale(self) -> int:
        return self._scale

    def sizeHint(self) -> QSize:
        return QSize(DISPLAY_WIDTH * self._scale, DISPLAY_HEIGHT * self._scale)

    # @intent:responsibility Displayに変化があった場合のみフレームを取り込み、再描画を要求します。
    # @intent:return 再描画を要求した場合True。
    def refresh(self, display: Display) -> bool:
        if display.frame_count == self._last_frame_count:
            return False
        self._last_frame_count = display.frame_count
        self._frame = display.snapshot()
        self.update()
        return True

    def frame(self) -> Optional[Frame]:
        return self._frame

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        if self._frame is not None:
            s = self._scale
            for y, row in enumerate(self._frame):
                for x, pixel in enumerate(row):
                    if pixel:
                        painter.fillRect(x * s, y * s, s, s, self._foreground)
        painter.end()
