# src/retro_chip8/ui/register_view.py
"""
CHIP-8のレジスタ・タイマー・実行状態を表示するウィジェット。
"""
from typing import Dict

from PySide6.QtWidgets import QWidget, QGridLayout, QLabel
from PySide6.QtGui import QFontDatabase

from retro_chip8.core.interpreter import Interpreter

# @intent:responsibility インタプリタの観測用アクセサから値を読み、ラベルに反映します。
class RegisterView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")
        font = QFontDatabase.systemFont(QFontDatabase.FixedFont)

        layout = QGridLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        self._labels: Dict[str, QLabel] = {}

        names = [f"V{i:X}" for i in range(16)] + ["I", "PC", "SP", "DT", "ST", "STATE", "STACK"]
        for index, name in enumerate(names):
            title = QLabel(name)
            title.setStyleSheet("font-weight: bold;")
            value = QLabel("-")
            value.setFont(font)
            row, col = divmod(index, 2)
            layout.addWidget(title, row, col * 2)
            layout.addWidget(value, row, col * 2 + 1)
            self._labels[name] = value

    def text(self, name: str) -> str:
        return self._labels[name].text()

    def update_from(self, interpreter: Interpreter) -> None:
        state = interpreter.cpu_state
        for i, value in enumerate(state.v):
            self._labels[f"V{i:X}"].setText(f"{value:02X}")
        self._labels["I"].setText(f"{state.i:04X}")
        self._labels["PC"].setText(f"{state.pc:04X}")
        self._labels["SP"].setText(f"{state.sp:X}")
        self._labels["DT"].setText(f"{interpreter.timers.delay:02X}")
        self._labels["ST"].setText(f"{interpreter.timers.sound:02X}")
        self._labels["STATE"].setText(interpreter.run_state.value)
        self._labels["STACK"].setText(" ".join(f"{address:03X}" for address in state.call_stack()) or "-")
