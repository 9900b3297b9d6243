# tests/ui/test_display_view.py
"""
DisplayViewの更新ロジックと描画を検証するテスト。
QApplicationがあれば、ウィンドウを表示せずにロジックのテストが可能です。
"""
import os
import sys
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from retro_chip8.devices.display import Display
from retro_chip8.ui.display_view import DisplayView

class TestDisplayView(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def test_size_follows_scale(self):
        view = DisplayView(scale=4)
        self.assertEqual(view.sizeHint().width(), 64 * 4)
        self.assertEqual(view.sizeHint().height(), 32 * 4)

    def test_refresh_only_on_change(self):
        display = Display()
        view = DisplayView()
        self.assertTrue(view.refresh(display))
        self.assertFalse(view.refresh(display))
        display.draw_sprite(0, 0, [0x80])
        self.assertTrue(view.refresh(display))
        self.assertTrue(view.frame()[0][0])

    def test_paint_does_not_fail(self):
        display = Display()
        display.draw_sprite(5, 5, [0xFF, 0x81, 0xFF])
        view = DisplayView(scale=2)
        view.refresh(display)
        image = view.grab()
        self.assertEqual(image.width(), 128)

if __name__ == '__main__':
    unittest.main()
