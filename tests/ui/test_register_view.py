# tests/ui/test_register_view.py
import os
import sys
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from retro_chip8.config.builder import SystemBuilder
from retro_chip8.ui.register_view import RegisterView

class TestRegisterView(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def test_update_from_interpreter(self):
        interpreter = SystemBuilder().build_system()
        interpreter.load_program(b"\x6A\x05\xF0\x0A")
        interpreter.step()
        interpreter.step()
        view = RegisterView()
        view.update_from(interpreter)
        self.assertEqual(view.text("VA"), "05")
        self.assertEqual(view.text("PC"), "0202")
        self.assertEqual(view.text("STATE"), "WAITING_FOR_KEY")
        self.assertEqual(view.text("STACK"), "-")

    def test_shows_call_stack(self):
        interpreter = SystemBuilder().build_system()
        # 0x200: CALL 0x204 / 0x204: CALL 0x208 / 0x208: JP 0x208
        interpreter.load_program(b"\x22\x04\x00\x00\x22\x08\x00\x00\x12\x08")
        interpreter.step()
        interpreter.step()
        view = RegisterView()
        view.update_from(interpreter)
        self.assertEqual(view.text("SP"), "2")
        self.assertEqual(view.text("STACK"), "202 206")

if __name__ == '__main__':
    unittest.main()
