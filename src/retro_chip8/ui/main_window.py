# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
ディスプレイ、レジスタ表示を保持し、QTimerでClockSchedulerを実時間に合わせて駆動します。
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QFileDialog, QMessageBox
from PySide6.QtGui import QPalette, QColor, QAction, QKeyEvent
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, Slot

from retro_chip8.config.models import MachineConfig
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.loader.loader import RomLoader
from retro_chip8.core.errors import Chip8Error
from retro_chip8.core.interpreter import Interpreter
from retro_chip8.core.scheduler import ClockScheduler
from .display_view import DisplayView
from .register_view import RegisterView
from .keymap import KeyMapper
from .beeper import Beeper

# @intent:constant 画面更新間隔(ミリ秒)。およそ60Hz。
FRAME_INTERVAL_MS = 16
# @intent:constant 1フレームで進める仮想時間の上限(秒)。
MAX_FRAME_ELAPSED = 0.25

# @intent:responsibility アプリケーションのメインウィンドウを定義し、エミュレーションループを駆動します。
class MainWindow(QMainWindow):
    def __init__(self, config: Optional[MachineConfig] = None, sound: bool = True, parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle("Retro CHIP-8")

        self._config = config or MachineConfig()
        self._sound = sound
        self._beeper: Optional[Beeper] = None
        self._rom_path: Optional[str] = None
        self._halt_reported = False

        self._set_dark_theme()
        self._create_widgets()
        self._create_menus()
        self._setup_backend()

        self._elapsed = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_frame)

    @property
    def interpreter(self) -> Interpreter:
        return self._scheduler.interpreter

    @property
    def scheduler(self) -> ClockScheduler:
        return self._scheduler

    @property
    def display_view(self) -> DisplayView:
        return self._display_view

    @property
    def register_view(self) -> RegisterView:
        return self._register_view

    def _create_widgets(self):
        central = QWidget()
        central.setStyleSheet("background-color: #101010;")
        layout = QHBoxLayout(central)
        display = self._config.display
        self._display_view = DisplayView(display.scale, display.foreground, display.background)
        self._register_view = RegisterView()
        layout.addWidget(self._display_view)
        layout.addWidget(self._register_view)
        self.setCentralWidget(central)

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.open_rom_action = QAction("Open ROM...", self)
        self.open_rom_action.setShortcut("Ctrl+O")
        self.open_rom_action.triggered.connect(self._open_rom_dialog)
        file_menu.addAction(self.open_rom_action)

        self.load_config_action = QAction("Load Config...", self)
        self.load_config_action.triggered.connect(self._load_config_dialog)
        file_menu.addAction(self.load_config_action)

        run_menu = self.menuBar().addMenu("Run")
        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self.reset)
        run_menu.addAction(self.reset_action)

    # @intent:responsibility 構成からインタプリタ・スケジューラ・入出力の補助オブジェクトを作り直します。
    def _setup_backend(self):
        self._scheduler = SystemBuilder().build_scheduler(self._config, max_elapsed=MAX_FRAME_ELAPSED)
        self._key_mapper = KeyMapper(self._config.keymap)
        if self._beeper is not None:
            self._beeper.close()
        self._beeper = Beeper.with_tone() if self._sound else Beeper()
        self._halt_reported = False
        self._refresh_views()

    # @intent:responsibility ROMをロードし、実行を開始します。
    # @intent:post-condition ロードに失敗した場合は例外が呼び出し元へ伝播し、実行は開始されません。
    def load_rom(self, path: str) -> None:
        self.stop()
        self._setup_backend()
        RomLoader().load_into(path, self.interpreter)
        self._rom_path = path
        self.setWindowTitle(f"Retro CHIP-8 - {path}")
        self.start()

    def start(self) -> None:
        self._elapsed.start()
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @Slot()
    def reset(self) -> None:
        if self._rom_path is not None:
            self.load_rom(self._rom_path)

    # @intent:responsibility 前フレームからの実経過時間だけ仮想時間を進め、表示を更新します。
    @Slot()
    def _on_frame(self) -> None:
        elapsed = self._elapsed.restart() / 1000.0
        self._scheduler.advance(elapsed)
        self._refresh_views()
        if self.interpreter.is_halted:
            self.stop()
            self._report_halt()

    def _refresh_views(self) -> None:
        interpreter = self.interpreter
        self._display_view.refresh(interpreter.display)
        self._register_view.update_from(interpreter)
        self._beeper.update(interpreter.sound_active)

    def _report_halt(self) -> None:
        if self._halt_reported:
            return
        self._halt_reported = True
        reason = self.interpreter.halt_reason
        self.statusBar().showMessage(f"HALTED: {reason}")
        QMessageBox.critical(self, "Interpreter halted", str(reason))

    # --- 入力 ---

    def keyPressEvent(self, event: QKeyEvent):
        if not self._forward_key(event, True):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if not self._forward_key(event, False):
            super().keyReleaseEvent(event)

    def _forward_key(self, event: QKeyEvent, pressed: bool) -> bool:
        if event.isAutoRepeat():
            return False
        key = self._key_mapper.lookup(event.key())
        if key is None:
            return False
        self.interpreter.set_key(key, pressed)
        return True

    # --- ダイアログ ---

    @Slot()
    def _open_rom_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open ROM", "", "CHIP-8 ROM (*.ch8 *.c8);;All Files (*)")
        if not path:
            return
        try:
            self.load_rom(path)
        except (OSError, ValueError, Chip8Error) as e:
            QMessageBox.critical(self, "Error", f"Failed to load ROM:\n{e}")

    @Slot()
    def _load_config_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load Config", "", "YAML Files (*.yaml *.yml);;All Files (*)")
        if not path:
            return
        try:
            self.apply_config(ConfigLoader().load_from_file(path))
        except (OSError, ValueError, Chip8Error) as e:
            QMessageBox.critical(self, "Error", f"Failed to load config:\n{e}")

    # @intent:responsibility 新しい構成でシステムを組み立て直し、ロード済みのROMがあれば再実行します。
    # @intent:pre-condition キーマップが解釈できない場合はValueErrorを送出し、現在の構成は変更されません。
    def apply_config(self, config: MachineConfig) -> None:
        KeyMapper(config.keymap)
        self.stop()
        self._config = config
        self._create_widgets()
        self._setup_backend()
        if self._rom_path is not None:
            self.load_rom(self._rom_path)

    def _set_dark_theme(self):
        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(29, 29, 29))
        dark_palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Base, QColor(30, 30, 30))
        dark_palette.setColor(QPalette.Text, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        dark_palette.setColor(QPalette.HighlightedText, Qt.black)
        self.setPalette(dark_palette)

    def closeEvent(self, event):
        self.stop()
        self._beeper.close()
        super().closeEvent(event)
