# tests/devices/test_display.py
"""
retro_chip8.devices.displayモジュールの単体テスト。
"""
import pytest
from retro_chip8.devices.display import Display, DISPLAY_WIDTH, DISPLAY_HEIGHT

# @intent:test_suite XOR描画、衝突検出、画面端でのラップアラウンドを検証します。

class TestDisplay:
    @pytest.fixture
    def display(self):
        return Display()

    def test_initially_blank(self, display):
        frame = display.snapshot()
        assert len(frame) == DISPLAY_HEIGHT
        assert all(len(row) == DISPLAY_WIDTH for row in frame)
        assert not any(any(row) for row in frame)

    def test_draw_msb_first(self, display):
        collision = display.draw_sprite(0, 0, [0b10000001])
        assert collision is False
        assert display.get_pixel(0, 0)
        assert not display.get_pixel(1, 0)
        assert display.get_pixel(7, 0)

    # @intent:test_case_xor 同じスプライトを2回描くと元に戻り、2回目は衝突となることを検証します。
    def test_double_draw_restores_and_collides(self, display):
        sprite = [0xF0, 0x90, 0xF0]
        before = display.snapshot()
        assert display.draw_sprite(10, 5, sprite) is False
        assert display.draw_sprite(10, 5, sprite) is True
        assert display.snapshot() == before

    def test_partial_overlap_collision(self, display):
        display.draw_sprite(0, 0, [0x80])
        assert display.draw_sprite(0, 0, [0x40]) is False
        assert display.draw_sprite(0, 0, [0x40]) is True
        assert display.get_pixel(0, 0)

    # @intent:test_case_wrap 画面端をまたぐピクセルが反対側にラップすることを検証します。
    def test_wraps_horizontally_and_vertically(self, display):
        display.draw_sprite(62, 31, [0xF0, 0xF0])
        assert display.get_pixel(62, 31)
        assert display.get_pixel(63, 31)
        assert display.get_pixel(0, 31)
        assert display.get_pixel(1, 31)
        assert display.get_pixel(62, 0)
        assert display.get_pixel(1, 0)
        assert not display.get_pixel(2, 0)

    def test_start_coordinates_wrap(self, display):
        display.draw_sprite(64 + 3, 32 + 2, [0x80])
        assert display.get_pixel(3, 2)

    def test_clear(self, display):
        display.draw_sprite(0, 0, [0xFF])
        display.clear()
        assert not any(any(row) for row in display.snapshot())

    def test_frame_count_changes_on_mutation(self, display):
        assert display.frame_count == 0
        display.draw_sprite(0, 0, [])
        display.clear()
        assert display.frame_count == 2

    def test_snapshot_is_immutable_copy(self, display):
        frame = display.snapshot()
        display.draw_sprite(0, 0, [0x80])
        assert frame[0][0] is False
