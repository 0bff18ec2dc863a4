"""Tests for the keypad renderer (draws into NumPy arrays, no window)."""

import numpy as np
import pytest

from config.settings import CalculatorConfig
from ui.renderer import KEYPAD_LAYOUT, KeypadRenderer


@pytest.fixture
def renderer():
    return KeypadRenderer()


class TestLayout:
    def test_sixteen_buttons_in_reading_order(self, renderer):
        tokens = [token for token, _, _ in renderer.buttons()]
        assert tokens == [("AC" if c == "a" else c) for c in KEYPAD_LAYOUT]

    def test_buttons_fit_in_window(self, renderer):
        for _, (cx, cy), radius in renderer.buttons():
            assert radius <= cx <= renderer.width - radius
            assert radius <= cy <= renderer.height - radius

    def test_clear_label_follows_config(self):
        config = CalculatorConfig()
        config.clear_token = "C"
        tokens = [token for token, _, _ in KeypadRenderer(config=config).buttons()]
        assert "C" in tokens
        assert "AC" not in tokens


class TestHitTest:
    def test_button_centers(self, renderer):
        for token, (cx, cy), _ in renderer.buttons():
            assert renderer.hit_test(cx, cy) == token

    def test_outside_buttons(self, renderer):
        assert renderer.hit_test(0, 0) is None
        assert renderer.hit_test(renderer.width // 2, 50) is None

    def test_corner_of_bounding_box_misses_circle(self, renderer):
        _, (cx, cy), radius = renderer.buttons()[0]
        assert renderer.hit_test(cx - radius + 1, cy - radius + 1) is None


class TestRender:
    def test_frame_shape(self, renderer):
        img = renderer.render("", "0")
        assert img.shape == (renderer.height, renderer.width, 3)
        assert img.dtype == np.uint8

    def test_operator_line_only_drawn_when_pending(self, renderer):
        band = slice(80, 130)
        assert not renderer.render("", "0")[band].any()
        assert renderer.render("+", "0")[band].any()

    def test_number_drawn(self, renderer):
        band = slice(180, 280)
        assert renderer.render("", "123")[band].any()

    def test_long_number_stays_inside_margins(self, renderer):
        img = renderer.render("", "123456789012345678")
        band = img[180:280]
        assert not band[:, :renderer.margin - 5].any()
