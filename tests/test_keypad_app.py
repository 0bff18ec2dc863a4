"""Tests for keyboard and mouse wiring (no window is opened)."""

import pytest

from app.keypad_app import KeypadCalculatorApp


@pytest.fixture
def app():
    return KeypadCalculatorApp()


def center_of(app, token):
    for button_token, center, _ in app.ui.buttons():
        if button_token == token:
            return center
    raise AssertionError(f"No button {token!r}")


class TestKeyboard:
    def test_digits_and_operators(self, app):
        for key in "12+3":
            assert app.handle_key(ord(key)) is True
        assert app.calc.get_display() == "3"
        assert app.calc.get_operator() == "+"

    @pytest.mark.parametrize("key", [13, 10, ord("=")])
    def test_enter_and_equals_compute(self, app, key):
        for c in "6*7":
            app.handle_key(ord(c))
        app.handle_key(key)
        assert app.calc.get_display() == "42"

    def test_c_clears(self, app):
        app.handle_key(ord("9"))
        app.handle_key(ord("c"))
        assert app.calc.get_display() == "0"
        assert app.calc.history == ("9", "AC")

    @pytest.mark.parametrize("key", [27, ord("q")])
    def test_quit_keys(self, app, key):
        assert app.handle_key(key) is False

    def test_unmapped_key_is_ignored(self, app):
        assert app.handle_key(ord("z")) is True
        assert app.calc.history == ()


class TestMouse:
    def test_click_presses_button(self, app):
        for token in ["8", "/", "2", "="]:
            assert app.handle_click(*center_of(app, token)) == token
        assert app.calc.get_display() == "4"

    def test_click_outside_buttons(self, app):
        assert app.handle_click(0, 0) is None
        assert app.calc.history == ()

    def test_frame_reflects_state(self, app):
        app.handle_click(*center_of(app, "5"))
        img = app.frame()
        assert img.shape == (app.ui.height, app.ui.width, 3)
