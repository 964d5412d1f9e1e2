import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
from PySide6 import QtCore, QtGui

from desktop_calculator import UI
from desktop_calculator import EquationBuilder
from desktop_calculator import config_manager
from desktop_calculator.Operators import Key


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def settings(monkeypatch):
    current = dict(config_manager.DEFAULT_SETTINGS)
    saved = []

    def _load(key_value):
        if key_value == "all":
            return current
        return current.get(key_value, 0)

    def _save(settings_dict):
        saved.append(dict(settings_dict))
        return settings_dict

    monkeypatch.setattr(config_manager, "load_setting_value", _load)
    monkeypatch.setattr(config_manager, "save_setting", _save)
    monkeypatch.setattr(UI, "is_shift_pressed", lambda: False)
    return current, saved


@pytest.fixture
def window(qapp, settings):
    calculator = UI.Calculator()
    yield calculator
    calculator.close()


def _click(window, *tokens):
    for token in tokens:
        window.button_objects[Key.from_token(token)].click()


def test_button_grid(window) -> None:
    assert len(window.button_objects) == 24
    multiply = window.findChild(QtWidgets.QPushButton, "MULTIPLY")
    assert multiply.text() == "×"
    assert window.findChild(QtWidgets.QLabel, "EquationLabel").text() == " "
    assert window.findChild(QtWidgets.QLabel, "ResultLabel").text() == "0"


def test_clicking_builds_and_evaluates(window) -> None:
    _click(window, "2", "+", "3", "*", "4")
    assert window.equation_label.text() == "2+3×4"

    _click(window, "=")
    assert window.result_label.text() == "14"
    assert UI.OK_COLOR in window.equation_label.styleSheet()


def test_error_marks_equation_red(window) -> None:
    _click(window, "5", "/", "0", "=")
    assert window.state.error is True
    assert UI.ERROR_COLOR in window.equation_label.styleSheet()
    assert "3102" in window.equation_label.toolTip()
    assert window.equation_label.text() == "5÷0"
    assert window.result_label.text() == "0"

    _click(window, "Del")
    assert window.state.error is False
    assert window.equation_label.toolTip() == ""
    assert UI.OK_COLOR in window.equation_label.styleSheet()


def test_equals_matches_builder_state(window) -> None:
    _click(window, "8", "-", "3", "±", "=")
    expected = EquationBuilder.press(EquationBuilder.CalculatorState("8-(-3"), "=")
    assert window.state == expected
    assert window.state.error is True

    _click(window, "( )", "=")
    assert window.state == EquationBuilder.CalculatorState("8-(-3)", False, "11")


def test_keyboard_input(window) -> None:
    for key, text in [(QtCore.Qt.Key.Key_7, "7"), (QtCore.Qt.Key.Key_X, "x"), (QtCore.Qt.Key.Key_6, "6")]:
        event = QtGui.QKeyEvent(QtCore.QEvent.Type.KeyPress, key, QtCore.Qt.KeyboardModifier.NoModifier, text)
        window.keyPressEvent(event)
    assert window.state.equation == "7*6"

    enter = QtGui.QKeyEvent(QtCore.QEvent.Type.KeyPress, QtCore.Qt.Key.Key_Return,
                            QtCore.Qt.KeyboardModifier.NoModifier, "\r")
    window.keyPressEvent(enter)
    assert window.result_label.text() == "42"


def test_copy_result_setting(window, settings, monkeypatch) -> None:
    copied = []
    monkeypatch.setattr(UI.pyperclip, "copy", copied.append)

    _click(window, "9", "=")
    assert copied == []

    window.setting_value_list["copy_result"] = True
    _click(window, "=")
    assert copied == ["9"]


def test_shift_copies_result(window, monkeypatch) -> None:
    copied = []
    monkeypatch.setattr(UI.pyperclip, "copy", copied.append)
    window.shift_is_held = True
    _click(window, "8", "=")
    assert copied == ["8"]


def test_key_for_text() -> None:
    assert UI.key_for_text("x") is Key.MULTIPLY
    assert UI.key_for_text("^") is Key.POWER_Y
    assert UI.key_for_text("7") is Key.SEVEN
    assert UI.key_for_text("q") is None


def test_settings_dialog_saves_checkboxes(qapp, settings) -> None:
    current, saved = settings
    dialog = UI.SettingsDialog()
    assert set(dialog.widgets) == set(current)

    dialog.widgets["darkmode"].setChecked(True)
    dialog.save_settings()
    assert saved[-1]["darkmode"] is True
