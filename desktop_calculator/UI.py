# UI.py
""""PySide6 user interface for the Desktop Calculator.

Structure
---------
- Calculator UI: main window with result label, equation label and button grid
- Settings UI: modal dialog for the boolean preferences in config.json

Responsibilities (Calculator)
-----------------------------
- Build window, labels, layout and buttons (one button per Operators.Key)
- Keep the CalculatorState and feed every key to EquationBuilder.press
- Show the equation with display glyphs, green when ok and red on error
- Keyboard input and clipboard copy of the result (Shift + '=')

Responsibilities (Settings)
---------------------------
- Load current settings and descriptions via config_manager
- Save them and apply the theme immediately
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import Qt
import sys
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager
from . import EquationBuilder as EquationBuilder
from . import MathEngine as MathEngine
from . import Operators as Operators
from .Operators import Key

OK_COLOR = "#006400"
ERROR_COLOR = "#8b0000"

# Keyboard keys without a printable character of their own
SPECIAL_KEYS = [
    (Qt.Key.Key_Return, Key.EQUALS),
    (Qt.Key.Key_Enter, Key.EQUALS),
    (Qt.Key.Key_Backspace, Key.DELETE),
    (Qt.Key.Key_Delete, Key.DELETE),
    (Qt.Key.Key_Escape, Key.CLEAR),
]


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the "shift to copy" setting.

    """""
    from pynput.keyboard import Controller

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


def key_for_text(text):
    """Map a typed character to a Key ('x' and 'X' also mean multiply)."""
    if text in ("x", "X"):
        return Key.MULTIPLY
    if text == "^":
        return Key.POWER_Y
    return Key.from_token(text)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Shows one checkbox per setting and saves them on OK, or ignores the changes
    if Cancel was pressed. Values and descriptions both come from config_manager.

    """""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> QCheckBox

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 180)
        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            if not isinstance(value, bool):
                continue
            description = self.setting_description_list.get(key_value, key_value)
            checkbox = QtWidgets.QCheckBox(description)
            checkbox.setChecked(value)
            main_layout.addWidget(checkbox)
            self.widgets[key_value] = checkbox

        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, checkbox in self.widgets.items():
            self.setting_value_list[key_value] = checkbox.isChecked()

        saved_settings = config_manager.save_setting(self.setting_value_list)
        if saved_settings != {}:
            self.update_darkmode()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error", E.ERROR_MESSAGES["5001"])

    def update_darkmode(self):
        if self.setting_value_list.get("darkmode") == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QCheckBox {color: white;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class Calculator(QtWidgets.QWidget):
    shift_is_held = False

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. State ---
        self.state = EquationBuilder.CalculatorState()
        self.button_objects = {}  # Key -> QPushButton

        # --- 3. Window Setup ---
        self.setWindowTitle("Calculator")
        self.setFixedSize(325, 540)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # --- 4. Result and Equation Labels ---
        self.result_label = QtWidgets.QLabel("0")
        self.result_label.setObjectName("ResultLabel")
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        font = self.result_label.font()
        font.setPointSize(40)
        font.setBold(True)
        self.result_label.setFont(font)
        main_v_layout.addWidget(self.result_label)

        self.equation_label = QtWidgets.QLabel(EquationBuilder.EMPTY)
        self.equation_label.setObjectName("EquationLabel")
        self.equation_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        font = self.equation_label.font()
        font.setPointSize(16)
        self.equation_label.setFont(font)
        main_v_layout.addWidget(self.equation_label)

        # --- 5. Button Grid (6 rows x 4 columns, in Key order) ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 1)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(10)

        for index, key in enumerate(Operators.BUTTON_KEYS):
            button = QtWidgets.QPushButton(key.label)
            button.setObjectName(key.name)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            button.clicked.connect(lambda checked=False, value=key: self.handle_button_press(value))
            button_grid.addWidget(button, index // 4, index % 4)
            self.button_objects[key] = button

        # --- 6. Settings ---
        settings_button = QtWidgets.QPushButton("Settings")
        settings_button.setObjectName("Settings")
        settings_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        settings_button.clicked.connect(self.open_settings)
        main_v_layout.addWidget(settings_button)

        self.update_darkmode()
        self.render_state()

    # --- Window/Key Event Handlers ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
            return

        key = key_for_text(event.text())
        for qt_key, special_key in SPECIAL_KEYS:
            if event.key() == qt_key:
                key = special_key

        if key is None:
            super().keyPressEvent(event)
        else:
            self.handle_button_press(key)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    def handle_button_press(self, key):
        if key == Key.EQUALS:
            self.evaluate()
        else:
            self.state = EquationBuilder.press(self.state, key)
            self.equation_label.setToolTip("")
        self.render_state()

    def evaluate(self):
        self.state, failure = EquationBuilder.solve(self.state)
        if failure is not None:
            self.equation_label.setToolTip(f"{E.describe(failure)}\nDetails: {failure.message}")
            return

        self.equation_label.setToolTip("")
        if self.setting_value_list.get("copy_result") == True or (
                self.setting_value_list.get("shift_to_copy") == True and self.shift_held()):
            self.copy_result()

    def shift_held(self):
        return self.shift_is_held or is_shift_pressed()

    def copy_result(self):
        try:
            pyperclip.copy(self.state.result)
        except pyperclip.PyperclipException as e:
            print(f"{E.ERROR_MESSAGES['4001']} {e}")

    def render_state(self):
        self.result_label.setText(self.state.result)
        self.equation_label.setText(Operators.to_display(self.state.equation))
        color = ERROR_COLOR if self.state.error else OK_COLOR
        self.equation_label.setStyleSheet(f"color: {color};")

    def update_darkmode(self):
        # --- Apply Dark/Light Mode to all buttons ---
        if self.setting_value_list.get("darkmode") == True:
            for button in self.button_objects.values():
                button.setStyleSheet("background-color: #2e2e2e; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.result_label.setStyleSheet("color: white;")
        else:
            for button in self.button_objects.values():
                button.setStyleSheet("")
            self.setStyleSheet("")
            self.result_label.setStyleSheet("")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after the dialog closes so darkmode is applied
        self.setting_value_list = config_manager.load_setting_value("all")
        MathEngine.debug = self.setting_value_list.get("debug") == True
        self.update_darkmode()


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = Calculator()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
