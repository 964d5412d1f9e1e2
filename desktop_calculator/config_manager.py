# config_manager.py
"""Settings (config.json) and their checkbox texts (ui_strings.json)."""
from pathlib import Path
import json

config_json = Path(__file__).resolve().parent / "config.json"
ui_strings = Path(__file__).resolve().parent / "ui_strings.json"

DEFAULT_SETTINGS = {
    "darkmode": False,
    "debug": False,
    "shift_to_copy": True,
    "copy_result": False,
}


def _read_json(path):
    """Parsed JSON object from path, None if missing, broken or not an object."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def load_setting_value(key_value):
    """All settings for "all", else one value (0 when unknown).

    Settings missing from config.json keep their default.
    """
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_json) or {})
    if key_value == "all":
        return settings_dict
    return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    descriptions_dict = _read_json(ui_strings)
    if descriptions_dict is None:
        return {}
    if key_value == "all":
        return descriptions_dict
    return descriptions_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
    except (OSError, TypeError):
        return {}
    return settings_dict
