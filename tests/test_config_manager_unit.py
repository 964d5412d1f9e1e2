import json
from pathlib import Path

from desktop_calculator import config_manager


def _configure_tmp_config(monkeypatch, tmp_path: Path) -> Path:
    config_file = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", config_file)
    monkeypatch.setattr(config_manager, "ui_strings", tmp_path / "ui_strings.json")
    return config_file


def test_missing_config_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_config(monkeypatch, tmp_path)

    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("darkmode") is False
    assert config_manager.load_setting_value("not_a_setting") == 0


def test_invalid_json_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    config_file = _configure_tmp_config(monkeypatch, tmp_path)
    config_file.write_text("{not-json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS

    config_file.write_text("[1, 2]", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_save_and_load_setting(monkeypatch, tmp_path: Path) -> None:
    config_file = _configure_tmp_config(monkeypatch, tmp_path)

    settings = dict(config_manager.DEFAULT_SETTINGS, darkmode=True)
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("darkmode") is True
    assert json.loads(config_file.read_text(encoding="utf-8"))["darkmode"] is True


def test_save_setting_reports_failure(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_missing_descriptions(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_config(monkeypatch, tmp_path)
    assert config_manager.load_setting_description("all") == {}
    assert config_manager.load_setting_description("darkmode") == {}


def test_shipped_files_are_in_sync() -> None:
    values = config_manager.load_setting_value("all")
    descriptions = config_manager.load_setting_description("all")
    assert set(values) == set(descriptions) == set(config_manager.DEFAULT_SETTINGS)
    assert config_manager.load_setting_description("darkmode") == "Darkmode"


def test_partial_config_keeps_defaults_for_missing_settings(monkeypatch, tmp_path: Path) -> None:
    config_file = _configure_tmp_config(monkeypatch, tmp_path)
    config_file.write_text('{"darkmode": true}', encoding="utf-8")

    assert config_manager.load_setting_value("all") == dict(config_manager.DEFAULT_SETTINGS, darkmode=True)
    assert config_manager.load_setting_value("shift_to_copy") is True


def test_descriptions_must_be_an_object(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_config(monkeypatch, tmp_path)
    (tmp_path / "ui_strings.json").write_text('["Darkmode"]', encoding="utf-8")
    assert config_manager.load_setting_description("all") == {}
