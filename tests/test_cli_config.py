import json
from pathlib import Path

from bandits.presentation.cli import config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "missing.json") == {"max_attack_power": 200, "log_level": "WARNING"}


def test_load_config_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert config.load_config(path) == config.default_config()


def test_load_config_non_mapping_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert config.load_config(path) == config.default_config()


def test_load_config_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_attack_power": 2, "log_level": "debug"}), encoding="utf-8")

    assert config.load_config(path) == {"max_attack_power": 200, "log_level": "DEBUG"}


def test_save_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    config.save_config({"max_attack_power": 50, "log_level": "info"}, path)

    assert json.loads(path.read_text(encoding="utf-8")) == {"log_level": "INFO", "max_attack_power": 50}
    assert config.load_config(path) == {"max_attack_power": 50, "log_level": "INFO"}


def test_debug_enabled_only_for_explicit_one(monkeypatch) -> None:
    monkeypatch.delenv("BANDITS_DEBUG", raising=False)
    assert config.debug_enabled() is False
    monkeypatch.setenv("BANDITS_DEBUG", "true")
    assert config.debug_enabled() is False
    monkeypatch.setenv("BANDITS_DEBUG", "1")
    assert config.debug_enabled() is True


def test_default_config_path_lives_in_user_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_user_data_dir", lambda: tmp_path)

    assert config.get_default_config_path() == tmp_path / "config.json"
