import pytest
from pydantic import ValidationError

from klondike.config import CONFIG_ENV_VAR, EngineConfig, load_config


def test_defaults():
    config = EngineConfig()
    assert config.history_capacity == 300
    assert config.seed is None
    assert config.log_level == "WARNING"


def test_log_level_is_normalised():
    assert EngineConfig(log_level="debug").log_level == "DEBUG"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        EngineConfig(log_level="chatty")
    with pytest.raises(ValidationError):
        EngineConfig(history_capacity=1)


def test_load_config_from_json(tmp_path):
    path = tmp_path / "klondike.json"
    path.write_text('{"history_capacity": 50, "seed": 9, "log_level": "info"}', encoding="utf-8")

    config = load_config(path)
    assert config.history_capacity == 50
    assert config.seed == 9
    assert config.log_level == "INFO"


def test_missing_config_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config(tmp_path / "absent.json") == EngineConfig()
    assert load_config() == EngineConfig()


def test_environment_variable_names_the_config_file(tmp_path, monkeypatch):
    path = tmp_path / "klondike.json"
    path.write_text('{"history_capacity": 12}', encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().history_capacity == 12
    assert load_config(tmp_path / "absent.json").history_capacity == 300
