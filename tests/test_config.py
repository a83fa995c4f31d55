"""Tests for configuration loading."""

import json
import logging
from unittest.mock import Mock

from src.config import ConfigManager, configure_logging


class TestConfigManager:

    def test_builtin_defaults(self, tmp_path, monkeypatch):
        for var in ConfigManager.ENV_MAPPINGS:
            monkeypatch.delenv(var, raising=False)

        cfg = ConfigManager(config_dir=tmp_path)

        assert cfg.paths.data_dir.name == "processed_data"
        assert cfg.paths.data_url is None
        assert cfg.paths.source == cfg.paths.data_dir
        assert cfg.loader.max_workers == 5
        assert cfg.logging.level == "INFO"

    def test_local_overrides_default(self, tmp_path, monkeypatch):
        for var in ConfigManager.ENV_MAPPINGS:
            monkeypatch.delenv(var, raising=False)
        (tmp_path / "default.yaml").write_text(
            "loader:\n  max_workers: 2\nlogging:\n  level: WARNING\n"
        )
        (tmp_path / "local.json").write_text(json.dumps({"loader": {"max_workers": 3}}))

        cfg = ConfigManager(config_dir=tmp_path)

        assert cfg.loader.max_workers == 3
        assert cfg.logging.level == "WARNING"

    def test_env_overrides_files(self, tmp_path, monkeypatch):
        (tmp_path / "default.yaml").write_text("loader:\n  max_workers: 2\n")
        monkeypatch.setenv("MIMIC_MAX_WORKERS", "7")
        monkeypatch.setenv("MIMIC_DATA_URL", "https://data.example.org/mimic")
        monkeypatch.setenv("MIMIC_LOG_LEVEL", "debug")

        cfg = ConfigManager(config_dir=tmp_path)

        assert cfg.loader.max_workers == 7
        assert cfg.paths.source == "https://data.example.org/mimic"
        assert cfg.logging.level == "DEBUG"

    def test_bad_env_value_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MIMIC_MAX_WORKERS", "many")
        cfg = ConfigManager(config_dir=tmp_path)
        assert cfg.loader.max_workers == 5

    def test_relative_data_dir_resolved(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MIMIC_DATA_DIR", "some/data")
        cfg = ConfigManager(config_dir=tmp_path)
        assert cfg.paths.data_dir.is_absolute()
        assert cfg.paths.data_dir.parts[-2:] == ("some", "data")

    def test_unreadable_file_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MIMIC_MAX_WORKERS", raising=False)
        (tmp_path / "default.yaml").write_text("loader: [unclosed\n")
        cfg = ConfigManager(config_dir=tmp_path)
        assert cfg.loader.max_workers == 5


def test_configure_logging_applies_level(tmp_path, monkeypatch):
    monkeypatch.setenv("MIMIC_LOG_LEVEL", "WARNING")
    basic_config = Mock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)

    configure_logging(ConfigManager(config_dir=tmp_path))

    assert basic_config.call_args.kwargs["level"] == logging.WARNING
