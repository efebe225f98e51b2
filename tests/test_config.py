"""
Tests for config.py - YAML と環境変数からの設定読み込み
"""
import pytest
from listup_law.config import DEFAULT_READ_CHUNK_SIZE, Settings, load_settings


class TestLoadSettings:

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "listup_law.yaml"
        path.write_text("log_level: DEBUG\nread_chunk_size: 1024\nregistry_encoding: shift_jis\n", encoding="utf-8")
        settings = load_settings(path)
        assert settings.log_level == "DEBUG"
        assert settings.read_chunk_size == 1024
        assert settings.registry_encoding == "shift_jis"
        assert settings.strategy == "per_law"

    def test_environment_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "listup_law.yaml"
        path.write_text("read_chunk_size: 1024\n", encoding="utf-8")
        monkeypatch.setenv("LISTUP_LAW_READ_CHUNK_SIZE", "2048")
        monkeypatch.setenv("LISTUP_LAW_STRATEGY", "per_file")
        settings = load_settings(path)
        assert settings.read_chunk_size == 2048
        assert settings.strategy == "per_file"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == Settings()
        assert Settings().read_chunk_size == DEFAULT_READ_CHUNK_SIZE

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("output: x.json\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_strategy(self):
        with pytest.raises(ValueError):
            Settings(strategy="newest")

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            Settings(log_level="verbose")

    def test_log_level_is_case_insensitive(self):
        assert Settings(log_level="debug").log_level == "debug"

    def test_invalid_log_level_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        monkeypatch.setenv("LISTUP_LAW_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError):
            load_settings(path)
