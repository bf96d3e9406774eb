"""Tests for pertplan.config."""

from pathlib import Path

from pertplan.config import (
    Settings,
    debug_enabled,
    get_config_dir,
    get_settings,
    resolve_snapshot_path,
    save_settings,
)


class TestSettings:
    def test_config_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PERTPLAN_HOME", str(tmp_path / "home"))
        config_dir = get_config_dir()
        assert config_dir == tmp_path / "home"
        assert config_dir.is_dir()

    def test_defaults_when_missing(self):
        assert get_settings().snapshot_path == "pert-estimation.json"

    def test_save_and_load(self):
        save_settings(Settings(snapshot_path="plans/site.json"))
        assert get_settings().snapshot_path == "plans/site.json"

    def test_invalid_file_falls_back_to_defaults(self, caplog):
        (get_config_dir() / "config.json").write_text("{broken", encoding="utf-8")
        assert get_settings() == Settings()
        assert "Ignoring invalid settings" in caplog.text


class TestResolveSnapshotPath:
    """Explicit path, then PERTPLAN_FILE, then settings."""

    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("PERTPLAN_FILE", "env.json")
        assert resolve_snapshot_path(Path("explicit.json")) == Path("explicit.json")

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("PERTPLAN_FILE", "env.json")
        save_settings(Settings(snapshot_path="settings.json"))
        assert resolve_snapshot_path() == Path("env.json")

    def test_settings(self):
        save_settings(Settings(snapshot_path="settings.json"))
        assert resolve_snapshot_path() == Path("settings.json")

    def test_default(self):
        assert resolve_snapshot_path() == Path("pert-estimation.json")


class TestDebugEnabled:
    def test_off_by_default(self):
        assert debug_enabled() is False

    def test_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES"):
            monkeypatch.setenv("PERTPLAN_DEBUG", value)
            assert debug_enabled() is True

    def test_other_values(self, monkeypatch):
        monkeypatch.setenv("PERTPLAN_DEBUG", "0")
        assert debug_enabled() is False
