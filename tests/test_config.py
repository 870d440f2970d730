"""
Tests for settings loading.
"""

import pytest
import yaml

from holiday_calendar.domain.models import CalendarPreferences
from holiday_calendar.infra import config
from holiday_calendar.infra.config import Settings, get_settings, reload_settings


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with an empty working directory and home directory"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("HOLIDAYCAL_PREFERENCES", "HOLIDAYCAL_CONFIG_FILE", "HOLIDAYCAL_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    return tmp_path


class TestSettings:

    def test_defaults(self, isolated_env):
        prefs = Settings().preferences
        assert prefs.default_region == "Chile"
        assert prefs.default_locale == "es_CL"
        assert prefs.fallback_locale == "en"
        assert prefs.respect_holidays and prefs.respect_weekends

    def test_default_config_dir(self, isolated_env):
        assert Settings().config_dir == isolated_env / ".config" / "holiday_calendar"

    def test_workspace_yaml(self, isolated_env):
        (isolated_env / "config").mkdir()
        (isolated_env / "config" / "settings.yaml").write_text(
            yaml.dump({"default_region": "CL-AP", "default_locale": "en"}), encoding="utf-8"
        )
        prefs = Settings().preferences
        assert prefs.default_region == "CL-AP"
        assert prefs.default_locale == "en"

    def test_explicit_config_file(self, isolated_env):
        config_file = isolated_env / "custom.yaml"
        config_file.write_text(yaml.dump({"respect_weekends": False}), encoding="utf-8")
        assert Settings(config_file=config_file).preferences.respect_weekends is False

    def test_missing_config_file_keeps_defaults(self, isolated_env):
        settings = Settings(config_file=isolated_env / "missing.yaml")
        assert settings.preferences.default_region == "Chile"

    def test_environment_variable(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HOLIDAYCAL_PREFERENCES", '{"default_locale": "es_CL", "log_level": "DEBUG"}')
        assert Settings().preferences.log_level == "DEBUG"

    def test_save_and_reload(self, isolated_env):
        settings = Settings()
        settings.preferences = CalendarPreferences(default_region="CL-AP")
        settings.save_preferences()
        saved = isolated_env / ".config" / "holiday_calendar" / "settings.yaml"
        assert saved.exists()
        assert Settings().preferences.default_region == "CL-AP"

    def test_global_instance(self, isolated_env):
        assert get_settings() is get_settings()
        first = get_settings()
        assert reload_settings() is not first
