"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import logging
from pathlib import Path
from typing import Optional
import yaml

from pydantic_settings import BaseSettings, SettingsConfigDict
from holiday_calendar.domain.models import CalendarPreferences

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file
    3. Environment variables (HOLIDAYCAL_ prefix)
    """
    model_config = SettingsConfigDict(
        env_prefix='HOLIDAYCAL_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    app_name: str = "holiday_calendar"
    config_dir: Optional[Path] = None
    config_file: Optional[Path] = None

    # User preferences
    preferences: CalendarPreferences = CalendarPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Initialize default config directory"""
        if self.config_dir is None:
            self.config_dir = Path.home() / '.config' / self.app_name

    def _find_config_file(self) -> Optional[Path]:
        if self.config_file is not None:
            return self.config_file if self.config_file.exists() else None

        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"
        return config_file if config_file.exists() else None

    def _load_yaml_config(self):
        """Load preferences from YAML file"""
        config_file = self._find_config_file()
        if config_file is None:
            return

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
        if config_data:
            # Update preferences with YAML data
            self.preferences = CalendarPreferences(**config_data)
            logger.debug(f"Preferences loaded from {config_file}")

    def save_preferences(self):
        """Save current preferences to YAML file"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.config_file or self.config_dir / "settings.yaml"
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(self.preferences.model_dump(), f, default_flow_style=False, allow_unicode=True)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
