"""Configuration management for wordgoal.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CounterConfig: Word goal bounds
- WindowConfig: Window geometry persistence settings
- EditorConfig: Editor font size bounds
- StoreConfig: Preferences file location
- LoggingConfig: Logging settings
- WordgoalSettings: Main application settings
"""

from wordgoal.config.settings import (
    CounterConfig,
    EditorConfig,
    LoggingConfig,
    StoreConfig,
    WindowConfig,
    WordgoalSettings,
    get_default_settings,
)

__all__ = [
    "CounterConfig",
    "EditorConfig",
    "LoggingConfig",
    "StoreConfig",
    "WindowConfig",
    "WordgoalSettings",
    "get_default_settings",
]
