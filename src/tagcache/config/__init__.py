"""Config – 12-factor settings, loaders, and validation errors."""

from tagcache.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RedisSettings,
    Settings,
    SettingsLoader,
)
from tagcache.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RedisSettings",
    "Settings",
    "SettingsLoader",
]
