"""Config settings – 12-factor env-based configuration."""
from tagcache.config.settings.base import Settings
from tagcache.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tagcache.config.settings.redis import RedisSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RedisSettings", "Settings", "SettingsLoader"]
