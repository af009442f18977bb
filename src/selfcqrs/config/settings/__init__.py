"""Config settings – 12-factor env-based configuration."""
from selfcqrs.config.settings.base import Settings
from selfcqrs.config.settings.dispatch import DispatchSettings
from selfcqrs.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DispatchSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
