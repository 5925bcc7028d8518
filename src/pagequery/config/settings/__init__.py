"""Config settings – 12-factor env-based configuration."""
from pagequery.config.settings.base import Settings
from pagequery.config.settings.factory import SettingsFactory
from pagequery.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from pagequery.config.settings.query import QuerySettings

__all__ = ["EnvSettingsLoader", "QuerySettings", "Settings", "SettingsFactory", "SettingsLoader"]
