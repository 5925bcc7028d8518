"""Config – 12-factor settings and loaders."""

from pagequery.config.settings import (
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from pagequery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
