"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation lookup settings
    get_settings: Cached Settings singleton

Example:
    ```python
    from ln.configuration import get_settings

    settings = get_settings()
    directory = settings.i18n.directory
    ```
"""

from ln.configuration.i18n import I18nSettings
from ln.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
