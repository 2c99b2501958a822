"""i18n feature settings."""

from typing import Optional

from pydantic import Field

from ln.configuration.base import FeatureSettings

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


class I18nSettings(FeatureSettings):
    """Translation lookup configuration.

    Environment Variables:
        LN_DEFAULT_LANGUAGE: Language used when a lookup names none (default: en)
        LN_DIRECTORY: Directory holding the <language>.lang files (local mode)
        LN_ONLINE: Translate through the online client instead of local files
        LN_FILE_EXTENSION: Extension of the locale files (default: .lang)
        LN_TRANSLATE_URL: Endpoint of the online translation service
        LN_SOURCE_LANGUAGE: Language of source texts sent online (default: auto)
        LN_TRANSLATE_TIMEOUT_SECONDS: Request timeout for online lookups

    Example:
        ```python
        from ln.configuration import get_settings

        settings = get_settings()

        if settings.i18n.online:
            endpoint = settings.i18n.translate_url
        ```
    """

    default_language: str = Field(
        default="en",
        alias="LN_DEFAULT_LANGUAGE",
        description="Language code used when a lookup does not name one",
    )
    directory: Optional[str] = Field(
        default=None,
        alias="LN_DIRECTORY",
        description="Directory containing <language>.lang files",
    )
    online: bool = Field(
        default=False,
        alias="LN_ONLINE",
        description="Resolve misses through the online translation client",
    )
    file_extension: str = Field(
        default=".lang",
        alias="LN_FILE_EXTENSION",
        description="Extension of locale files in the directory",
    )
    translate_url: str = Field(
        default=GOOGLE_TRANSLATE_URL,
        alias="LN_TRANSLATE_URL",
        description="Online translation endpoint",
    )
    source_language: str = Field(
        default="auto",
        alias="LN_SOURCE_LANGUAGE",
        description="Language of the source texts ('auto' to detect)",
    )
    translate_timeout_seconds: int = Field(
        default=10,
        alias="LN_TRANSLATE_TIMEOUT_SECONDS",
        description="Timeout for a single online translation request (seconds)",
    )
