"""Factory functions for creating i18n components.

Builds a Translator from Settings so applications configure lookups through
the environment.
"""

from typing import Optional

from ln.configuration import Settings, get_settings
from ln.i18n.client import GoogleTranslateClient, TranslationClient
from ln.i18n.translator import Translator
from ln.logging.sink import LoggerSink


def create_translator(
    settings: Optional[Settings] = None,
    logger: Optional[LoggerSink] = None,
    client: Optional[TranslationClient] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: Settings to read ``i18n`` configuration from (default: the
            cached settings singleton).
        logger: Optional LoggerSink handed to the translator.
        client: Optional translation client; in online mode a
            GoogleTranslateClient built from settings is used otherwise.
        preload: Whether to load local files immediately (local mode only).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use environment configuration (LN_DEFAULT_LANGUAGE, LN_DIRECTORY, ...)
        translator = create_translator()
        translator.t("welcome.user", "es", {"user": "Ana"})

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_locale("es")
    """
    config = (settings or get_settings()).i18n

    owns_client = config.online and client is None
    if owns_client:
        client = GoogleTranslateClient(
            base_url=config.translate_url,
            source_language=config.source_language,
            timeout=config.translate_timeout_seconds,
        )

    translator = Translator(
        default_language=config.default_language,
        directory=config.directory,
        online=config.online,
        logger=logger,
        client=client,
        extension=config.file_extension,
        owns_client=owns_client,
    )

    if preload and not config.online:
        translator.load()

    translator.logger.info(
        "translator_created",
        directory=config.directory,
        online=config.online,
        preloaded=preload and not config.online,
    )
    return translator
