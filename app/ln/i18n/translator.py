"""Translator service resolving lookup keys to localized strings.

Local mode serves strings loaded from ``<language>.lang`` files. Online mode
translates source texts through a TranslationClient and caches each result
under its lookup key, so a (language, key) pair is translated at most once
until ``reset()``.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ln.i18n.client import GoogleTranslateClient, TranslationClient
from ln.i18n.interpolation import (
    protect_placeholders,
    restore_placeholders,
    substitute_variables,
)
from ln.i18n.loader import LangFileLoader, TranslationLoader
from ln.i18n.models import LocaleStore, TranslationRequest
from ln.logging.setup import get_module_logger
from ln.logging.sink import LoggerSink, StructlogSink

module_logger = get_module_logger()


class Translator:
    """Resolve lookup keys from a per-instance locale store.

    Attributes:
        default_language: Language used when a lookup names none.
        directory: Directory of locale files (local mode).
        online: Whether misses go through the translation client.
        logger: LoggerSink receiving diagnostics.
        store: LocaleStore owned by this instance.
    """

    def __init__(
        self,
        default_language: str,
        directory: Optional[Union[str, Path]] = None,
        online: bool = False,
        logger: Optional[LoggerSink] = None,
        client: Optional[TranslationClient] = None,
        loader: Optional[TranslationLoader] = None,
        extension: str = ".lang",
        owns_client: Optional[bool] = None,
    ):
        """Initialize Translator.

        Args:
            default_language: Language code used when a lookup names none.
            directory: Directory of ``<language><extension>`` files.
            online: Resolve misses through ``client`` instead of files.
            logger: Optional LoggerSink; defaults to a structlog-backed sink.
            client: Translation client for online mode; a
                GoogleTranslateClient is created on first use if omitted.
            loader: Optional loader overriding the directory-based one.
            extension: Locale file extension (default: .lang).
            owns_client: Whether ``close()`` closes the client. Defaults to
                True only when no client is passed in.
        """
        if not default_language:
            raise ValueError("default_language is required")

        self.default_language = default_language
        self.directory = Path(directory) if directory is not None else None
        self.online = online
        self.extension = extension
        self.logger: LoggerSink = logger or StructlogSink(module_logger)
        self.store = LocaleStore()
        self._client = client
        self._owns_client = client is None if owns_client is None else owns_client
        self._loader = loader

    @property
    def client(self) -> TranslationClient:
        """Translation client, created lazily for online mode."""
        if self._client is None:
            self._client = GoogleTranslateClient()
        return self._client

    @property
    def loader(self) -> Optional[TranslationLoader]:
        """Loader for local files, or None when no directory is configured."""
        if self._loader is None and self.directory is not None:
            self._loader = LangFileLoader(
                self.directory, extension=self.extension, logger=self.logger
            )
        return self._loader

    def load(self) -> None:
        """Load every locale file into the store.

        Additive: keys already in the store and absent from the files are kept.
        Problems are reported through the logger sink; nothing is raised.
        """
        if self.online:
            self.logger.info("online_mode_skips_local_files")
            return

        loader = self.loader
        if loader is None:
            self.logger.fatal(
                "invalid_translations_directory",
                directory=None,
                error="A directory is required in local mode",
            )
            return

        try:
            locales = loader.load_all()
        except NotADirectoryError as e:
            self.logger.fatal(
                "invalid_translations_directory",
                directory=str(self.directory),
                error=str(e),
            )
            return
        except OSError as e:
            self.logger.fatal(
                "translations_directory_unreadable",
                directory=str(self.directory),
                error=str(e),
            )
            return

        for language, entries in locales.items():
            self.store.merge(language, entries)
            self.logger.trace(
                "merged_locale", language=language, keys=self.store.count(language)
            )

        self.logger.info("all_locale_files_processed", languages=self.languages())

    def load_locale(self, language: str) -> None:
        """Load a single language file into the store.

        Args:
            language: Language code to load.

        Raises:
            FileNotFoundError: If no file exists for the language.
            NotADirectoryError: If the directory is missing.
            ValueError: If no directory is configured.
        """
        loader = self.loader
        if loader is None:
            raise ValueError("A directory is required to load a locale")
        self.store.merge(language, loader.load(language))
        self.logger.info("loaded_locale", language=language)

    def t(
        self,
        key: str,
        language: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a key from the store.

        Args:
            key: Lookup key.
            language: Language code (default: ``default_language``).
            variables: Optional %name% substitutions.

        Returns:
            Stored message with variables substituted, or the key itself when
            the store has no entry.
        """
        language = language or self.default_language
        self.logger.info("get_translation", key=key, language=language)
        self.logger.trace(
            "get_translation_context",
            key=key,
            language=language,
            variables=dict(variables or {}),
            mode="online" if self.online else "local",
        )

        text = self.store.get(language, key)
        if text is None:
            self.logger.info("translation_key_not_found", key=key, language=language)
            text = key

        return self._finalize(key, language, text, variables)

    def translate(
        self,
        text: str,
        key: str,
        language: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate ``text`` online and cache it under ``key``.

        Args:
            text: Source text, may contain %name% placeholders.
            key: Lookup key the translation is cached under.
            language: Target language (default: ``default_language``).
            variables: Optional %name% substitutions applied to the result.

        Returns:
            Cached or freshly translated text with variables substituted. Falls
            back to the source text when the client fails, and to ``text`` or
            ``key`` when either argument is missing.
        """
        return self.translate_request(
            TranslationRequest(
                text=text, key=key, language=language, variables=variables
            )
        )

    def translate_request(self, request: TranslationRequest) -> str:
        """Resolve a TranslationRequest. See ``translate``."""
        if not request.is_complete:
            self.logger.error(
                "missing_translation_arguments",
                has_text=bool(request.text),
                has_key=bool(request.key),
            )
            return request.text or request.key

        language = request.language or self.default_language
        self.logger.info("get_translation", key=request.key, language=language)
        self.logger.trace(
            "get_translation_context",
            key=request.key,
            language=language,
            variables=dict(request.variables or {}),
            mode="online" if self.online else "local",
        )

        text = self.store.get(language, request.key)
        if text is None:
            if self.online:
                text = self._translate_online(
                    request.text, language, request.variables
                )
                self.store.set(language, request.key, text)
            else:
                self.logger.info(
                    "translation_key_not_found", key=request.key, language=language
                )
                text = request.text

        return self._finalize(request.key, language, text, request.variables)

    def _translate_online(
        self,
        text: str,
        language: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        protected, markers = protect_placeholders(
            text, names=variables.keys() if variables else None
        )
        self.logger.info("translating_online", text=protected, language=language)

        try:
            result = self.client.translate(protected, language)
        except Exception as e:  # pylint: disable=broad-except
            self.logger.error("online_translation_error", error=str(e))
            return text

        if not result.is_success:
            self.logger.error(
                "online_translation_error",
                error=result.message,
                error_code=result.error_code,
            )
            return text

        if not isinstance(result.data, str) or not result.data.strip():
            self.logger.error(
                "online_translation_error",
                error="Translation client returned no text",
                error_code="EMPTY_TRANSLATION",
            )
            return text

        translated = restore_placeholders(result.data, markers)
        self.logger.trace("translated_online", language=language, translated=translated)
        return translated

    def _finalize(
        self,
        key: str,
        language: str,
        text: str,
        variables: Optional[Mapping[str, Any]],
    ) -> str:
        value = substitute_variables(text, variables)
        self.logger.trace("resolved_translation", key=key, language=language, value=value)
        return value

    def has(self, key: str, language: Optional[str] = None) -> bool:
        """Check if the store holds an entry for key in language."""
        return self.store.has(language or self.default_language, key)

    def languages(self) -> List[str]:
        """Return languages currently held in the store."""
        return self.store.languages()

    def get_locale(self, language: str) -> Dict[str, str]:
        """Return a copy of the entries stored for a language."""
        return self.store.locale(language)

    def reset(self) -> None:
        """Clear the whole store, for every language."""
        self.store.clear()
        self.logger.info("translation_cache_reset")

    def close(self) -> None:
        """Close the translation client if this instance created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
            self.logger.trace("translation_client_closed")
