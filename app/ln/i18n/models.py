"""Translation models for the i18n system.

Defines the locale store and the online translation request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class LocaleStore:
    """In-memory store of resolved strings.

    Maps language code -> (lookup key -> resolved string). Entries are added
    by file loads and by online translations; the only deletion path is
    ``clear()``.

    Attributes:
        locales: Nested dict structure {language: {key: message}}.
    """

    locales: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def get(self, language: str, key: str) -> Optional[str]:
        """Retrieve a stored message.

        Args:
            language: Language code (e.g., "es").
            key: Lookup key (e.g., "welcome.user").

        Returns:
            Stored message, or None if absent.
        """
        return self.locales.get(language, {}).get(key)

    def has(self, language: str, key: str) -> bool:
        """Check if an entry exists for (language, key)."""
        return key in self.locales.get(language, {})

    def set(self, language: str, key: str, message: str) -> None:
        """Store a message under (language, key)."""
        self.locales.setdefault(language, {})[key] = message

    def merge(self, language: str, entries: Mapping[str, str]) -> None:
        """Merge entries into a language.

        Existing keys are overwritten by ``entries``; keys missing from
        ``entries`` are kept.

        Args:
            language: Language code to merge into.
            entries: Mapping of key -> message.
        """
        self.locales.setdefault(language, {}).update(entries)

    def locale(self, language: str) -> Dict[str, str]:
        """Return a copy of all entries for a language."""
        return dict(self.locales.get(language, {}))

    def languages(self) -> List[str]:
        """Return the language codes that have a mapping."""
        return list(self.locales.keys())

    def count(self, language: Optional[str] = None) -> int:
        """Count entries for one language, or across all languages."""
        if language is not None:
            return len(self.locales.get(language, {}))
        return sum(len(entries) for entries in self.locales.values())

    def clear(self) -> None:
        """Remove every entry for every language."""
        self.locales.clear()


@dataclass(frozen=True)
class TranslationRequest:
    """An online lookup: translate ``text`` and cache it under ``key``.

    Attributes:
        text: Source text, may contain %name% placeholders.
        key: Lookup key the result is cached under.
        language: Target language code, None for the translator default.
        variables: Optional substitutions applied to the result.
    """

    text: str
    key: str
    language: Optional[str] = None
    variables: Optional[Mapping[str, Any]] = None

    @property
    def is_complete(self) -> bool:
        """True when both source text and key are present."""
        return bool(self.text) and bool(self.key)
