"""ln - key/value and online translation lookups with in-memory caching.

Example:
    from ln import Translator

    translator = Translator(default_language="en", directory="locales")
    translator.load()
    translator.t("welcome.user", "es", {"user": "Ana"})
"""

from ln.i18n import Translator, create_translator

__version__ = "1.0.0"

__all__ = ["Translator", "create_translator", "__version__"]
