"""i18n system - key lookups, online translation and variable interpolation.

Main components:
- models: LocaleStore, TranslationRequest
- loader: TranslationLoader and LangFileLoader
- client: TranslationClient and GoogleTranslateClient
- translator: Translator with local and online lookups
- factory: create_translator from Settings
"""

from ln.i18n.client import GoogleTranslateClient, TranslationClient
from ln.i18n.factory import create_translator
from ln.i18n.loader import LangFileLoader, TranslationLoader
from ln.i18n.models import LocaleStore, TranslationRequest
from ln.i18n.translator import Translator

__all__ = [
    "LocaleStore",
    "TranslationRequest",
    "TranslationLoader",
    "LangFileLoader",
    "TranslationClient",
    "GoogleTranslateClient",
    "Translator",
    "create_translator",
]
