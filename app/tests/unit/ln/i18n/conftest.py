"""Feature-level fixtures for i18n system tests.

Provides temporary locale directories, logger sinks and translation clients.
"""

from unittest.mock import Mock

import pytest

from ln.i18n import LangFileLoader, Translator
from ln.logging import StructlogSink
from tests.factories.i18n import make_translation_client


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample locale files.

    Returns a directory structure like:
    - en.lang
    - es.lang
    - README.md (ignored, wrong extension)
    """
    (tmp_path / "en.lang").write_text(
        "# English\n"
        "greeting=Hello\n"
        "welcome.user = Hello %user%, welcome to %place%.\n"
        "\n"
        "farewell=Goodbye\n",
        encoding="utf-8",
    )
    (tmp_path / "es.lang").write_text(
        "# Español\n"
        "greeting=Hola\n"
        "welcome.user=Hola %user%, bienvenido a %place%.\n"
        "equation=a=b\n"
        "no equals sign here\n"
        "=missing key\n"
        "missing.value=   \n",
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("greeting=ignored\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def sink():
    """LoggerSink mock recording every call."""
    return Mock(spec=StructlogSink)


@pytest.fixture
def lang_loader(temp_translations_dir, sink):
    """Create LangFileLoader for the temporary translations directory."""
    return LangFileLoader(temp_translations_dir, logger=sink)


@pytest.fixture
def local_translator(temp_translations_dir, sink):
    """Local-mode Translator with the sample files loaded."""
    translator = Translator("en", directory=temp_translations_dir, logger=sink)
    translator.load()
    return translator


@pytest.fixture
def translation_client():
    """Mock client translating the welcome sentence into Spanish."""
    return make_translation_client(
        {
            "Hello {{PH_0}}, welcome to {{PH_1}}.": "Hola {{PH_0}}, bienvenido a {{PH_1}}.",
            "Good morning": "Buenos días",
        }
    )


@pytest.fixture
def online_translator(translation_client, sink):
    """Online-mode Translator backed by the mock client."""
    return Translator("es", online=True, logger=sink, client=translation_client)
