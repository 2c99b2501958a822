"""Translation loading interface and implementations.

Defines the contract for loading translations and provides the loader for
flat ``key=value`` locale files named ``<language>.lang``.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ln.logging.setup import get_module_logger
from ln.logging.sink import LoggerSink, StructlogSink

module_logger = get_module_logger()

LINE_PATTERN = re.compile(r"^([^=]+)=(.*)$")


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse a single ``key=value`` line.

    The first ``=`` splits key from value; both sides are trimmed.

    Args:
        line: Raw line (already known not to be blank or a comment).

    Returns:
        (key, value) tuple, or None if the line is malformed (no ``=``,
        empty key or empty value).
    """
    match = LINE_PATTERN.match(line.strip())
    if not match:
        return None
    key, value = match.group(1).strip(), match.group(2).strip()
    if not key or not value:
        return None
    return key, value


def parse_content(content: str) -> Tuple[Dict[str, str], List[int]]:
    """Parse the content of a locale file.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        content: Full file content.

    Returns:
        Tuple of (entries, malformed line numbers). Line numbers are 1-based.
    """
    entries: Dict[str, str] = {}
    malformed: List[int] = []
    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parsed = parse_line(line)
        if parsed is None:
            malformed.append(lineno)
            continue
        key, value = parsed
        entries[key] = value
    return entries, malformed


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how translation files are located and parsed.
    """

    @abstractmethod
    def load(self, language: str) -> Dict[str, str]:
        """Load translations for a single language.

        Args:
            language: Language code to load.

        Returns:
            Mapping of key -> message.

        Raises:
            FileNotFoundError: If no file exists for the language.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, str]]:
        """Load translations for every language found.

        Returns:
            Dict mapping language code to its key -> message mapping.
        """
        pass


class LangFileLoader(TranslationLoader):
    """Loader for flat ``key=value`` files.

    Expects files named ``<language><extension>`` (``es.lang``) directly in
    ``directory``. Files are read as UTF-8.

    Attributes:
        directory: Path to the directory containing locale files.
        extension: File extension including the dot.
        logger: LoggerSink receiving progress and problems.
    """

    def __init__(
        self,
        directory: Path,
        extension: str = ".lang",
        logger: Optional[LoggerSink] = None,
    ):
        self.directory = Path(directory)
        self.extension = extension
        self.logger = logger or StructlogSink(module_logger)

    def _ensure_directory(self) -> None:
        if not self.directory.is_dir():
            raise NotADirectoryError(
                f"Translations directory not found: {self.directory}"
            )

    def files(self) -> List[Path]:
        """Return locale files in the directory, sorted by name.

        Raises:
            NotADirectoryError: If ``directory`` is missing or not a directory.
        """
        self._ensure_directory()
        return sorted(
            path
            for path in self.directory.iterdir()
            if path.is_file() and path.suffix == self.extension
        )

    def load(self, language: str) -> Dict[str, str]:
        self._ensure_directory()
        path = self.directory / f"{language}{self.extension}"
        if not path.is_file():
            raise FileNotFoundError(
                f"No translation file found for language {language} in {self.directory}"
            )
        entries = self._read_file(path)
        return entries or {}

    def load_all(self) -> Dict[str, Dict[str, str]]:
        """Load every locale file in the directory.

        Unreadable or empty files are reported and skipped.

        Returns:
            Dict mapping language code to entries. Languages whose file holds
            only malformed lines map to an empty dict.

        Raises:
            NotADirectoryError: If ``directory`` is missing or not a directory.
        """
        files = self.files()
        if not files:
            self.logger.warn(
                "no_locale_files_found",
                directory=str(self.directory),
                extension=self.extension,
            )
            return {}

        result: Dict[str, Dict[str, str]] = {}
        for path in files:
            try:
                entries = self._read_file(path)
            except (OSError, UnicodeDecodeError) as e:
                self.logger.error("locale_file_read_error", file=path.name, error=str(e))
                continue
            if entries is None:
                continue
            result.setdefault(path.stem, {}).update(entries)

        self.logger.info("loaded_locale_files", languages=sorted(result))
        return result

    def _read_file(self, path: Path) -> Optional[Dict[str, str]]:
        """Read and parse one locale file.

        Returns:
            Parsed entries, or None if the file has no content lines.
        """
        self.logger.info("reading_locale_file", file=path.name)
        content = path.read_text(encoding="utf-8")
        self.logger.trace("locale_file_content", file=path.name, content=content)

        if not content.strip():
            self.logger.info("locale_file_empty", file=path.name)
            return None

        entries, malformed = parse_content(content)
        if not entries and not malformed:
            self.logger.info("locale_file_has_no_lines", file=path.name)
            return None

        for lineno in malformed:
            self.logger.info("malformed_locale_line", file=path.name, line=lineno)

        self.logger.info("loaded_locale_file", file=path.name, keys=len(entries))
        return entries
