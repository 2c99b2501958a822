"""Pluggable logger sink used by the translator.

Any object exposing ``info``, ``trace``, ``warn``, ``error`` and ``fatal``
can be handed to a Translator. Each method takes an event name plus keyword
context, the same calling convention as a structlog logger.
"""

from typing import Any, Optional, Protocol, runtime_checkable

import structlog
from structlog.stdlib import BoundLogger


@runtime_checkable
class LoggerSink(Protocol):
    """Capability interface for translator diagnostics."""

    def info(self, event: str, **kwargs: Any) -> None: ...

    def trace(self, event: str, **kwargs: Any) -> None: ...

    def warn(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, **kwargs: Any) -> None: ...

    def fatal(self, event: str, **kwargs: Any) -> None: ...


class StructlogSink:
    """LoggerSink backed by a structlog logger.

    Level mapping: trace -> debug, warn -> warning, fatal -> critical.
    """

    def __init__(self, logger: Optional[BoundLogger] = None):
        self.logger = logger or structlog.stdlib.get_logger()

    def info(self, event: str, **kwargs: Any) -> None:
        self.logger.info(event, **kwargs)

    def trace(self, event: str, **kwargs: Any) -> None:
        self.logger.debug(event, **kwargs)

    def warn(self, event: str, **kwargs: Any) -> None:
        self.logger.warning(event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self.logger.error(event, **kwargs)

    def fatal(self, event: str, **kwargs: Any) -> None:
        self.logger.critical(event, **kwargs)
