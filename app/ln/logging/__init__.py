"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - LoggerSink: Capability interface accepted by the translator
    - StructlogSink: Default LoggerSink backed by structlog

Example:
    from ln.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from ln.logging.setup import configure_logging, get_module_logger
from ln.logging.sink import LoggerSink, StructlogSink

__all__ = [
    "configure_logging",
    "get_module_logger",
    "LoggerSink",
    "StructlogSink",
]
