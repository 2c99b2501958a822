"""Online translation clients.

A TranslationClient turns (text, target language) into translated text. Clients
report failures as OperationResult values instead of raising, so the
translator can fall back to the source text.

Usage:
    from ln.i18n.client import GoogleTranslateClient

    client = GoogleTranslateClient(timeout=5)
    result = client.translate("Hello {{PH_0}}", "es")

    if result.is_success:
        text = result.data
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests
import structlog

from ln.configuration.i18n import GOOGLE_TRANSLATE_URL
from ln.operations import OperationResult, OperationStatus

logger = structlog.get_logger(__name__)


class TranslationClient(ABC):
    """Abstract base for online translation services."""

    @abstractmethod
    def translate(self, text: str, target_language: str) -> OperationResult:
        """Translate text into the target language.

        Args:
            text: Source text.
            target_language: Target language code (e.g., "es").

        Returns:
            OperationResult whose ``data`` is the translated text on success.
        """
        pass

    def close(self) -> None:
        """Release any held resources."""


class GoogleTranslateClient(TranslationClient):
    """Client for the public Google Translate web endpoint.

    Attributes:
        base_url: Translate endpoint URL
        source_language: Source language code, "auto" to detect
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = GOOGLE_TRANSLATE_URL,
        source_language: str = "auto",
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.source_language = source_language
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "ln-i18n/1.0",
                "Accept": "application/json",
            }
        )
        self._logger = logger.bind(component="google_translate_client")

    def translate(self, text: str, target_language: str) -> OperationResult:
        params = {
            "client": "gtx",
            "sl": self.source_language,
            "tl": target_language,
            "dt": "t",
            "q": text,
        }
        log = self._logger.bind(target_language=target_language)
        log.debug("translate_request")

        try:
            response = self._session.get(
                self.base_url, params=params, timeout=self.timeout
            )
        except requests.Timeout:
            log.error("translate_timeout", timeout=self.timeout)
            return OperationResult.transient_error(
                message=f"Request timeout after {self.timeout}s",
                error_code="TIMEOUT",
            )
        except requests.ConnectionError as e:
            log.error("translate_connection_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Connection error: {str(e)}",
                error_code="CONNECTION_ERROR",
            )
        except requests.RequestException as e:
            log.error("translate_request_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Request error: {str(e)}",
                error_code="REQUEST_ERROR",
            )

        log = log.bind(status_code=response.status_code)

        if response.status_code == 429:
            retry_after = self._retry_after(response.headers.get("Retry-After"))
            log.warning("translate_rate_limited", retry_after=retry_after)
            return OperationResult.transient_error(
                message="Rate limited by translation service",
                error_code="HTTP_429",
                retry_after=retry_after,
            )

        if response.status_code in (401, 403):
            log.warning("translate_unauthorized")
            return OperationResult.error(
                status=OperationStatus.UNAUTHORIZED,
                message=response.text[:200] or "Unauthorized",
                error_code=f"HTTP_{response.status_code}",
            )

        if response.status_code == 404:
            log.warning("translate_endpoint_not_found")
            return OperationResult.error(
                status=OperationStatus.NOT_FOUND,
                message=f"Endpoint not found: {self.base_url}",
                error_code="HTTP_404",
            )

        if 400 <= response.status_code < 500:
            log.warning("translate_client_error")
            return OperationResult.permanent_error(
                message=response.text[:200] or "Bad request",
                error_code=f"HTTP_{response.status_code}",
            )

        if response.status_code >= 500:
            log.error("translate_server_error")
            return OperationResult.transient_error(
                message=response.text[:200] or "Server error",
                error_code=f"HTTP_{response.status_code}",
            )

        try:
            translated = self._extract_text(response.json())
        except (json.JSONDecodeError, ValueError, TypeError, IndexError) as e:
            log.error("translate_unparsable_response", error=str(e))
            return OperationResult.permanent_error(
                message=f"Unparsable translation response: {str(e)}",
                error_code="INVALID_RESPONSE",
            )

        log.debug("translate_success")
        return OperationResult.success(data=translated, message="translated")

    @staticmethod
    def _extract_text(payload: Any) -> str:
        """Join the translated segments of a response.

        The endpoint answers ``[[["Hola", "Hello", ...], ...], ...]``; the
        translated text is the first element of each segment in ``payload[0]``.

        Raises:
            ValueError: If the payload does not have the expected shape or
                carries no translated text.
        """
        if not isinstance(payload, list) or not payload:
            raise ValueError("response is not a non-empty list")
        segments = payload[0]
        if not isinstance(segments, list):
            raise ValueError("response has no translated segments")
        translated = "".join(
            segment[0]
            for segment in segments
            if isinstance(segment, list) and segment and isinstance(segment[0], str)
        )
        if not translated:
            raise ValueError("response has no translated text")
        return translated

    @staticmethod
    def _retry_after(value: Optional[str]) -> Optional[int]:
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            return 60

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("google_translate_client_closed")


__all__ = ["TranslationClient", "GoogleTranslateClient"]
