"""
Weblate REST API client for translation sync.

Downloads every translation of a component into the working tree and uploads
the source strings file, using the Weblate API directly instead of a local
platform CLI.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import httpx

from ..config.schema import WeblateConfig
from ..utils.core.exceptions import PlatformError, PreconditionError

API_KEY_ENV = "WEBLATE_API_KEY"


class WeblateClient:
    """Client for pulling and pushing translation files through Weblate."""

    def __init__(
        self,
        config: WeblateConfig,
        root: Path,
        translations_dir: Path,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize Weblate client.

        Args:
            config: Weblate configuration
            root: Repository root that relative paths are anchored at
            translations_dir: Directory for translation files, relative to root
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config
        self.root = root
        self.translations_dir = translations_dir
        self.api_key: str | None = config.api_key or os.getenv(API_KEY_ENV)
        self._transport = transport
        self.logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return "Weblate"

    @contextmanager
    def _session(self) -> Iterator[httpx.Client]:
        with httpx.Client(
            base_url=self.config.api_url,
            headers={
                "Authorization": f"Token {self.api_key}",
                "User-Agent": "l10n-sync/1.0",
            },
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            yield client

    def _make_request(
        self, client: httpx.Client, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        """
        Make HTTP request to Weblate API.

        Args:
            client: Open HTTP client
            method: HTTP method (GET, POST, etc.)
            url: Endpoint path relative to the API URL, or an absolute URL
            **kwargs: Additional arguments for httpx request

        Returns:
            HTTP response object

        Raises:
            PlatformError: If the request fails
        """
        try:
            response = client.request(method, url, **kwargs)
            _ = response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            error_msg = f"Weblate HTTP {e.response.status_code}: {e.response.text}"
            raise PlatformError(error_msg, e.response.status_code) from e
        except httpx.RequestError as e:
            raise PlatformError(f"Weblate request failed: {e}") from e

    def _translation_path(self, language: str) -> Path:
        # Language codes come from the server and end up in a file path
        if not language or "/" in language or "\\" in language or language.startswith("."):
            raise PlatformError(f"Refusing unsafe language code from Weblate: {language!r}")
        return (
            self.root
            / self.translations_dir
            / self.config.file_template.format(language=language)
        )

    def _source_path(self) -> Path:
        if self.config.source_file is not None:
            return self.root / self.config.source_file
        return self._translation_path(self.config.source_language)

    def ensure_available(self) -> None:
        """
        Check that the API can be authenticated against.

        Raises:
            PreconditionError: If no API key is configured
        """
        if not self.api_key:
            raise PreconditionError(
                f"Weblate API key is required (set platform.weblate.api_key or {API_KEY_ENV})"
            )

    def list_languages(self) -> list[str]:
        """
        List the language codes of every translation in the component.

        Returns:
            Language codes, following API pagination

        Raises:
            PlatformError: If the request fails
        """
        url: str | None = (
            f"/components/{self.config.project}/{self.config.component}/translations/"
        )
        languages: list[str] = []
        with self._session() as client:
            while url:
                data: dict[str, Any] = self._make_request(client, "GET", url).json()  # pyright: ignore[reportAny]
                for translation in data.get("results", []):  # pyright: ignore[reportAny]
                    code = translation.get("language_code")  # pyright: ignore[reportAny]
                    if code:
                        languages.append(str(code))  # pyright: ignore[reportAny]
                url = data.get("next")  # pyright: ignore[reportAny]
        return languages

    def pull_translations(self) -> None:
        """Download every non-source translation file into the working tree."""
        languages = [
            code for code in self.list_languages() if code != self.config.source_language
        ]
        self.logger.debug(f"Weblate translations: {', '.join(languages) or 'none'}")

        with self._session() as client:
            for language in languages:
                endpoint = (
                    f"/translations/{self.config.project}/{self.config.component}"
                    f"/{language}/file/"
                )
                target = self._translation_path(language)
                response = self._make_request(client, "GET", endpoint)
                target.parent.mkdir(parents=True, exist_ok=True)
                _ = target.write_bytes(response.content)

        self.logger.info(f"📥 Downloaded {len(languages)} translation file(s)")

    def push_source_strings(self) -> dict[str, Any]:
        """
        Upload the source strings file as the authoritative source.

        Returns:
            Upload result reported by Weblate

        Raises:
            PlatformError: If the upload fails or the source file is missing
        """
        source_path = self._source_path()
        if not source_path.is_file():
            raise PlatformError(f"Source strings file not found: {source_path}")

        endpoint = (
            f"/translations/{self.config.project}/{self.config.component}"
            f"/{self.config.source_language}/file/"
        )
        with self._session() as client, source_path.open("rb") as source:
            response = self._make_request(
                client,
                "POST",
                endpoint,
                files={"file": (source_path.name, source)},
                data={"method": "source"},
            )
        result: dict[str, Any] = response.json()  # pyright: ignore[reportAny]
        self.logger.info("📤 Uploaded source strings")
        return result
