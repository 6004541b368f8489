"""Schema document fetching over HTTP(S) and the local filesystem."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Protocol
from urllib.parse import urlsplit
from urllib.request import url2pathname

import requests

from xsd_mirror.configuration.runtime_settings import FetchSettings
from xsd_mirror.schema_references.url_resolution import FILE_SCHEME, NETWORK_SCHEMES


class UnreachableSchemaError(Exception):
    """Raised when a schema document cannot be fetched."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class SchemaFetcher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for the byte source used by the graph builder."""

    def fetch(self, url: str) -> bytes: ...


class UrlSchemaFetcher:
    """Real fetcher: `requests` for network URLs, the filesystem for `file` URLs."""

    def __init__(
        self,
        settings: FetchSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or FetchSettings()
        self._session = session or requests.Session()

    def __enter__(self) -> UrlSchemaFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch(self, url: str) -> bytes:
        scheme = urlsplit(url).scheme.lower()
        if scheme in NETWORK_SCHEMES:
            return self._fetch_network(url)
        if scheme == FILE_SCHEME:
            return _fetch_file(url)
        raise UnreachableSchemaError(f"Unsupported scheme {scheme!r} for {url}", url=url)

    def _fetch_network(self, url: str) -> bytes:
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": self._settings.user_agent},
                timeout=self._settings.timeout_seconds,
                verify=self._settings.verify_tls,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise UnreachableSchemaError(f"Failed to fetch {url}: {exc}", url=url) from exc
        return response.content


def _fetch_file(url: str) -> bytes:
    parts = urlsplit(url)
    raw_path = parts.path
    if parts.netloc and parts.netloc.lower() != "localhost":
        raw_path = f"//{parts.netloc}{parts.path}"
    path = Path(url2pathname(raw_path))
    try:
        return path.read_bytes()
    except OSError as exc:
        raise UnreachableSchemaError(f"Failed to read {url}: {exc}", url=url) from exc
