"""Resolution of `schemaLocation` values against their parent document URL."""

from __future__ import annotations

from urllib.parse import SplitResult, urljoin, urlsplit

NETWORK_SCHEMES = ("http", "https")
FILE_SCHEME = "file"
SUPPORTED_SCHEMES = NETWORK_SCHEMES + (FILE_SCHEME,)


class MalformedReferenceError(Exception):
    """Raised when a schema location cannot be turned into a usable URL."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


def is_network_url(url: str) -> bool:
    """Return True when the URL is fetched over HTTP(S)."""
    return urlsplit(url).scheme.lower() in NETWORK_SCHEMES


def validate_root_url(url: str) -> str:
    """Check a caller-supplied root URL and return it unchanged."""
    candidate = url.strip()
    if not candidate:
        raise MalformedReferenceError("Schema URL must not be empty.", url=url)
    _require_supported_url(candidate, description=f"Schema URL {candidate!r}")
    return candidate


def resolve_schema_location(schema_location: str, parent_url: str) -> str:
    """Resolve a possibly relative `schemaLocation` into an absolute URL.

    Absolute `http`, `https` and `file` locations are returned as written.
    Anything else is joined onto the directory containing the parent
    document (the parent itself when its path ends with `/`) and dot
    segments are collapsed, as XML include resolution requires.
    """
    location = schema_location.strip()
    description = f"schemaLocation {schema_location!r} in {parent_url}"
    if not location:
        raise MalformedReferenceError(f"Empty {description}", url=parent_url)

    if _scheme_of(location, description, parent_url) in SUPPORTED_SCHEMES:
        _require_supported_url(location, description=description, report_url=parent_url)
        return location

    try:
        resolved = urljoin(parent_url, location)
    except ValueError as exc:
        raise MalformedReferenceError(
            f"Cannot resolve {description}: {exc}", url=parent_url
        ) from exc
    _require_supported_url(resolved, description=description, report_url=parent_url)
    return resolved


def _scheme_of(value: str, description: str, report_url: str) -> str:
    try:
        return urlsplit(value).scheme.lower()
    except ValueError as exc:
        raise MalformedReferenceError(f"Cannot parse {description}: {exc}", url=report_url) from exc


def _require_supported_url(
    url: str, *, description: str, report_url: str | None = None
) -> SplitResult:
    offending = report_url or url
    try:
        parts = urlsplit(url)
        _ = parts.port
    except ValueError as exc:
        raise MalformedReferenceError(f"Cannot parse {description}: {exc}", url=offending) from exc

    scheme = parts.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise MalformedReferenceError(
            f"Unsupported scheme {scheme or '<none>'!r} for {description} (resolved to {url})",
            url=offending,
        )
    if scheme in NETWORK_SCHEMES and not parts.hostname:
        raise MalformedReferenceError(f"Missing host for {description}", url=offending)
    if scheme == FILE_SCHEME and not parts.path:
        raise MalformedReferenceError(f"Missing path for {description}", url=offending)
    return parts
