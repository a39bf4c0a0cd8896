"""Custom exception hierarchy for applemusic-meta.

All application exceptions inherit from :class:`AppleMusicError`, which
carries an optional ``provider_name`` so error handlers can identify which
component (e.g. "web_fetcher", "settings") caused the failure.

    AppleMusicError      (base -- catch-all for any plugin error)
    +-- FetchError          (transport / HTTP status failure while loading a page)
    +-- ConfigurationError  (invalid settings or YAML configuration)

"Not found" is absent from this hierarchy: a catalog page that
loads but lacks the expected markup is reported as ``None`` or an empty list,
never as an exception.
"""

from __future__ import annotations


class AppleMusicError(Exception):
    """Base exception for all applemusic-meta errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[web_fetcher] HTTP 503``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class FetchError(AppleMusicError):
    """Raised when a catalog page cannot be retrieved.

    Covers network failures and non-success HTTP status codes.  Never
    retried or swallowed inside the metadata source; the host surfaces it
    as a failed provider call.
    """

    def __init__(
        self,
        message: str = "Failed to fetch page",
        provider_name: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._url = url
        self._status_code = status_code

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def status_code(self) -> int | None:
        return self._status_code


class ConfigurationError(AppleMusicError):
    """Raised when configuration is invalid or cannot be loaded."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
