"""
Custom exceptions for feedsource.

All feedsource exceptions inherit from FeedsourceError for easy catching.
"""

from __future__ import annotations

from typing import Any


class FeedsourceError(Exception):
    """Base exception for all feedsource errors."""

    pass


class ClassificationError(FeedsourceError):
    """A URL could not be classified as a feed source.

    This is the base class for all classification failures. A failure is
    definitive for the given input: retrying the same URL gives the same error.

    Attributes:
        message: Human-readable error message
        category: Error classification (e.g., "unsupported_host")
        url: The offending URL as text, if known
        provider: Provider name whose rules rejected the URL, if any
        details: Additional diagnostic information
        suggestion: Recommended remediation steps
    """

    def __init__(
        self,
        message: str,
        *,
        category: str = "invalid_url",
        url: str = "",
        provider: str | None = None,
        details: dict[str, Any] | None = None,
        suggestion: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.url = url
        self.provider = provider
        self.details = details or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for JSON error output."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "category": self.category,
        }
        if self.url:
            result["url"] = self.url
        if self.provider:
            result["provider"] = self.provider
        if self.details:
            result["details"] = self.details
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result


class UnsupportedHostError(ClassificationError):
    """The URL's scheme or host does not belong to a known provider."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        provider: str | None = None,
        host: str | None = None,
    ):
        details = {"host": host} if host else None
        suggestion = "Use an http(s) link on youtube.com or vimeo.com."
        super().__init__(
            message,
            category="unsupported_host",
            url=url,
            provider=provider,
            details=details,
            suggestion=suggestion,
        )
        self.host = host


class UnrecognizedURLError(ClassificationError):
    """The URL's path or query matches no resource shape of its provider."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        provider: str | None = None,
        rule: str | None = None,
    ):
        details = {"rule": rule} if rule else None
        super().__init__(
            message,
            category="unrecognized_shape",
            url=url,
            provider=provider,
            details=details,
            suggestion="Link to a playlist, channel, user, handle or group page.",
        )
        self.rule = rule


class ConfigError(FeedsourceError):
    """Configuration file content is invalid."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []
