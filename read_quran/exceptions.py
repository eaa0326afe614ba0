"""
Custom exceptions for read-quran.

All exceptions inherit from ReadQuranError for easy catching of library-specific errors.
"""

from typing import Any


class ReadQuranError(Exception):
    """Base exception for all read-quran errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class NetworkError(ReadQuranError):
    """Raised when a request fails at the transport level or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if url:
            ctx["url"] = url
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code


class DecodeError(ReadQuranError):
    """Raised when a response body is not valid JSON or does not match the expected shape."""

    def __init__(
        self,
        message: str,
        payload: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if payload:
            ctx["payload"] = payload
        super().__init__(message, ctx)
        self.payload = payload


class InvalidInputError(ReadQuranError):
    """Raised when a chapter number falls outside 1-114."""

    def __init__(self, chapter_number: int) -> None:
        super().__init__(
            f"Invalid chapter number: {chapter_number}. Must be 1-114.",
            {"chapter_number": chapter_number},
        )
        self.chapter_number = chapter_number


class ConfigurationError(ReadQuranError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name


class AudioPlaybackError(ReadQuranError):
    """Raised when verse audio cannot be downloaded, decoded or played."""

    def __init__(self, url: str | None = None, reason: str | None = None) -> None:
        message = f"Cannot play audio: {url}" if url else "Cannot play audio"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.url = url
        self.reason = reason
