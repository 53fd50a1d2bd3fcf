"""Exceptions raised along the prompt → reply pipeline."""

from __future__ import annotations


class ChatError(Exception):
    """Base class for every failure the CLI reports before exiting."""


class ConfigError(ChatError):
    """Raised when required configuration (the API key) is missing."""


class RequestEncodeError(ChatError):
    """Raised when the request body cannot be serialized to JSON."""


class TransportError(ChatError):
    """Raised when the HTTP request itself fails (DNS, connect, read)."""


class APIError(TransportError):
    """Raised when the API answers with a status other than 200."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"HTTP {self.status}: {body}")

    @property
    def status(self) -> str:
        """Status line, e.g. ``401 Unauthorized``."""
        return f"{self.status_code} {self.reason}".strip()


class DecodeError(ChatError):
    """Raised when the response body is not the expected chat completion shape.

    ``body`` holds the raw response text so it can be shown to the operator.
    """

    def __init__(self, message: str, body: str) -> None:
        self.body = body
        super().__init__(message)
