"""Errors raised along the shoe analysis flow.

Each error carries the HTTP status the API layer answers with, so the route
only has to turn it into an ``{"ok": false, "error": ...}`` body.
"""
from __future__ import annotations

from typing import Optional


class AnalysisError(RuntimeError):
    """Base class for errors reported to the caller as a structured result."""

    status_code: int = 500


class ClientInputError(AnalysisError):
    """Raised when the request does not carry an image."""

    status_code = 400


class ConfigurationError(AnalysisError):
    """Raised when a required server-side setting (the API key) is missing."""

    status_code = 500


class UpstreamError(AnalysisError):
    """Raised when the model service fails or cannot be reached."""

    status_code = 502

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body = body

    @classmethod
    def from_response(cls, status: int, body: str) -> "UpstreamError":
        """Build the error for a non-success reply, keeping status and body text."""
        return cls(f"Upstream error {status}: {body}", upstream_status=status, body=body)
