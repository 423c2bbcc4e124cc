"""Custom exception hierarchy for CineFeed."""

from __future__ import annotations


class CineFeedError(Exception):
    """Base class for all custom errors raised by CineFeed."""


# --- layered hierarchy ---

class InfrastructureError(CineFeedError):
    """Base class for infrastructure-level errors."""


# --- Infrastructure errors ---

class NetworkFailure(InfrastructureError):
    """Raised when a request is rejected, times out or returns a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeFailure(InfrastructureError):
    """Raised when a response body is not valid JSON or has an unexpected shape."""


# --- Settings errors ---

class SettingsError(CineFeedError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


# ``FetchError`` groups the failures a fetch call site treats identically.
FetchError = (NetworkFailure, DecodeFailure)

__all__ = [
    "CineFeedError",
    "DecodeFailure",
    "FetchError",
    "InfrastructureError",
    "NetworkFailure",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
