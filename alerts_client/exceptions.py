from __future__ import annotations
from typing import Any, Optional


class AlertsClientError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(AlertsClientError):
    """Missing or invalid credential, region or setting. Raised at construction."""


class TransportError(AlertsClientError):
    """Network failure before any HTTP status was received (DNS, refused, timeout)."""


class DecodeError(AlertsClientError):
    """Successful response whose body is not JSON or not the expected shape."""


class ApiRequestError(AlertsClientError):
    """Non-2xx response carrying the service's decoded error payload."""

    def __init__(self, message: str, status_code: int, code: Optional[str] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.payload = payload

    @property
    def is_not_found(self) -> bool:
        if self.status_code == 404:
            return True
        check = getattr(self.payload, 'is_not_found', None)
        return bool(check()) if callable(check) else False

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class ApiAuthError(ApiRequestError):
    """Authentication or authorization failure (401/403)."""


class NotFoundError(AlertsClientError):
    """The requested resource does not exist."""
