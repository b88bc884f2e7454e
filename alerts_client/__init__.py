"""Client for the New Relic Alerts REST API (policies, conditions, plugins and infrastructure conditions).

Usage example:
    from alerts_client import Alerts
    alerts = Alerts.from_env()
    policies = alerts.list_policies(name='production')
"""
from .alerts import Alerts  # noqa: F401
from .client import ApiResponse, Client  # noqa: F401
from .config import Config, Credential, CredentialKind, Region  # noqa: F401
from .exceptions import (  # noqa: F401
    AlertsClientError,
    ApiAuthError,
    ApiRequestError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    TransportError,
)
from .version import __version__  # noqa: F401
