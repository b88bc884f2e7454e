from __future__ import annotations
import os
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigurationError
from .version import __version__

LOGGER_NAME = 'alerts_client'
DEFAULT_TIMEOUT = 30


class Region(Enum):
    """Service region; each one has its own REST and infrastructure base URLs."""
    US = ('https://api.newrelic.com/v2', 'https://infra-api.newrelic.com/v2')
    EU = ('https://api.eu.newrelic.com/v2', 'https://infra-api.eu.newrelic.com/v2')

    @property
    def rest_base_url(self) -> str:
        return self.value[0]

    @property
    def infrastructure_base_url(self) -> str:
        return self.value[1]

    def rest_url(self, path: str) -> str:
        return self.rest_base_url + '/' + path.lstrip('/')

    def infrastructure_url(self, path: str) -> str:
        return self.infrastructure_base_url + '/' + path.lstrip('/')

    @classmethod
    def parse(cls, name: Optional[str]) -> 'Region':
        if name is None or name.strip() == '':
            return cls.US
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown region: {name!r} (expected one of {', '.join(r.name for r in cls)})") from None


class CredentialKind(str, Enum):
    PERSONAL_V1 = 'personal_v1'
    PERSONAL_V2 = 'personal_v2'
    REST = 'rest'


@dataclass(frozen=True)
class Credential:
    kind: CredentialKind
    key: str

    def __repr__(self) -> str:
        # keep keys out of logs and tracebacks
        return f"Credential(kind={self.kind.value!r}, key='***')"


@dataclass(frozen=True)
class Config:
    credential: Optional[Credential] = None
    region: Region = Region.US
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = f"newrelic-alerts-client/{__version__}"
    log_level: str = 'INFO'

    def __post_init__(self):
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {self.timeout!r} (expected a positive number of seconds)")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def get_logger(self) -> logging.Logger:
        """Return the package logger; its level stays under the application's control."""
        return logging.getLogger(LOGGER_NAME)

    @classmethod
    def from_env(cls) -> 'Config':
        return cls.from_mapping({
            'api_key': os.getenv('NEW_RELIC_API_KEY'),
            'api_key_version': os.getenv('NEW_RELIC_API_KEY_VERSION'),
            'admin_api_key': os.getenv('NEW_RELIC_ADMIN_API_KEY'),
            'region': os.getenv('NEW_RELIC_REGION'),
            'timeout': os.getenv('NEW_RELIC_TIMEOUT'),
            'log_level': os.getenv('NEW_RELIC_LOG_LEVEL'),
        })

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'Config':
        p = Path(path)
        if not p.exists():
            raise ConfigurationError(f"Config file not found: {p}")
        data = yaml.safe_load(p.read_text(encoding='utf-8')) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {p} must contain a mapping")
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Config':
        kwargs: Dict[str, Any] = {
            'credential': _credential_from(data),
            'region': Region.parse(_str_or_none(data.get('region'))),
        }
        timeout = _str_or_none(data.get('timeout'))
        if timeout is not None:
            try:
                kwargs['timeout'] = int(timeout)
            except ValueError:
                raise ConfigurationError(f"Invalid timeout: {timeout!r}") from None
        log_level = _str_or_none(data.get('log_level'))
        if log_level is not None:
            kwargs['log_level'] = log_level
        return cls(**kwargs)


def _str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _credential_from(data: Mapping[str, Any]) -> Optional[Credential]:
    api_key = _str_or_none(data.get('api_key'))
    if api_key:
        version = _str_or_none(data.get('api_key_version')) or '2'
        if version not in ('1', '2'):
            raise ConfigurationError(f"Invalid personal API key version: {version!r}")
        kind = CredentialKind.PERSONAL_V1 if version == '1' else CredentialKind.PERSONAL_V2
        return Credential(kind, api_key)
    admin_key = _str_or_none(data.get('admin_api_key'))
    if admin_key:
        return Credential(CredentialKind.REST, admin_key)
    return None
