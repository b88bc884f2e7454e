from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from requests.auth import AuthBase
from requests.models import PreparedRequest

from .config import Credential, CredentialKind
from .exceptions import ConfigurationError

API_KEY_HEADER = 'X-Api-Key'
API_KEY_V2_HEADER = 'Api-Key'


class Authorizer(AuthBase, ABC):
    """Signs outgoing requests with a credential fixed at construction."""

    def __init__(self, credential: Optional[Credential]):
        if credential is None or not credential.key or credential.key.strip() == '':
            raise ConfigurationError('An API key is required: set NEW_RELIC_API_KEY or NEW_RELIC_ADMIN_API_KEY')
        self._credential = credential

    @property
    def credential(self) -> Credential:
        return self._credential

    @abstractmethod
    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        ...


class HeaderKeyAuthorizer(Authorizer):
    """Sends the raw key in X-Api-Key, whatever the credential variant."""

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        r.headers[API_KEY_HEADER] = self._credential.key
        return r


class PersonalApiKeyCapableV2Authorizer(Authorizer):
    """Uses the v2 Api-Key header for personal v2 keys, X-Api-Key otherwise."""

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        if self._credential.kind is CredentialKind.PERSONAL_V2:
            r.headers[API_KEY_V2_HEADER] = self._credential.key
            r.headers['Auth-Type'] = 'User-Api-Key'
        else:
            r.headers[API_KEY_HEADER] = self._credential.key
        return r
