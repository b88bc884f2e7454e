from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

import requests
from pydantic import BaseModel, ValidationError
from requests.structures import CaseInsensitiveDict

from .authorizers import Authorizer, PersonalApiKeyCapableV2Authorizer
from .config import Config
from .exceptions import ApiAuthError, ApiRequestError, DecodeError, TransportError
from .models import ErrorResponse

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    status_code: int
    headers: CaseInsensitiveDict
    url: str
    data: Any = None


def encode_params(params: Any) -> List[Tuple[str, str]]:
    """Stringify query params, dropping None, empty strings and empty sequences."""
    if params is None:
        return []
    if isinstance(params, BaseModel):
        params = params.model_dump(by_alias=True)
    query: List[Tuple[str, str]] = []
    for key, value in params.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            if v is None or v == '':
                continue
            if isinstance(v, bool):
                v = 'true' if v else 'false'
            query.append((key, str(v)))
    return query


def encode_body(body: Any) -> Any:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, exclude_none=True, mode='json')
    return body


class Client:
    """Synchronous JSON client for one product area of the API.

    The authorizer strategy and the error payload model are fixed at
    construction; building a client without a usable credential raises
    ConfigurationError.
    """

    def __init__(self, config: Config, auth_strategy: Type[Authorizer] = PersonalApiKeyCapableV2Authorizer,
                 error_model: Type[BaseModel] = ErrorResponse, session: Optional[requests.Session] = None):
        self._config = config
        self._authorizer = auth_strategy(config.credential)
        self._error_model = error_model
        self.session = session or requests.Session()
        self.timeout = config.timeout

    @property
    def authorizer(self) -> Authorizer:
        return self._authorizer

    @property
    def error_model(self) -> Type[BaseModel]:
        return self._error_model

    def get(self, url: str, params: Any = None, out: Optional[Type[BaseModel]] = None) -> ApiResponse:
        return self._request('GET', url, params=params, out=out)

    def post(self, url: str, params: Any = None, body: Any = None, out: Optional[Type[BaseModel]] = None) -> ApiResponse:
        return self._request('POST', url, params=params, body=body, out=out)

    def put(self, url: str, params: Any = None, body: Any = None, out: Optional[Type[BaseModel]] = None) -> ApiResponse:
        return self._request('PUT', url, params=params, body=body, out=out)

    def delete(self, url: str, params: Any = None, out: Optional[Type[BaseModel]] = None) -> ApiResponse:
        return self._request('DELETE', url, params=params, out=out)

    def _headers(self) -> Dict[str, str]:
        return {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': self._config.user_agent,
        }

    def _request(self, method: str, url: str, *, params: Any = None, body: Any = None,
                 out: Optional[Type[BaseModel]] = None) -> ApiResponse:
        logger.debug('%s %s', method, url)
        try:
            resp = self.session.request(
                method,
                url,
                params=encode_params(params),
                json=encode_body(body),
                headers=self._headers(),
                auth=self._authorizer,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug('%s %s -> %s', method, resp.url, resp.status_code)

        if not 200 <= resp.status_code < 300:
            raise self._error_from(resp)

        data = None
        if out is not None:
            data = self._decode(resp, out)
        return ApiResponse(status_code=resp.status_code, headers=resp.headers, url=resp.url, data=data)

    @staticmethod
    def _decode(resp: requests.Response, out: Type[BaseModel]) -> Optional[BaseModel]:
        if not resp.content or not resp.content.strip():
            return None
        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"Failed to decode JSON response from {resp.url}: {resp.text[:200]}") from e
        try:
            return out.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response shape from {resp.url}: {e}") from e

    def _error_from(self, resp: requests.Response) -> ApiRequestError:
        payload = None
        if resp.content:
            try:
                payload = self._error_model.model_validate(resp.json())
            except (ValueError, ValidationError):
                logger.debug('Error body from %s did not match %s', resp.url, self._error_model.__name__)
        message = _payload_message(payload) or resp.text[:200] or resp.reason or 'HTTP error'
        code = payload.error_code() if payload is not None and hasattr(payload, 'error_code') else None
        cls = ApiAuthError if resp.status_code in (401, 403) else ApiRequestError
        return cls(message, status_code=resp.status_code, code=code, payload=payload)


def _payload_message(payload: Any) -> str:
    if payload is None:
        return ''
    getter = getattr(payload, 'error_message', None)
    return getter() if callable(getter) else ''
