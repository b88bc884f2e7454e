from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Set, Type

from pydantic import BaseModel

from .client import Client
from .config import Config
from .exceptions import ApiRequestError, NotFoundError
from .pager import Pager


@dataclass(frozen=True)
class Resource:
    """Wire description of one REST resource.

    `list_key` / `item_key` name the envelope attributes holding the items.
    `direct_get` is False for resources that only expose a list endpoint;
    their get operation scans the full listing instead.
    """
    name: str
    list_envelope: Type[BaseModel]
    list_key: str
    item_envelope: Type[BaseModel]
    item_key: str
    direct_get: bool = False


class ResourceOperations:
    """Pagination and CRUD plumbing shared by every resource mixin."""

    config: Config
    client: Client
    infra_client: Client
    pager: Pager
    logger: logging.Logger

    def _list_all(self, client: Client, resource: Resource, url: str, params: Any = None) -> List[Any]:
        items: List[Any] = []
        fetched: Set[str] = set()
        next_url: Optional[str] = url
        while next_url:
            fetched.add(next_url)
            resp = client.get(next_url, params=params, out=resource.list_envelope)
            fetched.add(resp.url)
            if resp.data is not None:
                items.extend(getattr(resp.data, resource.list_key) or [])
            # next-page links already carry the query filters
            params = None
            next_url = self.pager.parse(resp)
            if next_url in fetched:
                self.logger.warning('Pager returned already fetched URL %s for %s; stopping', next_url, resource.name)
                break
        self.logger.debug('Listed %d %s items', len(items), resource.name)
        return items

    def _get_one(self, client: Client, resource: Resource, description: str, *, item_url: str = '',
                 list_url: str = '', list_params: Any = None, match: Optional[Callable[[Any], bool]] = None) -> Any:
        """Fetch one item, directly or by scanning the listing, per `resource.direct_get`.

        Raises NotFoundError on a not-found reply or when no listed item matches.
        """
        if resource.direct_get:
            return self._get_direct(client, resource, item_url, description)
        items = self._list_all(client, resource, list_url, list_params)
        return self._get_by_scan(items, match or (lambda item: False), resource, description)

    def _get_direct(self, client: Client, resource: Resource, url: str, description: str) -> Any:
        try:
            resp = client.get(url, out=resource.item_envelope)
        except ApiRequestError as e:
            if e.is_not_found:
                raise NotFoundError(f"no {resource.name} found for {description}") from None
            raise
        item = getattr(resp.data, resource.item_key, None) if resp.data is not None else None
        if item is None:
            raise NotFoundError(f"no {resource.name} found for {description}")
        return item

    def _get_by_scan(self, items: List[Any], match: Callable[[Any], bool], resource: Resource, description: str) -> Any:
        # first match wins when the listing holds duplicates
        for item in items:
            if match(item):
                return item
        raise NotFoundError(f"no {resource.name} found for {description}")

    def _create_one(self, client: Client, resource: Resource, url: str, obj: BaseModel) -> Any:
        resp = client.post(url, body=self._envelope(resource, obj), out=resource.item_envelope)
        return self._unwrap(resource, resp.data)

    def _update_one(self, client: Client, resource: Resource, url: str, obj: BaseModel) -> Any:
        resp = client.put(url, body=self._envelope(resource, obj), out=resource.item_envelope)
        return self._unwrap(resource, resp.data)

    def _delete_one(self, client: Client, resource: Resource, url: str) -> Any:
        resp = client.delete(url, out=resource.item_envelope)
        return self._unwrap(resource, resp.data)

    @staticmethod
    def _envelope(resource: Resource, obj: BaseModel) -> BaseModel:
        return resource.item_envelope(**{resource.item_key: obj})

    @staticmethod
    def _unwrap(resource: Resource, envelope: Optional[BaseModel]) -> Any:
        if envelope is None:
            return None
        return getattr(envelope, resource.item_key, None)
