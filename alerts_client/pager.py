from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from requests.structures import CaseInsensitiveDict
from requests.utils import parse_header_links


class Pager(ABC):
    """Finds the next page location in a completed response."""

    @abstractmethod
    def parse(self, response: Any) -> Optional[str]:
        ...


class LinkHeaderPager(Pager):
    """Follows the rel="next" entry of an RFC 5988 Link header.

    Returns None when the header is missing or has no next entry.
    """

    def parse(self, response: Any) -> Optional[str]:
        headers = CaseInsensitiveDict(response.headers or {})
        link = headers.get('Link')
        if not link:
            return None
        for entry in parse_header_links(link):
            rels = entry.get('rel', '').split()
            url = entry.get('url')
            if 'next' in rels and url:
                return url
        return None
