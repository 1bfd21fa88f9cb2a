"""Structural node queries over parsed HTML.

Extraction code only needs "ordered text by CSS query" and "ordered
sub-documents by CSS query", so it depends on the small :class:`NodeSelector`
protocol rather than on BeautifulSoup directly.  :class:`SoupSelector` is the
BeautifulSoup/lxml implementation used in production.

Queries are evaluated relative to the bound node; a query starting with ``>``
only matches direct children (``"> div"``).  A query that matches nothing
returns an empty list.
"""
from __future__ import annotations

from typing import List, Protocol, Union

from bs4 import BeautifulSoup, Tag


class NodeSelector(Protocol):
    def select(self, query: str) -> List["NodeSelector"]:
        ...

    def select_text(self, query: str) -> List[str]:
        ...

    def count(self, query: str) -> int:
        ...


def _scoped(query: str) -> str:
    query = query.strip()
    if query.startswith(">"):
        return f":scope {query}"
    return query


class SoupSelector:
    """:class:`NodeSelector` backed by a BeautifulSoup document or tag."""

    def __init__(self, node: Union[BeautifulSoup, Tag]) -> None:
        self.node = node

    @classmethod
    def from_html(cls, html: str) -> "SoupSelector":
        return cls(BeautifulSoup(html, "lxml"))

    def select(self, query: str) -> List["SoupSelector"]:
        return [SoupSelector(element) for element in self.node.select(_scoped(query))]

    def select_text(self, query: str) -> List[str]:
        # Text is returned untrimmed; the coercion functions own whitespace handling.
        return [element.get_text() for element in self.node.select(_scoped(query))]

    def count(self, query: str) -> int:
        return len(self.node.select(_scoped(query)))

    def __repr__(self) -> str:
        name = getattr(self.node, "name", None) or "document"
        return f"SoupSelector(<{name}>)"
