"""
Query results - found-or-error wrappers around nodes of a parsed document
"""

import functools
import logging
from typing import Callable, Dict, Iterator, List, Optional

from bs4 import Tag
from bs4.element import PageElement

from .client import Client, ensure_link
from .dom.matcher import parse_query
from .dom.node import (
    attribute_map, child_nodes, is_element, next_sibling, node_value, prev_sibling
)
from .dom.text import full_text, shallow_text
from .dom.traversal import find_all, find_once
from .errors import ErrorKind, OwlError

logger = logging.getLogger(__name__)


def _short_circuit(method):
    """Return a result carrying the existing error instead of touching the tree"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.error is not None:
            return self._propagate(method.__name__)
        return method(self, *args, **kwargs)
    return wrapper


class Root:
    """A single query result: either a node or an error, never both"""

    __slots__ = ('_node', '_error')

    def __init__(self, node: Optional[PageElement] = None, error: Optional[OwlError] = None):
        if (node is None) == (error is None):
            raise ValueError("a Root holds exactly one of a node or an error")
        self._node = node
        self._error = error

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> 'Root':
        return cls(error=OwlError(kind, message))

    @property
    def node(self) -> Optional[PageElement]:
        return self._node

    @property
    def error(self) -> Optional[OwlError]:
        return self._error

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def value(self) -> str:
        """Tag name of an element, data of any other node, '' on error"""
        if self._node is None:
            return ''
        return node_value(self._node)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Root(error={self._error!r})"
        return f"Root(node={self.value!r})"

    def _propagate(self, method_name: str):
        if method_name in ('find_all', 'find_all_strict', 'children'):
            return Roots(error=self._error)
        return Root(error=self._error)

    def _find(self, tag: str, attrs, strict: bool) -> 'Root':
        try:
            query = parse_query(tag, attrs, strict=strict)
        except OwlError as e:
            return Root(error=e)
        node = find_once(self._node, query)
        if node is None:
            return Root.failed(ErrorKind.ELEMENT_NOT_FOUND, f"element {query.describe()} not found")
        return Root(node)

    def _find_all(self, tag: str, attrs, strict: bool) -> 'Roots':
        try:
            query = parse_query(tag, attrs, strict=strict)
        except OwlError as e:
            return Roots(error=e)
        nodes = find_all(self._node, query)
        if not nodes:
            return Roots.failed(ErrorKind.ELEMENTS_NOT_FOUND, f"no elements {query.describe()} found")
        return Roots([Root(node) for node in nodes])

    @_short_circuit
    def find(self, tag: str = '', *attrs: str) -> 'Root':
        """First descendant with the given tag, optionally with an attribute
        whose whitespace separated values include the given value.

        root.find('div', 'class', 'first') matches class="first second".
        """
        return self._find(tag, attrs, strict=False)

    @_short_circuit
    def find_strict(self, tag: str = '', *attrs: str) -> 'Root':
        """Like find, but the attribute value must match exactly"""
        return self._find(tag, attrs, strict=True)

    @_short_circuit
    def find_all(self, tag: str = '', *attrs: str) -> 'Roots':
        """Every matching descendant in document order, loose attribute match"""
        return self._find_all(tag, attrs, strict=False)

    @_short_circuit
    def find_all_strict(self, tag: str = '', *attrs: str) -> 'Roots':
        return self._find_all(tag, attrs, strict=True)

    @_short_circuit
    def title(self) -> 'Root':
        return self._find('title', (), strict=True)

    @_short_circuit
    def find_next_sibling(self) -> 'Root':
        sibling = next_sibling(self._node)
        if sibling is None:
            return Root.failed(ErrorKind.NO_NEXT_SIBLING, "no next sibling found")
        return Root(sibling)

    @_short_circuit
    def find_prev_sibling(self) -> 'Root':
        sibling = prev_sibling(self._node)
        if sibling is None:
            return Root.failed(ErrorKind.NO_PREVIOUS_SIBLING, "no previous sibling found")
        return Root(sibling)

    @_short_circuit
    def find_next_element_sibling(self) -> 'Root':
        sibling = next_sibling(self._node)
        while sibling is not None and not is_element(sibling):
            sibling = next_sibling(sibling)
        if sibling is None:
            return Root.failed(ErrorKind.NO_NEXT_ELEMENT_SIBLING, "no next element sibling found")
        return Root(sibling)

    @_short_circuit
    def find_prev_element_sibling(self) -> 'Root':
        sibling = prev_sibling(self._node)
        while sibling is not None and not is_element(sibling):
            sibling = prev_sibling(sibling)
        if sibling is None:
            return Root.failed(ErrorKind.NO_PREVIOUS_ELEMENT_SIBLING, "no previous element sibling found")
        return Root(sibling)

    @_short_circuit
    def children(self) -> 'Roots':
        """Direct children of any kind"""
        nodes = child_nodes(self._node)
        if not nodes:
            return Roots.failed(ErrorKind.ELEMENTS_NOT_FOUND, f"`{self.value}` has no child nodes")
        return Roots([Root(node) for node in nodes])

    def attrs(self) -> Dict[str, str]:
        if self._node is None:
            return {}
        return attribute_map(self._node)

    def text(self) -> str:
        """First non-whitespace text directly inside this node"""
        if self._node is None:
            return ''
        return shallow_text(self._node)

    def full_text(self) -> str:
        """All text inside this node, including nested elements"""
        if self._node is None:
            return ''
        return full_text(self._node)

    def render(self) -> str:
        """HTML markup for this node and its subtree, '' if it can't be rendered"""
        if self._node is None:
            return ''
        try:
            if isinstance(self._node, Tag):
                return self._node.decode()
            return self._node.output_ready()
        except Exception as e:
            logger.warning(f"Failed to render `{self.value}`: {e}")
            return ''

    def visit(self, url: str, client: Optional[Client] = None) -> 'Root':
        """Fetch a link and parse the response into a new Root.

        Raises OwlError for links that aren't absolute http(s) URLs and for
        request failures.
        """
        from .parser import html_parse

        ensure_link(url)
        client = client or Client()
        return html_parse(client.get(url))

    def download(self, url: str, client: Optional[Client] = None) -> bytes:
        """Raw bytes of a remote file"""
        ensure_link(url)
        client = client or Client()
        return client.download(url)


class Roots:
    """Ordered matches of a multi-result query.

    error is set if and only if there are no results.
    """

    __slots__ = ('_roots', '_error')

    def __init__(self, roots: Optional[List[Root]] = None, error: Optional[OwlError] = None):
        roots = list(roots or [])
        if bool(roots) == (error is not None):
            raise ValueError("Roots carries an error exactly when it is empty")
        self._roots = roots
        self._error = error

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> 'Roots':
        return cls(error=OwlError(kind, message))

    @property
    def roots(self) -> List[Root]:
        return list(self._roots)

    @property
    def error(self) -> Optional[OwlError]:
        return self._error

    @property
    def length(self) -> int:
        return len(self._roots)

    def __len__(self) -> int:
        return len(self._roots)

    def __iter__(self) -> Iterator[Root]:
        return iter(self._roots)

    def __getitem__(self, index: int) -> Root:
        return self._roots[index]

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Roots(error={self._error!r})"
        return f"Roots({[root.value for root in self._roots]!r})"

    def first(self) -> Root:
        if not self._roots:
            return Root(error=self._error)
        return self._roots[0]

    def last(self) -> Root:
        if not self._roots:
            return Root(error=self._error)
        return self._roots[-1]

    def for_each(self, func: Callable[[int, Root], None]) -> Optional[Root]:
        """Call func(index, root) for every result; returns the last one"""
        last = None
        for i, root in enumerate(self._roots):
            func(i, root)
            last = root
        return last
