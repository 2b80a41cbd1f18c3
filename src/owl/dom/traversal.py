"""
Traversal Engine - pre-order depth first search over a node's descendants
"""

from typing import Iterator, List, Optional

from bs4.element import PageElement

from .matcher import Query, matches
from .node import child_nodes


def iter_descendants(start: PageElement) -> Iterator[PageElement]:
    """Yield every descendant of start in document order.

    The start node itself is never yielded. An explicit stack keeps deep
    documents clear of the recursion limit.
    """
    stack = list(reversed(child_nodes(start)))
    while stack:
        node = stack.pop()
        yield node
        children = child_nodes(node)
        if children:
            stack.extend(reversed(children))


def iter_matches(start: PageElement, query: Query) -> Iterator[PageElement]:
    for node in iter_descendants(start):
        if matches(node, query):
            yield node


def find_once(start: PageElement, query: Query) -> Optional[PageElement]:
    """First matching descendant, or None"""
    return next(iter_matches(start, query), None)


def find_all(start: PageElement, query: Query) -> List[PageElement]:
    """Every matching descendant in document order"""
    return list(iter_matches(start, query))
