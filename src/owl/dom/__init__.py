"""
Node matching, traversal and text extraction over BeautifulSoup trees
"""

from .node import NodeKind, node_kind
from .matcher import Query, parse_query, matches
from .traversal import find_once, find_all, iter_descendants
from .text import shallow_text, full_text

__all__ = [
    'NodeKind',
    'node_kind',
    'Query',
    'parse_query',
    'matches',
    'find_once',
    'find_all',
    'iter_descendants',
    'shallow_text',
    'full_text'
]
