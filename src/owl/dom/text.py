"""
Text extraction - shallow and full text of a node
"""

from bs4.element import PageElement

from .node import child_nodes, is_text
from .traversal import iter_descendants


def shallow_text(node: PageElement) -> str:
    """First direct text child that is not only whitespace.

    Text nested inside child elements is not visited.
    """
    for child in child_nodes(node):
        if is_text(child) and str(child).strip():
            return str(child)
    return ''


def full_text(node: PageElement) -> str:
    """All descendant text nodes joined in document order, no separators"""
    return ''.join(str(child) for child in iter_descendants(node) if is_text(child))
