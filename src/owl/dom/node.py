"""
Node adaptation - uniform view of BeautifulSoup page elements
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag, NavigableString
from bs4.element import Doctype, PageElement, PreformattedString


class NodeKind(Enum):
    """Kinds of node found in a parsed document"""
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


def node_kind(node: PageElement) -> NodeKind:
    """Classify a bs4 page element"""
    # BeautifulSoup subclasses Tag and Doctype subclasses PreformattedString,
    # so the most specific checks come first
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Doctype):
        return NodeKind.DOCTYPE
    if isinstance(node, PreformattedString):
        return NodeKind.COMMENT
    return NodeKind.TEXT


def is_element(node: Optional[PageElement]) -> bool:
    return node is not None and node_kind(node) is NodeKind.ELEMENT


def is_text(node: Optional[PageElement]) -> bool:
    return node is not None and node_kind(node) is NodeKind.TEXT


def node_value(node: PageElement) -> str:
    """Tag name for elements, character data for everything else"""
    if isinstance(node, Tag):
        return node.name
    if isinstance(node, NavigableString):
        return str(node)
    return ''


def attribute_pairs(node: PageElement) -> List[Tuple[str, str]]:
    """Ordered (name, value) pairs of an element; empty for other nodes"""
    if not isinstance(node, Tag) or isinstance(node, BeautifulSoup):
        return []
    pairs = []
    for name, value in node.attrs.items():
        # Multi-valued attributes are disabled at parse time, but trees built
        # elsewhere may still hand us lists
        if not isinstance(value, str):
            value = ' '.join(value)
        pairs.append((name, value))
    return pairs


def attribute_map(node: PageElement) -> Dict[str, str]:
    """Attribute pairs as a dict, first occurrence of a name wins"""
    attributes: Dict[str, str] = {}
    for name, value in attribute_pairs(node):
        attributes.setdefault(name, value)
    return attributes


def child_nodes(node: PageElement) -> List[PageElement]:
    """Direct children of any kind, in document order"""
    if isinstance(node, Tag):
        return list(node.contents)
    return []


def first_child(node: PageElement) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def last_child(node: PageElement) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[-1]
    return None


def next_sibling(node: PageElement) -> Optional[PageElement]:
    return node.next_sibling


def prev_sibling(node: PageElement) -> Optional[PageElement]:
    return node.previous_sibling


def parent(node: PageElement) -> Optional[PageElement]:
    return node.parent
