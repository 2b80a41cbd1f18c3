"""
Matcher - predicates deciding whether a single element satisfies a query
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from bs4.element import PageElement

from .node import attribute_pairs, is_element
from ..errors import ErrorKind, OwlError


@dataclass(frozen=True)
class Query:
    """One tag-name constraint plus at most one attribute constraint"""
    tag: str = ''
    attribute: Optional[str] = None
    value: Optional[str] = None
    strict: bool = False

    @property
    def has_attribute(self) -> bool:
        return self.attribute is not None

    def describe(self) -> str:
        tag = self.tag or '*'
        if not self.has_attribute:
            return f"`{tag}`"
        return f"`{tag}` with attribute `{self.attribute}={self.value}`"


def parse_query(tag: str = '', attrs: Sequence[str] = (), strict: bool = False) -> Query:
    """Build a Query from a tag and an optional attribute name/value pair.

    Raises OwlError(MALFORMED_QUERY) unless attrs is empty or exactly a pair.
    """
    if tag is None:
        tag = ''
    if not isinstance(tag, str):
        raise OwlError(ErrorKind.MALFORMED_QUERY, f"tag must be a string, got {type(tag).__name__}")
    if len(attrs) == 0:
        return Query(tag=tag, strict=strict)
    if len(attrs) != 2:
        raise OwlError(
            ErrorKind.MALFORMED_QUERY,
            f"expected an attribute name and value, got {len(attrs)} argument(s): {list(attrs)!r}"
        )
    attribute, value = attrs
    if not isinstance(attribute, str) or not isinstance(value, str):
        raise OwlError(ErrorKind.MALFORMED_QUERY, "attribute name and value must be strings")
    return Query(tag=tag, attribute=attribute, value=value, strict=strict)


def match_element_name(node: PageElement, name: str) -> bool:
    return name == '' or name == node.name


def attribute_equals(attr_name: str, attr_value: str, attribute: str, value: str) -> bool:
    """Strict comparison: the whole attribute value must equal value"""
    return attr_name == attribute and attr_value == value


def attribute_contains(attr_name: str, attr_value: str, attribute: str, value: str) -> bool:
    """Loose comparison: value must be one of the whitespace separated tokens"""
    if attr_name != attribute:
        return False
    return value in attr_value.split()


def matches(node: PageElement, query: Query) -> bool:
    """Whether node is an element satisfying query"""
    if not is_element(node) or not match_element_name(node, query.tag):
        return False
    if not query.has_attribute:
        return True
    compare = attribute_equals if query.strict else attribute_contains
    return any(
        compare(name, value, query.attribute, query.value)
        for name, value in attribute_pairs(node)
    )
