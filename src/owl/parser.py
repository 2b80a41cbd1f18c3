"""
Document entry point - parses markup with BeautifulSoup and locates the root element
"""

import logging
from typing import IO, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .dom.node import is_element
from .errors import ErrorKind, new_error
from .result import Root

logger = logging.getLogger(__name__)

Markup = Union[str, bytes, IO[str], IO[bytes]]


def _soup(markup: Union[str, bytes]) -> BeautifulSoup:
    # html5lib always builds the html/head/body wrapper and keeps the first of
    # a duplicated attribute; class and friends stay as the raw string
    return BeautifulSoup(markup, 'html5lib', multi_valued_attributes=None)


def _first_element(soup: BeautifulSoup):
    """Skip doctype and comment nodes up to the html element"""
    node = soup.contents[0] if soup.contents else None
    while node is not None and not is_element(node):
        node = node.next_sibling
    return node


def html_parse(stream: Markup) -> Root:
    """Parse a readable stream (or str/bytes) into a Root at its first element"""
    try:
        markup = stream.read() if hasattr(stream, 'read') else stream
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Unable to read markup: {e}")
        return Root(error=new_error(ErrorKind.UNABLE_TO_PARSE, f"unable to read markup: {e}", e))

    if not isinstance(markup, (str, bytes)):
        return Root.failed(ErrorKind.UNABLE_TO_PARSE, f"cannot parse {type(markup).__name__}")

    try:
        soup = _soup(markup)
    except ParserRejectedMarkup as e:
        logger.warning(f"Parser rejected markup: {e}")
        return Root(error=new_error(ErrorKind.UNABLE_TO_PARSE, f"parser rejected markup: {e}", e))

    root = _first_element(soup)
    if root is None:
        return Root.failed(ErrorKind.UNABLE_TO_PARSE, "document has no element")
    logger.debug(f"Parsed document rooted at <{root.name}>")
    return Root(root)


def html_parse_from_string(markup: str) -> Root:
    return html_parse(markup)
