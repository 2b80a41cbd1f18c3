"""
owl - find elements, text and siblings in parsed HTML documents
"""

from .errors import ErrorKind, OwlError
from .result import Root, Roots
from .parser import html_parse, html_parse_from_string
from .config import Parameters, DEFAULT_HEADERS
from .client import Client
from .log_manager import LogManager

__all__ = [
    'ErrorKind',
    'OwlError',
    'Root',
    'Roots',
    'html_parse',
    'html_parse_from_string',
    'Parameters',
    'DEFAULT_HEADERS',
    'Client',
    'LogManager'
]
