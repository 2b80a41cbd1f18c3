"""
Error taxonomy shared by queries, parsing and the network client
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of everything that can go wrong in owl"""
    UNABLE_TO_PARSE = "unable_to_parse"
    ELEMENT_NOT_FOUND = "element_not_found"
    ELEMENTS_NOT_FOUND = "elements_not_found"
    NO_NEXT_SIBLING = "no_next_sibling"
    NO_PREVIOUS_SIBLING = "no_previous_sibling"
    NO_NEXT_ELEMENT_SIBLING = "no_next_element_sibling"
    NO_PREVIOUS_ELEMENT_SIBLING = "no_previous_element_sibling"
    MALFORMED_QUERY = "malformed_query"
    CREATING_GET_REQUEST = "creating_get_request"
    IN_GET_REQUEST = "in_get_request"
    CREATING_POST_REQUEST = "creating_post_request"
    IN_POST_REQUEST = "in_post_request"
    MARSHALLING_POST_REQUEST = "marshalling_post_request"
    READING_RESPONSE = "reading_response"
    INVALID_LINK = "invalid_link"


class OwlError(Exception):
    """An error with a kind that callers can compare against ErrorKind.

    Query results carry these instead of raising them; the network client
    raises them.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"OwlError({self.kind.name}, {self.message!r})"


def new_error(kind: ErrorKind, message: str, cause: Optional[BaseException] = None) -> OwlError:
    """Build an OwlError, keeping the underlying exception as its cause"""
    error = OwlError(kind, message)
    if cause is not None:
        error.__cause__ = cause
    return error
