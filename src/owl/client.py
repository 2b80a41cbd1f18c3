"""
Network client - fetches remote documents with aiohttp
"""

import asyncio
import io
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union
from urllib.parse import urlencode, urlparse

import aiohttp
from multidict import MultiMapping

from .config import Parameters
from .errors import ErrorKind, OwlError

logger = logging.getLogger(__name__)

_REQUEST_ERRORS = {
    'GET': (ErrorKind.CREATING_GET_REQUEST, ErrorKind.IN_GET_REQUEST),
    'POST': (ErrorKind.CREATING_POST_REQUEST, ErrorKind.IN_POST_REQUEST),
}


def is_link(url: str) -> bool:
    """Whether url is an absolute http(s) URL"""
    if not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def ensure_link(url: str) -> None:
    if not is_link(url):
        raise OwlError(ErrorKind.INVALID_LINK, f"string {url!r} is not a link")


def encode_body(body: Any) -> Optional[bytes]:
    """Serialize a POST body.

    str and bytes are sent as they are, form values (a MultiDict or a list of
    (key, value) pairs) are URL-encoded and plain mappings become JSON.
    """
    if body is None:
        return None
    try:
        if isinstance(body, str):
            return body.encode('utf-8')
        if isinstance(body, (bytes, bytearray)):
            return bytes(body)
        if isinstance(body, MultiMapping):
            return urlencode(list(body.items())).encode('ascii')
        if isinstance(body, Mapping):
            return json.dumps(dict(body)).encode('utf-8')
        if isinstance(body, (list, tuple)):
            return urlencode(list(body)).encode('ascii')
    except (TypeError, ValueError) as e:
        raise OwlError(ErrorKind.MARSHALLING_POST_REQUEST, f"unable to serialize body: {e}") from e
    raise OwlError(
        ErrorKind.MARSHALLING_POST_REQUEST,
        f"unable to determine the body type: {type(body).__name__}"
    )


class Client:
    """HTTP client returning charset-decoded documents.

    The synchronous methods run the request on their own event loop; from
    inside a running loop await fetch() instead.
    """

    def __init__(self, parameters: Optional[Parameters] = None):
        self.parameters = parameters or Parameters()

    def _session(self):
        if self.parameters.session_factory is not None:
            return self.parameters.session_factory()
        return aiohttp.ClientSession()

    async def fetch(self, method: str, url: str, body: Any = None,
                    content_type: Optional[str] = None, decode: bool = True) -> Union[str, bytes]:
        """Perform a request and return the decoded body (raw bytes if not decode)"""
        method = method.upper()
        if method not in _REQUEST_ERRORS:
            raise ValueError(f"unsupported method {method}")
        creating_error, request_error = _REQUEST_ERRORS[method]

        data = encode_body(body) if method == 'POST' else None
        if not is_link(url):
            raise OwlError(creating_error, f"cannot build {method} request for {url!r}")

        headers = dict(self.parameters.headers)
        if content_type:
            headers['Content-Type'] = content_type

        logger.debug(f"{method} {url}")
        try:
            return await asyncio.wait_for(
                self._send(method, url, data, headers, decode),
                timeout=self.parameters.timeout
            )
        except aiohttp.InvalidURL as e:
            raise OwlError(creating_error, f"cannot build {method} request for {url!r}: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {url} failed: {type(e).__name__} - {e}")
            raise OwlError(request_error, f"{method} {url} failed: {str(e) or type(e).__name__}") from e

    async def _send(self, method: str, url: str, data: Optional[bytes], headers, decode: bool):
        timeout = aiohttp.ClientTimeout(total=self.parameters.request_timeout)
        async with self._session() as session:
            async with session.request(
                method, url,
                data=data,
                headers=headers,
                cookies=self.parameters.cookies,
                timeout=timeout
            ) as response:
                if response.status >= 400:
                    logger.warning(f"{method} {url} returned HTTP {response.status}")
                try:
                    if decode:
                        return await response.text()
                    return await response.read()
                except (aiohttp.ClientPayloadError, UnicodeDecodeError, LookupError) as e:
                    raise OwlError(
                        ErrorKind.READING_RESPONSE, f"reading response from {url} failed: {e}"
                    ) from e

    def get(self, url: str) -> io.StringIO:
        return io.StringIO(asyncio.run(self.fetch('GET', url)))

    def post(self, url: str, content_type: str, body: Any) -> io.StringIO:
        return io.StringIO(asyncio.run(self.fetch('POST', url, body, content_type)))

    def download(self, url: str) -> bytes:
        content = asyncio.run(self.fetch('GET', url, decode=False))
        if not content:
            raise OwlError(ErrorKind.READING_RESPONSE, f"empty response body from {url}")
        return content
