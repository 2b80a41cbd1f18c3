"""
Client configuration - headers, cookies, timeouts and transport injection
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

DEFAULT_HEADERS = {
    'User-Agent': 'Owl Mozilla/5.0 Firefox/96.0',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8',
    'Cache-Control': 'max-age=0',
}
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_TIMEOUT = 10.0


@dataclass
class Parameters:
    """Configuration for the network client.

    request_timeout bounds a single request (connect and read), timeout bounds
    the whole call including reading the body. session_factory returns an
    aiohttp ClientSession (or anything used the same way) and replaces the
    default transport.
    """
    headers: Optional[Dict[str, str]] = None
    cookies: Optional[Dict[str, str]] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    timeout: float = DEFAULT_TIMEOUT
    session_factory: Optional[Callable[[], Any]] = None

    def __post_init__(self):
        if self.headers is None:
            self.headers = dict(DEFAULT_HEADERS)
        if self.cookies is None:
            self.cookies = {}
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
