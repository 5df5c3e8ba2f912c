from __future__ import annotations

"""Retrieval of remote syndication resources.

A thin wrapper over :mod:`requests`: every call builds its own request from
the options passed in, nothing is shared between calls.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple
from urllib.parse import unquote, urlparse

import requests

from syndication_toolkit.config import ConfigManager

from .exceptions import DocumentLoadError
from .utils import parse_bool, require_text

logger = logging.getLogger(__name__)

__all__ = ["WebRequestOptions", "fetch_resource"]

DEFAULT_USER_AGENT = "Syndication-Toolkit"


@dataclass
class WebRequestOptions:
    """Per-request network options.

    Attributes:
        user_agent: Value of the ``User-Agent`` header
        headers: Additional request headers
        credentials: Optional ``(user, password)`` pair for basic auth
        proxies: Mapping in the format accepted by ``requests``
        verify: Verify TLS certificates
    """

    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=dict)
    credentials: Optional[Tuple[str, str]] = None
    proxies: Optional[Dict[str, str]] = None
    verify: bool = True

    @classmethod
    def from_config(cls) -> "WebRequestOptions":
        values = ConfigManager().get_network_defaults()
        verify = parse_bool(str(values.get("verify", True)))
        return cls(
            user_agent=str(values.get("user_agent") or DEFAULT_USER_AGENT),
            verify=True if verify is None else verify,
        )

    def request_headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        headers.update(self.headers)
        return headers


def fetch_resource(url: str, options: Optional[WebRequestOptions] = None,
                   timeout: float = 15.0) -> bytes:
    """Return the raw bytes of the resource at *url*.

    ``file:`` URLs and URLs without a scheme are read from the local
    filesystem; anything else goes through ``requests.get``.

    Raises:
        DocumentLoadError: If the resource cannot be retrieved
    """
    url = require_text(url, "url")
    parsed = urlparse(url)

    if parsed.scheme in ("", "file") or len(parsed.scheme) == 1:  # single letter: Windows drive
        path = Path(unquote(parsed.path) if parsed.scheme == "file" else url)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Cannot read '{path}': {exc}", source=url, cause=exc)

    options = options or WebRequestOptions.from_config()
    try:
        response = requests.get(
            url,
            timeout=timeout,
            headers=options.request_headers(),
            auth=options.credentials,
            proxies=options.proxies,
            verify=options.verify,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Fetch failed for %s: %s", url, exc)
        raise DocumentLoadError(f"Could not retrieve '{url}': {exc}", source=url, cause=exc)

    logger.info("Fetched %s (%d bytes)", url, len(response.content))
    return response.content
