from __future__ import annotations

"""High-level services built on the document object models."""

from .resource_service import SyndicationResourceService  # noqa: F401
from syndication_toolkit.core.fetch import WebRequestOptions, fetch_resource  # noqa: F401
from syndication_toolkit.core.models.document import LoadOperation  # noqa: F401

__all__: list[str] = [
    "SyndicationResourceService",
    "WebRequestOptions",
    "fetch_resource",
    "LoadOperation",
]
