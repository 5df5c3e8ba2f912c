"""Outline Processor Markup Language (OPML 2.0) object model."""

from .owner import OpmlOwner
from .window import OpmlWindow
from .head import OpmlHead, OPML_DOCUMENTATION_URL
from .outline import OpmlOutline
from .document import OpmlDocument

__all__ = [
    "OpmlDocument",
    "OpmlHead",
    "OpmlOwner",
    "OpmlWindow",
    "OpmlOutline",
    "OPML_DOCUMENTATION_URL",
]
