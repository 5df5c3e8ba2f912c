"""Base entity types shared by every format.

* :class:`ExtraAttributes` – ordered map for pass-through attributes.
* :class:`ExtensibleEntity` – extension list and tree walking.
* :class:`SyndicationDocument` – load/save facade for root documents.
"""

from .attributes import ExtraAttributes
from .entity import ExtensibleEntity
from .document import DocumentLoadedEvent, LoadOperation, SyndicationDocument

__all__ = [
    "ExtraAttributes",
    "ExtensibleEntity",
    "SyndicationDocument",
    "DocumentLoadedEvent",
    "LoadOperation",
]
