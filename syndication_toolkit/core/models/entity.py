from __future__ import annotations

"""Base capability set shared by every document and sub-entity."""

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from lxml import etree as ET

from ..comparison import SyndicationComparable
from ..extensions.adapter import SyndicationExtensionAdapter
from ..extensions.base import SyndicationExtension
from ..settings import LoadSettings
from ..utils import require

logger = logging.getLogger(__name__)

__all__ = ["ExtensibleEntity"]


class ExtensibleEntity(SyndicationComparable):
    """An entity carrying an ordered list of extensions.

    The list is insertion ordered: extensions are written in the order they
    were added.  Subclasses override :meth:`child_entities` so tree-wide
    walks (namespace declaration pre-pass) reach nested entities.
    """

    def __init__(self) -> None:
        self._extensions: List[SyndicationExtension] = []

    @property
    def extensions(self) -> List[SyndicationExtension]:
        return self._extensions

    @extensions.setter
    def extensions(self, value: Iterable[SyndicationExtension]) -> None:
        require(value, "extensions", type(self).__name__)
        self._extensions = list(value)

    @property
    def has_extensions(self) -> bool:
        return len(self._extensions) > 0

    def add_extension(self, extension: SyndicationExtension) -> bool:
        """Append *extension*. Returns True once added."""
        require(extension, "extension", type(self).__name__)
        self._extensions.append(extension)
        return True

    def remove_extension(self, extension: SyndicationExtension) -> bool:
        """Remove *extension* (by identity). Returns True if it was attached."""
        require(extension, "extension", type(self).__name__)
        for index, candidate in enumerate(self._extensions):
            if candidate is extension:
                del self._extensions[index]
                return True
        return False

    def find_extension(self, predicate: Callable[[SyndicationExtension], bool]) -> Optional[SyndicationExtension]:
        """Return the first attached extension matching *predicate*, or None."""
        require(predicate, "predicate", type(self).__name__)
        for extension in self._extensions:
            if predicate(extension):
                return extension
        return None

    def find_extension_by_namespace(self, namespace: str) -> Optional[SyndicationExtension]:
        return self.find_extension(lambda ext: ext.namespace == namespace)

    # ------------------------------------------------------------------
    # Tree walking
    # ------------------------------------------------------------------
    def child_entities(self) -> Iterable["ExtensibleEntity"]:
        """Return directly owned extensible entities."""
        return ()

    def iter_entities(self) -> Iterator["ExtensibleEntity"]:
        """Yield this entity and every nested entity, depth first."""
        stack = [self]
        while stack:
            entity = stack.pop()
            yield entity
            children = [child for child in entity.child_entities() if child is not None]
            stack.extend(reversed(children))

    # ------------------------------------------------------------------
    # Load / write helpers
    # ------------------------------------------------------------------
    def load_extensions(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        """Run the extension adapter over *element*. Returns True if any attached."""
        if settings is None:
            return False
        return SyndicationExtensionAdapter(element, settings).fill(self)

    def write_extensions(self, element: ET._Element) -> None:
        SyndicationExtensionAdapter.write_extensions_to(self._extensions, element)
