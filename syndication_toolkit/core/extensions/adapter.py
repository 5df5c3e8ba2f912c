from __future__ import annotations

"""Bridge between host entities and their extensions.

The adapter runs after an entity's fixed-schema fields have been loaded.  It
decides which extension types apply to the host element, loads a fresh
instance of each and attaches those that found content.  On save it writes
attached extensions and computes the namespace declarations a root element
needs for every extension used anywhere in a tree.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Type

from lxml import etree as ET

from ..utils import namespace_of, require
from .base import SyndicationExtension
from .opaque import XmlFragmentExtension
from .registry import ExtensionRegistry, get_default_registry

if TYPE_CHECKING:
    from ..models.entity import ExtensibleEntity
    from ..settings import LoadSettings

logger = logging.getLogger(__name__)

__all__ = ["SyndicationExtensionAdapter"]


class SyndicationExtensionAdapter:
    """Populate and serialise the extensions of one host element.

    Args:
        element: Host element the entity was loaded from
        settings: Load settings naming the supported extensions
        registry: Registry consulted when auto-detection is enabled
    """

    def __init__(self, element: ET._Element, settings: "LoadSettings",
                 registry: Optional[ExtensionRegistry] = None) -> None:
        self._element = require(element, "element", "SyndicationExtensionAdapter")
        self._settings = require(settings, "settings", "SyndicationExtensionAdapter")
        self._registry = registry or get_default_registry()

    @property
    def element(self) -> ET._Element:
        return self._element

    @property
    def settings(self) -> "LoadSettings":
        return self._settings

    def candidate_types(self) -> List[Type[SyndicationExtension]]:
        """Return the extension types to try, de-duplicated by namespace."""
        candidates: Dict[str, Type[SyndicationExtension]] = {}
        for extension_type in self._settings.supported_extensions:
            candidates.setdefault(extension_type.namespace_uri, extension_type)
        if self._settings.auto_detect_extensions:
            for extension_type in self._registry.find_for_element(self._element):
                candidates.setdefault(extension_type.namespace_uri, extension_type)
        return list(candidates.values())

    def fill(self, entity: "ExtensibleEntity") -> bool:
        """Attach every applicable extension found on the element to *entity*.

        An extension whose ``load`` raises is logged and skipped; the host
        entity's load carries on.

        Returns:
            True if at least one extension was attached
        """
        require(entity, "entity", "SyndicationExtensionAdapter")
        found = False
        claimed = set()

        for extension_type in self.candidate_types():
            claimed.add(extension_type.namespace_uri)
            extension = extension_type()
            if not extension.exists_in_source(self._element):
                continue
            try:
                loaded = extension.load(self._element)
            except Exception as exc:
                logger.warning("Extension %s failed to load from <%s>: %s",
                               extension_type.__name__, self._element.tag, exc)
                continue
            if loaded:
                entity.add_extension(extension)
                found = True
                logger.debug("Attached %s to %s", extension_type.__name__, type(entity).__name__)

        if self._settings.preserve_unknown_extensions:
            for namespace, prefix in self._unclaimed_namespaces(claimed):
                extension = XmlFragmentExtension(namespace, prefix)
                if extension.load(self._element):
                    entity.add_extension(extension)
                    found = True
                    logger.debug("Preserved unknown namespace %s on %s",
                                 namespace, type(entity).__name__)
        return found

    def _unclaimed_namespaces(self, claimed: set) -> List[tuple]:
        host_namespace = namespace_of(self._element.tag)
        seen: Dict[str, Optional[str]] = {}
        for child in self._element.iterchildren(ET.Element):
            namespace = namespace_of(child.tag)
            if namespace is None or namespace == host_namespace or namespace in claimed:
                continue
            seen.setdefault(namespace, child.prefix)
        return list(seen.items())

    # ------------------------------------------------------------------
    # Save side
    # ------------------------------------------------------------------
    @staticmethod
    def write_extensions_to(extensions: Iterable[SyndicationExtension], parent: ET._Element) -> None:
        """Write *extensions* into *parent* in insertion order."""
        require(parent, "parent", "SyndicationExtensionAdapter")
        for extension in extensions:
            extension.write_to(parent)

    @staticmethod
    def fill_extension_types(entities: Iterable["ExtensibleEntity"]) -> List[SyndicationExtension]:
        """Walk every entity tree and return one extension per namespace used.

        The first extension found for a namespace wins; order follows a
        depth-first walk.
        """
        found: Dict[str, SyndicationExtension] = {}
        for root in entities:
            if root is None:
                continue
            for entity in root.iter_entities():
                for extension in entity.extensions:
                    found.setdefault(extension.namespace, extension)
        return list(found.values())

    @staticmethod
    def namespace_map(extensions: Iterable[SyndicationExtension] = (),
                      extension_types: Iterable[Type[SyndicationExtension]] = ()) -> Dict[str, str]:
        """Return the ``prefix -> namespace`` declarations for a root element.

        Declared types come first, then discovered extensions.  A prefix
        already bound to a different namespace is skipped and the namespace is
        left to be declared where it is used.
        """
        nsmap: Dict[str, str] = {}
        pairs = [(t.default_prefix, t.namespace_uri) for t in extension_types]
        pairs.extend((e.prefix, e.namespace) for e in extensions)
        for prefix, namespace in pairs:
            if not prefix or not namespace or namespace in nsmap.values():
                continue
            if prefix in nsmap:
                logger.debug("Prefix %s already bound, not declaring %s on root", prefix, namespace)
                continue
            nsmap[prefix] = namespace
        return nsmap
