from __future__ import annotations

"""Extension registry.

Maps XML namespace URIs to :class:`SyndicationExtension` types.  The
extension adapter consults a registry during load to find implementations
for namespaces it encounters.  A default registry pre-populated with the
built-in extensions is created on first use.
"""

import inspect
import logging
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional, Type

from lxml import etree as ET

from ..exceptions import ExtensionRegistrationError
from ..utils import namespace_of
from .base import SyndicationExtension

logger = logging.getLogger(__name__)

__all__ = ["ExtensionRegistry", "get_default_registry"]


# -------------------------------------------------------------------------
# Extension Registry
# -------------------------------------------------------------------------

class ExtensionRegistry:
    """Thread-safe namespace URI to extension type registry."""

    def __init__(self, extension_types: Optional[Iterable[Type[SyndicationExtension]]] = None) -> None:
        self._extensions: Dict[str, Type[SyndicationExtension]] = {}
        self._lock = RLock()
        self._logger = logging.getLogger(f"{__name__}.ExtensionRegistry")
        for extension_type in extension_types or ():
            self.register(extension_type)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, extension_type: Type[SyndicationExtension], replace: bool = False) -> None:
        """Register *extension_type* under its ``namespace_uri``.

        Args:
            extension_type: Concrete SyndicationExtension subclass
            replace: Replace an existing registration for the same namespace

        Raises:
            ExtensionRegistrationError: If the type is invalid or the namespace
                is already taken by another type and *replace* is False
        """
        with self._lock:
            if not self._validate_extension_type(extension_type):
                raise ExtensionRegistrationError(
                    f"{extension_type!r} is not a concrete SyndicationExtension type"
                )

            namespace = extension_type.namespace_uri
            if not namespace:
                raise ExtensionRegistrationError(
                    f"{extension_type.__name__} does not declare a namespace_uri"
                )

            existing = self._extensions.get(namespace)
            if existing is not None and existing is not extension_type and not replace:
                raise ExtensionRegistrationError(
                    f"Namespace already registered by {existing.__name__}",
                    namespace=namespace,
                )

            self._extensions[namespace] = extension_type
            self._logger.debug("Registered extension %s for namespace %s",
                               extension_type.__name__, namespace)

    def unregister(self, namespace: str) -> bool:
        """Remove the registration for *namespace*.

        Returns:
            True if an extension was registered and removed, False otherwise
        """
        with self._lock:
            removed = self._extensions.pop(namespace, None)
            if removed is not None:
                self._logger.debug("Unregistered extension %s for namespace %s",
                                   removed.__name__, namespace)
            return removed is not None

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get(self, namespace: Optional[str]) -> Optional[Type[SyndicationExtension]]:
        with self._lock:
            return self._extensions.get(namespace) if namespace else None

    def is_registered(self, namespace: str) -> bool:
        with self._lock:
            return namespace in self._extensions

    def create(self, namespace: str) -> Optional[SyndicationExtension]:
        """Instantiate the extension registered for *namespace*, if any."""
        extension_type = self.get(namespace)
        return extension_type() if extension_type is not None else None

    def registered_namespaces(self) -> List[str]:
        with self._lock:
            return list(self._extensions)

    def find_for_element(self, element: ET._Element) -> List[Type[SyndicationExtension]]:
        """Return the registered types relevant to *element*.

        A type is relevant when its namespace is in scope on the element or
        used by one of its attributes or child elements.  Results follow
        registration order.
        """
        present = set(element.nsmap.values())
        present.update(namespace_of(name) for name in element.attrib)
        present.update(namespace_of(child.tag) for child in element.iterchildren(ET.Element))
        with self._lock:
            return [ext for ns, ext in self._extensions.items() if ns in present]

    # -------------------------------------------------------------------------
    # Registry Management
    # -------------------------------------------------------------------------

    def get_registry_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "extension_count": len(self._extensions),
                "namespaces": list(self._extensions),
                "extensions": {ns: ext.__name__ for ns, ext in self._extensions.items()},
            }

    def clear_registry(self) -> None:
        with self._lock:
            self._extensions.clear()
            self._logger.info("Cleared extension registry")

    # -------------------------------------------------------------------------
    # Private Helper Methods
    # -------------------------------------------------------------------------

    def _validate_extension_type(self, extension_type: Any) -> bool:
        return (
            inspect.isclass(extension_type)
            and issubclass(extension_type, SyndicationExtension)
            and not inspect.isabstract(extension_type)
        )


_default_registry: Optional[ExtensionRegistry] = None
_default_lock = RLock()


def get_default_registry() -> ExtensionRegistry:
    """Return the shared registry holding the built-in extensions."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            from .dublin_core import DublinCoreElementSetSyndicationExtension
            from .geocoding import BasicGeocodingSyndicationExtension

            _default_registry = ExtensionRegistry([
                BasicGeocodingSyndicationExtension,
                DublinCoreElementSetSyndicationExtension,
            ])
        return _default_registry
