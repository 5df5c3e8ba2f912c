from __future__ import annotations

"""Base class for namespace-identified syndication extensions.

An extension owns the XML content of one namespace inside a host element.
It knows how to recognise that content, populate itself from it and write
it back into a host element.  Concrete extensions declare their identity as
class attributes so the registry can index them without instantiating.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from lxml import etree as ET

from ..comparison import SyndicationComparable, compare_text, ensure_comparable
from ..utils import local_name, namespace_of, require, require_text

__all__ = ["SyndicationExtension"]


class SyndicationExtension(SyndicationComparable, ABC):
    """Abstract extension bound to a single XML namespace.

    Class attributes
    ----------------
    namespace_uri
        XML namespace URI identifying the extension (required).
    default_prefix
        Preferred prefix used in namespace declarations.
    extension_name, extension_description, extension_version, documentation_url
        Descriptive metadata.
    """

    namespace_uri: str = ""
    default_prefix: str = ""
    extension_name: str = ""
    extension_description: str = ""
    extension_version: str = "1.0"
    documentation_url: Optional[str] = None

    def __init__(self, prefix: Optional[str] = None, namespace: Optional[str] = None) -> None:
        self._prefix = require_text(prefix or self.default_prefix, "prefix", type(self).__name__)
        self._namespace = require_text(namespace or self.namespace_uri, "namespace",
                                       type(self).__name__)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def name(self) -> str:
        return self.extension_name or type(self).__name__

    @property
    def description(self) -> str:
        return self.extension_description

    @property
    def version(self) -> str:
        return self.extension_version

    @property
    def documentation(self) -> Optional[str]:
        return self.documentation_url

    def namespace_declaration(self) -> Dict[str, str]:
        """Return the ``{prefix: namespace}`` pair for a root ``nsmap``."""
        return {self.prefix: self.namespace}

    # ------------------------------------------------------------------
    # Recognition
    # ------------------------------------------------------------------
    def matches(self, name: Any) -> bool:
        """Return True if the tag or attribute *name* belongs to this extension."""
        return namespace_of(name) == self.namespace

    def exists_in_source(self, element: ET._Element) -> bool:
        """Return True if *element* carries content in this extension's namespace."""
        require(element, "element")
        if any(self.matches(attr) for attr in element.attrib):
            return True
        return any(self.matches(child.tag) for child in element.iterchildren(ET.Element))

    def iter_owned_children(self, element: ET._Element):
        """Yield ``(local_name, child)`` for child elements in this namespace."""
        for child in element.iterchildren(ET.Element):
            if self.matches(child.tag):
                yield local_name(child.tag), child

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    @abstractmethod
    def load(self, element: ET._Element) -> bool:
        """Populate the extension from the host *element*.

        Returns True if any extension content was found.
        """

    @abstractmethod
    def write_to(self, parent: ET._Element) -> None:
        """Write the extension content into the host element *parent*."""

    def qualified(self, local: str) -> str:
        return f"{{{self.namespace}}}{local}"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def to_string(self) -> str:
        holder = ET.Element("fragment")
        self.write_to(holder)
        parts = [f"{key}={value}" for key, value in holder.attrib.items()]
        parts.extend(ET.tostring(child, encoding="unicode") for child in holder)
        return "".join(parts)

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, SyndicationExtension)
        result = compare_text(self.namespace, other.namespace, ignore_case=False)
        if result:
            return result
        return compare_text(self.to_string(), other.to_string(), ignore_case=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r}, namespace={self.namespace!r})"
