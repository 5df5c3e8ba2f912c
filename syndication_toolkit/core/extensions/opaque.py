from __future__ import annotations

"""Opaque extension preserving content of an unregistered namespace."""

import copy
from typing import List, Optional

from lxml import etree as ET

from ..utils import declared_nsmap
from .base import SyndicationExtension

__all__ = ["XmlFragmentExtension"]


class XmlFragmentExtension(SyndicationExtension):
    """Holds the raw child elements of one namespace, unparsed.

    Created by the extension adapter when unknown namespaces are preserved,
    or directly by callers that want to attach arbitrary namespaced XML.
    Namespaced attributes are left to the host entity.
    """

    extension_name = "XML fragment"
    extension_description = "Unparsed content of a namespace without a registered extension."

    def __init__(self, namespace: str, prefix: Optional[str] = None) -> None:
        super().__init__(prefix=prefix or "ext", namespace=namespace)
        self.elements: List[ET._Element] = []

    def add_element(self, element: ET._Element) -> None:
        """Attach a copy of *element*, which must be in this namespace."""
        if not self.matches(element.tag):
            raise ValueError(f"Element {element.tag} is not in namespace {self.namespace}")
        self.elements.append(copy.deepcopy(element))

    def exists_in_source(self, element: ET._Element) -> bool:
        return any(True for _ in self.iter_owned_children(element))

    def load(self, element: ET._Element) -> bool:
        found = False
        for _, child in self.iter_owned_children(element):
            self.elements.append(copy.deepcopy(child))
            found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        nsmap = declared_nsmap(parent, self.prefix, self.namespace)
        for element in self.elements:
            holder = ET.SubElement(parent, element.tag, nsmap=nsmap)
            holder.attrib.update(element.attrib)
            holder.text = element.text
            for child in element:
                holder.append(copy.deepcopy(child))
