from __future__ import annotations

"""Dublin Core Metadata Element Set (version 1.1) extension."""

from typing import Dict, Optional

from lxml import etree as ET

from ..utils import declared_nsmap, element_text
from .base import SyndicationExtension

__all__ = ["DublinCoreElementSetSyndicationExtension", "DUBLIN_CORE_TERMS"]

# Canonical order used when writing
DUBLIN_CORE_TERMS = (
    "title", "creator", "subject", "description", "publisher", "contributor",
    "date", "type", "format", "identifier", "source", "language",
    "relation", "coverage", "rights",
)


class DublinCoreElementSetSyndicationExtension(SyndicationExtension):
    """The fifteen ``dc:`` terms as a term to value map.

    Only the first occurrence of a term is kept.  Unknown ``dc:`` element
    names are ignored.
    """

    namespace_uri = "http://purl.org/dc/elements/1.1/"
    default_prefix = "dc"
    extension_name = "Dublin Core Metadata Element Set, Version 1.1"
    extension_description = "A vocabulary of fifteen properties for use in resource description."
    extension_version = "1.1"
    documentation_url = "http://dublincore.org/documents/dces/"

    def __init__(self, **terms: str) -> None:
        super().__init__()
        self.terms: Dict[str, str] = {}
        for term, value in terms.items():
            self.set_term(term, value)

    def set_term(self, term: str, value: Optional[str]) -> None:
        if term not in DUBLIN_CORE_TERMS:
            raise ValueError(f"Unknown Dublin Core term: {term}")
        text = (value or "").strip()
        if text:
            self.terms[term] = text
        else:
            self.terms.pop(term, None)

    def get_term(self, term: str) -> Optional[str]:
        return self.terms.get(term)

    def load(self, element: ET._Element) -> bool:
        found = False
        for name, child in self.iter_owned_children(element):
            if name not in DUBLIN_CORE_TERMS or name in self.terms:
                continue
            text = element_text(child)
            if text:
                self.terms[name] = text
                found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        nsmap = declared_nsmap(parent, self.prefix, self.namespace)
        for term in DUBLIN_CORE_TERMS:
            if term in self.terms:
                child = ET.SubElement(parent, self.qualified(term), nsmap=nsmap)
                child.text = self.terms[term]
