from __future__ import annotations

"""Really Simple Discovery (RSD 1.0) document."""

import logging
from typing import Any, Dict, List, Optional

from lxml import etree as ET

from ..comparison import compare_entity_sequence, compare_text, ensure_comparable
from ..models.document import SyndicationDocument
from ..settings import LoadSettings
from ..utils import element_text, normalize_text, qname, require, select_child, select_children
from .interface import RSD_NAMESPACE, RsdApplicationInterface

logger = logging.getLogger(__name__)

__all__ = ["RsdDocument"]


class RsdDocument(SyndicationDocument):
    """Describes a blog engine and the APIs it exposes.

    Documents are read with or without the RSD namespace; they are always
    written with it as the default namespace.
    """

    FORMAT = "rsd"
    VERSION = "1.0"
    ROOT_ELEMENT = "rsd"
    NAMESPACE = RSD_NAMESPACE

    def __init__(self, engine_name: str = "", engine_link: str = "",
                 homepage_link: str = "") -> None:
        super().__init__()
        self.engine_name = engine_name
        self.engine_link = engine_link
        self.homepage_link = homepage_link
        self._interfaces: List[RsdApplicationInterface] = []

    @property
    def engine_name(self) -> str:
        return self._engine_name

    @engine_name.setter
    def engine_name(self, value: str) -> None:
        self._engine_name = normalize_text(value)

    @property
    def engine_link(self) -> str:
        return self._engine_link

    @engine_link.setter
    def engine_link(self, value: str) -> None:
        self._engine_link = normalize_text(value)

    @property
    def homepage_link(self) -> str:
        return self._homepage_link

    @homepage_link.setter
    def homepage_link(self, value: str) -> None:
        self._homepage_link = normalize_text(value)

    @property
    def interfaces(self) -> List[RsdApplicationInterface]:
        return self._interfaces

    def add_interface(self, interface: RsdApplicationInterface) -> bool:
        self._interfaces.append(require(interface, "interface", type(self).__name__))
        return True

    def remove_interface(self, interface: RsdApplicationInterface) -> bool:
        require(interface, "interface", type(self).__name__)
        for index, candidate in enumerate(self._interfaces):
            if candidate is interface:
                del self._interfaces[index]
                return True
        return False

    def find_interface(self, name: str) -> Optional[RsdApplicationInterface]:
        """Return the first interface whose name matches *name* (any case)."""
        wanted = normalize_text(name).lower()
        for interface in self._interfaces:
            if interface.name.lower() == wanted:
                return interface
        return None

    @property
    def preferred_interface(self) -> Optional[RsdApplicationInterface]:
        for interface in self._interfaces:
            if interface.is_preferred:
                return interface
        return None

    def child_entities(self):
        return self._interfaces

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    def _load_root(self, root: ET._Element, settings: Optional[LoadSettings]) -> bool:
        if not self._is_root(root):
            logger.debug("Root <%s> is not an RSD document", root.tag)
            return False

        found = False
        service = select_child(root, "service", RSD_NAMESPACE)
        if service is not None:
            for local, field in (("engineName", "_engine_name"), ("engineLink", "_engine_link"),
                                 ("homePageLink", "_homepage_link")):
                child = select_child(service, local, RSD_NAMESPACE)
                if child is not None and element_text(child):
                    setattr(self, field, element_text(child))
                    found = True

            apis = select_child(service, "apis", RSD_NAMESPACE)
            if apis is not None:
                for element in select_children(apis, "api", RSD_NAMESPACE):
                    interface = RsdApplicationInterface()
                    if interface.load(element, settings):
                        self._interfaces.append(interface)
                        found = True

        if self.load_extensions(root, settings):
            found = True
        return found

    def _create_root(self, nsmap: Dict[Optional[str], str]) -> ET._Element:
        nsmap = {None: RSD_NAMESPACE, **{k: v for k, v in nsmap.items() if v != RSD_NAMESPACE}}
        root = ET.Element(qname(RSD_NAMESPACE, "rsd"), nsmap=nsmap)
        root.set("version", self.VERSION)

        service = ET.SubElement(root, qname(RSD_NAMESPACE, "service"))
        ET.SubElement(service, qname(RSD_NAMESPACE, "engineName")).text = self._engine_name
        ET.SubElement(service, qname(RSD_NAMESPACE, "engineLink")).text = self._engine_link
        ET.SubElement(service, qname(RSD_NAMESPACE, "homePageLink")).text = self._homepage_link
        apis = ET.SubElement(service, qname(RSD_NAMESPACE, "apis"))
        for interface in self._interfaces:
            interface.write_to(apis)

        self.write_extensions(root)
        return root

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, RsdDocument)
        result = compare_text(self.engine_name, other.engine_name)
        result |= compare_text(self.engine_link, other.engine_link)
        result |= compare_text(self.homepage_link, other.homepage_link)
        result |= compare_entity_sequence(self.interfaces, other.interfaces)
        return result
