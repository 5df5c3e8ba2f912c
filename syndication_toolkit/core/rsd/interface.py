from __future__ import annotations

"""Application programming interface advertised by a service-discovery document."""

import logging
from typing import Any, Optional

from lxml import etree as ET

from ..comparison import compare_mapping, compare_text, compare_values, ensure_comparable
from ..models.attributes import ExtraAttributes
from ..models.entity import ExtensibleEntity
from ..settings import LoadSettings
from ..utils import (
    element_text,
    format_bool,
    normalize_text,
    parse_bool,
    qname,
    require,
    select_child,
    select_children,
)

logger = logging.getLogger(__name__)

__all__ = ["RsdApplicationInterface", "RSD_NAMESPACE"]

RSD_NAMESPACE = "http://archipelago.phrasewise.com/rsd"


class RsdApplicationInterface(ExtensibleEntity):
    """An ``<api>`` entry: a web service endpoint a client can talk to.

    Loading accepts both the 1.0 ``apiLink`` attribute and the 0.6
    ``rpcLink`` attribute; saving always writes ``apiLink``.
    """

    def __init__(self, name: str = "", link: str = "", is_preferred: bool = False,
                 weblog_id: str = "") -> None:
        super().__init__()
        self.name = name
        self.link = link
        self.is_preferred = is_preferred
        self.weblog_id = weblog_id
        self.documentation = ""
        self.notes = ""
        self._settings = ExtraAttributes(ignore_blank_values=True, owner="RsdApplicationInterface")

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = normalize_text(value)

    @property
    def link(self) -> str:
        """Endpoint URL (``apiLink``)."""
        return self._link

    @link.setter
    def link(self, value: str) -> None:
        self._link = normalize_text(value)

    @property
    def weblog_id(self) -> str:
        """Identifier of the web log on the endpoint (``blogID``)."""
        return self._weblog_id

    @weblog_id.setter
    def weblog_id(self, value: str) -> None:
        self._weblog_id = normalize_text(value)

    @property
    def documentation(self) -> str:
        """URL of the API documentation (``settings/docs``)."""
        return self._documentation

    @documentation.setter
    def documentation(self, value: str) -> None:
        self._documentation = normalize_text(value)

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, value: str) -> None:
        self._notes = normalize_text(value)

    @property
    def settings(self) -> ExtraAttributes:
        """Named ``<setting>`` values, first occurrence wins on load."""
        return self._settings

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    def load(self, element: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        require(element, "element", type(self).__name__)
        found = False

        for attr, field in (("name", "_name"), ("blogID", "_weblog_id")):
            value = normalize_text(element.get(attr))
            if value:
                setattr(self, field, value)
                found = True

        preferred = parse_bool(element.get("preferred"))
        if preferred is not None:
            self.is_preferred = preferred
            found = True

        link = normalize_text(element.get("apiLink")) or normalize_text(element.get("rpcLink"))
        if link:
            self._link = link
            found = True

        settings_element = select_child(element, "settings", RSD_NAMESPACE)
        if settings_element is not None and self._load_settings(settings_element):
            found = True

        if self.load_extensions(element, settings):
            found = True
        return found

    def _load_settings(self, element: ET._Element) -> bool:
        found = False
        docs = select_child(element, "docs", RSD_NAMESPACE)
        if docs is not None and element_text(docs):
            self._documentation = element_text(docs)
            found = True
        notes = select_child(element, "notes", RSD_NAMESPACE)
        if notes is not None and element_text(notes):
            self._notes = element_text(notes)
            found = True
        for setting in select_children(element, "setting", RSD_NAMESPACE):
            name = normalize_text(setting.get("name"))
            value = element_text(setting)
            if name and value:
                self._settings.add_if_absent(name, value)
                found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        element = ET.SubElement(parent, qname(RSD_NAMESPACE, "api"))
        element.set("name", self._name)
        element.set("preferred", format_bool(self.is_preferred))
        element.set("apiLink", self._link)
        element.set("blogID", self._weblog_id)

        if self._documentation or self._notes or self._settings:
            settings = ET.SubElement(element, qname(RSD_NAMESPACE, "settings"))
            if self._documentation:
                ET.SubElement(settings, qname(RSD_NAMESPACE, "docs")).text = self._documentation
            if self._notes:
                ET.SubElement(settings, qname(RSD_NAMESPACE, "notes")).text = self._notes
            for key, value in self._settings.items():
                setting = ET.SubElement(settings, qname(RSD_NAMESPACE, "setting"))
                setting.set("name", key)
                setting.text = value

        self.write_extensions(element)

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, RsdApplicationInterface)
        result = compare_text(self.documentation, other.documentation)
        result |= compare_values(self.is_preferred, other.is_preferred)
        result |= compare_text(self.link, other.link)
        result |= compare_text(self.name, other.name)
        result |= compare_text(self.notes, other.notes)
        result |= compare_mapping(self.settings, other.settings, ignore_case=False)
        result |= compare_text(self.weblog_id, other.weblog_id)
        return result

    def __repr__(self) -> str:
        return f"RsdApplicationInterface(name={self._name!r}, link={self._link!r})"
