from __future__ import annotations

"""File attached to a post, either linked or embedded."""

from typing import Any, Optional

from lxml import etree as ET

from ..comparison import compare_text, compare_values, ensure_comparable
from ..models.entity import ExtensibleEntity
from ..settings import LoadSettings
from ..utils import format_bool, normalize_text, parse_bool, parse_int, qname, require
from .text_construct import BLOGML_NAMESPACE

__all__ = ["BlogMLAttachment"]


class BlogMLAttachment(ExtensibleEntity):
    """An ``<attachment>``.

    Embedded attachments carry their (usually base64) data as the element
    text in :attr:`content`.
    """

    def __init__(self, url: str = "", mime_type: str = "", is_embedded: bool = False) -> None:
        super().__init__()
        self.url = url
        self.mime_type = mime_type
        self.is_embedded = is_embedded
        self.external_url = ""
        self.size: Optional[int] = None
        self.content = ""

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = normalize_text(value)

    @property
    def external_url(self) -> str:
        return self._external_url

    @external_url.setter
    def external_url(self, value: str) -> None:
        self._external_url = normalize_text(value)

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @mime_type.setter
    def mime_type(self, value: str) -> None:
        self._mime_type = normalize_text(value)

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = normalize_text(value)

    def load(self, element: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        require(element, "element", type(self).__name__)
        found = False

        embedded = parse_bool(element.get("embedded"))
        if embedded is not None:
            self.is_embedded = embedded
            found = True

        size = parse_int(element.get("size"))
        if size is not None:
            self.size = size
            found = True

        for attr, field in (("mime-type", "_mime_type"), ("external-uri", "_external_url"),
                            ("url", "_url")):
            value = normalize_text(element.get(attr))
            if value:
                setattr(self, field, value)
                found = True

        text = normalize_text(element.text)
        if text:
            self._content = text
            found = True

        if self.load_extensions(element, settings):
            found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        element = ET.SubElement(parent, qname(BLOGML_NAMESPACE, "attachment"))
        element.set("embedded", format_bool(self.is_embedded))
        element.set("mime-type", self._mime_type)
        if self.size is not None:
            element.set("size", str(self.size))
        if self._external_url:
            element.set("external-uri", self._external_url)
        if self._url:
            element.set("url", self._url)
        if self._content:
            element.text = self._content
        self.write_extensions(element)

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, BlogMLAttachment)
        result = compare_text(self.content, other.content, ignore_case=False)
        result |= compare_text(self.external_url, other.external_url)
        result |= compare_values(self.is_embedded, other.is_embedded)
        result |= compare_text(self.mime_type, other.mime_type)
        result |= compare_values(self.size, other.size)
        result |= compare_text(self.url, other.url)
        return result
