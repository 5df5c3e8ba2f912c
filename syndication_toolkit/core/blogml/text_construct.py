from __future__ import annotations

"""Typed text content (titles, post bodies, excerpts)."""

from typing import Any, Optional

from lxml import etree as ET

from ..comparison import SyndicationComparable, compare_text, compare_values, ensure_comparable
from ..utils import qname, require, require_text
from .enums import BlogMLContentType

__all__ = ["BlogMLTextConstruct", "BLOGML_NAMESPACE"]

BLOGML_NAMESPACE = "http://www.blogml.com/2006/09/BlogML"

_MARKUP_CHARACTERS = ("<", ">", "&")


class BlogMLTextConstruct(SyndicationComparable):
    """Text content with an optional ``type`` attribute.

    The content is kept verbatim.  It is written as a CDATA section when it
    contains markup characters, which keeps HTML bodies readable in the
    output; both forms load to the same value.
    """

    def __init__(self, content: str = "",
                 content_type: BlogMLContentType = BlogMLContentType.NONE) -> None:
        self.content = content
        self.content_type = content_type

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = value or ""

    @property
    def content_type(self) -> BlogMLContentType:
        return self._content_type

    @content_type.setter
    def content_type(self, value: BlogMLContentType) -> None:
        self._content_type = require(value, "content_type", type(self).__name__)

    @property
    def is_empty(self) -> bool:
        return not self._content and self._content_type is BlogMLContentType.NONE

    def load(self, element: ET._Element) -> bool:
        require(element, "element", type(self).__name__)
        found = False
        content_type = BlogMLContentType.from_token(element.get("type"))
        if content_type is not BlogMLContentType.NONE:
            self._content_type = content_type
            found = True
        text = "".join(element.itertext())
        if text:
            self._content = text
            found = True
        return found

    def write_to(self, parent: ET._Element, element_name: str = "title") -> None:
        require(parent, "parent", type(self).__name__)
        element_name = require_text(element_name, "element_name", type(self).__name__)
        element = ET.SubElement(parent, qname(BLOGML_NAMESPACE, element_name))
        if self._content_type is not BlogMLContentType.NONE:
            element.set("type", self._content_type.token)
        if self._content:
            # CDATA cannot contain its own terminator
            if "]]>" not in self._content and any(c in self._content for c in _MARKUP_CHARACTERS):
                element.text = ET.CDATA(self._content)
            else:
                element.text = self._content

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, BlogMLTextConstruct)
        result = compare_text(self.content, other.content, ignore_case=False)
        result |= compare_values(self.content_type, other.content_type)
        return result

    def __repr__(self) -> str:
        return f"BlogMLTextConstruct({self._content!r}, {self._content_type.name})"
