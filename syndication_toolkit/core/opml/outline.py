from __future__ import annotations

"""Outline entity: the recursive content model of an outline document."""

import logging
from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

from lxml import etree as ET

from ..comparison import (
    compare_entity_sequence,
    compare_mapping,
    compare_sequence,
    compare_text,
    compare_values,
    ensure_comparable,
)
from ..dates import format_rfc822, normalize_datetime, parse_rfc822
from ..models.attributes import ExtraAttributes
from ..models.entity import ExtensibleEntity
from ..settings import LoadSettings
from ..utils import (
    join_comma_list,
    normalize_text,
    parse_bool,
    require,
    require_text,
    split_comma_list,
)

logger = logging.getLogger(__name__)

__all__ = ["OpmlOutline"]

# Attribute names with a dedicated field, lower-cased for matching
_KNOWN_ATTRIBUTES = frozenset({"text", "type", "iscomment", "isbreakpoint", "created", "category"})

_INCLUSION_TYPES = ("include", "link")
_SUBSCRIPTION_TYPES = ("rss", "feed")


class OpmlOutline(ExtensibleEntity):
    """A single ``<outline>`` element and its nested outlines.

    ``text`` is required; every other field is optional.  Attributes without
    a dedicated field are kept in :attr:`attributes`, namespaced ones under
    their ``{uri}local`` name.
    """

    def __init__(self, text: Optional[str] = None) -> None:
        super().__init__()
        self._text = ""
        self._content_type = ""
        self.is_comment = False
        self.has_breakpoint = False
        self._created_on: Optional[datetime] = None
        self._categories: List[str] = []
        self._attributes = ExtraAttributes(ignore_blank_values=True,
                                           reserved_keys=_KNOWN_ATTRIBUTES,
                                           owner="OpmlOutline")
        self._outlines: List[OpmlOutline] = []
        if text is not None:
            self.text = text

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def create_inclusion_outline(cls, text: str, url: str) -> "OpmlOutline":
        """Return an outline pointing at another document.

        The type is ``include`` for ``.opml`` targets and ``link`` otherwise.
        """
        outline = cls(text)
        url = require_text(url, "url", cls.__name__)
        path = url.split("?", 1)[0].split("#", 1)[0]
        outline.content_type = "include" if path.lower().endswith(".opml") else "link"
        outline.attributes["url"] = url
        return outline

    @classmethod
    def create_subscription_list_outline(cls, text: str, type: str, xml_url: str,
                                         html_url: Optional[str] = None,
                                         version: Optional[str] = None,
                                         title: Optional[str] = None,
                                         description: Optional[str] = None,
                                         language: Optional[str] = None) -> "OpmlOutline":
        """Return an outline describing a feed subscription."""
        outline = cls(text)
        outline.content_type = require_text(type, "type", cls.__name__)
        outline.attributes["xmlUrl"] = require_text(xml_url, "xml_url", cls.__name__)
        for key, value in (("htmlUrl", html_url), ("version", version), ("title", title),
                           ("description", description), ("language", language)):
            if value and value.strip():
                outline.attributes[key] = value.strip()
        return outline

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = require_text(value, "text", type(self).__name__)

    @property
    def content_type(self) -> str:
        """Value of the ``type`` attribute."""
        return self._content_type

    @content_type.setter
    def content_type(self, value: str) -> None:
        self._content_type = normalize_text(value)

    @property
    def created_on(self) -> Optional[datetime]:
        return self._created_on

    @created_on.setter
    def created_on(self, value: Optional[datetime]) -> None:
        self._created_on = normalize_datetime(value, precision="seconds")

    @property
    def categories(self) -> List[str]:
        return self._categories

    @categories.setter
    def categories(self, value: Iterable[str]) -> None:
        require(value, "categories", type(self).__name__)
        self._categories = [c.strip() for c in value if c and c.strip()]

    @property
    def attributes(self) -> ExtraAttributes:
        """Pass-through attributes.

        Blank values are dropped. Names of dedicated fields such as ``type``
        are refused in any case with :class:`ReservedAttributeError`.
        """
        return self._attributes

    @property
    def outlines(self) -> List["OpmlOutline"]:
        return self._outlines

    @property
    def is_inclusion_outline(self) -> bool:
        return self._content_type.lower() in _INCLUSION_TYPES

    @property
    def is_subscription_list_outline(self) -> bool:
        return self._content_type.lower() in _SUBSCRIPTION_TYPES

    def add_outline(self, outline: "OpmlOutline") -> None:
        self._outlines.append(require(outline, "outline", type(self).__name__))

    def child_entities(self):
        return self._outlines

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load(self, element: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        """Populate the outline from an ``<outline>`` element.

        Nested outlines are loaded recursively and kept only when their own
        load found data.  With *settings* the extension adapter runs after
        the fixed fields.

        Returns:
            True if any attribute, child outline or extension was found
        """
        require(element, "element", type(self).__name__)
        found = self.load_attributes(element.attrib.items())

        for child in element.iterchildren("outline"):
            outline = OpmlOutline()
            if outline.load(child, settings):
                self._outlines.append(outline)
                found = True

        if self.load_extensions(element, settings):
            found = True
        return found

    def load_attributes(self, attributes: Iterable[Tuple[str, str]]) -> bool:
        """Apply ``(name, value)`` pairs in document order.

        Known names are matched case-insensitively.  Other names go to
        :attr:`attributes`, where a repeated name keeps its first value.
        Empty values are ignored.
        """
        found = False
        for name, value in attributes:
            if self.load_attribute(name, value):
                found = True
        return found

    def load_attribute(self, name: str, value: Optional[str]) -> bool:
        if not name or value is None or not value.strip():
            return False
        key = name.lower()

        if key == "text":
            self._text = value.strip()
            return True
        if key == "type":
            self._content_type = value.strip()
            return True
        if key == "iscomment":
            parsed = parse_bool(value)
            if parsed is not None:
                self.is_comment = parsed
                return True
            return False
        if key == "isbreakpoint":
            parsed = parse_bool(value)
            if parsed is not None:
                self.has_breakpoint = parsed
                return True
            return False
        if key == "created":
            parsed = parse_rfc822(value)
            if parsed is not None:
                self._created_on = normalize_datetime(parsed, precision="seconds")
                return True
            return False
        if key == "category":
            fragments = split_comma_list(value)
            self._categories.extend(fragments)
            return bool(fragments)

        self._attributes.add_if_absent(name, value)
        return True

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        element = ET.SubElement(parent, "outline")
        element.set("text", self._text)

        if self._content_type:
            element.set("type", self._content_type)
        if self.is_comment:
            element.set("isComment", "true")
        if self.has_breakpoint:
            element.set("isBreakpoint", "true")
        if self._created_on is not None:
            element.set("created", format_rfc822(self._created_on))
        if self._categories:
            element.set("category", join_comma_list(self._categories))

        for key, value in self._attributes.items():
            element.set(key, value)

        for outline in self._outlines:
            outline.write_to(element)

        self.write_extensions(element)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare_to(self, other: Any) -> int:
        """Compare field by field, OR-combining the results.

        Nested outline lists of different length compare by length alone.
        """
        if other is None:
            return 1
        ensure_comparable(other, OpmlOutline)
        result = compare_text(self.content_type, other.content_type)
        result |= compare_values(self.created_on, other.created_on)
        result |= compare_values(self.has_breakpoint, other.has_breakpoint)
        result |= compare_values(self.is_comment, other.is_comment)
        result |= compare_text(self.text, other.text)
        result |= compare_mapping(self.attributes, other.attributes)
        result |= compare_sequence(self.categories, other.categories)
        result |= compare_entity_sequence(self.outlines, other.outlines)
        return result

    def __repr__(self) -> str:
        return f"OpmlOutline(text={self._text!r}, outlines={len(self._outlines)})"
