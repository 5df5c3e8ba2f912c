from __future__ import annotations

"""Document metadata held in the ``<head>`` element of an outline document."""

import logging
from datetime import datetime
from typing import Any, Iterable, List, Optional

from lxml import etree as ET

from ..comparison import compare_entities, compare_sequence, compare_text, compare_values, ensure_comparable
from ..dates import format_rfc822, normalize_datetime, parse_rfc822
from ..models.entity import ExtensibleEntity
from ..settings import LoadSettings
from ..utils import element_text, join_comma_list, normalize_text, parse_int, require, split_comma_list
from .owner import OpmlOwner
from .window import OpmlWindow

logger = logging.getLogger(__name__)

__all__ = ["OpmlHead", "OPML_DOCUMENTATION_URL"]

OPML_DOCUMENTATION_URL = "http://www.opml.org/spec2"


class OpmlHead(ExtensibleEntity):
    """Metadata describing an outline document.

    Attributes:
        title: Title of the document
        created_on: When the document was created (RFC-822 ``dateCreated``)
        modified_on: When the document was last modified (``dateModified``)
        owner: Optional :class:`OpmlOwner`
        expansion_state: Line numbers of expanded outlines
        vertical_scroll_state: Line number of the top line shown
        window: Optional :class:`OpmlWindow`

    Dates keep second precision, the finest RFC-822 represents.
    """

    def __init__(self, title: str = "") -> None:
        super().__init__()
        self.title = title
        self._created_on: Optional[datetime] = None
        self._modified_on: Optional[datetime] = None
        self.owner: Optional[OpmlOwner] = None
        self.window: Optional[OpmlWindow] = None
        self._expansion_state: List[int] = []
        self.vertical_scroll_state: Optional[int] = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = normalize_text(value)

    @property
    def created_on(self) -> Optional[datetime]:
        return self._created_on

    @created_on.setter
    def created_on(self, value: Optional[datetime]) -> None:
        self._created_on = normalize_datetime(value, precision="seconds")

    @property
    def modified_on(self) -> Optional[datetime]:
        return self._modified_on

    @modified_on.setter
    def modified_on(self, value: Optional[datetime]) -> None:
        self._modified_on = normalize_datetime(value, precision="seconds")

    @property
    def documentation(self) -> str:
        """URL of the format documentation, written as ``<docs>``."""
        return OPML_DOCUMENTATION_URL

    @property
    def expansion_state(self) -> List[int]:
        return self._expansion_state

    @expansion_state.setter
    def expansion_state(self, value: Iterable[int]) -> None:
        require(value, "expansion_state", type(self).__name__)
        self._expansion_state = [int(line) for line in value]

    def child_entities(self):
        return (self.owner, self.window)

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    def load(self, element: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        """Populate the head from a ``<head>`` element.

        Args:
            element: The ``<head>`` element
            settings: When given, extensions are loaded as well

        Returns:
            True if any field, owner, window or extension was found
        """
        require(element, "element", type(self).__name__)
        found = False

        title = element.find("title")
        if title is not None and element_text(title):
            self._title = element_text(title)
            found = True

        for tag, attr in (("dateCreated", "_created_on"), ("dateModified", "_modified_on")):
            child = element.find(tag)
            if child is not None:
                value = parse_rfc822(element_text(child))
                if value is not None:
                    setattr(self, attr, normalize_datetime(value, precision="seconds"))
                    found = True

        owner = OpmlOwner()
        if owner.load(element):
            self.owner = owner
            found = True

        expansion = element.find("expansionState")
        if expansion is not None:
            for fragment in split_comma_list(element_text(expansion)):
                line = parse_int(fragment)
                if line is not None:
                    self._expansion_state.append(line)
                    found = True

        scroll = element.find("vertScrollState")
        if scroll is not None:
            value = parse_int(element_text(scroll))
            if value is not None:
                self.vertical_scroll_state = value
                found = True

        window = OpmlWindow()
        if window.load(element):
            self.window = window
            found = True

        if self.load_extensions(element, settings):
            found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        head = ET.SubElement(parent, "head")

        if self._title:
            ET.SubElement(head, "title").text = self._title
        if self._created_on is not None:
            ET.SubElement(head, "dateCreated").text = format_rfc822(self._created_on)
        if self._modified_on is not None:
            ET.SubElement(head, "dateModified").text = format_rfc822(self._modified_on)
        if self.owner is not None:
            self.owner.write_to(head)

        ET.SubElement(head, "docs").text = self.documentation

        if self._expansion_state:
            ET.SubElement(head, "expansionState").text = join_comma_list(self._expansion_state)
        if self.vertical_scroll_state is not None:
            ET.SubElement(head, "vertScrollState").text = str(self.vertical_scroll_state)
        if self.window is not None:
            self.window.write_to(head)

        self.write_extensions(head)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, OpmlHead)
        result = compare_text(self.title, other.title)
        result |= compare_values(self.created_on, other.created_on)
        result |= compare_values(self.modified_on, other.modified_on)
        result |= compare_entities(self._owner_or_none(), other._owner_or_none())
        result |= compare_sequence(self.expansion_state, other.expansion_state)
        result |= compare_values(self.vertical_scroll_state, other.vertical_scroll_state)
        result |= compare_entities(self._window_or_none(), other._window_or_none())
        return result

    def _owner_or_none(self) -> Optional[OpmlOwner]:
        return None if self.owner is None or self.owner.is_empty else self.owner

    def _window_or_none(self) -> Optional[OpmlWindow]:
        return None if self.window is None or self.window.is_empty else self.window
