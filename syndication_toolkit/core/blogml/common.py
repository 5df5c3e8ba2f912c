from __future__ import annotations

"""Fields shared by every identifiable web-log export entity.

Authors, categories, posts, comments and trackbacks all carry an ``id``,
creation and modification dates, an approval status and a title.
:class:`BlogMLCommonObject` loads and writes those, and drives the
entity-specific parts through three hooks.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from lxml import etree as ET

from ..comparison import compare_entities, compare_text, compare_values, ensure_comparable
from ..dates import format_rfc3339, normalize_datetime, parse_rfc3339
from ..models.entity import ExtensibleEntity
from ..settings import LoadSettings
from ..utils import normalize_text, qname, require, select_child
from .enums import BlogMLApprovalStatus
from .text_construct import BLOGML_NAMESPACE, BlogMLTextConstruct

logger = logging.getLogger(__name__)

__all__ = ["BlogMLCommonObject"]


class BlogMLCommonObject(ExtensibleEntity):
    """Base class of identifiable entities.

    Subclasses set ``ELEMENT`` and may override :meth:`_load_specific`,
    :meth:`_write_specific_attributes`, :meth:`_write_specific_elements` and
    :meth:`_compare_specific`.
    """

    ELEMENT: str = ""

    def __init__(self, id: str = "", title: Optional[str] = None) -> None:
        super().__init__()
        self.id = id
        self._created_on: Optional[datetime] = None
        self._modified_on: Optional[datetime] = None
        self.approval_status = BlogMLApprovalStatus.NONE
        self.title: Optional[BlogMLTextConstruct] = (
            BlogMLTextConstruct(title) if title is not None else None
        )

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = normalize_text(value)

    @property
    def created_on(self) -> Optional[datetime]:
        return self._created_on

    @created_on.setter
    def created_on(self, value: Optional[datetime]) -> None:
        self._created_on = normalize_datetime(value)

    @property
    def modified_on(self) -> Optional[datetime]:
        return self._modified_on

    @modified_on.setter
    def modified_on(self, value: Optional[datetime]) -> None:
        self._modified_on = normalize_datetime(value)

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load(self, element: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        require(element, "element", type(self).__name__)
        found = self.load_common(element)
        if self._load_specific(element, settings):
            found = True
        if self.load_extensions(element, settings):
            found = True
        return found

    def load_common(self, element: ET._Element) -> bool:
        found = False
        identifier = normalize_text(element.get("id"))
        if identifier:
            self._id = identifier
            found = True

        for attr, field in (("date-created", "_created_on"), ("date-modified", "_modified_on")):
            value = parse_rfc3339(element.get(attr))
            if value is not None:
                setattr(self, field, value)
                found = True

        status = BlogMLApprovalStatus.from_token(element.get("approved"))
        if status is not BlogMLApprovalStatus.NONE:
            self.approval_status = status
            found = True

        title = select_child(element, "title", BLOGML_NAMESPACE)
        if title is not None:
            construct = BlogMLTextConstruct()
            if construct.load(title):
                self.title = construct
                found = True
        return found

    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        return False

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        element = ET.SubElement(parent, qname(BLOGML_NAMESPACE, self.ELEMENT))
        self.write_common_attributes(element)
        self._write_specific_attributes(element)
        self.write_common_children(element)
        self._write_specific_elements(element)
        self.write_extensions(element)

    def write_common_attributes(self, element: ET._Element) -> None:
        if self._id:
            element.set("id", self._id)
        if self._created_on is not None:
            element.set("date-created", format_rfc3339(self._created_on))
        if self._modified_on is not None:
            element.set("date-modified", format_rfc3339(self._modified_on))
        if self.approval_status is not BlogMLApprovalStatus.NONE:
            element.set("approved", self.approval_status.token)

    def write_common_children(self, element: ET._Element) -> None:
        if self.title is not None:
            self.title.write_to(element, "title")

    def _write_specific_attributes(self, element: ET._Element) -> None:
        pass

    def _write_specific_elements(self, element: ET._Element) -> None:
        pass

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, type(self))
        return self.compare_common(other) | self._compare_specific(other)

    def compare_common(self, other: "BlogMLCommonObject") -> int:
        result = compare_text(self.id, other.id)
        result |= compare_values(self.created_on, other.created_on)
        result |= compare_values(self.modified_on, other.modified_on)
        result |= compare_values(self.approval_status, other.approval_status)
        result |= compare_entities(_non_empty(self.title), _non_empty(other.title))
        return result

    def _compare_specific(self, other: Any) -> int:
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"


def _non_empty(construct: Optional[BlogMLTextConstruct]) -> Optional[BlogMLTextConstruct]:
    if construct is None or construct.is_empty:
        return None
    return construct
