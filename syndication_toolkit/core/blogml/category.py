from __future__ import annotations

"""Post category, optionally nested under a parent category."""

from typing import Optional

from lxml import etree as ET

from ..comparison import compare_text
from ..settings import LoadSettings
from ..utils import normalize_text
from .common import BlogMLCommonObject

__all__ = ["BlogMLCategory"]


class BlogMLCategory(BlogMLCommonObject):
    """A category posts refer to by ``id``.

    ``parent_id`` is written as ``parentref``.
    """

    ELEMENT = "category"

    def __init__(self, id: str = "", title: Optional[str] = None,
                 parent_id: str = "", description: str = "") -> None:
        super().__init__(id, title)
        self.parent_id = parent_id
        self.description = description

    @property
    def parent_id(self) -> str:
        return self._parent_id

    @parent_id.setter
    def parent_id(self, value: str) -> None:
        self._parent_id = normalize_text(value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = normalize_text(value)

    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        found = False
        for attr, field in (("parentref", "_parent_id"), ("description", "_description")):
            value = normalize_text(element.get(attr))
            if value:
                setattr(self, field, value)
                found = True
        return found

    def _write_specific_attributes(self, element: ET._Element) -> None:
        if self._parent_id:
            element.set("parentref", self._parent_id)
        if self._description:
            element.set("description", self._description)

    def _compare_specific(self, other: "BlogMLCategory") -> int:
        return (compare_text(self.parent_id, other.parent_id)
                | compare_text(self.description, other.description))
