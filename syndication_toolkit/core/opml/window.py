from __future__ import annotations

"""Display window position of an outline document."""

from typing import Any, Optional

from lxml import etree as ET

from ..comparison import compare_values, ensure_comparable
from ..models.entity import ExtensibleEntity
from ..utils import element_text, parse_int, require

__all__ = ["OpmlWindow"]

_FIELDS = (
    ("windowTop", "top"),
    ("windowLeft", "left"),
    ("windowBottom", "bottom"),
    ("windowRight", "right"),
)


class OpmlWindow(ExtensibleEntity):
    """Pixel location of the edges of the window a document was displayed in.

    Every edge is optional; ``None`` means not provided.  Like the owner,
    the window fields are children of ``<head>``.
    """

    def __init__(self, top: Optional[int] = None, left: Optional[int] = None,
                 bottom: Optional[int] = None, right: Optional[int] = None) -> None:
        super().__init__()
        self.top = top
        self.left = left
        self.bottom = bottom
        self.right = right

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, attr) is None for _, attr in _FIELDS)

    def load(self, head: ET._Element) -> bool:
        require(head, "head", type(self).__name__)
        found = False
        for tag, attr in _FIELDS:
            child = head.find(tag)
            if child is None:
                continue
            value = parse_int(element_text(child))
            if value is not None:
                setattr(self, attr, value)
                found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        for tag, attr in _FIELDS:
            value = getattr(self, attr)
            if value is not None:
                ET.SubElement(parent, tag).text = str(value)
        self.write_extensions(parent)

    def to_string(self) -> str:
        holder = ET.Element("head")
        self.write_to(holder)
        return ET.tostring(holder, encoding="unicode")

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, OpmlWindow)
        result = compare_values(self.bottom, other.bottom)
        result |= compare_values(self.left, other.left)
        result |= compare_values(self.right, other.right)
        result |= compare_values(self.top, other.top)
        return result
