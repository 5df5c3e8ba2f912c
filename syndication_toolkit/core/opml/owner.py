from __future__ import annotations

"""Owner of an outline document (``ownerName``, ``ownerEmail``, ``ownerId``)."""

from typing import Any

from lxml import etree as ET

from ..comparison import compare_text, ensure_comparable
from ..models.entity import ExtensibleEntity
from ..utils import element_text, normalize_text, require

__all__ = ["OpmlOwner"]


class OpmlOwner(ExtensibleEntity):
    """Name, email and profile URL of the person who owns a document.

    The owner has no element of its own: its fields are children of
    ``<head>``, so both load and write operate on the head element.
    """

    def __init__(self, name: str = "", email: str = "", id: str = "") -> None:
        super().__init__()
        self.name = name
        self.email = email
        self.id = id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = normalize_text(value)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = normalize_text(value)

    @property
    def id(self) -> str:
        """URL of a page with a way to contact the owner."""
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = normalize_text(value)

    @property
    def is_empty(self) -> bool:
        return not (self._name or self._email or self._id)

    def load(self, head: ET._Element) -> bool:
        """Read the owner fields from the ``<head>`` element."""
        require(head, "head", type(self).__name__)
        found = False
        for tag, attr in (("ownerName", "_name"), ("ownerEmail", "_email"), ("ownerId", "_id")):
            child = head.find(tag)
            if child is not None:
                text = element_text(child)
                if text:
                    setattr(self, attr, text)
                    found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        """Write ``ownerName``/``ownerEmail``/``ownerId`` into the head element."""
        require(parent, "parent", type(self).__name__)
        for tag, value in (("ownerName", self._name), ("ownerEmail", self._email), ("ownerId", self._id)):
            if value:
                ET.SubElement(parent, tag).text = value
        self.write_extensions(parent)

    def to_string(self) -> str:
        holder = ET.Element("head")
        self.write_to(holder)
        return ET.tostring(holder, encoding="unicode")

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, OpmlOwner)
        result = compare_text(self.email, other.email)
        result |= compare_text(self.id, other.id)
        result |= compare_text(self.name, other.name)
        return result
