from __future__ import annotations

"""Author of web-log content."""

from typing import Optional

from lxml import etree as ET

from ..comparison import compare_text
from ..settings import LoadSettings
from ..utils import normalize_text
from .common import BlogMLCommonObject

__all__ = ["BlogMLAuthor"]


class BlogMLAuthor(BlogMLCommonObject):
    """A person who wrote posts; the title holds the display name."""

    ELEMENT = "author"

    def __init__(self, id: str = "", title: Optional[str] = None, email: str = "") -> None:
        super().__init__(id, title)
        self.email = email

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = normalize_text(value)

    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        email = normalize_text(element.get("email"))
        if email:
            self._email = email
            return True
        return False

    def _write_specific_attributes(self, element: ET._Element) -> None:
        if self._email:
            element.set("email", self._email)

    def _compare_specific(self, other: "BlogMLAuthor") -> int:
        return compare_text(self.email, other.email)
