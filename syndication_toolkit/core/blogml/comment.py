from __future__ import annotations

"""Reader comment attached to a post."""

from typing import Optional

from lxml import etree as ET

from ..comparison import compare_entities, compare_text
from ..settings import LoadSettings
from ..utils import normalize_text, select_child
from .common import BlogMLCommonObject
from .text_construct import BLOGML_NAMESPACE, BlogMLTextConstruct

__all__ = ["BlogMLComment"]


class BlogMLComment(BlogMLCommonObject):
    """A comment: who wrote it and what they wrote.

    ``user-name`` is always written, the other user fields only when set.
    """

    ELEMENT = "comment"

    def __init__(self, id: str = "", title: Optional[str] = None, user_name: str = "",
                 content: Optional[str] = None) -> None:
        super().__init__(id, title)
        self.user_name = user_name
        self.user_email = ""
        self.user_url = ""
        self.content: Optional[BlogMLTextConstruct] = (
            BlogMLTextConstruct(content) if content is not None else None
        )

    @property
    def user_name(self) -> str:
        return self._user_name

    @user_name.setter
    def user_name(self, value: str) -> None:
        self._user_name = normalize_text(value)

    @property
    def user_email(self) -> str:
        return self._user_email

    @user_email.setter
    def user_email(self, value: str) -> None:
        self._user_email = normalize_text(value)

    @property
    def user_url(self) -> str:
        return self._user_url

    @user_url.setter
    def user_url(self, value: str) -> None:
        self._user_url = normalize_text(value)

    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        found = False
        for attr, field in (("user-name", "_user_name"), ("user-email", "_user_email"),
                            ("user-url", "_user_url")):
            value = normalize_text(element.get(attr))
            if value:
                setattr(self, field, value)
                found = True

        content = select_child(element, "content", BLOGML_NAMESPACE)
        if content is not None:
            construct = BlogMLTextConstruct()
            if construct.load(content):
                self.content = construct
                found = True
        return found

    def _write_specific_attributes(self, element: ET._Element) -> None:
        element.set("user-name", self._user_name)
        if self._user_email:
            element.set("user-email", self._user_email)
        if self._user_url:
            element.set("user-url", self._user_url)

    def _write_specific_elements(self, element: ET._Element) -> None:
        if self.content is not None and not self.content.is_empty:
            self.content.write_to(element, "content")

    def _compare_specific(self, other: "BlogMLComment") -> int:
        result = compare_text(self.user_name, other.user_name)
        result |= compare_text(self.user_email, other.user_email)
        result |= compare_text(self.user_url, other.user_url)
        mine = self.content if self.content is not None and not self.content.is_empty else None
        theirs = other.content if other.content is not None and not other.content.is_empty else None
        result |= compare_entities(mine, theirs)
        return result
