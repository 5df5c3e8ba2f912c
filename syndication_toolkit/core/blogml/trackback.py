from __future__ import annotations

"""Trackback ping received by a post."""

from typing import Optional

from lxml import etree as ET

from ..comparison import compare_text
from ..settings import LoadSettings
from ..utils import normalize_text
from .common import BlogMLCommonObject


class BlogMLTrackback(BlogMLCommonObject):
    ELEMENT = "trackback"

    def __init__(self, id: str = "", title: Optional[str] = None, url: str = "") -> None:
        super().__init__(id, title)
        self.url = url

    @property
    def url(self) -> str:
        """URL of the page that sent the trackback."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = normalize_text(value)

    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        url = normalize_text(element.get("url"))
        if url:
            self._url = url
            return True
        return False

    def _write_specific_attributes(self, element: ET._Element) -> None:
        if self._url:
            element.set("url", self._url)

    def _compare_specific(self, other: "BlogMLTrackback") -> int:
        return compare_text(self.url, other.url)
