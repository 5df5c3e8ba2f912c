from __future__ import annotations

"""Outline Processor Markup Language (OPML 2.0) document."""

import logging
from typing import Any, Dict, List, Optional

from lxml import etree as ET

from ..comparison import compare_entities, compare_entity_sequence, ensure_comparable
from ..models.document import SyndicationDocument
from ..settings import LoadSettings
from ..utils import require
from .head import OpmlHead
from .outline import OpmlOutline

logger = logging.getLogger(__name__)

__all__ = ["OpmlDocument"]


class OpmlDocument(SyndicationDocument):
    """An outline document: a head and an ordered tree of outlines.

    Example:
        >>> document = OpmlDocument()
        >>> document.head.title = "Subscriptions"
        >>> document.add_outline(OpmlOutline("News"))
        >>> xml = document.to_xml()
    """

    FORMAT = "opml"
    VERSION = "2.0"
    ROOT_ELEMENT = "opml"

    def __init__(self, head: Optional[OpmlHead] = None,
                 outlines: Optional[List[OpmlOutline]] = None) -> None:
        super().__init__()
        self._head = head if head is not None else OpmlHead()
        self._outlines: List[OpmlOutline] = list(outlines or [])

    @property
    def head(self) -> OpmlHead:
        return self._head

    @head.setter
    def head(self, value: OpmlHead) -> None:
        self._head = require(value, "head", type(self).__name__)

    @property
    def outlines(self) -> List[OpmlOutline]:
        return self._outlines

    def add_outline(self, outline: OpmlOutline) -> bool:
        self._outlines.append(require(outline, "outline", type(self).__name__))
        return True

    def remove_outline(self, outline: OpmlOutline) -> bool:
        require(outline, "outline", type(self).__name__)
        for index, candidate in enumerate(self._outlines):
            if candidate is outline:
                del self._outlines[index]
                return True
        return False

    def child_entities(self):
        return [self._head, *self._outlines]

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    def _load_root(self, root: ET._Element, settings: Optional[LoadSettings]) -> bool:
        if not self._is_root(root):
            logger.debug("Root <%s> is not an OPML document", root.tag)
            return False

        found = False
        head = root.find("head")
        if head is not None and self._head.load(head, settings):
            found = True

        body = root.find("body")
        if body is not None:
            loaded = 0
            for element in body.iterchildren("outline"):
                if settings is not None and not settings.within_limit(loaded):
                    logger.debug("Retrieval limit %d reached", settings.retrieval_limit)
                    break
                outline = OpmlOutline()
                if outline.load(element, settings):
                    self._outlines.append(outline)
                    loaded += 1
                    found = True

        if self.load_extensions(root, settings):
            found = True
        return found

    def _create_root(self, nsmap: Dict[Optional[str], str]) -> ET._Element:
        root = ET.Element("opml", nsmap=nsmap or None)
        root.set("version", self.VERSION)
        self._head.write_to(root)
        self.write_extensions(root)
        body = ET.SubElement(root, "body")
        for outline in self._outlines:
            outline.write_to(body)
        return root

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, OpmlDocument)
        result = compare_entities(self.head, other.head)
        result |= compare_entity_sequence(self.outlines, other.outlines)
        return result
