from __future__ import annotations

"""Web-log post and its comments, trackbacks and attachments."""

import logging
from typing import List, Optional

from lxml import etree as ET

from ..comparison import (
    compare_entities,
    compare_entity_sequence,
    compare_sequence,
    compare_text,
    compare_values,
)
from ..settings import LoadSettings
from ..utils import (
    format_bool,
    normalize_text,
    parse_bool,
    parse_int,
    qname,
    require,
    select_child,
    select_children,
)
from .attachment import BlogMLAttachment
from .comment import BlogMLComment
from .common import BlogMLCommonObject
from .enums import BlogMLPostType
from .text_construct import BLOGML_NAMESPACE, BlogMLTextConstruct
from .trackback import BlogMLTrackback

logger = logging.getLogger(__name__)

__all__ = ["BlogMLPost"]


class BlogMLPost(BlogMLCommonObject):
    """A post.

    Categories and authors are references: the ``id`` values of entries in
    the document's category and author lists.  ``content`` is always
    written, as an empty element when there is none.
    """

    ELEMENT = "post"

    def __init__(self, id: str = "", title: Optional[str] = None,
                 content: Optional[str] = None) -> None:
        super().__init__(id, title)
        self.url = ""
        self.post_type = BlogMLPostType.NONE
        self.views: Optional[int] = None
        self.has_excerpt = False
        self.content = BlogMLTextConstruct(content or "")
        self.name: Optional[BlogMLTextConstruct] = None
        self.excerpt: Optional[BlogMLTextConstruct] = None
        self.categories: List[str] = []
        self.authors: List[str] = []
        self.comments: List[BlogMLComment] = []
        self.trackbacks: List[BlogMLTrackback] = []
        self.attachments: List[BlogMLAttachment] = []

    @property
    def url(self) -> str:
        """Permanent link of the post (``post-url``)."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = normalize_text(value)

    @property
    def content(self) -> BlogMLTextConstruct:
        return self._content

    @content.setter
    def content(self, value: BlogMLTextConstruct) -> None:
        self._content = require(value, "content", type(self).__name__)

    def add_comment(self, comment: BlogMLComment) -> None:
        self.comments.append(require(comment, "comment", type(self).__name__))

    def child_entities(self):
        return [*self.comments, *self.trackbacks, *self.attachments]

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def _load_specific(self, element: ET._Element, settings: Optional[LoadSettings]) -> bool:
        found = False

        url = normalize_text(element.get("post-url"))
        if url:
            self._url = url
            found = True

        post_type = BlogMLPostType.from_token(element.get("type"))
        if post_type is not BlogMLPostType.NONE:
            self.post_type = post_type
            found = True

        views = parse_int(element.get("views"))
        if views is not None:
            self.views = views
            found = True

        has_excerpt = parse_bool(element.get("hasexcerpt"))
        if has_excerpt is not None:
            self.has_excerpt = has_excerpt
            found = True

        for local, attr in (("content", "_content"), ("post-name", "name"), ("excerpt", "excerpt")):
            child = select_child(element, local, BLOGML_NAMESPACE)
            if child is None:
                continue
            construct = BlogMLTextConstruct()
            if construct.load(child):
                setattr(self, attr, construct)
                found = True

        if self._load_references(element, "categories", "category", self.categories):
            found = True
        if self._load_references(element, "authors", "author", self.authors):
            found = True

        for container, local, factory, target in (
            ("comments", "comment", BlogMLComment, self.comments),
            ("trackbacks", "trackback", BlogMLTrackback, self.trackbacks),
            ("attachments", "attachment", BlogMLAttachment, self.attachments),
        ):
            parent = select_child(element, container, BLOGML_NAMESPACE)
            if parent is None:
                continue
            for child in select_children(parent, local, BLOGML_NAMESPACE):
                entity = factory()
                if entity.load(child, settings):
                    target.append(entity)
                    found = True
        return found

    @staticmethod
    def _load_references(element: ET._Element, container: str, local: str,
                         target: List[str]) -> bool:
        parent = select_child(element, container, BLOGML_NAMESPACE)
        if parent is None:
            return False
        found = False
        for child in select_children(parent, local, BLOGML_NAMESPACE):
            reference = normalize_text(child.get("ref"))
            if reference:
                target.append(reference)
                found = True
        return found

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def _write_specific_attributes(self, element: ET._Element) -> None:
        if self._url:
            element.set("post-url", self._url)
        if self.post_type is not BlogMLPostType.NONE:
            element.set("type", self.post_type.token)
        element.set("hasexcerpt", format_bool(self.has_excerpt))
        if self.views is not None:
            element.set("views", str(self.views))

    def _write_specific_elements(self, element: ET._Element) -> None:
        self._content.write_to(element, "content")
        if self.name is not None:
            self.name.write_to(element, "post-name")
        if self.excerpt is not None:
            self.excerpt.write_to(element, "excerpt")

        self._write_references(element, "categories", "category", self.categories)
        for container, entities in (("comments", self.comments),
                                    ("trackbacks", self.trackbacks),
                                    ("attachments", self.attachments)):
            if entities:
                parent = ET.SubElement(element, qname(BLOGML_NAMESPACE, container))
                for entity in entities:
                    entity.write_to(parent)
        self._write_references(element, "authors", "author", self.authors)

    @staticmethod
    def _write_references(element: ET._Element, container: str, local: str,
                          references: List[str]) -> None:
        if not references:
            return
        parent = ET.SubElement(element, qname(BLOGML_NAMESPACE, container))
        for reference in references:
            ET.SubElement(parent, qname(BLOGML_NAMESPACE, local)).set("ref", reference)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def _compare_specific(self, other: "BlogMLPost") -> int:
        result = compare_text(self.url, other.url)
        result |= compare_values(self.post_type, other.post_type)
        result |= compare_values(self.views, other.views)
        result |= compare_values(self.has_excerpt, other.has_excerpt)
        result |= compare_entities(self.content, other.content)
        result |= compare_entities(_loaded(self.name), _loaded(other.name))
        result |= compare_entities(_loaded(self.excerpt), _loaded(other.excerpt))
        result |= compare_sequence(self.categories, other.categories, ignore_case=False)
        result |= compare_sequence(self.authors, other.authors, ignore_case=False)
        result |= compare_entity_sequence(self.comments, other.comments)
        result |= compare_entity_sequence(self.trackbacks, other.trackbacks)
        result |= compare_entity_sequence(self.attachments, other.attachments)
        return result


def _loaded(construct: Optional[BlogMLTextConstruct]) -> Optional[BlogMLTextConstruct]:
    return None if construct is None or construct.is_empty else construct
