from __future__ import annotations

"""BlogML 2.0 web-log export document."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from lxml import etree as ET

from ..comparison import (
    compare_entities,
    compare_entity_sequence,
    compare_mapping,
    compare_text,
    compare_values,
    ensure_comparable,
)
from ..dates import format_rfc3339, normalize_datetime, parse_rfc3339
from ..models.attributes import ExtraAttributes
from ..models.document import SyndicationDocument
from ..settings import LoadSettings
from ..utils import normalize_text, qname, require, select_child, select_children
from .author import BlogMLAuthor
from .category import BlogMLCategory
from .post import BlogMLPost
from .text_construct import BLOGML_NAMESPACE, BlogMLTextConstruct

logger = logging.getLogger(__name__)

__all__ = ["BlogMLDocument"]


class BlogMLDocument(SyndicationDocument):
    """A complete web-log export.

    Attributes:
        generated_on: When the export was produced (``date-created``)
        root_url: Home page of the web log
        title: Web log title
        subtitle: Web log sub-title
        authors: Authors posts refer to
        extended_properties: Engine specific name/value pairs
        categories: Categories posts refer to
        posts: Posts, in document order
    """

    FORMAT = "blogml"
    VERSION = "2.0"
    ROOT_ELEMENT = "blog"
    NAMESPACE = BLOGML_NAMESPACE

    def __init__(self, title: Optional[str] = None, root_url: str = "") -> None:
        super().__init__()
        self._generated_on: Optional[datetime] = None
        self.root_url = root_url
        self.title: Optional[BlogMLTextConstruct] = (
            BlogMLTextConstruct(title) if title is not None else None
        )
        self.subtitle: Optional[BlogMLTextConstruct] = None
        self.authors: List[BlogMLAuthor] = []
        self.extended_properties = ExtraAttributes()
        self.categories: List[BlogMLCategory] = []
        self.posts: List[BlogMLPost] = []

    @property
    def generated_on(self) -> Optional[datetime]:
        return self._generated_on

    @generated_on.setter
    def generated_on(self, value: Optional[datetime]) -> None:
        self._generated_on = normalize_datetime(value)

    @property
    def root_url(self) -> str:
        return self._root_url

    @root_url.setter
    def root_url(self, value: str) -> None:
        self._root_url = normalize_text(value)

    def add_post(self, post: BlogMLPost) -> bool:
        self.posts.append(require(post, "post", type(self).__name__))
        return True

    def find_category(self, category_id: str) -> Optional[BlogMLCategory]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def find_author(self, author_id: str) -> Optional[BlogMLAuthor]:
        for author in self.authors:
            if author.id == author_id:
                return author
        return None

    def child_entities(self):
        return [*self.authors, *self.categories, *self.posts]

    # ------------------------------------------------------------------
    # Load / write
    # ------------------------------------------------------------------
    def _load_root(self, root: ET._Element, settings: Optional[LoadSettings]) -> bool:
        if not self._is_root(root):
            logger.debug("Root <%s> is not a BlogML document", root.tag)
            return False

        found = False
        generated = parse_rfc3339(root.get("date-created"))
        if generated is not None:
            self._generated_on = generated
            found = True
        root_url = normalize_text(root.get("root-url"))
        if root_url:
            self._root_url = root_url
            found = True

        for local, attr in (("title", "title"), ("sub-title", "subtitle")):
            child = select_child(root, local, BLOGML_NAMESPACE)
            if child is not None:
                construct = BlogMLTextConstruct()
                if construct.load(child):
                    setattr(self, attr, construct)
                    found = True

        if self._load_entities(root, "authors", "author", BlogMLAuthor, self.authors, settings):
            found = True

        properties = select_child(root, "extended-properties", BLOGML_NAMESPACE)
        if properties is not None:
            for prop in select_children(properties, "property", BLOGML_NAMESPACE):
                name = normalize_text(prop.get("name"))
                if name:
                    self.extended_properties.add_if_absent(name, prop.get("value") or "")
                    found = True

        if self._load_entities(root, "categories", "category", BlogMLCategory,
                               self.categories, settings):
            found = True
        if self._load_entities(root, "posts", "post", BlogMLPost, self.posts, settings,
                               limited=True):
            found = True

        if self.load_extensions(root, settings):
            found = True
        return found

    @staticmethod
    def _load_entities(root: ET._Element, container: str, local: str, factory,
                       target: List[Any], settings: Optional[LoadSettings],
                       limited: bool = False) -> bool:
        parent = select_child(root, container, BLOGML_NAMESPACE)
        if parent is None:
            return False
        found = False
        loaded = 0
        for element in select_children(parent, local, BLOGML_NAMESPACE):
            if limited and settings is not None and not settings.within_limit(loaded):
                logger.debug("Retrieval limit %d reached", settings.retrieval_limit)
                break
            entity = factory()
            if entity.load(element, settings):
                target.append(entity)
                loaded += 1
                found = True
        return found

    def _create_root(self, nsmap: Dict[Optional[str], str]) -> ET._Element:
        nsmap = {None: BLOGML_NAMESPACE, **{k: v for k, v in nsmap.items() if v != BLOGML_NAMESPACE}}
        root = ET.Element(qname(BLOGML_NAMESPACE, "blog"), nsmap=nsmap)
        if self._generated_on is not None:
            root.set("date-created", format_rfc3339(self._generated_on))
        if self._root_url:
            root.set("root-url", self._root_url)

        if self.title is not None:
            self.title.write_to(root, "title")
        if self.subtitle is not None:
            self.subtitle.write_to(root, "sub-title")

        self._write_entities(root, "authors", self.authors)
        if self.extended_properties:
            properties = ET.SubElement(root, qname(BLOGML_NAMESPACE, "extended-properties"))
            for name, value in self.extended_properties.items():
                prop = ET.SubElement(properties, qname(BLOGML_NAMESPACE, "property"))
                prop.set("name", name)
                prop.set("value", value)
        self._write_entities(root, "categories", self.categories)
        self._write_entities(root, "posts", self.posts)

        self.write_extensions(root)
        return root

    @staticmethod
    def _write_entities(root: ET._Element, container: str, entities: List[Any]) -> None:
        if not entities:
            return
        parent = ET.SubElement(root, qname(BLOGML_NAMESPACE, container))
        for entity in entities:
            entity.write_to(parent)

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        ensure_comparable(other, BlogMLDocument)
        result = compare_values(self.generated_on, other.generated_on)
        result |= compare_text(self.root_url, other.root_url)
        result |= compare_entities(_loaded(self.title), _loaded(other.title))
        result |= compare_entities(_loaded(self.subtitle), _loaded(other.subtitle))
        result |= compare_entity_sequence(self.authors, other.authors)
        result |= compare_mapping(self.extended_properties, other.extended_properties,
                                  ignore_case=False)
        result |= compare_entity_sequence(self.categories, other.categories)
        result |= compare_entity_sequence(self.posts, other.posts)
        return result


def _loaded(construct: Optional[BlogMLTextConstruct]) -> Optional[BlogMLTextConstruct]:
    return None if construct is None or construct.is_empty else construct
