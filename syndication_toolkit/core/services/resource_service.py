from __future__ import annotations

"""Format-agnostic entry point for loading syndication resources.

Front-ends that do not know in advance whether a source is an OPML, RSD or
BlogML document hand it to :class:`SyndicationResourceService`, which
detects the format from the root element and returns the matching
document type.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from lxml import etree as ET

from syndication_toolkit.core.blogml import BlogMLDocument
from syndication_toolkit.core.exceptions import FormatDetectionError
from syndication_toolkit.core.fetch import WebRequestOptions, fetch_resource
from syndication_toolkit.core.models.document import SyndicationDocument
from syndication_toolkit.core.opml import OpmlDocument
from syndication_toolkit.core.rsd import RsdDocument
from syndication_toolkit.core.settings import LoadSettings
from syndication_toolkit.core.utils import local_name, namespace_of, parse_xml_source, require_text

logger = logging.getLogger(__name__)

__all__ = ["SyndicationResourceService"]

_DEFAULT_FORMATS: List[Type[SyndicationDocument]] = [OpmlDocument, RsdDocument, BlogMLDocument]


class SyndicationResourceService:
    """Detects document formats and loads sources into documents."""

    def __init__(self, document_types: Optional[List[Type[SyndicationDocument]]] = None) -> None:
        self._document_types: Dict[str, Type[SyndicationDocument]] = {}
        for document_type in document_types or _DEFAULT_FORMATS:
            self._document_types[document_type.FORMAT] = document_type
        self.logger = logger

    @property
    def supported_formats(self) -> List[str]:
        return list(self._document_types)

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def detect_format(self, root: ET._Element) -> str:
        """Return the format identifier for *root*.

        A root matches a format when its local name is the format's root
        element and it is either unqualified or in the format's namespace.

        Raises:
            FormatDetectionError: If no supported format matches
        """
        name = local_name(root.tag)
        namespace = namespace_of(root.tag)
        for format_name, document_type in self._document_types.items():
            if name != document_type.ROOT_ELEMENT:
                continue
            if namespace and document_type.NAMESPACE and namespace != document_type.NAMESPACE:
                continue
            self.logger.debug("Detected %s format for <%s>", format_name, root.tag)
            return format_name
        raise FormatDetectionError(str(root.tag), self.supported_formats)

    def create_document(self, format_name: str) -> SyndicationDocument:
        """Return an empty document of *format_name*.

        Raises:
            FormatDetectionError: If the format is not supported
        """
        format_name = require_text(format_name, "format_name", type(self).__name__)
        document_type = self._document_types.get(format_name.lower())
        if document_type is None:
            raise FormatDetectionError(format_name, self.supported_formats)
        return document_type()

    def load(self, source: Any, settings: Optional[LoadSettings] = None) -> SyndicationDocument:
        """Parse *source*, detect its format and return the loaded document."""
        settings = settings or LoadSettings.from_config()
        root = parse_xml_source(source, settings.character_encoding)
        document = self.create_document(self.detect_format(root))
        document._apply_load(root, settings)
        document._notify_loaded(source)
        return document

    def load_from_url(self, url: str, settings: Optional[LoadSettings] = None,
                      options: Optional[WebRequestOptions] = None) -> SyndicationDocument:
        """Fetch *url* and return the loaded document."""
        settings = settings or LoadSettings.from_config()
        self.logger.info("Fetching %s", url)
        data = fetch_resource(url, options, settings.timeout)
        return self.load(data, settings)
