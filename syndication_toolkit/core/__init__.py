"""GUI-agnostic core of the syndication toolkit.

Object models for OPML, RSD and BlogML documents, the extension registry
and the shared load/save pipeline.
"""

from .exceptions import (
    ArgumentEmptyError,
    ArgumentNullError,
    ComparisonTypeError,
    DocumentLoadError,
    ExtensionRegistrationError,
    FormatDetectionError,
    LoadInProgressError,
    ReservedAttributeError,
    SyndicationError,
)
from .settings import LoadSettings, SaveSettings
from .fetch import WebRequestOptions, fetch_resource
from .models import DocumentLoadedEvent, ExtensibleEntity, ExtraAttributes, LoadOperation, SyndicationDocument
from .extensions import (
    BasicGeocodingSyndicationExtension,
    DublinCoreElementSetSyndicationExtension,
    ExtensionRegistry,
    SyndicationExtension,
    SyndicationExtensionAdapter,
    XmlFragmentExtension,
    get_default_registry,
)
from .opml import OpmlDocument, OpmlHead, OpmlOutline, OpmlOwner, OpmlWindow
from .rsd import RsdApplicationInterface, RsdDocument
from .blogml import BlogMLDocument, BlogMLPost

__all__: list[str] = [
    "SyndicationError",
    "ArgumentNullError",
    "ArgumentEmptyError",
    "ComparisonTypeError",
    "ExtensionRegistrationError",
    "DocumentLoadError",
    "FormatDetectionError",
    "LoadInProgressError",
    "ReservedAttributeError",
    "LoadSettings",
    "SaveSettings",
    "WebRequestOptions",
    "fetch_resource",
    "ExtraAttributes",
    "ExtensibleEntity",
    "SyndicationDocument",
    "DocumentLoadedEvent",
    "LoadOperation",
    "SyndicationExtension",
    "ExtensionRegistry",
    "get_default_registry",
    "SyndicationExtensionAdapter",
    "BasicGeocodingSyndicationExtension",
    "DublinCoreElementSetSyndicationExtension",
    "XmlFragmentExtension",
    "OpmlDocument",
    "OpmlHead",
    "OpmlOutline",
    "OpmlOwner",
    "OpmlWindow",
    "RsdDocument",
    "RsdApplicationInterface",
    "BlogMLDocument",
    "BlogMLPost",
]
