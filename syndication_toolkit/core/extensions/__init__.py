"""Namespace-identified extensions attached to syndication entities."""

from .base import SyndicationExtension
from .registry import ExtensionRegistry, get_default_registry
from .adapter import SyndicationExtensionAdapter
from .geocoding import BasicGeocodingSyndicationExtension
from .dublin_core import DublinCoreElementSetSyndicationExtension
from .opaque import XmlFragmentExtension

__all__ = [
    "SyndicationExtension",
    "ExtensionRegistry",
    "get_default_registry",
    "SyndicationExtensionAdapter",
    "BasicGeocodingSyndicationExtension",
    "DublinCoreElementSetSyndicationExtension",
    "XmlFragmentExtension",
]
