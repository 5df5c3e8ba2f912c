from __future__ import annotations

"""W3C Basic Geo (WGS84 lat/long) vocabulary extension."""

import logging
from typing import Optional

from lxml import etree as ET

from ..utils import declared_nsmap, element_text, parse_float
from .base import SyndicationExtension

__all__ = ["BasicGeocodingSyndicationExtension"]

logger = logging.getLogger(__name__)


class BasicGeocodingSyndicationExtension(SyndicationExtension):
    """Latitude and longitude of the resource an entity describes.

    Loaded from ``geo:lat`` / ``geo:long`` child elements and written back
    with seven decimal places.
    """

    namespace_uri = "http://www.w3.org/2003/01/geo/wgs84_pos#"
    default_prefix = "geo"
    extension_name = "Basic Geo (WGS84 lat/long) Vocabulary"
    extension_description = (
        "Extends syndication feeds to provide a means of representing "
        "latitude, longitude and other information about spatially-located things."
    )
    documentation_url = "http://www.w3.org/2003/01/geo/"

    def __init__(self, latitude: Optional[float] = None,
                 longitude: Optional[float] = None) -> None:
        super().__init__()
        self.latitude = latitude
        self.longitude = longitude

    def load(self, element: ET._Element) -> bool:
        found = False
        for name, child in self.iter_owned_children(element):
            if name == "lat":
                value = parse_float(element_text(child))
                if value is not None:
                    self.latitude = value
                    found = True
            elif name == "long":
                value = parse_float(element_text(child))
                if value is not None:
                    self.longitude = value
                    found = True
        return found

    def write_to(self, parent: ET._Element) -> None:
        nsmap = declared_nsmap(parent, self.prefix, self.namespace)
        if self.latitude is not None:
            lat = ET.SubElement(parent, self.qualified("lat"), nsmap=nsmap)
            lat.text = f"{self.latitude:.7f}"
        if self.longitude is not None:
            lon = ET.SubElement(parent, self.qualified("long"), nsmap=nsmap)
            lon.text = f"{self.longitude:.7f}"
