import pytest
from lxml import etree as ET

from syndication_toolkit.core.exceptions import ArgumentNullError, ReservedAttributeError
from syndication_toolkit.core.extensions import (
    BasicGeocodingSyndicationExtension,
    DublinCoreElementSetSyndicationExtension,
)
from syndication_toolkit.core.models import ExtraAttributes
from syndication_toolkit.core.opml import OpmlDocument, OpmlOutline, OpmlOwner


class TestExtraAttributes:
    def test_add_if_absent_keeps_first(self):
        extras = ExtraAttributes()
        assert extras.add_if_absent("x", "1") is True
        assert extras.add_if_absent("x", "2") is False
        assert extras["x"] == "1"

    def test_assignment_replaces(self):
        extras = ExtraAttributes([("x", "1")])
        extras["x"] = "2"
        assert dict(extras) == {"x": "2"}

    def test_insertion_order(self):
        extras = ExtraAttributes([("b", "1"), ("a", "2")])
        assert list(extras) == ["b", "a"]

    def test_none_key_rejected(self):
        with pytest.raises(ArgumentNullError):
            ExtraAttributes().add_if_absent(None, "1")

    def test_blank_values_kept_by_default(self):
        extras = ExtraAttributes()
        extras["x"] = ""
        assert dict(extras) == {"x": ""}

    def test_blank_values_ignored_when_configured(self):
        extras = ExtraAttributes([("x", "1")], ignore_blank_values=True)
        assert extras.add_if_absent("y", "  ") is False
        extras["x"] = ""
        extras["z"] = ""
        assert dict(extras) == {}

    def test_reserved_keys_refused_in_any_case(self):
        extras = ExtraAttributes(reserved_keys=("type",), owner="OpmlOutline")
        with pytest.raises(ReservedAttributeError) as excinfo:
            extras["Type"] = "rss"
        assert excinfo.value.key == "Type"
        assert "OpmlOutline" in str(excinfo.value)
        with pytest.raises(ValueError):
            extras.add_if_absent("TYPE", "rss")
        assert len(extras) == 0


class TestExtensibleEntity:
    def test_extensions_keep_insertion_order(self):
        outline = OpmlOutline("x")
        dc = DublinCoreElementSetSyndicationExtension(title="t")
        geo = BasicGeocodingSyndicationExtension(1.0, 2.0)
        outline.add_extension(dc)
        outline.add_extension(geo)
        assert outline.extensions == [dc, geo]
        assert outline.find_extension(lambda ext: ext.prefix == "geo") is geo

    def test_extensions_setter_requires_value(self):
        with pytest.raises(ArgumentNullError):
            OpmlOutline("x").extensions = None

    def test_add_extension_requires_value(self):
        with pytest.raises(ArgumentNullError):
            OpmlOutline("x").add_extension(None)

    def test_iter_entities_is_depth_first(self):
        document = OpmlDocument()
        document.head.owner = OpmlOwner("me")
        parent = OpmlOutline("parent")
        parent.add_outline(OpmlOutline("child"))
        document.add_outline(parent)
        document.add_outline(OpmlOutline("sibling"))
        walked = [getattr(entity, "text", type(entity).__name__) for entity in document.iter_entities()]
        assert walked == ["OpmlDocument", "OpmlHead", "OpmlOwner", "parent", "child", "sibling"]

    def test_load_extensions_without_settings(self):
        element = ET.fromstring(
            b'<outline xmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#"><geo:lat>1</geo:lat></outline>'
        )
        outline = OpmlOutline("x")
        assert outline.load_extensions(element, None) is False
        assert outline.extensions == []
