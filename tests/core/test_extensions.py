import pytest
from lxml import etree as ET

from syndication_toolkit.core.exceptions import ExtensionRegistrationError
from syndication_toolkit.core.extensions import (
    BasicGeocodingSyndicationExtension,
    DublinCoreElementSetSyndicationExtension,
    SyndicationExtension,
    SyndicationExtensionAdapter,
    XmlFragmentExtension,
    get_default_registry,
)
from syndication_toolkit.core.opml import OpmlOutline
from syndication_toolkit.core.settings import LoadSettings

GEO_NS = "http://www.w3.org/2003/01/geo/wgs84_pos#"
DC_NS = "http://purl.org/dc/elements/1.1/"


class BrokenExtension(SyndicationExtension):
    """Recognises its namespace but cannot parse it."""

    namespace_uri = "urn:broken"
    default_prefix = "broken"

    def load(self, element):
        raise RuntimeError("cannot parse")

    def write_to(self, parent):
        pass


class AbstractExtension(SyndicationExtension):
    namespace_uri = "urn:abstract"


class ConflictingGeo(BasicGeocodingSyndicationExtension):
    pass


def _outline_element(body: str) -> ET._Element:
    xml = (
        f'<outline text="x" xmlns:geo="{GEO_NS}" xmlns:dc="{DC_NS}" '
        f'xmlns:broken="urn:broken" xmlns:other="urn:other">{body}</outline>'
    )
    return ET.fromstring(xml.encode())


class TestExtensionRegistry:
    """Registration, lookup and conflict handling."""

    def test_builtins_registered(self, fresh_registry):
        assert fresh_registry.is_registered(GEO_NS)
        assert fresh_registry.get(DC_NS) is DublinCoreElementSetSyndicationExtension

    def test_default_registry_holds_builtins(self):
        registry = get_default_registry()
        assert registry.is_registered(GEO_NS)
        assert registry.is_registered(DC_NS)

    def test_create_instance(self, fresh_registry):
        assert isinstance(fresh_registry.create(GEO_NS), BasicGeocodingSyndicationExtension)
        assert fresh_registry.create("urn:none") is None

    def test_conflict_rejected(self, fresh_registry):
        with pytest.raises(ExtensionRegistrationError) as info:
            fresh_registry.register(ConflictingGeo)
        assert info.value.namespace == GEO_NS

    def test_replace(self, fresh_registry):
        fresh_registry.register(ConflictingGeo, replace=True)
        assert fresh_registry.get(GEO_NS) is ConflictingGeo

    def test_re_registering_same_type_is_allowed(self, fresh_registry):
        fresh_registry.register(BasicGeocodingSyndicationExtension)
        assert len(fresh_registry.registered_namespaces()) == 2

    def test_invalid_types_rejected(self, fresh_registry):
        with pytest.raises(ExtensionRegistrationError):
            fresh_registry.register(str)
        with pytest.raises(ExtensionRegistrationError):
            fresh_registry.register(AbstractExtension)
        with pytest.raises(ExtensionRegistrationError):
            fresh_registry.register(XmlFragmentExtension)

    def test_unregister(self, fresh_registry):
        assert fresh_registry.unregister(GEO_NS) is True
        assert fresh_registry.unregister(GEO_NS) is False

    def test_find_for_element(self, fresh_registry):
        element = ET.fromstring(f'<x xmlns:dc="{DC_NS}"><dc:title>t</dc:title></x>'.encode())
        assert fresh_registry.find_for_element(element) == [DublinCoreElementSetSyndicationExtension]

    def test_stats_and_clear(self, fresh_registry):
        stats = fresh_registry.get_registry_stats()
        assert stats["extension_count"] == 2
        fresh_registry.clear_registry()
        assert fresh_registry.registered_namespaces() == []


class TestBuiltinExtensions:
    def test_geo_load_and_write(self):
        element = _outline_element("<geo:lat>36.778261</geo:lat><geo:long>-119.4179324</geo:long>")
        geo = BasicGeocodingSyndicationExtension()
        assert geo.exists_in_source(element)
        assert geo.load(element) is True
        assert geo.latitude == pytest.approx(36.778261)

        parent = ET.Element("outline")
        geo.write_to(parent)
        assert parent.findtext(f"{{{GEO_NS}}}lat") == "36.7782610"

    def test_geo_metadata(self):
        geo = BasicGeocodingSyndicationExtension()
        assert geo.prefix == "geo"
        assert geo.namespace == GEO_NS
        assert geo.documentation.startswith("http://www.w3.org/")

    def test_dublin_core_first_occurrence_wins(self):
        element = _outline_element("<dc:title>first</dc:title><dc:title>second</dc:title>")
        dc = DublinCoreElementSetSyndicationExtension()
        dc.load(element)
        assert dc.get_term("title") == "first"

    def test_dublin_core_writes_canonical_order(self):
        dc = DublinCoreElementSetSyndicationExtension(rights="CC", title="T")
        parent = ET.Element("item")
        dc.write_to(parent)
        assert [ET.QName(child).localname for child in parent] == ["title", "rights"]

    def test_dublin_core_unknown_term(self):
        with pytest.raises(ValueError):
            DublinCoreElementSetSyndicationExtension().set_term("colour", "red")

    def test_extension_equality(self):
        assert BasicGeocodingSyndicationExtension(1.0, 2.0) == BasicGeocodingSyndicationExtension(1.0, 2.0)
        assert BasicGeocodingSyndicationExtension(1.0, 2.0) != BasicGeocodingSyndicationExtension(1.0, 3.0)

    def test_fragment_requires_matching_namespace(self):
        fragment = XmlFragmentExtension("urn:other", "other")
        with pytest.raises(ValueError):
            fragment.add_element(ET.Element("{urn:elsewhere}x"))


class TestExtensionAdapter:
    """Extension detection while loading a host element."""

    def test_fill_attaches_detected_extensions(self):
        element = _outline_element("<geo:lat>1</geo:lat><dc:creator>me</dc:creator>")
        outline = OpmlOutline("x")
        assert SyndicationExtensionAdapter(element, LoadSettings()).fill(outline) is True
        namespaces = {extension.namespace for extension in outline.extensions}
        assert namespaces == {GEO_NS, DC_NS}

    def test_no_auto_detect_uses_supported_only(self):
        element = _outline_element("<geo:lat>1</geo:lat><dc:creator>me</dc:creator>")
        settings = LoadSettings(auto_detect_extensions=False,
                                supported_extensions=[DublinCoreElementSetSyndicationExtension])
        outline = OpmlOutline("x")
        SyndicationExtensionAdapter(element, settings).fill(outline)
        assert [extension.namespace for extension in outline.extensions] == [DC_NS]

    def test_failing_extension_is_skipped(self, caplog):
        element = _outline_element("<broken:x>1</broken:x><geo:lat>1</geo:lat>")
        settings = LoadSettings(supported_extensions=[BrokenExtension])
        outline = OpmlOutline("x")
        with caplog.at_level("WARNING"):
            SyndicationExtensionAdapter(element, settings).fill(outline)
        assert [extension.namespace for extension in outline.extensions] == [GEO_NS]
        assert "BrokenExtension" in caplog.text

    def test_unknown_namespaces_preserved_on_request(self):
        element = _outline_element("<other:rating>5</other:rating>")
        outline = OpmlOutline("x")
        SyndicationExtensionAdapter(element, LoadSettings(preserve_unknown_extensions=True)).fill(outline)
        fragment = outline.find_extension_by_namespace("urn:other")
        assert isinstance(fragment, XmlFragmentExtension)
        assert fragment.prefix == "other"

        parent = ET.Element("outline")
        fragment.write_to(parent)
        assert parent.findtext("{urn:other}rating") == "5"

    def test_unknown_namespaces_dropped_by_default(self):
        element = _outline_element("<other:rating>5</other:rating>")
        outline = OpmlOutline("x")
        assert SyndicationExtensionAdapter(element, LoadSettings()).fill(outline) is False
        assert outline.extensions == []

    def test_fill_extension_types_walks_tree(self):
        parent = OpmlOutline("parent")
        child = OpmlOutline("child")
        child.add_extension(BasicGeocodingSyndicationExtension(1.0, 2.0))
        parent.add_outline(child)
        found = SyndicationExtensionAdapter.fill_extension_types([parent])
        assert [extension.namespace for extension in found] == [GEO_NS]

    def test_namespace_map(self):
        nsmap = SyndicationExtensionAdapter.namespace_map(
            [BasicGeocodingSyndicationExtension()], [DublinCoreElementSetSyndicationExtension]
        )
        assert nsmap == {"dc": DC_NS, "geo": GEO_NS}

    def test_namespace_map_skips_taken_prefix(self):
        nsmap = SyndicationExtensionAdapter.namespace_map(
            [XmlFragmentExtension("urn:a", "x"), XmlFragmentExtension("urn:b", "x")]
        )
        assert nsmap == {"x": "urn:a"}
