import io

import pytest
from lxml import etree as ET

from syndication_toolkit.core.exceptions import (
    ArgumentEmptyError,
    ArgumentNullError,
    DocumentLoadError,
)
from syndication_toolkit.core.utils import (
    declared_nsmap,
    element_text,
    join_comma_list,
    local_name,
    namespace_of,
    parse_bool,
    parse_float,
    parse_int,
    parse_xml_source,
    qname,
    require,
    require_text,
    save_xml_file,
    select_child,
    select_children,
    serialize_element,
    split_comma_list,
)


class TestArgumentGuards:
    """Contract checks used by every public operation."""

    def test_require_returns_value(self):
        assert require(0, "value") == 0

    def test_require_rejects_none(self):
        with pytest.raises(ArgumentNullError) as info:
            require(None, "value", "OpmlOutline")
        assert info.value.argument == "value"
        assert "[Entity: OpmlOutline]" in str(info.value)

    def test_require_text_trims(self):
        assert require_text("  hello ", "text") == "hello"

    def test_require_text_rejects_blank(self):
        with pytest.raises(ArgumentEmptyError):
            require_text("   ", "text")
        with pytest.raises(ArgumentNullError):
            require_text(None, "text")

    def test_contract_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            require_text("", "text")


class TestScalarParsing:
    """Tolerant parsing returns None instead of raising."""

    def test_parse_int(self):
        assert parse_int(" 42 ") == 42
        assert parse_int("forty") is None
        assert parse_int(None) is None

    def test_parse_float(self):
        assert parse_float("36.5") == 36.5
        assert parse_float("north") is None

    def test_parse_bool(self):
        assert parse_bool("TRUE") is True
        assert parse_bool("0") is False
        assert parse_bool("maybe") is None

    def test_split_comma_list_skips_empty_fragments(self):
        assert split_comma_list("1, 6,,13 ") == ["1", "6", "13"]
        assert split_comma_list("") == []
        assert split_comma_list(None) == []

    def test_join_comma_list(self):
        assert join_comma_list([1, 6, 13]) == "1,6,13"


class TestNames:
    def test_qname_and_parts(self):
        tag = qname("urn:x", "item")
        assert tag == "{urn:x}item"
        assert local_name(tag) == "item"
        assert namespace_of(tag) == "urn:x"
        assert qname(None, "item") == "item"
        assert namespace_of("item") is None

    def test_select_children_prefers_namespace_then_falls_back(self):
        root = ET.fromstring(b'<r xmlns:a="urn:a"><a:x>1</a:x><x>2</x></r>')
        assert [element_text(e) for e in select_children(root, "x", "urn:a")] == ["1"]
        plain = ET.fromstring(b"<r><x>2</x></r>")
        assert element_text(select_child(plain, "x", "urn:a")) == "2"
        assert select_child(plain, "missing", "urn:a") is None

    def test_declared_nsmap_skips_redundant_declaration(self):
        root = ET.Element("r", nsmap={"geo": "urn:geo"})
        assert declared_nsmap(root, "geo", "urn:geo") is None
        bare = ET.Element("r")
        assert declared_nsmap(bare, "geo", "urn:geo") == {"geo": "urn:geo"}


class TestXmlSources:
    """parse_xml_source accepts every supported source kind."""

    def test_bytes_and_streams(self):
        assert parse_xml_source(b"<a/>").tag == "a"
        assert parse_xml_source(io.BytesIO(b"<b/>")).tag == "b"
        assert parse_xml_source(io.StringIO("<c/>")).tag == "c"

    def test_element_and_tree(self):
        element = ET.Element("d")
        assert parse_xml_source(element) is element
        assert parse_xml_source(ET.ElementTree(element)) is element

    def test_path(self, temp_dir):
        path = temp_dir / "doc.xml"
        path.write_bytes(b"<e/>")
        assert parse_xml_source(path).tag == "e"
        assert parse_xml_source(str(path)).tag == "e"

    def test_missing_path_raises_load_error(self, temp_dir):
        with pytest.raises(DocumentLoadError):
            parse_xml_source(temp_dir / "missing.xml")

    def test_unsupported_source(self):
        with pytest.raises(DocumentLoadError):
            parse_xml_source(42)

    def test_none_source(self):
        with pytest.raises(ArgumentNullError):
            parse_xml_source(None)

    def test_malformed_xml_propagates_syntax_error(self):
        with pytest.raises(ET.XMLSyntaxError):
            parse_xml_source(b"<a><b></a>")


class TestSerialisation:
    def test_serialize_with_declaration(self):
        data = serialize_element(ET.Element("a"), pretty=False)
        assert data.startswith(b"<?xml")
        assert data.rstrip().endswith(b"<a/>")

    def test_serialize_without_declaration(self):
        assert serialize_element(ET.Element("a"), pretty=False, xml_declaration=False) == b"<a/>"

    def test_save_xml_file(self, temp_dir):
        path = temp_dir / "out.xml"
        save_xml_file(ET.Element("a"), path, xml_declaration=False)
        assert path.read_bytes().strip() == b"<a/>"
