from unittest.mock import Mock, patch

import pytest
from lxml import etree as ET

from syndication_toolkit.core.blogml import BlogMLDocument
from syndication_toolkit.core.exceptions import FormatDetectionError
from syndication_toolkit.core.opml import OpmlDocument
from syndication_toolkit.core.rsd import RsdDocument
from syndication_toolkit.core.services import SyndicationResourceService
from syndication_toolkit.core.settings import LoadSettings


@pytest.fixture
def service():
    return SyndicationResourceService()


class TestFormatDetection:
    def test_detects_each_format(self, service, sample_opml, sample_rsd, sample_blogml):
        assert service.detect_format(ET.fromstring(sample_opml)) == "opml"
        assert service.detect_format(ET.fromstring(sample_rsd)) == "rsd"
        assert service.detect_format(ET.fromstring(sample_blogml)) == "blogml"

    def test_unqualified_rsd(self, service):
        assert service.detect_format(ET.fromstring(b"<rsd version='0.6'/>")) == "rsd"

    def test_wrong_namespace_rejected(self, service):
        with pytest.raises(FormatDetectionError):
            service.detect_format(ET.fromstring(b"<rsd xmlns='urn:other'/>"))

    def test_unknown_root(self, service):
        with pytest.raises(FormatDetectionError) as info:
            service.detect_format(ET.fromstring(b"<rss version='2.0'/>"))
        assert info.value.supported == ["opml", "rsd", "blogml"]

    def test_create_document(self, service):
        assert isinstance(service.create_document("OPML"), OpmlDocument)
        with pytest.raises(FormatDetectionError):
            service.create_document("atom")


class TestServiceLoad:
    def test_load_returns_matching_document(self, service, sample_opml, sample_rsd, sample_blogml):
        assert isinstance(service.load(sample_opml, LoadSettings()), OpmlDocument)
        assert isinstance(service.load(sample_rsd, LoadSettings()), RsdDocument)
        blog = service.load(sample_blogml, LoadSettings())
        assert isinstance(blog, BlogMLDocument)
        assert len(blog.posts) == 2

    @patch("syndication_toolkit.core.fetch.requests.get")
    def test_load_from_url(self, mock_get, service, sample_rsd):
        mock_get.return_value = Mock(content=sample_rsd, raise_for_status=Mock())
        document = service.load_from_url("http://example.com/rsd.xml", LoadSettings())
        assert isinstance(document, RsdDocument)
        assert document.engine_name == "Blog Munging CMS"
