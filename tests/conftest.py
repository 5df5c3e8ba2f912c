"""Shared fixtures for the syndication toolkit test-suite.

Sample documents, a fresh extension registry and temporary directories.
Network access is never performed: tests that exercise remote loading patch
``requests.get``.
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from syndication_toolkit.config import ConfigManager
from syndication_toolkit.core.extensions import (
    BasicGeocodingSyndicationExtension,
    DublinCoreElementSetSyndicationExtension,
    ExtensionRegistry,
)


SAMPLE_OPML = b"""<?xml version="1.0" encoding="utf-8"?>
<opml version="2.0" xmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#">
  <head>
    <title>states.opml</title>
    <dateCreated>Tue, 15 Mar 2005 16:35:45 GMT</dateCreated>
    <dateModified>Thu, 14 Jul 2005 23:41:05 GMT</dateModified>
    <ownerName>Dave Winer</ownerName>
    <ownerEmail>dave@scripting.com</ownerEmail>
    <expansionState>1, 6, 13, 16, 18, 20</expansionState>
    <vertScrollState>1</vertScrollState>
    <windowTop>106</windowTop>
    <windowLeft>106</windowLeft>
    <windowBottom>558</windowBottom>
    <windowRight>479</windowRight>
  </head>
  <body>
    <outline text="United States" created="Mon, 31 Oct 2005 19:23:00 GMT" category="/Boston/Weather,/Harvard">
      <outline text="Far West">
        <outline text="Alaska" type="rss" xmlUrl="http://example.com/alaska.xml"/>
        <outline text="California">
          <geo:lat>36.7782610</geo:lat>
          <geo:long>-119.4179324</geo:long>
        </outline>
      </outline>
      <outline text="Great Plains" isComment="true"/>
    </outline>
  </body>
</opml>
"""


SAMPLE_RSD = b"""<?xml version="1.0" encoding="utf-8"?>
<rsd version="1.0" xmlns="http://archipelago.phrasewise.com/rsd">
  <service>
    <engineName>Blog Munging CMS</engineName>
    <engineLink>http://www.blogmunging.com/</engineLink>
    <homePageLink>http://www.userdomain.com/</homePageLink>
    <apis>
      <api name="MovableType" preferred="true" apiLink="http://example.com/xml/rpc/url" blogID="123abc"/>
      <api name="MetaWeblog" preferred="false" apiLink="http://example.com/xml/rpc/url" blogID="123abc"/>
      <api name="Blogger" preferred="false" apiLink="http://example.com/xml/rpc/url" blogID="123abc">
        <settings>
          <docs>http://www.blogger.com/developers/api/1_docs/</docs>
          <notes>This is only a test</notes>
          <setting name="service-specific-setting">a value</setting>
          <setting name="another-setting">another value</setting>
        </settings>
      </api>
    </apis>
  </service>
</rsd>
"""


SAMPLE_BLOGML = b"""<?xml version="1.0" encoding="utf-8"?>
<blog root-url="http://blog.example.com/" date-created="2006-09-05T18:03:07Z"
      xmlns="http://www.blogml.com/2006/09/BlogML"
      xmlns:dc="http://purl.org/dc/elements/1.1/">
  <title type="text">Example Blog</title>
  <sub-title type="text">Notes from the field</sub-title>
  <authors>
    <author id="2100" date-created="2006-09-05T18:03:07Z" approved="true" email="author@example.com">
      <title type="text">Jane Author</title>
    </author>
  </authors>
  <extended-properties>
    <property name="CommentModeration" value="Anonymous"/>
    <property name="SendTrackback" value="yes"/>
  </extended-properties>
  <categories>
    <category id="1" approved="true" description="General notes">
      <title type="text">General</title>
    </category>
    <category id="2" approved="true" parentref="1">
      <title type="text">Sub</title>
    </category>
  </categories>
  <posts>
    <post id="10" date-created="2006-09-05T18:03:07Z" post-url="/2006/09/first.aspx" approved="true" type="normal" hasexcerpt="false" views="12">
      <title type="text">First post</title>
      <content type="html"><![CDATA[<p>Hello &amp; welcome</p>]]></content>
      <post-name type="text">first-post</post-name>
      <categories>
        <category ref="1"/>
      </categories>
      <comments>
        <comment id="c1" date-created="2006-09-06T10:00:00Z" approved="true" user-name="Reader" user-url="http://reader.example.com/">
          <title type="text">Re: First post</title>
          <content type="text">Nice.</content>
        </comment>
      </comments>
      <trackbacks>
        <trackback id="t1" approved="false" url="http://other.example.com/linked">
          <title type="text">Linked</title>
        </trackback>
      </trackbacks>
      <authors>
        <author ref="2100"/>
      </authors>
      <dc:subject>greetings</dc:subject>
    </post>
    <post id="11" post-url="/2006/09/second.aspx" type="article">
      <title type="text">Second post</title>
      <content type="text">Plain body</content>
      <attachments>
        <attachment embedded="false" mime-type="image/png" size="1024" url="/files/a.png" external-uri="http://cdn.example.com/a.png"/>
      </attachments>
    </post>
  </posts>
</blog>
"""


@pytest.fixture
def sample_opml() -> bytes:
    return SAMPLE_OPML


@pytest.fixture
def sample_rsd() -> bytes:
    return SAMPLE_RSD


@pytest.fixture
def sample_blogml() -> bytes:
    return SAMPLE_BLOGML


@pytest.fixture
def fresh_registry():
    """An extension registry holding only the built-in extensions."""
    return ExtensionRegistry([
        BasicGeocodingSyndicationExtension,
        DublinCoreElementSetSyndicationExtension,
    ])


@pytest.fixture
def temp_dir():
    """Creates a temporary directory for test operations."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """Point user overrides at an empty directory and reset the singleton."""
    monkeypatch.setenv("SYNDICATION_CONFIG_DIR", str(temp_dir))
    ConfigManager._instance = None
    yield temp_dir
    ConfigManager._instance = None
