"""Plain data structures for sitemap documents.

The four document shapes mirror the sitemap protocol:

* ``UrlEntry`` / ``UrlSet`` for a ``<urlset>`` document
* ``SitemapReference`` / ``SitemapIndex`` for a ``<sitemapindex>`` document

Optional fields use the empty string for "absent" so that they can be
omitted on output and round-trip as empty.
"""

from dataclasses import dataclass
from typing import Tuple

# Namespace for sitemap XML files
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"

INDEX_FILENAME = "sitemap-index.xml"

# Protocol limit on URLs per sitemap file
MAX_URLS_PER_SITEMAP = 50_000


@dataclass(frozen=True)
class UrlEntry:
    """A single ``<url>`` entry."""

    location: str
    last_modified: str = ""
    change_frequency: str = ""
    priority: str = ""


@dataclass(frozen=True)
class UrlSet:
    """A ``<urlset>`` document."""

    urls: Tuple[UrlEntry, ...]
    xmlns: str = SITEMAP_NAMESPACE
    xhtml: str = XHTML_NAMESPACE


@dataclass(frozen=True)
class SitemapReference:
    """A ``<sitemap>`` entry in a sitemap index."""

    location: str
    last_modified: str


@dataclass(frozen=True)
class SitemapIndex:
    """A ``<sitemapindex>`` document."""

    sitemaps: Tuple[SitemapReference, ...]
    xmlns: str = SITEMAP_NAMESPACE


@dataclass(frozen=True)
class ChunkMetadata:
    """Derived facts about one chunk: file name, site root and freshness."""

    output_name: str
    base_url: str
    last_modified: str

    @property
    def location(self) -> str:
        """Absolute URL the chunk file is published under."""
        return self.base_url + self.output_name

    def to_reference(self) -> SitemapReference:
        return SitemapReference(location=self.location, last_modified=self.last_modified)
