"""Module for turning sitemap XML into ``UrlSet`` documents."""

import xml.etree.ElementTree as ET
from typing import Dict, Optional

from .errors import EmptyDocument, ParseError
from .models import UrlEntry, UrlSet
from .reader import SitemapReader

# <url> child element -> UrlEntry field
_URL_FIELDS = {
    "loc": "location",
    "lastmod": "last_modified",
    "changefreq": "change_frequency",
    "priority": "priority",
}

# Fields whose surrounding whitespace is dropped; the rest pass through verbatim
_STRIPPED_FIELDS = {"location", "last_modified"}


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


class SitemapParser:
    """Parses XML content into sitemap document structures."""

    def is_sitemap_index(self, element: ET.Element) -> bool:
        """Checks if the given XML element is a sitemap index.

        Args:
            element: The root XML element of the document.

        Returns:
            True if the element is a sitemap index, False otherwise.
        """
        return local_name(element.tag) == "sitemapindex"

    def is_urlset(self, element: ET.Element) -> bool:
        """Checks if the given XML element is a ``<urlset>`` root."""
        return local_name(element.tag) == "urlset"

    def parse_url(self, element: ET.Element, position: int) -> UrlEntry:
        """Builds a ``UrlEntry`` from a ``<url>`` element.

        Unknown child elements (``xhtml:link``, ``image:image`` ...) and
        attributes are ignored.
        """
        values: Dict[str, str] = {}
        for child in element:
            field = _URL_FIELDS.get(local_name(child.tag))
            if field is not None:
                text = child.text or ""
                values[field] = text.strip() if field in _STRIPPED_FIELDS else text

        if not values.get("location"):
            raise ParseError(f"<url> entry {position + 1} has no <loc>")
        return UrlEntry(**values)

    def parse_urlset(self, element: ET.Element) -> UrlSet:
        """Extracts the URL entries of a ``<urlset>`` document.

        Args:
            element: The root XML element.

        Returns:
            A ``UrlSet`` with the entries in document order.

        Raises:
            ParseError: If the root is not a ``<urlset>`` or an entry lacks a
                location.
            EmptyDocument: If the document holds no ``<url>`` entries.
        """
        if self.is_sitemap_index(element):
            raise ParseError("document is already a sitemap index, expected <urlset>")
        if not self.is_urlset(element):
            raise ParseError(
                f"unexpected root element <{local_name(element.tag)}>, expected <urlset>"
            )

        urls = tuple(
            self.parse_url(child, position)
            for position, child in enumerate(
                c for c in element if local_name(c.tag) == "url"
            )
        )
        if not urls:
            raise EmptyDocument("no URLs found in sitemap")
        return UrlSet(urls=urls)

    def parse_bytes(
        self, data: bytes, reader: Optional[SitemapReader] = None
    ) -> UrlSet:
        """Parses an in-memory ``<urlset>`` document."""
        reader = reader if reader is not None else SitemapReader()
        return self.parse_urlset(reader.parse_bytes(data))
