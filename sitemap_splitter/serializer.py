"""Module for rendering sitemap documents as XML bytes."""

import xml.etree.ElementTree as ET

from .errors import SerializationError
from .models import SitemapIndex, UrlEntry, UrlSet

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _sub_element(parent: ET.Element, tag: str, text: str) -> None:
    if text:
        ET.SubElement(parent, tag).text = text


class SitemapSerializer:
    """Builds indented sitemap XML with a standard declaration header.

    Namespaces are written as plain ``xmlns`` attributes on the root so the
    output keeps the default namespace instead of ElementTree's ``ns0:``
    prefixes.
    """

    indent = "  "

    def _url_element(self, parent: ET.Element, entry: UrlEntry) -> None:
        url = ET.SubElement(parent, "url")
        ET.SubElement(url, "loc").text = entry.location
        _sub_element(url, "lastmod", entry.last_modified)
        _sub_element(url, "changefreq", entry.change_frequency)
        _sub_element(url, "priority", entry.priority)

    def build_urlset(self, urlset: UrlSet) -> ET.Element:
        root = ET.Element("urlset", {"xmlns": urlset.xmlns, "xmlns:xhtml": urlset.xhtml})
        for entry in urlset.urls:
            self._url_element(root, entry)
        return root

    def build_index(self, index: SitemapIndex) -> ET.Element:
        root = ET.Element("sitemapindex", {"xmlns": index.xmlns})
        for ref in index.sitemaps:
            sitemap = ET.SubElement(root, "sitemap")
            ET.SubElement(sitemap, "loc").text = ref.location
            ET.SubElement(sitemap, "lastmod").text = ref.last_modified
        return root

    def to_bytes(self, root: ET.Element) -> bytes:
        """Encode *root* as UTF-8 XML, one element per line."""
        try:
            ET.indent(root, space=self.indent)
            body = ET.tostring(root, encoding="unicode")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"error marshaling XML: {e}") from e
        return (XML_HEADER + body).encode("utf-8")

    def serialize_urlset(self, urlset: UrlSet) -> bytes:
        return self.to_bytes(self.build_urlset(urlset))

    def serialize_index(self, index: SitemapIndex) -> bytes:
        return self.to_bytes(self.build_index(index))
