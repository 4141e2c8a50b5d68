import pytest

from sitemap_splitter.errors import SerializationError
from sitemap_splitter.models import SitemapIndex, SitemapReference, UrlEntry, UrlSet
from sitemap_splitter.parser import SitemapParser
from sitemap_splitter.serializer import SitemapSerializer


def test_serialize_urlset_layout():
    """Tests header, indentation, namespaces and omission of empty fields."""
    urlset = UrlSet(
        urls=(
            UrlEntry("https://example.com/a", "2024-01-01"),
            UrlEntry("https://example.com/b", change_frequency="daily", priority="0.5"),
        )
    )

    expected = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9" '
        'xmlns:xhtml="http://www.w3.org/1999/xhtml">\n'
        "  <url>\n"
        "    <loc>https://example.com/a</loc>\n"
        "    <lastmod>2024-01-01</lastmod>\n"
        "  </url>\n"
        "  <url>\n"
        "    <loc>https://example.com/b</loc>\n"
        "    <changefreq>daily</changefreq>\n"
        "    <priority>0.5</priority>\n"
        "  </url>\n"
        "</urlset>"
    )
    assert SitemapSerializer().serialize_urlset(urlset) == expected.encode("utf-8")


def test_serialize_index_layout():
    index = SitemapIndex(
        sitemaps=(
            SitemapReference("https://example.com/sitemap-1.xml", "2024-01-10"),
            SitemapReference("https://example.com/sitemap-2.xml", "2024-01-20"),
        )
    )

    expected = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        "  <sitemap>\n"
        "    <loc>https://example.com/sitemap-1.xml</loc>\n"
        "    <lastmod>2024-01-10</lastmod>\n"
        "  </sitemap>\n"
        "  <sitemap>\n"
        "    <loc>https://example.com/sitemap-2.xml</loc>\n"
        "    <lastmod>2024-01-20</lastmod>\n"
        "  </sitemap>\n"
        "</sitemapindex>"
    )
    assert SitemapSerializer().serialize_index(index) == expected.encode("utf-8")


def test_serialize_escapes_text():
    urlset = UrlSet(urls=(UrlEntry("https://example.com/?a=1&b=<2>"),))
    data = SitemapSerializer().serialize_urlset(urlset)

    assert b"<loc>https://example.com/?a=1&amp;b=&lt;2&gt;</loc>" in data


def test_serialize_non_ascii_as_utf8():
    urlset = UrlSet(urls=(UrlEntry("https://example.com/café"),))
    data = SitemapSerializer().serialize_urlset(urlset)

    assert "café".encode("utf-8") in data


def test_urlset_round_trip():
    """Tests serialized documents parse back to the same entries."""
    urlset = UrlSet(
        urls=(
            UrlEntry("https://example.com/a", "2024-01-01T10:00:00+00:00", "weekly", "1.0"),
            UrlEntry("https://example.com/b?x=1&y=2"),
            UrlEntry("https://example.com/c", priority="0.1"),
        )
    )
    data = SitemapSerializer().serialize_urlset(urlset)

    assert SitemapParser().parse_bytes(data) == urlset


def test_serialize_encoder_failure_raises_serialization_error():
    urlset = UrlSet(urls=(UrlEntry(location=42),))

    with pytest.raises(SerializationError):
        SitemapSerializer().serialize_urlset(urlset)
