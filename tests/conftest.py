import pytest

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _make_urlset_xml(entries, namespace=SITEMAP_NS):
    """Builds a <urlset> document from (loc, lastmod, changefreq, priority) tuples.

    Missing or empty trailing values are left out of the entry.
    """
    tags = ("loc", "lastmod", "changefreq", "priority")
    urls = []
    for entry in entries:
        if isinstance(entry, str):
            entry = (entry,)
        children = "".join(
            f"<{tag}>{value}</{tag}>" for tag, value in zip(tags, entry) if value
        )
        urls.append(f"  <url>{children}</url>")
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    body = "\n".join(urls)
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<urlset{xmlns}>\n{body}\n</urlset>'


def _example_entries(count, lastmod=True):
    """``count`` entries on https://example.com with distinct lastmod dates."""
    return [
        (
            f"https://example.com/page{i}",
            f"2024-01-{i:02d}T00:00:00+00:00" if lastmod else "",
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def write_sitemap(tmp_path):
    """Writes a sitemap into tmp_path and returns its path.

    Accepts either a list of entries (see ``urlset_xml``) or raw XML.
    """

    def _write(content, name="sitemap.xml"):
        path = tmp_path / name
        if isinstance(content, (list, tuple)):
            content = _make_urlset_xml(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def urlset_xml():
    """Builder for <urlset> documents, see ``_make_urlset_xml``."""
    return _make_urlset_xml


@pytest.fixture
def url_entries():
    """Builder for numbered https://example.com entries."""
    return _example_entries
