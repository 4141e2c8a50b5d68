"""Exceptions raised while splitting a sitemap.

Every error aborts the current split. Callers that only care about success
or failure can catch ``SitemapSplitterError``.
"""


class SitemapSplitterError(Exception):
    """Base class for all sitemap splitter failures."""


class InvalidConfiguration(SitemapSplitterError, ValueError):
    """The splitter was constructed with a bad path or limit."""


class ReadError(SitemapSplitterError):
    """The source sitemap could not be read."""


class ParseError(SitemapSplitterError):
    """The source is not well-formed XML or is not a ``<urlset>``."""


class EmptyDocument(SitemapSplitterError):
    """The source parsed but holds no ``<url>`` entries."""


class URLParseError(SitemapSplitterError):
    """A chunk's representative location is not an absolute URL."""


class SerializationError(SitemapSplitterError):
    """A document could not be encoded as XML."""


class WriteError(SitemapSplitterError):
    """An output file could not be written."""
