"""Module for reading sitemap documents from the local filesystem."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .errors import ParseError, ReadError


class SitemapReader:
    """Reads a sitemap file and parses it into an XML element tree."""

    def read_bytes(self, path: str) -> bytes:
        """Return the raw contents of *path*.

        Raises
        ------
        ReadError
            If the file is missing, unreadable or a directory.
        """
        try:
            with open(path, "rb") as fp:
                return fp.read()
        except OSError as e:
            print(f"Error reading sitemap {path}: {e}")
            raise ReadError(f"error reading sitemap file {path}: {e}") from e

    def parse_bytes(self, data: bytes, source: str = "<bytes>") -> ET.Element:
        """Parse *data* into the document's root element."""
        try:
            return ET.fromstring(data)
        except ET.ParseError as e:
            # Retry once without a byte order mark or a mismatched
            # encoding declaration in front of UTF-8 content.
            try:
                return ET.fromstring(data.decode("utf-8-sig"))
            except (ET.ParseError, UnicodeDecodeError):
                pass
            print(f"Error parsing XML from {source}: {e}")
            raise ParseError(f"error parsing XML in {source}: {e}") from e

    def read_sitemap(self, path: str) -> ET.Element:
        """Read and parse the sitemap at *path*."""
        return self.parse_bytes(self.read_bytes(path), source=path)
