"""Derives per-chunk file names, base URLs and last-modified values."""

from datetime import datetime
from typing import Optional, Sequence
from urllib.parse import urlsplit

from .errors import URLParseError
from .models import ChunkMetadata, UrlEntry

_INVALID_HOST_CHARS = set('<>"{}|\\^`')


def chunk_filename(base_filename: str, index: int) -> str:
    """File name of the chunk at 0-based *index* (names are 1-based)."""
    return f"{base_filename}-{index + 1}.xml"


def base_url(location: str) -> str:
    """Return ``<scheme>://<host>/`` for an absolute URL.

    Raises:
        URLParseError: If *location* cannot be parsed or has no scheme or host.
    """
    try:
        parts = urlsplit(location)
        # urlsplit defers port validation to this property
        parts.port
    except ValueError as e:
        raise URLParseError(f"error parsing URL {location!r}: {e}") from e

    # netloc without any user:password@ prefix, port kept
    host = parts.netloc.rpartition("@")[2]
    if not parts.scheme or not host:
        raise URLParseError(f"error parsing URL {location!r}: not an absolute URL")
    if any(c.isspace() or c in _INVALID_HOST_CHARS for c in host):
        raise URLParseError(
            f"error parsing URL {location!r}: invalid character in host name"
        )
    return f"{parts.scheme}://{host}/"


def current_timestamp(now: Optional[datetime] = None) -> str:
    """RFC 3339 timestamp with UTC offset, second precision."""
    if now is None:
        now = datetime.now()
    return now.astimezone().isoformat(timespec="seconds")


def derive_chunk_metadata(
    chunk: Sequence[UrlEntry],
    index: int,
    base_filename: str,
    now: Optional[datetime] = None,
) -> ChunkMetadata:
    """Describe a chunk by its position and its *last* entry.

    The last entry's location gives the base URL for the index entry, and its
    ``last_modified`` (or the current time when empty) stands for the chunk.
    """
    if not chunk:
        raise ValueError("cannot derive metadata for an empty chunk")

    last = chunk[-1]
    return ChunkMetadata(
        output_name=chunk_filename(base_filename, index),
        base_url=base_url(last.location),
        last_modified=last.last_modified or current_timestamp(now),
    )
