"""Module for splitting a sitemap into chunk files plus a sitemap index."""

import os
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .errors import InvalidConfiguration, WriteError
from .metadata import derive_chunk_metadata
from .models import INDEX_FILENAME, ChunkMetadata, SitemapIndex, UrlSet
from .parser import SitemapParser
from .partitioner import partition
from .reader import SitemapReader
from .serializer import SitemapSerializer


@dataclass(frozen=True)
class SplitterConfig:
    """Configuration for the SitemapSplitter."""

    source_path: str
    limit: int

    def __post_init__(self):
        if not isinstance(self.source_path, str) or not self.source_path:
            raise InvalidConfiguration("sitemap path is required")
        # bool is an int subclass but never a meaningful limit
        if (
            not isinstance(self.limit, int)
            or isinstance(self.limit, bool)
            or self.limit <= 0
        ):
            raise InvalidConfiguration(
                f"limit must be a positive integer, got {self.limit!r}"
            )

    @property
    def output_dir(self) -> str:
        """Directory the chunk and index files are written to."""
        return os.path.dirname(self.source_path) or "."

    @property
    def base_filename(self) -> str:
        """Source file name with its extension stripped."""
        return os.path.splitext(os.path.basename(self.source_path))[0]


@dataclass(frozen=True)
class SplitResult:
    """Files produced by a successful split, in chunk order."""

    chunk_paths: Tuple[str, ...]
    index_path: str
    chunks: Tuple[ChunkMetadata, ...]


class SitemapSplitter:
    """Orchestrates reading, partitioning and writing of sitemap chunks.

    Reader, parser and serializer can be injected for testing; the clock
    supplies the fallback last-modified time for chunks whose last entry has
    none:

    >>> splitter = SitemapSplitter(cfg, clock=lambda: fixed_datetime)
    """

    def __init__(
        self,
        config: SplitterConfig,
        *,
        reader: Optional[SitemapReader] = None,
        parser: Optional[SitemapParser] = None,
        serializer: Optional[SitemapSerializer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config

        # Use injected dependencies or fall back to concrete implementations
        self.reader = reader if reader is not None else SitemapReader()
        self.parser = parser if parser is not None else SitemapParser()
        self.serializer = serializer if serializer is not None else SitemapSerializer()
        self.clock = clock if clock is not None else datetime.now

    # --- Output ---
    def _write_file(self, path: str, data: bytes) -> None:
        """Writes *data* to *path*, replacing any existing file."""
        try:
            with open(path, "wb") as f:
                f.write(data)
        except IOError as e:
            raise WriteError(f"error writing sitemap file {path}: {e}") from e
        print(f"  Wrote {path}")

    # --- Core Processing Logic ---
    def load_urlset(self) -> UrlSet:
        """Reads and parses the source sitemap (must hold at least one URL)."""
        root = self.reader.read_sitemap(self.config.source_path)
        return self.parser.parse_urlset(root)

    def _write_chunk(self, chunk, index: int) -> Tuple[str, ChunkMetadata]:
        """Derives metadata for one chunk and writes its urlset file."""
        meta = derive_chunk_metadata(
            chunk, index, self.config.base_filename, now=self.clock()
        )
        path = os.path.join(self.config.output_dir, meta.output_name)
        self._write_file(path, self.serializer.serialize_urlset(UrlSet(urls=chunk)))
        return path, meta

    def _write_index(self, chunks: List[ChunkMetadata]) -> str:
        """Writes the sitemap index referencing every chunk in order."""
        index = SitemapIndex(sitemaps=tuple(meta.to_reference() for meta in chunks))
        path = os.path.join(self.config.output_dir, INDEX_FILENAME)
        self._write_file(path, self.serializer.serialize_index(index))
        return path

    def split(self) -> SplitResult:
        """Splits the source sitemap into chunk files and a sitemap index.

        Any failure aborts the remaining steps. Chunk files written before
        the failure are left on disk.
        """
        print(f"Splitting sitemap: {self.config.source_path}")
        urlset = self.load_urlset()
        chunks = partition(urlset.urls, self.config.limit)
        print(
            f"  Found {len(urlset.urls)} URLs, writing {len(chunks)} sitemap(s) "
            f"of at most {self.config.limit} URLs."
        )

        chunk_paths: List[str] = []
        metadata: List[ChunkMetadata] = []
        for i, chunk in enumerate(chunks):
            path, meta = self._write_chunk(chunk, i)
            chunk_paths.append(path)
            metadata.append(meta)

        index_path = self._write_index(metadata)
        return SplitResult(
            chunk_paths=tuple(chunk_paths),
            index_path=index_path,
            chunks=tuple(metadata),
        )

    def run(self) -> SplitResult:
        """Runs ``split`` and reports how long it took."""
        start_time = time.time()
        result = self.split()
        total_time = time.time() - start_time
        print(f"\nFinished splitting in {total_time:.2f} seconds.")
        return result
