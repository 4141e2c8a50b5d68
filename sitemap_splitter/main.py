"""Main entry point for the Sitemap Splitter application.

The default ``--limit`` can be set through a ``.env`` file in the working
directory:

```env
# .env
SITEMAP_SPLIT_LIMIT=10000
```

The variables are loaded via *python-dotenv*.
"""

import argparse
import os
import sys

from dotenv import load_dotenv

from .errors import SitemapSplitterError
from .models import MAX_URLS_PER_SITEMAP
from .splitter import SitemapSplitter, SplitterConfig


def default_limit() -> int:
    """Limit from ``SITEMAP_SPLIT_LIMIT`` or the protocol maximum."""
    load_dotenv()
    try:
        return int(os.getenv("SITEMAP_SPLIT_LIMIT", MAX_URLS_PER_SITEMAP))
    except ValueError:
        return MAX_URLS_PER_SITEMAP


def main():
    """Parses command-line arguments and runs the sitemap splitter."""
    parser = argparse.ArgumentParser(
        description="Split a large sitemap into smaller sitemaps plus a sitemap index."
    )
    parser.add_argument("sitemap_path", help="Path to the sitemap file to split.")
    parser.add_argument(
        "-n",
        "--limit",
        type=int,
        default=default_limit(),
        help="Maximum number of URLs per sitemap file "
        f"(default: $SITEMAP_SPLIT_LIMIT or {MAX_URLS_PER_SITEMAP}).",
    )

    args = parser.parse_args()

    # --- Argument Validation ---
    if args.limit <= 0:
        print("Error: --limit must be a positive integer.", file=sys.stderr)
        sys.exit(1)
    else:
        run_splitter(args.sitemap_path, args.limit)


def run_splitter(sitemap_path: str, limit: int) -> None:
    """Splits *sitemap_path*, exiting with status 1 on any splitter error."""
    try:
        config = SplitterConfig(source_path=sitemap_path, limit=limit)
        result = SitemapSplitter(config=config).run()
    except SitemapSplitterError as e:
        print(f"An error occurred during splitting: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print(f"Sitemap successfully split! Index written to {result.index_path}")


if __name__ == "__main__":
    main()
