"""Splits an ordered sequence of URL entries into bounded-size chunks."""

from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def iter_chunks(entries: Sequence[T], limit: int) -> Iterator[Tuple[T, ...]]:
    """Yield contiguous slices of at most *limit* entries, in order.

    Only the last chunk may be short and no chunk is ever empty.
    """
    if limit <= 0:
        raise ValueError(f"limit must be greater than 0, got {limit}")

    i = 0
    while i * limit < len(entries):
        yield tuple(entries[i * limit : (i + 1) * limit])
        i += 1


def partition(entries: Sequence[T], limit: int) -> List[Tuple[T, ...]]:
    """Return ``ceil(len(entries) / limit)`` chunks of *entries*."""
    return list(iter_chunks(entries, limit))
