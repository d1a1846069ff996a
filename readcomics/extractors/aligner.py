"""
Positional Aligner

Merges parallel per-field sequences into records by index.

Two rules hold for every alignment pass:
- The pass is as long as the shortest sequence; nothing is padded.
- When a record cannot be built (the builder returns None), the pass stops.
  Records built before that point are kept; the failing row and every row
  after it are dropped.
"""

from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar('T')


def align(*sequences: Iterable) -> Iterator[Tuple]:
    """Advance one cursor per sequence in lockstep, stopping at the first exhausted one."""
    return zip(*sequences)


def align_records(
    rows: Iterable[Sequence],
    build: Callable[..., Optional[T]],
    on_abort: Optional[Callable[[int, Sequence], None]] = None
) -> List[T]:
    """
    Build one record per aligned row, aborting at the first row that fails.

    Args:
        rows: Aligned rows, e.g. align(names, links, thumbnails)
        build: Called as build(*row); returns the record or None when a
            required field cannot be derived
        on_abort: Called with (index, row) when the pass is aborted

    Returns:
        The records built before the first failure
    """
    records: List[T] = []
    for index, row in enumerate(rows):
        record = build(*row)
        if record is None:
            if on_abort is not None:
                on_abort(index, row)
            break
        records.append(record)
    return records
