"""Size ordering for file entries."""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Iterable

from .models import FileEntry


class SizeOrder(str, Enum):
    """Direction used when ordering file entries by size."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def compare_size(first: FileEntry, second: FileEntry, order: SizeOrder = SizeOrder.ASCENDING) -> int:
    """Return -1, 0 or 1 comparing two entries by size in the given order."""
    if order is SizeOrder.DESCENDING:
        first, second = second, first
    return (first.size > second.size) - (first.size < second.size)


def sort_by_size(files: Iterable[FileEntry], order: SizeOrder = SizeOrder.DESCENDING) -> list[FileEntry]:
    """Return entries ordered by size; equal sizes keep their input order."""
    return sorted(files, key=cmp_to_key(lambda a, b: compare_size(a, b, order)))
