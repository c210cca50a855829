"""Bin-packing strategies that distribute file entries across manifests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from .errors import ConstraintViolation, InvalidArgument
from .models import Manifest
from .ordering import SizeOrder, sort_by_size
from .sizes import format_size

logger = logging.getLogger(__name__)


class Splitter(Protocol):
    """Common interface for manifest splitting strategies."""

    def split(self, manifest: Manifest) -> list[Manifest]:
        ...


@dataclass(frozen=True, slots=True)
class CapacitySplitter:
    """First-fit packing where no part may exceed ``capacity_bytes``.

    As many parts are created as first fit needs. Raises
    :class:`ConstraintViolation` when the manifest is already smaller than the
    cap or when a single file is larger than the cap.
    """

    capacity_bytes: int

    def split(self, manifest: Manifest) -> list[Manifest]:
        return split_by_capacity(manifest, self.capacity_bytes)


@dataclass(frozen=True, slots=True)
class CountSplitter:
    """Best-fit packing into exactly ``count`` parts.

    The per-part cap is only a target: when no part has room the file goes to
    the least overloaded part, so this strategy never fails for a valid count.
    """

    count: int

    def split(self, manifest: Manifest) -> list[Manifest]:
        return split_by_count(manifest, self.count)


def split_by_capacity(manifest: Manifest, capacity_bytes: int) -> list[Manifest]:
    if capacity_bytes <= 0:
        raise InvalidArgument("The maximum split size must be positive.")
    if manifest.total_size < capacity_bytes:
        raise ConstraintViolation("The size of the NZB is smaller than the maximum split size.")
    ordered = sort_by_size(manifest.files, SizeOrder.DESCENDING)
    for entry in ordered:
        if entry.size > capacity_bytes:
            raise ConstraintViolation(
                f"The file '{entry.subject}' ({format_size(entry.size)}) is larger than "
                f"the maximum split size ({format_size(capacity_bytes)})."
            )

    parts: list[Manifest] = [manifest.empty_copy()]
    for entry in ordered:
        index = first_fit_index(parts, entry.size, capacity_bytes)
        if index is None:
            parts.append(manifest.empty_copy())
            index = len(parts) - 1
            logger.debug("Opened part %d for '%s'", index, entry.subject)
        parts[index].add_file(entry)
    return parts


def split_by_count(manifest: Manifest, count: int) -> list[Manifest]:
    if count <= 0:
        raise InvalidArgument("The number of parts must be at least 1.")
    capacity = max(manifest.total_size // count, manifest.largest_file_size)
    logger.debug("Target size per part: %s", format_size(capacity))

    parts = [manifest.empty_copy() for _ in range(count)]
    for entry in sort_by_size(manifest.files, SizeOrder.DESCENDING):
        parts[best_fit_index(parts, entry.size, capacity)].add_file(entry)
    return parts


def first_fit_index(parts: Sequence[Manifest], size: int, capacity: int) -> int | None:
    """Return the first part with room for ``size`` bytes, or None."""
    for index, part in enumerate(parts):
        if part.total_size + size <= capacity:
            return index
    return None


def best_fit_index(parts: Sequence[Manifest], size: int, capacity: int) -> int:
    """Return the part left with the least non-negative room after adding ``size``.

    When every part would overflow, the part with the most remaining room
    (the least overflow) is returned. Ties resolve to the lowest index.
    """
    remaining = [capacity - part.total_size - size for part in parts]
    best: int | None = None
    for index, value in enumerate(remaining):
        if value >= 0 and (best is None or value < remaining[best]):
            best = index
    if best is not None:
        return best
    return max(range(len(remaining)), key=lambda index: remaining[index])
