"""Choose a splitting strategy, run it, and write the resulting parts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, Field, ValidationError, model_validator

from .config import SplitSettings
from .errors import InvalidArgument
from .models import Manifest
from .naming import FileNamer
from .sizes import format_size
from .splitters import CapacitySplitter, CountSplitter, Splitter
from .writer import write_manifest

logger = logging.getLogger(__name__)


class SplitConstraint(BaseModel):
    """Either a maximum part size in bytes or a number of parts."""

    max_size: int | None = Field(default=None, ge=1)
    count: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _exactly_one(self) -> "SplitConstraint":
        if (self.max_size is None) == (self.count is None):
            raise ValueError("Exactly one of a maximum split size or a number of parts is required.")
        return self

    @classmethod
    def build(cls, *, max_size: int | None = None, count: int | None = None) -> "SplitConstraint":
        """Validate a constraint, reporting problems as :class:`InvalidArgument`."""
        try:
            return cls(max_size=max_size, count=count)
        except ValidationError as exc:
            messages = "; ".join(error["msg"] for error in exc.errors())
            raise InvalidArgument(messages) from exc


def select_splitter(constraint: SplitConstraint) -> Splitter:
    if constraint.max_size is not None:
        return CapacitySplitter(constraint.max_size)
    assert constraint.count is not None
    return CountSplitter(constraint.count)


def split_manifest(manifest: Manifest, constraint: SplitConstraint) -> list[Manifest]:
    """Split ``manifest`` and restore segment order in every part."""
    parts = select_splitter(constraint).split(manifest)
    for part in parts:
        for entry in part.files:
            entry.sort_segments()
    return parts


def write_parts(parts: Iterable[Manifest], source_path: Path, settings: SplitSettings) -> list[Path]:
    """Write each part next to its siblings and return the written paths.

    The first write failure propagates; parts already written are left in place.
    """
    namer = FileNamer(
        source_path.name,
        extension=settings.extension,
        divider=settings.part_divider,
        zero_padding=settings.zero_padding,
    )
    written: list[Path] = []
    for index, part in enumerate(parts):
        destination = namer.part_path(settings.output_dir, index)
        logger.info(
            'Writing "%s" containing %d files totalling %s',
            destination.name,
            len(part.files),
            format_size(part.total_size),
        )
        written.append(write_manifest(part, destination))
    return written
