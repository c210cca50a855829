"""Output file naming for split parts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXTENSION = ".nzb"
DEFAULT_DIVIDER = "_"


@dataclass(slots=True)
class FileNamer:
    """Derive part file names from the original manifest name.

    ``movie.nzb`` with the default divider becomes ``movie_0.nzb``,
    ``movie_1.nzb`` and so on; a ``zero_padding`` of 3 gives ``movie_000.nzb``.
    """

    original_name: str
    extension: str = DEFAULT_EXTENSION
    divider: str = DEFAULT_DIVIDER
    zero_padding: int = 0

    @property
    def base_name(self) -> str:
        if self.extension and self.original_name.lower().endswith(self.extension.lower()):
            return self.original_name[: -len(self.extension)]
        return self.original_name

    def part_name(self, index: int) -> str:
        return f"{self.base_name}{self.divider}{self._pad(index)}{self.extension}"

    def part_path(self, directory: Path, index: int) -> Path:
        return directory / self.part_name(index)

    def _pad(self, index: int) -> str:
        if self.zero_padding > 1:
            return f"{index:0{self.zero_padding}d}"
        return str(index)
