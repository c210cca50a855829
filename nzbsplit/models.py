"""Pydantic models describing NZB manifests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Segment(BaseModel):
    """One posted article making up part of a file."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, description="1-based segment ordinal.")
    byte_count: int = Field(ge=0, description="Encoded article size in bytes.")
    message_id: str = Field(default="", description="Usenet message identifier.")


class MetaEntry(BaseModel):
    """Free-form key/value pair from the NZB head block."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default="")
    value: str = Field(default="")


class FileEntry(BaseModel):
    """A posted file and the segments it was split into."""

    subject: str = Field(default="")
    poster: str = Field(default="")
    date: int = Field(default=0, description="Unix timestamp of the post.")
    groups: list[str] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)

    @property
    def size(self) -> int:
        """Total size of the file in bytes."""
        return sum(segment.byte_count for segment in self.segments)

    def add_segment(self, segment: Segment) -> None:
        self.segments.append(segment)

    def sort_segments(self) -> None:
        """Restore ascending segment number order."""
        self.segments.sort(key=lambda segment: segment.number)


class Manifest(BaseModel):
    """An NZB document: head metadata plus the files it lists."""

    metadata: list[MetaEntry] = Field(default_factory=list)
    files: list[FileEntry] = Field(default_factory=list)

    @property
    def total_size(self) -> int:
        return sum(entry.size for entry in self.files)

    @property
    def largest_file_size(self) -> int:
        return max((entry.size for entry in self.files), default=0)

    @property
    def is_empty(self) -> bool:
        return not self.files

    def add_file(self, entry: FileEntry) -> None:
        self.files.append(entry)

    def empty_copy(self) -> "Manifest":
        """Return a manifest with the same metadata and no files."""
        return Manifest(metadata=list(self.metadata))
