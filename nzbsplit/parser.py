"""Read NZB documents into :class:`Manifest` models."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from .errors import ParseError
from .models import FileEntry, Manifest, MetaEntry, Segment

ROOT_TAG = "nzb"


def parse_manifest_file(path: str | Path) -> Manifest:
    """Parse the NZB file stored at ``path``."""
    try:
        with Path(path).open("rb") as handle:
            return parse_manifest(handle)
    except OSError as exc:
        raise ParseError(f"Unable to read {path}: {exc.strerror or exc}") from exc


def parse_manifest(source: bytes | BinaryIO) -> Manifest:
    """Parse an NZB document from raw bytes or a binary stream."""
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        root = ET.parse(stream).getroot()
    except ET.ParseError as exc:
        raise ParseError(f"Malformed NZB document: {exc}") from exc

    if _local_name(root.tag) != ROOT_TAG:
        raise ParseError(f"Expected a <{ROOT_TAG}> root element, found <{_local_name(root.tag)}>.")

    manifest = Manifest()
    for child in root:
        name = _local_name(child.tag)
        if name == "head":
            manifest.metadata.extend(_parse_head(child))
        elif name == "file":
            manifest.add_file(_parse_file(child))
    return manifest


def _parse_head(element: ET.Element) -> list[MetaEntry]:
    return [
        MetaEntry(type=meta.get("type", ""), value=_text(meta))
        for meta in element
        if _local_name(meta.tag) == "meta"
    ]


def _parse_file(element: ET.Element) -> FileEntry:
    subject = element.get("subject", "")
    entry = FileEntry(
        subject=subject,
        poster=element.get("poster", ""),
        date=_int_attribute(element, "date", context=subject),
    )
    for child in element:
        name = _local_name(child.tag)
        if name == "groups":
            entry.groups.extend(_text(group) for group in child if _local_name(group.tag) == "group")
        elif name == "segments":
            for segment in child:
                if _local_name(segment.tag) == "segment":
                    entry.add_segment(_parse_segment(segment, subject))
    return entry


def _parse_segment(element: ET.Element, subject: str) -> Segment:
    number = _int_attribute(element, "number", context=subject)
    byte_count = _int_attribute(element, "bytes", context=subject)
    if number < 1 or byte_count < 0:
        raise ParseError(f"Invalid segment {number} ({byte_count} bytes) in '{subject}'.")
    return Segment(number=number, byte_count=byte_count, message_id=_text(element))


def _int_attribute(element: ET.Element, name: str, *, context: str) -> int:
    raw = element.get(name)
    if raw is None:
        raise ParseError(f"Missing '{name}' attribute on <{_local_name(element.tag)}> in '{context}'.")
    try:
        return int(raw.strip())
    except ValueError:
        raise ParseError(
            f"Attribute '{name}' on <{_local_name(element.tag)}> in '{context}' is not an integer: {raw!r}"
        ) from None


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
