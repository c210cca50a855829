"""Serialize :class:`Manifest` models back to NZB documents."""

from __future__ import annotations

from pathlib import Path

from .models import FileEntry, Manifest

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
XML_DOCTYPE = (
    '<!DOCTYPE nzb PUBLIC "-//newzBin//DTD NZB 1.1//EN" '
    '"http://www.newzbin.com/DTD/nzb/nzb-1.1.dtd">\n'
)
NZB_NAMESPACE = "http://www.newzbin.com/DTD/2003/nzb"

# "&" must stay first so the entities produced below are not escaped again.
_XML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape the five predefined XML entities."""
    for raw, entity in _XML_ENTITIES:
        text = text.replace(raw, entity)
    return text


def render_manifest(manifest: Manifest) -> str:
    """Render a manifest as an NZB 1.1 document."""
    lines = [XML_DECLARATION, XML_DOCTYPE, f'<nzb xmlns="{NZB_NAMESPACE}">\n']
    if manifest.metadata:
        lines.append("  <head>\n")
        for meta in manifest.metadata:
            lines.append(f'    <meta type="{escape_xml(meta.type)}">{escape_xml(meta.value)}</meta>\n')
        lines.append("  </head>\n")
    for entry in manifest.files:
        lines.extend(_render_file(entry))
    lines.append("</nzb>\n")
    return "".join(lines)


def _render_file(entry: FileEntry) -> list[str]:
    lines = [
        f'  <file poster="{escape_xml(entry.poster)}" date="{entry.date}" '
        f'subject="{escape_xml(entry.subject)}">\n',
        "    <groups>\n",
    ]
    lines.extend(f"      <group>{escape_xml(group)}</group>\n" for group in entry.groups)
    lines.append("    </groups>\n")
    lines.append("    <segments>\n")
    lines.extend(
        f'      <segment number="{segment.number}" bytes="{segment.byte_count}">'
        f"{escape_xml(segment.message_id)}</segment>\n"
        for segment in entry.segments
    )
    lines.append("    </segments>\n")
    lines.append("  </file>\n")
    return lines


def write_manifest(manifest: Manifest, destination: Path) -> Path:
    """Write a manifest to ``destination`` as UTF-8 and return the path."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(render_manifest(manifest))
    return destination
