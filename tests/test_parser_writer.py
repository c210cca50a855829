from __future__ import annotations

from pathlib import Path

import pytest

from nzbsplit.errors import ParseError
from nzbsplit.models import FileEntry, Manifest, MetaEntry, Segment
from nzbsplit.parser import parse_manifest, parse_manifest_file
from nzbsplit.writer import escape_xml, render_manifest, write_manifest

SAMPLE_NZB = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE nzb PUBLIC "-//newzBin//DTD NZB 1.1//EN" "http://www.newzbin.com/DTD/nzb/nzb-1.1.dtd">
<nzb xmlns="http://www.newzbin.com/DTD/2003/nzb">
  <head>
    <meta type="title"> Your File! </meta>
    <meta type="tag">Example</meta>
    <meta type="tag">Second</meta>
  </head>
  <file poster="Joe Bloggs &lt;bloggs@nowhere.example&gt;" date="1071674882" subject="Here's your file!  abc-mr2a.r01 (1/2)">
    <groups>
      <group>alt.binaries.newzbin</group>
      <group>alt.binaries.mojo</group>
    </groups>
    <segments>
      <segment bytes="54649" number="2">123456789abcdef@news.newzbin.com</segment>
      <segment bytes="102394" number="1">abcdef123456789@news.newzbin.com</segment>
    </segments>
  </file>
  <file poster="Joe Bloggs" date="1071674883" subject="abc-mr2a.r02">
    <groups>
      <group>alt.binaries.newzbin</group>
    </groups>
    <segments>
      <segment bytes="100" number="1">second@news.newzbin.com</segment>
    </segments>
  </file>
</nzb>
"""


def test_parse_manifest_reads_metadata_and_files() -> None:
    manifest = parse_manifest(SAMPLE_NZB)

    assert manifest.metadata == [
        MetaEntry(type="title", value="Your File!"),
        MetaEntry(type="tag", value="Example"),
        MetaEntry(type="tag", value="Second"),
    ]
    assert len(manifest.files) == 2
    first = manifest.files[0]
    assert first.poster == "Joe Bloggs <bloggs@nowhere.example>"
    assert first.date == 1071674882
    assert first.groups == ["alt.binaries.newzbin", "alt.binaries.mojo"]
    assert [segment.number for segment in first.segments] == [2, 1]
    assert first.segments[1].message_id == "abcdef123456789@news.newzbin.com"
    assert first.size == 54649 + 102394
    assert manifest.total_size == first.size + 100


def test_parse_manifest_without_namespace_or_head(tmp_path: Path) -> None:
    path = tmp_path / "plain.nzb"
    path.write_bytes(
        b'<nzb><file poster="p" date="1" subject="s"><groups><group>g</group></groups>'
        b'<segments><segment bytes="10" number="1">id@x</segment></segments></file></nzb>'
    )

    manifest = parse_manifest_file(path)

    assert manifest.metadata == []
    assert manifest.total_size == 10


@pytest.mark.parametrize(
    "document",
    [
        b"<nzb><file>",
        b"<html></html>",
        b'<nzb><file poster="p" subject="s"></file></nzb>',
        b'<nzb><file date="x" subject="s"></file></nzb>',
        b'<nzb><file date="1"><segments><segment number="1">id</segment></segments></file></nzb>',
        b'<nzb><file date="1"><segments><segment number="0" bytes="5">id</segment></segments></file></nzb>',
    ],
)
def test_parse_manifest_rejects_bad_documents(document: bytes) -> None:
    with pytest.raises(ParseError):
        parse_manifest(document)


def test_parse_manifest_file_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ParseError):
        parse_manifest_file(tmp_path / "missing.nzb")


def test_escape_xml_escapes_ampersand_first() -> None:
    assert escape_xml("a & b") == "a &amp; b"
    assert escape_xml("<tag attr=\"x\">'q'</tag>") == "&lt;tag attr=&quot;x&quot;&gt;&apos;q&apos;&lt;/tag&gt;"
    assert escape_xml("&lt;") == "&amp;lt;"


def test_render_manifest_layout() -> None:
    entry = FileEntry(subject='Tom & "Jerry"', poster="<poster>", date=42, groups=["a.b.c"])
    entry.add_segment(Segment(number=1, byte_count=10, message_id="m1@news"))
    manifest = Manifest(metadata=[MetaEntry(type="title", value="R&D")])
    manifest.add_file(entry)

    text = render_manifest(manifest)

    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<!DOCTYPE nzb PUBLIC')
    assert '<nzb xmlns="http://www.newzbin.com/DTD/2003/nzb">' in text
    assert '    <meta type="title">R&amp;D</meta>\n' in text
    assert '  <file poster="&lt;poster&gt;" date="42" subject="Tom &amp; &quot;Jerry&quot;">\n' in text
    assert "      <group>a.b.c</group>\n" in text
    assert '      <segment number="1" bytes="10">m1@news</segment>\n' in text
    assert text.rstrip().endswith("</nzb>")


def test_render_manifest_omits_empty_head() -> None:
    assert "<head>" not in render_manifest(Manifest())


def test_written_manifest_parses_back(tmp_path: Path) -> None:
    source = parse_manifest(SAMPLE_NZB)

    path = write_manifest(source, tmp_path / "nested" / "copy.nzb")
    reparsed = parse_manifest_file(path)

    assert reparsed.metadata == source.metadata
    assert [entry.subject for entry in reparsed.files] == [entry.subject for entry in source.files]
    assert reparsed.files[0].poster == source.files[0].poster
    assert reparsed.total_size == source.total_size
