"""Tests for the ID3v2 header tag parser."""

from __future__ import annotations

import io

from id3_builders import AUDIO_PAYLOAD, build_frame, build_id3v2, build_text_frame

from id3_reader.byteio import ByteReader, ShortRead
from id3_reader.id3v2 import parse_id3v2
from id3_reader.models import HeaderFlags


def _reader(data: bytes, events: list[ShortRead] | None = None) -> ByteReader:
    return ByteReader(io.BytesIO(data), on_short_read=events.append if events is not None else None)


def test_parses_header_and_frames():
    body = build_text_frame("TIT2", "Song") + build_text_frame("TPE1", "Artist")
    tag = parse_id3v2(_reader(build_id3v2(body, major=3, minor=0, padding=100) + AUDIO_PAYLOAD))

    assert tag is not None
    assert tag.major_version == 3
    assert tag.minor_version == 0
    assert tag.version == "3.0"
    assert tag.tag_size == len(body) + 100
    assert tag.frames == {"TIT2": "Song", "TPE1": "Artist"}


def test_tag_size_excludes_header():
    body = build_text_frame("TIT2", "Song")
    data = build_id3v2(body)
    tag = parse_id3v2(_reader(data))

    assert tag is not None
    assert tag.tag_size == len(data) - 10


def test_version_4_is_read_as_is():
    tag = parse_id3v2(_reader(build_id3v2(build_text_frame("TIT2", "x"), major=4, minor=1)))
    assert tag is not None
    assert (tag.major_version, tag.minor_version) == (4, 1)


def test_flags_are_detected():
    data = build_id3v2(build_text_frame("TIT2", "x"), flags=0xE0)
    tag = parse_id3v2(_reader(data))

    assert tag is not None
    assert tag.flags == 0xE0
    assert tag.unsynchronisation
    assert tag.extended_header
    assert tag.experimental
    assert HeaderFlags.EXPERIMENTAL in tag.header_flags


def test_unknown_flag_bits_are_ignored():
    tag = parse_id3v2(_reader(build_id3v2(build_text_frame("TIT2", "x"), flags=0x1F)))

    assert tag is not None
    assert not tag.unsynchronisation
    assert not tag.extended_header
    assert not tag.experimental
    assert tag.frames == {"TIT2": "x"}


def test_unsynchronised_payload_is_not_decoded():
    body = build_frame("TIT2", b"\x00A\xff\x00B")
    tag = parse_id3v2(_reader(build_id3v2(body, flags=HeaderFlags.UNSYNCHRONISATION)))

    assert tag is not None
    assert tag.frames["TIT2"] == "A\xff\x00B"


def test_missing_marker_returns_none():
    assert parse_id3v2(_reader(AUDIO_PAYLOAD)) is None
    assert parse_id3v2(_reader(b"ID2\x03\x00\x00\x00\x00\x00\x00" + AUDIO_PAYLOAD)) is None


def test_file_shorter_than_header_returns_none():
    events: list[ShortRead] = []
    assert parse_id3v2(_reader(b"ID3\x03", events)) is None
    assert events == [ShortRead(position=0, expected=10, actual=4)]


def test_truncated_body_keeps_header_without_frames():
    events: list[ShortRead] = []
    data = b"ID3\x03\x00\x00" + b"\x00\x00\x03\x74" + build_text_frame("TIT2", "Song")
    tag = parse_id3v2(_reader(data, events))

    assert tag is not None
    assert tag.tag_size == 500
    assert tag.frames == {}
    assert events == [ShortRead(position=10, expected=500, actual=len(data) - 10)]


def test_empty_body():
    tag = parse_id3v2(_reader(build_id3v2(b"") + AUDIO_PAYLOAD))

    assert tag is not None
    assert tag.tag_size == 0
    assert tag.frames == {}


def test_walk_does_not_read_past_declared_size():
    """Frames in the audio area after the tag body are not part of the tag."""
    data = build_id3v2(build_text_frame("TIT2", "Inside")) + build_text_frame("TPE1", "Outside")
    tag = parse_id3v2(_reader(data))

    assert tag is not None
    assert tag.frames == {"TIT2": "Inside"}
