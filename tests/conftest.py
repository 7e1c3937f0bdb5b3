"""Pytest configuration and shared fixtures for id3-reader tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from id3_builders import (
    AUDIO_PAYLOAD,
    build_frame,
    build_id3v1,
    build_id3v2,
    build_text_frame,
)

# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def write_audio(tmp_path: Path) -> Callable[..., Path]:
    """Write an audio file made of optional ID3v2 header, audio bytes and ID3v1 trailer."""

    def _write(
        v2: bytes = b"",
        v1: bytes = b"",
        audio: bytes = AUDIO_PAYLOAD,
        name: str = "track.mp3",
    ) -> Path:
        path = tmp_path / name
        path.write_bytes(v2 + audio + v1)
        return path

    return _write


@pytest.fixture
def tagged_file(write_audio: Callable[..., Path]) -> Path:
    """File carrying both an ID3v2.3 tag and an ID3v1.1 trailer."""
    body = (
        build_text_frame("TIT2", "Distant Wonders")
        + build_text_frame("TPE1", "Test Artist", encoding=3)
        + build_text_frame("TALB", "Test Album", encoding=1)
        + build_frame("APIC", b"\x00image/png\x00\x03\x00" + b"\x89PNG")
    )
    return write_audio(
        v2=build_id3v2(body, padding=64),
        v1=build_id3v1(
            title="Distant Wonders",
            artist="Test Artist",
            album="Test Album",
            year="2024",
            comment="v1 comment",
            track=7,
            genre=13,
        ),
    )
