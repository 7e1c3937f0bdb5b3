"""Human-readable and JSON-ready renderings of tag results."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from .models import HeaderFlags, ID3v1Tag, ID3v2Tag, TagResult

FLAG_LABELS = {
    HeaderFlags.UNSYNCHRONISATION: "Unsynchronisation is set",
    HeaderFlags.EXTENDED_HEADER: "Extended header is present",
    HeaderFlags.EXPERIMENTAL: "Experimental tag",
}


def render_id3v2(tag: ID3v2Tag) -> str:
    lines = [
        f"Version: {tag.version}",
        f"Size: {tag.tag_size} bytes",
    ]
    lines.extend(label for flag, label in FLAG_LABELS.items() if tag.flags & flag)
    lines.extend(f"{frame_id}: {value}" for frame_id, value in tag.frames.items())
    return "\n".join(lines)


def render_id3v1(tag: ID3v1Tag) -> str:
    return "\n".join(
        [
            f"Title: {tag.title}",
            f"Artist: {tag.artist}",
            f"Album: {tag.album}",
            f"Year: {tag.year}",
            f"Comment: {tag.comment}",
            f"Track: {tag.track}",
            f"Genre: {tag.genre}",
        ]
    )


def render_text(result: TagResult) -> str:
    """Render a result as the plain-text report shown by the CLI."""
    parts = ["ID3 Tag Information:"]
    if result.v2 is not None:
        parts.append("\n=== ID3v2 Tags ===\n" + render_id3v2(result.v2))
    if result.v1 is not None:
        parts.append("\n=== ID3v1 Tags ===\n" + render_id3v1(result.v1))
    if not result.has_tags:
        parts.append("No ID3 tags found.")
    return "\n".join(parts)


def result_to_dict(result: TagResult) -> dict[str, Any]:
    """Convert a result to plain JSON-serialisable types."""
    v2: dict[str, Any] | None = None
    if result.v2 is not None:
        tag = result.v2
        v2 = {
            "major_version": tag.major_version,
            "minor_version": tag.minor_version,
            "flags": tag.flags,
            "tag_size": tag.tag_size,
            "frames": dict(tag.frames),
            "version": tag.version,
            "flag_names": [
                flag.name.lower() for flag in FLAG_LABELS if tag.flags & flag and flag.name
            ],
        }
    return {
        "type": result.type.value,
        "v2": v2,
        "v1": asdict(result.v1) if result.v1 is not None else None,
    }
