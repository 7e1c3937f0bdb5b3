"""Value types produced by the ID3 parsers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntFlag, StrEnum
from types import MappingProxyType


class TagType(StrEnum):
    """Which tag determines the classification of a file."""

    ID3V1 = "id3v1"
    ID3V2 = "id3v2"
    NONE = "none"


class HeaderFlags(IntFlag):
    """ID3v2 header flag bits. Unknown bits are kept but never interpreted."""

    UNSYNCHRONISATION = 0x80
    EXTENDED_HEADER = 0x40
    EXPERIMENTAL = 0x20


@dataclass(frozen=True)
class Frame:
    """A single ID3v2 frame as found in the tag body."""

    id: str
    raw_value: bytes

    @property
    def is_text(self) -> bool:
        return self.id.startswith("T")


@dataclass(frozen=True)
class ID3v2Tag:
    """
    Decoded ID3v2 header plus its text frames.

    ``tag_size`` is the synchsafe-decoded body size, excluding the 10-byte
    header. ``frames`` maps frame ids (e.g. ``TIT2``) to decoded text and is
    read-only.
    """

    major_version: int
    minor_version: int
    flags: int
    tag_size: int
    frames: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "frames", MappingProxyType(dict(self.frames)))

    @property
    def version(self) -> str:
        return f"{self.major_version}.{self.minor_version}"

    @property
    def header_flags(self) -> HeaderFlags:
        return HeaderFlags(self.flags)

    @property
    def unsynchronisation(self) -> bool:
        return bool(self.flags & HeaderFlags.UNSYNCHRONISATION)

    @property
    def extended_header(self) -> bool:
        return bool(self.flags & HeaderFlags.EXTENDED_HEADER)

    @property
    def experimental(self) -> bool:
        return bool(self.flags & HeaderFlags.EXPERIMENTAL)


@dataclass(frozen=True)
class ID3v1Tag:
    """Decoded 128-byte ID3v1 trailer. ``genre`` is the raw genre index."""

    title: str
    artist: str
    album: str
    year: str
    comment: str
    track: int
    genre: int


@dataclass(frozen=True)
class TagResult:
    """
    Outcome of reading one file.

    ``type`` is ID3V2 whenever a v2 tag exists, ID3V1 when only a v1 tag
    exists, NONE otherwise. Both payloads are kept when both are present.
    Use ``TagResult.from_tags``; inconsistent direct construction raises.
    """

    type: TagType
    v1: ID3v1Tag | None = None
    v2: ID3v2Tag | None = None

    def __post_init__(self) -> None:
        expected = self.classify(self.v1, self.v2)
        if self.type != expected:
            raise ValueError(
                f"Tag type {self.type!s} does not match payloads (expected {expected!s})"
            )

    @staticmethod
    def classify(v1: ID3v1Tag | None, v2: ID3v2Tag | None) -> TagType:
        if v2 is not None:
            return TagType.ID3V2
        if v1 is not None:
            return TagType.ID3V1
        return TagType.NONE

    @classmethod
    def from_tags(cls, v1: ID3v1Tag | None, v2: ID3v2Tag | None) -> TagResult:
        return cls(type=cls.classify(v1, v2), v1=v1, v2=v2)

    @property
    def has_tags(self) -> bool:
        return self.type is not TagType.NONE
