"""Text decoding for ID3 string fields and text frames."""

from __future__ import annotations

from enum import IntEnum

# Everything up to and including U+0020: whitespace, NUL padding and other
# control characters.
PADDING_CHARS = "".join(chr(c) for c in range(0x21))

UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")


class TextEncoding(IntEnum):
    """Encoding byte at the start of an ID3v2 text frame payload."""

    LATIN1 = 0
    UTF16 = 1
    UTF16BE = 2
    UTF8 = 3


CODECS = {
    TextEncoding.LATIN1: "latin-1",
    TextEncoding.UTF16: "utf-16",
    TextEncoding.UTF16BE: "utf-16-be",
    TextEncoding.UTF8: "utf-8",
}

DEFAULT_CODEC = CODECS[TextEncoding.LATIN1]


def trim(value: str) -> str:
    """Strip whitespace and control characters from both ends."""
    return value.strip(PADDING_CHARS)


def codec_for(encoding: int) -> str:
    """Codec name for an encoding byte; unknown bytes fall back to Latin-1."""
    try:
        return CODECS[TextEncoding(encoding)]
    except ValueError:
        return DEFAULT_CODEC


def decode_text(payload: bytes) -> str:
    """
    Decode a text frame payload (encoding byte followed by the string bytes).

    Embedded NULs survive; only the ends are trimmed.
    """
    if not payload:
        return ""
    codec = codec_for(payload[0])
    raw = payload[1:]
    if codec == "utf-16" and not raw.startswith(UTF16_BOMS):
        # No BOM: ID3 readers treat the string as big-endian
        codec = "utf-16-be"
    return trim(raw.decode(codec, errors="replace"))
