"""Synchsafe integers used by ID3v2 size fields.

Each of the four bytes carries only its low 7 bits, so the encoded value
never contains an MPEG sync marker (0xFF followed by a byte >= 0xE0).
"""

from __future__ import annotations

SYNCHSAFE_WIDTH = 4
SYNCHSAFE_MAX = (1 << 28) - 1


def decode_synchsafe(data: bytes) -> int:
    """
    Decode a 4-byte synchsafe integer.

    The high bit of every byte is ignored rather than rejected.
    """
    if len(data) != SYNCHSAFE_WIDTH:
        raise ValueError(f"Synchsafe integer needs {SYNCHSAFE_WIDTH} bytes, got {len(data)}")
    b0, b1, b2, b3 = data
    return ((b0 & 0x7F) << 21) | ((b1 & 0x7F) << 14) | ((b2 & 0x7F) << 7) | (b3 & 0x7F)


def encode_synchsafe(value: int) -> bytes:
    """Encode ``0 <= value < 2**28`` as a 4-byte synchsafe integer."""
    if not 0 <= value <= SYNCHSAFE_MAX:
        raise ValueError(f"Value {value} out of synchsafe range 0..{SYNCHSAFE_MAX}")
    return bytes(
        [
            (value >> 21) & 0x7F,
            (value >> 14) & 0x7F,
            (value >> 7) & 0x7F,
            value & 0x7F,
        ]
    )
