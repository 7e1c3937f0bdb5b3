"""ID3v2 header tag at the start of a file."""

from __future__ import annotations

import logging
import struct

from .byteio import ByteReader
from .frames import FrameWalker
from .models import ID3v2Tag
from .synchsafe import decode_synchsafe

logger = logging.getLogger(__name__)

ID3V2_IDENTIFIER = b"ID3"
ID3V2_HEADER_SIZE = 10
ID3V2_HEADER = struct.Struct(">3sBBB4s")


def parse_id3v2(reader: ByteReader, walker: FrameWalker | None = None) -> ID3v2Tag | None:
    """
    Parse the ID3v2 tag at offset 0, or return None if there is none.

    A body shorter than the declared size still yields the tag (the header
    was valid) but without frames.
    """
    header = reader.read(0, ID3V2_HEADER_SIZE)
    if header is None:
        return None

    identifier, major, minor, flags, raw_size = ID3V2_HEADER.unpack(header)
    if identifier != ID3V2_IDENTIFIER:
        return None

    tag_size = decode_synchsafe(raw_size)
    logger.debug("Found ID3v2.%d.%d tag, flags=0x%02x, size=%d", major, minor, flags, tag_size)

    body = reader.read(ID3V2_HEADER_SIZE, tag_size)
    frames = (walker or FrameWalker()).read_text_frames(body) if body is not None else {}

    return ID3v2Tag(
        major_version=major,
        minor_version=minor,
        flags=flags,
        tag_size=tag_size,
        frames=frames,
    )
