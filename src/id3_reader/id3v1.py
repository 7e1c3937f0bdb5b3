"""ID3v1 / ID3v1.1 trailer tag in the last 128 bytes of a file."""

from __future__ import annotations

import logging

from .byteio import ByteCursor, ByteReader
from .models import ID3v1Tag
from .text import trim

logger = logging.getLogger(__name__)

ID3V1_IDENTIFIER = b"TAG"
ID3V1_TAG_SIZE = 128

# Field widths in on-disk order, after the 3-byte identifier
TITLE_SIZE = 30
ARTIST_SIZE = 30
ALBUM_SIZE = 30
YEAR_SIZE = 4
COMMENT_SIZE = 28


def parse_id3v1(reader: ByteReader) -> ID3v1Tag | None:
    """
    Parse the ID3v1 block at the end of the file, or return None.

    ID3v1.1 stores the track number in the last comment byte, preceded by a
    zero byte. When that zero byte is set the tag is plain ID3v1 and both
    bytes belong to the comment.
    """
    file_size = reader.size()
    if file_size < ID3V1_TAG_SIZE:
        return None

    data = reader.read(file_size - ID3V1_TAG_SIZE, ID3V1_TAG_SIZE)
    if data is None:
        return None

    r = ByteCursor(data)
    if r.bytes(3) != ID3V1_IDENTIFIER:
        return None

    title = r.latin1(TITLE_SIZE)
    artist = r.latin1(ARTIST_SIZE)
    album = r.latin1(ALBUM_SIZE)
    year = r.latin1(YEAR_SIZE)
    comment = r.latin1(COMMENT_SIZE)
    zero_byte = r.u8()
    track = r.u8()
    genre = r.u8()

    if zero_byte != 0:
        logger.debug("ID3v1 tag without track number; treating last two bytes as comment")
        comment += chr(zero_byte) + chr(track)
        track = 0

    return ID3v1Tag(
        title=trim(title),
        artist=trim(artist),
        album=trim(album),
        year=trim(year),
        comment=trim(comment),
        track=track,
        genre=genre,
    )
