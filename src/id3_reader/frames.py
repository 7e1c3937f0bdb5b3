from __future__ import annotations

import logging
from collections.abc import Iterator

from .byteio import ByteCursor
from .models import Frame
from .text import decode_text, trim

logger = logging.getLogger(__name__)

# 4-byte id + 4-byte size + 2 flag bytes
FRAME_HEADER_SIZE = 10


class FrameWalker:
    """
    Walks an ID3v2 tag body frame by frame.

    The walk ends at the first header that is blank, declares a size of zero,
    or runs past the end of the body. Whatever follows is treated as padding.
    """

    def walk(self, body: bytes) -> Iterator[Frame]:
        r = ByteCursor(body)

        while r.remaining() >= FRAME_HEADER_SIZE:
            header_start = r.tell()
            frame_id = r.latin1(4)
            frame_size = r.u32()  # plain big-endian, not synchsafe
            r.bytes(2)  # flags

            if frame_size <= 0 or not trim(frame_id) or frame_size > r.remaining():
                r.seek(header_start)
                logger.debug(
                    "Stopping frame walk at offset %d (id=%r, size=%d, remaining=%d)",
                    header_start,
                    frame_id,
                    frame_size,
                    r.remaining(),
                )
                return

            yield Frame(id=frame_id, raw_value=r.bytes(frame_size))

    def read_text_frames(self, body: bytes) -> dict[str, str]:
        """Decode every text frame in ``body``; later duplicates win."""
        frames: dict[str, str] = {}
        for frame in self.walk(body):
            if not frame.is_text:
                logger.debug(
                    "Skipping non-text frame %s (%d bytes)", frame.id, len(frame.raw_value)
                )
                continue
            frames[frame.id] = decode_text(frame.raw_value)
        return frames
