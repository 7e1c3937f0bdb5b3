"""
Reads both ID3 tag variants from one file and classifies the result.

The ID3v2 header tag and the ID3v1 trailer occupy disjoint regions of the
file, so both are always parsed; ID3v2 wins the classification.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .byteio import ByteReader, ShortReadSink
from .exceptions import InvalidAudioFileError
from .frames import FrameWalker
from .id3v1 import parse_id3v1
from .id3v2 import parse_id3v2
from .models import TagResult

logger = logging.getLogger(__name__)


def validate_file(path: Path) -> None:
    """
    Raise InvalidAudioFileError unless ``path`` is a readable, non-empty
    regular file. Nothing is read from the file.
    """
    if not path.exists():
        raise InvalidAudioFileError(path, "file does not exist")
    if not path.is_file():
        raise InvalidAudioFileError(path, "not a regular file")
    if not os.access(path, os.R_OK):
        raise InvalidAudioFileError(path, "file is not readable")
    if path.stat().st_size == 0:
        raise InvalidAudioFileError(path, "file is empty")


class TagReader:
    """Reads the ID3 tags of a single audio file."""

    def __init__(self, path: Path | str, on_short_read: ShortReadSink | None = None) -> None:
        self.path = Path(path)
        self._on_short_read = on_short_read
        self._walker = FrameWalker()

    def read_tags(self) -> TagResult:
        """
        Validate the file, parse ID3v2 and ID3v1, and combine the results.

        Raises:
            InvalidAudioFileError: If the file fails validation
            OSError: If opening, seeking or reading fails
        """
        validate_file(self.path)

        with self.path.open("rb") as handle:
            reader = ByteReader(handle, on_short_read=self._on_short_read)
            v2 = parse_id3v2(reader, self._walker)
            v1 = parse_id3v1(reader)

        result = TagResult.from_tags(v1=v1, v2=v2)
        if not result.has_tags:
            logger.info("No ID3 tags found in %s", self.path)
        else:
            logger.debug("Read %s tags from %s", result.type, self.path)
        return result


def read_tags(path: Path | str, on_short_read: ShortReadSink | None = None) -> TagResult:
    """Read the ID3 tags of ``path``. See TagReader.read_tags."""
    return TagReader(path, on_short_read=on_short_read).read_tags()
