__all__ = (
    "TagReader",
    "read_tags",
    "validate_file",
    "TagResult",
    "TagType",
    "ID3v1Tag",
    "ID3v2Tag",
    "HeaderFlags",
    "Frame",
    "FrameWalker",
    "ByteReader",
    "ByteCursor",
    "ShortRead",
    "parse_id3v1",
    "parse_id3v2",
    "decode_synchsafe",
    "encode_synchsafe",
    "decode_text",
    "TextEncoding",
    "render_text",
    "result_to_dict",
    "Config",
    "ID3ReaderError",
    "InvalidAudioFileError",
)

from id3_reader.byteio import ByteCursor, ByteReader, ShortRead
from id3_reader.config import Config
from id3_reader.exceptions import ID3ReaderError, InvalidAudioFileError
from id3_reader.frames import FrameWalker
from id3_reader.id3v1 import parse_id3v1
from id3_reader.id3v2 import parse_id3v2
from id3_reader.models import Frame, HeaderFlags, ID3v1Tag, ID3v2Tag, TagResult, TagType
from id3_reader.render import render_text, result_to_dict
from id3_reader.resolver import TagReader, read_tags, validate_file
from id3_reader.synchsafe import decode_synchsafe, encode_synchsafe
from id3_reader.text import TextEncoding, decode_text
