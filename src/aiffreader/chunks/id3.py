"""
ID3v2 tag embedded in an AIFF stream.

The tag itself is handed to mutagen; this module only frames it: marker,
version check, synchsafe size and the optional footer.
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from mutagen import MutagenError
from mutagen.id3 import ID3, ParseID3v1

from .. import ids
from ..base import ParseResult
from ..errors import InvalidData, InvalidID, InvalidID3Version
from ..utils.binary import IoBuffer

logger = logging.getLogger(__name__)

ID3_HEADER_SIZE = 10
ID3_FOOTER_SIZE = 10
ID3_FLAG_FOOTER = 0x10
ID3V1_SIZE = 128


def decode_synchsafe(data: bytes) -> int:
    """Decode a 4-byte synchsafe integer (7 bits per byte)."""
    value = 0
    for byte in data:
        if byte & 0x80:
            raise InvalidData(f"bad synchsafe integer {data.hex()}", ids.ID3)
        value = (value << 7) | byte
    return value


def check_version(version: bytes):
    # major versions up to 2.4, no minor versions known
    if version[0] > 4 or version[1] != 0:
        raise InvalidID3Version(version)


@dataclass(frozen=True)
class ID3v2Chunk:
    """A parsed ID3v2 tag plus the framing it was found in."""
    version: tuple
    size: int
    tag: ID3

    @classmethod
    def parse(cls, io: IoBuffer, chunk_id: bytes, read_data: bool = True) -> ParseResult:
        """
        Decode (or skip) a tag. The stream must sit on the 'ID3' marker;
        the recorded offset is the marker position.
        """
        offset = io.position

        if ids.find_marker(chunk_id, ids.ID3) < 0:
            raise InvalidID(chunk_id)

        marker = io.read_bytes(3)
        if marker != ids.ID3:
            raise InvalidID(marker)

        version = io.read_bytes(2)
        check_version(version)

        flags = io.read_uint8()
        size_bytes = io.read_bytes(4)
        body_size = decode_synchsafe(size_bytes)
        if flags & ID3_FLAG_FOOTER:
            body_size += ID3_FOOTER_SIZE

        if not io.has_bytes(body_size):
            raise InvalidData(f"tag body of {body_size} bytes runs past the end of the stream", ids.ID3)

        if not read_data:
            io.skip(body_size)
            return ParseResult(offset)

        header = marker + version + bytes([flags]) + size_bytes
        data = header + io.read_bytes(body_size)

        try:
            tag = ID3(BytesIO(data), load_v1=False)
        except (MutagenError, ValueError) as e:
            raise InvalidData(f"tag codec failed ({e})", ids.ID3) from e

        logger.debug(f"ID3v2.{version[0]}.{version[1]}: {len(tag)} frames at offset {offset}")
        return ParseResult(offset, cls(version=(2, version[0], version[1]), size=len(data), tag=tag))


def parse_id3v1(data: bytes) -> Optional[dict]:
    """Parse a 128-byte ID3v1 block into ID3v2 frames, or None."""
    if len(data) != ID3V1_SIZE or not data.startswith(ids.ID3V1):
        return None
    return ParseID3v1(data)
