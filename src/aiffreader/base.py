"""
AIFF chunk base class and decoder registry.

Every decoder follows the same contract: record the offset just past the
tag, validate the tag, read the size, then either skip the payload or
decode it. Both paths consume the same bytes, including the pad byte that
follows an odd-length payload.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Type

from .errors import InvalidData, InvalidID, InvalidSize
from .ids import ChunkID
from .utils.binary import IoBuffer

logger = logging.getLogger(__name__)


class ChunkKind(Enum):
    COMMON = "common"
    SOUND = "sound"
    MARKER = "marker"
    INSTRUMENT = "instrument"
    MIDI = "midi"
    RECORDING = "recording"
    APPLICATION = "application"
    COMMENTS = "comments"
    TEXT = "text"
    FORMAT_VERSION = "format_version"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one decoder call.

    offset is the stream position right after the tag, where the size field
    starts. chunk is None when the decoder ran in skip mode.
    """
    offset: int
    chunk: Optional['AiffChunk'] = None

    @property
    def skipped(self) -> bool:
        return self.chunk is None


def skip_pad(io: IoBuffer, size: int, tolerate_missing: bool = True):
    """Consume the pad byte after an odd-length payload."""
    if size % 2 == 0:
        return
    if tolerate_missing and not io.has_more:
        logger.debug(f"missing pad byte at offset {io.position}")
        return
    io.skip(1)


@dataclass(frozen=True)
class AiffChunk:
    """
    Base class for decoded sub-chunks of a FORM.

    Subclasses set chunk_ids/kind and implement read(), which receives a
    buffer over exactly the declared payload.
    """
    size: int

    chunk_ids: ClassVar[tuple] = ()
    kind: ClassVar[Optional[ChunkKind]] = None
    fixed_size: ClassVar[Optional[int]] = None

    @classmethod
    def parse(cls, io: IoBuffer, chunk_id: ChunkID, read_data: bool = True,
              tolerate_missing_pad: bool = True) -> ParseResult:
        """Decode (or skip) one chunk whose tag has already been read."""
        offset = io.position

        if chunk_id not in cls.chunk_ids:
            raise InvalidID(chunk_id)

        size = io.read_int32()
        if size < 0:
            raise InvalidData(f"negative chunk size {size}", chunk_id)
        if cls.fixed_size is not None and size != cls.fixed_size:
            raise InvalidSize(cls.fixed_size, size)

        if not read_data:
            io.skip(size)
            skip_pad(io, size, tolerate_missing_pad)
            return ParseResult(offset)

        payload = io.read_bytes(size)
        skip_pad(io, size, tolerate_missing_pad)

        try:
            chunk = cls.read(chunk_id, size, IoBuffer.from_bytes(payload))
        except EOFError as e:
            raise InvalidData(f"truncated payload ({e})", chunk_id) from e
        except UnicodeDecodeError as e:
            raise InvalidData(f"bad text encoding ({e.reason})", chunk_id) from e

        logger.debug(f"{chunk_id!r}: decoded {size} bytes at offset {offset}")
        return ParseResult(offset, chunk)

    @classmethod
    def read(cls, chunk_id: ChunkID, size: int, stream: IoBuffer) -> 'AiffChunk':
        """Build the chunk value from its payload."""
        raise NotImplementedError


# Chunk decoder registry - maps 4-byte tags to chunk classes
CHUNK_TYPES: dict[bytes, Type[AiffChunk]] = {}


def register_chunk(*type_codes: bytes):
    """Decorator to register a chunk type for one or more tags."""
    def decorator(cls):
        cls.chunk_ids = tuple(type_codes)
        for code in type_codes:
            CHUNK_TYPES[code] = cls
        return cls
    return decorator


def get_chunk_class(type_code: bytes) -> Optional[Type[AiffChunk]]:
    """Get the decoder for a tag, or None if the tag is not recognized."""
    return CHUNK_TYPES.get(bytes(type_code))
