"""
SSND Chunk - Sound data
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..errors import InvalidData
from ..utils.binary import IoBuffer

# offset + block size fields that precede the samples
SOUND_HEADER_SIZE = 8


@register_chunk(ids.SOUND)
@dataclass(frozen=True)
class SoundDataChunk(AiffChunk):
    """
    Raw sample bytes.

    The declared chunk size counts the offset and block size fields, so
    sound_data holds size - 8 bytes.
    """
    offset: int
    block_size: int
    sound_data: bytes

    kind = ChunkKind.SOUND

    @classmethod
    def read(cls, chunk_id, size, stream: IoBuffer) -> 'SoundDataChunk':
        if size < SOUND_HEADER_SIZE:
            raise InvalidData(f"sound chunk too small ({size} bytes)", chunk_id)

        offset = stream.read_uint32()
        block_size = stream.read_uint32()
        sound_data = stream.read_bytes(size - SOUND_HEADER_SIZE)

        return cls(size=size, offset=offset, block_size=block_size, sound_data=sound_data)

    def __repr__(self) -> str:
        return (f"SoundDataChunk(size={self.size}, offset={self.offset}, "
                f"block_size={self.block_size}, sound_data=<{len(self.sound_data)} bytes>)")
