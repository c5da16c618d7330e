"""
APPL Chunk - Application specific data
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..errors import InvalidData


@register_chunk(ids.APPLICATION)
@dataclass(frozen=True)
class ApplicationSpecificChunk(AiffChunk):
    application_signature: bytes
    data: bytes

    kind = ChunkKind.APPLICATION

    @classmethod
    def read(cls, chunk_id, size, stream) -> 'ApplicationSpecificChunk':
        if size < 4:
            raise InvalidData(f"application chunk too small ({size} bytes)", chunk_id)
        signature = stream.read_chunk_id()
        data = stream.read_bytes(size - 4)
        return cls(size=size, application_signature=signature, data=data)
