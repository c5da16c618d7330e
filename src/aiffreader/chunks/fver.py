"""
FVER Chunk - Format version

Only defined for AIFF-C, but some writers emit it in plain AIFF files.
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk


@register_chunk(ids.FVER)
@dataclass(frozen=True)
class FormatVersionChunk(AiffChunk):
    timestamp: int

    kind = ChunkKind.FORMAT_VERSION

    @classmethod
    def read(cls, chunk_id, size, stream) -> 'FormatVersionChunk':
        return cls(size=size, timestamp=stream.read_uint32())
