"""
MIDI Chunk - Embedded MIDI data
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk


@register_chunk(ids.MIDI)
@dataclass(frozen=True)
class MIDIDataChunk(AiffChunk):
    data: bytes

    kind = ChunkKind.MIDI

    @classmethod
    def read(cls, chunk_id, size, stream) -> 'MIDIDataChunk':
        return cls(size=size, data=stream.read_bytes(size))
