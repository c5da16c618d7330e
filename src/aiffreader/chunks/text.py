"""
NAME / AUTH / (c)  / ANNO Chunks - Free text
"""

from dataclasses import dataclass
from enum import Enum

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk


class TextChunkType(Enum):
    NAME = ids.NAME
    AUTHOR = ids.AUTHOR
    COPYRIGHT = ids.COPYRIGHT
    ANNOTATION = ids.ANNOTATION


@register_chunk(*ids.TEXT_IDS)
@dataclass(frozen=True)
class TextChunk(AiffChunk):
    chunk_type: TextChunkType
    text: str

    kind = ChunkKind.TEXT

    @classmethod
    def read(cls, chunk_id, size, stream) -> 'TextChunk':
        text = stream.read_bytes(size).decode('utf-8')
        return cls(size=size, chunk_type=TextChunkType(chunk_id), text=text)
