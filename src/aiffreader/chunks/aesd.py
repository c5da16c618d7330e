"""
AESD Chunk - Audio recording (AES channel status data)
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk

AES_CHANNEL_STATUS_SIZE = 24


@register_chunk(ids.RECORDING)
@dataclass(frozen=True)
class AudioRecordingChunk(AiffChunk):
    """24 bytes of AES channel status, as defined by AES3."""
    data: bytes

    kind = ChunkKind.RECORDING
    fixed_size = AES_CHANNEL_STATUS_SIZE

    @classmethod
    def read(cls, chunk_id, size, stream) -> 'AudioRecordingChunk':
        return cls(size=size, data=stream.read_bytes(AES_CHANNEL_STATUS_SIZE))
