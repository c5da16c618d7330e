"""
COMM Chunk - Common format description
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..extended import EXTENDED_SIZE, parse_extended_precision
from ..utils.binary import IoBuffer


@register_chunk(ids.COMMON)
@dataclass(frozen=True)
class CommonChunk(AiffChunk):
    """
    Channel count, frame count, bit depth and sample rate.
    sample_size is a signed 16-bit field even though it holds a bit width.
    """
    num_channels: int
    num_sample_frames: int
    sample_size: int
    sample_rate: float

    kind = ChunkKind.COMMON

    @classmethod
    def read(cls, chunk_id, size, stream: IoBuffer) -> 'CommonChunk':
        num_channels = stream.read_int16()
        num_sample_frames = stream.read_uint32()
        sample_size = stream.read_int16()
        # fails the whole chunk if the rate does not decode
        sample_rate = parse_extended_precision(stream.read_bytes(EXTENDED_SIZE))

        return cls(
            size=size,
            num_channels=num_channels,
            num_sample_frames=num_sample_frames,
            sample_size=sample_size,
            sample_rate=sample_rate,
        )

    @property
    def bytes_per_point(self) -> int:
        """Bytes holding one sample point (bit depth rounded up)."""
        return (self.sample_size + 7) // 8

    @property
    def num_sample_points(self) -> int:
        return self.num_sample_frames * self.num_channels
