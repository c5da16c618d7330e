"""
MARK Chunk - Markers
"""

from dataclasses import dataclass
from typing import Optional

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..utils.binary import IoBuffer


@dataclass(frozen=True)
class Marker:
    """A named position in the sound data, in sample frames."""
    id: int
    position: int
    name: str

    @classmethod
    def from_reader(cls, stream: IoBuffer) -> 'Marker':
        marker_id = stream.read_int16()
        position = stream.read_uint32()
        name = stream.read_pascal_string()
        return cls(id=marker_id, position=position, name=name)


@register_chunk(ids.MARKER)
@dataclass(frozen=True)
class MarkerChunk(AiffChunk):
    markers: tuple

    kind = ChunkKind.MARKER

    @classmethod
    def read(cls, chunk_id, size, stream: IoBuffer) -> 'MarkerChunk':
        num_markers = stream.read_uint16()
        markers = tuple(Marker.from_reader(stream) for _ in range(num_markers))
        return cls(size=size, markers=markers)

    @property
    def num_markers(self) -> int:
        return len(self.markers)

    def get(self, marker_id: int) -> Optional[Marker]:
        """Find a marker by id."""
        for marker in self.markers:
            if marker.id == marker_id:
                return marker
        return None
