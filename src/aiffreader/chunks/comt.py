"""
COMT Chunk - Comments
"""

from dataclasses import dataclass

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..utils.binary import IoBuffer


@dataclass(frozen=True)
class Comment:
    """
    A comment, optionally linked to a marker (marker_id 0 means none).
    timestamp is seconds since 1904-01-01.
    """
    timestamp: int
    marker_id: int
    text: str

    @classmethod
    def from_reader(cls, stream: IoBuffer) -> 'Comment':
        timestamp = stream.read_uint32()
        marker_id = stream.read_int16()
        count = stream.read_uint16()
        text = stream.read_bytes(count).decode('utf-8')
        if count % 2:
            stream.skip(1)
        return cls(timestamp=timestamp, marker_id=marker_id, text=text)

    @property
    def count(self) -> int:
        return len(self.text.encode('utf-8'))


@register_chunk(ids.COMMENTS)
@dataclass(frozen=True)
class CommentsChunk(AiffChunk):
    comments: tuple

    kind = ChunkKind.COMMENTS

    @classmethod
    def read(cls, chunk_id, size, stream: IoBuffer) -> 'CommentsChunk':
        num_comments = stream.read_uint16()
        comments = tuple(Comment.from_reader(stream) for _ in range(num_comments))
        return cls(size=size, comments=comments)

    @property
    def num_comments(self) -> int:
        return len(self.comments)
