"""
AIFF chunk decoders.

Importing this package fills the tag registry in ..base.
"""
from .comm import CommonChunk
from .ssnd import SoundDataChunk, SOUND_HEADER_SIZE
from .mark import MarkerChunk, Marker
from .inst import InstrumentChunk, Loop, PlayMode
from .midi import MIDIDataChunk
from .aesd import AudioRecordingChunk, AES_CHANNEL_STATUS_SIZE
from .appl import ApplicationSpecificChunk
from .comt import CommentsChunk, Comment
from .text import TextChunk, TextChunkType
from .fver import FormatVersionChunk
from .id3 import ID3v2Chunk, parse_id3v1

__all__ = [
    'CommonChunk',
    'SoundDataChunk', 'SOUND_HEADER_SIZE',
    'MarkerChunk', 'Marker',
    'InstrumentChunk', 'Loop', 'PlayMode',
    'MIDIDataChunk',
    'AudioRecordingChunk', 'AES_CHANNEL_STATUS_SIZE',
    'ApplicationSpecificChunk',
    'CommentsChunk', 'Comment',
    'TextChunk', 'TextChunkType',
    'FormatVersionChunk',
    'ID3v2Chunk', 'parse_id3v1',
]
