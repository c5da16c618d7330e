"""aiffreader - AIFF container decoding."""
from .aiff_file import AiffReader, ReaderState
from .base import AiffChunk, ChunkKind, ParseResult, register_chunk, get_chunk_class, CHUNK_TYPES
from .config import ReaderConfig
from .errors import ChunkError, InvalidID, InvalidFormType, InvalidID3Version, InvalidSize, InvalidData
from .extended import parse_extended_precision
from .form import FormChunk
from .samples import extract_samples, extract_frames
from .chunks import (
    CommonChunk, SoundDataChunk,
    MarkerChunk, Marker,
    InstrumentChunk, Loop, PlayMode,
    MIDIDataChunk, AudioRecordingChunk, ApplicationSpecificChunk,
    CommentsChunk, Comment,
    TextChunk, TextChunkType,
    FormatVersionChunk, ID3v2Chunk,
)

__version__ = "0.1.0"

__all__ = [
    'AiffReader', 'ReaderState', 'ReaderConfig',
    'AiffChunk', 'ChunkKind', 'ParseResult', 'register_chunk', 'get_chunk_class', 'CHUNK_TYPES',
    'ChunkError', 'InvalidID', 'InvalidFormType', 'InvalidID3Version', 'InvalidSize', 'InvalidData',
    'parse_extended_precision',
    'FormChunk',
    'extract_samples', 'extract_frames',
    'CommonChunk', 'SoundDataChunk',
    'MarkerChunk', 'Marker',
    'InstrumentChunk', 'Loop', 'PlayMode',
    'MIDIDataChunk', 'AudioRecordingChunk', 'ApplicationSpecificChunk',
    'CommentsChunk', 'Comment',
    'TextChunk', 'TextChunkType',
    'FormatVersionChunk', 'ID3v2Chunk',
]
