"""
AIFF File Reader

Scans the byte stream top to bottom, dispatching every sub-chunk tag to its
decoder. Two scan modes share the same loop: locate() only skips chunks to
record where they start, read_all() decodes them into a FormChunk. Offsets
recorded by either scan let read_chunk() jump straight back to a chunk.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np

from . import ids
from .base import ParseResult, get_chunk_class, skip_pad
from .chunks import ID3v2Chunk, parse_id3v1
from .chunks.id3 import ID3V1_SIZE
from .config import ReaderConfig
from .errors import ChunkError, InvalidData, InvalidID
from .form import FormChunk
from .samples import extract_frames, extract_samples
from .utils.binary import IoBuffer, ByteOrder

logger = logging.getLogger(__name__)

ID3_KEY = ids.chunk_name(ids.ID3)
ID3V1_KEY = ids.chunk_name(ids.ID3V1)


class ReaderState(Enum):
    INITIAL = "initial"
    FORM_PARSED = "form_parsed"
    SCANNING = "scanning"
    DONE = "done"
    FAILED = "failed"


@dataclass
class AiffReader:
    """
    Reader for one AIFF byte stream.

    Owns the offset cache (tag string -> position just past the tag) and the
    decoded FormChunk. Not safe to share between threads.
    """
    io: IoBuffer
    filename: str = ""
    config: ReaderConfig = field(default_factory=ReaderConfig)

    form: Optional[FormChunk] = None
    id3: Optional[ID3v2Chunk] = None
    id3v1_frames: Optional[dict] = None
    state: ReaderState = ReaderState.INITIAL

    _offsets: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_stream(cls, stream: BinaryIO, filename: str = "",
                    config: Optional[ReaderConfig] = None) -> 'AiffReader':
        """Wrap a seekable binary stream without reading it."""
        return cls(io=IoBuffer(stream, ByteOrder.BIG_ENDIAN), filename=filename,
                   config=config or ReaderConfig())

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "",
                   config: Optional[ReaderConfig] = None) -> 'AiffReader':
        return cls(io=IoBuffer.from_bytes(data, ByteOrder.BIG_ENDIAN), filename=filename,
                   config=config or ReaderConfig())

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  config: Optional[ReaderConfig] = None) -> 'AiffReader':
        return cls(io=IoBuffer.from_file(str(path), ByteOrder.BIG_ENDIAN), filename=str(path),
                   config=config or ReaderConfig())

    @classmethod
    def read(cls, path: Union[str, Path], config: Optional[ReaderConfig] = None) -> 'AiffReader':
        """Open an AIFF file and decode everything in it."""
        reader = cls.from_file(path, config)
        reader.read_all()
        return reader

    # Scans

    def locate(self) -> dict[str, int]:
        """Skip-only scan. Fills the offset cache and returns a copy of it."""
        self._scan(read_data=False)
        return self.offsets

    def read_all(self) -> FormChunk:
        """Decode every chunk into a new FormChunk."""
        self.form = self._scan(read_data=True)
        return self.form

    def _scan(self, read_data: bool) -> FormChunk:
        self.state = ReaderState.INITIAL
        if read_data:
            self.form = None
            self.id3 = None
            self.id3v1_frames = None
        self.io.rewind()

        try:
            form_id = self.io.read_chunk_id()
            form = FormChunk.parse(self.io, form_id)
            self._offsets[ids.chunk_name(form_id)] = form.offset
            self.state = ReaderState.FORM_PARSED

            self.state = ReaderState.SCANNING
            while self.io.has_bytes(4):
                chunk_id = self.io.read_chunk_id()
                self._step(form, chunk_id, read_data)
        except Exception:
            self.state = ReaderState.FAILED
            raise

        self.state = ReaderState.DONE
        logger.debug(f"buffer complete {self.io.remaining} byte(s) left")
        return form

    def _step(self, form: FormChunk, chunk_id: bytes, read_data: bool):
        """Handle one tag; the stream sits just past it."""
        chunk_class = get_chunk_class(chunk_id)

        if chunk_class is not None:
            result = chunk_class.parse(self.io, chunk_id, read_data, self.config.tolerate_missing_pad)
            self._offsets[ids.chunk_name(chunk_id)] = result.offset
            if result.chunk is not None:
                form.add(result.chunk)
        elif chunk_id in ids.ID3_CHUNKS:
            result = self._parse_id3_chunk(chunk_id, read_data, recover=True)
            self._offsets[ids.chunk_name(chunk_id)] = result.offset
            if result.chunk is not None:
                self.id3 = result.chunk
        elif ids.find_marker(chunk_id, ids.ID3) >= 0:
            self._scan_id3(chunk_id, read_data)
        elif self._is_id3v1(chunk_id):
            self._scan_id3v1(chunk_id, read_data)
        else:
            self._skip_unknown(chunk_id)

    # ID3

    def _scan_id3(self, chunk_id: bytes, read_data: bool):
        """
        ID3v2 data that is not chunk aligned. The marker can start at byte 0
        or 1 of the tag window. A bad header resumes 3 bytes past the marker;
        a tag whose body the codec rejects resumes after the whole tag.
        """
        marker_start = self.io.position - 4 + ids.find_marker(chunk_id, ids.ID3)
        self.io.position = marker_start

        try:
            ID3v2Chunk.parse(self.io, ids.ID3, read_data=False)
        except (ChunkError, EOFError) as e:
            logger.warning(f"Build ID3 chunk failed at offset {marker_start}: {e}")
            self.io.position = marker_start + 3
            return

        tag_end = self.io.position
        self._offsets[ID3_KEY] = marker_start
        if not (read_data and self.config.parse_id3):
            return

        self.io.position = marker_start
        try:
            self.id3 = ID3v2Chunk.parse(self.io, ids.ID3).chunk
        except ChunkError as e:
            logger.warning(f"Build ID3 chunk failed at offset {marker_start}: {e}")
            self.io.position = tag_end

    def _parse_id3_chunk(self, chunk_id: bytes, read_data: bool, recover: bool) -> ParseResult:
        """An 'ID3 ' chunk: tag, size, then a complete ID3v2 tag."""
        offset = self.io.position

        size = self.io.read_int32()
        if size < 0:
            raise InvalidData(f"negative chunk size {size}", chunk_id)
        if not self.io.has_bytes(size):
            raise EOFError(f"{chunk_id!r} chunk of {size} bytes runs past the end of the stream")

        body_start = self.io.position
        chunk = None
        if read_data and self.config.parse_id3:
            try:
                chunk = ID3v2Chunk.parse(self.io, ids.ID3, True).chunk
            except (ChunkError, EOFError) as e:
                if not recover:
                    raise
                logger.warning(f"Build ID3 chunk failed at offset {body_start}: {e}")

        self.io.position = body_start
        self.io.skip(size)
        skip_pad(self.io, size, self.config.tolerate_missing_pad)
        return ParseResult(offset, chunk)

    def _is_id3v1(self, chunk_id: bytes) -> bool:
        """A TAG marker that starts exactly 128 bytes before the end."""
        at = ids.find_marker(chunk_id, ids.ID3V1)
        if at < 0:
            return False
        return self.io.length - (self.io.position - 4 + at) == ID3V1_SIZE

    def _scan_id3v1(self, chunk_id: bytes, read_data: bool):
        start = self.io.position - 4 + ids.find_marker(chunk_id, ids.ID3V1)
        self.io.position = start
        data = self.io.read_bytes(ID3V1_SIZE)
        self._offsets[ID3V1_KEY] = start
        if read_data and self.config.parse_id3:
            self.id3v1_frames = parse_id3v1(data)
        logger.debug(f"ID3v1 tag at offset {start}")

    def _skip_unknown(self, chunk_id: bytes):
        size = self.io.read_int32()
        if size < 0:
            raise InvalidData(f"negative chunk size {size}", chunk_id)

        if chunk_id in ids.APPLE_IDS:
            logger.warning(f"Apple chunk {chunk_id!r} skipped ({size} bytes)")
        else:
            logger.debug(f"other chunk {chunk_id!r} {chunk_id.decode('latin-1')!r} ({size} bytes)")

        self.io.skip(size)
        skip_pad(self.io, size, self.config.tolerate_missing_pad)

    # Random access

    def read_chunk(self, chunk_id: bytes, read_data: bool = True, record: bool = True):
        """
        Decode one chunk by tag.

        If a scan recorded where this tag was, the stream jumps there first;
        otherwise it must already sit just past the tag (on the marker for
        ID3). Returns the decoded value, or None in skip mode.
        """
        chunk_id = bytes(chunk_id)
        key = ids.chunk_name(chunk_id)

        if key in self._offsets:
            self.io.position = self._offsets[key]

        if chunk_id == ids.FORM:
            form = FormChunk.parse(self.io, chunk_id)
            result = ParseResult(form.offset, form)
        elif chunk_id in ids.ID3_CHUNKS:
            result = self._parse_id3_chunk(chunk_id, read_data, recover=False)
        elif chunk_id == ids.ID3:
            result = ID3v2Chunk.parse(self.io, chunk_id, read_data)
        else:
            chunk_class = get_chunk_class(chunk_id)
            if chunk_class is None:
                raise InvalidID(chunk_id)
            result = chunk_class.parse(self.io, chunk_id, read_data, self.config.tolerate_missing_pad)

        if record:
            self._offsets[key] = result.offset
        return result.chunk

    @property
    def offsets(self) -> dict[str, int]:
        """Copy of the offset cache."""
        return dict(self._offsets)

    @property
    def id3_tag(self):
        """The mutagen ID3 tag found in the stream, if any."""
        return self.id3.tag if self.id3 else None

    # Samples

    def _sample_chunks(self):
        if self.form is None:
            raise InvalidData("no form decoded; call read_all() first")
        if self.form.common is None:
            raise InvalidData("no COMM chunk")
        if self.form.sound is None:
            raise InvalidData("no SSND chunk")
        return self.form.common, self.form.sound

    def samples(self, dtype=np.int32) -> np.ndarray:
        """All sample points, frame-major then channel."""
        common, sound = self._sample_chunks()
        return extract_samples(common, sound, dtype)

    def frames(self, dtype=np.int32) -> np.ndarray:
        """Sample points shaped (frames, channels)."""
        common, sound = self._sample_chunks()
        return extract_frames(common, sound, dtype)

    def summary(self) -> str:
        """Get a summary of what this file holds."""
        lines = [f"AIFF: {self.filename or '<stream>'}"]
        form = self.form
        if form is None:
            lines.append("Not decoded")
            return "\n".join(lines)

        if form.common:
            c = form.common
            lines.append(f"  Channels: {c.num_channels}")
            lines.append(f"  Sample frames: {c.num_sample_frames}")
            lines.append(f"  Sample size: {c.sample_size} bits")
            lines.append(f"  Sample rate: {c.sample_rate:g} Hz")
            lines.append(f"  Duration: {form.duration:.3f} s" if form.duration is not None else "  Duration: -")
        if form.sound:
            lines.append(f"  Sound data: {len(form.sound.sound_data)} bytes")
        for text in form.texts or []:
            lines.append(f"  {text.chunk_type.name.title()}: {text.text}")
        if form.markers:
            lines.append(f"  Markers: {sum(m.num_markers for m in form.markers)}")
        if form.comments:
            lines.append(f"  Comments: {form.comments.num_comments}")
        if form.instrument:
            lines.append(f"  Instrument: base note {form.instrument.base_note}")
        if form.midi:
            lines.append(f"  MIDI chunks: {len(form.midi)}")
        if form.apps:
            sigs = ", ".join(a.application_signature.decode('latin-1') for a in form.apps)
            lines.append(f"  Applications: {sigs}")
        if form.recording:
            lines.append("  AES recording data: yes")
        if self.id3:
            lines.append(f"  ID3v2.{self.id3.version[1]}: {len(self.id3.tag)} frames")
        if self.id3v1_frames:
            lines.append(f"  ID3v1: {len(self.id3v1_frames)} frames")

        return "\n".join(lines)
