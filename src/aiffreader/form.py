"""
FORM chunk aggregate.

The decoded chunks are immutable; FormChunk is the one mutable value that
collects them while a scan runs.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from . import ids
from .base import AiffChunk, ChunkKind
from .chunks import (
    ApplicationSpecificChunk, AudioRecordingChunk, CommentsChunk, CommonChunk,
    FormatVersionChunk, InstrumentChunk, MarkerChunk, MIDIDataChunk,
    SoundDataChunk, TextChunk, TextChunkType,
)
from .errors import InvalidFormType, InvalidID
from .utils.binary import IoBuffer

logger = logging.getLogger(__name__)


@dataclass
class FormChunk:
    """
    Everything found inside an AIFF FORM.

    Singleton chunks keep the last one seen since the format does not fix
    chunk order. Repeatable chunks are appended in file order; their lists
    stay None until the first append.
    """
    size: int = 0
    offset: int = 0

    common: Optional[CommonChunk] = None
    sound: Optional[SoundDataChunk] = None
    comments: Optional[CommentsChunk] = None
    instrument: Optional[InstrumentChunk] = None
    recording: Optional[AudioRecordingChunk] = None
    format_version: Optional[FormatVersionChunk] = None

    texts: Optional[list[TextChunk]] = None
    markers: Optional[list[MarkerChunk]] = None
    midi: Optional[list[MIDIDataChunk]] = None
    apps: Optional[list[ApplicationSpecificChunk]] = None

    @classmethod
    def parse(cls, io: IoBuffer, chunk_id: bytes) -> 'FormChunk':
        """
        Validate the FORM header and build an empty aggregate.
        Only the AIFF form type is accepted.
        """
        offset = io.position

        if chunk_id != ids.FORM:
            raise InvalidID(chunk_id)

        size = io.read_int32()
        form_type = io.read_chunk_id()

        if form_type == ids.AIFF_C:
            logger.info("AIFF-C file detected; unsupported")
            raise InvalidFormType(form_type)
        if form_type != ids.AIFF:
            raise InvalidFormType(form_type)

        logger.debug(f"FORM: {size} bytes, type {form_type!r}")
        return cls(size=size, offset=offset)

    # Singletons

    def set_common(self, chunk: CommonChunk):
        self.common = chunk

    def set_sound(self, chunk: SoundDataChunk):
        self.sound = chunk

    def set_comments(self, chunk: CommentsChunk):
        self.comments = chunk

    def set_instrument(self, chunk: InstrumentChunk):
        self.instrument = chunk

    def set_recording(self, chunk: AudioRecordingChunk):
        self.recording = chunk

    def set_format_version(self, chunk: FormatVersionChunk):
        self.format_version = chunk

    # Repeatables

    def add_text_chunk(self, chunk: TextChunk):
        if self.texts is None:
            self.texts = []
        self.texts.append(chunk)

    def add_marker_chunk(self, chunk: MarkerChunk):
        if self.markers is None:
            self.markers = []
        self.markers.append(chunk)

    def add_midi_chunk(self, chunk: MIDIDataChunk):
        if self.midi is None:
            self.midi = []
        self.midi.append(chunk)

    def add_app_chunk(self, chunk: ApplicationSpecificChunk):
        if self.apps is None:
            self.apps = []
        self.apps.append(chunk)

    def add(self, chunk: AiffChunk):
        """Fold a decoded chunk in according to its kind."""
        handler = _FOLD[chunk.kind]
        handler(self, chunk)

    @property
    def duration(self) -> Optional[float]:
        """Length in seconds, or None without a COMM chunk."""
        if self.common is None or not self.common.sample_rate:
            return None
        return self.common.num_sample_frames / self.common.sample_rate

    def text(self, chunk_type: TextChunkType) -> list[str]:
        """All texts of one kind, in file order."""
        return [t.text for t in self.texts or [] if t.chunk_type == chunk_type]

    @property
    def name(self) -> Optional[str]:
        names = self.text(TextChunkType.NAME)
        return names[-1] if names else None


_FOLD = {
    ChunkKind.COMMON: FormChunk.set_common,
    ChunkKind.SOUND: FormChunk.set_sound,
    ChunkKind.COMMENTS: FormChunk.set_comments,
    ChunkKind.INSTRUMENT: FormChunk.set_instrument,
    ChunkKind.RECORDING: FormChunk.set_recording,
    ChunkKind.FORMAT_VERSION: FormChunk.set_format_version,
    ChunkKind.TEXT: FormChunk.add_text_chunk,
    ChunkKind.MARKER: FormChunk.add_marker_chunk,
    ChunkKind.MIDI: FormChunk.add_midi_chunk,
    ChunkKind.APPLICATION: FormChunk.add_app_chunk,
}
