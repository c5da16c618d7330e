"""
INST Chunk - Instrument (sampler) parameters
"""

from dataclasses import dataclass
from enum import IntEnum

from .. import ids
from ..base import AiffChunk, ChunkKind, register_chunk
from ..utils.binary import IoBuffer


class PlayMode(IntEnum):
    NO_LOOPING = 0
    FORWARD = 1
    FORWARD_BACKWARD = 2


@dataclass(frozen=True)
class Loop:
    """Sustain or release loop, bounded by two marker ids."""
    play_mode: int
    begin_loop: int
    end_loop: int

    @classmethod
    def from_reader(cls, stream: IoBuffer) -> 'Loop':
        play_mode = stream.read_int16()
        begin_loop = stream.read_int16()
        end_loop = stream.read_int16()
        return cls(play_mode=play_mode, begin_loop=begin_loop, end_loop=end_loop)

    @property
    def mode(self):
        """PlayMode when the value is known, else the raw int."""
        try:
            return PlayMode(self.play_mode)
        except ValueError:
            return self.play_mode


@register_chunk(ids.INSTRUMENT)
@dataclass(frozen=True)
class InstrumentChunk(AiffChunk):
    base_note: int      # MIDI note
    detune: int         # cents, -50..50
    low_note: int
    high_note: int
    low_velocity: int
    high_velocity: int
    gain: int           # dB
    sustain_loop: Loop
    release_loop: Loop

    kind = ChunkKind.INSTRUMENT

    @classmethod
    def read(cls, chunk_id, size, stream: IoBuffer) -> 'InstrumentChunk':
        base_note = stream.read_int8()
        detune = stream.read_int8()
        low_note = stream.read_int8()
        high_note = stream.read_int8()
        low_velocity = stream.read_int8()
        high_velocity = stream.read_int8()
        gain = stream.read_int16()

        sustain_loop = Loop.from_reader(stream)
        release_loop = Loop.from_reader(stream)

        return cls(
            size=size,
            base_note=base_note,
            detune=detune,
            low_note=low_note,
            high_note=high_note,
            low_velocity=low_velocity,
            high_velocity=high_velocity,
            gain=gain,
            sustain_loop=sustain_loop,
            release_loop=release_loop,
        )
