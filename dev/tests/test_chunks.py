"""
aiffreader - chunk decoder tests

Each decoder in decode mode and skip mode, plus tag/size validation.
"""

import struct

import pytest

from aiffreader import ids
from aiffreader.base import get_chunk_class, CHUNK_TYPES
from aiffreader.chunks import (
    ApplicationSpecificChunk, AudioRecordingChunk, CommentsChunk, CommonChunk,
    FormatVersionChunk, ID3v2Chunk, InstrumentChunk, MarkerChunk, MIDIDataChunk,
    PlayMode, SoundDataChunk, TextChunk, TextChunkType,
)
from aiffreader.errors import InvalidData, InvalidID, InvalidID3Version, InvalidSize
from aiffreader.utils.binary import IoBuffer

from aiff_builders import (
    chunk, comm, comt, extended, id3v24, inst, mark, pcm16, ssnd, synchsafe, text,
)

NEXT = b"NEXT"


def positioned(data: bytes) -> tuple:
    """Buffer over data + NEXT, positioned just past the leading tag."""
    io = IoBuffer.from_bytes(data + NEXT)
    chunk_id = io.read_chunk_id()
    return io, chunk_id


def decode(data: bytes):
    io, chunk_id = positioned(data)
    result = get_chunk_class(chunk_id).parse(io, chunk_id, True)
    return io, result


# ═══════════════════════════════════════════════════════════════════════════════
# REGISTRY
# ═══════════════════════════════════════════════════════════════════════════════

def test_registry_covers_every_tag():
    expected = {
        b"COMM": CommonChunk, b"SSND": SoundDataChunk, b"MARK": MarkerChunk,
        b"INST": InstrumentChunk, b"MIDI": MIDIDataChunk, b"AESD": AudioRecordingChunk,
        b"APPL": ApplicationSpecificChunk, b"COMT": CommentsChunk, b"FVER": FormatVersionChunk,
        b"NAME": TextChunk, b"AUTH": TextChunk, b"(c) ": TextChunk, b"ANNO": TextChunk,
    }
    for tag, cls in expected.items():
        assert CHUNK_TYPES[tag] is cls


def test_unknown_tag_has_no_decoder():
    assert get_chunk_class(b"XYZW") is None


def test_wrong_tag_is_invalid_id():
    io, _ = positioned(comm())
    with pytest.raises(InvalidID) as exc:
        CommonChunk.parse(io, b"SSND")
    assert exc.value.chunk_id == b"SSND"


# ═══════════════════════════════════════════════════════════════════════════════
# DECODE
# ═══════════════════════════════════════════════════════════════════════════════

def test_common_chunk():
    io, result = decode(comm(channels=2, frames=4, bits=16, rate=44100))
    c = result.chunk
    assert result.offset == 4
    assert (c.size, c.num_channels, c.num_sample_frames, c.sample_size) == (18, 2, 4, 16)
    assert c.sample_rate == 44100.0
    assert c.bytes_per_point == 2
    assert c.num_sample_points == 8


def test_common_chunk_bad_rate_fails_whole_chunk():
    payload = struct.pack(">hIh", 1, 10, 16) + struct.pack(">HQ", 0x7FFF, 0)
    with pytest.raises(InvalidData):
        decode(chunk(b"COMM", payload))


def test_sound_chunk_excludes_header_from_samples():
    data = pcm16(1, 2, 3, 4)
    _, result = decode(ssnd(data, offset=0, block_size=0))
    s = result.chunk
    assert s.size == len(data) + 8
    assert s.sound_data == data
    assert (s.offset, s.block_size) == (0, 0)


def test_sound_chunk_smaller_than_header():
    with pytest.raises(InvalidData):
        decode(chunk(b"SSND", b"\x00\x00\x00\x00"))


def test_marker_chunk():
    _, result = decode(mark((1, 0, "Start"), (2, 1000, "End!")))
    m = result.chunk
    assert m.num_markers == 2
    assert [(x.id, x.position, x.name) for x in m.markers] == [(1, 0, "Start"), (2, 1000, "End!")]
    assert m.get(2).name == "End!"
    assert m.get(7) is None


def test_instrument_chunk():
    _, result = decode(inst(base_note=60, detune=-3, gain=-6, sustain=(1, 1, 2), release=(2, 3, 4)))
    i = result.chunk
    assert (i.base_note, i.detune, i.low_note, i.high_note) == (60, -3, 0, 127)
    assert (i.low_velocity, i.high_velocity, i.gain) == (1, 127, -6)
    assert i.sustain_loop.mode is PlayMode.FORWARD
    assert (i.sustain_loop.begin_loop, i.sustain_loop.end_loop) == (1, 2)
    assert i.release_loop.mode is PlayMode.FORWARD_BACKWARD


def test_midi_chunk():
    _, result = decode(chunk(b"MIDI", b"\x90\x3c\x7f"))
    assert result.chunk.data == b"\x90\x3c\x7f"


def test_audio_recording_chunk():
    payload = bytes(range(24))
    _, result = decode(chunk(b"AESD", payload))
    assert result.chunk.data == payload


def test_audio_recording_wrong_size():
    io, chunk_id = positioned(chunk(b"AESD", bytes(23)))
    with pytest.raises(InvalidSize) as exc:
        AudioRecordingChunk.parse(io, chunk_id)
    assert (exc.value.expected, exc.value.actual) == (24, 23)
    # nothing past the size field was consumed
    assert io.position == 8


def test_application_chunk():
    _, result = decode(chunk(b"APPL", b"pdos" + b"\x01\x02\x03\x04"))
    a = result.chunk
    assert a.application_signature == b"pdos"
    assert a.data == b"\x01\x02\x03\x04"


def test_comments_chunk():
    _, result = decode(comt((3000000000, 1, "odd"), (42, 0, "even")))
    c = result.chunk
    assert c.num_comments == 2
    assert [(x.timestamp, x.marker_id, x.text) for x in c.comments] == [
        (3000000000, 1, "odd"), (42, 0, "even"),
    ]
    assert c.comments[0].count == 3


@pytest.mark.parametrize("tag,kind", [
    (b"NAME", TextChunkType.NAME),
    (b"AUTH", TextChunkType.AUTHOR),
    (b"(c) ", TextChunkType.COPYRIGHT),
    (b"ANNO", TextChunkType.ANNOTATION),
])
def test_text_chunks(tag, kind):
    _, result = decode(text(tag, "hello"))
    assert result.chunk.chunk_type is kind
    assert result.chunk.text == "hello"


def test_text_chunk_odd_length_consumes_pad():
    io, result = decode(text(b"NAME", "abc"))
    assert result.chunk.text == "abc"
    assert io.read_chunk_id() == NEXT


def test_text_chunk_utf8():
    _, result = decode(text(b"AUTH", "Björk"))
    assert result.chunk.text == "Björk"


def test_text_chunk_bad_utf8():
    with pytest.raises(InvalidData):
        decode(chunk(b"NAME", b"\xff\xfe"))


def test_format_version_chunk():
    _, result = decode(chunk(b"FVER", struct.pack(">I", 0xA2805140)))
    assert result.chunk.timestamp == 0xA2805140


def test_truncated_payload_is_invalid_data():
    # count says 2 markers, payload holds one
    payload = struct.pack(">H", 2) + struct.pack(">hI", 1, 0) + b"\x00"
    with pytest.raises(InvalidData):
        decode(chunk(b"MARK", payload))


def test_negative_size_is_invalid_data():
    with pytest.raises(InvalidData):
        decode(b"MIDI" + struct.pack(">i", -2))


def test_payload_past_end_of_stream_is_fatal():
    io = IoBuffer.from_bytes(b"MIDI" + struct.pack(">i", 100) + b"\x00\x01")
    chunk_id = io.read_chunk_id()
    with pytest.raises(EOFError):
        MIDIDataChunk.parse(io, chunk_id)


def test_missing_final_pad_is_tolerated():
    io = IoBuffer.from_bytes(chunk(b"NAME", b"abc", pad=False))
    chunk_id = io.read_chunk_id()
    result = TextChunk.parse(io, chunk_id)
    assert result.chunk.text == "abc"
    assert not io.has_more


def test_missing_final_pad_strict():
    io = IoBuffer.from_bytes(chunk(b"NAME", b"abc", pad=False))
    chunk_id = io.read_chunk_id()
    with pytest.raises(EOFError):
        TextChunk.parse(io, chunk_id, tolerate_missing_pad=False)


# ═══════════════════════════════════════════════════════════════════════════════
# SKIP MODE
# ═══════════════════════════════════════════════════════════════════════════════

ALL_CHUNKS = [
    comm(),
    ssnd(pcm16(1, -1, 2, -2)),
    mark((1, 0, "Start"), (2, 8, "Loop end")),
    inst(),
    chunk(b"MIDI", b"\x90\x3c\x7f"),
    chunk(b"AESD", bytes(24)),
    chunk(b"APPL", b"stoc" + b"\x05"),
    comt((1, 0, "abc"), (2, 1, "de")),
    text(b"NAME", "abc"),
    text(b"ANNO", "even"),
    chunk(b"FVER", struct.pack(">I", 0xA2805140)),
]


@pytest.mark.parametrize("data", ALL_CHUNKS, ids=lambda d: d[:4].decode("latin-1"))
def test_skip_and_decode_consume_same_bytes(data):
    io_decode, chunk_id = positioned(data)
    decoded = get_chunk_class(chunk_id).parse(io_decode, chunk_id, True)

    io_skip, _ = positioned(data)
    skipped = get_chunk_class(chunk_id).parse(io_skip, chunk_id, False)

    assert decoded.chunk is not None
    assert skipped.skipped
    assert skipped.offset == decoded.offset == 4
    assert io_skip.position == io_decode.position == len(data)
    assert io_decode.read_chunk_id() == NEXT


@pytest.mark.parametrize("data", ALL_CHUNKS, ids=lambda d: d[:4].decode("latin-1"))
def test_decode_from_recorded_offset_matches_inline(data):
    io, chunk_id = positioned(data)
    cls = get_chunk_class(chunk_id)
    skipped = cls.parse(io, chunk_id, False)
    after_skip = io.position

    io.position = skipped.offset
    redone = cls.parse(io, chunk_id, True)

    inline_io, _ = positioned(data)
    inline = cls.parse(inline_io, chunk_id, True)

    assert redone.chunk == inline.chunk
    assert io.position == after_skip == inline_io.position


# ═══════════════════════════════════════════════════════════════════════════════
# ID3
# ═══════════════════════════════════════════════════════════════════════════════

def test_id3_decode():
    tag = id3v24("Song")
    io = IoBuffer.from_bytes(tag + NEXT)
    result = ID3v2Chunk.parse(io, b"ID3")
    assert result.offset == 0
    assert result.chunk.version == (2, 4, 0)
    assert result.chunk.tag["TIT2"].text == ["Song"]
    assert io.read_chunk_id() == NEXT


def test_id3_skip_matches_decode():
    tag = id3v24("Song")
    io = IoBuffer.from_bytes(tag + NEXT)
    result = ID3v2Chunk.parse(io, b"ID3", read_data=False)
    assert result.skipped
    assert io.read_chunk_id() == NEXT


def test_id3_bad_version():
    io = IoBuffer.from_bytes(b"ID3\x05\x00\x00" + synchsafe(0))
    with pytest.raises(InvalidID3Version) as exc:
        ID3v2Chunk.parse(io, b"ID3")
    assert exc.value.version == (5, 0)


def test_id3_minor_version_rejected():
    io = IoBuffer.from_bytes(b"ID3\x03\x01\x00" + synchsafe(0))
    with pytest.raises(InvalidID3Version):
        ID3v2Chunk.parse(io, b"ID3")


def test_id3_wrong_id():
    io = IoBuffer.from_bytes(id3v24())
    with pytest.raises(InvalidID):
        ID3v2Chunk.parse(io, b"COMM")


def test_id3_size_past_end_is_invalid_data():
    io = IoBuffer.from_bytes(b"ID3\x04\x00\x00" + synchsafe(500) + b"\x00" * 10)
    with pytest.raises(InvalidData):
        ID3v2Chunk.parse(io, b"ID3")


def test_id3_codec_failure_is_invalid_data():
    # version 1.0 passes the range check but no codec reads it
    io = IoBuffer.from_bytes(b"ID3\x01\x00\x00" + synchsafe(4) + b"junk")
    with pytest.raises(InvalidData):
        ID3v2Chunk.parse(io, b"ID3")


def test_extended_helper_matches_known_pattern():
    assert extended(44100) == bytes.fromhex("400EAC44000000000000")


def test_tags_module_marker_search():
    assert ids.find_marker(b"ID3\x04", ids.ID3) == 0
    assert ids.find_marker(b"\x00ID3", ids.ID3) == 1
    assert ids.find_marker(b"xxID", ids.ID3) == -1
