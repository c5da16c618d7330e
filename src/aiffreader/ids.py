"""
Chunk tag table.

Every tag is exactly 4 raw bytes. The ID3 markers are 3 bytes because
they are matched inside a 4-byte window rather than as chunk tags.
"""

ChunkID = bytes

FORM = b'FORM'
AIFF = b'AIFF'
AIFF_C = b'AIFC'

COMMON = b'COMM'
SOUND = b'SSND'
MARKER = b'MARK'
INSTRUMENT = b'INST'
MIDI = b'MIDI'
RECORDING = b'AESD'
APPLICATION = b'APPL'
COMMENTS = b'COMT'
NAME = b'NAME'
AUTHOR = b'AUTH'
COPYRIGHT = b'(c) '
ANNOTATION = b'ANNO'
FVER = b'FVER'

TEXT_IDS = (NAME, AUTHOR, COPYRIGHT, ANNOTATION)

# ID3 chunk wrappers written by iTunes, mutagen and friends
ID3_CHUNKS = (b'ID3 ', b'id3 ')
ID3 = b'ID3'
ID3V1 = b'TAG'

# Apple Logic/GarageBand chunks, not decoded
CHAN = b'CHAN'
BASC = b'basc'
TRNS = b'trns'
CATE = b'cate'
APPLE_IDS = (CHAN, BASC, TRNS, CATE)


def chunk_name(chunk_id: ChunkID) -> str:
    """String form of a tag, used as the offset cache key."""
    return bytes(chunk_id).decode('latin-1')


def find_marker(window: bytes, marker: bytes) -> int:
    """Offset of a 3-byte marker at position 0 or 1 of a tag window, else -1."""
    if window[:3] == marker:
        return 0
    if window[1:4] == marker:
        return 1
    return -1
