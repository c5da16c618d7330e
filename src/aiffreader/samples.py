"""
Sample extraction from decoded COMM + SSND chunks.

A sample point is one channel's value in one frame, stored big-endian in
ceil(sample_size / 8) bytes. Points are interleaved frame by frame.
"""

import numpy as np

from .chunks import CommonChunk, SoundDataChunk
from .errors import InvalidData

# sample sizes run from 1 to 32 bits
MAX_POINT_BYTES = 4


def _assemble(raw: np.ndarray, width: int, signed: bool) -> np.ndarray:
    """Combine rows of big-endian bytes into int64 values."""
    values = np.zeros(raw.shape[0], dtype=np.int64)
    for i in range(width):
        values = (values << 8) | raw[:, i].astype(np.int64)
    if signed:
        bits = width * 8
        values = np.where(values >= 1 << (bits - 1), values - (1 << bits), values)
    return values


def extract_samples(common: CommonChunk, sound: SoundDataChunk, dtype=np.int32) -> np.ndarray:
    """
    Decode every sample point into a 1-D array of dtype, frame-major and
    channel-minor. Points are two's complement unless dtype is unsigned.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in 'iu':
        raise ValueError(f"sample dtype must be an integer type, got {dtype}")

    if common.num_channels <= 0:
        raise InvalidData(f"bad channel count {common.num_channels}")

    width = common.bytes_per_point
    if not 0 < width <= MAX_POINT_BYTES:
        raise InvalidData(f"bad sample size {common.sample_size}")
    if width > dtype.itemsize:
        raise ValueError(f"{common.sample_size}-bit samples do not fit in {dtype}")

    num_points = common.num_sample_points
    if num_points == 0:
        return np.zeros(0, dtype=dtype)

    start = sound.offset
    end = start + num_points * width
    if end > len(sound.sound_data):
        raise InvalidData(
            f"sound data holds {len(sound.sound_data)} bytes, need {end} "
            f"for {num_points} points"
        )

    raw = np.frombuffer(sound.sound_data, dtype=np.uint8, count=end - start, offset=start)
    values = _assemble(raw.reshape(num_points, width), width, signed=dtype.kind == 'i')
    return values.astype(dtype)


def extract_frames(common: CommonChunk, sound: SoundDataChunk, dtype=np.int32) -> np.ndarray:
    """Samples shaped (frames, channels)."""
    samples = extract_samples(common, sound, dtype)
    return samples.reshape(common.num_sample_frames, common.num_channels)
