"""Chunk decoding errors."""

from typing import Optional


class ChunkError(ValueError):
    """Base class for every chunk decoding failure."""


class InvalidID(ChunkError):
    """The tag does not belong to the decoder that was invoked."""

    def __init__(self, chunk_id: bytes):
        self.chunk_id = chunk_id
        super().__init__(f"invalid chunk id {chunk_id!r}")


class InvalidFormType(ChunkError):
    """FORM subtype is AIFF-C or unknown."""

    def __init__(self, form_type: bytes):
        self.form_type = form_type
        super().__init__(f"unsupported form type {form_type!r}")


class InvalidID3Version(ChunkError):
    """Embedded ID3 major/minor version is out of range."""

    def __init__(self, version: bytes):
        self.version = tuple(version)
        super().__init__(f"unsupported ID3 version {self.version}")


class InvalidSize(ChunkError):
    """A fixed-length chunk declared the wrong size."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid chunk size: expected {expected}, got {actual}")


class InvalidData(ChunkError):
    """Malformed payload."""

    def __init__(self, reason: str, chunk_id: Optional[bytes] = None):
        self.reason = reason
        self.chunk_id = chunk_id
        where = f" in {chunk_id!r}" if chunk_id else ""
        super().__init__(f"invalid data{where}: {reason}")
