"""Binary I/O utilities for AIFF parsing."""

import struct
from enum import Enum
from typing import BinaryIO
from io import BytesIO


class ByteOrder(Enum):
    """Byte order enum for struct packing/unpacking."""
    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class IoBuffer:
    """
    Binary reader with endian support.

    Every read either returns the full requested width or raises EOFError;
    no partial values are produced.
    """

    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order

    @classmethod
    def from_bytes(cls, data: bytes, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> 'IoBuffer':
        """Create from bytes."""
        return cls(BytesIO(data), byte_order)

    @classmethod
    def from_file(cls, filepath: str, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> 'IoBuffer':
        """Create from file path."""
        with open(filepath, 'rb') as f:
            data = f.read()
        return cls.from_bytes(data, byte_order)

    @property
    def position(self) -> int:
        """Current position in stream."""
        return self.stream.tell()

    @position.setter
    def position(self, value: int):
        """Seek to position."""
        self.stream.seek(value)

    @property
    def length(self) -> int:
        """Total length of the underlying stream."""
        current = self.stream.tell()
        self.stream.seek(0, 2)  # Seek to end
        end = self.stream.tell()
        self.stream.seek(current)  # Seek back
        return end

    @property
    def remaining(self) -> int:
        """Bytes left between the current position and the end."""
        return max(self.length - self.position, 0)

    @property
    def has_more(self) -> bool:
        """Check if there are more bytes to read."""
        return self.remaining > 0

    def has_bytes(self, num_bytes: int) -> bool:
        """Check if there are at least num_bytes remaining."""
        return self.remaining >= num_bytes

    def rewind(self):
        """Seek back to the start of the stream."""
        self.stream.seek(0)

    def skip(self, num_bytes: int):
        """Skip bytes from current position. Skipping past the end is an error."""
        target = self.position + num_bytes
        if target < 0 or target > self.length:
            raise EOFError(f"cannot skip {num_bytes} bytes from offset {self.position}")
        self.stream.seek(target)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        if count < 0:
            raise ValueError(f"negative read length {count}")
        data = self.stream.read(count)
        if len(data) != count:
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return data

    def _unpack(self, code: str, size: int):
        fmt = f"{self.byte_order.value}{code}"
        return struct.unpack(fmt, self.read_bytes(size))[0]

    def read_byte(self) -> int:
        """Read single byte (0-255)."""
        return self.read_bytes(1)[0]

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self.read_byte()

    def read_int8(self) -> int:
        """Read signed byte (-128 to 127)."""
        return self._unpack('b', 1)

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer."""
        return self._unpack('H', 2)

    def read_int16(self) -> int:
        """Read signed 16-bit integer."""
        return self._unpack('h', 2)

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        return self._unpack('I', 4)

    def read_int32(self) -> int:
        """Read signed 32-bit integer."""
        return self._unpack('i', 4)

    def read_chunk_id(self) -> bytes:
        """Read a 4-byte chunk tag."""
        return self.read_bytes(4)

    def read_pascal_string(self, encoding: str = 'utf-8') -> str:
        """
        Read length-prefixed string (1 byte length).
        A pad byte follows when the length is odd.
        """
        length = self.read_byte()
        data = self.read_bytes(length)
        if length % 2:
            self.skip(1)
        return data.decode(encoding)
