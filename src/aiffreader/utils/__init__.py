"""Low-level helpers shared by the chunk decoders."""
from .binary import IoBuffer, ByteOrder

__all__ = ['IoBuffer', 'ByteOrder']
