"""
80-bit IEEE 754 extended precision decoding.

Layout: 1 sign bit, 15 exponent bits (bias 16383), 64 mantissa bits with an
explicit integer bit. AIFF stores the sample rate this way.
"""

import math
import struct

from .errors import InvalidData

EXTENDED_SIZE = 10
EXPONENT_BIAS = 16383
EXPONENT_MAX = 0x7FFF
INTEGER_BIT = 1 << 63


def parse_extended_precision(data: bytes) -> float:
    """Decode 10 bytes of 80-bit extended precision into a float."""
    if len(data) != EXTENDED_SIZE:
        raise InvalidData(f"extended precision needs {EXTENDED_SIZE} bytes, got {len(data)}")

    sign_exponent, mantissa = struct.unpack('>HQ', data)
    sign = -1.0 if sign_exponent & 0x8000 else 1.0
    exponent = sign_exponent & EXPONENT_MAX

    if exponent == 0 and mantissa == 0:
        return math.copysign(0.0, sign)
    if exponent == EXPONENT_MAX:
        raise InvalidData("extended precision infinity or NaN")
    if exponent == 0:
        raise InvalidData("extended precision denormal")
    if not mantissa & INTEGER_BIT:
        raise InvalidData("extended precision unnormal")

    try:
        value = math.ldexp(mantissa, exponent - EXPONENT_BIAS - 63)
    except OverflowError as e:
        raise InvalidData("extended precision overflows a double") from e

    if not math.isfinite(value):
        raise InvalidData("extended precision overflows a double")
    return sign * value
