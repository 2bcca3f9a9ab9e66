#!/usr/bin/env python3
"""
Uniform float/double sampling on top of a 32-bit generator.

Two paths:
- compat:  get_int() scaled by 1 / (2^32 - 1). Fast, reaches only a small
           fraction of the representable values in [0, 1).
- precise: Allen Downey's construction (downey07randfloat). The exponent is
           drawn geometrically one bit at a time, the mantissa uniformly, so
           every representable value in range is reachable with its correct
           relative probability.

Results are always in [0, 1). A draw that rounds to exactly 1.0 (probability
2^-25 precise single, 2^-54 precise double, 2^-25 compat single, 2^-32 compat
double) is discarded and the sample drawn again from the continuing stream.

Version: 1.0.0
"""

from typing import NamedTuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from prng_core.algorithm import Algorithm


U32_MASK = 0xFFFFFFFF

# 1 / u32::MAX in each precision. In float32 the divisor rounds to 2^32.
RAND_DIV = np.float32(1.0) / np.float32(U32_MASK)
RAND_DIV_DOUBLE = 1.0 / float(U32_MASK)


class FloatFormat(NamedTuple):
    """IEEE-754 layout parameters for one precision."""
    bias: int
    mantissa_bits: int
    uint_dtype: type
    float_dtype: type


SINGLE = FloatFormat(bias=127, mantissa_bits=23, uint_dtype=np.uint32, float_dtype=np.float32)
DOUBLE = FloatFormat(bias=1023, mantissa_bits=52, uint_dtype=np.uint64, float_dtype=np.float64)


class BitExtractor:
    """
    Lazily slices single bits out of a generator's 32-bit stream.

    Bits are buffered one word at a time and handed out least-significant
    first. The extractor borrows the generator for a single float/double
    draw; every refill advances the generator.
    """

    def __init__(self, algorithm: 'Algorithm'):
        self.algorithm = algorithm
        self.bits = 0
        self.bits_left = 0

    def get_bit(self) -> int:
        if self.bits_left == 0:
            self.bits = self.algorithm.get_int()
            self.bits_left = 32

        bit = self.bits & 1
        self.bits >>= 1
        self.bits_left -= 1
        return bit


def downey_bits(algorithm: 'Algorithm', fmt: FloatFormat) -> int:
    """
    Draw the raw IEEE-754 bit pattern of a uniform value in [0, 1).

    Generator calls happen in a fixed order: exponent words as the bit
    buffer runs dry, then the mantissa words, then at most one more word if
    the boundary bit needs a refill.
    """
    bits = BitExtractor(algorithm)

    exp = fmt.bias - 1
    while exp > 0:
        if bits.get_bit() != 0:
            break
        exp -= 1

    mantissa = 0
    for _ in range((fmt.mantissa_bits + 31) // 32):
        mantissa = (mantissa << 32) | bits.algorithm.get_int()
    mantissa &= (1 << fmt.mantissa_bits) - 1

    # Round-up boundary: a zero mantissa is shared with the next binade.
    if mantissa == 0 and bits.get_bit() != 0:
        exp += 1

    return (exp << fmt.mantissa_bits) | mantissa


def bits_to_float(pattern: int, fmt: FloatFormat):
    """Reinterpret an integer bit pattern as the format's float type."""
    return fmt.uint_dtype(pattern).view(fmt.float_dtype)


# Every path below can round up to exactly 1.0 (precise: exponent bias-1,
# zero mantissa, boundary bit 1; compat: the top words of the range). Such
# draws are discarded and drawn again so results stay in [0, 1).

def precise_float(algorithm: 'Algorithm') -> np.float32:
    while True:
        value = bits_to_float(downey_bits(algorithm, SINGLE), SINGLE)
        if value < 1.0:
            return value


def precise_double(algorithm: 'Algorithm') -> float:
    while True:
        value = float(bits_to_float(downey_bits(algorithm, DOUBLE), DOUBLE))
        if value < 1.0:
            return value


def compat_float(algorithm: 'Algorithm') -> np.float32:
    while True:
        value = np.float32(algorithm.get_int()) * RAND_DIV
        if value < 1.0:
            return value


def compat_double(algorithm: 'Algorithm') -> float:
    while True:
        value = float(algorithm.get_int()) * RAND_DIV_DOUBLE
        if value < 1.0:
            return value
