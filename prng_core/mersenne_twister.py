#!/usr/bin/env python3
"""
Mersenne Twister MT19937 - full 624-word state.

Seeded with the standard init_genrand recurrence, regenerated ("twisted")
every 624 draws, tempered on output. Constants are the published MT19937
parameters; none of them are tunable.

Version: 1.0.0
"""

import logging
import numpy as np

from prng_core.algorithm import Algorithm, FloatMode
from prng_core.config import GeneratorState


logger = logging.getLogger(__name__)


class MersenneTwister(Algorithm):
    """Mersenne Twister algorithm."""

    name = "mt19937"

    N = 624                     # recurrence degree
    M = 397                     # middle word
    MATRIX_A = 0x9908B0DF       # twist matrix coefficients
    UPPER_MASK = 0x80000000     # bit above the separation point (r = 31)
    LOWER_MASK = 0x7FFFFFFF
    INIT_MULTIPLIER = 1812433253
    TEMPERING_MASK_B = 0x9D2C5680
    TEMPERING_MASK_C = 0xEFC60000

    def __init__(self, table: np.ndarray, cursor: int, float_mode: FloatMode = FloatMode.PRECISE):
        super().__init__(float_mode)
        self.table = table
        self.cur = cursor

    @classmethod
    def from_seed(cls, seed: int, float_mode: FloatMode = FloatMode.PRECISE) -> 'MersenneTwister':
        """Create a new instance seeded with a 32-bit value."""
        seed &= 0xFFFFFFFF
        logger.debug(f"Seeding MT19937 with {seed}")
        # Cursor at N: the first draw always twists, whatever the table holds
        return cls(cls._init_table(seed), cls.N, float_mode)

    @classmethod
    def _init_table(cls, seed: int) -> np.ndarray:
        table = np.zeros(cls.N, dtype=np.uint32)
        prev = seed
        table[0] = prev
        for i in range(1, cls.N):
            prev = (cls.INIT_MULTIPLIER * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF
            table[i] = prev
        return table

    def _twist(self) -> None:
        """
        Regenerate all 624 words.

        Equivalent to the sequential recurrence
            y = (mt[i] & UPPER) | (mt[i+1] & LOWER)
            mt[i] = mt[i+M] ^ (y >> 1) ^ (MATRIX_A if y odd)
        with indices mod N. Blocks are split where mt[i+M] starts reading
        words already rewritten in this pass.
        """
        mt = self.table
        N, M = self.N, self.M
        mag01 = np.array([0, self.MATRIX_A], dtype=np.uint32)

        def mix(upper, lower, far):
            y = (upper & np.uint32(self.UPPER_MASK)) | (lower & np.uint32(self.LOWER_MASK))
            return far ^ (y >> np.uint32(1)) ^ mag01[y & np.uint32(1)]

        k = N - M  # 227
        mt[0:k] = mix(mt[0:k], mt[1:k + 1], mt[M:N])
        mt[k:2 * k] = mix(mt[k:2 * k], mt[k + 1:2 * k + 1], mt[0:k])
        mt[2 * k:N - 1] = mix(mt[2 * k:N - 1], mt[2 * k + 1:N], mt[k:M - 1])
        mt[N - 1] = mix(mt[N - 1:N], mt[0:1], mt[M - 1:M])[0]

    @classmethod
    def temper(cls, y: int) -> int:
        y ^= y >> 11
        y ^= (y << 7) & cls.TEMPERING_MASK_B
        y ^= (y << 15) & cls.TEMPERING_MASK_C
        y ^= y >> 18
        return y & 0xFFFFFFFF

    def get_int(self) -> int:
        if self.cur == self.N:
            self._twist()
            self.cur = 0

        y = int(self.table[self.cur])
        self.cur += 1
        return self.temper(y)

    def copy(self) -> 'MersenneTwister':
        """Independent snapshot that continues the same stream."""
        return type(self)(self.table.copy(), self.cur, self.float_mode)

    def get_state(self) -> GeneratorState:
        return GeneratorState(algorithm=self.name, table=self.table.tolist(), cursor=self.cur)

    @classmethod
    def from_state(cls, state: GeneratorState,
                   float_mode: FloatMode = FloatMode.PRECISE) -> 'MersenneTwister':
        if state.algorithm != cls.name:
            raise ValueError(f"Cannot restore {state.algorithm} state into {cls.name}")
        logger.debug(f"Restoring MT19937 state at cursor {state.cursor}")
        return cls(np.array(state.table, dtype=np.uint32), state.cursor, float_mode)

    def __repr__(self) -> str:
        return f"MersenneTwister(cur={self.cur}, float_mode={self.float_mode.value})"
