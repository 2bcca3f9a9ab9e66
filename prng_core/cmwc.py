#!/usr/bin/env python3
"""
Complementary-Multiply-With-Carry (CMWC4096).

Marsaglia's lag-4096 generator with multiplier 18782. The table is filled
from the seed with the glibc LCG; the initial carry is kept below
809430660 as Marsaglia recommends.

Version: 1.0.0
"""

import logging
import numpy as np

from prng_core.algorithm import Algorithm, FloatMode
from prng_core.config import GeneratorState


logger = logging.getLogger(__name__)


class ComplementaryMultiplyWithCarry(Algorithm):
    """Complementary-Multiply-With-Carry algorithm."""

    name = "cmwc4096"

    R = 4096
    MULTIPLIER = 18782
    CARRY_LIMIT = 809430660
    LCG_A = 1103515245
    LCG_C = 12345

    def __init__(self, table: np.ndarray, carry: int, cursor: int,
                 float_mode: FloatMode = FloatMode.PRECISE):
        super().__init__(float_mode)
        self.table = table
        self.c = carry
        self.cur = cursor

    @classmethod
    def from_seed(cls, seed: int,
                  float_mode: FloatMode = FloatMode.PRECISE) -> 'ComplementaryMultiplyWithCarry':
        """Create a new instance seeded with a 32-bit value."""
        s = seed & 0xFFFFFFFF
        logger.debug(f"Seeding CMWC4096 with {s}")

        table = np.zeros(cls.R, dtype=np.uint32)
        for i in range(cls.R):
            s = (s * cls.LCG_A + cls.LCG_C) & 0xFFFFFFFF
            table[i] = s
        carry = ((s * cls.LCG_A + cls.LCG_C) & 0xFFFFFFFF) % cls.CARRY_LIMIT

        return cls(table, carry, 0, float_mode)

    def get_int(self) -> int:
        self.cur = (self.cur + 1) & (self.R - 1)
        t = self.MULTIPLIER * int(self.table[self.cur]) + self.c
        self.c = t >> 32
        x = (t + self.c) & 0xFFFFFFFF

        # low word wrapped past the carry; then keep x off the all-ones word
        if x < self.c:
            x += 1
            self.c += 1
        if x == 0xFFFFFFFF:
            self.c += 1
            x = 0

        value = 0xFFFFFFFE - x
        self.table[self.cur] = value
        return value

    def copy(self) -> 'ComplementaryMultiplyWithCarry':
        """Independent snapshot that continues the same stream."""
        return type(self)(self.table.copy(), self.c, self.cur, self.float_mode)

    def get_state(self) -> GeneratorState:
        return GeneratorState(algorithm=self.name, table=self.table.tolist(),
                              cursor=self.cur, carry=self.c)

    @classmethod
    def from_state(cls, state: GeneratorState,
                   float_mode: FloatMode = FloatMode.PRECISE) -> 'ComplementaryMultiplyWithCarry':
        if state.algorithm != cls.name:
            raise ValueError(f"Cannot restore {state.algorithm} state into {cls.name}")
        logger.debug(f"Restoring CMWC4096 state at cursor {state.cursor}, carry {state.carry}")
        return cls(np.array(state.table, dtype=np.uint32), state.carry, state.cursor, float_mode)

    def __repr__(self) -> str:
        return (f"ComplementaryMultiplyWithCarry(c={self.c}, cur={self.cur}, "
                f"float_mode={self.float_mode.value})")
