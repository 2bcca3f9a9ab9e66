#!/usr/bin/env python3
"""
Algorithm - the generation contract shared by every bit generator.

A concrete algorithm only supplies get_int(); floats and doubles in [0, 1)
are derived from it by the sampler, in the float mode chosen by the caller.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
import numpy as np

from prng_core import sampler


class FloatMode(str, Enum):
    """How get_float()/get_double() turn 32-bit draws into [0, 1) values."""
    PRECISE = "precise"
    COMPAT = "compat"


class Algorithm(ABC):
    """
    Random number generator algorithm.

    The float mode is chosen once at construction and can be overridden per
    call; nothing about it is global. Instances are not thread-safe.
    """

    name: str = ""

    def __init__(self, float_mode: FloatMode = FloatMode.PRECISE):
        self.float_mode = FloatMode(float_mode)

    @abstractmethod
    def get_int(self) -> int:
        """Generate a 32-bit unsigned integer."""

    def _resolve_mode(self, mode: Optional[FloatMode]) -> FloatMode:
        return self.float_mode if mode is None else FloatMode(mode)

    def get_float(self, mode: Optional[FloatMode] = None) -> np.float32:
        """Generate a single-precision value in [0, 1); draws rounding to 1.0 are redrawn."""
        if self._resolve_mode(mode) is FloatMode.COMPAT:
            return sampler.compat_float(self)
        return sampler.precise_float(self)

    def get_double(self, mode: Optional[FloatMode] = None) -> float:
        """Generate a double-precision value in [0, 1); draws rounding to 1.0 are redrawn."""
        if self._resolve_mode(mode) is FloatMode.COMPAT:
            return sampler.compat_double(self)
        return sampler.precise_double(self)
