#!/usr/bin/env python3
"""
Algorithm Registry - name lookup for every bit generator.

Each entry carries the generator class, a list-returning CPU reference
function, and descriptive metadata. Callers outside this package should go
through create_generator() / get_cpu_reference() rather than the classes.

Version: 1.0.0
"""

from typing import List, Dict, Any, Callable
import logging

from prng_core.algorithm import Algorithm, FloatMode
from prng_core.cmwc import ComplementaryMultiplyWithCarry
from prng_core.config import GeneratorConfig, STATE_LAYOUTS
from prng_core.mersenne_twister import MersenneTwister


logger = logging.getLogger(__name__)


# ============================================================================
# CPU REFERENCE IMPLEMENTATIONS
# ============================================================================

def _draw(generator: Algorithm, n: int, skip: int) -> List[int]:
    for _ in range(skip):
        generator.get_int()
    return [generator.get_int() for _ in range(n)]


def mt19937_cpu(seed: int, n: int, skip: int = 0, **kwargs) -> List[int]:
    """Mersenne Twister MT19937 - Full 624-word state"""
    return _draw(MersenneTwister.from_seed(seed), n, skip)


def cmwc4096_cpu(seed: int, n: int, skip: int = 0, **kwargs) -> List[int]:
    """CMWC4096 - 4096-word lag table plus carry"""
    return _draw(ComplementaryMultiplyWithCarry.from_seed(seed), n, skip)


# ============================================================================
# REGISTRY
# ============================================================================

def _state_bytes(name: str) -> int:
    layout = STATE_LAYOUTS[name]
    return (layout['table_size'] + (1 if layout['has_carry'] else 0)) * 4


ALGORITHM_REGISTRY: Dict[str, Dict[str, Any]] = {
    'mt19937': {
        'generator': MersenneTwister,
        'cpu_reference': mt19937_cpu,
        'description': 'Mersenne Twister MT19937, period 2^19937-1',
        'seed_type': 'uint32',
        'state_size': _state_bytes('mt19937'),  # 624 * 4 bytes
    },
    'cmwc4096': {
        'generator': ComplementaryMultiplyWithCarry,
        'cpu_reference': cmwc4096_cpu,
        'description': 'Complementary-Multiply-With-Carry, lag 4096',
        'seed_type': 'uint32',
        'state_size': _state_bytes('cmwc4096'),  # 4096 words + carry
    },
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def list_available_algorithms() -> List[str]:
    """List all available algorithms"""
    return list(ALGORITHM_REGISTRY.keys())


def get_algorithm_info(name: str) -> Dict[str, Any]:
    """Get registry entry for an algorithm"""
    if name not in ALGORITHM_REGISTRY:
        logger.warning(f"Unknown algorithm requested: {name}")
        raise ValueError(f"Unknown algorithm: {name}. Available: {list_available_algorithms()}")
    return ALGORITHM_REGISTRY[name]


def get_cpu_reference(name: str) -> Callable:
    """Get CPU reference implementation for an algorithm"""
    return get_algorithm_info(name)['cpu_reference']


def create_generator(name: str, seed: int, float_mode: FloatMode = FloatMode.PRECISE) -> Algorithm:
    """Seed a fresh generator by registry name."""
    generator_cls = get_algorithm_info(name)['generator']
    logger.debug(f"Creating {name} generator (float_mode={FloatMode(float_mode).value})")
    return generator_cls.from_seed(seed, float_mode=float_mode)


def create_generator_from_config(config: GeneratorConfig) -> Algorithm:
    return create_generator(config.algorithm, config.seed, config.float_mode)
