"""
prng_core - bit generators with bit-exact float sampling.

Exports:
    Algorithm - Generation contract (get_int / get_float / get_double)
    FloatMode - Precise (Allen Downey) or compat float sampling
    MersenneTwister - MT19937
    ComplementaryMultiplyWithCarry - CMWC4096
    GeneratorConfig, GeneratorState - pydantic config and snapshot models
    create_generator - Seed a generator by registry name
"""

__version__ = "1.0.0"

from prng_core.algorithm import Algorithm, FloatMode
from prng_core.mersenne_twister import MersenneTwister
from prng_core.cmwc import ComplementaryMultiplyWithCarry
from prng_core.config import GeneratorConfig, GeneratorState, load_generator_config
from prng_core.registry import (
    create_generator,
    create_generator_from_config,
    get_algorithm_info,
    get_cpu_reference,
    list_available_algorithms,
)

__all__ = [
    'Algorithm',
    'FloatMode',
    'MersenneTwister',
    'ComplementaryMultiplyWithCarry',
    'GeneratorConfig',
    'GeneratorState',
    'load_generator_config',
    'create_generator',
    'create_generator_from_config',
    'get_algorithm_info',
    'get_cpu_reference',
    'list_available_algorithms',
]
