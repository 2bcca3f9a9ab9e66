#!/usr/bin/env python3
"""
Generator configuration and state snapshot models.

GeneratorConfig - which algorithm, which seed, which float mode
GeneratorState  - a serializable snapshot of an algorithm's full state

Version: 1.0.0
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, Any, List, Optional, Union
from pathlib import Path
import json
import logging

from prng_core.algorithm import FloatMode


logger = logging.getLogger(__name__)

U32_MAX = 0xFFFFFFFF

# Per-algorithm state layout: table length, inclusive cursor bound, carry word
STATE_LAYOUTS: Dict[str, Dict[str, Any]] = {
    'mt19937': {'table_size': 624, 'cursor_max': 624, 'has_carry': False},
    'cmwc4096': {'table_size': 4096, 'cursor_max': 4095, 'has_carry': True},
}


def _check_algorithm_name(name: str) -> str:
    if name not in STATE_LAYOUTS:
        raise ValueError(f"Unknown algorithm: {name}. Available: {list(STATE_LAYOUTS)}")
    return name


class GeneratorConfig(BaseModel):
    """
    Generator selection.

    Example:
        {"algorithm": "cmwc4096", "seed": 12345, "float_mode": "compat"}
    """

    algorithm: str = Field(default="mt19937", description="Registry name of the algorithm")
    seed: int = Field(..., ge=0, le=U32_MAX, description="32-bit seed from the caller's entropy source")
    float_mode: FloatMode = Field(default=FloatMode.PRECISE, description="Float sampling mode")

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        return _check_algorithm_name(v)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "seed": self.seed,
            "float_mode": self.float_mode.value,
        }


class GeneratorState(BaseModel):
    """Full state of one algorithm instance."""

    algorithm: str
    table: List[int]
    cursor: int = Field(..., ge=0)
    carry: Optional[int] = Field(default=None, ge=0, le=U32_MAX)

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        return _check_algorithm_name(v)

    @model_validator(mode='after')
    def validate_layout(self) -> 'GeneratorState':
        layout = STATE_LAYOUTS[self.algorithm]

        if len(self.table) != layout['table_size']:
            raise ValueError(
                f"{self.algorithm} table must hold {layout['table_size']} words, got {len(self.table)}"
            )
        if any(w < 0 or w > U32_MAX for w in self.table):
            raise ValueError("table words must be 32-bit unsigned integers")
        if self.cursor > layout['cursor_max']:
            raise ValueError(f"{self.algorithm} cursor must be <= {layout['cursor_max']}, got {self.cursor}")

        if layout['has_carry'] and self.carry is None:
            raise ValueError(f"{self.algorithm} state requires a carry")
        if not layout['has_carry'] and self.carry is not None:
            raise ValueError(f"{self.algorithm} state has no carry")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def load_generator_config(config_path: Union[str, Path]) -> GeneratorConfig:
    """
    Load a GeneratorConfig from a JSON file.

    The settings may sit at the top level or under a "generator" key.
    Missing files and malformed JSON propagate to the caller.
    """
    with open(config_path, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict) and "generator" in data:
        data = data["generator"]

    config = GeneratorConfig.model_validate(data)
    logger.debug(f"Loaded generator config from {config_path}: {config.to_dict()}")
    return config
