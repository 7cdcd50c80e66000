"""
Simulation Parameters
=====================
Defines the rate coefficients of the predator-prey recurrence.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict
import logging

from foxhare.config import DEFAULT_RATES

logger = logging.getLogger(__name__)


class ParameterKey(StrEnum):
    """Parameter names, in persisted order."""
    BIRTH_RATE = "birth_rate"
    DEATH_RATE = "death_rate"
    PREDATION_RATE = "predation_rate"
    FOX_BIRTH_RATE = "fox_birth_rate"
    FOX_DEATH_RATE = "fox_death_rate"


@dataclass
class ParameterMetadata:
    label: str
    prompt: str

# Centralized Metadata for the menu
PARAMETER_METADATA: Dict[ParameterKey, ParameterMetadata] = {
    ParameterKey.BIRTH_RATE: ParameterMetadata(
        label="Rabbit Birth Rate", prompt="Enter new Rabbit Birth Rate: "),
    ParameterKey.DEATH_RATE: ParameterMetadata(
        label="Rabbit Death Rate", prompt="Enter new Rabbit Death Rate: "),
    ParameterKey.PREDATION_RATE: ParameterMetadata(
        label="Predation Rate (Fox eats Rabbits)", prompt="Enter new Predation Rate: "),
    ParameterKey.FOX_BIRTH_RATE: ParameterMetadata(
        label="Fox Birth Rate per Rabbit Eaten", prompt="Enter new Fox Birth Rate per Rabbit Eaten: "),
    ParameterKey.FOX_DEATH_RATE: ParameterMetadata(
        label="Fox Natural Death Rate", prompt="Enter new Fox Natural Death Rate: "),
}


@dataclass
class ParameterSet:
    """
    Rate coefficients of the recurrence.

    No range is enforced: zero or negative rates are legal and give
    degenerate but well defined trajectories. ``death_rate`` is kept and
    persisted but the recurrence does not read it.
    """
    birth_rate: float = DEFAULT_RATES[0]
    death_rate: float = DEFAULT_RATES[1]
    predation_rate: float = DEFAULT_RATES[2]
    fox_birth_rate: float = DEFAULT_RATES[3]
    fox_death_rate: float = DEFAULT_RATES[4]

    def as_tuple(self) -> tuple[float, ...]:
        """Values in persisted order."""
        return tuple(getattr(self, key.value) for key in ParameterKey)

    def update(self, key: ParameterKey, value: float) -> None:
        old = getattr(self, key.value)
        setattr(self, key.value, float(value))
        logger.info(f"Parameter '{key}' changed from {old} to {value}.")

    @staticmethod
    def from_values(values: tuple[float, ...] | list[float]) -> ParameterSet:
        """Build from values in persisted order."""
        if len(values) != len(ParameterKey):
            raise ValueError(f"Expected {len(ParameterKey)} values, got {len(values)}.")
        return ParameterSet(**{key.value: float(v) for key, v in zip(ParameterKey, values)})
