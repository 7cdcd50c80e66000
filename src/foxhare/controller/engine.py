"""
Discrete Lotka-Volterra recurrence.

Each step reads only the previous step's populations::

    r' = r + birth_rate * r - predation_rate * r * f
    f' = f + fox_birth_rate * r * f - fox_death_rate * f

and stores them as whole organisms: negative results become 0, the rest are
truncated toward zero (never rounded).
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from foxhare.exceptions import InvalidDuration, PopulationOverflow
from foxhare.model.series import PopulationSeries

if TYPE_CHECKING:
    from foxhare.model.parameters import ParameterSet

logger = logging.getLogger(__name__)

_INT64 = np.iinfo(np.int64)

# Smallest float that no longer fits an int64 column (2**63)
_POPULATION_LIMIT = float(_INT64.max)


def step(params: ParameterSet, rabbits: float, foxes: float) -> tuple[float, float]:
    """One unclamped step of the recurrence."""
    new_rabbits = rabbits + params.birth_rate * rabbits - params.predation_rate * rabbits * foxes
    new_foxes = foxes + params.fox_birth_rate * rabbits * foxes - params.fox_death_rate * foxes
    return new_rabbits, new_foxes


def _to_population(value: float, step_index: int, species: str) -> int:
    if not np.isfinite(value) or value >= _POPULATION_LIMIT:
        raise PopulationOverflow(step_index, species, value)
    if value < 0:
        return 0
    return int(value)


def _initial_population(value: int, species: str) -> int:
    value = int(value)
    if not _INT64.min <= value <= _INT64.max:
        raise PopulationOverflow(0, species, value)
    return value


def simulate(
    params: ParameterSet,
    initial_rabbits: int,
    initial_foxes: int,
    duration: int,
) -> PopulationSeries:
    """
    Run the recurrence for ``duration`` steps.

    Args:
        params: Rate coefficients.
        initial_rabbits: Rabbit count stored at index 0.
        initial_foxes: Fox count stored at index 0.
        duration: Number of steps to compute, must be positive.

    Returns:
        A new series of ``duration + 1`` entries.

    Raises:
        InvalidDuration: If ``duration <= 0``.
        PopulationOverflow: If an initial count does not fit int64, or a
            population becomes inf/nan or exceeds int64.
    """
    if duration <= 0:
        raise InvalidDuration(duration)

    logger.debug(
        f"Simulating {duration} steps from rabbits={initial_rabbits}, "
        f"foxes={initial_foxes} with {params}"
    )

    rabbits = [_initial_population(initial_rabbits, "Rabbit")]
    foxes = [_initial_population(initial_foxes, "Fox")]
    for i in range(1, duration + 1):
        new_rabbits, new_foxes = step(params, float(rabbits[i - 1]), float(foxes[i - 1]))
        rabbits.append(_to_population(new_rabbits, i, "Rabbit"))
        foxes.append(_to_population(new_foxes, i, "Fox"))

    series = PopulationSeries(rabbits, foxes)
    logger.info(f"Simulation finished: {series.length} steps, final rabbits={rabbits[-1]}, foxes={foxes[-1]}.")
    return series
