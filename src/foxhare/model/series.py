"""
Population Series
=================
The record of rabbit and fox counts at every simulated time step,
beginning with the initial state at index 0.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class PopulationSeries:
    """
    Immutable pair of equal-length integer columns.

    Both arrays are copied on construction and marked read-only, so a series
    is never changed after the engine hands it out.
    """

    def __init__(self, rabbits: Sequence[int] | npt.NDArray[np.int64], foxes: Sequence[int] | npt.NDArray[np.int64]) -> None:
        rabbit_arr = np.array(rabbits, dtype=np.int64).reshape(-1)
        fox_arr = np.array(foxes, dtype=np.int64).reshape(-1)
        if rabbit_arr.shape != fox_arr.shape:
            raise ValueError(
                f"Column lengths differ: {rabbit_arr.size} rabbits vs {fox_arr.size} foxes."
            )
        rabbit_arr.flags.writeable = False
        fox_arr.flags.writeable = False
        self._rabbits = rabbit_arr
        self._foxes = fox_arr

    @property
    def rabbits(self) -> npt.NDArray[np.int64]:
        return self._rabbits

    @property
    def foxes(self) -> npt.NDArray[np.int64]:
        return self._foxes

    @property
    def length(self) -> int:
        """Number of stored time steps, initial state included."""
        return int(self._rabbits.size)

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def __len__(self) -> int:
        return self.length

    def time_steps(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(time, rabbits, foxes)`` as plain ints."""
        for t, (r, f) in enumerate(zip(self._rabbits.tolist(), self._foxes.tolist())):
            yield t, r, f

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PopulationSeries):
            return NotImplemented
        return np.array_equal(self._rabbits, other._rabbits) and np.array_equal(self._foxes, other._foxes)

    def __repr__(self) -> str:
        return f"PopulationSeries(rabbits={self._rabbits.tolist()}, foxes={self._foxes.tolist()})"
