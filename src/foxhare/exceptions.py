"""
Error types raised by the simulator.

Only the shell and the store's recovering wrappers catch these.
"""


class FoxHareError(Exception):
    """Base class for all simulator errors."""


class InvalidDuration(FoxHareError, ValueError):
    """A simulation was requested with a non-positive number of steps."""

    def __init__(self, duration: int) -> None:
        super().__init__(f"Duration must be a positive integer, got {duration}.")
        self.duration = duration


class PopulationOverflow(FoxHareError, OverflowError):
    """A population left the representable range during a run."""

    def __init__(self, step: int, species: str, value: float) -> None:
        super().__init__(f"{species} population overflowed at step {step} ({value!r}).")
        self.step = step
        self.species = species
        self.value = value


class MalformedPersistedState(FoxHareError, ValueError):
    """The parameter file exists but cannot be parsed."""


class NoSeriesAvailable(FoxHareError, LookupError):
    """A view was requested before any simulation has run."""


class StorageUnavailable(FoxHareError, OSError):
    """The parameter file cannot be opened for writing."""
