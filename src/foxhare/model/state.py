"""
Application State (Data Model)
==============================
This module defines the central data structure for the running session.

Why is this file needed?
------------------------
1. State Management: It holds the current parameters and the latest
   simulation result in one place.
2. Decoupling: The shell owns this object and passes its parts explicitly
   into the engine and the visualizer; nothing reads it globally.

Classes:
    AppState: The session container.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from foxhare.model.parameters import ParameterSet
from foxhare.model.series import PopulationSeries

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Holds the session state. Pass this instance to the shell.

    The series is replaced wholesale by every run and never edited in place.
    """
    parameters: ParameterSet = field(default_factory=ParameterSet)
    series: Optional[PopulationSeries] = None

    @property
    def has_series(self) -> bool:
        return self.series is not None and not self.series.is_empty

    def replace_series(self, series: PopulationSeries) -> None:
        previous = self.series.length if self.series is not None else 0
        self.series = series
        logger.debug(f"Series replaced ({previous} -> {series.length} steps).")

    def clear_series(self) -> None:
        """Release the current series."""
        self.series = None
        logger.debug("Series released.")
