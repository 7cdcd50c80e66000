"""
Text Charts
===========
Renders a PopulationSeries as a table or as bar charts drawn with a single
character. Every render method returns the text block to print.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from foxhare.config import CHART_MARK, CHART_WIDTH
from foxhare.exceptions import NoSeriesAvailable
from foxhare.model.series import PopulationSeries

logger = logging.getLogger(__name__)

NO_DATA_NOTICE = "No simulation data available. Please run a simulation first.\n"

TABLE_RULE = "-" * 28
CHART_RULE = "-" * 39


def compute_scale(values: Iterable[int], chart_width: int = CHART_WIDTH) -> int:
    """
    Individuals per mark so that the largest value fits ``chart_width`` marks.

    ``max // chart_width + 1`` is always at least 1. Negative values count
    as zero.
    """
    values = list(values)
    if not values:
        raise ValueError("Cannot compute a scale for an empty sequence.")
    largest = max(0, max(int(v) for v in values))
    return largest // chart_width + 1


class ScalingVisualizer:
    """
    Pure reader of a PopulationSeries; owns no series state.
    """

    def __init__(self, chart_width: int = CHART_WIDTH, mark: str = CHART_MARK) -> None:
        self.chart_width = chart_width
        self.mark = mark

    def _bar(self, value: int, scale: int) -> str:
        return self.mark * max(0, value // scale)

    @staticmethod
    def _require(series: Optional[PopulationSeries]) -> PopulationSeries:
        if series is None or series.is_empty:
            raise NoSeriesAvailable("No simulation data available.")
        return series

    def _columns(self, series: Optional[PopulationSeries]) -> tuple[list[int], list[int]]:
        series = self._require(series)
        return series.rabbits.tolist(), series.foxes.tolist()

    def render_table(self, series: Optional[PopulationSeries]) -> str:
        try:
            series = self._require(series)
        except NoSeriesAvailable:
            logger.info("Table requested before any simulation.")
            return NO_DATA_NOTICE

        lines = ["", "Time\tRabbits\tFoxes", TABLE_RULE]
        for t, r, f in series.time_steps():
            lines.append(f"{t}\t{r}\t{f}")
        lines.append("")
        return "\n".join(lines)

    def render_dual_time_chart(self, series: Optional[PopulationSeries]) -> str:
        """Both species against time, on one scale shared by all values."""
        try:
            rabbits, foxes = self._columns(series)
        except NoSeriesAvailable:
            logger.info("Population vs. time chart requested before any simulation.")
            return NO_DATA_NOTICE

        scale = compute_scale(rabbits + foxes, self.chart_width)
        logger.debug(f"Dual chart scale: {scale}")

        lines = [
            "",
            "Population vs. Time Diagram (Text-Based)",
            f"Each '{self.mark}' represents approximately {scale} individuals.",
            "Time\tRabbits\tFoxes",
            CHART_RULE,
        ]
        for t, (r, f) in enumerate(zip(rabbits, foxes)):
            lines.append(f"{t}\t{self._bar(r, scale)}\t{self._bar(f, scale)}")
        lines.append("")
        return "\n".join(lines)

    def render_fox_vs_rabbit_chart(self, series: Optional[PopulationSeries]) -> str:
        """
        Rabbit counts printed as numbers, fox counts drawn as bars.

        Each species gets its own scale; the rabbit scale only appears in the
        legend.
        """
        try:
            rabbits, foxes = self._columns(series)
        except NoSeriesAvailable:
            logger.info("Fox vs. rabbit chart requested before any simulation.")
            return NO_DATA_NOTICE

        scale_rabbits = compute_scale(rabbits, self.chart_width)
        scale_foxes = compute_scale(foxes, self.chart_width)
        logger.debug(f"Fox vs. rabbit scales: rabbits={scale_rabbits}, foxes={scale_foxes}")

        lines = [
            "",
            "Fox Population vs. Rabbit Population Diagram (Text-Based)",
            f"Each '{self.mark}' represents approximately {scale_rabbits} Rabbits and {scale_foxes} Foxes.",
            "Rabbits\tFoxes\t",
            CHART_RULE,
        ]
        for r, f in zip(rabbits, foxes):
            lines.append(f"{r}\t{self._bar(f, scale_foxes)}")
        lines.append("")
        return "\n".join(lines)
