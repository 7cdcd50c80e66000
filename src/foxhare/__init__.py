"""
Fox-Hare: an interactive predator-prey population simulator.

Advances rabbit and fox populations with a discrete Lotka-Volterra
recurrence and shows the result as a table or as text bar charts.
"""
from foxhare.controller.engine import simulate
from foxhare.model.parameters import ParameterSet
from foxhare.model.series import PopulationSeries
from foxhare.view.charts import ScalingVisualizer, compute_scale

__all__ = ["simulate", "ParameterSet", "PopulationSeries", "ScalingVisualizer", "compute_scale"]
