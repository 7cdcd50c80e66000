"""
Simulation Engine
=================
The core implementation of the discrete predator-prey recurrence.

Note: This package should be pure Python/NumPy and must not print or prompt.
"""
from foxhare.controller.engine import simulate, step
