"""
Configuration & Constants
=========================
This module serves as the central registry for file names and global constants.

Exports:
    DEFAULT_CONSTANTS_FILE (str): Parameter file used when none is given.
    DEFAULT_RATES (tuple): Default rates in persisted order.
    CHART_WIDTH (int): Maximum bar length of the text charts.
    CHART_MARK (str): Character used to draw the bars.
"""

# Global Constants
DEFAULT_CONSTANTS_FILE: str = "constants.txt"

# birth, death, predation, fox birth per rabbit eaten, fox death
DEFAULT_RATES: tuple[float, float, float, float, float] = (0.1, 0.05, 0.02, 0.01, 0.1)

# Persisted values are written with this many decimals
PARAMETER_DECIMALS: int = 4

CHART_WIDTH: int = 50
CHART_MARK: str = "*"
