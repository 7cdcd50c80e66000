"""
Interactive Menu
================
Line-based front end: prompts, validates raw input and dispatches to the
engine, the visualizer and the parameter store.

The shell owns the AppState and passes its parts explicitly into the core.
"""
from __future__ import annotations

from enum import IntEnum
import logging
import sys
from typing import Callable, Optional, TextIO

from foxhare.controller.engine import simulate
from foxhare.exceptions import PopulationOverflow
from foxhare.model.io import LoadStatus, ParameterStore
from foxhare.model.parameters import PARAMETER_METADATA, ParameterKey
from foxhare.model.state import AppState
from foxhare.utils import parse_float, parse_int
from foxhare.view.charts import ScalingVisualizer

logger = logging.getLogger(__name__)


class MenuOption(IntEnum):
    """Main menu entries."""
    VIEW_PARAMETERS = 1
    EDIT_PARAMETERS = 2
    RUN_SIMULATION = 3
    VIEW_TABLE = 4
    VIEW_DUAL_CHART = 5
    VIEW_FOX_VS_RABBIT = 6
    EXIT = 7


MENU_LABELS: dict[MenuOption, str] = {
    MenuOption.VIEW_PARAMETERS: "Display Simulation Constants",
    MenuOption.EDIT_PARAMETERS: "Modify Simulation Constants",
    MenuOption.RUN_SIMULATION: "Run Simulation",
    MenuOption.VIEW_TABLE: "Display Population Over Time",
    MenuOption.VIEW_DUAL_CHART: "Display Population vs. Time Diagram",
    MenuOption.VIEW_FOX_VS_RABBIT: "Display Fox Population vs. Rabbit Population Diagram",
    MenuOption.EXIT: "Exit",
}

# Edit submenu entry that returns to the main menu
EDIT_DONE = len(ParameterKey) + 1


class Shell:
    def __init__(
        self,
        state: AppState,
        store: ParameterStore,
        visualizer: Optional[ScalingVisualizer] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.state = state
        self.store = store
        self.visualizer = visualizer or ScalingVisualizer()
        self._input = input_func or input
        self._out = output

    # ---- OUTPUT / INPUT HELPERS ----

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out or sys.stdout)

    def read_int(self, prompt: str) -> int:
        """Prompt until a line starts with an integer. Raises EOFError at end of input."""
        while True:
            value = parse_int(self._input(prompt))
            if value is not None:
                return value
            self._print("Invalid input. Please enter an integer.")

    def read_float(self, prompt: str) -> float:
        """Prompt until a line starts with a number. Raises EOFError at end of input."""
        while True:
            value = parse_float(self._input(prompt))
            if value is not None:
                return value
            self._print("Invalid input. Please enter a number.")

    # ---- MENU ACTIONS ----

    def display_menu(self) -> None:
        self._print("===== Fox-Hare Population Simulation =====")
        for option in MenuOption:
            self._print(f"{option.value}. {MENU_LABELS[option]}")
        self._print("===========================================")

    def display_parameters(self) -> None:
        params = self.state.parameters
        self._print()
        self._print("Current Simulation Constants:")
        for i, key in enumerate(ParameterKey, start=1):
            self._print(f"{i}. {PARAMETER_METADATA[key].label}: {getattr(params, key.value):.4f}")
        self._print()

    def save_parameters(self) -> None:
        if self.store.save(self.state.parameters):
            self._print("Constants saved successfully.")
        else:
            self._print("Error opening constants file for writing.")

    def edit_parameters(self) -> None:
        keys = list(ParameterKey)
        while True:
            self.display_parameters()
            choice = self.read_int(f"Select the constant to modify (1-{len(keys)}) or {EDIT_DONE} to exit: ")
            if choice == EDIT_DONE:
                break
            if not 1 <= choice <= len(keys):
                self._print("Invalid choice. Please select a valid option.")
                continue
            key = keys[choice - 1]
            value = self.read_float(PARAMETER_METADATA[key].prompt)
            self.state.parameters.update(key, value)
            self.save_parameters()

    def run_simulation(self) -> None:
        self._print()
        self._print("--- Run Simulation ---")
        initial_rabbits = self.read_int("Enter initial number of rabbits: ")
        initial_foxes = self.read_int("Enter initial number of foxes: ")
        duration = self.read_int("Enter simulation duration (time steps): ")

        if duration <= 0:
            self._print("Duration must be a positive integer.")
            return

        try:
            series = simulate(self.state.parameters, initial_rabbits, initial_foxes, duration)
        except PopulationOverflow as e:
            logger.warning(f"Simulation aborted: {e}")
            self._print(f"Simulation aborted: {e}")
            self._print()
            return

        self.state.replace_series(series)
        self._print("Simulation completed successfully.")
        self._print()

    def show_table(self) -> None:
        self._print(self.visualizer.render_table(self.state.series))

    def show_dual_chart(self) -> None:
        self._print(self.visualizer.render_dual_time_chart(self.state.series))

    def show_fox_vs_rabbit(self) -> None:
        self._print(self.visualizer.render_fox_vs_rabbit_chart(self.state.series))

    def exit(self) -> None:
        self.state.clear_series()
        self._print("Exiting program.")

    # ---- DISPATCH ----

    def dispatch(self, choice: int) -> bool:
        """Run one menu choice. Returns False when the session should end."""
        actions: dict[MenuOption, Callable[[], None]] = {
            MenuOption.VIEW_PARAMETERS: self.display_parameters,
            MenuOption.EDIT_PARAMETERS: self.edit_parameters,
            MenuOption.RUN_SIMULATION: self.run_simulation,
            MenuOption.VIEW_TABLE: self.show_table,
            MenuOption.VIEW_DUAL_CHART: self.show_dual_chart,
            MenuOption.VIEW_FOX_VS_RABBIT: self.show_fox_vs_rabbit,
        }
        if choice == MenuOption.EXIT:
            self.exit()
            return False
        try:
            action = actions[MenuOption(choice)]
        except ValueError:
            self._print("Invalid choice. Please select a valid option.")
            return True
        action()
        return True

    def report_load_status(self) -> None:
        if self.store.last_status not in (LoadStatus.NOT_LOADED, LoadStatus.LOADED):
            self._print(self.store.last_status.value)

    def run(self) -> None:
        """Main loop. Ends on the exit option or at end of input."""
        self.report_load_status()
        try:
            while True:
                self.display_menu()
                if not self.dispatch(self.read_int("Enter your choice: ")):
                    return
        except EOFError:
            logger.info("End of input reached.")
            self._print()
            self.exit()
