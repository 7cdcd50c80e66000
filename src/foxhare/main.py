"""
Application Initialization
==========================
This module wires the model, the store and the menu together and starts the
interactive loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Loads the parameters through the ParameterStore.
3. Instantiates the session state (AppState) and hands it to the Shell.
"""
import argparse
import logging
from typing import Optional, Sequence

from foxhare.config import DEFAULT_CONSTANTS_FILE
from foxhare.logging_config import LOG_LEVELS, setup_logging
from foxhare.model.io import ParameterStore
from foxhare.model.state import AppState
from foxhare.view.shell import Shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foxhare",
        description="Interactive fox and rabbit population simulator.",
    )
    parser.add_argument(
        "--constants-file",
        default=DEFAULT_CONSTANTS_FILE,
        help=f"File holding the simulation constants (default: {DEFAULT_CONSTANTS_FILE})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Load the parameters
    store = ParameterStore(args.constants_file)
    parameters = store.load()

    # 3. Initialize the session state and run the menu
    state = AppState(parameters=parameters)
    Shell(state, store).run()
    logger.info("Session ended.")


if __name__ == "__main__":
    main()
