"""
Input/Output Manager (flat file)
Handles saving and loading the ParameterSet to a plain text file:
five newline-separated values in persisted order.
"""
from __future__ import annotations

from enum import StrEnum
import logging
import os

from foxhare.config import DEFAULT_CONSTANTS_FILE, PARAMETER_DECIMALS
from foxhare.exceptions import MalformedPersistedState, StorageUnavailable
from foxhare.model.parameters import ParameterKey, ParameterSet

# Get module logger
logger = logging.getLogger(__name__)


class LoadStatus(StrEnum):
    """What the last ``load()`` did, worded for the user."""
    NOT_LOADED = ""
    LOADED = "Constants loaded."
    CREATED = "Constants file created with default values."
    CREATE_FAILED = "Error creating constants file. Using default values."
    MALFORMED = "Error reading constants file. Using default values."


class ParameterStore:
    def __init__(self, filepath: str = DEFAULT_CONSTANTS_FILE) -> None:
        self.filepath = filepath
        self.last_status = LoadStatus.NOT_LOADED

    @staticmethod
    def format_parameters(params: ParameterSet) -> str:
        return "".join(f"{value:.{PARAMETER_DECIMALS}f}\n" for value in params.as_tuple())

    @staticmethod
    def parse_parameters(text: str) -> ParameterSet:
        """
        Parse the first five whitespace-separated numbers of ``text``.

        Anything after the fifth value is ignored.
        """
        tokens = text.split()
        if len(tokens) < len(ParameterKey):
            raise MalformedPersistedState(
                f"Expected {len(ParameterKey)} values, found {len(tokens)}."
            )
        try:
            values = [float(token) for token in tokens[:len(ParameterKey)]]
        except ValueError as e:
            raise MalformedPersistedState(f"Unreadable value: {e}") from e
        return ParameterSet.from_values(values)

    def read(self) -> ParameterSet:
        """Read the file. Raises FileNotFoundError or MalformedPersistedState."""
        with open(self.filepath, "r", encoding="utf-8") as f:
            text = f.read()
        return self.parse_parameters(text)

    def write(self, params: ParameterSet) -> None:
        """Write the file. Raises StorageUnavailable."""
        try:
            with open(self.filepath, "w", encoding="utf-8") as f:
                f.write(self.format_parameters(params))
        except OSError as e:
            raise StorageUnavailable(f"Cannot write '{self.filepath}': {e}") from e

    def load(self) -> ParameterSet:
        """
        Load parameters, falling back to the defaults.

        A missing file is created with the defaults. Never raises;
        ``last_status`` tells what happened.
        """
        logger.info(f"Loading parameters from: {self.filepath}")
        try:
            params = self.read()
        except FileNotFoundError:
            params = ParameterSet()
            try:
                self.write(params)
            except StorageUnavailable as e:
                logger.warning(f"{e}")
                self.last_status = LoadStatus.CREATE_FAILED
            else:
                logger.info(f"Created '{self.filepath}' with default values.")
                self.last_status = LoadStatus.CREATED
            return params
        except (MalformedPersistedState, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Failed to read '{self.filepath}', using defaults: {e}")
            self.last_status = LoadStatus.MALFORMED
            return ParameterSet()

        self.last_status = LoadStatus.LOADED
        logger.debug(f"Loaded parameters: {params}")
        return params

    def save(self, params: ParameterSet) -> bool:
        """Persist parameters. Returns False if the file cannot be written."""
        try:
            self.write(params)
        except StorageUnavailable as e:
            logger.warning(f"{e}")
            return False
        logger.info(f"Parameters saved to: {os.path.abspath(self.filepath)}")
        return True
