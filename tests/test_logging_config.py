import logging

import pytest

from foxhare.logging_config import resolve_level, setup_logging
from foxhare.main import build_parser


@pytest.fixture(autouse=True)
def reset_foxhare_logger():
    yield
    logger = logging.getLogger("foxhare")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.mark.parametrize("level,expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    ("Warning", logging.WARNING),
    (logging.ERROR, logging.ERROR),
])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_resolve_level_rejects_unknown_name():
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_uses_level_name():
    logger = setup_logging("INFO")

    assert logger.name == "foxhare"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_stack_handlers(tmp_path):
    setup_logging("DEBUG", log_file=str(tmp_path / "first.log"))
    logger = setup_logging("WARNING")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "session.log"
    logger = setup_logging("DEBUG", log_file=str(log_file))
    logging.getLogger("foxhare.controller.engine").debug("engine message")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized at DEBUG." in text
    assert "foxhare.controller.engine - DEBUG - engine message" in text


def test_cli_level_is_case_insensitive():
    args = build_parser().parse_args(["--log-level", "debug"])

    assert args.log_level == "DEBUG"
