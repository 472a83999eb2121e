import logging

import pytest

from flappy_capy.__main__ import parse_args
from flappy_capy.log import ConsoleFormatter, setup_logging


def test_parse_args_defaults():
    args = parse_args([])
    assert args.assets == "assets"
    assert args.seed is None
    assert args.champion is None
    assert args.train is None


def test_parse_args_autopilot_options():
    args = parse_args(["--train", "5", "--seed", "3", "--log-level", "debug"])
    assert args.train == 5
    assert args.seed == 3
    assert args.log_level == "debug"


def test_formatter_prefixes_the_level():
    record = logging.LogRecord("flappy_capy", logging.INFO, __file__, 1, "got %d points", (4,), None)
    assert ConsoleFormatter().format(record) == "[INFO] got 4 points"


@pytest.fixture
def restore_logger():
    root = logging.getLogger("flappy_capy")
    yield root
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


def test_setup_logging_installs_one_console_handler(restore_logger):
    setup_logging("debug")
    setup_logging("warning")
    assert len(restore_logger.handlers) == 1
    assert restore_logger.level == logging.WARNING
    assert isinstance(restore_logger.handlers[0].formatter, ConsoleFormatter)
