import logging
from e2e_support.utils.logging import setup_logger


def test_setup_logger_adds_a_single_handler():
    first = setup_logger("TeardownServiceLoggerTest")
    second = setup_logger("TeardownServiceLoggerTest")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
    assert second.propagate is False
