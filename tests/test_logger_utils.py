# tests/test_logger_utils.py
import logging

from rich.logging import RichHandler

from markov_textgen.utils.logger_utils import configure_logging, time_block


def test_configure_logging_replaces_handler():
    log = configure_logging(logging.DEBUG, use_color=False)
    assert len(log.handlers) == 1
    assert not isinstance(log.handlers[0], RichHandler)
    log = configure_logging(logging.INFO, use_color=True)
    assert len(log.handlers) == 1
    assert isinstance(log.handlers[0], RichHandler)
    assert log.level == logging.INFO


def test_time_block_logs_elapsed(caplog):
    logger = logging.getLogger("markov_textgen.test")
    with caplog.at_level(logging.DEBUG, logger="markov_textgen.test"):
        with time_block("work", logger) as t:
            sum(range(1000))
    assert t.elapsed >= 0
    assert any("work done in" in r.getMessage() for r in caplog.records)
