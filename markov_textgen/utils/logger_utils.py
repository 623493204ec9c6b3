# logger_utils.py - logging setup and block timing for markov_textgen

import logging
import time
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT = "markov_textgen"


def configure_logging(level: int = logging.INFO, use_color: bool = True) -> logging.Logger:
    """
    Attach one handler to the package logger.
    Colour output goes through rich, otherwise a plain stream handler is used.
    Calling it again replaces the previous handler.
    """
    log = logging.getLogger(_ROOT)
    for h in list(log.handlers):
        log.removeHandler(h)

    if use_color:
        handler: logging.Handler = RichHandler(show_path=False, log_time_format=DATE_FORMAT)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    log.addHandler(handler)
    log.setLevel(level)
    return log


def time_block(label: str, logger: Optional[logging.Logger] = None) -> "_Timer":
    """
    Measure how long a block takes and log it at DEBUG.
    To use:
        with time_block("training"):
            do_some_work()
    """
    return _Timer(label, logger or logging.getLogger(_ROOT))


class _Timer:
    """Context manager used internally by time_block."""
    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.logger.debug("%s done in %ss", self.label, self.elapsed)
        return False
