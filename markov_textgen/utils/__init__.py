# markov_textgen/utils/__init__.py
# supporting utilities: logging setup and the JSON config manager.
# config_manager depends on core, import it directly rather than from here.

from .logger_utils import configure_logging, time_block

__all__ = ["configure_logging", "time_block"]
