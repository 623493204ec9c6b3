# config_manager.py - JSON config for generation defaults

import json
import logging
import os
from typing import Optional

from markov_textgen.context.normalizer import DEFAULT_REJECT_PATTERN
from markov_textgen.core.text_model import TextOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "markov_textgen.json"

# options whose default None is a meaningful value
_NULLABLE = ("max_words", "seed")


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH):
        self.path = path
        self.data = {
            "tries": 999,
            "min_words": 0,
            "max_words": None,  # no upper limit
            "max_length": 300,  # successor draws per walk
            "test_output": False,
            "max_overlap_ratio": 0.7,
            "max_overlap_total": 15,
            "reject_sentences": False,
            "seed": None,
        }
        self._defaults = dict(self.data)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("ignoring unknown config key %r", k)
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except (TypeError, ValueError):
                logger.warning("ignoring config %r=%r: expected %s", k, v, self._expected(k))

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)

    def _expected(self, key):
        default = self._defaults[key]
        return "int or null" if default is None else type(default).__name__

    def _coerce(self, key, val):
        """Convert val to the type of the option's default; raises ValueError or TypeError."""
        default = self._defaults[key]
        if val is None:
            if key in _NULLABLE:
                return None
            raise ValueError(f"{key} cannot be null")
        # bool before int, bool is an int subclass
        if isinstance(default, bool):
            if isinstance(val, bool):
                return val
            if isinstance(val, int):
                return bool(val)
            return str(val).strip().lower() in ("1", "true", "yes", "on")
        if isinstance(val, bool):
            raise TypeError(f"{key} does not take a boolean")
        if default is None or isinstance(default, int):
            return int(val)
        return type(default)(val)

    def text_options(self, **overrides) -> TextOptions:
        fields = {
            k: self.data[k]
            for k in ("tries", "min_words", "max_words", "max_length", "test_output",
                      "max_overlap_ratio", "max_overlap_total")
        }
        fields.update({k: v for k, v in overrides.items() if v is not None})
        return TextOptions(**fields)

    def reject_pattern(self) -> Optional[str]:
        return DEFAULT_REJECT_PATTERN if self.data["reject_sentences"] else None
