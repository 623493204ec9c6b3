# markov_textgen/context/tokens.py
# token types shared by the tokenizer and the chain

from __future__ import annotations

from enum import Enum
from typing import Union

Word = str


class Marker(Enum):
    """
    Sentinel tokens framing every training run.
    START is a regular predecessor key and END a regular successor, so
    picking a first word and stopping both go through the same weighted draw.
    """
    START = "___BEGIN__"
    END = "___END__"

    def __repr__(self) -> str:
        return f"Marker.{self.name}"


START = Marker.START
END = Marker.END

# a word or one of the markers; a str never compares equal to a Marker
Token = Union[Word, Marker]


def is_marker(tok: object) -> bool:
    return isinstance(tok, Marker)
