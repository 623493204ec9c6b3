# markov_textgen/context/normalizer.py
# line filtering applied to the corpus before tokenization

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from unidecode import unidecode

# lines with stray single quotes, double quotes or brackets confuse the
# generated output; opt in via reject_pattern
DEFAULT_REJECT_PATTERN = r"""(^')|('$)|\s'|'\s|["()\[\]]"""

RejectArg = Optional[Union[str, Pattern[str]]]


def normalize_whitespace(s: str) -> str:
    if not s:
        return ""
    return " ".join(s.split())


def fold_ascii(s: str) -> str:
    """Transliterate to ASCII so typographic quotes fold to their plain forms."""
    return unidecode(s)


def compile_reject(reject: RejectArg) -> Optional[Pattern[str]]:
    if reject is None or isinstance(reject, re.Pattern):
        return reject
    return re.compile(reject)


def sentence_input(line: str, reject: RejectArg = None) -> bool:
    """
    Decide whether a corpus line becomes a training example.
    Blank lines never do. With a reject pattern, lines whose ASCII-folded
    text matches it are dropped as well.
    """
    if not line or not line.strip():
        return False
    pattern = compile_reject(reject)
    if pattern is not None and pattern.search(fold_ascii(line)):
        return False
    return True
