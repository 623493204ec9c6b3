# tests/test_normalizer.py
import re
from markov_textgen.context.normalizer import (
    DEFAULT_REJECT_PATTERN,
    fold_ascii,
    normalize_whitespace,
    sentence_input,
)


def test_blank_lines_are_not_sentences():
    assert not sentence_input("")
    assert not sentence_input("   ")
    assert sentence_input("a line")


def test_no_reject_pattern_accepts_quotes_and_brackets():
    assert sentence_input('he said "hi" (twice)')


def test_default_reject_pattern():
    assert not sentence_input('he said "hi"', DEFAULT_REJECT_PATTERN)
    assert not sentence_input("call it (maybe)", DEFAULT_REJECT_PATTERN)
    assert not sentence_input("'quoted start", DEFAULT_REJECT_PATTERN)
    assert not sentence_input("a 'loose quote", DEFAULT_REJECT_PATTERN)
    # apostrophes inside words are fine
    assert sentence_input("don't panic", DEFAULT_REJECT_PATTERN)


def test_reject_accepts_compiled_pattern():
    pat = re.compile(r"\d")
    assert not sentence_input("route 66", pat)
    assert sentence_input("route sixty six", pat)


def test_fold_ascii_strips_accents():
    assert fold_ascii("café naïve") == "cafe naive"


def test_normalize_whitespace():
    assert normalize_whitespace("  a   b\tc ") == "a b c"
    assert normalize_whitespace("") == ""


def test_fold_ascii_maps_typographic_quotes():
    assert fold_ascii("“hi” ‘x’") == "\"hi\" 'x'"


def test_curly_quotes_are_rejected():
    assert not sentence_input("he said “hi” there", DEFAULT_REJECT_PATTERN)
    assert not sentence_input("a ‘loose quote", DEFAULT_REJECT_PATTERN)
    # curly apostrophe inside a word is still fine
    assert sentence_input("don’t panic", DEFAULT_REJECT_PATTERN)
