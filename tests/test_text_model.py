# tests/test_text_model.py
import pytest

from markov_textgen.context.normalizer import DEFAULT_REJECT_PATTERN
from markov_textgen.core.text_model import TextModel, TextOptions

CORPUS = "a b c\n\na b d\n   \n"


def test_blank_lines_are_skipped():
    m = TextModel(CORPUS, seed=1)
    assert m.sentences == [["a", "b", "c"], ["a", "b", "d"]]


def test_generate_only_known_sentences():
    m = TextModel(CORPUS, seed=5)
    outs = {m.generate() for _ in range(200)}
    assert outs == {"a b c", "a b d"}


def test_hello_world():
    m = TextModel("hello world")
    assert m.generate() == "hello world"


def test_generate_with_start_includes_start_word():
    m = TextModel("the cat sat\nthe dog ran", seed=2)
    for _ in range(20):
        out = m.generate_with_start("cat")
        assert out == "cat sat"


def test_unknown_start_word_is_no_result():
    m = TextModel("the cat sat")
    assert m.generate_with_start("zebra") is None


def test_empty_corpus_is_no_result():
    m = TextModel("\n\n")
    assert m.generate() is None
    assert m.stats()["states"] == 0


def test_word_count_filters():
    m = TextModel("one two three\nfour five", seed=0)
    assert m.generate(TextOptions(min_words=3)) == "one two three"
    assert m.generate(TextOptions(max_words=2)) == "four five"
    # nothing in the corpus can be this long
    assert m.generate(TextOptions(min_words=10, tries=20)) is None


def test_output_check_rejects_verbatim_copies():
    m = TextModel("hello world")
    assert m.generate(TextOptions(test_output=True, tries=5)) is None


def test_verify():
    m = TextModel("the cat sat on the mat\nthe dog ate the bone")
    # round(0.7 * 4) = 3 -> windows of 4 words
    assert m.verify(["the", "cat", "ate", "the"], 0.7, 15)
    assert not m.verify(["the", "cat", "sat", "on"], 0.7, 15)
    # max_overlap_total caps the window below the ratio
    assert not m.verify(["the", "cat", "ate", "the"], 0.7, 1)


def test_reject_pattern():
    m = TextModel('plain line\nsaid "hi" there', reject_pattern=DEFAULT_REJECT_PATTERN)
    assert m.sentences == [["plain", "line"]]


def test_seed_gives_repeatable_output():
    corpus = "a b c d\na c b d\nb a d c\nd c b a"
    one = TextModel(corpus, seed=42)
    two = TextModel(corpus, seed=42)
    assert [one.generate() for _ in range(10)] == [two.generate() for _ in range(10)]


def test_max_length_truncates():
    m = TextModel("go " * 100, seed=4)
    out = m.generate(TextOptions(max_length=3))
    assert out is not None
    assert len(out.split()) <= 3


@pytest.mark.parametrize("kwargs", [
    {"tries": 0},
    {"min_words": -1},
    {"min_words": 5, "max_words": 2},
    {"max_length": 0},
])
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        TextOptions(**kwargs)


def test_output_check_ignores_corpus_spacing():
    m = TextModel("hello    big\tworld")
    assert not m.verify(["hello", "big", "world"], 0.7, 15)
