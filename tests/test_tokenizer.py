# tests/test_tokenizer.py
import pytest

from markov_textgen.core.errors import InvalidWidthError, UnknownStrategyError
from markov_textgen.core.tokenizer import (
    SplitStrategy,
    split_by_width,
    split_keep_spaces,
    tokenize,
)


def test_spaces_keeps_whitespace_tokens():
    assert tokenize("ab cd", SplitStrategy.SPACES) == ["ab", " ", "cd"]


def test_spaces_newlines_and_runs():
    assert split_keep_spaces("a\n\nb") == ["a", "\n", "\n", "b"]
    assert split_keep_spaces(" lead") == [" ", "lead"]
    assert split_keep_spaces("trail ") == ["trail", " "]


def test_all_whitespace_gives_one_token_per_char():
    s = " \n  \n"
    toks = split_keep_spaces(s)
    assert len(toks) == len(s)
    assert all(len(t) == 1 for t in toks)


def test_tabs_are_part_of_words():
    assert split_keep_spaces("a\tb c") == ["a\tb", " ", "c"]


def test_no_normalisation():
    assert tokenize("The, THE the.") == ["The,", " ", "THE", " ", "the."]


def test_fixed_width():
    assert tokenize("abcdefg", SplitStrategy.CHARACTERS, 3) == ["abc", "def", "g"]
    assert split_by_width("abcdef", 3) == ["abc", "def"]


def test_fixed_width_counts_code_points():
    assert split_by_width("žluťoučký", 2) == ["žl", "uť", "ou", "čk", "ý"]


@pytest.mark.parametrize("width", [1, 2, 3, 5, 50])
def test_last_chunk_in_range(width):
    toks = split_by_width("the quick brown fox", width)
    assert 1 <= len(toks[-1]) <= width
    assert all(len(t) == width for t in toks[:-1])


@pytest.mark.parametrize("text", ["", "x", "the cat sat.\nthe cat ran. ", "  \n"])
def test_tokens_concatenate_back_to_input(text):
    assert "".join(tokenize(text, "spaces")) == text
    assert "".join(tokenize(text, "characters", 4)) == text


@pytest.mark.parametrize("width", [0, -1, True, 2.5, None])
def test_fixed_width_rejects_bad_width(width):
    with pytest.raises(InvalidWidthError):
        tokenize("abc", SplitStrategy.CHARACTERS, width)


def test_bad_width_is_a_value_error():
    with pytest.raises(ValueError):
        split_by_width("abc", 0)


def test_spaces_ignores_width():
    assert tokenize("a b", SplitStrategy.SPACES, 0) == ["a", " ", "b"]


def test_strategy_by_name():
    assert tokenize("abcd", "CHARACTERS", 2) == ["ab", "cd"]
    assert SplitStrategy.parse(" Spaces ") is SplitStrategy.SPACES
    with pytest.raises(UnknownStrategyError):
        tokenize("abc", "sentences")


def test_empty_text():
    assert tokenize("") == []
    assert tokenize("", SplitStrategy.CHARACTERS, 3) == []
