# markov_textgen/core/tokenizer.py
# splits source text into tokens, either words + single whitespace chars or fixed-width chunks.

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union
import logging

from .errors import InvalidWidthError, UnknownStrategyError
from .transition_table import Token

logger = logging.getLogger(__name__)

# characters that end a word and become tokens of their own
_BREAK_CHARS = frozenset(" \n")


class SplitStrategy(Enum):
    """How source text is cut into tokens."""
    SPACES = "spaces"          # words, with every space/newline kept as its own token
    CHARACTERS = "characters"  # consecutive chunks of N code points

    @classmethod
    def parse(cls, value: Union["SplitStrategy", str]) -> "SplitStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(s.value for s in cls)
            raise UnknownStrategyError(f"unknown split strategy {value!r} (choose from {names})") from None


# ------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------
def split_keep_spaces(text: str) -> List[Token]:
    """
    Split on spaces and newlines, keeping each of those characters as a token.

    "ab  cd\\n" -> ["ab", " ", " ", "cd", "\\n"]
    Tabs and carriage returns are not break characters, they stay inside words.
    """
    out: List[Token] = []
    word: List[str] = []
    for ch in text:
        if ch in _BREAK_CHARS:
            if word:
                out.append("".join(word))
                word = []
            out.append(ch)
        else:
            word.append(ch)
    if word:
        out.append("".join(word))
    return out


def split_by_width(text: str, width: int) -> List[Token]:
    """Cut text into chunks of `width` code points; the last chunk holds the rest."""
    _check_width(width)
    return [text[i:i + width] for i in range(0, len(text), width)]


def _check_width(width: object) -> None:
    # bool is an int subclass but never a sensible width
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidWidthError(f"width must be an integer, got {width!r}")
    if width <= 0:
        raise InvalidWidthError(f"width must be positive, got {width}")


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def tokenize(
    text: str,
    strategy: Union[SplitStrategy, str] = SplitStrategy.SPACES,
    width: Optional[int] = None,
) -> List[Token]:
    """
    Tokenize `text` under `strategy`.
    `width` is required for SplitStrategy.CHARACTERS and ignored otherwise.
    No normalisation is applied; tokens are exact substrings of the input.
    """
    strat = SplitStrategy.parse(strategy)
    if strat is SplitStrategy.CHARACTERS:
        tokens = split_by_width(text, width)  # type: ignore[arg-type]
    else:
        tokens = split_keep_spaces(text)
    logger.debug("tokenized %d chars into %d tokens (%s)", len(text), len(tokens), strat.value)
    return tokens
