"""
markov_textgen.core

The model itself:
 - tokenization strategies (SplitStrategy, tokenize)
 - the transition table and its builder
 - random-walk generation with an injectable random source
 - the binary persistence codec
 - MarkovModel, the fluent pipeline over all of the above
"""

from .errors import (
    MarkovError,
    DecodeError,
    UnsupportedVersionError,
    EmptyTableError,
    OutputWriteError,
    InvalidWidthError,
    InvalidLengthError,
    UnknownStrategyError,
    UnsupportedOperationError,
)
from .tokenizer import SplitStrategy, tokenize, split_keep_spaces, split_by_width
from .transition_table import TransitionTable, build
from .generator import Generator, RandomSource
from .codec import encode, decode
from .model import MarkovModel, BuildConfig

__all__ = [
    "MarkovError",
    "DecodeError",
    "UnsupportedVersionError",
    "EmptyTableError",
    "OutputWriteError",
    "InvalidWidthError",
    "InvalidLengthError",
    "UnknownStrategyError",
    "UnsupportedOperationError",
    "SplitStrategy",
    "tokenize",
    "split_keep_spaces",
    "split_by_width",
    "TransitionTable",
    "build",
    "Generator",
    "RandomSource",
    "encode",
    "decode",
    "MarkovModel",
    "BuildConfig",
]
