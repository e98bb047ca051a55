# markov_textgen - train a token transition model from text and sample new text from it

from .core import (
    BuildConfig,
    DecodeError,
    EmptyTableError,
    Generator,
    MarkovError,
    MarkovModel,
    SplitStrategy,
    TransitionTable,
)

__all__ = [
    "BuildConfig",
    "DecodeError",
    "EmptyTableError",
    "Generator",
    "MarkovError",
    "MarkovModel",
    "SplitStrategy",
    "TransitionTable",
]

__version__ = "0.1.0"
