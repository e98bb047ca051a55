# markov_textgen/core/generator.py
# random walk over a TransitionTable.

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable
import logging
import random

from .errors import EmptyTableError, InvalidLengthError, UnsupportedOperationError
from .transition_table import Token, TransitionTable

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform index in [0, n). random.Random qualifies."""

    def randrange(self, n: int) -> int:
        ...


class Generator:
    """
    Samples text by following recorded successors from a random start token.

    Selection is uniform over the successor list; since the list keeps
    duplicates, frequent successors are picked proportionally more often.
    A token with no successors is a dead end and stops the walk early.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "Generator":
        """Deterministic generator, for tests and reproducible runs."""
        return cls(random.Random(seed))

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def pick_start(self, table: TransitionTable) -> Token:
        if not table:
            raise EmptyTableError("cannot generate from an empty transition table; build or load one first")
        # sorted so a seeded rng does not depend on insertion order
        keys = sorted(table.keys())
        return keys[self.rng.randrange(len(keys))]

    def walk(self, table: TransitionTable, start: Token, length: int) -> List[Token]:
        """
        Follow the chain from `start` for at most `length` steps.
        Returns the visited tokens, `start` included.
        """
        _check_length(length)
        out = [start]
        current = start
        for _ in range(length):
            options = table.successors(current)
            if not options:
                logger.debug("dead end at %r after %d steps", current, len(out) - 1)
                break
            current = options[self.rng.randrange(len(options))]
            out.append(current)
        return out

    def generate(self, table: TransitionTable, length: int) -> str:
        """
        Generate text of at most `length + 1` tokens.
        `length` counts steps (tokens appended after the start), not characters.
        """
        _check_length(length)
        start = self.pick_start(table)
        return "".join(self.walk(table, start, length))

    def continue_text(self, table: TransitionTable, text: str, length: int) -> str:
        # continuation from a seed phrase is not supported
        raise UnsupportedOperationError("continuing generation from given text is not supported")


def _check_length(length: object) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidLengthError(f"length must be >= 0, got {length}")
