# markov_textgen/core/transition_table.py
# token -> ordered successor list, plus the builder that fills it from a token sequence.

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)

Token = str


class TransitionTable:
    """
    Mapping of token -> list of tokens observed right after it.

    Invariants:
      - keys are unique
      - each successor list is kept in observation order and keeps duplicates;
        a token seen 3x as a successor is 3x as likely to be sampled
      - key order carries no meaning (equality ignores it)

    Lookups for unknown tokens return an empty list and never create keys.
    """

    __slots__ = ("_succ",)

    def __init__(self, data: Optional[Mapping[Token, Iterable[Token]]] = None) -> None:
        self._succ: Dict[Token, List[Token]] = {}
        if data:
            for key, values in data.items():
                self._succ[key] = list(values)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(self, prev: Token, nxt: Token) -> None:
        """Record one observed transition prev -> nxt."""
        self._succ.setdefault(prev, []).append(nxt)

    def clear(self) -> None:
        self._succ.clear()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def successors(self, token: Token) -> List[Token]:
        # live list, callers must not mutate it
        return self._succ.get(token, [])

    def keys(self) -> List[Token]:
        return list(self._succ)

    def items(self) -> Iterator[Tuple[Token, List[Token]]]:
        return iter(self._succ.items())

    def transition_count(self) -> int:
        return sum(len(v) for v in self._succ.values())

    def to_dict(self) -> Dict[Token, List[Token]]:
        """Plain-dict copy, safe to mutate."""
        return {k: list(v) for k, v in self._succ.items()}

    @classmethod
    def from_dict(cls, data: Mapping[Token, Iterable[Token]]) -> "TransitionTable":
        return cls(data)

    def __len__(self) -> int:
        return len(self._succ)

    def __bool__(self) -> bool:
        return bool(self._succ)

    def __contains__(self, token: object) -> bool:
        return token in self._succ

    def __iter__(self) -> Iterator[Token]:
        return iter(self._succ)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._succ == other._succ

    def __repr__(self) -> str:
        return f"TransitionTable(keys={len(self)}, transitions={self.transition_count()})"


def build(tokens: Sequence[Token], table: TransitionTable) -> TransitionTable:
    """
    Append every adjacent pair (tokens[i], tokens[i+1]) to `table` and return it.
    Fewer than two tokens leaves the table untouched. Repeated calls accumulate.
    """
    for prev, nxt in zip(tokens, tokens[1:]):
        table.add(prev, nxt)
    logger.debug("built from %d tokens; table now has %d keys", len(tokens), len(table))
    return table
