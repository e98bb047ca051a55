# markov_textgen/core/model.py
"""
MarkovModel - the fluent pipeline tying tokenizer, builder, generator and codec together.

Typical use:

    text = (MarkovModel()
            .read_source_from_file("corpus.txt")
            .build(SplitStrategy.SPACES)
            .write_table("model.bin")
            .generate(200))

Every step except generate()/continue_text() mutates the model and returns it.
All state is per instance; two models never share a table or a random source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import logging

from . import codec
from .errors import OutputWriteError
from .generator import Generator
from .tokenizer import SplitStrategy, tokenize
from .transition_table import TransitionTable, build
from ..utils import file_io

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildConfig:
    """Tokenization settings used by MarkovModel.build_with()."""
    strategy: SplitStrategy = SplitStrategy.SPACES
    width: Optional[int] = None  # only used by SplitStrategy.CHARACTERS


class MarkovModel:
    def __init__(self, generator: Optional[Generator] = None) -> None:
        self.source_text: str = ""
        self.table = TransitionTable()
        self.generator = generator or Generator()

    # ------------------------------------------------------------------
    # Source text
    # ------------------------------------------------------------------
    def load_source(self, text: str) -> "MarkovModel":
        self.source_text = text
        return self

    def read_source_from_file(self, path: str, encoding: str = "utf-8") -> "MarkovModel":
        """Read the whole file as source text. Exits the process if it cannot be read."""
        self.source_text = file_io.read_text(path, encoding=encoding)
        logger.info("read %d chars of source text from %s", len(self.source_text), path)
        return self

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def build(
        self,
        strategy: Union[SplitStrategy, str] = SplitStrategy.SPACES,
        width: Optional[int] = None,
    ) -> "MarkovModel":
        """Tokenize the current source text and accumulate its transitions into the table."""
        tokens = tokenize(self.source_text, strategy, width)
        build(tokens, self.table)
        return self

    def build_with(self, config: BuildConfig) -> "MarkovModel":
        return self.build(config.strategy, config.width)

    def reset(self) -> "MarkovModel":
        self.table.clear()
        return self

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, length: int) -> str:
        return self.generator.generate(self.table, length)

    def continue_text(self, text: str, length: int) -> str:
        return self.generator.continue_text(self.table, text, length)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def write_table(self, path: str) -> "MarkovModel":
        data = codec.encode(self.table)
        file_io.write_bytes(path, data)
        logger.info("saved model (%d keys, %d bytes) -> %s", len(self.table), len(data), path)
        return self

    def read_table(self, path: str) -> "MarkovModel":
        """
        Replace the in-memory table with the one stored at `path`.
        Exits if the file cannot be read; raises DecodeError if its content is bad,
        in which case the current table is left as it was.
        """
        self.table = codec.decode(file_io.read_bytes(path))
        logger.info("loaded model (%d keys) from %s", len(self.table), path)
        return self

    def write_text(self, text: str, path: str) -> "MarkovModel":
        try:
            file_io.write_text(path, text)
        except OSError as e:
            logger.error("failed to write output file %s: %s", path, e)
            raise OutputWriteError(f"failed to write output file `{path}`: {e}") from e
        logger.info("wrote %d chars -> %s", len(text), path)
        return self

    def __repr__(self) -> str:
        return f"MarkovModel(source_chars={len(self.source_text)}, table={self.table!r})"
