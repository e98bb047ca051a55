# markov_textgen/core/errors.py
"""
Exception hierarchy for the text generator.

Everything raised on purpose by the package derives from MarkovError so
callers can catch one type. Precondition errors also subclass ValueError
and the unsupported-operation error subclasses NotImplementedError, so
generic handlers keep working.
"""


class MarkovError(Exception):
    """Base class for recoverable errors raised by markov_textgen."""


class DecodeError(MarkovError):
    """Persisted model bytes are corrupt, truncated or malformed."""


class UnsupportedVersionError(DecodeError):
    """Persisted model uses a format version this build cannot read."""

    def __init__(self, version: int, supported: int) -> None:
        super().__init__(f"unsupported model format version {version} (expected {supported})")
        self.version = version
        self.supported = supported


class EmptyTableError(MarkovError):
    """Generation was requested from a table with no tokens."""


class OutputWriteError(MarkovError):
    """Generated text could not be written; the in-memory model is still valid."""


class InvalidWidthError(MarkovError, ValueError):
    """Fixed-width tokenization needs a positive integer width."""


class InvalidLengthError(MarkovError, ValueError):
    """Generation length must be a non-negative integer."""


class UnknownStrategyError(MarkovError, ValueError):
    """Split strategy name not recognised."""


class UnsupportedOperationError(MarkovError, NotImplementedError):
    """Operation is declared but intentionally not implemented."""
