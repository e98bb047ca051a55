# markov_textgen.cli - command line entry point

from .cli import main, build_parser

__all__ = ["main", "build_parser"]
