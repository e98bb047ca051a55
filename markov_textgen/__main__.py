# markov_textgen/__main__.py - lets `python -m markov_textgen` run the CLI

import sys

from markov_textgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
