# markov_textgen.utils - logging, config and file helpers shared by the core and the CLI
