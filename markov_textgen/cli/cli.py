"""
cli.py - command line front end for markov_textgen
Commands:
- train     read a text file, build the transition table, save the model file
- generate  load a model file and sample text from it
- run       train in memory and generate in one go (no model file)
- inspect   show the most branching tokens of a saved model
- config    show or change persisted settings
Uses Rich for tables and formatting.
"""

import argparse
import os
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from markov_textgen import __version__
from markov_textgen.core.errors import MarkovError
from markov_textgen.core.generator import Generator
from markov_textgen.core.model import BuildConfig, MarkovModel
from markov_textgen.core.tokenizer import SplitStrategy
from markov_textgen.utils.config_manager import DEFAULT_CONFIG_PATH, LOG_LEVELS, Config, parse_log_level
from markov_textgen.utils.logger_utils import configure_logging, time_block

console = Console()
err_console = Console(stderr=True)

STRATEGIES = [s.value for s in SplitStrategy]


# ARGUMENTS ---------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Train a token transition model from text and generate new text from it.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON settings file")
    parser.add_argument("--log-level", type=parse_log_level, choices=LOG_LEVELS, default=None, help="log verbosity")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_build_opts(p):
        p.add_argument("source", help="text file to learn from")
        p.add_argument("--strategy", choices=STRATEGIES, default=None, help="how to split the source")
        p.add_argument("--width", type=int, default=None, help="chunk size for --strategy characters")

    def add_gen_opts(p):
        p.add_argument("--length", "-n", type=int, default=None, help="tokens to append after the start token")
        p.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
        p.add_argument("--output", "-o", default=None, help="write text here instead of printing it")

    p_train = sub.add_parser("train", help="build a model file from a text file")
    add_build_opts(p_train)
    p_train.add_argument("--model", "-m", default=None, help="model file to write")
    p_train.add_argument("--append", action="store_true", help="accumulate into an existing model file")

    p_gen = sub.add_parser("generate", help="generate text from a model file")
    p_gen.add_argument("--model", "-m", default=None, help="model file to read")
    add_gen_opts(p_gen)

    p_run = sub.add_parser("run", help="train in memory and generate")
    add_build_opts(p_run)
    add_gen_opts(p_run)

    p_inspect = sub.add_parser("inspect", help="summarise a model file")
    p_inspect.add_argument("--model", "-m", default=None, help="model file to read")
    p_inspect.add_argument("--top", type=int, default=10, help="number of tokens to list")

    p_cfg = sub.add_parser("config", help="show settings, or set one: config KEY VALUE")
    p_cfg.add_argument("key", nargs="?")
    p_cfg.add_argument("value", nargs="?")
    return parser


def _pick(cli_value, cfg: Config, key: str):
    """CLI flag wins over the config file."""
    return cli_value if cli_value is not None else cfg.get(key)


def _build_config(args, cfg: Config) -> BuildConfig:
    strategy = SplitStrategy.parse(_pick(args.strategy, cfg, "strategy"))
    width = _pick(args.width, cfg, "width") if strategy is SplitStrategy.CHARACTERS else None
    return BuildConfig(strategy=strategy, width=width)


def _generator(seed: Optional[int]) -> Generator:
    return Generator.seeded(seed) if seed is not None else Generator()


# COMMANDS ------------------------------------------------------------------
def cmd_train(args, cfg: Config) -> int:
    model_path = _pick(args.model, cfg, "model_path")
    model = MarkovModel()
    if args.append and os.path.exists(model_path):
        model.read_table(model_path)

    with time_block("train"):
        model.read_source_from_file(args.source).build_with(_build_config(args, cfg))
    model.write_table(model_path)

    summary = Table(title="Model saved", box=box.SIMPLE)
    summary.add_column("field", style="cyan")
    summary.add_column("value", justify="right")
    summary.add_row("path", escape(model_path))
    summary.add_row("keys", str(len(model.table)))
    summary.add_row("transitions", str(model.table.transition_count()))
    console.print(summary)
    return 0


def _emit(model: MarkovModel, args, cfg: Config) -> int:
    text = model.generate(_pick(args.length, cfg, "length"))
    if args.output:
        model.write_text(text, args.output)
        console.print(f"[green]wrote {len(text)} chars ->[/green] {escape(args.output)}")
    else:
        console.out(text, highlight=False)
    return 0


def cmd_generate(args, cfg: Config) -> int:
    model = MarkovModel(_generator(_pick(args.seed, cfg, "seed")))
    model.read_table(_pick(args.model, cfg, "model_path"))
    return _emit(model, args, cfg)


def cmd_run(args, cfg: Config) -> int:
    model = MarkovModel(_generator(_pick(args.seed, cfg, "seed")))
    model.read_source_from_file(args.source).build_with(_build_config(args, cfg))
    return _emit(model, args, cfg)


def cmd_inspect(args, cfg: Config) -> int:
    model_path = _pick(args.model, cfg, "model_path")
    table = MarkovModel().read_table(model_path).table
    ranked = sorted(table.items(), key=lambda kv: (-len(kv[1]), kv[0]))[: max(args.top, 0)]

    view = Table(title=f"{escape(model_path)}: {len(table)} keys, {table.transition_count()} transitions", box=box.SIMPLE)
    view.add_column("token", style="bold")
    view.add_column("successors", justify="right")
    view.add_column("distinct", justify="right")
    for token, succ in ranked:
        view.add_row(escape(repr(token)), str(len(succ)), str(len(set(succ))))
    console.print(view)
    return 0


def cmd_config(args, cfg: Config) -> int:
    if args.key is None:
        view = Table(box=box.SIMPLE)
        view.add_column("key", style="cyan")
        view.add_column("value")
        for k, v in cfg.as_dict().items():
            view.add_row(k, escape(str(v)))
        console.print(view)
        return 0
    if args.value is None:
        err_console.print("[red]usage:[/red] config KEY VALUE")
        return 2
    try:
        cfg.set(args.key, args.value)
    except (KeyError, ValueError) as e:
        err_console.print(f"[red]config error:[/red] {escape(str(e))}")
        return 2
    cfg.save()
    console.print(escape(f"{args.key} = {cfg.get(args.key)}"))
    return 0


COMMANDS = {
    "train": cmd_train,
    "generate": cmd_generate,
    "run": cmd_run,
    "inspect": cmd_inspect,
    "config": cmd_config,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    configure_logging(args.log_level or cfg.get("log_level"), args.log_file)
    try:
        return COMMANDS[args.command](args, cfg)
    except MarkovError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2
