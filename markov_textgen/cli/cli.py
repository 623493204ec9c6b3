"""
cli.py - command line wrapper around TextModel
Features:
- Reads a corpus file (one sentence per line) and trains a model on it
- Prints a number of generated sentences, optionally seeded with a start word
- Generation defaults come from a JSON config, flags override them
- Uses Rich for the output and the stats table
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from markov_textgen.context.normalizer import DEFAULT_REJECT_PATTERN
from markov_textgen.core.text_model import TextModel, TextOptions
from markov_textgen.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from markov_textgen.utils.logger_utils import configure_logging

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Generate sentences from a Markov chain trained on a text file.",
    )
    parser.add_argument("corpus", help="text file, one sentence per line")
    parser.add_argument("-n", "--count", type=int, default=5, help="sentences to generate")
    parser.add_argument("--start", help="word every sentence starts with")
    parser.add_argument("--max-length", type=int, help="max successor draws per sentence")
    parser.add_argument("--min-words", type=int)
    parser.add_argument("--max-words", type=int)
    parser.add_argument("--tries", type=int, help="attempts per sentence")
    parser.add_argument("--test-output", action="store_true", default=None,
                        help="reject sentences copying long runs of the corpus")
    parser.add_argument("--reject", action="store_true",
                        help="skip corpus lines with quotes or brackets")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    parser.add_argument("--stats", action="store_true", help="show chain statistics")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _show_stats(model: TextModel):
    stats = model.stats()
    table = Table(title="Chain", box=box.SIMPLE, show_edge=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("sentences", str(len(model.sentences)))
    table.add_row("states", str(stats["states"]))
    table.add_row("transitions", str(stats["transitions"]))
    table.add_row("avg / state", f"{stats['avg_transitions_per_state']:.2f}")
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = Config(args.config)
    try:
        options: TextOptions = cfg.text_options(
            tries=args.tries,
            min_words=args.min_words,
            max_words=args.max_words,
            max_length=args.max_length,
            test_output=args.test_output,
        )
    except ValueError as e:
        console.print(f"[red]Invalid options:[/red] {escape(str(e))}")
        return 2

    try:
        with open(args.corpus, "r", encoding="utf-8") as f:
            corpus = f.read()
    except OSError as e:
        console.print(f"[red]Cannot read corpus:[/red] {escape(str(e))}")
        return 1
    logger.debug("read %d characters from %s", len(corpus), args.corpus)

    reject = DEFAULT_REJECT_PATTERN if args.reject else cfg.reject_pattern()
    seed = args.seed if args.seed is not None else cfg.get("seed")
    model = TextModel(corpus, reject_pattern=reject, seed=seed)

    if args.stats:
        _show_stats(model)

    for _ in range(args.count):
        if args.start:
            line = model.generate_with_start(args.start, options)
        else:
            line = model.generate(options)
        if line is None:
            console.print("[dim](no result)[/dim]")
        else:
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
