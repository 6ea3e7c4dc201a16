#!/usr/bin/env python3
"""
Command-line runner: generate words from a corpus and print them.

Example:
    babbler-generate --corpus lyrics.txt --start welcome --length 50
"""

import sys
import argparse

from babbler.models.errors import UnseenTokenError
from babbler.models.text_generator import MarkovTextGenerator
from babbler.utils.config_loader import ENVIRONMENTS, load_generator_config
from babbler.utils.corpus_reader import load_corpus
from babbler.utils.loggers.json_logger import get_logger


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate pseudo-text from a first-order Markov chain")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--corpus", nargs="+", metavar="PATH",
                        help="Text or CSV files to train on")
    source.add_argument("--text", help="Corpus given inline")
    parser.add_argument("--start", help="Start word (default: config, then first corpus word)")
    parser.add_argument("--length", type=int,
                        help="Number of words to emit, including the start word")
    parser.add_argument("--env", choices=ENVIRONMENTS, default="development",
                        help="Configuration environment (default: development)")
    parser.add_argument("--log-file", help="Also write JSON logs to this file")
    parser.add_argument("--seed", type=int, help="Seed the random source")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = load_generator_config(args.env)
    if args.seed is not None:
        config["random_seed"] = args.seed

    logger = get_logger(
        "babbler",
        log_file=args.log_file or config["log_file"],
        console_json=config["console_json"],
        level=config["log_level"],
    )

    corpus = args.text if args.text is not None else load_corpus(args.corpus)
    generator = MarkovTextGenerator(config=config, logger=logger)

    try:
        text = generator.generate_text(corpus, start=args.start, length=args.length)
    except UnseenTokenError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
