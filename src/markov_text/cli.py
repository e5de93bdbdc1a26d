"""Command-line driver: build a chain from a corpus file and print tokens."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ChainConfig
from .corpus import load_corpus
from .errors import MarkovError
from .model import ChainModel
from .text_cleaning import CorpusCleanConfig, clean_corpus


logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='markov-text',
        description='Generate text from a first-order Markov chain over a corpus'
    )
    parser.add_argument('corpus', type=Path, help='Corpus text file')
    parser.add_argument(
        '-n', '--num-tokens',
        type=int,
        default=20,
        help='Number of tokens to generate (default: 20)'
    )
    parser.add_argument('--seed', type=int, help='Random seed for repeatable output')
    parser.add_argument(
        '--until-boundary',
        action='store_true',
        help='Stop at the first line break the chain produces'
    )
    parser.add_argument('--encoding', default='utf-8')
    parser.add_argument('--lowercase', action='store_true', help='Lowercase the corpus first')
    parser.add_argument('--strip-accents', action='store_true', help='Drop combining accents first')
    parser.add_argument(
        '--inspect',
        action='store_true',
        help='Print every transition table instead of generating'
    )
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def run(args: argparse.Namespace) -> str:
    """Build the model described by `args` and return the text to print."""
    if args.num_tokens < 0:
        raise ValueError("--num-tokens must be >= 0")

    text = load_corpus(args.corpus, encoding=args.encoding)
    text = clean_corpus(
        text,
        CorpusCleanConfig(lowercase=args.lowercase, strip_accents=args.strip_accents)
    )

    model = ChainModel(ChainConfig(seed=args.seed)).build(text)
    if args.inspect:
        return model.inspect()

    tokens = model.generate(args.num_tokens, stop_at_boundary=args.until_boundary)
    return model.format_tokens(tokens)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level)

    try:
        output = run(args)
    except (OSError, ValueError, MarkovError) as e:
        logger.error(f"markov-text: {e}")
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
