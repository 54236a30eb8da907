#!/usr/bin/env python3
"""Command-line entry point for the pointless superelliptic curve search.

Run with:
    python cli.py 2 2 --q-start 2 --max-trials 1000000
    python cli.py --config search.json --output superPointlessList.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from report import report_lines, write_report
from search.config import DEFAULT_MAX_TRIALS, SearchConfig, read_config_file
from search.orchestrator import run_search, summarize


def setup_logger(level: int = logging.WARNING) -> logging.Logger:
    """Configure the 'search' logger with a compact stderr handler."""
    logger = logging.getLogger("search")
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(handler)
    return logger


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Search for pointless superelliptic curves y^n = f(x) "
                    "of a given genus over finite fields."
    )
    p.add_argument('n', type=int, nargs='?', help='Exponent of y (>= 2)')
    p.add_argument('genus', type=int, nargs='?', help='Target genus (>= 1)')
    p.add_argument(
        '--q-start',
        type=int,
        default=None,
        help='Smallest field order to examine (default: 2)'
    )
    p.add_argument(
        '--max-trials',
        type=int,
        default=None,
        help=f'Polynomials tested per (degree, field) pair (default: {DEFAULT_MAX_TRIALS})'
    )
    p.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random generator, for reproducible runs'
    )
    p.add_argument(
        '--config',
        '-c',
        type=Path,
        default=None,
        help='JSON config file; command-line values take precedence'
    )
    p.add_argument(
        '--output',
        '-o',
        type=Path,
        default=None,
        help='Also append the report lines to this file'
    )
    p.add_argument(
        '--verbose',
        '-v',
        action='count',
        default=0,
        help='Log search progress to stderr (-vv for per-trial detail)'
    )
    return p


def load_search_config(args: argparse.Namespace) -> SearchConfig:
    """Build the config from the file (if any), then apply command-line values."""
    data = read_config_file(args.config) if args.config is not None else {}
    if args.n is not None:
        data['n'] = args.n
    if args.genus is not None:
        data['genus'] = args.genus
    if 'n' not in data or 'genus' not in data:
        raise ValueError("n and genus are required (positionally or in --config)")
    config = SearchConfig.from_dict(data).with_overrides(
        q_start=args.q_start,
        max_trials=args.max_trials,
        seed=args.seed,
        output=args.output,
    )
    return config.validate()


def main(argv: Optional[list] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logger = setup_logger({0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG))

    sink = None
    try:
        config = load_search_config(args)
        summary = summarize(config.n, config.genus, config.q_start)
        if config.output is not None:
            sink = config.output.open("a", encoding="utf-8")
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logger.info("config: %s", config.to_dict())
    try:
        records = run_search(config.n, config.genus, config.q_start, config.max_trials,
                             rng=config.seed)
        write_report(report_lines(config, summary, records), sink=sink)
    finally:
        if sink is not None:
            sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
