#!/usr/bin/env python3
"""
Time rule gate.

Evaluates one time predicate against the current clock and exits 0 when it
holds, 1 when it does not, so shell scripts and cron jobs can act only
inside a window:

    python main.py weekdayRange MON FRI && python main.py timeRange 9 17 && ./job.sh
"""
import sys
import argparse
import logging
from typing import Optional

from core.config import Config
from core.predicates import PREDICATES, evaluate
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_TRUE = 0
EXIT_FALSE = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check whether now falls inside a time or weekday window.")
    parser.add_argument("predicate", choices=sorted(PREDICATES), help="Predicate to evaluate")
    parser.add_argument("args", nargs="*", help="Predicate arguments, e.g. 9 17 GMT or MON FRI")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, evaluate the predicate and return the exit status."""
    try:
        opts = build_parser().parse_args(argv)
    except SystemExit as e:
        return EXIT_ERROR if e.code else EXIT_TRUE

    try:
        cfg = Config.from_env()
        setup_logging(cfg.log_level, cfg.log_file)

        result = evaluate(opts.predicate, *opts.args, tz=cfg.local_timezone)
        logger.info(f"{opts.predicate}({', '.join(opts.args)}) -> {result}")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return EXIT_ERROR

    print("true" if result else "false")
    return EXIT_TRUE if result else EXIT_FALSE


if __name__ == "__main__":
    sys.exit(main())
