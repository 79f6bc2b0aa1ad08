"""
Command-line script to generate and validate personal identity numbers
"""

import os
import sys
import logging
import argparse

from typing import List

from pin_manager import VERSION
from pin_manager.api import (
    generate,
    generate_from_date,
    validate,
    validate_male,
    validate_female,
)
from pin_manager.helper.exception import PinManagerException


logger = logging.getLogger(__name__)


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Generate and validate Swedish personal identity numbers (version {VERSION})"
    )

    g1 = parser.add_argument_group("Operation (only one can be given)")
    g11 = g1.add_mutually_exclusive_group()
    g11.add_argument(
        "--generate",
        action="store_true",
        help="generate a personal identity number",
    )
    g11.add_argument(
        "--date",
        metavar="YYYYMMDD",
        help="generate a personal identity number for the given birth date",
    )
    g11.add_argument(
        "--valid",
        metavar="PIN",
        help="check whether the given personal identity number is valid",
    )
    g11.add_argument(
        "--male",
        metavar="PIN",
        help="check whether the given personal identity number belongs to a man",
    )
    g11.add_argument(
        "--female",
        metavar="PIN",
        help="check whether the given personal identity number belongs to a woman",
    )

    g2 = parser.add_argument_group("Other")
    g2.add_argument("--debug", action="store_true", help="debug mode")
    g2.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    parsed = parser.parse_args(args)
    parsed.operation = bool(
        parsed.generate or parsed.date or parsed.valid or parsed.male or parsed.female
    )
    if not parsed.operation:
        parser.print_help()
    return parsed


def setup_logging(debug: bool = False) -> str:
    """
    Set the log level from the LOG_LEVEL environment variable, or DEBUG in
    debug mode
    """
    level = "DEBUG" if debug else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level)
    logging.getLogger("pin_manager").setLevel(level)
    return level


def process(args: argparse.Namespace) -> str:
    """
    Run the requested operation. Return the generated number (or None for
    validation checks), raise PinManagerException on failure
    """
    if args.generate:
        return generate()
    elif args.date:
        return generate_from_date(args.date)
    elif args.valid:
        validate(args.valid)
    elif args.male:
        validate_male(args.male)
    elif args.female:
        validate_female(args.female)
    return None


def main(args: List[str] = None) -> int:
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)

    setup_logging(args.debug)

    if not args.operation:
        return 0

    try:
        value = process(args)
    except PinManagerException as e:
        logger.debug(f"operation failed: {e}")
        print(e, file=sys.stderr)
        return 1

    if value is not None:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
