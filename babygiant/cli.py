"""
Command-line entry point.

Usage:
    babygiant <x> <y> [-t THREADS] [--bits BITS] [--verify] [--timing]
    babygiant --input test_cases/testcase_1.txt

Exit status: 0 on success, 1 on malformed coordinates, 2 when the point is
invalid or no discrete log exists in range.
"""

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import List, Optional

from .dlog import MAX_BITWIDTH, recover
from .ecc_utils import BABYJUBJUB, build_point, generator_point
from .errors import DlogError, InputFormatError
from .io_utils import decode_be, format_output, load_input, pad_with_zeros

EXIT_FORMAT_ERROR = 1
EXIT_FATAL = 2

DEFAULT_THREADS = os.cpu_count() or 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="babygiant",
        description="Recover the plaintext embedded in a Baby Jubjub point (Twisted Edwards form).")
    parser.add_argument("x", nargs="?", help="x coordinate, e.g. 0x05e712cb...")
    parser.add_argument("y", nargs="?", help="y coordinate, same format as x")
    parser.add_argument("-i", "--input", type=Path, help="Case file holding x and y on separate lines")
    parser.add_argument("-t", "--threads", type=int, default=DEFAULT_THREADS,
                        help=f"Number of worker processes (default: {DEFAULT_THREADS})")
    parser.add_argument("--bits", type=int, default=MAX_BITWIDTH,
                        help=f"Plaintext bit width bound (default: {MAX_BITWIDTH})")
    parser.add_argument("--verify", action="store_true", help="Check plaintext*A against the input point")
    parser.add_argument("--timing", action="store_true", help="Print a timed solution report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _answer_for(case_path: Path) -> Optional[int]:
    answer_path = case_path.parent / case_path.name.replace('testcase_', 'answer_')
    if answer_path == case_path or not answer_path.exists():
        return None
    try:
        return int(answer_path.read_text().strip())
    except ValueError:
        return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if args.threads < 1:
        parser.error("--threads must be at least 1")

    expected = None
    if args.input is not None:
        try:
            x, y = load_input(args.input)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FORMAT_ERROR
        expected = _answer_for(args.input)
    elif args.x is not None and args.y is not None:
        x, y = args.x, args.y
    else:
        parser.error("either x and y or --input is required")

    start_time = time.perf_counter()
    try:
        plaintext = recover(x, y, args.threads, max_bitwidth=args.bits)
    except InputFormatError as e:
        print(e, file=sys.stderr)
        return EXIT_FORMAT_ERROR
    except DlogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL
    elapsed = time.perf_counter() - start_time

    verified = None
    if args.verify:
        target = build_point(decode_be(pad_with_zeros(x)), decode_be(pad_with_zeros(y)))
        verified = BABYJUBJUB.scalar_multiply(plaintext, generator_point()) == target

    if args.timing or verified is not None or expected is not None:
        print(format_output(plaintext, elapsed=elapsed if args.timing else None,
                            verified=verified, expected=expected))
    else:
        print(plaintext)

    if verified is False or (expected is not None and expected != plaintext):
        return EXIT_FATAL
    return 0


if __name__ == "__main__":
    sys.exit(main())
