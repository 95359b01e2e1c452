"""
Recover the plaintext embedded in a Baby Jubjub point.

This is the last step of exponential ElGamal decryption: the circuit returns
the point B = plaintext*A in Twisted Edwards coordinates, and the plaintext
(an unsigned 40-bit integer) is found here by a parallel baby-step giant-step
search.
"""

import logging

from .bsgs import baby_giant
from .ecc_utils import build_point, generator_point
from .errors import DlogNotFoundError, InputFormatError
from .io_utils import decode_be, is_valid_format, pad_with_zeros

logger = logging.getLogger(__name__)

MAX_BITWIDTH = 40
MAX_PLAINTEXT = (1 << MAX_BITWIDTH) - 1


def parse_coordinate(value: str) -> int:
    """Pad, validate and decode one coordinate string."""
    padded = pad_with_zeros(value)
    if not is_valid_format(padded):
        raise InputFormatError(value)
    return decode_be(padded)


def recover(x: str, y: str, num_threads: int, max_bitwidth: int = MAX_BITWIDTH) -> int:
    """
    Compute the discrete logarithm of (x, y) with respect to the Baby Jubjub generator.

    Args:
        x: Hex string, "0x" followed by at most 64 hex digits, big-endian
        y: Same format as x
        num_threads: Number of worker processes for the search
        max_bitwidth: Bit width bound of the plaintext

    Returns:
        The plaintext, 0 <= plaintext < 2^max_bitwidth

    Raises:
        InputFormatError: if x or y is not a valid coordinate string
        InvalidCurvePointError: if (x, y) is not a point of the prime-order subgroup
        DlogNotFoundError: if no plaintext in range maps to (x, y)
    """
    bx = parse_coordinate(x)
    by = parse_coordinate(y)

    a = generator_point()
    b = build_point(bx, by)

    logger.debug("Searching discrete log of %s over %d bits with %d workers", (x, y), max_bitwidth, num_threads)
    plaintext = baby_giant(max_bitwidth, a, b, num_threads)
    if plaintext is None:
        limit = (1 << max_bitwidth) - 1
        raise DlogNotFoundError(
            "The Baby-step Giant-step algorithm was unable to solve the Discrete Logarithm. "
            f"Make sure that the embedded plaintext is an unsigned integer between 0 and {limit}.")
    return plaintext
