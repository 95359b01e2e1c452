"""
Coordinate string codec and case-file I/O.

Coordinates travel as big-endian hex strings, "0x" followed by 64 hex digits
(32 bytes), exactly as returned by the circuit's decryption output.
"""

import re
from pathlib import Path
from typing import Optional, Tuple, Union

HEX_DIGITS = 64
_COORD_RE = re.compile(r"0x[a-fA-F0-9]{64}")


def pad_with_zeros(value: str) -> str:
    """Left-pad a "0x"-prefixed hex string with zeros to 64 digits."""
    if value.startswith("0x") and len(value) < HEX_DIGITS + 2:
        return "0x" + value[2:].rjust(HEX_DIGITS, "0")
    return value


def is_valid_format(value: str) -> bool:
    return _COORD_RE.fullmatch(value) is not None


def decode_be(value: str) -> int:
    """
    Decode a big-endian coordinate string into an integer.

    The digits are read as 32 raw bytes, reversed into little-endian order and
    interpreted as an unsigned 256-bit integer.

    Args:
        value: A string already accepted by is_valid_format

    Returns:
        The encoded integer (not yet reduced or checked against the field)
    """
    raw = bytes.fromhex(value[2:])
    if len(raw) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(raw)}")
    return int.from_bytes(raw[::-1], "little")


def encode_be(value: int) -> str:
    """Encode a 256-bit unsigned integer as "0x" + 64 big-endian hex digits."""
    if not 0 <= value < 1 << 256:
        raise ValueError("Value does not fit in 32 bytes")
    return "0x" + value.to_bytes(32, "big").hex()


def load_input(path: Union[str, Path]) -> Tuple[str, str]:
    """
    Load a case file.

    Expected format (blank lines and '#' comments ignored):
        x
        y
    """
    path = Path(path)
    lines = []
    with path.open("r") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                lines.append(line)

    if len(lines) < 2:
        raise ValueError(f"{path}: expected x and y coordinate lines, found {len(lines)}")
    return lines[0], lines[1]


def format_output(plaintext: int, elapsed: Optional[float] = None,
                  verified: Optional[bool] = None, expected: Optional[int] = None) -> str:
    """Render a solution report."""
    out = [f"{'=' * 50}", f"Solution: plaintext = {plaintext}"]
    if expected is not None:
        out.append(f"Expected: plaintext = {expected}")
    if elapsed is not None:
        out.append(f"Time: {elapsed:.6f} seconds")
    if verified is not None:
        out.append(f"Verification (B = plaintext*A): {'PASSED' if verified else 'FAILED'}")
    if expected is not None:
        out.append(f"Cross-check (vs answer file): {'PASSED' if plaintext == expected else 'FAILED'}")
    out.append("=" * 50)
    return "\n".join(out)
