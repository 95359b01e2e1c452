"""
Test case generator for bounded discrete-log recovery.

Produces the (x, y) hex coordinates the circuit would output for a given
plaintext, i.e. plaintext*A in Twisted Edwards form.
"""

import random
from pathlib import Path
from typing import Optional, Tuple

from .ecc_utils import BABYJUBJUB, generator_point, to_twisted
from .io_utils import encode_be


def embed_plaintext(plaintext: int) -> Tuple[str, str]:
    """
    Encode plaintext*A as circuit coordinates.

    Args:
        plaintext: Non-negative integer to embed

    Returns:
        (x, y) as "0x" + 64 hex digit big-endian strings
    """
    if plaintext < 0:
        raise ValueError("plaintext must be non-negative")
    point = BABYJUBJUB.scalar_multiply(plaintext, generator_point())
    x, y = to_twisted(point)
    return encode_be(x), encode_be(y)


def choose_plaintext(case_num: int, bits: int) -> int:
    """Pick a plaintext exercising a different part of the search per case."""
    m = 1 << (bits // 2)
    top = (1 << bits) - 1
    if case_num == 1:
        # Only baby steps needed (i = 0)
        return random.randrange(0, m)
    elif case_num == 2:
        # Exact multiple of m (j = 0)
        return m * random.randrange(1, m)
    elif case_num == 3:
        return random.randrange(0, top + 1)
    elif case_num == 4:
        return top
    return random.randrange(top // 2, top + 1)


def generate_test_case(output_dir: Path, case_num: int, plaintext: Optional[int] = None, bits: int = 40):
    """
    Generate a single case file and its answer file.

    Args:
        output_dir: Directory to save test case files
        case_num: Test case number
        plaintext: Embedded value (if None, chosen by choose_plaintext)
        bits: Bit width bound of the plaintext
    """
    if plaintext is None:
        plaintext = choose_plaintext(case_num, bits)

    x, y = embed_plaintext(plaintext)

    testcase_path = output_dir / f"testcase_{case_num}.txt"
    with testcase_path.open('w') as f:
        f.write(f"{x}\n")
        f.write(f"{y}\n")

    answer_path = output_dir / f"answer_{case_num}.txt"
    with answer_path.open('w') as f:
        f.write(f"{plaintext}\n")

    print(f"Generated test case {case_num}: plaintext={plaintext} ({bits}-bit bound)")
    print(f"  x = {x}")
    print(f"  y = {y}")
    return testcase_path, answer_path


def generate_test_suite(output_dir: Path, num_cases: int = 5, bits: int = 40):
    """Generate num_cases case/answer file pairs under output_dir."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating {num_cases} test cases...")
    print(f"Plaintext bit width: {bits}")
    print("=" * 60)

    for i in range(1, num_cases + 1):
        generate_test_case(output_dir, i, plaintext=None, bits=bits)
        print()

    print("=" * 60)
    print(f"Test suite generated successfully in {output_dir}")


if __name__ == "__main__":
    import sys

    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("test_cases")
    bits = int(sys.argv[2]) if len(sys.argv) > 2 else 40
    generate_test_suite(out, num_cases=5, bits=bits)
