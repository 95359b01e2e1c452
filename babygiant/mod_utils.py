"""
Modular arithmetic helpers for prime fields.
"""

from typing import Optional


def mod_inv(x: int, p: int) -> int:
    """
    Modular inverse of x modulo a prime p.

    Raises:
        ZeroDivisionError: if x is 0 modulo p
    """
    if x % p == 0:
        raise ZeroDivisionError("No inverse for 0 modulo p")
    return pow(x, -1, p)


def tonelli_shanks(n: int, p: int) -> Optional[int]:
    """
    Tonelli-Shanks algorithm for computing square roots modulo p.

    Args:
        n: Number to find square root of
        p: Odd prime modulus

    Returns:
        Square root of n mod p, or None if n is not a quadratic residue
    """
    n %= p
    if n == 0:
        return 0
    if pow(n, (p - 1) // 2, p) != 1:
        return None

    # Fast path for p ≡ 3 (mod 4)
    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)

    # p - 1 = Q * 2^S
    Q = p - 1
    S = 0
    while Q % 2 == 0:
        Q //= 2
        S += 1

    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    M = S
    c = pow(z, Q, p)
    t = pow(n, Q, p)
    R = pow(n, (Q + 1) // 2, p)

    while t != 1:
        # Least i such that t^(2^i) = 1
        i = 1
        temp = (t * t) % p
        while temp != 1:
            temp = (temp * temp) % p
            i += 1

        b = pow(c, 1 << (M - i - 1), p)
        M = i
        c = (b * b) % p
        t = (t * c) % p
        R = (R * b) % p

    return R
