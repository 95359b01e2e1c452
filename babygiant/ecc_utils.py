"""
Twisted Edwards curve arithmetic and Baby Jubjub point construction.

Points are affine (x, y) tuples of canonical field elements, so two equal
points always compare and hash equal. The identity is (0, 1).

Baby Jubjub is handled in two birationally equivalent forms:
    Twisted Edwards (circuit encoding):  168700*x^2 + y^2 = 1 + 168696*x^2*y^2
    Edwards (arithmetic):                x'^2 + y^2 = 1 + (168696/168700)*x'^2*y^2
with x' = x * sqrt(168700) and y unchanged.
"""

from functools import lru_cache
from typing import Tuple

from .errors import InvalidCurvePointError
from .mod_utils import mod_inv, tonelli_shanks

Point = Tuple[int, int]

# BN254 scalar field, the base field of Baby Jubjub
FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
# Order of the prime subgroup (cofactor 8)
SUBGROUP_ORDER = 2736030358979909402780800718157159386076813972158567259200215660948447373041

TWISTED_A = 168700
TWISTED_D = 168696

# EIP-2494 base point, Twisted Edwards form
GENERATOR_TWISTED = (
    5299619240641551281634865583518297030282874472190772894086521144482721001553,
    16950150798460657717958625567821834550301663161624707787222815936182638968203,
)


class TwistedEdwardsCurve:
    """Twisted Edwards curve a*x^2 + y^2 = 1 + d*x^2*y^2 over F_p."""

    __slots__ = ("a", "d", "p")

    def __init__(self, a: int, d: int, p: int):
        a %= p
        d %= p
        if a == 0 or d == 0 or a == d:
            raise ValueError("Degenerate curve: need a, d nonzero and a != d")
        self.a = a
        self.d = d
        self.p = p

    def __repr__(self) -> str:
        return f"TwistedEdwardsCurve(a={self.a}, d={self.d}, p={self.p})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TwistedEdwardsCurve):
            return NotImplemented
        return (self.a, self.d, self.p) == (other.a, other.d, other.p)

    def __hash__(self) -> int:
        return hash((self.a, self.d, self.p))

    @property
    def identity(self) -> Point:
        return (0, 1)

    def is_on_curve(self, P: Point) -> bool:
        """Check if P = (x, y) satisfies the curve equation."""
        x, y = P
        xx = x * x
        yy = y * y
        return (self.a * xx + yy - 1 - self.d * xx * yy) % self.p == 0

    def add(self, P: Point, Q: Point) -> Point:
        """
        Add two points with the unified affine formulas.

        Both denominators are inverted together, one modular inversion per call.
        """
        p = self.p
        x1, y1 = P
        x2, y2 = Q

        t = self.d * x1 * x2 % p * y1 * y2 % p
        den_x = (1 + t) % p
        den_y = (1 - t) % p
        inv = mod_inv(den_x * den_y, p)

        x3 = (x1 * y2 + y1 * x2) * den_y % p * inv % p
        y3 = (y1 * y2 - self.a * x1 * x2) * den_x % p * inv % p
        return (x3, y3)

    def negate(self, P: Point) -> Point:
        x, y = P
        return ((-x) % self.p, y)

    def subtract(self, P: Point, Q: Point) -> Point:
        return self.add(P, self.negate(Q))

    def scalar_multiply(self, k: int, P: Point) -> Point:
        """Compute k * P using double-and-add."""
        if k < 0:
            return self.scalar_multiply(-k, self.negate(P))

        result = self.identity
        addend = P
        while k:
            if k & 1:
                result = self.add(result, addend)
            addend = self.add(addend, addend)
            k >>= 1
        return result

    def is_in_subgroup(self, P: Point, order: int) -> bool:
        """Check order * P == O, assuming P is on the curve."""
        return self.scalar_multiply(order, P) == self.identity


EDWARDS_D = TWISTED_D * mod_inv(TWISTED_A, FIELD_MODULUS) % FIELD_MODULUS

# Edwards form of Baby Jubjub; all search arithmetic runs on this curve
BABYJUBJUB = TwistedEdwardsCurve(1, EDWARDS_D, FIELD_MODULUS)


@lru_cache(maxsize=None)
def twisted_coefficient() -> int:
    """sqrt(168700) in the base field, the Twisted Edwards -> Edwards x-scaling."""
    c = tonelli_shanks(TWISTED_A, FIELD_MODULUS)
    if c is None:
        raise ArithmeticError(f"{TWISTED_A} is not a square modulo the Baby Jubjub base field")
    return c


def build_point(x: int, y: int) -> Point:
    """
    Build and validate a Baby Jubjub point from Twisted Edwards coordinates.

    Args:
        x, y: Coordinates as produced by the circuit (Twisted Edwards form)

    Returns:
        The point in Edwards form, on BABYJUBJUB

    Raises:
        InvalidCurvePointError: if a coordinate is not a canonical field element,
            the point is not on the curve, or it is outside the prime subgroup
    """
    p = FIELD_MODULUS
    if not (0 <= x < p and 0 <= y < p):
        raise InvalidCurvePointError(
            "(x,y) coordinates are not canonical elements of the Baby Jubjub base field")

    point = (x * twisted_coefficient() % p, y)
    if not BABYJUBJUB.is_on_curve(point):
        raise InvalidCurvePointError(
            "(x,y) is not a valid point on Baby Jubjub curve in Twisted Edwards form")
    if not BABYJUBJUB.is_in_subgroup(point, SUBGROUP_ORDER):
        raise InvalidCurvePointError(
            "(x,y) is not a valid point in the prime subgroup of Baby Jubjub curve in Twisted Edwards form")
    return point


def to_twisted(point: Point) -> Tuple[int, int]:
    """Map an Edwards-form point back to the circuit's Twisted Edwards coordinates."""
    x, y = point
    p = FIELD_MODULUS
    return (x * mod_inv(twisted_coefficient(), p) % p, y)


@lru_cache(maxsize=None)
def generator_point() -> Point:
    """The generator A in Edwards form, validated like any other input point."""
    return build_point(*GENERATOR_TWISTED)
