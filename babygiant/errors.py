"""Exceptions raised while recovering an embedded plaintext."""

EXPECTED_FORMAT = """Invalid input format : x and y should be hexadecimal strings representing two bytes of size 32 at most.
Also make sure the coordinates x and y are points on the Baby Jubjub curve (Twisted Edwards form) and follow the same format as returned by the exp_elgamal_decrypt function in the noir-elgamal package).
Eg of valid inputs: x="0xbb77a6ad63e739b4eacb2e09d6277c12ab8d8010534e0b62893f3f6bb957051" and y="0x25797203f7a0b24925572e1cd16bf9edfce0051fb9e133774b3c257a872d7d8b".
Also please keep in mind that the embedded plaintext corresponding to the (x,y) point should not exceed type(uint40).max, i.e 1099511627775 or else no valid discrete logarithm will be found."""


class DlogError(Exception):
    """Base class for all discrete-log recovery failures."""


class InputFormatError(DlogError, ValueError):
    """A coordinate string does not match ``0x`` followed by 64 hex digits."""

    def __init__(self, value: str, message: str = EXPECTED_FORMAT):
        super().__init__(message)
        self.value = value


class InvalidCurvePointError(DlogError):
    """A decoded point is off the curve or outside the prime-order subgroup."""


class DlogNotFoundError(DlogError):
    """The search exhausted its range without finding the plaintext."""


class WorkerError(DlogError):
    """A search worker process raised instead of reporting a result."""
