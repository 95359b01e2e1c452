"""Bounded discrete-log recovery for exponential ElGamal on Baby Jubjub."""

from .bsgs import baby_giant, chunk_bounds
from .dlog import MAX_BITWIDTH, MAX_PLAINTEXT, recover
from .ecc_utils import (
    BABYJUBJUB,
    FIELD_MODULUS,
    SUBGROUP_ORDER,
    Point,
    TwistedEdwardsCurve,
    build_point,
    generator_point,
    to_twisted,
    twisted_coefficient,
)
from .errors import DlogError, DlogNotFoundError, InputFormatError, InvalidCurvePointError, WorkerError
from .generator import embed_plaintext
from .io_utils import decode_be, encode_be, format_output, is_valid_format, load_input, pad_with_zeros
from .mod_utils import mod_inv, tonelli_shanks

__version__ = "0.1.0"

__all__ = [
    'recover',
    'baby_giant',
    'chunk_bounds',
    'MAX_BITWIDTH',
    'MAX_PLAINTEXT',
    'TwistedEdwardsCurve',
    'Point',
    'BABYJUBJUB',
    'FIELD_MODULUS',
    'SUBGROUP_ORDER',
    'build_point',
    'generator_point',
    'to_twisted',
    'twisted_coefficient',
    'embed_plaintext',
    'pad_with_zeros',
    'is_valid_format',
    'decode_be',
    'encode_be',
    'load_input',
    'format_output',
    'mod_inv',
    'tonelli_shanks',
    'DlogError',
    'InputFormatError',
    'InvalidCurvePointError',
    'DlogNotFoundError',
    'WorkerError',
]
