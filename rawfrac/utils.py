"""
Integer primitives for fraction normalization and decimal text.

Both gcd and lcm accept any integers, including negative ones and zero.
"""

import math
from typing import Iterable


def gcd(x: int, y: int) -> int:
    """Greatest common divisor; always non-negative, gcd(0, 0) = 0."""
    return math.gcd(x, y)


def trunc_div(a: int, b: int) -> int:
    """Integer quotient a/b truncated toward zero (not floored)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def lcm(x: int, y: int) -> int:
    """
    Least common multiple of x and y.

    If x == y or x == -y, x is returned as is, so the result keeps the sign of x
    in that case only. Otherwise the result is non-negative.
    """
    if x == y or x == -y:
        return x
    # divide first to keep the product small
    return abs(trunc_div(x, gcd(x, y)) * y)


def get_lcm(xs: Iterable[int]) -> int:
    """Least common multiple of integer sequence."""
    m = 1
    for x in xs:
        m = lcm(m, x)
    return m


# below the smallest limit sys.set_int_max_str_digits accepts (640)
_CHUNK_DIGITS = 600
_CHUNK_BITS = 1900


def int_to_str(x: int) -> str:
    """Decimal text of x, not bounded by the interpreter's int/str digit limit."""
    if x < 0:
        return '-' + int_to_str(-x)
    if x.bit_length() < _CHUNK_BITS:
        return str(x)
    k = int(x.bit_length() * 0.30103) // 2
    hi, lo = divmod(x, 10 ** k)
    return int_to_str(hi) + int_to_str(lo).zfill(k)


def str_to_int(text: str) -> int:
    """
    Inverse of int_to_str for text of any length.

    Text must already match '[+-]?[0-9]+'; chunks are converted with int().
    """
    if len(text) <= _CHUNK_DIGITS:
        return int(text)
    if text[0] in '+-':
        value = str_to_int(text[1:])
        return -value if text[0] == '-' else value
    k = len(text) // 2
    return str_to_int(text[:-k]) * 10 ** k + str_to_int(text[-k:])
