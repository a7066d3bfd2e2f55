"""
Lightweight non-simplifying fractions.

F keeps its numerator and denominator exactly as computed: results are never
reduced implicitly, and there are no invariants on the terms, so negative or
zero denominators and non-coprime pairs are all legal. This is convenient for
ratios such as video sizes, where both the simplified ratio and the raw pair
of integers matter.

For add, sub and mul on x and y the resulting denominator is never smaller
than max(x.d, y.d); use F.reduce, F.norm_to or norm to keep terms small.
"""

from dataclasses import dataclass
import logging
import math
import re
from numbers import Rational
from typing import Iterable

from quicktions import Fraction  # type: ignore

from .utils import gcd, lcm, get_lcm, trunc_div, int_to_str, str_to_int


logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'[+-]?[0-9]+')


class ParseError(ValueError):
    """Text is not a fraction of base-10 integers."""


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_int(part, text):
    if _INT_RE.fullmatch(part) is None:
        raise ParseError("invalid fraction {!r}: {!r} is not an integer".format(text, part))
    try:
        return str_to_int(part)
    except ValueError as e:
        raise ParseError("invalid fraction {!r}: {}".format(text, e)) from e


@dataclass(frozen=True)
class F:
    """
    Fraction n/d.

    Immutable, hashable; all methods return new fractions.
    Equality is structural: F(1, 2) != F(2, 4), use cmp or ordering to compare values.
    Nothing fails on a zero denominator except assert_nonzero, reduce of 0/0
    and to_fraction.
    """

    n: int
    d: int = 1

    def __post_init__(self):
        if not (_is_int(self.n) and _is_int(self.d)):
            raise TypeError("F terms must be integers, got {!r}, {!r}".format(self.n, self.d))

    @property
    def numerator(self) -> int:
        return self.n

    @property
    def denominator(self) -> int:
        return self.d

    @classmethod
    def parse(cls, text: str) -> 'F':
        """
        Parse 'n/d' or 'n' (denominator 1).

        Text is split at the first '/'; an empty denominator part also means 1.
        Whitespace is not allowed.
        """
        num, _, den = text.partition('/')
        n = _parse_int(num, text)
        d = _parse_int(den, text) if den else 1
        return cls(n, d)

    @classmethod
    def from_fraction(cls, q: Rational) -> 'F':
        """Fraction with the same numerator and denominator as a rational number."""
        return cls(int(q.numerator), int(q.denominator))

    def to_fraction(self) -> Fraction:
        return Fraction(self.n, self.d)

    # arithmetic

    def mul(self, other: 'F') -> 'F':
        return F(self.n * other.n, self.d * other.d)

    def div(self, other: 'F') -> 'F':
        # sign of the divisor goes to the result numerator
        yn, yd = other.n, other.d
        if yn < 0:
            yn, yd = -yn, -yd
        return F(self.n * yd, self.d * yn)

    def add(self, other: 'F') -> 'F':
        if self.d == other.d:
            return F(self.n + other.n, self.d)
        return F(self.n * other.d + other.n * self.d, self.d * other.d)

    def sub(self, other: 'F') -> 'F':
        if self.d == other.d:
            return F(self.n - other.n, self.d)
        return F(self.n * other.d - other.n * self.d, self.d * other.d)

    def inv(self) -> 'F':
        """Inversion; a negative sign stays on the numerator."""
        if self.n < 0:
            return F(-self.d, -self.n)
        return F(self.d, self.n)

    def abs(self) -> 'F':
        return F(abs(self.n), abs(self.d))

    def cmp(self, other: 'F') -> int:
        """
        Compare values: -1 if self < other, 0 if equal, +1 if self > other.

        Cross-multiplies without normalizing signs, so the result is inverted
        when exactly one of the denominators is negative.
        """
        xn, yn = self.n, other.n
        if self.d != other.d:
            xn *= other.d
            yn *= self.d
        if xn < yn:
            return -1
        elif xn > yn:
            return +1
        return 0

    def is_neg(self) -> bool:
        """Exactly one of the terms is negative."""
        return (self.n ^ self.d) < 0

    def float(self) -> float:
        """Floating-point value; a zero denominator gives inf, -inf or nan."""
        if self.d == 0:
            if self.n == 0:
                return math.nan
            return math.inf if self.n > 0 else -math.inf
        return self.n / self.d

    def assert_nonzero(self) -> 'F':
        """Return self, raise ZeroDivisionError on a zero denominator."""
        if self.d == 0:
            raise ZeroDivisionError("fraction {!r} has zero denominator".format(self))
        return self

    # normalization

    def reduce(self) -> 'F':
        """
        Equivalent fraction in lowest terms with non-negative denominator.

        0/0 has no lowest terms: gcd is 0 and ZeroDivisionError is raised.
        """
        g = gcd(self.n, self.d)
        n, d = self.n // g, self.d // g
        if d < 0:
            n, d = -n, -d
        return F(n, d)

    def norm_to(self, other: 'F') -> 'F':
        """
        Equivalent fraction scaled to a common multiple of other.d.

        The multiple is lcm of the reduced self.d and other.d, but the scale
        factor is taken against self.d as is (truncated), so a non-reduced self
        whose denominator does not divide the multiple loses its value.
        """
        if self.d == other.d:
            return self
        m = lcm(self.reduce().d, other.d)
        return F(trunc_div(m, self.d) * self.n, m)

    # python protocol

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __invert__(self):
        return self.inv()

    def __abs__(self):
        return self.abs()

    def __float__(self):
        return self.float()

    def __lt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.cmp(other) >= 0

    def __iter__(self):
        return iter((self.n, self.d))

    def __str__(self):
        n, d = self.n, self.d
        if d < 0:
            n, d = -n, -d
        return '{}/{}'.format(int_to_str(n), int_to_str(d))

    def __repr__(self):
        return 'F({}, {})'.format(int_to_str(self.n), int_to_str(self.d))


def _coerce(value):
    # F or plain int, otherwise None
    if isinstance(value, F):
        return value
    if _is_int(value):
        return F(value, 1)
    return None


def parse(text: str) -> F:
    return F.parse(text)


def norm(x: F, y: F) -> tuple[F, F]:
    """
    Bidirectionally normalized equivalents of x and y.

    Both results share the denominator m = lcm of the reduced denominators,
    raised to x.d if m <= x.d, or else to y.d if m < y.d. Unlike F.norm_to,
    both sides are reduced first, so the shared denominator may be smaller than
    y.d. Scale factors are truncated as in F.norm_to.
    """
    if x.d == y.d:
        return x, y
    m = lcm(x.reduce().d, y.reduce().d)
    if m <= x.d:
        logger.debug('norm %r, %r: raise multiple to x denominator', x, y)
        m = x.d
    elif m < y.d:
        logger.debug('norm %r, %r: raise multiple to y denominator', x, y)
        m = y.d
    return F(trunc_div(m, x.d) * x.n, m), F(trunc_div(m, y.d) * y.n, m)


def norm_all(xs: Iterable[F]) -> list[F]:
    """Reduce fractions and scale them to the least common denominator."""
    reduced = [x.reduce() for x in xs]
    m = get_lcm(x.d for x in reduced)
    target = F(0, m)
    logger.debug('norm_all: target %r for %d fractions', target, len(reduced))
    return [x.norm_to(target) for x in reduced]
