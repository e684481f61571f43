"""Exact complex numbers over the rationals.

Python's builtin ``complex`` is a pair of floats, so products such as
``(2+3j)**16`` lose exactness. ``GaussianRational`` keeps both parts as
``fractions.Fraction`` and compares exactly.

Values whose imaginary part vanishes are demoted back to ``int`` or
``Fraction`` by :func:`demote`, so results read like ordinary numbers.
"""
from __future__ import annotations

from fractions import Fraction
from numbers import Rational
from typing import Union

import sympy

Exact = Union[int, Fraction, "GaussianRational"]


def _rational(value, what: str = "value") -> Fraction:
    if isinstance(value, sympy.Basic) and value.is_Rational:
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, bool) or not isinstance(value, (int, Rational)):
        raise TypeError(f"{what} must be an exact rational, got {value!r}")
    return Fraction(value)


class GaussianRational:
    """Exact complex number ``real + imag*i`` with rational parts."""

    __slots__ = ("_real", "_imag")

    def __init__(self, real=0, imag=0):
        self._real = _rational(real, "real part")
        self._imag = _rational(imag, "imaginary part")

    @property
    def real(self) -> Fraction:
        return self._real

    @property
    def imag(self) -> Fraction:
        return self._imag

    def conjugate(self) -> "GaussianRational":
        return GaussianRational(self._real, -self._imag)

    def norm(self) -> Fraction:
        """Squared modulus ``real**2 + imag**2`` (exact)."""
        return self._real * self._real + self._imag * self._imag

    # -- arithmetic --------------------------------------------------------

    @staticmethod
    def _coerce(other):
        if isinstance(other, GaussianRational):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, (int, Rational)):
            return GaussianRational(other, 0)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianRational(self._real + o._real, self._imag + o._imag)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianRational(self._real - o._real, self._imag - o._imag)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianRational(
            self._real * o._real - self._imag * o._imag,
            self._real * o._imag + self._imag * o._real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        n = o.norm()
        if n == 0:
            raise ZeroDivisionError("GaussianRational division by zero")
        num = self * o.conjugate()
        return GaussianRational(num._real / n, num._imag / n)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return GaussianRational(1) / (self ** -exponent)
        result = GaussianRational(1)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __neg__(self):
        return GaussianRational(-self._real, -self._imag)

    def __pos__(self):
        return self

    # -- comparison --------------------------------------------------------

    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._real == o._real and self._imag == o._imag

    def __hash__(self):
        if self._imag == 0:
            return hash(self._real)
        return hash((self._real, self._imag))

    def __bool__(self):
        return bool(self._real) or bool(self._imag)

    def __repr__(self):
        return f"GaussianRational({self._real!s}, {self._imag!s})"

    def __str__(self):
        if self._imag == 0:
            return str(self._real)
        if self._real == 0:
            return f"{self._imag}i"
        sign = "-" if self._imag < 0 else "+"
        return f"({self._real}{sign}{abs(self._imag)}i)"


I = GaussianRational(0, 1)


def demote(value):
    """Return ``value`` as ``int`` or ``Fraction`` when it has no imaginary part."""
    if isinstance(value, GaussianRational):
        if value.imag != 0:
            return value
        value = value.real
    if isinstance(value, Fraction) and value.denominator == 1:
        return value.numerator
    return value


def as_exact(value) -> Exact:
    """Coerce ``value`` into the exact numeric tower.

    Accepts ints, rationals (``Fraction``, ``sympy.Rational``), GaussianRational
    and exact sympy complex numbers. Floats, builtin complex and bools raise
    TypeError.
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not an exact number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, (GaussianRational, Fraction)):
        return demote(value)
    if isinstance(value, sympy.Basic):
        return from_sympy(value)
    if isinstance(value, Rational):
        return demote(Fraction(value))
    raise TypeError(f"expected an exact number (int, Fraction, GaussianRational), got {value!r}")


# ---------------------------------------------------------------------------
# sympy interop
# ---------------------------------------------------------------------------

def to_sympy(value) -> sympy.Expr:
    """Exact sympy expression for an int, Fraction or GaussianRational."""
    value = as_exact(value)
    if isinstance(value, GaussianRational):
        re = sympy.Rational(value.real.numerator, value.real.denominator)
        im = sympy.Rational(value.imag.numerator, value.imag.denominator)
        return re + im * sympy.I
    if isinstance(value, Fraction):
        return sympy.Rational(value.numerator, value.denominator)
    return sympy.Integer(value)


def from_sympy(expr) -> Exact:
    """Convert an exact sympy number (rational real and imaginary parts)."""
    expr = sympy.expand(sympy.sympify(expr))
    re, im = expr.as_real_imag()
    if not (re.is_Rational and im.is_Rational):
        raise TypeError(f"sympy expression is not an exact Gaussian rational: {expr}")
    real = Fraction(int(re.p), int(re.q))
    imag = Fraction(int(im.p), int(im.q))
    return demote(GaussianRational(real, imag))
