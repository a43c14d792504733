"""Integer-coefficient polynomials of one variable.

A Polynomial is an immutable value: a dense tuple of coefficients, where
index i holds the coefficient of x^i, together with its cached degree.
Every operation builds a fresh instance.

Important functions:
 - new: the single-term constructor a*x^b
 - plus, minus, times, compose: arithmetic producing new polynomials
 - evaluate, differentiate, to_string

The Polynomial class also implements the usual Python operators (+, -, *,
calling, str) in terms of these functions.
"""

import functools

from ordered_set import OrderedSet

from intpoly.common import check_type, typechecked, FrozenDict
from intpoly.logging import task, event

def get_coefficient(coeffs, pos):
    """Return coeffs[pos], or 0 if pos is out of range.

    Reading past the end is not an error; the algorithms below rely on
    this to combine sequences of different lengths.
    """
    if 0 <= pos < len(coeffs):
        return coeffs[pos]
    return 0

def set_coefficient(coeffs, pos, value):
    """Return a new tuple like coeffs, but with position pos set to value."""
    if not (0 <= pos < len(coeffs)):
        raise IndexError("coefficient position {} out of range [0, {})".format(pos, len(coeffs)))
    return tuple(coeffs[:pos]) + (value,) + tuple(coeffs[pos+1:])

def normalize(coeffs):
    """Position of the last non-zero entry in coeffs (0 if there is none)."""
    for i in reversed(range(len(coeffs))):
        if coeffs[i] != 0:
            return i
    return 0

@functools.total_ordering
class Polynomial(object):
    """An immutable polynomial with int coefficients, lowest power first.

    Arithmetic operators accept an int on either side and treat it as a
    constant polynomial. Equality and ordering do not: they compare
    polynomials only, so Polynomial.ONE != 1.
    """
    __slots__ = ("coefficients", "degree")

    def __init__(self, coefficients=(0,)):
        coefficients = list(coefficients)
        check_type(coefficients, [int], "coefficients")
        coefficients = tuple(coefficients) or (0,)
        deg = normalize(coefficients)
        self.coefficients = coefficients[:deg+1]
        self.degree = deg

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError("Polynomial is immutable")
        object.__setattr__(self, name, value)

    def __getitem__(self, i):
        return get_coefficient(self.coefficients, i)

    def __hash__(self):
        return hash(self.coefficients)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __lt__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.degree != other.degree:
            return self.degree < other.degree
        for i in reversed(range(self.degree + 1)):
            if self[i] != other[i]:
                return self[i] < other[i]
        return False

    def __str__(self):
        return to_string(self)

    def __repr__(self):
        return "Polynomial({!r})".format(self.coefficients)

    def __call__(self, x):
        return evaluate(self, x)

    def __neg__(self):
        return negate(self)

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return plus(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return plus(other, self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return minus(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return minus(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return times(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return times(other, self)

Polynomial.ZERO = Polynomial((0,))
Polynomial.ONE  = Polynomial((1,))
Polynomial.X    = Polynomial((0, 1))

def _coerce(value):
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, int):
        return new(value, 0)
    return NotImplemented

@typechecked
def new(coefficient : int, power : int) -> Polynomial:
    """The single-term polynomial coefficient*x^power."""
    if power < 0:
        raise ValueError("negative exponent: {}".format(power))
    coeffs = [0] * (power + 1)
    coeffs[power] = coefficient
    return Polynomial(coeffs)

@typechecked
def degree(p : Polynomial) -> int:
    return p.degree

@typechecked
def plus(a : Polynomial, b : Polynomial) -> Polynomial:
    coeffs = [0] * (max(a.degree, b.degree) + 1)
    for i in range(a.degree + 1):
        coeffs[i] = a[i]
    for i in range(b.degree + 1):
        coeffs[i] += b[i]
    return Polynomial(coeffs)

@typechecked
def minus(a : Polynomial, b : Polynomial) -> Polynomial:
    coeffs = [0] * (max(a.degree, b.degree) + 1)
    for i in range(a.degree + 1):
        coeffs[i] = a[i]
    for i in range(b.degree + 1):
        coeffs[i] -= b[i]
    return Polynomial(coeffs)

@typechecked
def negate(p : Polynomial) -> Polynomial:
    return minus(Polynomial.ZERO, p)

@typechecked
def times(a : Polynomial, b : Polynomial) -> Polynomial:
    coeffs = [0] * (a.degree + b.degree + 1)
    for i in range(a.degree + 1):
        for j in range(b.degree + 1):
            coeffs[i+j] += a[i] * b[j]
    return Polynomial(coeffs)

@typechecked
def compose(a : Polynomial, b : Polynomial) -> Polynomial:
    """Compute a(b(x)).

    Uses Horner's method with polynomial-valued arithmetic, so this performs
    a.degree multiplications by b of an ever-growing accumulator.
    """
    with task("compose", outer=a.degree, inner=b.degree):
        acc = Polynomial.ZERO
        for i in reversed(range(a.degree + 1)):
            acc = plus(new(a[i], 0), times(b, acc))
            event("x^{}: degree {}".format(i, acc.degree))
        return acc

@typechecked
def evaluate(p : Polynomial, x : int) -> int:
    result = 0
    for i in reversed(range(p.degree + 1)):
        result = p[i] + x * result
    return result

@typechecked
def differentiate(p : Polynomial) -> Polynomial:
    if p.degree == 0:
        return Polynomial.ZERO
    coeffs = [0] * p.degree
    for i in range(p.degree):
        coeffs[i] = (i + 1) * p[i+1]
    return Polynomial(coeffs)

def support(p):
    """Exponents with a non-zero coefficient, highest first."""
    return OrderedSet(i for i in reversed(range(p.degree + 1)) if p[i] != 0)

def terms(p):
    """A hashable {exponent: coefficient} map of the non-zero terms of p."""
    return FrozenDict([(i, p[i]) for i in support(p)])

def sparse(coeff_dict):
    """Build a polynomial from an {exponent: coefficient} mapping."""
    res = Polynomial.ZERO
    for power, coefficient in coeff_dict.items():
        res = plus(res, new(coefficient, power))
    return res

def _variable(i):
    if i == 0:
        return ""
    if i == 1:
        return "x"
    return "x^{}".format(i)

@typechecked
def to_string(p : Polynomial) -> str:
    """Render p with the highest-order term first, e.g. "4x^3 + 2x - 1".

    Zero terms are skipped. Coefficients are always printed, so x^2 is
    rendered as "1x^2".
    """
    if p.degree == 0:
        return str(p[0])
    s = str(p[p.degree]) + _variable(p.degree)
    for i in support(p):
        if i == p.degree:
            continue
        c = p[i]
        if c > 0:
            s += " + " + str(c)
        else:
            s += " - " + str(-c)
        s += _variable(i)
    return s
