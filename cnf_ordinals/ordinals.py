"""
Transfinite Ordinals in Cantor Normal Form

Every ordinal below ε₀ has a unique Cantor normal form:

    α = ω^β₁·c₁ + ω^β₂·c₂ + ... + ω^β_k·c_k

with β₁ > β₂ > ... > β_k (themselves ordinals in the same form) and
positive integer coefficients c_i. Zero is the empty sum.

This module provides:
1. Term / Ordinal value objects with structural equality and hashing
2. normalize(): the single path from arbitrary term lists to canonical form
3. compare(): the total order on canonical forms
4. OrdinalArithmetic: +, -, *, //, %, ** on transfinite numbers

Ordinal arithmetic is neither commutative nor cancelling:
    1 + ω = ω        but  ω + 1 > ω
    2 · ω = ω        but  ω · 2 = ω + ω
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from itertools import zip_longest
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from .config import ArithmeticConfig
from .errors import (
    ArithmeticOverflow,
    DepthLimitExceeded,
    DivisionByZero,
    InvalidTerm,
    MalformedOrdinal,
    NegativeOperand,
    NotFinite,
    SubtrahendExceedsMinuend,
)


class OrdinalKind(IntEnum):
    """Structural classification of an ordinal."""
    ZERO = 0        # the empty sum
    SUCCESSOR = 1   # has a predecessor (finite tail c·ω⁰)
    LIMIT = 2       # no predecessor (smallest exponent > 0)


@dataclass(frozen=True)
class Term:
    """
    One summand ω^exponent·coefficient of a Cantor normal form.

    A term may carry coefficient 0 while being built, but such terms are
    dropped by normalize() and never stored in an Ordinal.
    """
    exponent: Ordinal
    coefficient: int

    def __post_init__(self):
        if not isinstance(self.exponent, Ordinal):
            raise InvalidTerm(f"Term exponent must be an Ordinal, got {type(self.exponent).__name__}")
        if isinstance(self.coefficient, bool) or not isinstance(self.coefficient, (int, np.integer)):
            raise InvalidTerm(f"Term coefficient must be an integer, got {self.coefficient!r}")
        if self.coefficient < 0:
            raise InvalidTerm(f"Term coefficient must be non-negative, got {self.coefficient}")
        object.__setattr__(self, "coefficient", int(self.coefficient))

    def __repr__(self) -> str:
        if self.exponent.is_zero():
            return str(self.coefficient)

        if self.exponent == ONE:
            base = "ω"
        elif _is_compound(self.exponent):
            base = f"ω^({self.exponent})"
        else:
            base = f"ω^{self.exponent}"

        if self.coefficient == 1:
            return base
        return f"{base}·{self.coefficient}"


def _is_compound(exponent: Ordinal) -> bool:
    """Whether an exponent needs parentheses when rendered."""
    if len(exponent.terms) > 1:
        return True
    return exponent.is_transfinite() and exponent.terms[0].coefficient > 1


@dataclass(frozen=True)
@total_ordering
class Ordinal:
    """
    An ordinal below ε₀ in Cantor normal form.

    Direct construction expects canonical data: strictly descending
    exponents and positive coefficients. Use Ordinal.from_terms() (or
    normalize()) for unordered or colliding terms.
    """
    terms: Tuple[Term, ...] = ()

    # Exponent nesting: 0 for zero, 1 for finite, 2 for ω·n + k, ...
    depth: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self):
        terms = tuple(self.terms)
        for term in terms:
            if not isinstance(term, Term):
                raise MalformedOrdinal(f"Expected Term, got {type(term).__name__}")
            if term.coefficient == 0:
                raise MalformedOrdinal(f"Zero coefficient in canonical form: {terms!r}")
        for higher, lower in zip(terms, terms[1:]):
            if compare(higher.exponent, lower.exponent) <= 0:
                raise MalformedOrdinal(
                    "Exponents must be in strictly descending order. "
                    f"Got {higher.exponent} and {lower.exponent}"
                )
        object.__setattr__(self, "terms", terms)
        if terms:
            object.__setattr__(self, "depth", 1 + max(t.exponent.depth for t in terms))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Ordinal:
        return ZERO

    @classmethod
    def one(cls) -> Ordinal:
        return ONE

    @classmethod
    def omega(cls) -> Ordinal:
        """ω = first infinite ordinal."""
        return OMEGA

    @classmethod
    def from_int(cls, n: int) -> Ordinal:
        """Create the finite ordinal n."""
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"Cannot create an ordinal from {type(n).__name__}")
        if n < 0:
            raise NegativeOperand(f"Cannot create an ordinal from a negative number ({n})")
        if n == 0:
            return ZERO
        return cls((Term(ZERO, int(n)),))

    @classmethod
    def from_terms(cls, *terms: Union[Term, Tuple[Ordinal, int], List]) -> Ordinal:
        """
        Build an ordinal from terms in any order, merging equal exponents.

        Accepts terms variadically, from_terms(t1, t2), or as a single
        list or tuple, from_terms(o.terms). (exponent, coefficient) pairs
        are accepted in place of Term objects.
        """
        if len(terms) == 1 and isinstance(terms[0], (list, tuple)) and not _is_pair(terms[0]):
            return normalize(terms[0])
        return normalize(terms)

    @classmethod
    def omega_power(cls, exponent: Union[Ordinal, int], coefficient: int = 1) -> Ordinal:
        """ω^exponent·coefficient."""
        if not isinstance(exponent, Ordinal):
            exponent = cls.from_int(exponent)
        return normalize([Term(exponent, coefficient)])

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not self.terms

    def is_finite(self) -> bool:
        """Check if ordinal is a natural number."""
        return all(t.exponent.is_zero() for t in self.terms)

    def is_transfinite(self) -> bool:
        """Check if ordinal is ≥ ω."""
        return not self.is_finite()

    def is_successor(self) -> bool:
        return bool(self.terms) and self.terms[-1].exponent.is_zero()

    def is_limit(self) -> bool:
        return bool(self.terms) and not self.terms[-1].exponent.is_zero()

    def kind(self) -> OrdinalKind:
        if self.is_zero():
            return OrdinalKind.ZERO
        if self.is_successor():
            return OrdinalKind.SUCCESSOR
        return OrdinalKind.LIMIT

    @property
    def leading_term(self) -> Optional[Term]:
        return self.terms[0] if self.terms else None

    @property
    def leading_exponent(self) -> Optional[Ordinal]:
        """Exponent of the leading term (None for zero)."""
        return self.terms[0].exponent if self.terms else None

    @property
    def finite_part(self) -> int:
        """Coefficient of the ω⁰ term, 0 if there is none."""
        if self.is_successor():
            return self.terms[-1].coefficient
        return 0

    def successor(self) -> Ordinal:
        """Compute α + 1."""
        return self + ONE

    def __int__(self) -> int:
        if not self.is_finite():
            raise NotFinite(f"{self} is not a natural number")
        return self.finite_part

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def __lt__(self, other: Ordinal) -> bool:
        if not isinstance(other, Ordinal):
            return NotImplemented
        return compare(self, other) < 0

    # ------------------------------------------------------------------
    # Operators (plain ints are converted with from_int)
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.subtract(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.subtract(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.multiply(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.multiply(other, self)

    def __floordiv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.divide(self, other)

    def __rfloordiv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.divide(other, self)

    def __mod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.modulo(self, other)

    def __rmod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.modulo(other, self)

    def __divmod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.divmod(self, other)

    def __rdivmod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.divmod(other, self)

    def __pow__(self, other, modulo=None):
        if modulo is not None or not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.power(self, other)

    def __rpow__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return DEFAULT_ARITHMETIC.power(other, self)

    def __repr__(self) -> str:
        if self.is_zero():
            return "0"
        return " + ".join(repr(t) for t in self.terms)


OrdinalLike = Union[Ordinal, int]


def _is_operand(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Ordinal, int, np.integer))


def _is_pair(item) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], Ordinal)


def _as_term(item) -> Term:
    if isinstance(item, Term):
        return item
    if _is_pair(item):
        return Term(*item)
    raise InvalidTerm(f"Expected Term or (exponent, coefficient) pair, got {item!r}")


def normalize(terms: Iterable[Union[Term, Tuple[Ordinal, int]]]) -> Ordinal:
    """
    Canonicalize an arbitrary collection of terms.

    Groups terms by exponent, sums coefficients within each group, drops
    groups that sum to zero and sorts the rest by descending exponent.
    Every arithmetic result passes through here.
    """
    merged: Dict[Ordinal, int] = {}
    for item in terms:
        term = _as_term(item)
        merged[term.exponent] = merged.get(term.exponent, 0) + term.coefficient

    canonical = [Term(exponent, coefficient) for exponent, coefficient in merged.items() if coefficient > 0]
    canonical.sort(key=lambda t: t.exponent, reverse=True)
    return Ordinal(tuple(canonical))


def compare(a: Ordinal, b: Ordinal) -> int:
    """
    Three-way comparison of two ordinals: -1, 0 or 1.

    Walks both term lists in step. A list that runs out first is the
    smaller ordinal; otherwise the first differing exponent (compared
    recursively) or coefficient decides.
    """
    for left, right in zip_longest(a.terms, b.terms):
        if left is None:
            return -1
        if right is None:
            return 1

        order = compare(left.exponent, right.exponent)
        if order != 0:
            return order

        if left.coefficient != right.coefficient:
            return -1 if left.coefficient < right.coefficient else 1
    return 0


ZERO = Ordinal(())
ONE = Ordinal((Term(ZERO, 1),))
OMEGA = Ordinal((Term(ONE, 1),))


class OrdinalArithmetic:
    """
    Operations on ordinals.

    Every method accepts Ordinal operands or non-negative ints and returns
    a freshly normalized Ordinal. The operators on Ordinal delegate to
    DEFAULT_ARITHMETIC; build your own instance to change the coefficient
    bound or enable the nesting depth guard.
    """

    def __init__(self, config: Optional[ArithmeticConfig] = None):
        self.config = config or ArithmeticConfig()

    def _coerce(self, value: OrdinalLike, action: str) -> Ordinal:
        if isinstance(value, Ordinal):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Cannot {action} {type(value).__name__}; expected Ordinal or int")
        if value < 0:
            raise NegativeOperand(f"Cannot {action} a negative integer ({value})")
        return Ordinal.from_int(value)

    def _checked(self, result: Ordinal) -> Ordinal:
        limit = self.config.max_depth
        if limit is not None and result.depth > limit:
            raise DepthLimitExceeded(f"{result} nests {result.depth} levels deep (limit {limit})")
        return result

    def add(self, a: OrdinalLike, b: OrdinalLike) -> Ordinal:
        """
        Ordinal addition α + β.

        Terms of α below the leading exponent of β are absorbed:
        1 + ω = ω, but ω + 1 ≠ ω.
        """
        a = self._coerce(a, "add")
        b = self._coerce(b, "add")
        if a.is_zero():
            return self._checked(b)
        if b.is_zero():
            return self._checked(a)

        threshold = b.terms[0].exponent
        kept = [t for t in a.terms if t.exponent >= threshold]
        return self._checked(normalize(kept + list(b.terms)))

    def subtract(self, a: OrdinalLike, b: OrdinalLike) -> Ordinal:
        """
        Left subtraction α - β: the unique γ with β + γ = α.

        Strips the common prefix of equal terms; at the first difference
        either α's term dominates (and is kept whole) or both terms share
        an exponent and the coefficients are subtracted.
        """
        a = self._coerce(a, "subtract")
        b = self._coerce(b, "subtract")
        if a < b:
            raise SubtrahendExceedsMinuend(f"Cannot subtract {b} from the smaller ordinal {a}")
        if a == b:
            return ZERO
        if b.is_zero():
            return self._checked(a)

        common = 0
        for left, right in zip(a.terms, b.terms):
            if left != right:
                break
            common += 1

        if common >= len(b.terms) or a.terms[common].exponent > b.terms[common].exponent:
            return self._checked(normalize(a.terms[common:]))

        left, right = a.terms[common], b.terms[common]
        difference = Term(left.exponent, left.coefficient - right.coefficient)
        return self._checked(normalize([difference, *a.terms[common + 1:]]))

    def multiply(self, a: OrdinalLike, b: OrdinalLike) -> Ordinal:
        """
        Ordinal multiplication α · β.

        Only α's leading term ω^e·c survives against a limit part of β:
        each term ω^x·n of β becomes ω^(e+x)·n. A finite tail k of β
        contributes ω^e·(c·k) followed by the rest of α unchanged.

        2 · ω = ω,  ω · 2 = ω·2,  (ω+1)·(ω+1) = ω² + ω + 1
        """
        a = self._coerce(a, "multiply")
        b = self._coerce(b, "multiply")
        if a.is_zero() or b.is_zero():
            return ZERO

        lead = a.terms[0]
        last = b.terms[-1]
        shifted = [
            Term(self.add(lead.exponent, t.exponent), t.coefficient)
            for t in b.terms if not t.exponent.is_zero()
        ]

        if last.exponent.is_zero():
            scaled = Term(lead.exponent, lead.coefficient * last.coefficient)
            return self._checked(normalize([*shifted, scaled, *a.terms[1:]]))
        return self._checked(normalize(shifted))

    def divide(self, a: OrdinalLike, b: OrdinalLike) -> Ordinal:
        """
        Left division: the largest γ with β · γ ≤ α.

        Terms of α above β's leading exponent e shift down by e; a term at
        exactly e contributes a finite quotient of coefficients, one less
        when the division is exact but α's tail below e is smaller than
        β's tail.
        """
        a = self._coerce(a, "divide")
        b = self._coerce(b, "divide")
        if b.is_zero():
            raise DivisionByZero(f"Cannot divide {a} by zero ordinal")
        if b > a:
            return ZERO

        divisor = b.terms[0]
        divisor_tail = Ordinal(b.terms[1:])

        head = [t for t in a.terms if t.exponent > divisor.exponent]
        match = next((t for t in a.terms if t.exponent == divisor.exponent), None)
        dividend_tail = Ordinal(tuple(t for t in a.terms if t.exponent < divisor.exponent))

        quotient = [Term(self.subtract(t.exponent, divisor.exponent), t.coefficient) for t in head]

        constant = 0
        if match is not None:
            constant, leftover = divmod(match.coefficient, divisor.coefficient)
            if leftover == 0 and dividend_tail < divisor_tail:
                constant -= 1
        quotient.append(Term(ZERO, constant))

        return self._checked(normalize(quotient))

    def modulo(self, a: OrdinalLike, b: OrdinalLike) -> Ordinal:
        """Remainder α - β·(α // β), always < β."""
        a = self._coerce(a, "take modulus of")
        b = self._coerce(b, "take modulus by")
        if b.is_zero():
            raise DivisionByZero(f"Cannot take {a} modulo zero ordinal")
        if b > a:
            return self._checked(a)
        return self.subtract(a, self.multiply(b, self.divide(a, b)))

    def divmod(self, a: OrdinalLike, b: OrdinalLike) -> Tuple[Ordinal, Ordinal]:
        """(α // β, α % β)."""
        return self.divide(a, b), self.modulo(a, b)

    def int_power(self, base: int, exponent: int) -> int:
        """Natural number power, bounded by the configured coefficient range."""
        if exponent < 0:
            raise NegativeOperand(f"Exponent must be non-negative, got {exponent}")
        if base <= 1:
            return base ** exponent

        limit = self.config.max_coefficient
        result = 1
        for _ in range(exponent):
            result *= base
            if result > limit:
                raise ArithmeticOverflow(
                    f"Integer power {base}^{exponent} overflows {self.config.coefficient_dtype}"
                )
        return result

    def power(self, base: OrdinalLike, exponent: OrdinalLike) -> Ordinal:
        """
        Ordinal exponentiation α^β.

        n^(ω·δ + k) = ω^δ · n^k for finite n > 1
        α^(λ + k)   = ω^(e·λ) · α^k for infinite α with leading exponent e
        """
        base = self._coerce(base, "raise")
        exponent = self._coerce(exponent, "raise to")
        if exponent.is_zero():
            return ONE
        if base.is_zero():
            return ZERO
        if base == ONE:
            return ONE

        if base.is_finite():
            n = base.terms[0].coefficient
            if exponent.is_finite():
                return Ordinal.from_int(self.int_power(n, exponent.finite_part))
            delta = self.divide(exponent, OMEGA)
            k = self.modulo(exponent, OMEGA).finite_part
            return self.multiply(Ordinal.omega_power(delta), self.int_power(n, k))

        k = exponent.finite_part
        finite_power = ONE
        square = base
        # Powers of one base commute, so square-and-multiply is safe
        while k:
            if k & 1:
                finite_power = self.multiply(finite_power, square)
            k >>= 1
            if k:
                square = self.multiply(square, square)

        limit_terms = tuple(t for t in exponent.terms if not t.exponent.is_zero())
        if not limit_terms:
            return self._checked(finite_power)

        leading = self.multiply(base.terms[0].exponent, Ordinal(limit_terms))
        return self.multiply(Ordinal.omega_power(leading), finite_power)


DEFAULT_ARITHMETIC = OrdinalArithmetic()


# Common ordinals for reference
ORDINAL_CONSTANTS = {
    "zero": ZERO,
    "one": ONE,
    "omega": OMEGA,
    "omega_plus_one": OMEGA + 1,
    "omega_times_two": OMEGA * 2,
    "omega_squared": OMEGA ** 2,
    "omega_omega": OMEGA ** OMEGA,
    "omega_omega_omega": OMEGA ** (OMEGA ** OMEGA),
}


if __name__ == "__main__":
    print("=== Cantor Normal Form Ordinals ===\n")

    print("1. Constants:")
    for name, ordinal in ORDINAL_CONSTANTS.items():
        print(f"   {name}: {ordinal} ({ordinal.kind().name.lower()}, depth {ordinal.depth})")

    print("\n2. Non-commutativity:")
    print(f"   1 + ω = {1 + OMEGA}")
    print(f"   ω + 1 = {OMEGA + 1}")
    print(f"   2 · ω = {2 * OMEGA}")
    print(f"   ω · 2 = {OMEGA * 2}")

    print("\n3. Division:")
    a = OMEGA ** 2 * 3 + OMEGA * 2 + 5
    b = OMEGA * 2 + 1
    q, r = divmod(a, b)
    print(f"   ({a}) = ({b}) · ({q}) + {r}")

    print("\n4. Exponentiation:")
    print(f"   2^ω = {2 ** OMEGA}")
    print(f"   2^(ω+3) = {2 ** (OMEGA + 3)}")
    print(f"   (ω+1)^2 = {(OMEGA + 1) ** 2}")
    print(f"   ω^ω = {OMEGA ** OMEGA}")
