"""
cnf-ordinals: Transfinite Arithmetic in Cantor Normal Form

Ordinals below ε₀ written as finite sums ω^β₁·c₁ + ... + ω^β_k·c_k with
strictly descending exponents (themselves ordinals) and positive integer
coefficients.

This package provides:
- Term, Ordinal: immutable CNF values with structural equality/hashing
- normalize, compare: canonicalization and the total order
- OrdinalArithmetic: +, -, *, //, %, ** respecting non-commutativity
- ArithmeticConfig: coefficient bound and nesting depth guard
- errors: one exception per failure condition

Example usage:
    from cnf_ordinals import OMEGA, Ordinal

    print(1 + OMEGA)             # ω
    print(OMEGA + 1)             # ω + 1
    print((OMEGA + 1) ** 2)      # ω^2 + ω + 1
    print(divmod(OMEGA * 2 + 3, OMEGA))   # (2, 3)
"""

__version__ = "0.1.0"

from .config import ArithmeticConfig

from .errors import (
    OrdinalError,
    MalformedOrdinal,
    InvalidTerm,
    DivisionByZero,
    SubtrahendExceedsMinuend,
    NegativeOperand,
    ArithmeticOverflow,
    DepthLimitExceeded,
    NotFinite,
)

from .ordinals import (
    Term,
    Ordinal,
    OrdinalKind,
    OrdinalArithmetic,
    DEFAULT_ARITHMETIC,
    ORDINAL_CONSTANTS,
    ZERO,
    ONE,
    OMEGA,
    normalize,
    compare,
)

__all__ = [
    # Values
    "Term",
    "Ordinal",
    "OrdinalKind",
    "ZERO",
    "ONE",
    "OMEGA",
    "ORDINAL_CONSTANTS",
    # Engine
    "normalize",
    "compare",
    "OrdinalArithmetic",
    "DEFAULT_ARITHMETIC",
    "ArithmeticConfig",
    # Errors
    "OrdinalError",
    "MalformedOrdinal",
    "InvalidTerm",
    "DivisionByZero",
    "SubtrahendExceedsMinuend",
    "NegativeOperand",
    "ArithmeticOverflow",
    "DepthLimitExceeded",
    "NotFinite",
]
