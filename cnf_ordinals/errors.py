"""
Exceptions raised by the ordinal arithmetic engine.

Every condition derives from OrdinalError and from the closest builtin,
so callers can catch either `OrdinalError` or e.g. `ZeroDivisionError`.
"""


class OrdinalError(Exception):
    """Base class for all ordinal arithmetic errors."""


class MalformedOrdinal(OrdinalError, ValueError):
    """Term list is not in strictly descending exponent order."""


class InvalidTerm(OrdinalError, ValueError):
    """Term with a negative or non-integer coefficient, or a bad exponent."""


class DivisionByZero(OrdinalError, ZeroDivisionError):
    """Division or modulus by the zero ordinal."""


class SubtrahendExceedsMinuend(OrdinalError, ValueError):
    """Left subtraction a - b attempted with a < b."""


class NegativeOperand(OrdinalError, ValueError):
    """Negative integer passed where a natural number is required."""


class ArithmeticOverflow(OrdinalError, OverflowError):
    """Finite power exceeds the configured coefficient range."""


class DepthLimitExceeded(OrdinalError, ValueError):
    """Result nests exponents deeper than the configured limit."""


class NotFinite(OrdinalError, ValueError):
    """Transfinite ordinal used where a natural number is required."""
