#!/usr/bin/env python3
"""
cnf-ordinals Demo

Walks through the features of the ordinal arithmetic engine:
1. Building ordinals in Cantor normal form
2. The total order
3. Non-commutative addition and left subtraction
4. Multiplication and left division
5. Exponentiation
6. Error conditions and configuration
"""

from cnf_ordinals import (
    Ordinal,
    Term,
    ZERO,
    ONE,
    OMEGA,
    OrdinalArithmetic,
    ArithmeticConfig,
    OrdinalError,
)


def section(title: str):
    print("\n" + "═" * 72)
    print(f"  {title}")
    print("═" * 72)


def w(exponent, coefficient=1):
    return Ordinal.omega_power(exponent, coefficient)


# ═══════════════════════════════════════════════════════════════════════════
# SECTION 1: CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 1: CANTOR NORMAL FORM")

print("""
Every ordinal below ε₀ is a finite sum ω^β₁·c₁ + ... + ω^β_k·c_k with
strictly descending exponents. Terms in any order are normalized:
""")

raw = [Term(ZERO, 2), Term(ONE, 1), Term(ZERO, 3), Term(OMEGA, 1), Term(ONE, 0)]
print(f"  terms {raw}")
print(f"  -> {Ordinal.from_terms(raw)}")

for name, ordinal in [
    ("zero", ZERO),
    ("forty-two", Ordinal.from_int(42)),
    ("omega", OMEGA),
    ("omega^2·3 + 5", w(2, 3) + 5),
    ("omega^(omega+1)", w(OMEGA + 1)),
]:
    print(f"  {name:>18}: {str(ordinal):<16} kind={ordinal.kind().name:<9} depth={ordinal.depth}")

# ═══════════════════════════════════════════════════════════════════════════
# SECTION 2: ORDERING
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 2: TOTAL ORDER")

values = [w(OMEGA), OMEGA * 2, Ordinal.from_int(10 ** 6), OMEGA + 1, w(2), OMEGA]
print(f"\n  unsorted: {values}")
print(f"  sorted:   {sorted(values)}")
print(f"  10^6 < ω: {Ordinal.from_int(10 ** 6) < OMEGA}")

# ═══════════════════════════════════════════════════════════════════════════
# SECTION 3: ADDITION / SUBTRACTION
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 3: ADDITION AND SUBTRACTION")

print(f"""
  1 + ω         = {1 + OMEGA}
  ω + 1         = {OMEGA + 1}
  (ω·2 + 5) + ω = {OMEGA * 2 + 5 + OMEGA}
  (ω + 5) - ω   = {(OMEGA + 5) - OMEGA}
  (ω + 5) - 3   = {(OMEGA + 5) - 3}     (3 + (ω + 5) = ω + 5)
""")

# ═══════════════════════════════════════════════════════════════════════════
# SECTION 4: MULTIPLICATION / DIVISION
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 4: MULTIPLICATION AND DIVISION")

print(f"""
  2 · ω           = {2 * OMEGA}
  ω · 2           = {OMEGA * 2}
  (ω+1) · (ω+1)   = {(OMEGA + 1) * (OMEGA + 1)}
""")

for a, b in [(OMEGA * 2, OMEGA), (w(2, 3) + OMEGA * 2 + 5, OMEGA * 2 + 1), (OMEGA * 4, OMEGA * 2 + 1)]:
    q, r = divmod(a, b)
    print(f"  {a} = ({b}) · ({q}) + {r}")

# ═══════════════════════════════════════════════════════════════════════════
# SECTION 5: EXPONENTIATION
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 5: EXPONENTIATION")

print(f"""
  2^10        = {Ordinal.from_int(2) ** 10}
  2^ω         = {2 ** OMEGA}
  2^(ω+3)     = {2 ** (OMEGA + 3)}
  (ω+1)^(ω+1) = {(OMEGA + 1) ** (OMEGA + 1)}
  ω^ω^ω       = {OMEGA ** (OMEGA ** OMEGA)}
""")

# ═══════════════════════════════════════════════════════════════════════════
# SECTION 6: ERRORS AND CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════

section("SECTION 6: ERRORS AND CONFIGURATION")

print()
for label, action in [
    ("5 - ω", lambda: 5 - OMEGA),
    ("ω // 0", lambda: OMEGA // 0),
    ("ω + (-1)", lambda: OMEGA + (-1)),
    ("2^31", lambda: Ordinal.from_int(2) ** 31),
    ("Term(0, -1)", lambda: Term(ZERO, -1)),
    ("Ordinal([1, ω])", lambda: Ordinal([Term(ZERO, 1), Term(ONE, 1)])),
]:
    try:
        action()
    except OrdinalError as exc:
        print(f"  {label:<16} -> {type(exc).__name__}: {exc}")

wide = OrdinalArithmetic(ArithmeticConfig(coefficient_dtype="int64"))
print(f"\n  int64 engine: 2^40 = {wide.power(2, 40)}")

shallow = OrdinalArithmetic(ArithmeticConfig(max_depth=2))
try:
    shallow.power(OMEGA, OMEGA)
except OrdinalError as exc:
    print(f"  depth-2 engine: ω^ω -> {type(exc).__name__}")

print("\n" + "═" * 72)
print("  Demo complete")
print("═" * 72)
