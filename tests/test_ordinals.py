"""
Tests for ordinal construction, normalization, ordering and rendering.
"""

import pytest
import numpy as np

from cnf_ordinals import (
    Term,
    Ordinal,
    OrdinalKind,
    ZERO,
    ONE,
    OMEGA,
    normalize,
    compare,
    MalformedOrdinal,
    InvalidTerm,
    NegativeOperand,
    NotFinite,
)

from samples import SAMPLES, w


class TestTerm:
    """Tests for Term construction."""

    def test_valid_term(self):
        t = Term(ONE, 3)
        assert t.exponent == ONE
        assert t.coefficient == 3

    def test_zero_coefficient_allowed(self):
        """Zero terms may exist transiently; normalize drops them."""
        assert Term(ONE, 0).coefficient == 0

    def test_negative_coefficient(self):
        with pytest.raises(InvalidTerm):
            Term(ZERO, -1)

    @pytest.mark.parametrize("coefficient", [1.5, "2", True, None])
    def test_non_integer_coefficient(self, coefficient):
        with pytest.raises(InvalidTerm):
            Term(ZERO, coefficient)

    def test_exponent_must_be_ordinal(self):
        with pytest.raises(InvalidTerm):
            Term(2, 1)

    def test_numpy_coefficient_converted(self):
        t = Term(ZERO, np.int64(4))
        assert type(t.coefficient) is int
        assert t == Term(ZERO, 4)

    def test_invalid_term_is_value_error(self):
        with pytest.raises(ValueError):
            Term(ZERO, -5)


class TestConstruction:
    """Tests for Ordinal constructors."""

    def test_constants(self):
        assert ZERO.terms == ()
        assert ONE.terms == (Term(ZERO, 1),)
        assert OMEGA.terms == (Term(ONE, 1),)
        assert Ordinal.zero() == ZERO
        assert Ordinal.one() == ONE
        assert Ordinal.omega() == OMEGA

    def test_from_int(self):
        assert Ordinal.from_int(0) == ZERO
        assert Ordinal.from_int(1) == ONE
        assert Ordinal.from_int(42).terms == (Term(ZERO, 42),)

    def test_from_int_negative(self):
        with pytest.raises(NegativeOperand):
            Ordinal.from_int(-1)

    def test_from_int_rejects_non_integers(self):
        with pytest.raises(TypeError):
            Ordinal.from_int(1.0)

    def test_direct_construction_descending(self):
        o = Ordinal([Term(ONE, 1), Term(ZERO, 3)])
        assert o == OMEGA + 3
        assert isinstance(o.terms, tuple)

    def test_direct_construction_ascending_fails(self):
        with pytest.raises(MalformedOrdinal):
            Ordinal([Term(ZERO, 1), Term(ONE, 1)])

    def test_direct_construction_repeated_exponent_fails(self):
        with pytest.raises(MalformedOrdinal):
            Ordinal([Term(ONE, 1), Term(ONE, 2)])

    def test_direct_construction_zero_coefficient_fails(self):
        with pytest.raises(MalformedOrdinal):
            Ordinal([Term(ONE, 0)])

    def test_direct_construction_non_term_fails(self):
        with pytest.raises(MalformedOrdinal):
            Ordinal([(ONE, 1)])

    def test_omega_power(self):
        assert w(1) == OMEGA
        assert w(0, 5) == Ordinal.from_int(5)
        assert w(2, 3).terms == (Term(Ordinal.from_int(2), 3),)
        assert w(OMEGA, 0) == ZERO


class TestNormalize:
    """Tests for the normalizer."""

    def test_merges_and_sorts(self):
        o = Ordinal.from_terms(Term(ZERO, 2), Term(ONE, 1), Term(ZERO, 3))
        assert o.terms == (Term(ONE, 1), Term(ZERO, 5))

    def test_list_form(self):
        terms = [Term(ZERO, 1), Term(OMEGA, 2), Term(ONE, 1)]
        assert Ordinal.from_terms(terms) == Ordinal.from_terms(*terms)
        assert Ordinal.from_terms(terms) == w(OMEGA, 2) + OMEGA + 1

    def test_pairs(self):
        assert normalize([(ONE, 2)]) == OMEGA * 2
        assert Ordinal.from_terms((ONE, 2)) == OMEGA * 2
        assert Ordinal.from_terms((ONE, 2), (ZERO, 1)) == OMEGA * 2 + 1

    def test_tuple_form(self):
        """A canonical term tuple rebuilds the same ordinal."""
        for o in SAMPLES:
            assert Ordinal.from_terms(o.terms) == o
        assert Ordinal.from_terms((Term(ZERO, 3), Term(ONE, 1))) == OMEGA + 3

    def test_pair_with_non_ordinal_exponent(self):
        with pytest.raises(InvalidTerm):
            normalize([(Term(ONE, 1), 2)])
        with pytest.raises(InvalidTerm):
            normalize([(ONE, 2, 3)])

    def test_drops_zero_coefficients(self):
        assert normalize([Term(ONE, 0), Term(ZERO, 0)]) == ZERO
        assert normalize([Term(ONE, 0), Term(ZERO, 4)]) == Ordinal.from_int(4)

    def test_empty(self):
        assert normalize([]) == ZERO
        assert Ordinal.from_terms() == ZERO

    def test_nested_exponents_merge_structurally(self):
        """Exponents built separately still group together."""
        e1 = OMEGA + 1
        e2 = Ordinal([Term(ONE, 1), Term(ZERO, 1)])
        o = normalize([Term(e1, 2), Term(e2, 3)])
        assert o.terms == (Term(e1, 5),)

    def test_invalid_item(self):
        with pytest.raises(InvalidTerm):
            normalize([42])
        with pytest.raises(InvalidTerm):
            normalize([(ZERO, -1)])

    def test_idempotent(self):
        raw_lists = [
            [Term(ZERO, 3), Term(ONE, 2), Term(ZERO, 4), Term(Ordinal.from_int(2), 1)],
            [Term(OMEGA, 1), Term(ZERO, 0), Term(OMEGA, 1)],
            [Term(OMEGA + 1, 1), Term(OMEGA, 2), Term(OMEGA + 1, 1)],
        ]
        for raw in raw_lists:
            once = normalize(raw)
            assert normalize(once.terms) == once

        for o in SAMPLES:
            assert normalize(o.terms) == o


class TestComparison:
    """Tests for the total order."""

    def test_samples_are_ascending(self):
        for i in range(len(SAMPLES) - 1):
            assert SAMPLES[i] < SAMPLES[i + 1], \
                f"{SAMPLES[i]} should be < {SAMPLES[i + 1]}"

    def test_compare_values(self):
        assert compare(OMEGA + 1, OMEGA) == 1
        assert compare(OMEGA, OMEGA + 1) == -1
        assert compare(ZERO, ZERO) == 0
        assert compare(w(2), Ordinal.from_int(10 ** 6)) == 1
        assert compare(w(1, 3), w(1, 2) + 100) == 1

    def test_trichotomy(self):
        for a in SAMPLES:
            for b in SAMPLES:
                outcomes = [a < b, a == b, b < a]
                assert outcomes.count(True) == 1

    def test_irreflexive(self):
        for a in SAMPLES:
            assert not a < a
            assert a <= a
            assert a >= a

    def test_transitive(self):
        for a in SAMPLES:
            for b in SAMPLES:
                for c in SAMPLES:
                    if a < b and b < c:
                        assert a < c

    def test_sort_min_max(self):
        shuffled = list(reversed(SAMPLES))
        assert sorted(shuffled) == SAMPLES
        assert min(shuffled) == ZERO
        assert max(shuffled) == w(OMEGA + 1, 2) + 5

    def test_omega_dominates_finite(self):
        for n in [0, 1, 10, 1000, 2 ** 31 - 1]:
            assert Ordinal.from_int(n) < OMEGA

    def test_comparison_with_int_not_supported(self):
        with pytest.raises(TypeError):
            OMEGA < 3
        assert OMEGA != 1


class TestEqualityAndHashing:
    """Tests for structural equality."""

    def test_equal_values_hash_equal(self):
        a = OMEGA + 1
        b = Ordinal.from_terms(Term(ZERO, 1), Term(ONE, 1))
        assert a == b
        assert a is not b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_nested_equality(self):
        a = w(w(OMEGA) + 1)
        b = w(Ordinal([Term(Ordinal([Term(ONE, 1)]), 1), Term(ZERO, 1)]))
        assert a == b
        assert hash(a) == hash(b)

    def test_dict_keys(self):
        table = {o: str(o) for o in SAMPLES}
        assert table[OMEGA + Ordinal.from_int(5)] == "ω + 5"


class TestStructure:
    """Tests for classification helpers."""

    def test_kind(self):
        assert ZERO.kind() == OrdinalKind.ZERO
        assert Ordinal.from_int(3).kind() == OrdinalKind.SUCCESSOR
        assert OMEGA.kind() == OrdinalKind.LIMIT
        assert (OMEGA + 1).kind() == OrdinalKind.SUCCESSOR
        assert (w(2) + OMEGA).kind() == OrdinalKind.LIMIT

    def test_finite_and_transfinite(self):
        assert ZERO.is_finite()
        assert Ordinal.from_int(9).is_finite()
        assert not OMEGA.is_finite()
        assert OMEGA.is_transfinite()
        assert not ZERO.is_transfinite()

    def test_successor_and_limit(self):
        assert not ZERO.is_successor()
        assert not ZERO.is_limit()
        assert OMEGA.is_limit()
        assert (OMEGA + 1).is_successor()
        assert OMEGA.successor() == OMEGA + 1
        assert ZERO.successor() == ONE

    def test_leading_term(self):
        o = w(2, 3) + 1
        assert o.leading_term == Term(Ordinal.from_int(2), 3)
        assert o.leading_exponent == Ordinal.from_int(2)
        assert ZERO.leading_term is None
        assert ZERO.leading_exponent is None

    def test_finite_part(self):
        assert (OMEGA + 5).finite_part == 5
        assert OMEGA.finite_part == 0
        assert ZERO.finite_part == 0

    def test_int_conversion(self):
        assert int(Ordinal.from_int(7)) == 7
        assert int(ZERO) == 0
        with pytest.raises(NotFinite):
            int(OMEGA)

    def test_bool(self):
        assert not ZERO
        assert ONE
        assert OMEGA

    def test_depth(self):
        assert ZERO.depth == 0
        assert Ordinal.from_int(5).depth == 1
        assert OMEGA.depth == 2
        assert (w(2) + 1).depth == 2
        assert w(OMEGA).depth == 3


class TestRendering:
    """Tests for the human-readable form."""

    @pytest.mark.parametrize("ordinal, expected", [
        (ZERO, "0"),
        (Ordinal.from_int(42), "42"),
        (OMEGA, "ω"),
        (OMEGA + 3, "ω + 3"),
        (w(1, 3), "ω·3"),
        (w(2), "ω^2"),
        (w(2, 3) + OMEGA + 4, "ω^2·3 + ω + 4"),
        (w(OMEGA), "ω^ω"),
        (w(OMEGA + 1), "ω^(ω + 1)"),
        (w(w(1, 2)), "ω^(ω·2)"),
        (w(w(OMEGA)), "ω^ω^ω"),
        (w(OMEGA + 1, 2) + w(2) + w(1, 3) + 4, "ω^(ω + 1)·2 + ω^2 + ω·3 + 4"),
    ])
    def test_render(self, ordinal, expected):
        assert str(ordinal) == expected
        assert repr(ordinal) == expected

    def test_term_render(self):
        assert repr(Term(ZERO, 7)) == "7"
        assert repr(Term(ONE, 2)) == "ω·2"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
